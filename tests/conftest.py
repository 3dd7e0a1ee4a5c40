import pytest

from eulerian_circuit_task.graph import Graph


@pytest.fixture
def single_vertex():
    return Graph([[0]])


@pytest.fixture
def triangle():
    return Graph([[0, 1, 1],
                  [1, 0, 1],
                  [1, 1, 0]])


@pytest.fixture
def loop_and_isolated_vertex():
    return Graph([[1, 0],
                  [0, 0]])


@pytest.fixture
def bowtie():
    # two triangles sharing vertex 0
    return Graph([[0, 1, 1, 1, 1],
                  [1, 0, 1, 0, 0],
                  [1, 1, 0, 0, 0],
                  [1, 0, 0, 0, 1],
                  [1, 0, 0, 1, 0]])


@pytest.fixture
def path():
    return Graph([[0, 1],
                  [1, 0]])


@pytest.fixture
def bowtie_at_one():
    # two triangles sharing vertex 1; a greedy walk from 0 gets stuck
    return Graph([[0, 1, 1, 0, 0],
                  [1, 0, 1, 1, 1],
                  [1, 1, 0, 0, 0],
                  [0, 1, 0, 0, 1],
                  [0, 1, 0, 1, 0]])


@pytest.fixture
def loop_with_parallel_edges():
    # degree of 0 is 1 + 2 + 1: even only if the self-loop counts twice
    return Graph([[1, 2],
                  [2, 0]])
