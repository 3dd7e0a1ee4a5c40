import numpy as np

from eulerian_circuit_task.graph_data import GraphData
from eulerian_circuit_task.graph_utils import has_euler_circuit


def test_generate_graphs_shape():
    graphs = GraphData(rng=0).generate_graphs(5, num_vertices=4, max_parallel_edges=2)
    assert len(graphs) == 5
    assert all(graph.vertex_count() == 4 for graph in graphs)
    assert all(graph.matrix.max() <= 2 for graph in graphs)


def test_eulerian_share_of_one():
    graphs = GraphData(rng=1).generate_graphs(6, num_vertices=5, max_parallel_edges=2, eulerian_share=1.0)
    assert all(has_euler_circuit(graph) for graph in graphs)


def test_seed_makes_graphs_reproducible():
    first = GraphData(rng=42).generate_graphs(3, num_vertices=5, max_parallel_edges=3, eulerian_share=0.5)
    second = GraphData(rng=42).generate_graphs(3, num_vertices=5, max_parallel_edges=3, eulerian_share=0.5)
    assert all(np.array_equal(a.matrix, b.matrix) for a, b in zip(first, second))


def test_gives_up_after_max_attempts(caplog):
    # two vertices without edges are never connected
    graph = GraphData(rng=0, max_attempts=3).generate_graph(2, 0, eulerian=True)
    assert not has_euler_circuit(graph)
    assert 'after 3 attempts' in caplog.text
