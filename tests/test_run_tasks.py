import io
import logging
import pickle

import pytest

from eulerian_circuit_task import run_tasks
from eulerian_circuit_task.exceptions import InternalInvariantViolation

GRAPHS = """
1 0
3
0 1 1
1 0 1
1 1 0
2
0 1
1 0
2 1 2 2 1
"""


@pytest.fixture(autouse=True)
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / 'graphs.txt'
    path.write_text(GRAPHS)
    return str(path)


def test_str2bool():
    assert run_tasks.str2bool('True')
    assert run_tasks.str2bool('1')
    assert not run_tasks.str2bool('no')


def test_reads_graphs_from_file(graph_file, caplog):
    assert run_tasks.main(['--input', graph_file]) == 0
    assert 'SUMMARY_PARSABLE: 4,3' in caplog.text
    assert '0 -> 1 -> 2 -> 0' in caplog.text
    assert '0 -> 0 -> 1 -> 1 -> 0' in caplog.text
    assert 'Graph has no Euler circuit.' in caplog.text


def test_reads_graphs_from_stdin(monkeypatch, caplog):
    monkeypatch.setattr('sys.stdin', io.StringIO('3 0 1 1 1 0 1 1 1 0'))
    assert run_tasks.main(['--input', '-', '--strategy', 'hierholzer']) == 0
    assert 'SUMMARY_PARSABLE: 1,1' in caplog.text


def test_stores_results(graph_file, tmp_path):
    results_dir = tmp_path / 'results'
    assert run_tasks.main(['--input', graph_file, '--store_result', 'true', '--experiment_name', 'small',
                           '--results_dir', str(results_dir)]) == 0
    with open(str(results_dir / 'small.p'), 'rb') as f:
        records = pickle.load(f)
    assert [record['has_euler_circuit'] for record in records] == [True, True, False, True]
    assert records[1]['circuit'] == (0, 1, 2, 0)
    assert records[2]['circuit'] is None
    assert records[3]['matrix'] == [[1, 2], [2, 1]]


def test_random_graphs(caplog):
    assert run_tasks.main(['--num_graphs', '2', '--num_vertices', '4', '--max_parallel_edges', '3',
                           '--seed', '7', '--eulerian_share', '1.0']) == 0
    assert 'SUMMARY_PARSABLE: 6,6' in caplog.text


def test_invalid_input_fails(tmp_path, caplog):
    path = tmp_path / 'bad.txt'
    path.write_text('2 0 1 2 0')
    assert run_tasks.main(['--input', str(path)]) == 1
    assert 'InvalidGraph' in caplog.text


def test_start_outside_graph_fails(graph_file, caplog):
    assert run_tasks.main(['--input', graph_file, '--start', '2']) == 1
    assert 'InvalidPrecondition' in caplog.text


def test_unknown_strategy_is_rejected(graph_file):
    with pytest.raises(SystemExit):
        run_tasks.main(['--input', graph_file, '--strategy', 'fleury'])


def test_invariant_violation_is_not_suppressed(monkeypatch, graph_file):
    monkeypatch.setattr(run_tasks.graph_utils, 'is_euler_circuit', lambda G, sequence: False)
    with pytest.raises(InternalInvariantViolation):
        run_tasks.main(['--input', graph_file])
