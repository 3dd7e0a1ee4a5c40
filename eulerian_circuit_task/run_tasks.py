import argparse
import logging
import os
import pickle
import sys

from eulerian_circuit_task import graph_utils
from eulerian_circuit_task.exceptions import InternalInvariantViolation, InvalidGraph, InvalidPrecondition
from eulerian_circuit_task.graph import read_graphs
from eulerian_circuit_task.graph_data import GraphData

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def str2bool(v):
    return v.lower() in ("yes", "true", "t", "1")


def build_parser():
    parser = argparse.ArgumentParser(description='Find Euler circuits in undirected multigraphs')

    parser.add_argument('--input', type=str, default=None,
                        help='file with graphs to read, - for stdin; random graphs are generated when omitted')
    parser.add_argument('--num_graphs', type=int, default=1, help='random graphs per parallel edge maximum')
    parser.add_argument('--num_vertices', type=int, default=6)
    parser.add_argument('--max_parallel_edges', type=int, default=5,
                        help='random graphs are generated for every maximum from 1 up to this value')
    parser.add_argument('--eulerian_share', type=float, default=0.2,
                        help='share of random graphs regenerated until they have an Euler circuit')
    parser.add_argument('--seed', type=int, default=None)

    parser.add_argument('--strategy', type=str, default='backtracking', choices=sorted(graph_utils.STRATEGIES))
    parser.add_argument('--start', type=int, default=0, help='first and last vertex of the circuit')
    parser.add_argument('--explain', type=str2bool, default=True, help='explains why a circuit exists or not')

    parser.add_argument('--store_result', type=str2bool, default=False, help='stores result')
    parser.add_argument('--experiment_name', type=str, default='euler')
    parser.add_argument('--results_dir', type=str, default='results')
    parser.add_argument('--verbose', type=str2bool, default=False, help='if true prints lots of feedback')
    return parser


def process_graph(graph, args):
    """Logs the graph, then looks for an Euler circuit and logs it if one is found."""
    logger.info('Graph has {0} vertices, and {1} edges.'.format(graph.vertex_count(), graph.edge_count()))
    logger.info('Adjacency matrix:\n{0}'.format(graph))

    record = {
        'matrix': graph.matrix.tolist(),
        'has_euler_circuit': graph_utils.has_euler_circuit(graph, explain=args.explain),
        'circuit': None
    }
    if not record['has_euler_circuit']:
        logger.info('Graph has no Euler circuit.')
        return record

    circuit = graph_utils.euler_circuit(graph, start=args.start, strategy=args.strategy)
    if not graph_utils.is_euler_circuit(graph, circuit):
        raise InternalInvariantViolation('Built walk {0} is not an Euler circuit.'.format(circuit))
    logger.info('Graph has the following Euler circuit:\n{0}'.format(circuit))
    record['circuit'] = circuit.to_sequence()
    return record


def load_graphs(args):
    if args.input is None:
        data_generator = GraphData(rng=args.seed)
        graphs = []
        for max_parallel_edges in range(1, args.max_parallel_edges + 1):
            graphs.extend(data_generator.generate_graphs(args.num_graphs,
                                                         num_vertices=args.num_vertices,
                                                         max_parallel_edges=max_parallel_edges,
                                                         eulerian_share=args.eulerian_share))
        return graphs
    if args.input == '-':
        return list(read_graphs(sys.stdin))
    with open(args.input) as f:
        return list(read_graphs(f))


def store_results(records, args):
    if not os.path.isdir(args.results_dir):
        os.makedirs(args.results_dir)
    result_file = os.path.join(args.results_dir, '{0}.p'.format(args.experiment_name))
    with open(result_file, 'wb') as f:
        pickle.dump(records, f)
    logger.info('Stored {0} results in {1}'.format(len(records), result_file))
    return result_file


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger('eulerian_circuit_task').setLevel(logging.DEBUG)

    try:
        records = [process_graph(graph, args) for graph in load_graphs(args)]
    except (InvalidGraph, InvalidPrecondition) as e:
        logger.error('{0}: {1}'.format(type(e).__name__, e))
        return 1

    if args.store_result:
        store_results(records, args)

    num_eulerian = sum(1 for record in records if record['has_euler_circuit'])
    logger.info('----SUMMARY----')
    logger.info('graphs: {0}'.format(len(records)))
    logger.info('graphs with an Euler circuit: {0}'.format(num_eulerian))
    logger.info('SUMMARY_PARSABLE: {0},{1}'.format(len(records), num_eulerian))
    return 0


if __name__ == '__main__':
    sys.exit(main())
