import argparse
import logging
import os
import pickle

import matplotlib

matplotlib.use('Agg')
import matplotlib.pyplot as plt
import networkx as nx

from eulerian_circuit_task.graph import Graph

logger = logging.getLogger(__name__)


def draw_circuit(graph, circuit=None, ax=None):
    """Draws ``graph`` with its vertex labels; the circuit, if any, becomes the title."""
    if ax is None:
        _, ax = plt.subplots()
    multigraph = graph.to_networkx()
    nx.draw(multigraph, pos=nx.circular_layout(multigraph), ax=ax, with_labels=True)
    if circuit:
        ax.set_title(' -> '.join(str(vertex) for vertex in circuit))
    else:
        ax.set_title('no Euler circuit')
    return ax


def plot_results(result_file, output_dir):
    with open(result_file, 'rb') as f:
        records = pickle.load(f)
    if not os.path.isdir(output_dir):
        os.makedirs(output_dir)

    paths = []
    for i, record in enumerate(records):
        fig, ax = plt.subplots()
        draw_circuit(Graph(record['matrix']), record['circuit'], ax=ax)
        path = os.path.join(output_dir, 'graph_{0}.png'.format(i))
        fig.savefig(path)
        plt.close(fig)
        paths.append(path)
    logger.info('Saved {0} plots to {1}'.format(len(paths), output_dir))
    return paths


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot graphs stored by run_tasks')
    parser.add_argument('--experiment_name', type=str, default='euler')
    parser.add_argument('--results_dir', type=str, default='results')
    parser.add_argument('--output_dir', type=str, default='plots')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    plot_results(os.path.join(args.results_dir, '{0}.p'.format(args.experiment_name)), args.output_dir)
    return 0


if __name__ == '__main__':
    main()
