import logging

import numpy as np

from eulerian_circuit_task import graph_utils
from eulerian_circuit_task.graph import Graph

logger = logging.getLogger(__name__)


class GraphData:

    def __init__(self, rng=None, max_attempts=1000):
        self.rng = np.random.default_rng(rng)
        self.max_attempts = max_attempts

    def generate_graph(self, num_vertices, max_parallel_edges, eulerian=False):
        """Draws a random graph, retrying until it has an Euler circuit when ``eulerian`` is set.

        Gives up after ``max_attempts`` draws and returns the last graph.
        """
        graph = Graph.random(num_vertices, max_parallel_edges, self.rng)
        if not eulerian:
            return graph
        attempts = 1
        while not graph_utils.has_euler_circuit(graph):
            if attempts >= self.max_attempts:
                logger.warning('No Eulerian graph with {0} vertices after {1} attempts'.format(num_vertices,
                                                                                               attempts))
                break
            graph = Graph.random(num_vertices, max_parallel_edges, self.rng)
            attempts += 1
        return graph

    def generate_graphs(self, num_graphs, num_vertices=6, max_parallel_edges=1, eulerian_share=0.2):
        graphs = []
        for i in range(num_graphs):
            eulerian = self.rng.random() < eulerian_share
            graphs.append(self.generate_graph(num_vertices, max_parallel_edges, eulerian=eulerian))
        return graphs
