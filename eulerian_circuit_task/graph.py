import itertools
import logging

import networkx as nx
import numpy as np

from eulerian_circuit_task.exceptions import InvalidGraph

logger = logging.getLogger(__name__)


def matrix_to_string(matrix):
    """Returns a 2D text rendering of a square matrix, one row per line.

    Works for the adjacency matrix of a graph as well as for any
    edge consumption state derived from it.
    """
    return ''.join(' '.join(str(int(elem)) for elem in row) + '\n' for row in matrix)


def _next_int(tokens):
    try:
        token = next(tokens)
    except StopIteration:
        raise InvalidGraph("Unexpected end of input while reading a graph.")
    try:
        return int(token)
    except ValueError:
        raise InvalidGraph("Expected an integer, got {0!r}.".format(token))


class Graph:
    """Undirected multigraph stored as a dense adjacency matrix.

    ``matrix[u][v]`` is the number of parallel edges between ``u`` and
    ``v``; ``matrix[v][v]`` is the number of self-loops at ``v``. The
    matrix is validated on construction and never changes afterwards.

    Parameters
    ----------
    matrix : array_like
        Square, symmetric matrix of non-negative integers.

    Raises
    ------
    InvalidGraph
        If the matrix is empty, not square, not integral, has negative
        entries or is not symmetric.

    Examples
    --------
    >>> G = Graph([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
    >>> G.vertex_count(), G.edge_count()
    (3, 3)
    """

    def __init__(self, matrix):
        adj = np.asarray(matrix)
        if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
            raise InvalidGraph("Adjacency matrix must be square, got shape {0}.".format(adj.shape))
        if adj.shape[0] == 0:
            raise InvalidGraph("Number of vertices must be positive.")
        if not (np.issubdtype(adj.dtype, np.integer) or np.issubdtype(adj.dtype, np.floating)):
            raise InvalidGraph("Adjacency matrix must hold integer edge counts.")
        if np.issubdtype(adj.dtype, np.floating) and not np.all(np.mod(adj, 1) == 0):
            raise InvalidGraph("Adjacency matrix must hold integer edge counts.")
        adj = adj.astype(np.int64)
        if np.any(adj < 0):
            raise InvalidGraph("Number of edges cannot be negative.")
        if not np.array_equal(adj, adj.T):
            raise InvalidGraph("Adjacency matrix is not symmetric.")

        adj.flags.writeable = False
        self._matrix = adj
        self._vertices = adj.shape[0]
        self._total_edges = int(np.triu(adj).sum())

    @classmethod
    def from_tokens(cls, tokens):
        """Builds a graph from the vertex count followed by n*n matrix entries.

        Consumes exactly ``n * n + 1`` items of ``tokens``, so several
        graphs can be read from the same iterator.
        """
        tokens = iter(tokens)
        vertices = _next_int(tokens)
        if vertices <= 0:
            raise InvalidGraph("Number of vertices must be positive, got {0}.".format(vertices))
        values = [_next_int(tokens) for _ in range(vertices * vertices)]
        return cls(np.array(values, dtype=np.int64).reshape(vertices, vertices))

    @classmethod
    def random(cls, vertices, max_parallel_edges, rng=None):
        """Creates a random graph with up to ``max_parallel_edges`` edges per vertex pair.

        Every cell of the upper triangle, diagonal included, is drawn
        uniformly from ``[0, max_parallel_edges]`` and mirrored.
        ``rng`` is anything accepted by ``numpy.random.default_rng``.
        """
        if vertices <= 0:
            raise InvalidGraph("Number of vertices must be positive, got {0}.".format(vertices))
        if max_parallel_edges < 0:
            raise InvalidGraph("Maximum number of parallel edges cannot be negative.")
        rng = np.random.default_rng(rng)
        upper = np.triu(rng.integers(0, max_parallel_edges + 1, size=(vertices, vertices)))
        return cls(upper + np.triu(upper, 1).T)

    @property
    def matrix(self):
        """Read-only adjacency matrix."""
        return self._matrix

    def vertex_count(self):
        return self._vertices

    def edge_count(self, u=None, v=None):
        """Returns the total number of edges, or the multiplicity of ``(u, v)``.

        Out of range vertices have no edges, so ``edge_count(u, v)`` is 0
        for them rather than an error.
        """
        if u is None and v is None:
            return self._total_edges
        if u is None or v is None:
            raise TypeError("edge_count() takes either no vertices or two vertices")
        if 0 <= u < self._vertices and 0 <= v < self._vertices:
            return int(self._matrix[u, v])
        return 0

    def degree(self, v):
        # a self-loop is a single cell but two edge endpoints
        return int(self._matrix[v].sum() + self._matrix[v, v])

    def degrees(self):
        return self._matrix.sum(axis=1) + np.diagonal(self._matrix)

    def is_connected(self):
        """Returns ``True`` iff every vertex is reachable from vertex 0."""
        return nx.is_connected(nx.from_numpy_array(self._matrix))

    def to_networkx(self):
        """Returns the graph as a ``networkx.MultiGraph`` with one edge per parallel edge."""
        return nx.from_numpy_array(self._matrix, parallel_edges=True, create_using=nx.MultiGraph)

    def __str__(self):
        return matrix_to_string(self._matrix)

    def __repr__(self):
        return 'Graph(vertices={0}, edges={1})'.format(self._vertices, self._total_edges)


def read_graphs(stream):
    """Yields every graph described in a text stream.

    The stream holds whitespace separated integers: a vertex count ``n``
    followed by the ``n * n`` adjacency matrix entries in row order,
    repeated for each graph.
    """
    tokens = iter(stream.read().split())
    for token in tokens:
        graph = Graph.from_tokens(itertools.chain([token], tokens))
        logger.debug('Read graph with {0} vertices and {1} edges'.format(graph.vertex_count(),
                                                                        graph.edge_count()))
        yield graph
