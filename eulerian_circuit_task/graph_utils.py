import logging
from collections import deque

import networkx as nx
import numpy as np

from eulerian_circuit_task.exceptions import InternalInvariantViolation, InvalidPrecondition
from eulerian_circuit_task.walk import Walk

logger = logging.getLogger(__name__)


def has_euler_circuit(G, explain=False):
    """Returns ``True`` if and only if ``G`` has an Euler circuit.

    An Euler circuit is a closed walk that crosses every edge in G
    exactly once. By Euler's theorem it exists iff the graph is
    connected and every vertex has even degree.

    Parameters
    ----------
    G : Graph
        An undirected multigraph, self-loops allowed.
    explain : bool
        Log the reason for the answer at INFO level.

    Returns
    -------
    True, False

    See Also
    --------
    euler_circuit()

    Examples
    --------
    >>> has_euler_circuit(Graph([[0, 1, 1], [1, 0, 1], [1, 1, 0]]))
    True
    >>> has_euler_circuit(Graph([[0, 1], [1, 0]]))
    False
    """
    # Verify that graph is connected, short circuit
    if not G.is_connected():
        if explain:
            logger.info('Graph does not have an Euler circuit, because it is not connected.')
        return False

    # self-loops add 2 to the degree of their vertex, see Graph.degrees()
    odd = np.flatnonzero(G.degrees() % 2)
    if len(odd) > 0:
        if explain:
            logger.info('Graph does not have an Euler circuit, because vertices {0} are of odd degree.'.format(
                odd.tolist()))
        return False

    if explain:
        logger.info('Graph has an Euler circuit, because it is connected and all vertices are of even degree.')
    return True


def _consume(remaining, u, v):
    remaining[u, v] -= 1
    if u != v:
        remaining[v, u] -= 1


def _restore(remaining, u, v):
    remaining[u, v] += 1
    if u != v:
        remaining[v, u] += 1


def _strands_edges(remaining, vertex):
    """Returns ``True`` if some unconsumed edge can no longer be reached from ``vertex``."""
    touched = np.flatnonzero(remaining.sum(axis=1))
    if len(touched) == 0:
        return False
    component = nx.node_connected_component(nx.from_numpy_array(remaining), vertex)
    return any(v not in component for v in touched)


def _backtracking_circuit(G, start):
    """Extends a trail from ``start`` and backtracks out of dead ends.

    Destinations are tried in ascending order, so the circuit returned
    is the lexicographically smallest one. A move after which some
    remaining edge is unreachable cannot lead to a circuit and is
    skipped; the search never backtracks past such a move.
    """
    remaining = G.matrix.copy()
    remaining_edges = G.edge_count()

    trail = [start]
    # next_choice[i] is the smallest destination not yet tried from trail[i]
    next_choice = [0]

    while remaining_edges > 0 or trail[-1] != start:
        current = trail[-1]
        extended = False
        for dest in np.flatnonzero(remaining[current, next_choice[-1]:]) + next_choice[-1]:
            dest = int(dest)
            next_choice[-1] = dest + 1
            _consume(remaining, current, dest)
            if _strands_edges(remaining, dest):
                _restore(remaining, current, dest)
                continue
            remaining_edges -= 1
            trail.append(dest)
            next_choice.append(0)
            extended = True
            break
        if extended:
            continue

        # dead end: undo the edge that led here
        next_choice.pop()
        trail.pop()
        if not trail:
            raise InternalInvariantViolation(
                "Backtracking exhausted every choice from vertex {0} without closing the circuit.".format(start))
        _restore(remaining, trail[-1], current)
        remaining_edges += 1
        logger.debug('Backtracked from {0} to {1}'.format(current, trail[-1]))

    return trail


def _hierholzer_circuit(G, start):
    """Linear time stack based construction, adapted from the networkx Euler code.

    The circuit is assembled in reverse as vertices run out of edges.
    """
    remaining = G.matrix.copy()
    vertex_stack = deque([start])
    circuit = []

    while vertex_stack:
        current_vertex = vertex_stack[-1]
        neighbours = np.flatnonzero(remaining[current_vertex])
        # if no neighbors, the vertex is final in its sub-circuit
        if len(neighbours) == 0:
            circuit.append(current_vertex)
            vertex_stack.pop()
        # take the smallest neighbor, remove the edge between them and
        # continue from that neighbor
        else:
            next_vertex = int(neighbours[0])
            _consume(remaining, current_vertex, next_vertex)
            vertex_stack.append(next_vertex)

    if remaining.any():
        raise InternalInvariantViolation("Edges left unconsumed after closing the circuit.")
    circuit.reverse()
    return circuit


STRATEGIES = {
    'backtracking': _backtracking_circuit,
    'hierholzer': _hierholzer_circuit,
}


def euler_circuit(G, start=0, strategy='backtracking'):
    """Returns an Euler circuit of ``G`` as a :class:`Walk`.

    Check that ``G`` has an Euler circuit and build one starting and
    ending at ``start``. If no circuit is available, raise an error.

    Parameters
    ----------
    G : Graph
        An undirected multigraph, self-loops allowed.
    start : int
        First and last vertex of the circuit.
    strategy : str
        ``'backtracking'`` returns the lexicographically smallest circuit,
        ``'hierholzer'`` runs in time linear in the number of edges.

    Returns
    -------
    walk : Walk
        ``G.edge_count() + 1`` vertices, first and last equal to ``start``.

    Raises
    ------
    InvalidPrecondition
        If the graph does not have an Euler circuit or ``start`` is not
        one of its vertices.
    InternalInvariantViolation
        If the search fails although the graph has an Euler circuit.

    Examples
    --------
    >>> list(euler_circuit(Graph([[0, 1, 1], [1, 0, 1], [1, 1, 0]])))
    [0, 1, 2, 0]
    """
    try:
        build = STRATEGIES[strategy]
    except KeyError:
        raise ValueError("Unknown strategy {0!r}, expected one of {1}".format(strategy, sorted(STRATEGIES)))
    if not 0 <= start < G.vertex_count():
        raise InvalidPrecondition("Start vertex {0} is not in the graph.".format(start))
    if not has_euler_circuit(G):
        raise InvalidPrecondition("G does not have an Euler circuit.")

    walk = Walk(G.edge_count() + 1)
    for vertex in build(G, start):
        walk.append(vertex)
    logger.debug('Built circuit of {0} edges with {1} strategy'.format(G.edge_count(), strategy))
    return walk


def is_euler_circuit(G, sequence):
    """Returns ``True`` iff ``sequence`` is a closed walk using every edge of ``G`` exactly once."""
    sequence = [int(vertex) for vertex in sequence]
    if len(sequence) != G.edge_count() + 1 or sequence[0] != sequence[-1]:
        return False

    n = G.vertex_count()
    used = np.zeros_like(G.matrix)
    for u, v in zip(sequence, sequence[1:]):
        if not (0 <= u < n and 0 <= v < n):
            return False
        _restore(used, u, v)
    return np.array_equal(used, G.matrix)
