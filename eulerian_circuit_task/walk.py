from eulerian_circuit_task.exceptions import CapacityExceeded


class Walk:
    """Append-only sequence of vertices with a fixed capacity.

    A circuit over ``E`` edges visits ``E + 1`` vertex positions, the
    first and last being the same vertex, so walks built for a graph are
    created with ``capacity = edge_count + 1``.
    """

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("Walk capacity cannot be negative, got {0}".format(capacity))
        self.capacity = capacity
        self._vertices = []

    def append(self, vertex):
        if len(self._vertices) >= self.capacity:
            raise CapacityExceeded("Walk already holds {0} vertices".format(self.capacity))
        self._vertices.append(int(vertex))

    def to_sequence(self):
        return tuple(self._vertices)

    def is_closed(self):
        return len(self._vertices) > 0 and self._vertices[0] == self._vertices[-1]

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __getitem__(self, index):
        return self._vertices[index]

    def __str__(self):
        return ' -> '.join(str(vertex) for vertex in self._vertices)

    def __repr__(self):
        return 'Walk({0!r})'.format(self._vertices)
