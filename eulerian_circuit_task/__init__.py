from eulerian_circuit_task.exceptions import (CapacityExceeded, EulerCircuitError, InternalInvariantViolation,
                                              InvalidGraph, InvalidPrecondition)
from eulerian_circuit_task.graph import Graph, matrix_to_string, read_graphs
from eulerian_circuit_task.graph_utils import euler_circuit, has_euler_circuit, is_euler_circuit
from eulerian_circuit_task.walk import Walk
