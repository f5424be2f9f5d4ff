"""Unit tests for lagrange_evaluate."""

import numpy as np
import pytest

from pointinterp.core.errors import DegenerateGeometryError
from pointinterp.core.interpolation.lagrange import lagrange_evaluate


def test_lagrange_evaluate():
    print("\n--- Testing lagrange_evaluate ---")

    # Two nodes: straight line through (0, 1) and (2, 5)
    print("Testing two-node line...")
    value = lagrange_evaluate(1.5, [0.0, 2.0], [1.0, 5.0])
    assert abs(value - 4.0) < 1e-12, f"Expected 4.0, got {value}"
    print(f"  line(1.5) = {value} PASS")

    # Five nodes reproduce a quartic
    print("Testing five-node quartic...")
    nodes = np.array([-2.0, -0.5, 1.0, 2.0, 3.5])
    values = nodes**4 - nodes
    value = lagrange_evaluate(0.25, nodes, values)
    expected = 0.25**4 - 0.25
    assert abs(value - expected) < 1e-12, f"Expected {expected}, got {value}"
    print(f"  quartic(0.25) = {value} PASS")

    # Nodes are reproduced exactly
    print("Testing node reproduction...")
    for x, y in zip(nodes, values):
        assert lagrange_evaluate(x, nodes, values) == y
    print("  Nodes: PASS")

    print("\nlagrange_evaluate: ALL TESTS PASSED")


def test_lagrange_duplicate_nodes():
    with pytest.raises(DegenerateGeometryError):
        lagrange_evaluate(1.0, [0.0, 1.0, 1.0], [0.0, 1.0, 2.0])


def test_lagrange_shape_mismatch():
    with pytest.raises(ValueError):
        lagrange_evaluate(1.0, [0.0, 1.0], [0.0])


if __name__ == "__main__":
    test_lagrange_evaluate()
