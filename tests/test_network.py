#!/usr/bin/env python
"""
Test Layer and Network: wiring, roles, forward pass and errors.

Usage:
    python tests/test_network.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math
import numpy as np
from src.models.feedforward.activation import sigmoid_activation, tanh_activation
from src.models.feedforward.layer import Layer
from src.models.feedforward.matrix import Matrix
from src.models.feedforward.network import Network


def sigmoid(x):
    return 1.0 / (1.0 + math.exp(-x))


def test_wiring_and_roles():
    """Test add_layer chaining, matrix shapes and derived roles."""
    print("\n" + "=" * 60)
    print("Test 1: Wiring and Roles")
    print("=" * 60)

    net = Network()
    a = Layer(2)
    net.add_layer(a)
    assert net.input_layer is a and net.output_layer is a, "First layer is both input and output"
    assert a.is_input() and a.is_output() and not a.is_hidden()
    assert not a.has_matrix()

    b, c = Layer(4), Layer(1)
    net.add_layer(b)
    net.add_layer(c)

    assert net.input_layer is a and net.output_layer is c
    assert net.layers == [a, b, c]
    assert net.layer_sizes == [2, 4, 1]
    assert [layer.index for layer in net.layers] == [0, 1, 2]

    assert a.next is b and b.previous is a and b.next is c and c.previous is b
    assert a.previous is None and c.next is None

    assert a.is_input() and not a.is_hidden() and not a.is_output()
    assert b.is_hidden() and not b.is_input() and not b.is_output()
    assert c.is_output() and not c.is_input() and not c.is_hidden()

    # neurons + bias row, next layer neurons
    assert a.matrix.shape == (3, 4)
    assert b.matrix.shape == (5, 1)
    assert c.matrix is None and c.matrix_size == 0
    assert a.bias_row == 2
    assert net.parameter_count() == 3 * 4 + 5 * 1

    print(f"✓ {net} wired with derived roles")


def test_wiring_errors():
    """Layers can't be reused or linked out of order."""
    print("\n" + "=" * 60)
    print("Test 2: Wiring Errors")
    print("=" * 60)

    try:
        Layer(0)
        raise AssertionError("Zero-neuron layer should raise")
    except ValueError:
        pass

    net = Network.from_sizes([2, 3])
    try:
        net.add_layer(net.layers[0])
        raise AssertionError("Adding an attached layer should raise")
    except ValueError:
        pass

    stray = Layer(5)
    try:
        net.layers[0].set_next(stray)
        raise AssertionError("set_next with a non-adjacent layer should raise")
    except ValueError:
        pass

    try:
        net.layers[0].set_matrix(Matrix(2, 3))
        raise AssertionError("set_matrix with a wrong shape should raise")
    except ValueError as e:
        assert "(3, 3)" in str(e)

    try:
        Network.from_sizes([])
        raise AssertionError("Empty size list should raise")
    except ValueError:
        pass

    clone = net.layers[1].clone_structure()
    assert clone.neuron_count == 3 and clone.matrix is None and clone.index is None

    print("✓ Invalid wiring rejected")


def test_forward_pass_by_hand():
    """Forward pass matches a hand computation on a 2-2-1 network."""
    print("\n" + "=" * 60)
    print("Test 3: Forward Pass by Hand")
    print("=" * 60)

    net = Network.from_sizes([2, 2, 1])
    w0 = [[0.5, -0.3],
          [0.2, 0.8],
          [0.1, -0.1]]   # bias row
    w1 = [[1.0],
          [-2.0],
          [0.5]]         # bias row
    net.set_weights([w0, w1])

    x = [1.0, 0.5]
    h0 = sigmoid(0.5 * 1.0 + 0.2 * 0.5 + 0.1)
    h1 = sigmoid(-0.3 * 1.0 + 0.8 * 0.5 - 0.1)
    y = sigmoid(1.0 * h0 - 2.0 * h1 + 0.5)

    out = net.compute_outputs(x)
    assert abs(out[0] - y) < 1e-12, f"Expected {y}, got {out[0]}"
    assert np.allclose(net.layers[1].values, [h0, h1])
    assert abs(net.layers[1].get_value(1) - h1) < 1e-12
    assert np.array_equal(net.layers[0].values, x), "Input layer holds the pattern"
    assert abs(net.output_for(x) - y) < 1e-12

    print(f"✓ Output {out[0]:.6f} matches hand computation")


def test_forward_determinism_and_aliasing():
    """Repeated forward passes agree; compute_outputs returns live state."""
    print("\n" + "=" * 60)
    print("Test 4: Determinism and Aliasing")
    print("=" * 60)

    net = Network.from_sizes([3, 5, 2])
    net.reset(-1.0, 1.0, seed=3)

    x = [0.2, -0.4, 0.9]
    first = net.predict(x)
    for _ in range(5):
        assert np.array_equal(net.predict(x), first), "Inference must be deterministic"

    live = net.compute_outputs(x)
    assert live is net.output_layer.values
    snapshot = live.copy()
    net.compute_outputs([1.0, 1.0, 1.0])
    assert live is net.output_layer.values
    assert not np.array_equal(live, snapshot), "Live vector is overwritten by the next pass"

    print("✓ Forward pass deterministic, live output aliasing as documented")


def test_reset_bounds():
    """Every weight lies in [lower, upper] after reset."""
    print("\n" + "=" * 60)
    print("Test 5: Reset Bounds")
    print("=" * 60)

    net = Network.from_sizes([4, 6, 3, 2])
    for lower, upper in [(-0.5, 0.5), (-2.0, 0.1), (0.3, 0.3)]:
        net.reset(lower, upper)
        for w in net.weights():
            assert w.min() >= lower and w.max() <= upper

    net.reset(-1, 1, seed=11)
    first = net.weights()
    net.reset(-1, 1, seed=11)
    assert all(np.array_equal(a, b) for a, b in zip(first, net.weights())), "Seeded reset is reproducible"

    print("✓ Reset respects bounds and seeds")


def test_forward_errors():
    """Malformed calls fail with a message naming the widths."""
    print("\n" + "=" * 60)
    print("Test 6: Forward Errors")
    print("=" * 60)

    try:
        Network().compute_outputs([1.0])
        raise AssertionError("Empty network should raise")
    except ValueError as e:
        assert "no layers" in str(e)

    net = Network.from_sizes([2, 3, 1])
    try:
        net.compute_outputs([1.0, 2.0, 3.0])
        raise AssertionError("Wrong input width should raise")
    except ValueError as e:
        assert "3" in str(e) and "2" in str(e)

    try:
        net.layers[1].compute_outputs([1.0, 2.0, 3.0])
        raise AssertionError("Hidden layer given a pattern should raise")
    except ValueError:
        pass

    try:
        net.output_layer.compute_outputs()
        raise AssertionError("Output layer has nothing to push into")
    except RuntimeError:
        pass

    try:
        Network.from_sizes([2, 2]).output_for([0.0, 0.0])
        raise AssertionError("output_for needs a single output neuron")
    except ValueError:
        pass

    single = Network.from_sizes([3])
    assert np.array_equal(single.compute_outputs([1.0, 2.0, 3.0]), [1.0, 2.0, 3.0])

    print("✓ Errors raised with clear messages")


def test_layer_activation_applies_to_own_outputs():
    """A layer's activation produces its own values."""
    print("\n" + "=" * 60)
    print("Test 7: Per-layer Activation")
    print("=" * 60)

    net = Network()
    net.add_layer(Layer(1, sigmoid_activation()))
    net.add_layer(Layer(1, tanh_activation()))
    net.set_weights([[[2.0], [-0.5]]])

    out = net.compute_outputs([1.0])
    assert abs(out[0] - math.tanh(1.5)) < 1e-12

    print("✓ Output layer uses its own tanh activation")


def main():
    """Run all tests."""
    test_wiring_and_roles()
    test_wiring_errors()
    test_forward_pass_by_hand()
    test_forward_determinism_and_aliasing()
    test_reset_bounds()
    test_forward_errors()
    test_layer_activation_applies_to_own_outputs()

    print("\n" + "=" * 60)
    print("✅ All network tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
