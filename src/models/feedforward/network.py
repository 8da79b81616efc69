"""Feedforward network: an ordered chain of dense layers."""

from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from .activation import Activation
from .layer import Layer
from .matrix import Matrix


class Network:
    """Layers in insertion order; the first is the input, the last the output.

    Layers are chained once by `add_layer` and the structure must not change
    after a trainer has been built on top of it.
    """

    def __init__(self):
        self.layers: List[Layer] = []
        self.input_layer: Optional[Layer] = None
        self.output_layer: Optional[Layer] = None

    @classmethod
    def from_sizes(cls, sizes: Sequence[int], activation: Optional[Activation] = None) -> "Network":
        """
        Build a network from layer widths.

        Args:
            sizes: Ordered neuron counts, first = input width, last = output width
            activation: Shared activation for every layer (sigmoid when omitted)

        Returns:
            network: Network with zero-filled weight matrices (call reset() next)
        """
        if len(sizes) == 0:
            raise ValueError("Need at least one layer size")
        network = cls()
        for size in sizes:
            network.add_layer(Layer(int(size), activation))
        return network

    def add_layer(self, layer: Layer) -> None:
        """Append `layer` and link it after the current output layer."""
        index = len(self.layers)
        layer.attach(self.layers, index)
        self.layers.append(layer)

        if self.output_layer is not None:
            self.output_layer.set_next(layer)

        if index == 0:
            self.input_layer = self.output_layer = layer
        else:
            self.output_layer = layer

    @property
    def layer_sizes(self) -> List[int]:
        return [layer.neuron_count for layer in self.layers]

    def parameter_count(self) -> int:
        return sum(layer.matrix_size for layer in self.layers)

    def weights(self) -> List[np.ndarray]:
        """Copies of every weight matrix, input side first."""
        return [layer.matrix.to_numpy() for layer in self.layers if layer.has_matrix()]

    def set_weights(self, matrices: Sequence[np.ndarray]) -> None:
        """Overwrite every weight matrix, input side first."""
        owners = [layer for layer in self.layers if layer.has_matrix()]
        if len(matrices) != len(owners):
            raise ValueError(f"Network has {len(owners)} weight matrices, got {len(matrices)}")
        for layer, grid in zip(owners, matrices):
            layer.set_matrix(Matrix.from_grid(grid))

    # ----- forward -----
    def compute_outputs(self, input: Sequence[float]) -> np.ndarray:
        """
        Forward pass.

        Args:
            input: Input vector (length = input layer width)

        Returns:
            outputs: The output layer's live value vector. It is overwritten by
                the next forward pass; copy it (or use predict) to keep it.
        """
        if not self.layers:
            raise ValueError("Cannot compute outputs: the network has no layers")
        width = self.input_layer.neuron_count
        if len(input) != width:
            raise ValueError(f"Input vector has {len(input)} values but the input layer has {width} neurons")

        if len(self.layers) == 1:
            # the input layer is also the output layer, nothing to push into
            self.input_layer.values[:] = np.asarray(input, dtype=np.float64)
            return self.output_layer.values

        for layer in self.layers:
            if layer.is_input():
                layer.compute_outputs(input)
            elif layer.is_hidden():
                layer.compute_outputs()
        return self.output_layer.values

    def predict(self, input: Sequence[float]) -> np.ndarray:
        """Forward pass returning a copy of the outputs."""
        return self.compute_outputs(input).copy()

    def output_for(self, x: Sequence[float]) -> float:
        """Single output value; only for networks with one output neuron."""
        if self.output_layer is None or self.output_layer.neuron_count != 1:
            raise ValueError("output_for needs a network with exactly one output neuron")
        return float(self.compute_outputs(x)[0])

    def reset(self, lower: float, upper: float, seed: Optional[int] = None) -> None:
        """Randomize every weight matrix in [lower, upper]."""
        rng = np.random.default_rng(seed)
        for layer in self.layers:
            layer.reset(lower, upper, rng)

    def __repr__(self):
        sizes = "-".join(str(s) for s in self.layer_sizes)
        return f"Network({sizes or 'empty'})"
