"""One dense layer of a feedforward network."""

from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from .activation import Activation, sigmoid_activation
from .matrix import Matrix


class Layer:
    """Neuron outputs plus the weight-and-bias matrix feeding the next layer.

    A layer lives inside its network's layer list (the arena) at position
    `index`; `previous` and `next` are resolved through that list, so the
    role of a layer (input / hidden / output) is always derived from where it
    sits, never stored.

    The matrix has one row per neuron plus a final bias row, and one column
    per neuron of the next layer. The output layer has no matrix.
    """

    def __init__(self, neuron_count: int, activation: Optional[Activation] = None):
        """
        Args:
            neuron_count: Number of neurons in this layer
            activation: Nonlinearity producing this layer's outputs from the weighted
                sums of the previous layer (sigmoid when omitted; unused on the input layer)
        """
        if neuron_count < 1:
            raise ValueError(f"A layer needs at least one neuron, got {neuron_count}")
        self.values = np.zeros(neuron_count, dtype=np.float64)
        self.activation = activation if activation is not None else sigmoid_activation()
        self.matrix: Optional[Matrix] = None
        self.index: Optional[int] = None
        self._arena: Optional[List["Layer"]] = None

    # ----- arena wiring -----
    def attach(self, arena: List["Layer"], index: int) -> None:
        """Record this layer's position in the owning network's layer list."""
        if self._arena is not None:
            raise ValueError(f"{self!r} is already part of a network at position {self.index}")
        self._arena = arena
        self.index = index

    @property
    def previous(self) -> Optional["Layer"]:
        if self._arena is None or self.index == 0:
            return None
        return self._arena[self.index - 1]

    @property
    def next(self) -> Optional["Layer"]:
        if self._arena is None or self.index + 1 >= len(self._arena):
            return None
        return self._arena[self.index + 1]

    # ----- structural queries -----
    @property
    def neuron_count(self) -> int:
        return len(self.values)

    @property
    def bias_row(self) -> int:
        return self.neuron_count

    @property
    def matrix_size(self) -> int:
        return 0 if self.matrix is None else self.matrix.size

    def has_matrix(self) -> bool:
        return self.matrix is not None

    def is_input(self) -> bool:
        return self.previous is None

    def is_hidden(self) -> bool:
        return self.previous is not None and self.next is not None

    def is_output(self) -> bool:
        return self.next is None

    # ----- values -----
    def get_value(self, i: int) -> float:
        return float(self.values[i])

    def set_value(self, i: int, v: float) -> None:
        self.values[i] = v

    # ----- wiring -----
    def set_next(self, layer: "Layer") -> None:
        """Allocate the zero-filled weight matrix feeding `layer`.

        `layer` must already sit right after this one in the arena.
        """
        if self._arena is None or self.next is not layer:
            raise ValueError(f"{layer!r} is not the layer following {self!r}")
        self.matrix = Matrix(self.neuron_count + 1, layer.neuron_count)

    def set_matrix(self, matrix: Matrix) -> None:
        """Replace the weight matrix with one of the same shape."""
        if self.matrix is None:
            raise ValueError(f"{self!r} is an output layer and has no weight matrix")
        if matrix.shape != self.matrix.shape:
            raise ValueError(
                f"Weight matrix for {self!r} must be {self.matrix.shape} "
                f"(neurons + bias row, next layer neurons), got {matrix.shape}"
            )
        self.matrix = matrix

    def reset(self, lower: float, upper: float, rng: Optional[np.random.Generator] = None) -> None:
        """Randomize weights and biases in [lower, upper]; no-op on the output layer."""
        if self.matrix is not None:
            self.matrix.randomize(lower, upper, rng)

    def clone_structure(self) -> "Layer":
        """Same neuron count and activation, no weights, not attached."""
        return Layer(self.neuron_count, self.activation)

    # ----- forward -----
    def _input_matrix(self) -> Matrix:
        # trailing constant 1 so the bias row is applied as an ordinary weight
        return Matrix.from_grid([np.append(self.values, 1.0)])

    def compute_outputs(self, pattern: Optional[Sequence[float]] = None) -> None:
        """Push this layer's outputs through the matrix into the next layer.

        The input layer takes its values from `pattern`; every other layer
        was already filled by its predecessor and must be called without one.
        """
        if pattern is not None:
            if not self.is_input():
                raise ValueError(f"{self!r} is not an input layer; its values come from the previous layer")
            pattern = np.asarray(pattern, dtype=np.float64)
            if pattern.shape != (self.neuron_count,):
                raise ValueError(
                    f"Input pattern has {pattern.size} values but the input layer has {self.neuron_count} neurons"
                )
            self.values[:] = pattern

        nxt = self.next
        if nxt is None or self.matrix is None:
            raise RuntimeError(f"{self!r} has no next layer to compute outputs for")

        input_matrix = self._input_matrix()
        for i in range(nxt.neuron_count):
            col = self.matrix.column(i)
            total = col.dot(input_matrix)
            nxt.set_value(i, nxt.activation.fn(total))

    def __repr__(self):
        return f"[Layer: Neuron Count={self.neuron_count}]"
