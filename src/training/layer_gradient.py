"""Per-layer backpropagation state."""

from __future__ import annotations
from typing import Optional, Sequence
import numpy as np

from src.models.feedforward.layer import Layer
from src.models.feedforward.matrix import Matrix


class LayerGradient:
    """
    Error bookkeeping for one layer during backpropagation:

      error[j]        = sum_i W[j, i] * delta_next[i]       (non-output layers)
                      = expected[j] - out[j]                (output layer)
      error_delta[j]  = error[j] * f'(out[j])               (hidden + output layers)
      acc[j, i]      += delta_next[i] * out[j]              (bias row: += delta_next[i])

    `learn` turns the accumulated deltas into a momentum update of the layer's
    weight matrix:

      update = rate * acc + momentum * previous_update
      W     += update

    Only layers with a weight matrix (every layer but the output one) carry
    `accumulated_delta` and `previous_update`.
    """
    def __init__(self, layer: Layer):
        self.layer = layer
        n = layer.neuron_count
        self.error = np.zeros(n, dtype=np.float64)
        self.error_delta = np.zeros(n, dtype=np.float64)

        self.accumulated_delta: Optional[Matrix] = None
        self.previous_update: Optional[Matrix] = None
        if layer.has_matrix():
            rows, cols = layer.matrix.shape
            self.accumulated_delta = Matrix(rows, cols)
            self.previous_update = Matrix(rows, cols)

    @property
    def bias_row(self) -> int:
        return self.layer.bias_row

    # ----- backward -----
    def clear_error(self) -> None:
        """Zero the error vector (error_delta is left as is)."""
        self.error.fill(0.0)

    def calc_error(self, successor: "LayerGradient") -> None:
        """
        Backward step for a layer that feeds `successor` (the next layer's
        gradient, whose error_delta must already be final for this sample).
        """
        layer = self.layer
        if not layer.has_matrix():
            raise RuntimeError(f"{layer!r} is an output layer; use calc_output_error")
        delta_next = successor.error_delta
        n = layer.neuron_count
        assert delta_next.shape == (layer.matrix.cols,), \
            f"successor error_delta must be ({layer.matrix.cols},), got {delta_next.shape}"

        step = np.empty(layer.matrix.shape, dtype=np.float64)
        step[:n] = np.outer(layer.values, delta_next)
        step[self.bias_row] = delta_next
        self.accumulated_delta.accumulate(step)

        self.error += layer.matrix.data[:n] @ delta_next

        if layer.is_hidden():
            self.error_delta[:] = self._delta(self.error)

    def calc_output_error(self, expected: Sequence[float]) -> None:
        """Output layer: error = expected - actual."""
        expected = np.asarray(expected, dtype=np.float64)
        n = self.layer.neuron_count
        if expected.shape != (n,):
            raise ValueError(f"Expected vector has {expected.size} values but the output layer has {n} neurons")
        self.error[:] = expected - self.layer.values
        self.error_delta[:] = self._delta(self.error)

    def _delta(self, error: np.ndarray) -> np.ndarray:
        # derivative is taken on the layer's own activated outputs
        return error * self.layer.activation.deriv(self.layer.values)

    # ----- update -----
    def learn(self, learning_rate: float, momentum: float) -> None:
        """Apply the accumulated deltas (plus momentum) to the layer's matrix."""
        if not self.layer.has_matrix():
            return
        m1 = self.accumulated_delta.multiply(learning_rate)
        m2 = self.previous_update.multiply(momentum)
        self.previous_update = m1.add(m2)
        self.layer.set_matrix(self.layer.matrix.add(self.previous_update))
        self.accumulated_delta.clear()

    def clear_momentum(self) -> None:
        """Forget the previous update, e.g. after the weights were reloaded."""
        if self.previous_update is not None:
            self.previous_update.clear()

    def last_update(self) -> Optional[np.ndarray]:
        """Copy of the update applied by the most recent learn() call."""
        return None if self.previous_update is None else self.previous_update.to_numpy()

    def __repr__(self):
        return f"LayerGradient({self.layer!r})"
