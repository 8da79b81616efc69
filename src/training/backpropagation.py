"""Backpropagation with momentum over a feedforward network."""

from __future__ import annotations
from typing import List, Sequence
import numpy as np

from src.data.xor import validate_dataset
from src.models.feedforward.network import Network
from .layer_gradient import LayerGradient


class BackPropagation:
    """
    Online (per-sample) backpropagation trainer.

    For every sample of the dataset, in order:
      * forward pass through the network
      * squared error against the expected row is added to the epoch total
      * backward pass, output layer first, filling each LayerGradient
      * every LayerGradient applies its update to its layer's matrix

    Gradients live in a list indexed exactly like `network.layers`, so the
    successor of gradient k is gradient k + 1.

    One call to train() is one epoch. Deciding how many epochs to run is up
    to the caller (see src.training.loop.train_until).
    """
    def __init__(
        self,
        learning_rate: float,
        momentum: float,
        inputs: Sequence[Sequence[float]],
        expected: Sequence[Sequence[float]],
        network: Network,
    ):
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be > 0, got {learning_rate}")
        if momentum < 0:
            raise ValueError(f"momentum must be >= 0, got {momentum}")
        if len(network.layers) < 2:
            raise ValueError(f"Training needs at least an input and an output layer, network has {len(network.layers)}")

        self.learning_rate = learning_rate
        self.momentum = momentum
        self.network = network
        self.inputs, self.expected = validate_dataset(
            inputs, expected,
            network.input_layer.neuron_count,
            network.output_layer.neuron_count,
        )
        self.gradients: List[LayerGradient] = [LayerGradient(layer) for layer in network.layers]
        self.epoch = 0

    def gradient_for(self, index: int) -> LayerGradient:
        return self.gradients[index]

    # ---------- one epoch ----------

    def train(self) -> float:
        """Run one epoch; returns the summed squared error over every sample."""
        error = 0.0
        for x, d in zip(self.inputs, self.expected):
            error += self._step(x, d)
        self.epoch += 1
        return error

    def train_sample(self, x: Sequence[float], expected: Sequence[float]) -> float:
        """Forward, backward and update on a single sample; returns its squared error."""
        x, d = validate_dataset(
            [x], [expected],
            self.network.input_layer.neuron_count,
            self.network.output_layer.neuron_count,
        )
        return self._step(x[0], d[0])

    def _step(self, x: np.ndarray, d: np.ndarray) -> float:
        outputs = self.network.compute_outputs(x)
        diff = outputs - d
        sq_error = float(np.dot(diff, diff))
        self.calc_error(d)
        self.learn()
        return sq_error

    # ---------- phases ----------

    def calc_error(self, expected: Sequence[float]) -> None:
        """Backward pass for the sample currently held in the layers."""
        for g in self.gradients:
            g.clear_error()

        for k in range(len(self.gradients) - 1, -1, -1):
            g = self.gradients[k]
            if g.layer.is_output():
                g.calc_output_error(expected)
            else:
                g.calc_error(self.gradients[k + 1])

    def learn(self) -> None:
        """Apply every layer's accumulated deltas to its weight matrix."""
        for g in self.gradients:
            g.learn(self.learning_rate, self.momentum)

    # ---------- evaluation ----------

    def evaluate(self) -> float:
        """Summed squared error over the dataset without touching the weights."""
        error = 0.0
        for x, d in zip(self.inputs, self.expected):
            diff = self.network.compute_outputs(x) - d
            error += float(np.dot(diff, diff))
        return error
