"""XOR dataset and dataset shape validation."""

from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

XOR_INPUTS = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
XOR_TARGETS = [[0.0], [1.0], [1.0], [0.0]]


def xor_dataset() -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns (X, D) with shapes:
      X: (4, 2) inputs
      D: (4, 1) expected outputs
    """
    return np.array(XOR_INPUTS, dtype=np.float64), np.array(XOR_TARGETS, dtype=np.float64)


def _as_rows(rows: Sequence[Sequence[float]], width: int, name: str) -> np.ndarray:
    out = np.empty((len(rows), width), dtype=np.float64)
    for i, row in enumerate(rows):
        row = np.asarray(row, dtype=np.float64)
        if row.shape != (width,):
            raise ValueError(f"{name} row {i} has {row.size} values but the layer has {width} neurons")
        out[i] = row
    return out


def validate_dataset(
    inputs: Sequence[Sequence[float]],
    expected: Sequence[Sequence[float]],
    input_width: int,
    output_width: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Check a parallel input/expected dataset against the network widths.

    Args:
        inputs: Input vectors, one per sample
        expected: Expected output vectors, parallel to inputs
        input_width: Input layer neuron count
        output_width: Output layer neuron count

    Returns:
        X: (N, input_width) float64 copy of inputs
        D: (N, output_width) float64 copy of expected
    """
    if len(inputs) == 0:
        raise ValueError("Dataset is empty")
    if len(inputs) != len(expected):
        raise ValueError(f"Dataset has {len(inputs)} input rows but {len(expected)} expected rows")
    X = _as_rows(inputs, input_width, "Input")
    D = _as_rows(expected, output_width, "Expected")
    return X, D
