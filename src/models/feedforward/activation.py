"""Activation functions as (fn, deriv) closure pairs."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict
import math


@dataclass(frozen=True)
class Activation:
    """Nonlinearity applied to every neuron of the layer it feeds.

    `deriv` takes the neuron's already-activated output y = fn(x), not x.
    Any activation registered here must express its derivative that way.
    """
    name: str
    fn: Callable[[float], float]
    deriv: Callable[[float], float]


# double precision rounds 1/(1+e^-x) to exactly 0.0 or 1.0 for large |x|
_SIGMOID_LOW = math.ulp(0.0)
_SIGMOID_HIGH = 1.0 - 2.0 ** -53


def sigmoid_activation() -> Activation:
    def fn(x: float) -> float:
        if x >= 0:
            y = 1.0 / (1.0 + math.exp(-x))
        else:
            z = math.exp(x)
            y = z / (1.0 + z)
        return min(max(y, _SIGMOID_LOW), _SIGMOID_HIGH)

    def deriv(y: float) -> float:
        return y * (1.0 - y)

    return Activation(name="sigmoid", fn=fn, deriv=deriv)


def tanh_activation() -> Activation:
    def fn(x: float) -> float:
        return math.tanh(x)

    def deriv(y: float) -> float:
        return 1.0 - y * y

    return Activation(name="tanh", fn=fn, deriv=deriv)


_REGISTRY: Dict[str, Callable[[], Activation]] = {
    "sigmoid": sigmoid_activation,
    "tanh": tanh_activation,
}


def get_activation(name: str) -> Activation:
    """Look up an activation by name ('sigmoid' or 'tanh')."""
    try:
        return _REGISTRY[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown activation '{name}'. Options: {', '.join(sorted(_REGISTRY))}") from None
