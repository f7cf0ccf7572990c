"""Activation functions and their derivatives."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class ActivationFunc:
    """An activation function paired with its derivative."""

    func: Callable[[float], float]
    derivative: Callable[[float], float]

    def __call__(self, x: float) -> float:
        return self.func(x)


def sigmoid_func(x: float) -> float:
    """1 / (1 + e^-x)."""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    exp_x = math.exp(x)
    return exp_x / (1.0 + exp_x)


def sigmoid_derivative(x: float) -> float:
    """s(x) * (1 - s(x)) where s is the sigmoid."""
    return sigmoid_func(x) * (1.0 - sigmoid_func(x))


def tanh_func(x: float) -> float:
    """Hyperbolic tangent, saturated to +-1 beyond magnitude 10."""
    if x > 10.0:
        return 1.0
    if x < -10.0:
        return -1.0
    return (math.exp(x) - math.exp(-x)) / (math.exp(x) + math.exp(-x))


def tanh_derivative(x: float) -> float:
    """1 - tanh(x)^2."""
    return 1.0 - tanh_func(x) * tanh_func(x)


def relu_func(x: float) -> float:
    """max(0, x)."""
    return x if x > 0.0 else 0.0


def relu_derivative(x: float) -> float:
    """1 for positive x, otherwise 0 (including at 0)."""
    # The derivative is undefined at 0; it is taken as 0 there.
    slope = float(x > 0.0)
    return slope


sigmoid = ActivationFunc(sigmoid_func, sigmoid_derivative)
tanh = ActivationFunc(tanh_func, tanh_derivative)
relu = ActivationFunc(relu_func, relu_derivative)