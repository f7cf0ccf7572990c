"""A feed-forward neural network of dense layers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO

from .activation import ActivationFunc
from .matrix import Matrix


@dataclass
class Layer:
    """A dense layer computing activation(weights @ x + biases)."""

    weights: Matrix
    biases: Matrix
    activation: ActivationFunc

    @classmethod
    def zeros(cls, input_size: int, output_size: int, activation: ActivationFunc) -> Layer:
        """Create a layer whose weights and biases are all zero."""
        return cls(Matrix(output_size, input_size), Matrix(output_size, 1), activation)

    @property
    def num_nodes(self) -> int:
        return self.biases.rows


class Network:
    """A stack of dense layers, each feeding the next."""

    def __init__(
        self,
        input_nodes: int,
        layer_sizes: Sequence[int],
        activations: Sequence[ActivationFunc],
    ) -> None:
        if len(layer_sizes) != len(activations):
            raise ValueError("each layer needs exactly one activation function")
        self.layers: list[Layer] = []
        input_size = input_nodes
        for size, activation in zip(layer_sizes, activations):
            self.layers.append(Layer.zeros(input_size, size, activation))
            input_size = size

    def __len__(self) -> int:
        return len(self.layers)

    def forward_pass(self, inputs: Matrix, file: IO[str] | None = None) -> Matrix:
        """Feed inputs through every layer, writing a trace of each step, and return the output."""
        if not self.layers:
            raise ValueError("network has no layers")
        out = sys.stdout if file is None else file

        print("Input:", file=out)
        inputs.display(out)

        current = inputs
        last = len(self.layers) - 1
        for index, layer in enumerate(self.layers):
            print("\nWeights:", file=out)
            layer.weights.display(out)
            print("\nBiases:", file=out)
            layer.biases.display(out)

            output = layer.weights @ current + layer.biases
            print("\nLayer output pre-activation:", file=out)
            output.display(out)

            output.apply(layer.activation)
            heading = "\nResult:" if index == last else "\nLayer output post-activation:"
            print(heading, file=out)
            output.display(out)

            current = output
        return current