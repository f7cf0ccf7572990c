"""Dense matrices, activation functions, losses and a small feedforward neural network."""

__version__ = "0.1.0"
__all__ = ["activation", "loss", "matrix", "network"]