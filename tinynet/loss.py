"""Loss functions comparing a column of targets with a column of predictions."""

from __future__ import annotations

import math

from .matrix import Matrix

_EPSILON = 1e-15


def _paired_values(y: Matrix, y_pred: Matrix) -> list[tuple[float, float]]:
    if y.rows == 0:
        raise ValueError("loss is undefined for an empty target")
    if y_pred.rows != y.rows:
        raise ValueError(
            f"targets have {y.rows} rows but predictions have {y_pred.rows}"
        )
    return [(actual[0], predicted[0]) for actual, predicted in zip(y.to_rows(), y_pred.to_rows())]


def mean_squared_error(y: Matrix, y_pred: Matrix) -> float:
    """Mean of squared differences over the first column."""
    pairs = _paired_values(y, y_pred)
    return sum((actual - predicted) ** 2 for actual, predicted in pairs) / len(pairs)


def mean_absolute_error(y: Matrix, y_pred: Matrix) -> float:
    """Mean of absolute differences over the first column."""
    pairs = _paired_values(y, y_pred)
    return sum(abs(actual - predicted) for actual, predicted in pairs) / len(pairs)


def binary_cross_entropy(y: Matrix, y_pred: Matrix) -> float:
    """Mean binary cross-entropy, with predictions clipped to [eps, 1 - eps]."""
    pairs = _paired_values(y, y_pred)
    total = 0.0
    for actual, predicted in pairs:
        clipped = min(max(predicted, _EPSILON), 1.0 - _EPSILON)
        total += -(actual * math.log(clipped) + (1 - actual) * math.log(1 - clipped))
    return total / len(pairs)