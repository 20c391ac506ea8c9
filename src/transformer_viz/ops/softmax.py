"""Softmax with temperature.

Turns raw scores (logits) into a probability distribution. Temperature
divides the logits before exponentiation:

- tau -> 0: distribution approaches one-hot at the arg-max
- tau = 1: plain softmax
- tau -> inf: distribution approaches uniform

The max logit is subtracted before dividing by temperature and
exponentiating, so neither large logits nor tiny temperatures overflow.
Softmax is shift-invariant and tau > 0 keeps the arg-max, so the result
is unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from transformer_viz.config import DEFAULT_TEMPERATURE
from transformer_viz.errors import InvalidInputError
from transformer_viz.ops.vectors import MatrixLike, VectorLike, as_matrix, as_vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoftmaxBreakdown:
    """Intermediate values of a softmax computation, for display.

    Attributes:
        scaled: Logits divided by temperature (``x / tau``). Entries may be
            ``+-inf`` at tiny temperatures.
        exponentials: ``exp(x / tau)`` without the stability shift, as shown
            to readers. Entries may be ``inf`` for very large logits.
        total: Sum of ``exponentials``.
        probabilities: Numerically stable softmax output.
        temperature: Temperature used.
    """

    scaled: np.ndarray
    exponentials: np.ndarray
    total: float
    probabilities: np.ndarray
    temperature: float


def _check_temperature(temperature: float) -> float:
    temperature = float(temperature)
    if not math.isfinite(temperature) or temperature <= 0:
        raise InvalidInputError(f"Temperature must be positive and finite, got {temperature}")
    return temperature


def _stable_softmax(values: np.ndarray, temperature: float) -> np.ndarray:
    # Shift before scaling: x - max <= 0, so x / tau can only overflow to -inf
    # and exp(-inf) == 0. Works on the last axis so matrix rows are independent.
    with np.errstate(over="ignore"):
        shifted = (values - values.max(axis=-1, keepdims=True)) / temperature
    exps = np.exp(shifted)
    return exps / exps.sum(axis=-1, keepdims=True)


def softmax(values: VectorLike, temperature: float = DEFAULT_TEMPERATURE) -> np.ndarray:
    """Compute softmax of a vector of logits.

    Args:
        values: N >= 1 finite logits.
        temperature: Positive divisor applied to logits before exponentiation.

    Returns:
        Vector of N probabilities in [0, 1] summing to 1.

    Raises:
        InvalidInputError: If ``values`` is empty or non-finite, or
            ``temperature`` is not positive.

    Example:
        >>> softmax([2.0, 1.0, 0.1]).round(3)
        array([0.659, 0.242, 0.099])
    """
    temperature = _check_temperature(temperature)
    vec = as_vector(values, name="values")
    if vec.size == 0:
        raise InvalidInputError("softmax requires at least one value")

    if temperature != DEFAULT_TEMPERATURE:
        logger.debug("softmax over %d values at temperature %.3g", vec.size, temperature)
    return _stable_softmax(vec, temperature)


def softmax_rows(scores: MatrixLike, temperature: float = DEFAULT_TEMPERATURE) -> np.ndarray:
    """Apply softmax independently to each row of a score matrix.

    Args:
        scores: Matrix of shape (Q, K), one row of raw scores per query token.
        temperature: Positive temperature shared by all rows.

    Returns:
        Matrix of shape (Q, K) where every row is a probability distribution.

    Raises:
        InvalidInputError: If the matrix has no columns or temperature is invalid.
    """
    temperature = _check_temperature(temperature)
    matrix = as_matrix(scores, name="scores")
    if matrix.shape[1] == 0:
        raise InvalidInputError("softmax requires at least one value per row")
    return _stable_softmax(matrix, temperature)


def softmax_breakdown(
    values: VectorLike,
    temperature: float = DEFAULT_TEMPERATURE,
) -> SoftmaxBreakdown:
    """Compute softmax and keep each intermediate step.

    Mirrors the step-by-step explainer: ``exp(x_i / tau) / sum_j exp(x_j / tau)``.

    Args:
        values: N >= 1 finite logits.
        temperature: Positive temperature.

    Returns:
        SoftmaxBreakdown with scaled logits, raw exponentials, their sum and
        the stable probabilities.
    """
    probabilities = softmax(values, temperature)
    temperature = float(temperature)
    with np.errstate(over="ignore"):
        scaled = as_vector(values, name="values") / temperature
        exponentials = np.exp(scaled)

    return SoftmaxBreakdown(
        scaled=scaled,
        exponentials=exponentials,
        total=float(exponentials.sum()),
        probabilities=probabilities,
        temperature=temperature,
    )
