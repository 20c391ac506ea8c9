"""Vector primitives and boundary coercion.

All inputs are copied into fresh ``float64`` numpy arrays before any
arithmetic, so callers' lists, arrays and tensors are never mutated.

Key functions:
- `as_vector()` / `as_matrix()`: Validate and convert input at the boundary
- `dot_product()`: Sum of element-wise products of two equal-length vectors
- `normalize()`: Scale a vector to unit Euclidean norm
- `weighted_sum()`: Combine value vectors by attention weights
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
from torch import Tensor

from transformer_viz.errors import DegenerateResultError, InvalidInputError

VectorLike = Union[Sequence[float], np.ndarray, Tensor]
MatrixLike = Union[Sequence[Sequence[float]], np.ndarray, Tensor]


def _to_array(values: VectorLike | MatrixLike, name: str) -> np.ndarray:
    if isinstance(values, Tensor):
        values = values.detach().cpu().numpy()
    try:
        # np.array (not asarray) so the result never aliases caller memory
        return np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidInputError(f"{name} must be numeric and rectangular: {err}") from err


def as_vector(values: VectorLike, name: str = "vector") -> np.ndarray:
    """Convert input to a 1-D float64 vector.

    Args:
        values: Sequence of reals, numpy array, or torch tensor.
        name: Argument name used in error messages.

    Returns:
        New 1-D ``float64`` array.

    Raises:
        InvalidInputError: If input is not 1-D or contains NaN/Inf.
    """
    arr = _to_array(values, name)
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be 1-D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must contain only finite values")
    return arr


def as_matrix(rows: MatrixLike, name: str = "matrix") -> np.ndarray:
    """Convert input to a 2-D float64 matrix (one vector per row).

    Args:
        rows: Sequence of equal-length sequences, 2-D array, or 2-D tensor.
        name: Argument name used in error messages.

    Returns:
        New 2-D ``float64`` array of shape (rows, cols).

    Raises:
        InvalidInputError: If rows are ragged, input is not 2-D, or contains NaN/Inf.
    """
    arr = _to_array(rows, name)
    if arr.ndim != 2:
        raise InvalidInputError(f"{name} must be 2-D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must contain only finite values")
    return arr


def dot_product(a: VectorLike, b: VectorLike) -> float:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector, same length as ``a``.

    Returns:
        Scalar ``sum(a[i] * b[i])``.

    Raises:
        InvalidInputError: If the vectors differ in length.

    Example:
        >>> dot_product([1, 2, 3], [4, 5, 6])
        32.0
    """
    vec_a = as_vector(a, name="a")
    vec_b = as_vector(b, name="b")
    if vec_a.shape != vec_b.shape:
        raise InvalidInputError(
            f"Vectors must have same length: {vec_a.shape[0]} != {vec_b.shape[0]}"
        )
    return float(np.dot(vec_a, vec_b))


def normalize(vector: VectorLike) -> np.ndarray:
    """Scale a vector to unit Euclidean norm.

    Args:
        vector: Input vector.

    Returns:
        New vector with ``||v|| == 1``.

    Raises:
        DegenerateResultError: If the vector has zero magnitude.

    Example:
        >>> normalize([3, 4])
        array([0.6, 0.8])
    """
    vec = as_vector(vector)
    largest = float(np.abs(vec).max()) if vec.size else 0.0
    if largest == 0.0:
        raise DegenerateResultError(
            f"Cannot normalize zero-magnitude vector of length {vec.shape[0]}"
        )
    # Rescale by the largest component first so squaring can't overflow/underflow
    scaled = vec / largest
    return scaled / np.sqrt(np.sum(scaled * scaled))


def weighted_sum(weights: VectorLike, values: MatrixLike) -> np.ndarray:
    """Combine value vectors using one weight per vector.

    Args:
        weights: Vector of N weights (typically softmax output).
        values: Matrix of shape (N, D), one value vector per row.

    Returns:
        Vector of length D: ``sum_i weights[i] * values[i]``.

    Raises:
        InvalidInputError: If the number of weights and value rows differ.
    """
    w = as_vector(weights, name="weights")
    v = as_matrix(values, name="values")
    if w.shape[0] != v.shape[0]:
        raise InvalidInputError(
            f"Need one weight per value vector: {w.shape[0]} weights, {v.shape[0]} values"
        )
    return w @ v
