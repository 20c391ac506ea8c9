"""Scaled dot-product attention scores.

This module computes the core arithmetic of attention:

    Attention(Q, K, V) = softmax(Q K^T / sqrt(d_k)) V

Key functions:
- `compute_attention_scores()`: Pre-softmax scores of one query against all keys
- `compute_attention_matrix()`: Score matrix, one row per query token
- `attention_weights()`: Softmax-normalized scores
- `attend()`: Full pipeline from query/keys/values to output vector
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from transformer_viz.config import DEFAULT_TEMPERATURE
from transformer_viz.errors import InvalidInputError
from transformer_viz.ops.softmax import softmax
from transformer_viz.ops.vectors import (
    MatrixLike,
    VectorLike,
    as_matrix,
    as_vector,
    dot_product,
    weighted_sum,
)


@dataclass(frozen=True)
class AttentionResult:
    """Result of attending from one query over a set of keys/values.

    Attributes:
        scores: Scaled dot-product scores, one per key.
        weights: Softmax of ``scores`` (sums to 1).
        output: Weighted sum of value vectors.
    """

    scores: np.ndarray
    weights: np.ndarray
    output: np.ndarray


def _resolve_scale(scale_factor: float | None, dim: int) -> float:
    # Default sqrt(d_k) keeps score magnitude independent of dimension
    if scale_factor is None:
        return math.sqrt(dim)
    scale = float(scale_factor)
    if scale == 0.0 or not math.isfinite(scale):
        raise InvalidInputError(f"Scale factor must be finite and non-zero, got {scale_factor}")
    return scale


def _check_keys(query: np.ndarray, keys: np.ndarray) -> None:
    if query.shape[0] == 0:
        raise InvalidInputError("Query must have at least one dimension")
    if keys.shape[0] == 0:
        raise InvalidInputError("At least one key is required")
    if keys.shape[1] != query.shape[0]:
        raise InvalidInputError(
            f"Key length must match query length: {keys.shape[1]} != {query.shape[0]}"
        )


def compute_attention_scores(
    query: VectorLike,
    keys: MatrixLike,
    scale_factor: float | None = None,
) -> np.ndarray:
    """Score one query against every key.

    Args:
        query: Query vector of length D.
        keys: Key vectors, shape (N, D).
        scale_factor: Divisor for each dot product. Default ``sqrt(D)``.

    Returns:
        Vector of N unnormalized scores ``dot(query, key_i) / scale``.

    Raises:
        InvalidInputError: If any key's length differs from the query's,
            ``keys`` is empty, or ``scale_factor`` is zero/non-finite.

    Example:
        >>> compute_attention_scores([1, 0], [[1, 0], [0, 1]]).round(3)
        array([0.707, 0.   ])
    """
    q = as_vector(query, name="query")
    k = as_matrix(keys, name="keys")
    _check_keys(q, k)
    scale = _resolve_scale(scale_factor, q.shape[0])
    return np.array([dot_product(q, key) / scale for key in k])


def compute_attention_matrix(
    queries: MatrixLike,
    keys: MatrixLike,
    scale_factor: float | None = None,
) -> np.ndarray:
    """Compute the score matrix ``Q K^T / scale``.

    Args:
        queries: Query vectors, shape (Q, D).
        keys: Key vectors, shape (K, D).
        scale_factor: Divisor shared by all rows. Default ``sqrt(D)``.

    Returns:
        Score matrix of shape (Q, K); row i scores query i against all keys.

    Example:
        >>> embeddings = example_embedding_matrix()  # (6, 4)
        >>> compute_attention_matrix(embeddings, embeddings).shape
        (6, 6)
    """
    q = as_matrix(queries, name="queries")
    if q.shape[0] == 0:
        raise InvalidInputError("At least one query is required")
    return np.stack([compute_attention_scores(row, keys, scale_factor) for row in q])


def attention_weights(
    query: VectorLike,
    keys: MatrixLike,
    scale_factor: float | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> np.ndarray:
    """Softmax-normalized attention of one query over all keys.

    Returns:
        Probability distribution over keys (length N).
    """
    return softmax(compute_attention_scores(query, keys, scale_factor), temperature)


def attend(
    query: VectorLike,
    keys: MatrixLike,
    values: MatrixLike,
    scale_factor: float | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> AttentionResult:
    """Run scaled dot-product attention for a single query.

    Args:
        query: Query vector of length D.
        keys: Key vectors, shape (N, D).
        values: Value vectors, shape (N, D_v), one per key.
        scale_factor: Score divisor. Default ``sqrt(D)``.
        temperature: Softmax temperature.

    Returns:
        AttentionResult with scores, weights, and the weighted sum of values.

    Raises:
        InvalidInputError: If ``values`` doesn't have one row per key.
    """
    scores = compute_attention_scores(query, keys, scale_factor)
    weights = softmax(scores, temperature)
    return AttentionResult(
        scores=scores,
        weights=weights,
        output=weighted_sum(weights, values),
    )
