"""Scaled dot-product attention.

Usage:
    >>> from transformer_viz.attention import compute_attention_scores, attend
    >>> scores = compute_attention_scores(query, keys)
    >>> result = attend(query, keys, values)
    >>> result.weights.sum()
    1.0
"""

from transformer_viz.attention.scores import (
    AttentionResult,
    attend,
    attention_weights,
    compute_attention_matrix,
    compute_attention_scores,
)

__all__ = [
    "AttentionResult",
    "compute_attention_scores",
    "compute_attention_matrix",
    "attention_weights",
    "attend",
]
