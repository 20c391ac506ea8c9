"""Numeric operations on vectors and score matrices.

- Vectors: Boundary coercion, dot product, normalization, weighted sum
- Softmax: Temperature softmax over vectors and score-matrix rows

Usage:
    >>> from transformer_viz.ops import softmax, dot_product
    >>> probs = softmax([3.2, 1.8, 1.5], temperature=0.5)
"""

from transformer_viz.ops.softmax import (
    SoftmaxBreakdown,
    softmax,
    softmax_breakdown,
    softmax_rows,
)
from transformer_viz.ops.vectors import (
    MatrixLike,
    VectorLike,
    as_matrix,
    as_vector,
    dot_product,
    normalize,
    weighted_sum,
)

__all__ = [
    # Vectors
    "VectorLike",
    "MatrixLike",
    "as_vector",
    "as_matrix",
    "dot_product",
    "normalize",
    "weighted_sum",
    # Softmax
    "SoftmaxBreakdown",
    "softmax",
    "softmax_rows",
    "softmax_breakdown",
]
