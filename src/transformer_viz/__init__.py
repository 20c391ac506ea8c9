"""Transformer Visualization Numeric Core.

Pure, stateless numeric utilities behind interactive explanations of
transformer attention.

Key modules:
- ops: Vector primitives and temperature softmax
- attention: Scaled dot-product attention scores and weights
- visualization: Weight-to-color mapping, number formatting, heatmaps
- data: Demonstration tokens, embeddings and logits
- config: Centralized defaults and color constants
"""

__version__ = "0.1.0"

# Re-export commonly used items for convenience
from transformer_viz.attention import (
    AttentionResult,
    attend,
    attention_weights,
    compute_attention_matrix,
    compute_attention_scores,
)
from transformer_viz.errors import DegenerateResultError, InvalidInputError
from transformer_viz.ops import dot_product, normalize, softmax, softmax_rows, weighted_sum
from transformer_viz.visualization import (
    format_number,
    format_percent,
    get_attention_color,
    interpolate_color,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "InvalidInputError",
    "DegenerateResultError",
    # Ops
    "softmax",
    "softmax_rows",
    "dot_product",
    "normalize",
    "weighted_sum",
    # Attention
    "AttentionResult",
    "compute_attention_scores",
    "compute_attention_matrix",
    "attention_weights",
    "attend",
    # Visualization
    "interpolate_color",
    "get_attention_color",
    "format_percent",
    "format_number",
]
