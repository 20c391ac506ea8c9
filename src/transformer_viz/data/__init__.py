"""Demonstration data for walkthroughs and tests."""

from transformer_viz.data.examples import (
    DEMO_ATTENTION_SCORES,
    EXAMPLE_EMBEDDINGS,
    EXAMPLE_LOGITS,
    EXAMPLE_TOKENS,
    Logit,
    Token,
    example_embedding_matrix,
    example_logit_values,
)

__all__ = [
    "Token",
    "Logit",
    "EXAMPLE_TOKENS",
    "EXAMPLE_EMBEDDINGS",
    "EXAMPLE_LOGITS",
    "DEMO_ATTENTION_SCORES",
    "example_embedding_matrix",
    "example_logit_values",
]
