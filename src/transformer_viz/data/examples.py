"""Demonstration data for attention and softmax walkthroughs.

The running example is the question "Welche Farbe hat der Himmel?"
("What color is the sky?"), tokenized into six tokens with toy
4-dimensional embeddings, plus candidate next-word logits.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Token:
    """A token in the demo sentence.

    Attributes:
        token: Surface text.
        id: 1-based position identifier.
    """

    token: str
    id: int


@dataclass(frozen=True)
class Logit:
    """A candidate next word and its raw score."""

    word: str
    logit: float


EXAMPLE_TOKENS: tuple[Token, ...] = (
    Token("Welche", 1),
    Token("Farbe", 2),
    Token("hat", 3),
    Token("der", 4),
    Token("Himmel", 5),
    Token("?", 6),
)

# Simplified 4-dimensional embeddings
EXAMPLE_EMBEDDINGS: dict[str, tuple[float, ...]] = {
    "Welche": (0.2, -0.5, 0.8, -0.3),
    "Farbe": (0.7, 0.3, -0.2, 0.9),
    "hat": (-0.1, 0.4, 0.2, -0.6),
    "der": (0.0, -0.2, 0.1, 0.3),
    "Himmel": (0.9, 0.6, 0.4, -0.1),
    "?": (-0.4, 0.1, -0.3, 0.2),
}

# Next-word candidates after "Der Himmel ist ..."
EXAMPLE_LOGITS: tuple[Logit, ...] = (
    Logit("blau", 3.2),
    Logit("grau", 1.8),
    Logit("bewölkt", 1.5),
    Logit("klar", 1.2),
    Logit("rot", 0.8),
    Logit("grün", 0.3),
)

# Hand-picked raw scores for the heatmap demo (rows/cols follow EXAMPLE_TOKENS).
# "Farbe" and "Himmel" attend strongly to each other.
DEMO_ATTENTION_SCORES: tuple[tuple[float, ...], ...] = (
    (1.2, 0.8, 0.3, 0.1, 0.6, 0.2),  # Welche
    (0.4, 1.5, 0.2, 0.3, 1.8, 0.1),  # Farbe
    (0.2, 0.4, 1.0, 0.8, 0.3, 0.2),  # hat
    (0.1, 0.2, 0.6, 1.2, 0.4, 0.1),  # der
    (0.3, 1.2, 0.2, 0.5, 1.4, 0.2),  # Himmel
    (0.5, 0.3, 0.4, 0.2, 0.3, 0.8),  # ?
)


def example_embedding_matrix() -> np.ndarray:
    """Stack the example embeddings in token order.

    Returns:
        Array of shape (6, 4), row i is the embedding of EXAMPLE_TOKENS[i].
    """
    return np.array([EXAMPLE_EMBEDDINGS[t.token] for t in EXAMPLE_TOKENS], dtype=np.float64)


def example_logit_values() -> np.ndarray:
    """Logit values of EXAMPLE_LOGITS, in order."""
    return np.array([item.logit for item in EXAMPLE_LOGITS], dtype=np.float64)
