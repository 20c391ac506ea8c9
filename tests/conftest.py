"""Shared pytest fixtures for transformer-viz tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pytest

from transformer_viz.data import DEMO_ATTENTION_SCORES, example_embedding_matrix

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so property-style tests are reproducible."""
    return np.random.default_rng(0)


@pytest.fixture
def embeddings() -> np.ndarray:
    """Demo token embeddings, shape (6, 4)."""
    return example_embedding_matrix()


@pytest.fixture
def demo_scores() -> np.ndarray:
    """Demo raw attention scores, shape (6, 6)."""
    return np.array(DEMO_ATTENTION_SCORES)


@pytest.fixture
def make_qkv(rng: np.random.Generator) -> Callable[..., tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """Factory for random query/keys/values."""

    def _make(
        num_keys: int = 5,
        dim: int = 8,
        value_dim: int = 3,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Create a random attention problem.

        Args:
            num_keys: Number of key/value pairs.
            dim: Query/key dimension.
            value_dim: Value vector dimension.

        Returns:
            (query of shape (dim,), keys of shape (num_keys, dim),
            values of shape (num_keys, value_dim)).
        """
        query = rng.normal(size=dim)
        keys = rng.normal(size=(num_keys, dim))
        values = rng.normal(size=(num_keys, value_dim))
        return query, keys, values

    return _make
