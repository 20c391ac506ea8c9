"""Tests for vector primitives and boundary coercion."""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from transformer_viz.errors import DegenerateResultError, InvalidInputError
from transformer_viz.ops.vectors import (
    as_matrix,
    as_vector,
    dot_product,
    normalize,
    weighted_sum,
)


class TestAsVector:
    """Test conversion of inputs into float64 vectors."""

    def test_list_input(self):
        """Verify lists of ints become float64 arrays."""
        result = as_vector([1, 2, 3])
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_tensor_input(self):
        """Verify tensors are detached and converted."""
        tensor = torch.tensor([1.0, 2.0], requires_grad=True)
        result = as_vector(tensor)
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, [1.0, 2.0])

    def test_returns_copy(self):
        """Verify the result never aliases the caller's array."""
        source = np.array([1.0, 2.0])
        result = as_vector(source)
        result[0] = 99.0
        assert source[0] == 1.0

    def test_rejects_matrix(self):
        """Verify 2-D input is rejected."""
        with pytest.raises(InvalidInputError, match="1-D"):
            as_vector([[1.0, 2.0]], name="query")

    def test_rejects_infinite(self):
        """Verify Inf is rejected."""
        with pytest.raises(InvalidInputError, match="finite"):
            as_vector([1.0, float("inf")])

    def test_rejects_non_numeric(self):
        """Verify strings are rejected with an input error."""
        with pytest.raises(InvalidInputError, match="numeric"):
            as_vector(["a", "b"])


class TestAsMatrix:
    """Test conversion of inputs into float64 matrices."""

    def test_nested_lists(self):
        """Verify nested lists become a 2-D array."""
        assert as_matrix([[1, 0], [0, 1]]).shape == (2, 2)

    def test_rejects_vector(self):
        """Verify 1-D input is rejected."""
        with pytest.raises(InvalidInputError, match="2-D"):
            as_matrix([1.0, 2.0])

    def test_rejects_ragged(self):
        """Verify ragged rows are rejected."""
        with pytest.raises(InvalidInputError, match="rectangular"):
            as_matrix([[1.0, 2.0], [3.0]])


class TestDotProduct:
    """Test dot product."""

    def test_known_value(self):
        """Verify [1,2,3] . [4,5,6] == 32."""
        assert dot_product([1, 2, 3], [4, 5, 6]) == 32

    def test_returns_python_float(self):
        """Verify result is a plain float, not a numpy scalar."""
        assert type(dot_product([1.0], [2.0])) is float

    def test_orthogonal_vectors(self):
        """Verify orthogonal vectors give zero."""
        assert dot_product([1, 0], [0, 1]) == 0.0

    def test_symmetric(self, rng):
        """Verify a . b == b . a."""
        a, b = rng.normal(size=(2, 7))
        assert dot_product(a, b) == pytest.approx(dot_product(b, a))

    def test_empty_vectors(self):
        """Verify two empty vectors have dot product zero."""
        assert dot_product([], []) == 0.0

    def test_length_mismatch_raises(self):
        """Verify mismatched lengths are rejected instead of truncated."""
        with pytest.raises(InvalidInputError, match="same length: 3 != 2"):
            dot_product([1, 2, 3], [1, 2])


class TestNormalize:
    """Test normalization to unit length."""

    def test_known_value(self):
        """Verify [3, 4] normalizes to [0.6, 0.8]."""
        np.testing.assert_allclose(normalize([3, 4]), [0.6, 0.8])

    def test_unit_norm(self, rng):
        """Verify random vectors end up with norm 1."""
        vector = rng.normal(size=12) * 50
        assert np.linalg.norm(normalize(vector)) == pytest.approx(1.0)

    def test_preserves_direction(self):
        """Verify normalizing keeps signs and ratios."""
        np.testing.assert_allclose(normalize([-2.0, 0.0]), [-1.0, 0.0])

    def test_does_not_mutate_input(self):
        """Verify the caller's list is untouched."""
        vector = [3.0, 4.0]
        normalize(vector)
        assert vector == [3.0, 4.0]

    def test_huge_components_do_not_overflow(self):
        """Verify squaring 1e200 doesn't collapse the result to zeros."""
        result = normalize([1e200, 1e200])

        np.testing.assert_allclose(result, [math.sqrt(0.5), math.sqrt(0.5)])
        assert np.linalg.norm(result) == pytest.approx(1.0)

    def test_tiny_components_do_not_underflow(self):
        """Verify a tiny but non-zero vector still normalizes."""
        np.testing.assert_allclose(normalize([1e-200, 1e-200]), [math.sqrt(0.5), math.sqrt(0.5)])

    def test_subnormal_component(self):
        """Verify the smallest positive float normalizes to a unit axis."""
        np.testing.assert_array_equal(normalize([0.0, 5e-324]), [0.0, 1.0])

    def test_empty_vector_raises(self):
        """Verify an empty vector has no direction to normalize."""
        with pytest.raises(DegenerateResultError):
            normalize([])

    def test_zero_vector_raises(self):
        """Verify zero magnitude raises instead of returning NaN."""
        with pytest.raises(DegenerateResultError, match="zero-magnitude"):
            normalize([0.0, 0.0])


class TestWeightedSum:
    """Test weighted combination of value vectors."""

    def test_one_hot_selects_row(self):
        """Verify a one-hot weight vector returns that value row."""
        values = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        np.testing.assert_array_equal(weighted_sum([0.0, 1.0, 0.0], values), [3.0, 4.0])

    def test_uniform_weights_average(self):
        """Verify equal weights give the mean of the values."""
        values = np.array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_allclose(weighted_sum([0.5, 0.5], values), values.mean(axis=0))

    def test_count_mismatch_raises(self):
        """Verify one weight per value row is required."""
        with pytest.raises(InvalidInputError, match="one weight per value"):
            weighted_sum([1.0], [[1.0], [2.0]])
