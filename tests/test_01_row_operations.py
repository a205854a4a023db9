"""Test elementary row operations and zero cleanup."""
import numpy as np
import pytest
from rowreduce.row_operations import *


@pytest.fixture
def matrix():
    return np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_copy_is_independent(matrix):
    clone = copy_matrix(matrix)
    clone[0, 0] = 99.0
    assert matrix[0, 0] == 1.0


def test_copy_converts_nested_lists():
    clone = copy_matrix([[1, 2], [3, 4]])
    assert clone.dtype == float
    assert clone.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_swap_rows(matrix):
    swapped = swap_rows(matrix, 0, 1)
    assert swapped.tolist() == [[4.0, 5.0, 6.0], [1.0, 2.0, 3.0]]
    assert matrix.tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_swap_row_with_itself(matrix):
    assert np.array_equal(swap_rows(matrix, 1, 1), matrix)


def test_scale_row(matrix):
    scaled = scale_row(matrix, 1, 0.5)
    assert scaled.tolist() == [[1.0, 2.0, 3.0], [2.0, 2.5, 3.0]]
    assert matrix[1, 0] == 4.0


def test_add_scaled_row(matrix):
    result = add_scaled_row(matrix, 1, 0, -4.0)
    assert result.tolist() == [[1.0, 2.0, 3.0], [0.0, -3.0, -6.0]]
    assert matrix[1].tolist() == [4.0, 5.0, 6.0]


def test_out_of_range_row_fails_fast(matrix):
    with pytest.raises(IndexError):
        swap_rows(matrix, 0, 2)
    with pytest.raises(IndexError):
        scale_row(matrix, 5, 2.0)


def test_clean_value_boundary():
    assert clean_value(9.99e-11) == 0.0
    assert clean_value(-9.99e-11) == 0.0
    assert clean_value(1e-10) == 1e-10
    assert clean_value(-3.5) == -3.5
    assert clean_value(1e-7, tol=1e-6) == 0.0
    assert clean_value(1e-7, tol=1e-8) == 1e-7


def test_clean_value_keeps_nan():
    assert np.isnan(clean_value(float('nan')))


def test_clean_matrix():
    dirty = np.array([[1.0, 1e-16], [-2e-11, 0.3]])
    cleaned = clean_matrix(dirty)
    assert cleaned.tolist() == [[1.0, 0.0], [0.0, 0.3]]
    assert dirty[0, 1] == 1e-16


def test_identity_and_augment():
    aug = augment([[2.0, 1.0], [1.0, 3.0]], identity(2))
    assert aug.shape == (2, 4)
    assert aug.tolist() == [[2.0, 1.0, 1.0, 0.0], [1.0, 3.0, 0.0, 1.0]]


def test_is_identity():
    assert is_identity(np.eye(3))
    assert is_identity([[1.0, 1e-12], [0.0, 1.0 - 1e-12]])
    assert not is_identity([[1.0, 2.0], [0.0, 0.0]])
    assert not is_identity([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    assert not is_identity([[1.0, 1e-9], [0.0, 1.0]])
    assert is_identity([[1.0, 1e-9], [0.0, 1.0]], tol=1e-8)
