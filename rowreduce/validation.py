#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Checks and conversion for matrices handed to the reduction functions"""

import numpy as np
from numpy.typing import NDArray

__all__ = ['as_matrix', 'validate_matrix', 'is_square_matrix', 'is_augmented_matrix']


def as_matrix(data) -> NDArray:
    """Convert a nested sequence (or array) to a 2-D float64 numpy array

    The result is always a new array, the input is never shared.

    Args:
        data (list of lists or numpy.ndarray):
            Rows of real numbers. All rows must have the same length.

    Returns:
        (numpy.ndarray):

            A (rows x cols) float64 array.

    Raises:
        ValueError: If the input is empty, ragged or not two-dimensional.
    """
    try:
        matrix = np.array(data, dtype=float, copy=True)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Matrix rows must be sequences of real numbers of equal length: {exc}") from exc
    if matrix.ndim != 2:
        raise ValueError(f"Matrix must be two-dimensional, got {matrix.ndim} dimension(s).")
    if matrix.size == 0:
        raise ValueError("Matrix must have at least one row and one column.")
    return matrix


def validate_matrix(data) -> bool:
    """Check if data is a non-empty rectangular matrix with finite entries"""
    try:
        matrix = as_matrix(data)
    except ValueError:
        return False
    return bool(np.all(np.isfinite(matrix)))


def is_square_matrix(matrix) -> bool:
    rows, cols = np.shape(as_matrix(matrix))
    return rows == cols


def is_augmented_matrix(matrix) -> bool:
    """Check if the matrix has the shape n x (n+1) of a linear system with constants column"""
    rows, cols = np.shape(as_matrix(matrix))
    return cols == rows + 1
