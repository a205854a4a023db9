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
"""Elementary row operations and zero cleanup on dense float matrices

All functions in this module are pure: the matrix passed in is never modified,
a new numpy array is returned instead. Recorded step snapshots rely on this.
"""

import numpy as np
from numpy.typing import NDArray
from rowreduce.names import TOL

__all__ = [
    'copy_matrix', 'swap_rows', 'scale_row', 'add_scaled_row', 'clean_value', 'clean_matrix', 'identity', 'augment',
    'is_identity'
]


def copy_matrix(matrix) -> NDArray:
    """Independent float64 copy of a matrix (or nested sequence)."""
    return np.array(matrix, dtype=float, copy=True)


def swap_rows(matrix, i: int, j: int) -> NDArray:
    """Exchange rows i and j

    Args:
        matrix (numpy.ndarray):
            The matrix, left untouched.

        i, j (int):
            Row indices (0-based).

    Returns:
        (numpy.ndarray):

            A new matrix with rows i and j exchanged.
    """
    result = copy_matrix(matrix)
    result[[i, j]] = result[[j, i]]
    return result


def scale_row(matrix, i: int, k: float) -> NDArray:
    """Multiply every entry of row i by the scalar k"""
    result = copy_matrix(matrix)
    result[i] *= k
    return result


def add_scaled_row(matrix, target: int, source: int, k: float) -> NDArray:
    """Add k times the source row to the target row (target += k * source)"""
    result = copy_matrix(matrix)
    result[target] += k * result[source]
    return result


def clean_value(x: float, tol: float = TOL) -> float:
    """Snap values with a magnitude below tol to exactly 0"""
    if abs(x) < tol:
        return 0.0
    return x


def clean_matrix(matrix, tol: float = TOL) -> NDArray:
    """Element-wise clean_value on a copy of the matrix"""
    result = copy_matrix(matrix)
    result[np.abs(result) < tol] = 0.0
    return result


def identity(n: int) -> NDArray:
    return np.eye(n, dtype=float)


def augment(left, right) -> NDArray:
    """Place two matrices with equal row counts side by side: [left | right]"""
    return np.hstack([copy_matrix(left), copy_matrix(right)])


def is_identity(matrix, tol: float = TOL) -> bool:
    """Check if a square matrix equals the identity within tol

    Every diagonal entry must be within tol of 1 and every off-diagonal entry
    within tol of 0. Non-square matrices are never the identity.
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    return bool(np.all(np.abs(matrix - np.eye(matrix.shape[0])) < tol))
