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
"""Row reduction with a step trace: REF, RREF, determinant and inverse

Every algorithm works on a private float copy of the input, records a Step
after each change of the working matrix and returns a ReductionResult
(steps, result). Failures such as a non-square or singular matrix do not
raise; they are described in the trace and signalled through the result
(nan determinant, final matrix that is not an inverse).

Example:
    steps, result = gauss_jordan([[1, 2, 4], [3, 4, 10]])
    result.solution  # array([2., 1.])
"""

import logging
from typing import Tuple
import numpy as np
from numpy.typing import NDArray
from rowreduce.names import TOL, SWAP, MULTIPLY, ADD
from rowreduce.row_operations import swap_rows, scale_row, add_scaled_row, clean_value, clean_matrix, identity, \
                                     augment, is_identity
from rowreduce.steps import StepTrace, SolutionResult, ReductionResult
from rowreduce.formatting import format_number, format_equation
from rowreduce.validation import as_matrix

__all__ = ['RowReducer', 'gaussian_elimination', 'gauss_jordan', 'calculate_determinant', 'calculate_inverse']

LOG = logging.getLogger(__name__)


def _row(i: int) -> str:
    return f"R{i + 1}"


def _rows_label(start: int, stop: int) -> str:
    """'R2' or 'R2-R4' for the 0-based range [start, stop)"""
    if stop - start <= 1:
        return _row(start)
    return f"{_row(start)}-{_row(stop - 1)}"


class RowReducer:
    """Gaussian and Gauss-Jordan elimination with partial pivoting

    The tolerance decides when a value counts as zero: pivot candidates with a
    smaller magnitude are rejected, and after every row operation all entries
    below the tolerance are set to exactly 0.

    Args:
        tol (optional (float)):
            Zero threshold, 1e-10 by default.
    """

    _default_instance = None

    def __init__(self, tol: float = TOL):
        if tol < 0:
            raise ValueError(f"Tolerance must not be negative, got {tol}.")
        self.tol = tol

    @classmethod
    def get_default_instance(cls) -> 'RowReducer':
        """Shared instance using the default tolerance"""
        if cls._default_instance is None:
            cls._default_instance = cls(TOL)
        return cls._default_instance

    # Core operations
    def gaussian_elimination(self, matrix) -> ReductionResult:
        """Reduce a matrix to row echelon form

        Columns are processed from left to right. In each column the row with
        the largest magnitude (at or below the current row) becomes the pivot,
        is swapped into place and scaled to 1, and the entries below it are
        eliminated. Columns without a nonzero candidate are skipped. For an
        augmented system (n x n+1) the solution is obtained by
        back-substitution.

        Args:
            matrix (list of lists or numpy.ndarray):
                Any rectangular matrix.

        Returns:
            (ReductionResult):

                Step trace and a SolutionResult with the echelon matrix, the rank
                and, for augmented systems, the solution vector.
        """
        matrix = as_matrix(matrix)
        n, m = matrix.shape
        augmented = m == n + 1
        LOG.info('Gaussian elimination on a %dx%d matrix.', n, m)
        trace = StepTrace()
        description = 'Starting matrix'
        if augmented:
            description += ' (system: ' + '; '.join(
                format_equation(row[:-1], row[-1], tol=self.tol) for row in matrix) + ')'
        trace.record(description, matrix)
        matrix = self._clean(matrix)

        current_row = 0
        for col in range(m):
            if current_row >= n:
                break
            pivot_row = self._find_pivot_row(matrix, current_row, col)
            if self._is_zero(matrix[pivot_row, col]):
                trace.record(
                    f"Column {col + 1} is zero in {_rows_label(current_row, n)}, no pivot: skip to the next column",
                    matrix,
                    rows=range(current_row, n))
                continue
            if pivot_row != current_row:
                matrix = self._swap(matrix, trace, current_row, pivot_row)
            matrix = self._normalize(matrix, trace, current_row, col)
            for row in range(current_row + 1, n):
                if not self._is_zero(matrix[row, col]):
                    matrix = self._eliminate(matrix, trace, row, current_row, col)
            current_row += 1

        trace.record('Row echelon form achieved', matrix)
        solution = self._back_substitute(matrix, trace) if augmented else None
        return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix, solution=solution, rank=current_row))

    def gauss_jordan(self, matrix) -> ReductionResult:
        """Reduce a matrix to reduced row echelon form

        Like Gaussian elimination, but the pivot column is cleared in every
        other row, above and below the pivot. For an augmented system
        (n x n+1) the last column of the result is the solution vector.

        Args:
            matrix (list of lists or numpy.ndarray):
                Any rectangular matrix.

        Returns:
            (ReductionResult):

                Step trace and a SolutionResult with the RREF matrix, the rank
                and, for augmented systems, the solution vector.
        """
        matrix = as_matrix(matrix)
        n, m = matrix.shape
        LOG.info('Gauss-Jordan elimination on a %dx%d matrix.', n, m)
        trace = StepTrace()
        trace.record('Starting matrix', matrix)
        matrix, rank = self._reduce_to_rref(self._clean(matrix), trace)
        trace.record('Reduced row echelon form achieved', matrix)
        solution = None
        if m == n + 1:
            coefficient_rank = int(np.count_nonzero(matrix[:, :-1].any(axis=1)))
            if coefficient_rank < n:
                LOG.warning('Coefficient matrix has rank %d < %d, the last column is not a unique solution.',
                            coefficient_rank, n)
            solution = matrix[:, -1].copy()
            values = ', '.join(f"x{i + 1} = {format_number(v, tol=self.tol)}" for i, v in enumerate(solution))
            trace.record(f"Solution read from the last column: {values}", matrix, rows=range(n))
        return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix, solution=solution, rank=rank))

    def determinant(self, matrix) -> ReductionResult:
        """Determinant by reduction to upper triangular form

        Row swaps negate the determinant, adding a multiple of one row to
        another leaves it unchanged, so the determinant is the signed product of
        the pivots. This takes O(n^3) operations instead of the O(n!) of
        cofactor expansion. A column without a nonzero pivot ends the
        computation early with a determinant of 0.

        Args:
            matrix (list of lists or numpy.ndarray):
                A square matrix.

        Returns:
            (ReductionResult):

                Step trace and a SolutionResult whose determinant is nan if the
                matrix is not square.
        """
        matrix = as_matrix(matrix)
        n, m = matrix.shape
        trace = StepTrace()
        if n != m:
            LOG.warning('Determinant of a non-square %dx%d matrix requested.', n, m)
            trace.record(f"The determinant is only defined for square matrices, this matrix is {n}x{m}: "
                         "the matrix must be square", matrix)
            return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix, determinant=float('nan')))
        LOG.info('Determinant of a %dx%d matrix.', n, n)
        trace.record('Starting matrix', matrix)
        matrix = self._clean(matrix)

        det = 1.0
        for col in range(n):
            pivot_row = self._find_pivot_row(matrix, col, col)
            if self._is_zero(matrix[pivot_row, col]):
                LOG.warning('Matrix is singular, no pivot in column %d.', col + 1)
                trace.record(
                    f"Column {col + 1} is zero in {_rows_label(col, n)}, no pivot: "
                    "the matrix is singular, det = 0",
                    matrix,
                    rows=range(col, n))
                return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix, determinant=0.0))
            if pivot_row != col:
                matrix = self._swap(matrix, trace, col, pivot_row, note=' (the determinant changes sign)')
                det = -det
            pivot = matrix[col, col]
            det *= pivot
            trace.record(
                f"Pivot {format_number(pivot, tol=self.tol)} in column {col + 1}: "
                f"running product det = {format_number(det, tol=self.tol)}",
                matrix,
                rows=(col,))
            for row in range(col + 1, n):
                if not self._is_zero(matrix[row, col]):
                    matrix = self._eliminate(matrix, trace, row, col, col, note=' (determinant unchanged)')

        det = float(clean_value(det, self.tol))
        trace.record(f"det = signed product of the diagonal = {format_number(det, tol=self.tol)}",
                     matrix,
                     rows=range(n))
        return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix, determinant=det))

    def inverse(self, matrix) -> ReductionResult:
        """Inverse by Gauss-Jordan elimination of [A | I]

        The augmented matrix is reduced with the same routine as gauss_jordan.
        If the left half becomes the identity, the right half is the inverse.
        Otherwise the matrix is singular and the reduced left half is returned as
        final matrix; callers must check it with is_identity before using the
        result as an inverse.

        Args:
            matrix (list of lists or numpy.ndarray):
                A square matrix.

        Returns:
            (ReductionResult):

                Step trace and a SolutionResult whose final matrix is the
                inverse, the reduced left half (singular input) or the unchanged
                input (non-square input).
        """
        matrix = as_matrix(matrix)
        n, m = matrix.shape
        trace = StepTrace()
        if n != m:
            LOG.warning('Inverse of a non-square %dx%d matrix requested.', n, m)
            trace.record(f"Only square matrices have an inverse, this matrix is {n}x{m}: "
                         "the matrix must be square", matrix)
            return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix))
        LOG.info('Inverse of a %dx%d matrix.', n, n)
        aug = augment(matrix, identity(n))
        trace.record(f"Augment the matrix with the {n}x{n} identity: [A | I]", aug)
        aug, _ = self._reduce_to_rref(self._clean(aug), trace)
        trace.record('Reduced row echelon form achieved', aug)

        left = aug[:, :n].copy()
        if not is_identity(left, self.tol):
            LOG.warning('Matrix is singular and not invertible.')
            trace.record('The left half did not reduce to the identity: the matrix is not invertible', aug)
            return ReductionResult(trace.steps, SolutionResult(final_matrix=left))
        inv = aug[:, n:].copy()
        trace.record('The left half is the identity, so the right half is the inverse: inverse found', inv)
        return ReductionResult(trace.steps, SolutionResult(final_matrix=inv))

    # Helpers
    def _is_zero(self, value: float) -> bool:
        return abs(value) < self.tol

    def _clean(self, matrix) -> NDArray:
        return clean_matrix(matrix, self.tol)

    def _find_pivot_row(self, matrix: NDArray, start_row: int, col: int) -> int:
        """Row with the largest magnitude in col among rows start_row..n-1 (first one on ties)"""
        return start_row + int(np.argmax(np.abs(matrix[start_row:, col])))

    def _reduce_to_rref(self, matrix: NDArray, trace: StepTrace) -> Tuple[NDArray, int]:
        """Gauss-Jordan sweep, recording into trace. Returns the reduced matrix and its rank."""
        n, m = matrix.shape
        lead = 0
        rank = 0
        for r in range(n):
            if lead >= m:
                break
            pivot_row = self._find_pivot_row(matrix, r, lead)
            while self._is_zero(matrix[pivot_row, lead]):
                trace.record(f"Column {lead + 1} is zero in {_rows_label(r, n)}, no pivot: skip to the next column",
                             matrix,
                             rows=range(r, n))
                lead += 1
                if lead >= m:
                    break
                pivot_row = self._find_pivot_row(matrix, r, lead)
            if lead >= m:
                break
            if pivot_row != r:
                matrix = self._swap(matrix, trace, r, pivot_row)
            matrix = self._normalize(matrix, trace, r, lead)
            for row in range(n):
                if row != r and not self._is_zero(matrix[row, lead]):
                    matrix = self._eliminate(matrix, trace, row, r, lead)
            lead += 1
            rank += 1
        return matrix, rank

    def _swap(self, matrix: NDArray, trace: StepTrace, i: int, j: int, note: str = '') -> NDArray:
        matrix = self._clean(swap_rows(matrix, i, j))
        trace.record(f"Swap {_row(i)} and {_row(j)}{note}", matrix, rows=(i, j), operation=SWAP)
        return matrix

    def _normalize(self, matrix: NDArray, trace: StepTrace, row: int, col: int) -> NDArray:
        """Scale row so that its entry in col becomes exactly 1 (no step if it is 1 within tol)"""
        pivot = matrix[row, col]
        if abs(pivot - 1) < self.tol:
            matrix = matrix.copy()
            matrix[row, col] = 1.0
            return matrix
        matrix = self._clean(scale_row(matrix, row, 1.0 / pivot))
        matrix[row, col] = 1.0
        trace.record(f"Divide {_row(row)} by {format_number(pivot, tol=self.tol)} to make the pivot 1",
                     matrix,
                     rows=(row,),
                     operation=MULTIPLY)
        return matrix

    def _eliminate(self, matrix: NDArray, trace: StepTrace, target: int, source: int, col: int,
                   note: str = '') -> NDArray:
        """Subtract the multiple of the source row that zeroes the target row in col"""
        factor = matrix[target, col] / matrix[source, col]
        matrix = self._clean(add_scaled_row(matrix, target, source, -factor))
        matrix[target, col] = 0.0
        magnitude = abs(factor)
        coef = '' if abs(magnitude - 1) < self.tol else format_number(magnitude, tol=self.tol) + ' * '
        sign = '-' if factor > 0 else '+'
        trace.record(f"{_row(target)} = {_row(target)} {sign} {coef}{_row(source)}{note}",
                     matrix,
                     rows=(source, target),
                     operation=ADD)
        return matrix

    def _back_substitute(self, matrix: NDArray, trace: StepTrace) -> NDArray:
        """Solve an augmented upper triangular system from the last row upward

        A zero diagonal entry is not trapped: the division yields inf or nan,
        which propagates into the solution, and a warning is logged.
        """
        n = matrix.shape[0]
        solution = np.zeros(n)
        with np.errstate(divide='ignore', invalid='ignore'):
            for i in range(n - 1, -1, -1):
                known = np.dot(matrix[i, i + 1:n], solution[i + 1:])
                pivot = matrix[i, i]
                value = (matrix[i, -1] - known) / pivot
                if self._is_zero(pivot):
                    LOG.warning('Zero pivot in back-substitution for x%d, the solution is not unique or does not exist.',
                                i + 1)
                solution[i] = clean_value(value, self.tol)
                trace.record(
                    f"Back-substitution in {_row(i)}: x{i + 1} = ({format_number(matrix[i, -1], tol=self.tol)} - "
                    f"{format_number(known, tol=self.tol)}) / {format_number(pivot, tol=self.tol)} = "
                    f"{format_number(solution[i], tol=self.tol)}",
                    matrix,
                    rows=(i,))
        return solution


def _reducer(tol: float) -> RowReducer:
    if tol == TOL:
        return RowReducer.get_default_instance()
    return RowReducer(tol)


def gaussian_elimination(matrix, tol: float = TOL) -> ReductionResult:
    """Row echelon form with step trace, see RowReducer.gaussian_elimination"""
    return _reducer(tol).gaussian_elimination(matrix)


def gauss_jordan(matrix, tol: float = TOL) -> ReductionResult:
    """Reduced row echelon form with step trace, see RowReducer.gauss_jordan"""
    return _reducer(tol).gauss_jordan(matrix)


def calculate_determinant(matrix, tol: float = TOL) -> ReductionResult:
    """Determinant by row reduction with step trace, see RowReducer.determinant"""
    return _reducer(tol).determinant(matrix)


def calculate_inverse(matrix, tol: float = TOL) -> ReductionResult:
    """Inverse by augmented Gauss-Jordan with step trace, see RowReducer.inverse"""
    return _reducer(tol).inverse(matrix)
