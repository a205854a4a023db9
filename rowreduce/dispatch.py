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
"""Select a row reduction by its (user supplied) operation name"""

import logging
from typing import List, Optional
from rowreduce.names import *
from rowreduce.reduction import gaussian_elimination, gauss_jordan, calculate_determinant, calculate_inverse
from rowreduce.steps import Step, StepTrace, SolutionResult, ReductionResult
from rowreduce.validation import as_matrix

__all__ = ['OPERATIONS', 'normalize_operation', 'solve', 'generate_steps']

LOG = logging.getLogger(__name__)

# accepted spellings (lower case) and the canonical operation name
OPERATIONS = {
    'gaussian elimination': GAUSSIAN_ELIMINATION,
    GAUSSIAN_ELIMINATION: GAUSSIAN_ELIMINATION,
    GAUSS_JORDAN: GAUSS_JORDAN,
    RREF: GAUSS_JORDAN,
    DETERMINANT: DETERMINANT,
    INVERSE: INVERSE,
}

_ENGINE = {
    GAUSSIAN_ELIMINATION: gaussian_elimination,
    GAUSS_JORDAN: gauss_jordan,
    DETERMINANT: calculate_determinant,
    INVERSE: calculate_inverse,
}


def normalize_operation(operation: str) -> Optional[str]:
    """Canonical operation name for a user supplied one

    Matching ignores case and surrounding whitespace.

    Example:
        normalize_operation(' RREF ') -> 'gauss-jordan'

    Args:
        operation (str):
            One of 'gaussian elimination', 'gaussian-elimination', 'gauss-jordan',
            'rref', 'determinant', 'inverse' (any case).

    Returns:
        (str or None):

            GAUSSIAN_ELIMINATION, GAUSS_JORDAN, DETERMINANT or INVERSE, or None
            for an unknown name.
    """
    if not isinstance(operation, str):
        return None
    return OPERATIONS.get(operation.strip().lower())


def solve(matrix, operation: str, tol: float = TOL) -> ReductionResult:
    """Run the row reduction selected by name

    Unknown operation names do not raise. The result then holds a single
    placeholder step and the input as final matrix, and no computation is done.

    Args:
        matrix (list of lists or numpy.ndarray):
            The input matrix.

        operation (str):
            Operation name, see normalize_operation.

        tol (optional (float)):
            Zero threshold for the reduction.

    Returns:
        (ReductionResult):

            Steps and result of the selected operation.
    """
    canonical = normalize_operation(operation)
    if canonical is None:
        LOG.warning(f"Unknown operation '{operation}'. Accepted: {', '.join(OPERATIONS)}.")
        matrix = as_matrix(matrix)
        trace = StepTrace()
        trace.record('Operation not yet implemented', matrix)
        return ReductionResult(trace.steps, SolutionResult(final_matrix=matrix))
    return _ENGINE[canonical](matrix, tol=tol)


def generate_steps(matrix, operation: str, tol: float = TOL) -> List[Step]:
    """Only the step trace of solve()"""
    return solve(matrix, operation, tol=tol).steps
