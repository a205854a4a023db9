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
"""Containers for the step trace and the result of a row reduction"""

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple
import numpy as np
from numpy.typing import NDArray
from rowreduce.formatting import format_matrix, format_result

__all__ = ['Step', 'SolutionResult', 'ReductionResult', 'StepTrace']

LOG = logging.getLogger(__name__)


def _snapshot(matrix) -> NDArray:
    """Read-only copy of the matrix as it is right now"""
    snapshot = np.array(matrix, dtype=float, copy=True)
    snapshot.setflags(write=False)
    return snapshot


@dataclass(frozen=True, eq=False)
class Step:
    """One entry of the step trace

    Args:
        description (str):
            Human-readable explanation, e.g. 'Swap R1 and R2'.

        matrix (numpy.ndarray):
            Read-only snapshot of the working matrix after this step.

        highlighted_rows (tuple of int):
            0-based indices of the rows the step touched.

        operation (optional (str)):
            SWAP, MULTIPLY or ADD for elementary row operations, None for
            purely descriptive steps.
    """
    description: str
    matrix: NDArray
    highlighted_rows: Tuple[int, ...] = ()
    operation: Optional[str] = None

    def __str__(self) -> str:
        return self.description + '\n' + format_matrix(self.matrix)


@dataclass(eq=False)
class SolutionResult:
    """Final answer of a row reduction

    Args:
        final_matrix (numpy.ndarray):
            The reduced matrix, the inverse, or the input when an operation
            could not be carried out.

        solution (optional (numpy.ndarray)):
            One value per variable. Only set for augmented systems (n x n+1).

        determinant (optional (float)):
            Only set by the determinant operation, nan for non-square input.

        rank (optional (int)):
            Number of pivots found by Gaussian or Gauss-Jordan elimination.
    """
    final_matrix: NDArray
    solution: Optional[NDArray] = None
    determinant: Optional[float] = None
    rank: Optional[int] = None

    def __str__(self) -> str:
        return format_result(self)


class ReductionResult(NamedTuple):
    steps: List[Step]
    result: SolutionResult


@dataclass
class StepTrace:
    """Append-only list of steps with snapshot copies

    Each recorded matrix is copied and frozen, so the working matrix can
    continue to change without affecting earlier steps.
    """
    steps: List[Step] = field(default_factory=list)

    def record(self, description: str, matrix, rows=(), operation: Optional[str] = None) -> Step:
        step = Step(description=description,
                    matrix=_snapshot(matrix),
                    highlighted_rows=tuple(int(r) for r in rows),
                    operation=operation)
        self.steps.append(step)
        LOG.debug('Step %d: %s\n%s', len(self.steps), description, format_matrix(step.matrix))
        return step
