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
"""Text rendering of numbers, matrices and equations for step descriptions

Numbers are shown as integers, simple fractions or trimmed decimals, so that a
step reads 'Divide R1 by 3/2' instead of 'Divide R1 by 1.5000'. Formatting has
no influence on the numeric results.
"""

import math
from fractions import Fraction
from typing import List, Optional
import numpy as np
from rowreduce.names import TOL, FRACTION_TOL, MAX_DENOMINATOR, DECIMALS

__all__ = ['format_number', 'to_fraction', 'format_matrix', 'format_equation', 'format_result']


def to_fraction(value: float, fraction_tol: float = FRACTION_TOL, max_denominator: int = MAX_DENOMINATOR) -> Optional[str]:
    """Render a value as 'p/q' if a simple fraction matches it

    The closest fraction with a denominator of at most max_denominator is
    accepted if it lies within fraction_tol of the value. Since two such
    fractions are at least 1/max_denominator**2 apart, this is the same as
    trying all denominators in ascending order.

    Example:
        to_fraction(-0.333333333) -> '-1/3'

    Args:
        value (float):
            The number to render.

        fraction_tol (optional (float)):
            Accepted absolute error between value and p/q.

        max_denominator (optional (int)):
            Largest denominator q that is considered.

    Returns:
        (str or None):

            '0' for values closer to 0 than fraction_tol, 'p/q' (reduced, with
            a leading '-' for negative values) if a fraction fits, or None if no
            fraction fits or the best fit is an integer.
    """
    value = float(value)
    if not math.isfinite(value):
        return None
    if abs(value) < fraction_tol:
        return '0'
    fraction = Fraction(abs(value)).limit_denominator(max_denominator)
    if fraction.denominator == 1 or abs(abs(value) - fraction) >= fraction_tol:
        return None
    sign = '-' if value < 0 else ''
    return f"{sign}{fraction.numerator}/{fraction.denominator}"


def format_number(value: float,
                  decimals: int = DECIMALS,
                  tol: float = TOL,
                  fraction_tol: float = FRACTION_TOL,
                  max_denominator: int = MAX_DENOMINATOR) -> str:
    """Compact textual form of a float

    Integers (within tol) are printed without decimals, values close to a
    simple fraction as 'p/q', everything else as a fixed-point decimal with
    trailing zeros removed. Non-finite values print as 'nan', 'inf', '-inf'.

    Example:
        format_number(2.0) -> '2', format_number(0.5) -> '1/2',
        format_number(3.14159) -> '3.1416'
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    nearest = round(value)
    if abs(value - nearest) < tol:
        return str(int(nearest))
    fraction = to_fraction(value, fraction_tol, max_denominator)
    if fraction is not None:
        return fraction
    text = f"{value:.{decimals}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text


def format_matrix(matrix, decimals: int = 3, **kwargs) -> str:
    """Multi-line text rendering of a matrix with right-aligned columns

    Additional keyword arguments are passed on to format_number.
    """
    rows = np.atleast_2d(np.asarray(matrix, dtype=float))
    cells = [[format_number(v, decimals=decimals, **kwargs) for v in row] for row in rows]
    widths = [max(len(row[j]) for row in cells) for j in range(rows.shape[1])]
    return '\n'.join('[ ' + '  '.join(c.rjust(w) for c, w in zip(row, widths)) + ' ]' for row in cells)


def format_equation(coefficients, constant: float, variable: str = 'x', tol: float = TOL) -> str:
    """Render one row of a linear system, e.g. '2x1 - x2 = 3'

    Terms with a zero coefficient are left out, coefficients of magnitude 1
    are not printed.
    """
    terms = []
    for i, coef in enumerate(coefficients):
        if abs(coef) < tol:
            continue
        name = f"{variable}{i + 1}"
        magnitude = abs(coef)
        coef_str = '' if abs(magnitude - 1) < tol else format_number(magnitude, tol=tol)
        if not terms:
            terms.append(('-' if coef < 0 else '') + coef_str + name)
        else:
            terms.append(('- ' if coef < 0 else '+ ') + coef_str + name)
    lhs = ' '.join(terms) if terms else '0'
    return f"{lhs} = {format_number(constant, tol=tol)}"


def format_result(result, variable: str = 'x') -> str:
    """Final-answer summary of a SolutionResult as plain text"""
    lines: List[str] = []
    if result.solution is not None:
        for i, value in enumerate(result.solution):
            lines.append(f"{variable}{i + 1} = {format_number(value)}")
    if result.determinant is not None:
        lines.append(f"det = {format_number(result.determinant)}")
    if result.rank is not None:
        lines.append(f"rank = {result.rank}")
    lines.append('Final matrix:')
    lines.append(format_matrix(result.final_matrix))
    return '\n'.join(lines)
