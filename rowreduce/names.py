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
"""Static strings and default constants used in the rowreduce package

    Operations

        GAUSSIAN_ELIMINATION = 'gaussian-elimination'

        GAUSS_JORDAN = 'gauss-jordan'

        RREF = 'rref'

        DETERMINANT = 'determinant'

        INVERSE = 'inverse'

    Step operation tags

        SWAP = 'swap'

        MULTIPLY = 'multiply'

        ADD = 'add'

    Numerical defaults

        TOL = 1e-10 # values below this magnitude are treated as zero

        FRACTION_TOL = 1e-6 # accepted error when rendering a value as p/q

        MAX_DENOMINATOR = 100 # largest denominator tried when rendering p/q

        DECIMALS = 4 # decimals used when no fraction fits
"""

# Operations
GAUSSIAN_ELIMINATION = 'gaussian-elimination'
GAUSS_JORDAN = 'gauss-jordan'
RREF = 'rref'
DETERMINANT = 'determinant'
INVERSE = 'inverse'

# Step operation tags
SWAP = 'swap'
MULTIPLY = 'multiply'
ADD = 'add'

# Numerical defaults
TOL = 1e-10
FRACTION_TOL = 1e-6
MAX_DENOMINATOR = 100
DECIMALS = 4
