import numpy as np
import pytest
from rowreduce.names import *


@pytest.fixture(params=[TOL, 1e-12], scope="session")
def tol(request: pytest.FixtureRequest) -> float:
    """Provide session-level fixture for zero thresholds."""
    return request.param


@pytest.fixture(params=[(2, 2), (3, 3), (4, 4), (2, 3), (3, 4), (4, 5), (3, 2), (5, 3), (2, 5)], scope="session")
def shape(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for square, augmented, tall and wide shapes."""
    return request.param


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator, fresh for every test."""
    return np.random.default_rng(seed=20250508)


def leading_columns(matrix) -> list:
    """Column index of the first nonzero entry of every row (None for zero rows)"""
    leads = []
    for row in np.asarray(matrix):
        nonzero = np.flatnonzero(row)
        leads.append(int(nonzero[0]) if nonzero.size else None)
    return leads


def is_row_echelon(matrix) -> bool:
    leads = leading_columns(matrix)
    seen_zero_row = False
    previous = -1
    for lead in leads:
        if lead is None:
            seen_zero_row = True
            continue
        if seen_zero_row or lead <= previous:
            return False
        previous = lead
    return True


def random_integer_matrix(rng: np.random.Generator, shape: tuple, low: int = -4, high: int = 5) -> np.ndarray:
    """Small integer entries; low ranges give plenty of singular and rank deficient matrices"""
    return rng.integers(low, high, size=shape).astype(float)


def random_invertible_matrix(rng: np.random.Generator, n: int) -> np.ndarray:
    """Uniform entries shifted towards diagonal dominance, invertible and well conditioned"""
    return rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)
