from __future__ import annotations

from random import Random

import pytest

from densematrix import Matrix


def random_grid(rows: int, cols: int, seed: int) -> list[list[float]]:
    rng = Random(seed)
    return [[rng.gauss(0.0, 1.0) for _ in range(cols)] for _ in range(rows)]


def random_int_grid(rows: int, cols: int, seed: int) -> list[list[int]]:
    rng = Random(seed)
    return [[rng.randint(-9, 9) for _ in range(cols)] for _ in range(rows)]


@pytest.fixture()
def two_by_three() -> Matrix:
    return Matrix.of_matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture()
def other_two_by_three() -> Matrix:
    return Matrix.of_matrix([[3, 4, 5], [5, 6, 7]])


@pytest.fixture()
def three_by_two() -> Matrix:
    return Matrix.of_matrix([[1, 2], [3, 4], [5, 6]])
