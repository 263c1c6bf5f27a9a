"""Light-weight list-of-lists helpers backing :class:`densematrix.Matrix`."""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

Number = Union[int, float]
Grid = List[List[Number]]


def ensure_rectangular(grid: Sequence[Sequence[Number]]) -> Tuple[int, int]:
    rows = len(grid)
    if rows == 0:
        raise ValueError("matrix must have at least one row")
    cols = len(grid[0])
    if cols == 0:
        raise ValueError("matrix must have at least one column")
    for index, row in enumerate(grid):
        if len(row) != cols:
            raise ValueError(f"row {index} has {len(row)} entries, expected {cols}")
    return rows, cols


def clone(grid: Sequence[Sequence[Number]]) -> Grid:
    return [list(row) for row in grid]


def zeros(rows: int, cols: int, fill: Number = 0) -> Grid:
    return [[fill for _ in range(cols)] for _ in range(rows)]


def identity(n: int) -> Grid:
    eye = zeros(n, n)
    for i in range(n):
        eye[i][i] = 1
    return eye


def _check_same_shape(left: Sequence[Sequence[Number]], right: Sequence[Sequence[Number]]) -> None:
    if len(left) != len(right) or len(left[0]) != len(right[0]):
        raise ValueError("matrix dimensions do not match")


def add(left: Sequence[Sequence[Number]], right: Sequence[Sequence[Number]]) -> Grid:
    _check_same_shape(left, right)
    return [[l_val + r_val for l_val, r_val in zip(l_row, r_row)] for l_row, r_row in zip(left, right)]


def subtract(left: Sequence[Sequence[Number]], right: Sequence[Sequence[Number]]) -> Grid:
    _check_same_shape(left, right)
    return [[l_val - r_val for l_val, r_val in zip(l_row, r_row)] for l_row, r_row in zip(left, right)]


def hadamard(left: Sequence[Sequence[Number]], right: Sequence[Sequence[Number]]) -> Grid:
    _check_same_shape(left, right)
    return [[l_val * r_val for l_val, r_val in zip(l_row, r_row)] for l_row, r_row in zip(left, right)]


def transpose(grid: Sequence[Sequence[Number]]) -> Grid:
    rows = len(grid)
    cols = len(grid[0])
    out = zeros(cols, rows)
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            out[x][y] = value
    return out


def matmul(left: Sequence[Sequence[Number]], right: Sequence[Sequence[Number]]) -> Grid:
    inner = len(left[0])
    if inner != len(right):
        raise ValueError("matrix dimensions do not align")
    columns = transpose(right)
    out = zeros(len(left), len(right[0]))
    for y, left_row in enumerate(left):
        out_row = out[y]
        for x, column in enumerate(columns):
            # Left to right from 0, one product at a time.
            total: Number = 0
            for left_value, right_value in zip(left_row, column):
                total += left_value * right_value
            out_row[x] = total
    return out


def matrix_power(grid: Sequence[Sequence[Number]], exponent: int) -> Grid:
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("matrix must be square")
    if exponent == 0:
        return identity(n)
    base = clone(grid)
    exp = exponent
    while not exp & 1:
        base = matmul(base, base)
        exp >>= 1
    result = clone(base)
    exp >>= 1
    while exp > 0:
        base = matmul(base, base)
        if exp & 1:
            result = matmul(result, base)
        exp >>= 1
    return result
