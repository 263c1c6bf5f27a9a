"""Dense two-dimensional matrix value type.

Every algebraic operation returns a new :class:`Matrix`; the only mutating
operation is :meth:`Matrix.set_value_at`, which touches a single cell.
"""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from . import _matrix
from .config import DEFAULT_DISPLAY, DEFAULT_FILL_VALUE, DisplayOptions
from .errors import IncompatibleDimensions, IndexOutOfBounds, InvalidDimension

LOGGER = logging.getLogger(__name__)

Number = _matrix.Number
T = TypeVar("T")


def _is_index(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_number(value: Any, row: int, col: int) -> Number:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"Matrix cells must be real numbers, got {type(value).__name__} at {{row: {row}, col: {col}}}"
        )
    return value


class Matrix:
    """A rectangular grid of numbers with bounds-checked access.

    Instances are created through :meth:`of_size`, :meth:`of_matrix`,
    :meth:`identity` or the constructor, which copies its source rows.
    ``rows`` and ``cols`` never change after construction.

    >>> m = Matrix.of_matrix([[1, 2, 3], [4, 5, 6]])
    >>> m.shape
    (2, 3)
    >>> m.transpose().to_list()
    [[1, 4], [2, 5], [3, 6]]
    """

    __slots__ = ("_m", "_rows", "_cols")

    def __init__(self, source: Sequence[Sequence[Number]]) -> None:
        grid = [list(row) for row in source]
        self._assign(grid)
        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                _check_number(value, y, x)

    def _assign(self, grid: _matrix.Grid) -> None:
        try:
            rows, cols = _matrix.ensure_rectangular(grid)
        except ValueError as exc:
            raise InvalidDimension(f"Matrix must be at least 1x1 and rectangular: {exc}") from exc
        self._m = grid
        self._rows = rows
        self._cols = cols

    @classmethod
    def _from_grid(cls, grid: _matrix.Grid) -> "Matrix":
        # Takes ownership of a freshly built grid of checked numbers.
        result = cls.__new__(cls)
        result._assign(grid)
        return result

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def of_size(cls, rows: int, cols: int) -> "Matrix":
        """Return a new ``rows x cols`` matrix filled with zeros."""

        if rows < 1 or cols < 1:
            raise InvalidDimension(f"Matrix must be at least 1x1, got {rows}x{cols}.")
        return cls._from_grid(_matrix.zeros(rows, cols, DEFAULT_FILL_VALUE))

    @classmethod
    def of_matrix(cls, source: Sequence[Sequence[Number]]) -> "Matrix":
        """Return a new matrix holding a copy of ``source``.

        Raises :class:`InvalidDimension` when ``source`` has no rows, its
        first row is empty, or its rows differ in length, and
        :class:`TypeError` when a cell is not a real number.
        """

        return cls(source)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Return the ``n x n`` identity matrix."""

        if n < 1:
            raise InvalidDimension(f"Identity matrix must be at least 1x1, got {n}x{n}.")
        return cls._from_grid(_matrix.identity(n))

    @staticmethod
    def have_same_dimensions(a: "Matrix", b: "Matrix") -> bool:
        return a.rows == b.rows and a.cols == b.cols

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def contains_index(self, row: int, col: int) -> bool:
        return _is_index(row) and _is_index(col) and 0 <= row < self._rows and 0 <= col < self._cols

    def _check_index(self, row: int, col: int) -> None:
        if not self.contains_index(row, col):
            raise IndexOutOfBounds(f"Matrix does not contain {{row: {row}, col: {col}}}")

    def value_at(self, row: int, col: int) -> Number:
        self._check_index(row, col)
        return self._m[row][col]

    def set_value_at(self, row: int, col: int, value: Number) -> None:
        """Overwrite a single cell in place."""

        self._check_index(row, col)
        self._m[row][col] = _check_number(value, row, col)

    def get_row(self, row: int) -> List[Number]:
        """Return a copy of the row at ``row``."""

        if not (_is_index(row) and 0 <= row < self._rows):
            raise IndexOutOfBounds(f"Matrix only contains {self._rows} rows, got index {row}.")
        return list(self._m[row])

    def get_col(self, col: int) -> List[Number]:
        """Return a copy of the column vector at ``col``."""

        if not (_is_index(col) and 0 <= col < self._cols):
            raise IndexOutOfBounds(f"Matrix only contains {self._cols} cols, got index {col}.")
        return [row[col] for row in self._m]

    def to_list(self) -> List[List[Number]]:
        return _matrix.clone(self._m)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def is_multipliable_with(self, that: "Matrix") -> bool:
        return self._cols == that.rows

    def _require_same_dimensions(self, that: "Matrix", operation: str) -> None:
        if not Matrix.have_same_dimensions(self, that):
            raise IncompatibleDimensions(
                f"Cannot {operation} a {self._rows}x{self._cols} matrix and a {that.rows}x{that.cols} matrix; "
                "dimensions must be equal."
            )

    def multiply(self, that: "Matrix") -> "Matrix":
        """Return the matrix product ``self * that``."""

        if not self.is_multipliable_with(that):
            raise IncompatibleDimensions(
                f"Cannot multiply a {self._rows}x{self._cols} matrix by a {that.rows}x{that.cols} matrix."
            )
        LOGGER.debug("Multiplying %dx%d by %dx%d", self._rows, self._cols, that.rows, that.cols)
        return Matrix._from_grid(_matrix.matmul(self._m, that._m))

    def hadamard_product(self, that: "Matrix") -> "Matrix":
        """Return the element-wise product of ``self`` and ``that``."""

        self._require_same_dimensions(that, "take the Hadamard product of")
        return Matrix._from_grid(_matrix.hadamard(self._m, that._m))

    def add(self, that: "Matrix") -> "Matrix":
        self._require_same_dimensions(that, "add")
        return Matrix._from_grid(_matrix.add(self._m, that._m))

    def subtract(self, that: "Matrix") -> "Matrix":
        """Return ``self - that`` element-wise."""

        self._require_same_dimensions(that, "subtract")
        return Matrix._from_grid(_matrix.subtract(self._m, that._m))

    def power(self, exponent: int) -> "Matrix":
        """Return ``self`` multiplied by itself ``exponent`` times.

        ``exponent == 0`` yields the identity of matching size.
        """

        if self._rows != self._cols:
            raise IncompatibleDimensions(
                f"Only square matrices can be raised to a power, got {self._rows}x{self._cols}."
            )
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        LOGGER.debug("Raising %dx%d matrix to power %d", self._rows, self._cols, exponent)
        return Matrix._from_grid(_matrix.matrix_power(self._m, exponent))

    def map(self, f: Callable[[Number, int, int], Number]) -> "Matrix":
        """Return a new matrix with ``f(element, row, col)`` applied to every cell.

        Cells are visited in row-major order. ``f`` must return a real number;
        anything else raises :class:`TypeError`.
        """

        return Matrix._from_grid(
            [[_check_number(f(value, y, x), y, x) for x, value in enumerate(row)] for y, row in enumerate(self._m)]
        )

    def reduce(self, f: Callable[[T, Number, int, int], T], initial: T) -> T:
        """Fold ``f(acc, element, row, col)`` over the cells in row-major order."""

        acc = initial
        for y, row in enumerate(self._m):
            for x, value in enumerate(row):
                acc = f(acc, value, y, x)
        return acc

    def transpose(self) -> "Matrix":
        return Matrix._from_grid(_matrix.transpose(self._m))

    def copy(self) -> "Matrix":
        """Return a deep copy backed by independent storage."""

        return Matrix._from_grid(_matrix.clone(self._m))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[List[Number]]:
        for row in self._m:
            yield list(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.have_same_dimensions(self, other) and self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def format(self, options: Optional[DisplayOptions] = None) -> str:
        """Render the matrix, abbreviating large dimensions with ``...``."""

        options = options or DEFAULT_DISPLAY
        edge = options.edge_items

        def _pick(count: int) -> List[Optional[int]]:
            if count <= 2 * edge:
                return list(range(count))
            return list(range(edge)) + [None] + list(range(count - edge, count))

        col_indices = _pick(self._cols)
        lines = []
        for y in _pick(self._rows):
            if y is None:
                lines.append("...")
                continue
            cells = ["..." if x is None else options.format_value(self._m[y][x]) for x in col_indices]
            lines.append("[" + ", ".join(cells) + "]")
        return "Matrix([" + ",\n        ".join(lines) + "])"

    def __repr__(self) -> str:
        return self.format()
