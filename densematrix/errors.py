"""Exceptions raised by :mod:`densematrix`."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for every error raised by the matrix type."""


class InvalidDimension(MatrixError, ValueError):
    """Raised when a matrix would have zero rows, zero columns or jagged rows."""


class IndexOutOfBounds(MatrixError, IndexError):
    """Raised when a row or column index falls outside the matrix."""


class IncompatibleDimensions(MatrixError, ValueError):
    """Raised when operand shapes do not satisfy an operation."""
