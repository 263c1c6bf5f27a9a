"""Dense matrix value type with bounds-checked access and copy-producing algebra."""

import logging as _logging

from .config import DEFAULT_DISPLAY, DisplayOptions
from .errors import IncompatibleDimensions, IndexOutOfBounds, InvalidDimension, MatrixError
from .matrix import Matrix

__all__ = [
    "Matrix",
    "MatrixError",
    "InvalidDimension",
    "IndexOutOfBounds",
    "IncompatibleDimensions",
    "DisplayOptions",
    "DEFAULT_DISPLAY",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
