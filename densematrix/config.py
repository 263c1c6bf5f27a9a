"""Defaults shared by the matrix type and its textual representation.

The module centralises defaults to keep them consistent between the library
and its tests.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FILL_VALUE = 0
DEFAULT_EDGE_ITEMS = 3
DEFAULT_PRECISION: int | None = None


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Formatting parameters for ``Matrix.format`` and ``repr``.

    Parameters
    ----------
    edge_items:
        Number of leading and trailing rows (and columns) printed before the
        middle of a large matrix collapses to ``...``. A dimension is only
        abbreviated when it exceeds ``2 * edge_items``.
    precision:
        Digits after the decimal point for float cells. ``None`` prints cells
        with ``repr``.
    """

    edge_items: int = DEFAULT_EDGE_ITEMS
    precision: int | None = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if self.edge_items < 1:
            raise ValueError("edge_items must be >= 1")
        if self.precision is not None and self.precision < 0:
            raise ValueError("precision must be non-negative")

    def describe(self) -> str:
        """Return a human readable description.

        >>> DisplayOptions().describe()
        'edge_items=3 precision=repr'
        >>> DisplayOptions(edge_items=2, precision=4).describe()
        'edge_items=2 precision=4'
        """

        precision = "repr" if self.precision is None else str(self.precision)
        return f"edge_items={self.edge_items} precision={precision}"

    def format_value(self, value: float) -> str:
        if self.precision is not None and isinstance(value, float):
            return f"{value:.{self.precision}f}"
        return repr(value)


DEFAULT_DISPLAY = DisplayOptions()
