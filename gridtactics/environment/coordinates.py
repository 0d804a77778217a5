"""Grid coordinates for square tactical grids.

Origin is the top-left cell. ``row`` grows downward and ``col`` grows to the
right. Every coordinate maps to a unique linear index ``row * dimension + col``
(row-major), which is how the reachability search addresses cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple


class OutOfBoundsError(ValueError):
    """Raised when a coordinate lies outside the grid it is used with."""


@dataclass(frozen=True, order=True)
class GridCoordinate:
    """A (row, col) cell location.

    No bounds checking happens at construction: a coordinate only gains a
    meaning once it is paired with a grid dimension. Callers keep both
    components inside ``[0, dimension)`` before asking for a linear index.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Grid coordinates must be non-negative: ({self.row}, {self.col})")

    @classmethod
    def from_linear_index(cls, index: int, dimension: int) -> "GridCoordinate":
        """Inverse of ``to_linear_index`` for any index in ``[0, dimension**2)``."""
        return cls(index // dimension, index % dimension)

    def to_linear_index(self, dimension: int) -> int:
        # Unchecked: out-of-range components alias onto other cells.
        return self.row * dimension + self.col

    def in_bounds(self, dimension: int) -> bool:
        return self.row < dimension and self.col < dimension

    def manhattan_distance(self, other: "GridCoordinate") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def coerce(cls, value: Any) -> "GridCoordinate":
        """Build a coordinate from the shapes used in level files and call sites.

        Accepts an existing ``GridCoordinate``, a ``(row, col)`` tuple or list,
        or a ``{"row": int, "col": int}`` mapping. Components must be ``int``.

        Raises:
            TypeError: If ``value`` has none of the accepted shapes
                or a component is not an integer
        """
        if isinstance(value, GridCoordinate):
            return value
        if isinstance(value, Mapping) and "row" in value and "col" in value:
            return cls._from_components(value["row"], value["col"], value)
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls._from_components(value[0], value[1], value)
        raise TypeError(f"Cannot interpret {value!r} as a grid coordinate")

    @classmethod
    def _from_components(cls, row: Any, col: Any, value: Any) -> "GridCoordinate":
        # Floats or digit strings would silently land on a different cell.
        for component in (row, col):
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"Grid coordinate components must be integers: {value!r}")
        return cls(row, col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
