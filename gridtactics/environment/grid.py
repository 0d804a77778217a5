"""Level grid: the immutable board a reachability query runs against.

A level grid is a square board of ``dimension`` x ``dimension`` cells plus the
cells that block movement: enemy positions, static obstacles and the player.
Queries treat it as a read-only snapshot, so one grid can be shared between
any number of concurrent checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from .coordinates import GridCoordinate


def _coordinate_set(values: Iterable) -> FrozenSet[GridCoordinate]:
    return frozenset(GridCoordinate.coerce(value) for value in values)


@dataclass(frozen=True)
class LevelGrid:
    """Square grid with its occupants.

    The player position may lie outside the board (levels park an absent
    player there); an off-board cell never blocks anything.
    """

    dimension: int
    enemy_positions: FrozenSet[GridCoordinate] = field(default_factory=frozenset)
    obstacles: FrozenSet[GridCoordinate] = field(default_factory=frozenset)
    player_position: Optional[GridCoordinate] = None

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise ValueError(f"Grid dimension must be positive: {self.dimension}")
        # Normalise whatever iterables/tuples the caller passed into frozen coordinate sets.
        object.__setattr__(self, "enemy_positions", _coordinate_set(self.enemy_positions))
        object.__setattr__(self, "obstacles", _coordinate_set(self.obstacles))
        if self.player_position is not None:
            object.__setattr__(self, "player_position", GridCoordinate.coerce(self.player_position))

    @property
    def cell_count(self) -> int:
        return self.dimension * self.dimension

    @property
    def occupied(self) -> FrozenSet[GridCoordinate]:
        """Union of enemy, obstacle and player cells."""
        occupied = set(self.enemy_positions) | set(self.obstacles)
        if self.player_position is not None:
            occupied.add(self.player_position)
        return frozenset(occupied)

    def in_bounds(self, coord) -> bool:
        return GridCoordinate.coerce(coord).in_bounds(self.dimension)

    def is_occupied(self, coord) -> bool:
        coord = GridCoordinate.coerce(coord)
        return (
            coord in self.enemy_positions
            or coord in self.obstacles
            or coord == self.player_position
        )

    def __str__(self) -> str:
        return f"LevelGrid({self.dimension}x{self.dimension}, occupied={len(self.occupied)})"
