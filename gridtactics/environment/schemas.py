"""Pydantic schemas for level grids.

These models mirror the frozen dataclass in ``grid.py`` but keep grid
snapshots serializable. Positions are stored as plain ``(row, col)`` tuples so
they round-trip through JSON unchanged.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .coordinates import GridCoordinate
from .grid import LevelGrid

GridPosition = Tuple[int, int]


def coerce_position(value: Any) -> Any:
    """Accept ``{"row": r, "col": c}`` mappings alongside ``[r, c]`` pairs."""

    if isinstance(value, GridCoordinate):
        return value.as_tuple()
    if isinstance(value, dict) and "row" in value and "col" in value:
        return (value["row"], value["col"])
    return value


class LevelGridState(BaseModel):
    """Serializable grid description: dimension plus blocked cells."""

    dimension: int = Field(..., ge=1, description="Side length of the square grid")
    enemy_positions: List[GridPosition] = Field(
        default_factory=list,
        description="(row, col) cells held by enemies",
    )
    obstacles: List[GridPosition] = Field(
        default_factory=list,
        description="(row, col) cells blocked by static obstacles",
    )
    player_position: Optional[GridPosition] = Field(
        None, description="(row, col) of the player; may lie off the grid",
    )

    @field_validator("enemy_positions", "obstacles", mode="before")
    @classmethod
    def _coerce_positions(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [coerce_position(item) for item in value]
        return value

    @field_validator("player_position", mode="before")
    @classmethod
    def _coerce_player_position(cls, value: Any) -> Any:
        return coerce_position(value)

    def to_grid(self) -> LevelGrid:
        return LevelGrid(
            dimension=self.dimension,
            enemy_positions=self.enemy_positions,
            obstacles=self.obstacles,
            player_position=self.player_position,
        )

    @classmethod
    def from_grid(cls, grid: LevelGrid) -> "LevelGridState":
        return cls(
            dimension=grid.dimension,
            enemy_positions=sorted(coord.as_tuple() for coord in grid.enemy_positions),
            obstacles=sorted(coord.as_tuple() for coord in grid.obstacles),
            player_position=grid.player_position.as_tuple() if grid.player_position is not None else None,
        )
