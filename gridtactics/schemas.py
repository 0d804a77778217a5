"""
Pydantic schemas for gridtactics levels and units.

Design Philosophy:
- Units carry their combat stats plus a board position
- Positions are (row, col) tuples; the first component is the row
- Levels describe everything a movement check needs and convert to a LevelGrid
"""

from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from gridtactics.environment import GridPosition, LevelGrid, LevelGridState
from gridtactics.environment.schemas import coerce_position


class EnemyType(str, Enum):
    """Kinds of enemy a level can contain."""

    SPIDER = "spider"
    SKELETON = "skeleton"


class UnitStats(BaseModel):
    """Stats shared by every unit on the board."""

    position: GridPosition = Field(..., description="(row, col) cell the unit stands on")
    health: int = Field(0, ge=0)
    range: int = Field(0, ge=0, description="Attack range in cells")
    movement: int = Field(0, ge=0, description="Base movement points per turn")
    attack: int = Field(0, ge=0)
    defense: int = Field(0, ge=0)

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> Any:
        return coerce_position(value)


class Enemy(UnitStats):
    """A hostile unit. Its cell blocks movement for everyone else."""

    enemy_type: EnemyType


class Player(UnitStats):
    """The player's unit, with equipment/effect modifiers on top of base stats."""

    range_mod: int = Field(0, ge=0)
    movement_mod: int = Field(0, ge=0)
    attack_mod: int = Field(0, ge=0)
    defense_mod: int = Field(0, ge=0)


Unit = Union[Player, Enemy]


class Level(BaseModel):
    """A playable level: board size, units and static obstacles.

    Enemies and obstacles must sit on the board. The player may be parked off
    the board (e.g. before deployment), in which case it blocks nothing.
    """

    name: str
    description: str = ""
    dimension: int = Field(..., ge=1, description="Side length of the square board")
    player: Player
    enemies: List[Enemy] = Field(default_factory=list)
    obstacles: List[GridPosition] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Free-form level metadata")

    @field_validator("obstacles", mode="before")
    @classmethod
    def _coerce_obstacles(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [coerce_position(item) for item in value]
        return value

    @model_validator(mode="after")
    def _check_board_positions(self) -> "Level":
        limit = self.dimension
        if min(self.player.position) < 0:
            raise ValueError(f"Player position {self.player.position} has a negative component")
        for enemy in self.enemies:
            row, col = enemy.position
            if not (0 <= row < limit and 0 <= col < limit):
                raise ValueError(f"Enemy at {enemy.position} is outside the {limit}x{limit} board")
        for row, col in self.obstacles:
            if not (0 <= row < limit and 0 <= col < limit):
                raise ValueError(f"Obstacle at {(row, col)} is outside the {limit}x{limit} board")
        return self

    def grid_state(self) -> LevelGridState:
        return LevelGridState(
            dimension=self.dimension,
            enemy_positions=[enemy.position for enemy in self.enemies],
            obstacles=list(self.obstacles),
            player_position=self.player.position,
        )

    def to_grid(self) -> LevelGrid:
        """Snapshot the board for movement queries."""
        return self.grid_state().to_grid()

    def enemies_of_type(self, enemy_type: EnemyType) -> List[Enemy]:
        return [enemy for enemy in self.enemies if enemy.enemy_type == enemy_type]
