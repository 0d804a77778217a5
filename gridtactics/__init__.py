"""
Gridtactics - tactical movement checks for grid-based combat games.

Decide whether a unit can end its turn on a chosen cell: breadth-first
reachability on a square grid, with enemies, obstacles and the player
treated as impassable.
"""

__version__ = "0.1.0"

from .environment import (
    GridCoordinate,
    GridPosition,
    LevelGrid,
    LevelGridState,
    OutOfBoundsError,
    reachable_in,
    reachable_cells,
    validate_grid_move,
    render_level_ascii,
)
from .schemas import Enemy, EnemyType, Level, Player, Unit, UnitStats
from .level import LevelLoader, load_level
from .movement_rules import MovementRules

__all__ = [
    "__version__",
    # Grid environment
    "GridCoordinate",
    "GridPosition",
    "LevelGrid",
    "LevelGridState",
    "OutOfBoundsError",
    "reachable_in",
    "reachable_cells",
    "validate_grid_move",
    "render_level_ascii",
    # Schemas
    "Enemy",
    "EnemyType",
    "Level",
    "Player",
    "Unit",
    "UnitStats",
    # Loading and rules
    "LevelLoader",
    "load_level",
    "MovementRules",
]
