"""Grid environment for tactical movement checks."""

from .coordinates import GridCoordinate, OutOfBoundsError
from .grid import LevelGrid
from .schemas import GridPosition, LevelGridState
from .helpers import (
    reachable_in,
    reachable_cells,
    validate_grid_move,
    render_level_ascii,
)

__all__ = [
    "GridCoordinate",
    "OutOfBoundsError",
    "LevelGrid",
    "GridPosition",
    "LevelGridState",
    "reachable_in",
    "reachable_cells",
    "validate_grid_move",
    "render_level_ascii",
]
