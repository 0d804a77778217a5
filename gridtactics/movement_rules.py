"""
Movement rules for units on a level.

MovementRules turns unit stats into a movement budget and answers the turn
validation questions a game loop asks:
- How far may this unit move this turn?
- May it end its move on this cell?
- Which cells could it end on?

All checks are deterministic and read-only; the level is never modified.
"""

from typing import Any, Dict, Optional

from gridtactics.environment import (
    GridCoordinate,
    LevelGrid,
    reachable_cells,
    reachable_in,
)
from gridtactics.logging_utils import log_deterministic
from gridtactics.schemas import Level, Player, Unit


def describe_unit(unit: Unit) -> str:
    if isinstance(unit, Player):
        return "Player"
    return unit.enemy_type.value.title()


class MovementRules:
    """Turn-level movement legality for players and enemies.

    Budgets:
    - Player: movement + movement_mod
    - Enemy: movement

    A unit may always stay where it is. Any other destination must be on the
    board, unoccupied and reachable within the budget without passing
    through enemies, obstacles or the player.
    """

    def movement_budget(self, unit: Unit) -> int:
        if isinstance(unit, Player):
            return unit.movement + unit.movement_mod
        return unit.movement

    def can_move(
        self,
        level: Level,
        unit: Unit,
        destination: Any,
        *,
        budget: Optional[int] = None,
        grid: Optional[LevelGrid] = None,
    ) -> bool:
        """Return True if ``unit`` may end its move on ``destination``.

        Args:
            level: Level the unit belongs to
            unit: Moving unit (the player or one of the level's enemies)
            destination: Target (row, col)
            budget: Override for the unit's movement budget
            grid: Pre-built grid snapshot; built from ``level`` when omitted
        """
        grid = grid or level.to_grid()
        start = GridCoordinate.coerce(unit.position)
        target = GridCoordinate.coerce(destination)
        steps = self.movement_budget(unit) if budget is None else budget
        label = describe_unit(unit)

        if not grid.in_bounds(start):
            log_deterministic(f"[{label}] Not on the board at {start}; cannot move")
            return False
        if not grid.in_bounds(target):
            log_deterministic(f"[{label}] Destination {target} is off the board")
            return False
        if target != start and grid.is_occupied(target):
            log_deterministic(f"[{label}] Destination {target} is occupied")
            return False

        allowed = reachable_in(grid.dimension, grid.occupied, start, target, steps)
        outcome = "reachable" if allowed else "unreachable"
        log_deterministic(f"[{label}] {start} -> {target} within {steps}: {outcome}")
        return allowed

    def movement_range(
        self,
        level: Level,
        unit: Unit,
        *,
        budget: Optional[int] = None,
    ) -> Dict[GridCoordinate, int]:
        """Cells the unit could end its move on, mapped to their step cost.

        Returns an empty mapping for a unit that is not on the board.
        """
        grid = level.to_grid()
        start = GridCoordinate.coerce(unit.position)
        if not grid.in_bounds(start):
            return {}

        steps = self.movement_budget(unit) if budget is None else budget
        # Occupied cells are never expanded, so only the start can be occupied here.
        cells = reachable_cells(grid.dimension, grid.occupied, start, steps)
        log_deterministic(f"[{describe_unit(unit)}] {len(cells)} cells within {steps} of {start}")
        return cells
