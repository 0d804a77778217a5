"""Movement queries over level grids.

The central query is ``reachable_in``: can a unit standing on ``start`` end
its movement on ``destination`` using at most ``max_distance`` orthogonal
steps, without entering an occupied cell? Everything else here is built on the
same breadth-first expansion.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .coordinates import GridCoordinate, OutOfBoundsError
from .grid import LevelGrid


def _check_query(dimension: int, max_distance: int, *coords: GridCoordinate) -> None:
    if dimension < 1:
        raise ValueError(f"Grid dimension must be positive: {dimension}")
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative: {max_distance}")
    for coord in coords:
        if not coord.in_bounds(dimension):
            raise OutOfBoundsError(
                f"Coordinate {coord} is outside the {dimension}x{dimension} grid"
            )


def _breadth_first(
    dimension: int,
    occupied: frozenset,
    start: GridCoordinate,
    max_distance: int,
) -> Iterator[Tuple[GridCoordinate, int]]:
    """Yield ``(cell, distance)`` for every cell dequeued within ``max_distance``.

    Cells are addressed by linear index. A neighbour is marked visited as soon
    as it passes the bounds, visited and row-wrap filters, before occupancy is
    checked: an occupied cell is therefore a dead end that is never enqueued
    and never re-examined through another route. The start cell is never
    checked for occupancy.
    """

    cell_count = dimension * dimension
    visited = [False] * cell_count
    visited[start.to_linear_index(dimension)] = True
    frontier: deque[Tuple[GridCoordinate, int]] = deque([(start, 0)])

    while frontier:
        cell, distance = frontier.popleft()
        # Over budget: prune without expanding.
        if distance > max_distance:
            continue
        yield cell, distance

        index = cell.to_linear_index(dimension)
        column = index % dimension
        for step in (-1, 1, -dimension, dimension):
            candidate = index + step
            if candidate < 0 or candidate >= cell_count or visited[candidate]:
                continue
            # Horizontal steps must stay on the same row (index 4 is not next to 5 on a 5x5 grid).
            if step == -1 and column == 0:
                continue
            if step == 1 and column == dimension - 1:
                continue
            visited[candidate] = True
            neighbor = GridCoordinate.from_linear_index(candidate, dimension)
            if neighbor in occupied:
                continue
            frontier.append((neighbor, distance + 1))


def reachable_in(
    dimension: int,
    occupied: Iterable[Any],
    start: Any,
    destination: Any,
    max_distance: int,
) -> bool:
    """Return True if ``destination`` is reachable from ``start`` within ``max_distance`` steps.

    Movement is orthogonal, one cell per step, and may not pass through any
    cell in ``occupied``. The start cell is exempt from the occupancy check
    (the moving unit already stands there). The destination's own occupancy
    is never checked: when ``start == destination`` the answer is True even
    with a zero budget. Callers that forbid ending on an occupied cell must
    check that themselves (see ``validate_grid_move``).

    Args:
        dimension: Side length of the square grid
        occupied: Blocked cells (coordinates, ``(row, col)`` pairs or row/col dicts)
        start: Cell the unit starts on
        destination: Cell the unit wants to end on
        max_distance: Movement budget in steps

    Returns:
        True if a path of at most ``max_distance`` steps exists

    Raises:
        OutOfBoundsError: If ``start`` or ``destination`` is outside the grid
        ValueError: If ``dimension`` < 1 or ``max_distance`` < 0
    """

    start = GridCoordinate.coerce(start)
    destination = GridCoordinate.coerce(destination)
    _check_query(dimension, max_distance, start, destination)
    blocked = frozenset(GridCoordinate.coerce(cell) for cell in occupied)

    for cell, _distance in _breadth_first(dimension, blocked, start, max_distance):
        # BFS dequeues in non-decreasing distance, so the first hit is the shortest route.
        if cell == destination:
            return True
    return False


def reachable_cells(
    dimension: int,
    occupied: Iterable[Any],
    start: Any,
    max_distance: int,
) -> Dict[GridCoordinate, int]:
    """Map every cell reachable within ``max_distance`` to its step distance.

    Uses exactly the expansion of ``reachable_in``, so
    ``reachable_in(..., dest, d)`` is True iff ``dest`` is a key of
    ``reachable_cells(..., d)``. The start cell is included at distance 0.
    """

    start = GridCoordinate.coerce(start)
    _check_query(dimension, max_distance, start)
    blocked = frozenset(GridCoordinate.coerce(cell) for cell in occupied)
    return dict(_breadth_first(dimension, blocked, start, max_distance))


def validate_grid_move(
    grid: LevelGrid,
    current_pos: Any,
    target_pos: Any,
    *,
    max_distance: Optional[int] = None,
) -> bool:
    """Validate whether a unit on current_pos may end its move on target_pos.

    Checks, in order:
    1. Both positions are within grid bounds
    2. The target is not occupied (staying on the current cell is allowed)
    3. The target is reachable around occupants within max_distance steps

    Args:
        grid: Level grid with its occupants
        current_pos: The unit's (row, col) position
        target_pos: Desired (row, col) destination
        max_distance: Optional movement budget; unbounded when omitted
            A negative budget reaches nothing, so the move is rejected

    Returns:
        True if the move is legal, False otherwise
    """
    current = GridCoordinate.coerce(current_pos)
    target = GridCoordinate.coerce(target_pos)

    if not (grid.in_bounds(current) and grid.in_bounds(target)):
        return False

    if target != current and grid.is_occupied(target):
        return False

    # No path is longer than the number of cells on the board.
    budget = grid.cell_count if max_distance is None else max_distance
    if budget < 0:
        return False

    return reachable_in(grid.dimension, grid.occupied, current, target, budget)


_DEFAULT_CELL_SYMBOLS: Dict[str, str] = {
    "start": "S",
    "destination": "F",
    "enemy": "E",
    "obstacle": "▒",
    "player": "P",
    "empty": " ",
}


def render_level_ascii(
    grid: LevelGrid,
    *,
    start: Any = None,
    destination: Any = None,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the grid as ``|c|c|...|`` rows, one line per grid row.

    Handy for debug output and test failure messages. When a cell holds more
    than one thing the first of start, destination, enemy, obstacle, player
    wins. An off-grid player is reported on a trailing line.
    """

    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    start_cell = GridCoordinate.coerce(start) if start is not None else None
    destination_cell = GridCoordinate.coerce(destination) if destination is not None else None

    def symbol_for(coord: GridCoordinate) -> str:
        if coord == start_cell:
            return mapping["start"]
        if coord == destination_cell:
            return mapping["destination"]
        if coord in grid.enemy_positions:
            return mapping["enemy"]
        if coord in grid.obstacles:
            return mapping["obstacle"]
        if coord == grid.player_position:
            return mapping["player"]
        return mapping["empty"]

    lines = []
    for row in range(grid.dimension):
        cells = [symbol_for(GridCoordinate(row, col)) for col in range(grid.dimension)]
        lines.append("|" + "|".join(cells) + "|")

    if grid.player_position is not None and not grid.in_bounds(grid.player_position):
        lines.append(f"{mapping['player']} off-grid at {grid.player_position}")

    return "\n".join(lines)
