"""Unit tests for the unit and level schemas."""

import pytest
from pydantic import ValidationError

from gridtactics.environment import GridCoordinate
from gridtactics.schemas import Enemy, EnemyType, Level, Player


def test_player_defaults_and_modifiers():
    player = Player(position=(0, 0), movement=3, movement_mod=2)
    assert player.health == 0
    assert player.range_mod == 0
    assert player.movement + player.movement_mod == 5


def test_enemy_type_parses_from_string():
    enemy = Enemy(enemy_type="skeleton", position={"row": 1, "col": 2}, health=6)
    assert enemy.enemy_type is EnemyType.SKELETON
    assert enemy.position == (1, 2)


def test_stats_must_be_non_negative():
    with pytest.raises(ValidationError):
        Player(position=(0, 0), health=-1)
    with pytest.raises(ValidationError):
        Enemy(enemy_type="spider", position=(0, 0), movement=-2)


def test_unknown_enemy_type_rejected():
    with pytest.raises(ValidationError):
        Enemy(enemy_type="dragon", position=(0, 0))


def test_level_to_grid_collects_occupants():
    level = Level(
        name="corner",
        dimension=4,
        player=Player(position=(4, 3)),
        enemies=[Enemy(enemy_type="spider", position=(3, 2))],
        obstacles=[{"row": 2, "col": 3}],
    )
    grid = level.to_grid()

    assert grid.dimension == 4
    assert grid.enemy_positions == {GridCoordinate(3, 2)}
    assert grid.obstacles == {GridCoordinate(2, 3)}
    # Off-board player is kept but never blocks a board cell.
    assert grid.player_position == GridCoordinate(4, 3)
    assert not grid.in_bounds(grid.player_position)


def test_level_rejects_enemy_or_obstacle_off_board():
    with pytest.raises(ValidationError):
        Level(
            name="bad",
            dimension=3,
            player=Player(position=(0, 0)),
            enemies=[Enemy(enemy_type="spider", position=(3, 0))],
        )
    with pytest.raises(ValidationError):
        Level(name="bad", dimension=3, player=Player(position=(0, 0)), obstacles=[(0, 5)])


def test_level_rejects_negative_player_position():
    with pytest.raises(ValidationError):
        Level(name="bad", dimension=3, player=Player(position=(-1, 0)))


def test_level_dimension_must_be_positive():
    with pytest.raises(ValidationError):
        Level(name="bad", dimension=0, player=Player(position=(0, 0)))


def test_enemies_of_type():
    level = Level(
        name="mixed",
        dimension=5,
        player=Player(position=(0, 0)),
        enemies=[
            Enemy(enemy_type="spider", position=(1, 1)),
            Enemy(enemy_type="skeleton", position=(2, 2)),
            Enemy(enemy_type="spider", position=(3, 3)),
        ],
    )
    spiders = level.enemies_of_type(EnemyType.SPIDER)
    assert [enemy.position for enemy in spiders] == [(1, 1), (3, 3)]
