import random

import pytest

from scrollsnake.constants import GAME_SIZE, MAX_COORD, SEG_SIZE
from scrollsnake.models import Camera, Cell, Creature, Direction, Food

from .conftest import FixedRandom


def test_creature_starts_with_three_cells_heading_right():
    creature = Creature()
    assert creature.segments == [Cell(0, 0), Cell(-20, 0), Cell(-40, 0)]
    assert creature.direction is Direction.RIGHT
    assert creature.segments_to_keep == 3


def test_move_drops_tail():
    creature = Creature()
    head = creature.move()
    assert head == Cell(20, 0)
    assert creature.segments == [Cell(20, 0), Cell(0, 0), Cell(-20, 0)]


def test_extend_then_move_grows_by_one():
    creature = Creature()
    creature.extend()
    creature.move()
    assert len(creature.segments) == 4
    creature.move()
    assert len(creature.segments) == 4
    assert creature.segments_to_keep == 4


def test_length_never_exceeds_desired_length():
    creature = Creature()
    rng = random.Random(7)
    for _ in range(50):
        if rng.random() < 0.3:
            creature.extend()
        creature.set_direction(rng.choice(list(Direction)))
        creature.move()
        assert len(creature.segments) <= creature.segments_to_keep


def test_segments_stay_adjacent():
    creature = Creature()
    for direction in [Direction.UP, Direction.LEFT, Direction.LEFT, Direction.DOWN]:
        creature.extend()
        creature.set_direction(direction)
        creature.move()
    for a, b in zip(creature.segments, creature.segments[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == SEG_SIZE


@pytest.mark.parametrize("direction", list(Direction))
def test_reverse_direction_is_ignored(direction):
    creature = Creature()
    creature.direction = direction
    assert creature.set_direction(direction.opposite) is False
    assert creature.direction is direction


def test_last_direction_before_tick_wins():
    creature = Creature()
    creature.set_direction(Direction.UP)
    creature.set_direction(Direction.DOWN)
    creature.move()
    assert creature.head == Cell(0, 20)


def test_directions_are_axis_aligned_cell_steps():
    for direction in Direction:
        assert abs(direction.dx) + abs(direction.dy) == SEG_SIZE
        assert direction.dx * direction.dy == 0
        assert direction.opposite.opposite is direction


def test_camera_offset_after_constant_moves():
    creature = Creature()
    for n in range(1, 12):
        creature.move()
        expected = -(n * SEG_SIZE) % SEG_SIZE
        assert creature.camera.offset_x == expected
        assert creature.camera.offset_y == 0
        assert abs(creature.camera.offset_x) < SEG_SIZE


def test_camera_wrap_keeps_sign():
    camera = Camera()
    camera.shift(25, -7)
    assert camera.offset_x == -5
    assert camera.offset_y == 7
    camera.shift(-12.5, 0)
    assert camera.offset_x == 7.5


def test_camera_reset_on_creature_reset():
    creature = Creature()
    creature.camera.shift(5, 5)
    creature.reset()
    assert (creature.camera.offset_x, creature.camera.offset_y) == (0, 0)


def test_food_always_in_bounds():
    food = Food()
    rng = random.Random(99)
    for _ in range(500):
        cell = food.refresh(rng)
        assert -MAX_COORD <= cell.x <= MAX_COORD
        assert -MAX_COORD <= cell.y <= MAX_COORD
        assert cell.x % SEG_SIZE == 0 and cell.y % SEG_SIZE == 0


def test_food_range_edges():
    food = Food()
    assert food.refresh(FixedRandom(0)) == Cell(-280, -280)
    assert food.refresh(FixedRandom(27)) == Cell(260, 260)


def test_food_may_land_on_creature():
    creature = Creature()
    food = Food()
    # no exclusion of occupied cells
    assert food.refresh(FixedRandom(14)) == Cell(0, 0)
    assert food.cell in creature.segments
