import pytest

from tankarena.board import Board
from tankarena.core import CellType, Direction, Position
from tankarena.objects import GameObject, Shell


@pytest.fixture
def board():
    return Board(width=5, height=5)


def test_game_object_initial_state():
    obj = GameObject(3, 4, Direction.DOWN_RIGHT, CellType.TANK1)
    assert (obj.x, obj.y) == (3, 4)
    assert obj.position == Position(3, 4)
    assert obj.direction is Direction.DOWN_RIGHT
    assert obj.kind is CellType.TANK1


def test_try_to_move_does_not_change_position(board):
    obj = GameObject(2, 2, Direction.UP, CellType.TANK1)
    assert obj.try_to_move(board, 1, 0) == (3, 2)
    assert obj.position == Position(2, 2)


def test_move_wraps_around_edges(board):
    obj = GameObject(4, 0, Direction.UP, CellType.TANK1)
    obj.move(board, 1, -1)
    assert obj.position == Position(0, 4)


def test_move_and_back_is_identity(board):
    obj = GameObject(0, 0, Direction.UP, CellType.TANK1)
    for dx, dy in [d.offset() for d in Direction]:
        obj.move(board, dx, dy)
        obj.move(board, -dx, -dy)
        assert obj.position == Position(0, 0)


@pytest.mark.parametrize(
    "start, direction, target, expected",
    [
        ((0, 2), Direction.RIGHT, (4, 2), True),
        ((0, 2), Direction.LEFT, (4, 2), False),
        ((4, 2), Direction.LEFT, (0, 2), True),
        ((2, 4), Direction.UP, (2, 0), True),
        ((2, 0), Direction.UP, (2, 4), False),
        ((2, 0), Direction.DOWN, (2, 4), True),
        ((1, 1), Direction.DOWN_RIGHT, (3, 3), True),
        ((1, 1), Direction.DOWN_RIGHT, (3, 4), False),
        ((3, 3), Direction.UP_LEFT, (1, 1), True),
        ((1, 3), Direction.UP_RIGHT, (3, 1), True),
        ((3, 1), Direction.DOWN_LEFT, (1, 3), True),
        ((3, 1), Direction.UP_RIGHT, (1, 3), False),
    ],
)
def test_is_targeting(start, direction, target, expected):
    shooter = GameObject(*start, direction, CellType.SHELL)
    other = GameObject(*target, Direction.UP, CellType.TANK2)
    assert shooter.is_targeting(other) is expected


def test_shell_initial_state():
    shell = Shell(3, 4, Direction.DOWN_RIGHT, 2)
    assert (shell.x, shell.y) == (3, 4)
    assert shell.kind is CellType.SHELL
    assert shell.owner_player_index == 2


def test_shell_moves_into_empty_cell(board):
    shell = Shell(1, 1, Direction.RIGHT, 1)
    shell.update(board)
    assert shell.position == Position(2, 1)
    assert shell.kind is CellType.SHELL


def test_shell_wraps_around(board):
    shell = Shell(4, 0, Direction.RIGHT, 1)
    shell.update(board)
    assert shell.position == Position(0, 0)


def test_shell_hitting_wall_weakens_it_and_explodes(board):
    board.set_cell(2, 0, CellType.WALL)
    shell = Shell(1, 0, Direction.RIGHT, 1)
    shell.update(board)
    assert board.cell_at(2, 0) is CellType.WEAK_WALL
    assert shell.kind is CellType.BOOM
    assert shell.position == Position(1, 0)
    assert board.cell_at(1, 0) is CellType.BOOM


def test_two_shells_destroy_wall(board):
    board.set_cell(2, 0, CellType.WALL)
    Shell(1, 0, Direction.RIGHT, 1).update(board)
    Shell(3, 0, Direction.LEFT, 2).update(board)
    assert board.cell_at(2, 0) is CellType.EMPTY


def test_shell_hitting_tank_explodes(board):
    board.set_cell(3, 3, CellType.TANK2)
    shell = Shell(2, 3, Direction.RIGHT, 1)
    shell.update(board)
    assert shell.kind is CellType.BOOM
    assert board.cell_at(3, 3) is CellType.TANK2


def test_shell_hitting_mine_clears_it(board):
    board.set_cell(2, 3, CellType.MINE)
    shell = Shell(2, 2, Direction.DOWN, 1)
    shell.update(board)
    assert shell.kind is CellType.BOOM
    assert board.cell_at(2, 3) is CellType.EMPTY
    assert board.cell_at(2, 2) is CellType.BOOM


def test_shell_hitting_other_object_explodes(board):
    board.set_cell(3, 2, CellType.SHELL)
    shell = Shell(2, 2, Direction.RIGHT, 1)
    shell.update(board)
    assert shell.kind is CellType.BOOM
    assert shell.position == Position(2, 2)


def test_collides_with():
    shell = Shell(1, 1, Direction.UP, 1)
    same = GameObject(1, 1, Direction.LEFT, CellType.TANK1)
    other = GameObject(1, 2, Direction.LEFT, CellType.TANK1)
    assert shell.collides_with(same) is True
    assert shell.collides_with(other) is False


def test_explode_marks_cell(board):
    shell = Shell(4, 4, Direction.UP, 2)
    shell.explode(board)
    assert board.cell_at(4, 4) is CellType.BOOM