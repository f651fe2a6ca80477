"""Things that sit on the board: the common base and artillery shells."""

from __future__ import annotations

import logging

from tankarena.board import Board
from tankarena.core import CellType, Direction, Position

logger = logging.getLogger(__name__)


class GameObject:
    """Something with a position, a facing direction and a cell kind."""

    def __init__(self, x: int, y: int, direction: Direction, kind: CellType) -> None:
        self.position = Position(x, y)
        self.direction = direction
        self.kind = kind

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def try_to_move(self, board: Board, dx: int, dy: int) -> tuple[int, int]:
        """Where a step of (dx, dy) would land, wrapping around the board edges."""
        return (self.x + dx) % board.width, (self.y + dy) % board.height

    def move(self, board: Board, dx: int, dy: int) -> None:
        """Step by (dx, dy), wrapping around the board edges."""
        self.position = Position(*self.try_to_move(board, dx, dy))

    def is_targeting(self, other: GameObject) -> bool:
        """True if moving along the current direction would reach the other object."""
        sx, sy = self.x, self.y
        ox, oy = other.x, other.y
        dx, dy = self.direction.offset()

        if dx != 0 and sy == oy:
            if (dx > 0 and sx < ox) or (dx < 0 and sx > ox):
                return True

        if dy != 0 and sx == ox:
            if (dy > 0 and sy < oy) or (dy < 0 and sy > oy):
                return True

        if dx != 0 and dy != 0 and abs(sx - ox) == abs(sy - oy):
            if (
                (dx > 0 and dy > 0 and sx < ox and sy < oy)
                or (dx < 0 and dy < 0 and sx > ox and sy > oy)
                or (dx > 0 and dy < 0 and sx < ox and sy > oy)
                or (dx < 0 and dy > 0 and sx > ox and sy < oy)
            ):
                return True

        return False


class Shell(GameObject):
    """An artillery shell fired by one of the players."""

    def __init__(
        self, x: int, y: int, direction: Direction, owner_player_index: int
    ) -> None:
        super().__init__(x, y, direction, CellType.SHELL)
        self.owner_player_index = owner_player_index

    def update(self, board: Board) -> None:
        """Advance one cell, exploding on whatever blocks the way."""
        dx, dy = self.direction.offset()
        new_x, new_y = self.try_to_move(board, dx, dy)
        target = board.cell_at(new_x, new_y)

        if target in (CellType.WALL, CellType.WEAK_WALL):
            board.weaken_wall(new_x, new_y)
            self.explode(board)
            self.kind = CellType.BOOM
        elif target.is_tank():
            self.explode(board)
            self.kind = CellType.BOOM
        elif target is CellType.MINE:
            self.explode(board)
            board.set_cell(new_x, new_y, CellType.EMPTY)
            self.kind = CellType.BOOM
        elif target is CellType.EMPTY:
            self.move(board, dx, dy)
        else:
            self.explode(board)
            self.kind = CellType.BOOM

    def collides_with(self, other: GameObject) -> bool:
        """True if this shell shares a cell with the other object."""
        return self.x == other.x and self.y == other.y

    def explode(self, board: Board) -> None:
        """Mark the shell's current cell as an explosion."""
        board.set_cell(self.x, self.y, CellType.BOOM)
        logger.info("Shell exploded at (%d, %d)", self.x, self.y)