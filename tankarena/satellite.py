"""Read-only views of the whole battlefield, as characters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tankarena.board import Board
from tankarena.core import CellType
from tankarena.objects import GameObject
from tankarena.tank import Tank

OUT_OF_BOUNDS = "&"
REQUESTING_TANK = "%"
SHELL = "*"

_CELL_CHARS = {
    CellType.WALL: "#",
    CellType.WEAK_WALL: "#",
    CellType.MINE: "@",
    CellType.TANK1: "1",
    CellType.TANK2: "2",
}


class SatelliteView(ABC):
    """A snapshot of the battlefield that can be queried cell by cell."""

    @abstractmethod
    def object_at(self, x: int, y: int) -> str:
        """The character describing what is at (x, y)."""


class BoardSatelliteView(SatelliteView):
    """A satellite view of a live board, as seen by one requesting tank."""

    def __init__(
        self,
        board: Board,
        tanks: Sequence[Tank],
        shells: Sequence[GameObject],
        requesting_tank: Tank,
    ) -> None:
        self.board = board
        self.tanks = tanks
        self.shells = shells
        self.requesting_tank = requesting_tank

    def object_at(self, x: int, y: int) -> str:
        if not self.board.in_bounds(x, y):
            return OUT_OF_BOUNDS
        if self.requesting_tank.x == x and self.requesting_tank.y == y:
            return REQUESTING_TANK
        if any(shell.x == x and shell.y == y for shell in self.shells):
            return SHELL
        return _CELL_CHARS.get(self.board.cell_at(x, y), " ")