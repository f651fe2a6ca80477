"""The game board: a grid of cells with wall damage and optional wrap-around."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from tankarena.core import CellType

logger = logging.getLogger(__name__)

WALL_DAMAGE_WEAK = 1
WALL_DAMAGE_DESTROYED = 2

_HEADER_KEYS = ("MaxSteps", "NumShells", "Rows", "Cols")


class BoardFormatError(ValueError):
    """Raised when a map file cannot be read or does not follow the format."""


@dataclass
class WallDamage:
    """How many hits a wall cell has taken; two hits destroy it."""

    is_wall: bool = False
    hits_taken: int = 0


class Board:
    """A rectangular grid of cells."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        wrap_around: bool = False,
        max_steps: int = 0,
        num_shells_per_tank: int = 0,
    ) -> None:
        self.width = width
        self.height = height
        self.wrap_around = wrap_around
        self.max_steps = max_steps
        self.num_shells_per_tank = num_shells_per_tank
        self.grid = [[CellType.EMPTY] * width for _ in range(height)]
        self.wall_info = [[WallDamage() for _ in range(width)] for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        """True if (x, y) lies on the board, ignoring wrap-around."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        if self.wrap_around:
            return x % self.width, y % self.height
        if not self.in_bounds(x, y):
            return None
        return x, y

    def cell_at(self, x: int, y: int) -> CellType:
        """The cell at (x, y); UNKNOWN when off the board and not wrapping."""
        location = self._locate(x, y)
        if location is None:
            return CellType.UNKNOWN
        cx, cy = location
        return self.grid[cy][cx]

    def set_cell(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell at (x, y); off-board writes are ignored."""
        location = self._locate(x, y)
        if location is None:
            return
        cx, cy = location
        self.grid[cy][cx] = cell_type
        self.wall_info[cy][cx] = WallDamage(is_wall=cell_type is CellType.WALL)

    def weaken_wall(self, x: int, y: int) -> None:
        """Register a hit on the wall at (x, y): it weakens, then breaks."""
        location = self._locate(x, y)
        if location is None:
            return
        cx, cy = location
        damage = self.wall_info[cy][cx]
        if not damage.is_wall:
            return
        damage.hits_taken += 1
        if damage.hits_taken == WALL_DAMAGE_WEAK:
            self.grid[cy][cx] = CellType.WEAK_WALL
            logger.info("Weak wall at (%d, %d)", cx, cy)
        if damage.hits_taken >= WALL_DAMAGE_DESTROYED:
            self.grid[cy][cx] = CellType.EMPTY
            damage.is_wall = False
            damage.hits_taken = 0
            logger.info("Wall destroyed at (%d, %d)", cx, cy)

    @classmethod
    def parse(cls, text: str) -> Board:
        """Build a board from map text: a description line, four header lines, then rows."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        remaining = iter(lines)
        if next(remaining, None) is None:
            raise BoardFormatError("File is empty")

        header: dict[str, int] = {}
        for key in _HEADER_KEYS:
            line = next(remaining, None)
            if line is None:
                raise BoardFormatError(f"Missing {key} information")
            match = re.search(rf"{key}\s*=\s*([0-9]+)", line)
            if match is None:
                raise BoardFormatError(f"Invalid {key} format")
            header[key] = int(match.group(1))

        board = cls(
            width=header["Cols"],
            height=header["Rows"],
            max_steps=header["MaxSteps"],
            num_shells_per_tank=header["NumShells"],
        )
        for row, line in zip(range(board.height), remaining):
            for col, char in enumerate(line[: board.width]):
                cell = CellType.from_char(char)
                board.grid[row][col] = cell
                if cell is CellType.WALL:
                    board.wall_info[row][col] = WallDamage(is_wall=True)
        return board

    @classmethod
    def load(cls, path: str | Path) -> Board:
        """Read and parse a map file."""
        try:
            with open(path, encoding="latin-1", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise BoardFormatError(f"Could not open file {path}") from exc
        return cls.parse(text)