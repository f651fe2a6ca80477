"""Basic game vocabulary: cell kinds, directions, positions and actions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class CellType(Enum):
    """What occupies a single board cell."""

    EMPTY = ("Empty", " ")
    WALL = ("Wall", "#")
    WEAK_WALL = ("WeakWall", ";")
    MINE = ("Mine", "@")
    TANK1 = ("Tank1", "1")
    TANK2 = ("Tank2", "2")
    SHELL = ("Shell", "*")
    BOOM = ("Explosion", "&")
    UNKNOWN = ("Unknown", "?")

    def __init__(self, label: str, char: str) -> None:
        self._label = label
        self._char = char

    @classmethod
    def from_char(cls, char: str) -> CellType:
        """Map a map-file character to a cell type; anything unrecognised is empty."""
        return _CELL_FROM_CHAR.get(char, cls.EMPTY)

    def to_char(self) -> str:
        """Character used to draw this cell."""
        return self._char

    def label(self) -> str:
        """Human-readable name of this cell type."""
        return self._label

    def is_obstacle(self) -> bool:
        return self in (CellType.WALL, CellType.WEAK_WALL, CellType.MINE)

    def is_tank(self) -> bool:
        return self in (CellType.TANK1, CellType.TANK2)

    def is_destructible(self) -> bool:
        return self in (CellType.WEAK_WALL, CellType.MINE) or self.is_tank()

    def player_index(self) -> int:
        """Owning player (1 or 2) for tank cells, 0 otherwise."""
        if self is CellType.TANK1:
            return 1
        if self is CellType.TANK2:
            return 2
        return 0


_CELL_FROM_CHAR = {
    "#": CellType.WALL,
    "@": CellType.MINE,
    "1": CellType.TANK1,
    "2": CellType.TANK2,
    " ": CellType.EMPTY,
}


class Direction(Enum):
    """The eight compass directions, in clockwise order starting at up."""

    UP = ("Up", 0, -1)
    UP_RIGHT = ("UpRight", 1, -1)
    RIGHT = ("Right", 1, 0)
    DOWN_RIGHT = ("DownRight", 1, 1)
    DOWN = ("Down", 0, 1)
    DOWN_LEFT = ("DownLeft", -1, 1)
    LEFT = ("Left", -1, 0)
    UP_LEFT = ("UpLeft", -1, -1)

    def __init__(self, label: str, dx: int, dy: int) -> None:
        self._label = label
        self._dx = dx
        self._dy = dy

    @classmethod
    def from_name(cls, text: str) -> Direction:
        """Parse a direction name, case-insensitively; raise ValueError if unknown."""
        try:
            return _DIRECTION_NAMES[text.lower()]
        except KeyError:
            raise ValueError(f"Invalid direction string: {text}") from None

    def label(self) -> str:
        return self._label

    def offset(self) -> tuple[int, int]:
        """The (dx, dy) step for one move in this direction."""
        return (self._dx, self._dy)

    def rotated(self, steps: int) -> Direction:
        """Turn by 45-degree steps; positive is clockwise, negative counter-clockwise."""
        members = list(type(self))
        return members[(members.index(self) + steps) % len(members)]


_DIRECTION_NAMES = {
    "up": Direction.UP,
    "up_right": Direction.UP_RIGHT,
    "upright": Direction.UP_RIGHT,
    "northeast": Direction.UP_RIGHT,
    "right": Direction.RIGHT,
    "down_right": Direction.DOWN_RIGHT,
    "downright": Direction.DOWN_RIGHT,
    "southeast": Direction.DOWN_RIGHT,
    "down": Direction.DOWN,
    "down_left": Direction.DOWN_LEFT,
    "downleft": Direction.DOWN_LEFT,
    "southwest": Direction.DOWN_LEFT,
    "left": Direction.LEFT,
    "up_left": Direction.UP_LEFT,
    "upleft": Direction.UP_LEFT,
    "northwest": Direction.UP_LEFT,
}


@dataclass(frozen=True)
class Position:
    """An integer grid coordinate."""

    x: int = 0
    y: int = 0

    def manhattan_distance(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def euclidean_distance(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_in_range(self, center: Position, distance: int) -> bool:
        """True if within the given Manhattan distance of center."""
        return self.manhattan_distance(center) <= distance

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def is_within_bounds(self, max_x: int, max_y: int) -> bool:
        return 0 <= self.x < max_x and 0 <= self.y < max_y

    def clamped(self, max_x: int, max_y: int) -> Position:
        """A copy pulled back inside [0, max) on both axes."""
        x, y = self.x, self.y
        if x < 0:
            x = 0
        if x >= max_x:
            x = max_x - 1
        if y < 0:
            y = 0
        if y >= max_y:
            y = max_y - 1
        return Position(x, y)

    def wrapped(self, max_x: int, max_y: int) -> Position:
        """A copy wrapped around the edges, torus style."""
        return Position(self.x % max_x, self.y % max_y)


class ActionRequest(Enum):
    """An action a tank may request on its turn."""

    MOVE_FORWARD = "MoveForward"
    MOVE_BACKWARD = "MoveBackward"
    ROTATE_LEFT_90 = "RotateLeft90"
    ROTATE_RIGHT_90 = "RotateRight90"
    ROTATE_LEFT_45 = "RotateLeft45"
    ROTATE_RIGHT_45 = "RotateRight45"
    SHOOT = "Shoot"
    GET_BATTLE_INFO = "GetBattleInfo"
    DO_NOTHING = "DoNothing"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, text: str) -> ActionRequest:
        """Parse an action name; anything unrecognised becomes DO_NOTHING."""
        try:
            return cls(text)
        except ValueError:
            return cls.DO_NOTHING

    def is_movement(self) -> bool:
        return self in (ActionRequest.MOVE_FORWARD, ActionRequest.MOVE_BACKWARD)

    def is_rotation(self) -> bool:
        return self in (
            ActionRequest.ROTATE_LEFT_90,
            ActionRequest.ROTATE_RIGHT_90,
            ActionRequest.ROTATE_LEFT_45,
            ActionRequest.ROTATE_RIGHT_45,
        )