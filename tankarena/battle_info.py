"""Battlefield information a player hands to one of its tanks."""

from __future__ import annotations

from dataclasses import dataclass

from tankarena.algorithm import BattleInfo
from tankarena.core import Direction, Position


@dataclass(frozen=True)
class TankInfo:
    """A tank seen on the battlefield."""

    position: Position
    player_index: int
    is_my_tank: bool


class TankBattleInfo(BattleInfo):
    """What a tank knows about itself and the visible battlefield."""

    def __init__(self, player_index: int) -> None:
        self.player_index = player_index
        self.position = Position(0, 0)
        self.direction = Direction.UP
        self.remaining_shells = 0
        self.can_shoot = False
        self.tanks: list[TankInfo] = []
        self.mines: list[Position] = []
        self.walls: list[Position] = []

    def add_tank(self, info: TankInfo) -> None:
        self.tanks.append(info)

    def add_mine(self, position: Position) -> None:
        self.mines.append(position)

    def add_wall(self, position: Position) -> None:
        self.walls.append(position)

    def clear(self) -> None:
        """Forget the collected tanks, mines and walls."""
        self.tanks.clear()
        self.mines.clear()
        self.walls.clear()