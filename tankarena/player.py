"""Players, who turn satellite views into battle info for their tanks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tankarena.algorithm import TankAlgorithm
from tankarena.battle_info import TankBattleInfo, TankInfo
from tankarena.core import Position
from tankarena.satellite import SatelliteView


class Player(ABC):
    """One side of the game."""

    def __init__(
        self,
        player_index: int,
        width: int,
        height: int,
        max_steps: int,
        num_shells: int,
    ) -> None:
        self.player_index = player_index
        self.width = width
        self.height = height
        self.max_steps = max_steps
        self.num_shells = num_shells

    @abstractmethod
    def update_tank_with_battle_info(
        self, tank: TankAlgorithm, satellite_view: SatelliteView
    ) -> None:
        """Give the tank's algorithm fresh information from the satellite view."""


class MyPlayer(Player):
    """Scans the whole board and keeps one battle info per tank algorithm."""

    def __init__(
        self,
        player_index: int,
        width: int,
        height: int,
        max_steps: int,
        num_shells: int,
    ) -> None:
        super().__init__(player_index, width, height, max_steps, num_shells)
        self._battle_infos: dict[TankAlgorithm, TankBattleInfo] = {}

    def update_tank_with_battle_info(
        self, tank: TankAlgorithm, satellite_view: SatelliteView
    ) -> None:
        info = self._battle_infos.setdefault(tank, TankBattleInfo(self.player_index))
        info.clear()

        for y in range(self.height):
            for x in range(self.width):
                char = satellite_view.object_at(x, y)
                position = Position(x, y)
                if char == "%":
                    info.position = position
                elif char in ("1", "2"):
                    owner = int(char)
                    info.add_tank(
                        TankInfo(position, owner, owner == self.player_index)
                    )
                elif char == "#":
                    info.add_wall(position)
                elif char == "@":
                    info.add_mine(position)

        tank.update_battle_info(info)


class PlayerFactory(ABC):
    """Creates the players of a game."""

    @abstractmethod
    def create(
        self,
        player_index: int,
        width: int,
        height: int,
        max_steps: int,
        num_shells: int,
    ) -> Player:
        """A new player."""


class MyPlayerFactory(PlayerFactory):
    """Creates MyPlayer instances."""

    def create(
        self,
        player_index: int,
        width: int,
        height: int,
        max_steps: int,
        num_shells: int,
    ) -> MyPlayer:
        return MyPlayer(player_index, width, height, max_steps, num_shells)