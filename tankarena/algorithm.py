"""Interfaces between the game and the code that steers tanks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tankarena.core import ActionRequest


class BattleInfo:
    """Base for whatever a player hands a tank algorithm about the battlefield."""


class TankAlgorithm(ABC):
    """Decides what a single tank does each turn."""

    @abstractmethod
    def get_action(self) -> ActionRequest:
        """The action for this turn."""

    @abstractmethod
    def update_battle_info(self, info: BattleInfo) -> None:
        """Receive fresh battlefield information."""


class TankAlgorithmFactory(ABC):
    """Creates the algorithm for each tank of each player."""

    @abstractmethod
    def create(self, player_index: int, tank_index: int) -> TankAlgorithm:
        """A new algorithm for the given player's tank."""