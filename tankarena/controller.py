"""A simple scripted tank algorithm and its factory."""

from __future__ import annotations

from tankarena.algorithm import BattleInfo, TankAlgorithm, TankAlgorithmFactory
from tankarena.battle_info import TankBattleInfo
from tankarena.core import ActionRequest, Direction, Position

_A = ActionRequest

_PATTERNS = {
    (1, 0): [
        _A.MOVE_FORWARD,
        _A.ROTATE_RIGHT_45,
        _A.MOVE_FORWARD,
        _A.SHOOT,
        _A.ROTATE_LEFT_90,
        _A.MOVE_FORWARD,
    ],
    (1, 1): [
        _A.ROTATE_LEFT_45,
        _A.SHOOT,
        _A.MOVE_BACKWARD,
        _A.MOVE_BACKWARD,
        _A.ROTATE_RIGHT_90,
        _A.MOVE_FORWARD,
    ],
    (2, 0): [
        _A.SHOOT,
        _A.ROTATE_LEFT_45,
        _A.MOVE_FORWARD,
        _A.MOVE_FORWARD,
        _A.ROTATE_RIGHT_90,
        _A.SHOOT,
    ],
    (2, 1): [
        _A.MOVE_FORWARD,
        _A.MOVE_FORWARD,
        _A.SHOOT,
        _A.ROTATE_RIGHT_45,
        _A.MOVE_BACKWARD,
        _A.ROTATE_LEFT_90,
    ],
}

_BATTLE_INFO_EVERY = 5


def _action_sequence(player_index: int, tank_index: int) -> list[ActionRequest]:
    """The fixed script for a tank, interleaved with battle-info requests."""
    player_key = 1 if player_index == 1 else 2
    sequence = [_A.GET_BATTLE_INFO, *_PATTERNS[(player_key, tank_index % 2)]]
    # The bound grows as requests are inserted, so it is re-read each pass.
    i = 0
    while i < len(sequence) * 2:
        sequence.insert(i, _A.GET_BATTLE_INFO)
        i += 3
    return sequence


class Controller(TankAlgorithm):
    """Plays a deterministic script chosen by player and tank index."""

    def __init__(self, player_index: int, tank_index: int) -> None:
        self.player_index = player_index
        self.tank_index = tank_index
        self.position = Position(0, 0)
        self.direction = Direction.UP
        self._sequence = _action_sequence(player_index, tank_index)
        self._index = 0
        self._needs_battle_info = True

    def get_action(self) -> ActionRequest:
        if self._needs_battle_info:
            self._needs_battle_info = False
            return _A.GET_BATTLE_INFO

        if self._index >= len(self._sequence):
            self._index = 0
            self._needs_battle_info = True
            return _A.GET_BATTLE_INFO

        action = self._sequence[self._index]
        self._index += 1
        if self._index % _BATTLE_INFO_EVERY == 0:
            self._needs_battle_info = True
        return action

    def update_battle_info(self, info: BattleInfo) -> None:
        """Take in battle info; an enemy in sight makes shooting the next action."""
        if not isinstance(info, TankBattleInfo):
            raise TypeError("BattleInfo is not a TankBattleInfo")
        self.position = info.position
        self.direction = info.direction
        if any(not tank.is_my_tank for tank in info.tanks):
            self._sequence.insert(self._index, _A.SHOOT)


class MyTankAlgorithmFactory(TankAlgorithmFactory):
    """Creates a scripted controller for every tank."""

    def create(self, player_index: int, tank_index: int) -> Controller:
        return Controller(player_index, tank_index)