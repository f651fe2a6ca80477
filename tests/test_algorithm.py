import pytest

from tankarena.algorithm import BattleInfo, TankAlgorithm, TankAlgorithmFactory
from tankarena.core import ActionRequest


class _Scripted(TankAlgorithm):
    def __init__(self, actions):
        self.actions = list(actions)
        self.received = []

    def get_action(self):
        return self.actions.pop(0) if self.actions else ActionRequest.DO_NOTHING

    def update_battle_info(self, info):
        self.received.append(info)


class _Factory(TankAlgorithmFactory):
    def create(self, player_index, tank_index):
        return _Scripted([ActionRequest.SHOOT] * (player_index + tank_index))


def test_tank_algorithm_is_abstract():
    with pytest.raises(TypeError):
        TankAlgorithm()


def test_factory_is_abstract():
    with pytest.raises(TypeError):
        TankAlgorithmFactory()


def test_concrete_algorithm_receives_battle_info():
    algo = _Scripted([])
    info = BattleInfo()
    algo.update_battle_info(info)
    assert algo.received == [info]


def test_factory_algorithm_acts_and_receives_info():
    algo = _Factory().create(1, 0)
    first = BattleInfo()
    second = BattleInfo()
    algo.update_battle_info(first)
    algo.update_battle_info(second)
    assert algo.received == [first, second]
    assert algo.get_action() is ActionRequest.SHOOT
    assert algo.get_action() is ActionRequest.DO_NOTHING