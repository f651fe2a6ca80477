"""Tanks: movement, rotation, shooting and per-round bookkeeping."""

from __future__ import annotations

from enum import Enum, auto

from tankarena.algorithm import BattleInfo, TankAlgorithm
from tankarena.board import Board
from tankarena.core import ActionRequest, CellType, Direction
from tankarena.objects import GameObject

SHOOT_COOLDOWN = 2


class BackwardState(Enum):
    """Progress of a requested backward move, which takes two waiting turns."""

    NOT_REQUESTED = auto()
    WAITING_1 = auto()
    WAITING_2 = auto()
    MOVING_BACKWARD = auto()


class Tank(GameObject):
    """A tank belonging to one player and steered by an algorithm."""

    def __init__(
        self,
        x: int,
        y: int,
        direction: Direction,
        kind: CellType,
        tank_id: int,
        player_index: int,
        tank_index: int,
        shells: int,
        algorithm: TankAlgorithm | None = None,
    ) -> None:
        super().__init__(x, y, direction, kind)
        self.alive = True
        self.shell_count = shells
        self.shoot_cooldown = 0
        self.tank_id = tank_id
        self.player_index = player_index
        self.tank_index = tank_index
        self.algorithm = algorithm
        self.backward_state = BackwardState.NOT_REQUESTED
        self.action_was_ignored = False
        self.killed_this_round = False
        self.last_action = ""

    def update(self) -> None:
        """Advance the cooldown and the backward-move countdown by one turn."""
        if not self.alive:
            return
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1
        if self.backward_state is BackwardState.WAITING_1:
            self.backward_state = BackwardState.WAITING_2
        elif self.backward_state is BackwardState.WAITING_2:
            self.backward_state = BackwardState.MOVING_BACKWARD

    def destroy(self) -> None:
        self.alive = False
        self.killed_this_round = True

    def can_shoot(self) -> bool:
        return self.shoot_cooldown == 0 and self.shell_count > 0 and self.alive

    def reset_round_state(self) -> None:
        self.action_was_ignored = False
        self.killed_this_round = False

    def action_string(self) -> str:
        """The tank's entry for this round in the game's output file."""
        if not self.alive and not self.killed_this_round:
            return "killed"
        text = self.last_action
        if self.action_was_ignored:
            text += " (ignored)"
        if self.killed_this_round:
            text += " (killed)"
        return text

    def next_action(self) -> ActionRequest:
        """Ask the algorithm for an action; dead or unsteered tanks do nothing."""
        if self.algorithm is None or not self.alive:
            return ActionRequest.DO_NOTHING
        return self.algorithm.get_action()

    def update_algorithm(self, info: BattleInfo) -> None:
        if self.algorithm is not None and self.alive:
            self.algorithm.update_battle_info(info)

    def shoot(self) -> None:
        """Spend a shell and start the cooldown, if shooting is possible."""
        if not self.can_shoot():
            return
        self.shell_count -= 1
        self.shoot_cooldown = SHOOT_COOLDOWN

    def move_forward(self, board: Board) -> tuple[int, int]:
        """Target cell one step ahead; cancels any pending backward move."""
        self.cancel_backward()
        dx, dy = self.direction.offset()
        return self.try_to_move(board, dx, dy)

    def move_backward(self, board: Board) -> tuple[int, int]:
        """Target cell one step behind, or the current cell if not yet allowed."""
        if self.backward_state is not BackwardState.MOVING_BACKWARD:
            return self.x, self.y
        self.cancel_backward()
        dx, dy = self.direction.offset()
        return self.try_to_move(board, -dx, -dy)

    def request_backward(self) -> None:
        if self.backward_state is BackwardState.NOT_REQUESTED:
            self.backward_state = BackwardState.WAITING_1

    def cancel_backward(self) -> None:
        self.backward_state = BackwardState.NOT_REQUESTED

    def set_last_action(self, action: str, ignored: bool = False) -> None:
        self.last_action = action
        self.action_was_ignored = ignored

    def status(self) -> str:
        """A multi-line description of the tank's state."""
        return "\n".join(
            [
                f"Tank {self.tank_id} Status:",
                f"  Alive: {'Yes' if self.alive else 'No'}",
                f"  Position: ({self.x}, {self.y})",
                f"  Direction: {self.direction.label()}",
                f"  Shell Count: {self.shell_count}",
                f"  Shoot Cooldown: {self.shoot_cooldown}",
            ]
        )

    def rotate_left_45(self) -> None:
        self.direction = self.direction.rotated(-1)

    def rotate_right_45(self) -> None:
        self.direction = self.direction.rotated(1)

    def rotate_left_90(self) -> None:
        self.direction = self.direction.rotated(-2)

    def rotate_right_90(self) -> None:
        self.direction = self.direction.rotated(2)