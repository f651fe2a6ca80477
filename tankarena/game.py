"""The game manager: loads a map, runs rounds and records the outcome."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from tankarena.algorithm import TankAlgorithmFactory
from tankarena.board import Board
from tankarena.core import ActionRequest, CellType, Direction, Position
from tankarena.objects import Shell
from tankarena.player import Player, PlayerFactory
from tankarena.satellite import BoardSatelliteView
from tankarena.tank import BackwardState, Tank

logger = logging.getLogger(__name__)

MAX_NO_SHELLS_STEPS = 40

_STARTING_DIRECTIONS = {
    CellType.TANK1: Direction.LEFT,
    CellType.TANK2: Direction.RIGHT,
}


class GameManager:
    """Runs a full game between two players on a board read from a map file."""

    def __init__(
        self,
        player_factory: PlayerFactory,
        algorithm_factory: TankAlgorithmFactory,
    ) -> None:
        self.player_factory = player_factory
        self.algorithm_factory = algorithm_factory
        self.board = Board(wrap_around=True)
        self.tanks: list[Tank] = []
        self.shells: list[Shell] = []
        self.player1: Player | None = None
        self.player2: Player | None = None
        self.current_step = 0
        self.game_over = False
        self.result = ""
        self.output_path: Path | None = None
        self._output: TextIO | None = None
        self._no_shells_steps = 0

    def read_board(self, path: str | Path) -> None:
        """Load the map, open '<path>.out' for the results and set up the game.

        Raises BoardFormatError if the map cannot be read and OSError if the
        output file cannot be created.
        """
        board = Board.load(path)
        board.wrap_around = True
        self.board = board

        output_path = Path(f"{path}.out")
        self.close()
        self._output = open(output_path, "w", encoding="utf-8")
        self.output_path = output_path

        self._initialize_players()
        self._initialize_tanks()
        self._check_initial_game_over()

    def close(self) -> None:
        """Close the output file, if one is open."""
        if self._output is not None:
            self._output.close()
            self._output = None

    def run(self) -> None:
        """Play rounds until someone wins, a tie is reached or steps run out."""
        try:
            if self.game_over:
                self._write_line(self.result)
                return

            while not self.game_over and self.current_step < self.board.max_steps:
                self._process_round()
                self.current_step += 1
                if self._is_game_over():
                    break
                self._write_line(", ".join(tank.action_string() for tank in self.tanks))
                self._cleanup_dead_objects()

            if not self.game_over:
                self.game_over = True
                player1_tanks, player2_tanks = self._count_tanks(alive_only=True)
                self.result = (
                    f"Tie, reached max steps = {self.board.max_steps}, "
                    f"player 1 has {player1_tanks} tanks, "
                    f"player 2 has {player2_tanks} tanks"
                )
            self._write_line(self.result)
        finally:
            self.close()

    def _initialize_players(self) -> None:
        board = self.board
        self.player1, self.player2 = (
            self.player_factory.create(
                index, board.width, board.height, board.max_steps,
                board.num_shells_per_tank,
            )
            for index in (1, 2)
        )

    def _initialize_tanks(self) -> None:
        self.tanks.clear()
        self.shells.clear()
        counts = {CellType.TANK1: 0, CellType.TANK2: 0}
        for y in range(self.board.height):
            for x in range(self.board.width):
                kind = self.board.cell_at(x, y)
                if kind not in counts:
                    continue
                player_index = kind.player_index()
                tank_index = counts[kind]
                algorithm = self.algorithm_factory.create(player_index, tank_index)
                self.tanks.append(
                    Tank(
                        x, y, _STARTING_DIRECTIONS[kind], kind,
                        tank_index, player_index, tank_index,
                        self.board.num_shells_per_tank, algorithm,
                    )
                )
                counts[kind] += 1

    def _count_tanks(self, alive_only: bool) -> tuple[int, int]:
        counted = [t for t in self.tanks if t.alive or not alive_only]
        player1 = sum(1 for t in counted if t.kind is CellType.TANK1)
        player2 = sum(1 for t in counted if t.kind is CellType.TANK2)
        return player1, player2

    def _decide(self, player1_tanks: int, player2_tanks: int) -> bool:
        if player1_tanks == 0 and player2_tanks == 0:
            self.result = "Tie, both players have zero tanks"
        elif player1_tanks == 0:
            self.result = f"Player 2 won with {player2_tanks} tanks still alive"
        elif player2_tanks == 0:
            self.result = f"Player 1 won with {player1_tanks} tanks still alive"
        else:
            return False
        self.game_over = True
        return True

    def _check_initial_game_over(self) -> None:
        self._decide(*self._count_tanks(alive_only=False))

    def _is_game_over(self) -> bool:
        return self._decide(*self._count_tanks(alive_only=True))

    def _process_round(self) -> None:
        for tank in self.tanks:
            if tank.alive:
                tank.reset_round_state()
        for tank in self.tanks:
            if tank.alive:
                self._process_tank_action(tank)

        self._handle_collisions()

        for tank in self.tanks:
            tank.update()

        if any(tank.alive and tank.shell_count > 0 for tank in self.tanks):
            self._no_shells_steps = 0
        else:
            self._no_shells_steps += 1
            if self._no_shells_steps >= MAX_NO_SHELLS_STEPS:
                self.game_over = True
                self.result = (
                    f"Tie, both players have zero shells for "
                    f"{MAX_NO_SHELLS_STEPS} steps"
                )

    def _relocate(self, tank: Tank, target: tuple[int, int]) -> bool:
        """Move the tank to target on the board; False if it would not move."""
        new_x, new_y = target
        if (new_x, new_y) == (tank.x, tank.y):
            return False
        self.board.set_cell(tank.x, tank.y, CellType.EMPTY)
        self.board.set_cell(new_x, new_y, tank.kind)
        tank.position = Position(new_x, new_y)
        return True

    def _process_tank_action(self, tank: Tank) -> None:
        action = tank.next_action()
        ignored = False

        if action is ActionRequest.MOVE_FORWARD:
            ignored = not self._relocate(tank, tank.move_forward(self.board))
        elif action is ActionRequest.MOVE_BACKWARD:
            tank.request_backward()
            if tank.backward_state is not BackwardState.MOVING_BACKWARD:
                ignored = True
            else:
                ignored = not self._relocate(tank, tank.move_backward(self.board))
        elif action is ActionRequest.ROTATE_LEFT_90:
            tank.rotate_left_90()
        elif action is ActionRequest.ROTATE_RIGHT_90:
            tank.rotate_right_90()
        elif action is ActionRequest.ROTATE_LEFT_45:
            tank.rotate_left_45()
        elif action is ActionRequest.ROTATE_RIGHT_45:
            tank.rotate_right_45()
        elif action is ActionRequest.SHOOT:
            if tank.can_shoot():
                self._fire(tank)
            else:
                ignored = True
        elif action is ActionRequest.GET_BATTLE_INFO:
            view = BoardSatelliteView(self.board, self.tanks, self.shells, tank)
            player = self.player1 if tank.player_index == 1 else self.player2
            if player is not None and tank.algorithm is not None:
                player.update_tank_with_battle_info(tank.algorithm, view)

        tank.set_last_action(str(action), ignored)

    def _fire(self, tank: Tank) -> None:
        tank.shoot()
        dx, dy = tank.direction.offset()
        shell_x, shell_y = tank.x + dx, tank.y + dy
        target = self.board.cell_at(shell_x, shell_y)
        if target is CellType.EMPTY:
            self.shells.append(Shell(shell_x, shell_y, tank.direction, tank.player_index))
            self.board.set_cell(shell_x, shell_y, CellType.SHELL)
            return
        logger.info(
            "Shell blocked and exploded immediately at (%d, %d)", shell_x, shell_y
        )
        if target in (CellType.WALL, CellType.WEAK_WALL):
            self.board.weaken_wall(shell_x, shell_y)

    def _handle_collisions(self) -> None:
        for shell in self.shells:
            if shell.kind is not CellType.SHELL:
                continue
            for tank in self.tanks:
                if tank.alive and shell.collides_with(tank):
                    if shell.owner_player_index != tank.player_index:
                        tank.destroy()
                        self.board.set_cell(tank.x, tank.y, CellType.BOOM)
                        logger.info(
                            "Tank %d of Player %d was destroyed!",
                            tank.tank_id, tank.player_index,
                        )
                    shell.explode(self.board)
                    shell.kind = CellType.BOOM

        for shell in self.shells:
            if shell.kind is not CellType.SHELL:
                continue
            if self.board.cell_at(shell.x, shell.y) is CellType.MINE:
                shell.explode(self.board)
                shell.kind = CellType.BOOM
                self.board.set_cell(shell.x, shell.y, CellType.EMPTY)

        for i, first in enumerate(self.shells):
            if first.kind is not CellType.SHELL:
                continue
            for second in self.shells[i + 1:]:
                if second.kind is CellType.SHELL and first.collides_with(second):
                    first.explode(self.board)
                    first.kind = CellType.BOOM
                    second.explode(self.board)
                    second.kind = CellType.BOOM

    def _cleanup_dead_objects(self) -> None:
        self.shells = [shell for shell in self.shells if shell.kind is CellType.SHELL]

    def _write_line(self, line: str) -> None:
        if self._output is not None:
            self._output.write(line + "\n")