# tankarena

A turn-based tank battle simulator. Two players each control one or more
tanks on a grid whose edges wrap around. Each round every living tank asks
its algorithm for an action: move forward, move backward (which only
happens after two waiting turns), rotate by 45° or 90°, shoot, ask for a
satellite view of the battlefield, or do nothing. Walls take two shots to
destroy: the first turns them into weak walls, the second clears them.

## Installing

```
pip install .
```

## Running a game

```
tankarena path/to/map.txt
```

The command exits with 0 on success, 1 on wrong usage, 2 if the map cannot
be read or the output file cannot be created, and 3 on any other error.

The game writes one line per round to `path/to/map.txt.out`. Each line lists
every tank's action for that round, in board order (top to bottom, left to
right), for example `MoveForward, Shoot (ignored), killed`. An action that
had no effect is marked `(ignored)`; a tank destroyed that round is marked
`(killed)`, and a tank destroyed earlier shows as `killed`. The last line
gives the result:

- `Player 1 won with N tanks still alive`
- `Player 2 won with N tanks still alive`
- `Tie, both players have zero tanks`
- `Tie, both players have zero shells for 40 steps`
- `Tie, reached max steps = N, player 1 has A tanks, player 2 has B tanks`

Player 1's tanks start facing left and player 2's tanks start facing right.
Every tank is driven by the built-in scripted `Controller`, which plays a
fixed sequence of actions chosen by player and tank index, interleaved with
battle-info requests, and shoots next whenever it is told an enemy tank is
in sight.

## Map format

```
Small duel
MaxSteps = 200
NumShells = 10
Rows = 5
Cols = 8
########
#1    2#
#  @   #
#      #
########
```

The first line is a free description. The next four lines give the number of
steps, the shells per tank and the grid size, in that order. Then come the
rows of the grid:

| Char | Meaning         |
|------|-----------------|
| `#`  | wall            |
| `@`  | mine            |
| `1`  | player 1 tank   |
| `2`  | player 2 tank   |
| else | empty           |

Short rows and missing rows are filled with empty cells; characters beyond
`Cols` are ignored.

## Using it as a library

```python
from tankarena.game import GameManager
from tankarena.player import MyPlayerFactory
from tankarena.controller import MyTankAlgorithmFactory

game = GameManager(MyPlayerFactory(), MyTankAlgorithmFactory())
game.read_board("map.txt")   # raises BoardFormatError or OSError
game.run()
print(game.result)
```

The main pieces:

- `tankarena.core`: `CellType`, `Direction`, `Position` and `ActionRequest`.
- `tankarena.board`: `Board`, with `Board.parse(text)`, `Board.load(path)`,
  `cell_at`, `set_cell` and `weaken_wall`; `BoardFormatError` for bad maps.
- `tankarena.objects`: `GameObject` and `Shell`.
- `tankarena.tank`: `Tank` and `BackwardState`.
- `tankarena.algorithm`: the `TankAlgorithm` and `TankAlgorithmFactory`
  interfaces and the `BattleInfo` base.
- `tankarena.battle_info`: `TankBattleInfo` and `TankInfo`.
- `tankarena.satellite`: `SatelliteView` and `BoardSatelliteView`, which
  answer `object_at(x, y)` with `%` for the asking tank, `*` for a shell,
  `#`, `@`, `1`, `2`, a space for empty cells and `&` off the board.
- `tankarena.player`: `Player`, `MyPlayer`, `PlayerFactory` and
  `MyPlayerFactory`; `MyPlayer` scans the whole view into a `TankBattleInfo`.
- `tankarena.controller`: `Controller` and `MyTankAlgorithmFactory`.

To supply your own tank behaviour, subclass `TankAlgorithm` and
`TankAlgorithmFactory` and implement `get_action` and `update_battle_info`.

Progress messages (walls weakened or destroyed, shells exploding, tanks
destroyed) go to the standard `logging` module.

## What it does not do

- There is no board display; a game is seen only through its `.out` file
  and the log.
- Fired shells are placed in the cell in front of the tank and stay there;
  the game does not advance them from round to round (`Shell.update` can do
  so, but the game manager does not call it). A shell destroys an enemy tank
  only when that tank shares its cell.
- Tank moves are not checked against walls or mines.

## Tests

```
pip install .[test]
pytest
```