import pytest

from tankarena.board import Board, BoardFormatError, WallDamage
from tankarena.core import CellType

SAMPLE = (
    "Test map\n"
    "MaxSteps = 100\n"
    "NumShells = 5\n"
    "Rows = 4\n"
    "Cols = 5\n"
    "#####\n"
    "#1 2#\n"
    "# @ #\n"
    "#####\n"
)


def test_parse_header_and_cells():
    board = Board.parse(SAMPLE)
    assert board.width == 5
    assert board.height == 4
    assert board.max_steps == 100
    assert board.num_shells_per_tank == 5
    assert board.cell_at(0, 0) is CellType.WALL
    assert board.cell_at(1, 1) is CellType.TANK1
    assert board.cell_at(3, 1) is CellType.TANK2
    assert board.cell_at(2, 2) is CellType.MINE
    assert board.cell_at(2, 1) is CellType.EMPTY


def test_parse_marks_walls():
    board = Board.parse(SAMPLE)
    assert board.wall_info[0][0] == WallDamage(is_wall=True, hits_taken=0)
    assert board.wall_info[1][1] == WallDamage()


def test_parse_header_without_spaces_and_with_prefix():
    text = "d\nMaxSteps=7\nsome NumShells =3\nRows= 1\nCols =2\n12\n"
    board = Board.parse(text)
    assert (board.max_steps, board.num_shells_per_tank) == (7, 3)
    assert (board.width, board.height) == (2, 1)
    assert board.cell_at(1, 0) is CellType.TANK2


def test_parse_pads_short_and_missing_rows():
    text = "d\nMaxSteps = 1\nNumShells = 1\nRows = 3\nCols = 4\n#\n"
    board = Board.parse(text)
    assert board.cell_at(0, 0) is CellType.WALL
    assert all(board.cell_at(x, 0) is CellType.EMPTY for x in range(1, 4))
    assert all(
        board.cell_at(x, y) is CellType.EMPTY for y in (1, 2) for x in range(4)
    )


def test_parse_ignores_extra_columns_and_rows():
    text = "d\nMaxSteps = 1\nNumShells = 1\nRows = 1\nCols = 2\n ####\n####\n"
    board = Board.parse(text)
    assert board.grid == [[CellType.EMPTY, CellType.WALL]]


def test_parse_unknown_chars_are_empty():
    text = "d\nMaxSteps = 1\nNumShells = 1\nRows = 1\nCols = 3\nx%\r\n"
    board = Board.parse(text)
    assert board.grid == [[CellType.EMPTY] * 3]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "desc\n",
        "desc\nMaxSteps = abc\n",
        "desc\nMaxSteps = 10\nNumShells = 2\n",
        "desc\nMaxSteps = 10\nNumShells = 2\nRows = 3\n",
        "desc\nMaxSteps = 10\nNumShells = 2\nRows = 3\nColumns = 3\n",
        "desc\nMaxSteps = -1\nNumShells = 2\nRows = 3\nCols = 3\n",
    ],
)
def test_parse_rejects_bad_headers(text):
    with pytest.raises(BoardFormatError):
        Board.parse(text)


def test_parse_error_messages():
    with pytest.raises(BoardFormatError, match="File is empty"):
        Board.parse("")
    with pytest.raises(BoardFormatError, match="Invalid MaxSteps format"):
        Board.parse("desc\nMaxSteps = x\n")
    with pytest.raises(BoardFormatError, match="Missing NumShells information"):
        Board.parse("desc\nMaxSteps = 3\n")


def test_load_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(SAMPLE)
    loaded = Board.load(path)
    assert loaded.grid == Board.parse(SAMPLE).grid
    assert loaded.max_steps == 100


def test_load_missing_file(tmp_path):
    with pytest.raises(BoardFormatError):
        Board.load(tmp_path / "absent.txt")


def test_default_board_is_empty():
    board = Board()
    assert (board.width, board.height) == (0, 0)
    assert not board.in_bounds(0, 0)
    assert board.cell_at(0, 0) is CellType.UNKNOWN


def test_out_of_bounds_without_wrap():
    board = Board(3, 3)
    assert board.cell_at(999, 999) is CellType.UNKNOWN
    assert board.cell_at(-1, 0) is CellType.UNKNOWN
    board.set_cell(5, 5, CellType.WALL)
    assert all(cell is CellType.EMPTY for row in board.grid for cell in row)


def test_wrap_around_indexing():
    board = Board(4, 3, wrap_around=True)
    board.set_cell(-1, -1, CellType.MINE)
    assert board.cell_at(3, 2) is CellType.MINE
    assert board.cell_at(-1, -1) is CellType.MINE
    assert board.cell_at(7, 5) is CellType.MINE


def test_set_cell_tracks_walls():
    board = Board(3, 3)
    board.set_cell(1, 2, CellType.WALL)
    assert board.cell_at(1, 2) is CellType.WALL
    assert board.wall_info[2][1].is_wall
    board.set_cell(1, 2, CellType.EMPTY)
    assert board.cell_at(1, 2) is CellType.EMPTY
    assert not board.wall_info[2][1].is_wall


def test_weaken_wall_two_hits():
    board = Board.parse(SAMPLE)
    board.weaken_wall(0, 0)
    assert board.cell_at(0, 0) is CellType.WEAK_WALL
    assert board.wall_info[0][0].hits_taken == 1
    board.weaken_wall(0, 0)
    assert board.cell_at(0, 0) is CellType.EMPTY
    assert board.wall_info[0][0] == WallDamage()


def test_weaken_non_wall_does_nothing():
    board = Board.parse(SAMPLE)
    board.weaken_wall(2, 2)
    assert board.cell_at(2, 2) is CellType.MINE
    board.weaken_wall(1, 1)
    assert board.cell_at(1, 1) is CellType.TANK1


def test_weaken_wall_with_wrap():
    board = Board.parse(SAMPLE)
    board.wrap_around = True
    board.weaken_wall(-1, -1)
    assert board.cell_at(4, 3) is CellType.WEAK_WALL


def test_weaken_wall_out_of_bounds_ignored():
    board = Board.parse(SAMPLE)
    before = [row[:] for row in board.grid]
    board.weaken_wall(50, 50)
    assert board.grid == before