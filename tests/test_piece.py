import copy

import pytest

from tetris_board import BoardGrid
from tetris_config import GameConfig
from tetris_game import Game
from tetris_piece import ActivePiece, PieceState
from tetris_shapes import ShapeCatalog

CATALOG = ShapeCatalog.standard()


@pytest.fixture
def board():
    return BoardGrid(10, 20)


def spawn(board, kind, position, now=0.0, on_lock=None):
    return ActivePiece.spawn(board, CATALOG[kind], position, 1.0, 0.5, now=now, on_lock=on_lock)


def test_spawn_copies_shape(board):
    p = spawn(board, "T", (0, 0), now=3.0)
    assert p.cells == list(CATALOG["T"].cells)
    assert p.cells is not CATALOG["T"].cells
    assert p.rotation_index == 0
    assert p.step_time == 4.0
    assert p.lock_time == 0.0
    assert not p.placed and not p.locked


def test_move_resets_lock_timer(board):
    p = spawn(board, "O", (0, 0))
    p.advance(0.3)
    assert p.move(1, 0)
    assert p.position == (1, 0)
    assert p.lock_time == 0.0


def test_rejected_move_changes_nothing(board):
    p = spawn(board, "O", (-5, 0))
    p.advance(0.3)
    assert not p.move(-1, 0)
    assert p.position == (-5, 0)
    assert p.lock_time == 0.3


def test_state(board):
    p = spawn(board, "O", (0, 0))
    assert p.state is PieceState.FALLING
    p.position = (0, -10)
    assert p.state is PieceState.GROUNDED
    p.lock()
    assert p.state is PieceState.LOCKED


def test_state_ignores_own_cells(board):
    p = spawn(board, "O", (0, 0))
    p.place()
    assert p.state is PieceState.FALLING
    assert p.placed


def test_lifted_restores_cells(board):
    p = spawn(board, "T", (0, 0))
    p.place()
    cells = set(p.absolute_cells())
    with p.lifted():
        assert not any(board.is_occupied(c) for c in cells)
    assert all(board.tag(c) == "T" for c in cells)


def test_step_moves_down_and_rearms_timer(board):
    p = spawn(board, "O", (0, 0))
    p.step(now=1.0)
    assert p.position == (0, -1)
    assert p.step_time == 2.0
    assert not p.locked


def test_grounded_step_waits_for_lock_delay(board):
    p = spawn(board, "O", (0, -10))
    p.advance(0.2)
    p.step(now=1.0)
    assert not p.locked
    p.advance(0.4)
    p.step(now=2.0)
    assert p.locked
    assert board.occupied() == {(0, -9): "O", (1, -9): "O", (0, -10): "O", (1, -10): "O"}


def test_hard_drop_locks_at_floor(board):
    locks = []
    p = spawn(board, "O", (0, 5), on_lock=locks.append)
    assert p.hard_drop() == 15
    assert p.locked
    assert p.position == (0, -10)
    assert locks == [0]


def test_hard_drop_onto_stack(board):
    board.set_cell((1, -10), True, "X")
    p = spawn(board, "O", (0, 5))
    assert p.hard_drop() == 14
    assert p.position == (0, -9)


def test_lock_twice_is_noop(board):
    locks = []
    p = spawn(board, "O", (0, -10), on_lock=locks.append)
    p.lock()
    assert p.lock() == 0
    assert locks == [0]


def test_rotation_resets_lock_timer(board):
    p = spawn(board, "T", (0, 0))
    p.advance(0.4)
    assert p.rotate(1)
    assert p.rotation_index == 1
    assert p.lock_time == 0.0


def test_failed_rotation_leaves_state_untouched(board):
    p = spawn(board, "T", (0, 0))
    own = set(p.absolute_cells())
    b = board.bounds
    for x in range(b.x_min, b.x_max):
        for y in range(b.y_min, b.y_max):
            if (x, y) not in own:
                board.set_cell((x, y))
    p.advance(0.25)
    before = copy.copy(p.__dict__)
    before["cells"] = list(p.cells)

    assert not p.rotate(1)
    assert not p.rotate(-1)
    assert p.cells == before["cells"]
    assert p.position == before["position"]
    assert p.rotation_index == before["rotation_index"]
    assert p.lock_time == before["lock_time"]


def test_turn_then_turn_back_restores_offsets(board):
    p = spawn(board, "J", (0, 0))
    assert p.rotate(1)
    assert p.rotate(-1)
    assert p.cells == list(CATALOG["J"].cells)
    assert p.rotation_index == 0
    assert p.position == (0, 0)


def test_placed_piece_moves_without_hitting_itself(board):
    p = spawn(board, "T", (0, 0))
    p.place()
    assert p.move(0, -1)
    assert p.position == (0, -1)
    assert p.placed
    assert board.occupied() == {c: "T" for c in p.absolute_cells()}


def test_placed_piece_rejected_move_stays_on_board(board):
    p = spawn(board, "O", (-5, 0))
    p.place()
    assert not p.move(-1, 0)
    assert board.occupied() == {c: "O" for c in p.absolute_cells()}


def test_placed_piece_rotates_in_place(board):
    p = spawn(board, "T", (0, 0))
    p.place()
    # the turned cells overlap the old ones; no kick is needed
    assert p.rotate(1)
    assert p.position == (0, 0)
    assert p.rotation_index == 1
    assert board.occupied() == {c: "T" for c in p.absolute_cells()}


def test_placed_piece_steps_down(board):
    p = spawn(board, "O", (0, 0))
    p.place()
    p.step(now=1.0)
    assert p.position == (0, -1)
    assert board.occupied() == {c: "O" for c in p.absolute_cells()}


def test_hard_drop_of_spawned_piece_reaches_floor():
    game = Game(GameConfig(seed=1))
    game.start("T")
    t = game.piece
    assert t.hard_drop() == 18
    assert t.locked
    assert t.position == (-1, -10)
    assert game.games_over == 0
    assert all(game.board.tag(c) == "T" for c in t.absolute_cells())
    assert game.piece is not t and game.piece.placed
