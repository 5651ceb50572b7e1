import numpy as np
import pytest

from engine import HexBoard, EMPTY, P1, P2, opponent
from oracle import has_winning_chain, winner


def transpose(board):
    """Mirrors the board across the main diagonal and swaps the players."""
    t = HexBoard(board.board_size)
    for r in range(board.board_size):
        for c in range(board.board_size):
            side = board.occupant(r, c)
            if side != EMPTY:
                t.apply_move(c, r, opponent(side))
    return t


def test_two_by_two_column_wins_for_p1(make_board):
    board = make_board(2, [(P1, (0, 0)), (P1, (1, 0))])
    assert has_winning_chain(board, P1)
    assert not has_winning_chain(board, P2)
    assert winner(board, P1) == P1
    assert winner(board, P2) == P1


def test_three_by_three_game_p1_wins(make_board):
    board = make_board(3, [
        (P1, (0, 0)), (P2, (0, 1)), (P1, (1, 0)), (P2, (0, 2)), (P1, (2, 0)),
    ])
    assert winner(board, P1) == P1
    assert winner(board, P2) == P1


def test_p2_row_crosses_west_to_east(make_board):
    board = make_board(3, [(P2, (0, 0)), (P2, (0, 1)), (P2, (0, 2))])
    assert winner(board, P2) == P2
    assert winner(board, P1) == P2


def test_p2_column_does_not_win(make_board):
    board = make_board(3, [(P2, (0, 0)), (P2, (1, 0)), (P2, (2, 0))])
    assert winner(board, P2) == EMPTY


@pytest.mark.parametrize("size", [2, 3, 11])
def test_empty_board_has_no_winner(size):
    board = HexBoard(size)
    assert not has_winning_chain(board, P1)
    assert not has_winning_chain(board, P2)
    assert winner(board, P1) == EMPTY
    assert winner(board, P2) == EMPTY


def test_diagonal_chain_uses_hex_adjacency(make_board):
    # (0,1) -> (1,0) is adjacent, (0,0) -> (1,1) is not
    board = make_board(2, [(P1, (0, 1)), (P1, (1, 0))])
    assert has_winning_chain(board, P1)
    board = make_board(2, [(P1, (0, 0)), (P1, (1, 1))])
    assert not has_winning_chain(board, P1)


def test_chain_must_touch_both_edges(make_board):
    board = make_board(4, [(P1, (0, 1)), (P1, (1, 1)), (P1, (2, 1))])
    assert not has_winning_chain(board, P1)
    board.apply_move(3, 1, P1)
    assert has_winning_chain(board, P1)


def test_opponent_stones_block(make_board):
    board = make_board(3, [(P1, (0, 1)), (P2, (1, 1)), (P1, (2, 1)), (P1, (1, 0))])
    # (0,1) -> (1,0) -> (2,0)? (2,0) is empty, so no chain yet
    assert not has_winning_chain(board, P1)
    board.apply_move(2, 0, P1)
    assert has_winning_chain(board, P1)


def test_winding_chain(make_board):
    moves = [(P2, cell) for cell in [(2, 0), (1, 1), (0, 2), (0, 3), (1, 3), (2, 3), (2, 4)]]
    board = make_board(5, moves)
    assert has_winning_chain(board, P2)
    assert not has_winning_chain(board, P1)


def test_winner_rejects_unknown_side():
    with pytest.raises(ValueError):
        winner(HexBoard(3), EMPTY)


@pytest.mark.parametrize("size", [2, 3, 4, 5, 7, 11])
def test_full_board_has_exactly_one_winner(size, random_fill):
    for seed in range(25):
        board = random_fill(size, seed)
        assert board.is_full()
        p1 = has_winning_chain(board, P1)
        p2 = has_winning_chain(board, P2)
        assert p1 != p2
        assert winner(board, P1) in (P1, P2)
        assert winner(board, P1) == winner(board, P2)


@pytest.mark.parametrize("size", [3, 5, 8])
def test_transpose_swaps_winner(size, random_fill):
    for seed in range(20):
        board = random_fill(size, seed)
        assert winner(transpose(board)) == opponent(winner(board))


def test_transpose_partial_board():
    rng = np.random.default_rng(11)
    for _ in range(30):
        board = HexBoard(6)
        order = rng.permutation(36)[:int(rng.integers(0, 36))]
        board.fill(order, P1, P2)
        t = transpose(board)
        assert has_winning_chain(board, P1) == has_winning_chain(t, P2)
        assert has_winning_chain(board, P2) == has_winning_chain(t, P1)


def test_connectivity_is_monotone():
    rng = np.random.default_rng(5)
    for _ in range(10):
        board = HexBoard(5)
        for node in rng.permutation(25):
            r, c = board.cell_of(node)
            side = int(rng.integers(1, 3))
            had_own = has_winning_chain(board, side)
            had_other = has_winning_chain(board, opponent(side))
            assert board.apply_move(r, c, side)
            # A new stone keeps its own chains and never helps the opponent
            if had_own:
                assert has_winning_chain(board, side)
            assert has_winning_chain(board, opponent(side)) == had_other


def test_winner_never_changes_once_decided():
    rng = np.random.default_rng(9)
    board = HexBoard(6)
    decided = EMPTY
    side = P1
    for node in rng.permutation(36):
        board.apply_move(*board.cell_of(node), side)
        current = winner(board, side)
        if decided != EMPTY:
            assert current == decided
        decided = current
        side = opponent(side)
    assert decided in (P1, P2)


def test_oracle_does_not_mutate_board(make_board):
    board = make_board(3, [(P1, (0, 0)), (P2, (1, 1))])
    before = board.nodes.copy()
    winner(board, P2)
    assert np.array_equal(board.nodes, before)
