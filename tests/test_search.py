import io

import pytest

from domino_tiling.board import Board
from domino_tiling.pieces import create_pieces
from domino_tiling.solver.config import config as solver_config
from domino_tiling.solver.search import SolverStats, search


def test_single_piece_covers_two_cell_board():
    board = Board([(0, 0, 3), (1, 0, 3)])
    pieces = create_pieces([(3, 3)])

    result = search(pieces, board)

    assert result.is_complete()
    assert result.cell(0, 0).placed_piece_id == 0
    assert result.cell(1, 0).placed_piece_id == 0
    assert board.occupied_count() == 0


def test_infeasible_piece_count_is_detected_before_search():
    board = Board([(0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1)])
    pieces = create_pieces([(1, 1)])
    assert not board.is_solution_feasible(pieces)


def test_no_key_compatible_covering_returns_original_board():
    board = Board([(0, 0, 1), (1, 0, 2)])
    pieces = create_pieces([(5, 5)])
    assert board.is_solution_feasible(pieces)
    for orientation in range(4):
        assert board.candidate_placements(pieces[0], orientation) == []

    result = search(pieces, board)

    assert result is board
    assert not result.is_complete()
    assert result.occupied_count() == 0


def test_symmetric_pieces_on_square_board_regression():
    board = Board([(0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1)])
    pieces = create_pieces([(1, 1), (1, 1)])

    result = search(pieces, board)

    # The last piece is placed first, leftward from (1, 0); the other piece takes the
    # bottom row the same way.
    assert result.is_complete()
    assert result.render(show_piece_ids=True) == "  1    1  \n  0    0  "


def test_non_symmetric_pieces_use_all_orientations():
    board = Board([(0, 0, 1), (1, 0, 2), (0, 1, 3), (1, 1, 4)])
    pieces = create_pieces([(1, 3), (4, 2)])
    stats = SolverStats()

    result = search(pieces, board, stats=stats)

    assert result.is_complete()
    assert result.render(show_piece_ids=True) == "  0    1  \n  0    1  "
    assert stats.placements_tried == 2
    assert stats.fewest_pieces_left == 0


def test_search_does_not_mutate_inputs():
    board = Board([(0, 0, 1), (1, 0, 2), (2, 0, 2), (3, 0, 1)])
    pieces = create_pieces([(2, 1), (1, 2)])
    before = board.render(show_piece_ids=True)

    result = search(pieces, board)

    assert result.is_complete()
    assert board.render(show_piece_ids=True) == before
    assert [str(piece) for piece in pieces] == ["2-1", "1-2"]


def test_failed_branches_do_not_leak_placements():
    # (1, 2) fits at the left end, but then (3, 3) has nowhere to go.
    board = Board([(0, 0, 1), (1, 0, 2), (2, 0, 1), (3, 0, 2)])
    pieces = create_pieces([(3, 3), (1, 2)])

    result = search(pieces, board)

    assert result is board
    assert board.occupied_count() == 0


def test_irregular_board_with_holes():
    layout = ["12 ", "3 4", "5 6"]
    cells = [
        (x, y, int(ch)) for y, row in enumerate(layout) for x, ch in enumerate(row) if ch != " "
    ]
    board = Board(cells)
    pieces = create_pieces([(1, 2), (3, 5), (6, 4)])
    assert board.is_solution_feasible(pieces)

    result = search(pieces, board)

    assert result.is_complete()
    assert result.render(show_piece_ids=True) == "  0    0       \n  1         2  \n  1         2  "


def test_exhaustive_search_terminates_without_solution():
    board = Board((x, y, (x + y) % 2) for x in range(4) for y in range(3))
    pieces = create_pieces([(1, 1)] * 6)
    stats = SolverStats()

    result = search(pieces, board, stats=stats)

    assert result is board
    assert not result.is_complete()
    assert stats.placements_tried == 0


def test_empty_piece_list_returns_board_unchanged():
    board = Board([(0, 0, 1)])
    assert search([], board) is board


def test_stats_report_progress_to_log_stream():
    logf = io.StringIO()
    stats = SolverStats(report_interval=1, logf=logf)
    board = Board([(0, 0, 3), (1, 0, 3)])

    search(create_pieces([(3, 3)]), board, stats=stats)

    assert stats.boards_checked > 0
    lines = logf.getvalue().splitlines()
    assert len(lines) == stats.boards_checked
    assert lines[0].startswith("Checked 1 board states after 00:00:")


@pytest.mark.parametrize("orientation", [4, 7])
def test_orientation_past_last_returns_board(orientation):
    board = Board([(0, 0, 3), (1, 0, 3)])
    assert search(create_pieces([(3, 3)]), board, orientation) is board


@pytest.mark.parametrize("interval", [0, -1])
def test_stats_reject_non_positive_report_interval(interval):
    with pytest.raises(ValueError, match="report_interval"):
        SolverStats(report_interval=interval, logf=io.StringIO())


def test_stats_default_report_interval_comes_from_config(monkeypatch):
    monkeypatch.setattr(solver_config, "report_interval", 3)
    assert SolverStats().report_interval == 3
