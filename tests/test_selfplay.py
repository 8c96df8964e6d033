"""Tests for the engine-vs-engine driver and the command line."""

import pytest

from netgame import FIRST, SECOND, Board, MachinePlayer, Move, has_network, play_game, play_match
from netgame.cli import build_parser, main
from netgame.errors import ConfigurationError, IllegalMoveError, NoMovesAvailableError
from netgame.selfplay import _winner_after

BOTH_NETWORKS_ROWS = [
    "..F.....",
    "........",
    "..F.F...",
    "........",
    "....F.F.",
    "..S..S..",
    "S.S..S.S",
    "......F.",
]


class TestPlayGame:
    def test_short_game_is_a_draw(self):
        first, second = MachinePlayer(FIRST, 1), MachinePlayer(SECOND, 1)

        rec = play_game(first, second, max_moves=6)

        assert rec.winner is None
        assert rec.network is None
        assert len(rec.moves) == 6
        assert first.board == second.board
        assert first.board.count(FIRST) == 3
        assert first.board.count(SECOND) == 3

    def test_engines_must_hold_their_seats(self):
        with pytest.raises(ConfigurationError):
            play_game(MachinePlayer(SECOND, 1), MachinePlayer(FIRST, 1))

    def test_quit_stops_the_game(self, monkeypatch):
        first, second = MachinePlayer(FIRST, 1), MachinePlayer(SECOND, 1)
        monkeypatch.setattr(first, "choose_move", Move.quit)

        with pytest.raises(NoMovesAvailableError):
            play_game(first, second, max_moves=4)

    def test_rejected_move_raises(self):
        first, second = MachinePlayer(FIRST, 1), MachinePlayer(SECOND, 1)
        # the second engine already holds the cell the first engine will pick
        second.board.place(1, 0, SECOND)

        with pytest.raises(IllegalMoveError) as exc:
            play_game(first, second, max_moves=4)
        assert exc.value.context["move_number"] == 1

    @pytest.mark.slow
    def test_full_game_ends_consistently(self):
        first, second = MachinePlayer(FIRST, 1), MachinePlayer(SECOND, 1)

        rec = play_game(first, second, max_moves=40)

        assert first.board == second.board
        if rec.winner is not None:
            assert has_network(first.board, rec.winner)
            assert len(rec.network) >= 6


class TestWinner:
    def test_single_network(self):
        board = Board.from_rows(BOTH_NETWORKS_ROWS)
        for p in board.pieces(SECOND):
            board.remove(p.x, p.y)

        assert _winner_after(board, SECOND)[0] == FIRST
        assert _winner_after(board, FIRST)[0] == FIRST

    def test_double_network_goes_to_the_other_side(self):
        board = Board.from_rows(BOTH_NETWORKS_ROWS)

        assert has_network(board, FIRST) and has_network(board, SECOND)
        assert _winner_after(board, FIRST)[0] == SECOND
        assert _winner_after(board, SECOND)[0] == FIRST

    def test_no_network(self, midgame_board):
        assert _winner_after(midgame_board, FIRST) == (None, None)


class TestPlayMatch:
    def test_counts_add_up(self):
        w, d, l = play_match(1, 1, games=2, max_moves=4)

        assert (w, d, l) == (0, 2, 0)


class TestCli:
    def test_parser_defaults(self):
        args = build_parser().parse_args([])

        assert args.first_depth == 3
        assert args.second_depth == 3
        assert not args.render

    def test_main_runs_a_match(self, capsys):
        code = main(["--first-depth", "1", "--second-depth", "1", "--max-moves", "4"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Result: draw after 4 moves" in out
