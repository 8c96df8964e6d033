"""
Shared pytest fixtures for the engine tests.

Boards are written as eight text rows, top row first (y = 0), one character
per column (x = 0..7): '.' empty, 'F' a First piece, 'S' a Second piece.
"""

from typing import Callable, Optional, Sequence

import pytest

from netgame import FIRST, PIECE_BUDGET, SECOND, Board, MachinePlayer


EMPTY_ROWS = ["........"] * 8

# First: 2,0 -> 2,2 -> 4,2 -> 4,4 -> 6,4 -> 6,7 (S, E, S, E, S)
FIRST_NETWORK_ROWS = [
    "..F.....",
    "........",
    "..F.F...",
    "........",
    "....F.F.",
    "........",
    "........",
    "......F.",
]

# The same chain without 2,0, the first completing cell in row-major order
MATE_IN_ONE_ROWS = [
    "........",
    "....S...",
    "..F.F...",
    "........",
    "....F.F.",
    ".S......",
    "........",
    "......F.",
]

MIDGAME_ROWS = [
    "..F.....",
    "........",
    ".S..F...",
    "......S.",
    "..F.....",
    "....S...",
    ".....F..",
    "........",
]


def make_engine(
    rows: Sequence[str],
    color: int = FIRST,
    depth: int = 1,
    pieces_left: Optional[dict] = None,
) -> MachinePlayer:
    """Engine whose board is loaded from rows; budgets follow the piece counts unless given."""
    engine = MachinePlayer(color, depth)
    engine.board = Board.from_rows(rows)
    if pieces_left is None:
        pieces_left = {
            c: PIECE_BUDGET - engine.board.count(c) for c in (FIRST, SECOND)
        }
    engine.pieces_left = dict(pieces_left)
    return engine


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def first_network_board() -> Board:
    return Board.from_rows(FIRST_NETWORK_ROWS)


@pytest.fixture
def midgame_board() -> Board:
    return Board.from_rows(MIDGAME_ROWS)


@pytest.fixture
def engine_factory() -> Callable[..., MachinePlayer]:
    return make_engine


@pytest.fixture(autouse=True)
def _no_depth_override(monkeypatch):
    # engines built without an explicit depth read NETGAME_SEARCH_DEPTH
    monkeypatch.delenv("NETGAME_SEARCH_DEPTH", raising=False)
