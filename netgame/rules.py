from typing import List

from .state import *
from .board import Board

def is_cell_open(board: Board, x: int, y: int, color: int) -> bool:
    """Range, occupancy, corner and goal-line checks for a destination cell."""
    return (in_range(x, y) and board.contents(x, y) is None
            and not is_corner(x, y) and not in_opponent_goal(color, x, y))

def forms_cluster(board: Board, piece: Piece) -> bool:
    # more than one same-colored neighbor that already touches another piece of its color
    linked = 0
    for nb in board.neighbors(piece):
        if nb is None or nb.color != piece.color: continue
        if any(q is not None and q.color == piece.color and q != piece for q in board.neighbors(nb)):
            linked += 1
            if linked >= 2: return True
    return False

def _placement_ok(board: Board, x: int, y: int, color: int) -> bool:
    if not is_cell_open(board, x, y, color): return False
    piece = board.place(x, y, color)
    try:
        return not forms_cluster(board, piece)
    finally:
        board.remove(x, y)

def is_legal(board: Board, move: Move, color: int) -> bool:
    if move.kind == ADD:
        return _placement_ok(board, move.x1, move.y1, color)
    if move.kind != STEP:
        return False

    if not in_range(move.x2, move.y2) or (move.x1, move.y1) == (move.x2, move.y2):
        return False
    src = board.contents(move.x2, move.y2)
    if src is None or src.color != color:
        return False
    board.remove(move.x2, move.y2)
    try:
        return _placement_ok(board, move.x1, move.y1, color)
    finally:
        board.place(move.x2, move.y2, color)

def make_move(board: Board, move: Move, color: int):
    if move.kind == STEP:
        board.remove(move.x2, move.y2)
    board.place(move.x1, move.y1, color)

def unmake_move(board: Board, move: Move, color: int):
    board.remove(move.x1, move.y1)
    if move.kind == STEP:
        board.place(move.x2, move.y2, color)

def gen_moves(board: Board, color: int, pieces_left: int) -> List[Move]:
    moves = []
    if pieces_left > 0:
        for y in range(DIM):
            for x in range(DIM):
                m = Move.add(x, y)
                if is_legal(board, m, color): moves.append(m)
        return moves

    for src in board.pieces(color):
        for y in range(DIM):
            for x in range(DIM):
                m = Move.step(x, y, src.x, src.y)
                if is_legal(board, m, color): moves.append(m)
    return moves

def phase_matches(move: Move, pieces_left: int) -> bool:
    return (move.kind == ADD) == (pieces_left > 0)
