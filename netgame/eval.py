from .state import *
from .board import Board
from .network import scan

def connections(board: Board, color: int) -> int:
    # a target only counts while it has not yet been a scan origin in this pass
    visited = set()
    total = 0
    for p in board.pieces(color):
        visited.add((p.x, p.y))
        for d in range(8):
            q = scan(board, p.x, p.y, d)
            if q is not None and q.color == color and (q.x, q.y) not in visited:
                total += 1
    return total

def evaluate(board: Board, my_color: int, opp_color: int) -> int:
    return connections(board, my_color) ** 3 - connections(board, opp_color) ** 3
