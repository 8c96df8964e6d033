from typing import List, Optional

from .state import *
from .board import Board

def scan(board: Board, x: int, y: int, direction: int) -> Optional[Piece]:
    """First piece in line of sight from (x, y), skipping empty cells; None past the edge."""
    dx, dy = DIRECTIONS[direction]
    x += dx; y += dy
    while in_range(x, y):
        p = board.contents(x, y)
        if p is not None: return p
        x += dx; y += dy
    return None

def is_complete(chain: List[Piece], color: int) -> bool:
    if len(chain) < MIN_NETWORK: return False
    head, tail = chain[0], chain[-1]
    last = DIM - 1
    return ((on_goal_line(color, head.x, head.y, 0) and on_goal_line(color, tail.x, tail.y, last)) or
            (on_goal_line(color, head.x, head.y, last) and on_goal_line(color, tail.x, tail.y, 0)))

def extend(board: Board, chain: List[Piece], color: int, last_direction: int = NO_DIRECTION) -> bool:
    if is_complete(chain, color): return True

    tail = chain[-1]
    for d in range(8):
        # straight continuation and doubling back are both barred
        if last_direction != NO_DIRECTION and d in (last_direction, 7 - last_direction): continue
        p = scan(board, tail.x, tail.y, d)
        if p is None or p.color != color or p in chain: continue
        chain.append(p)
        if extend(board, chain, color, d): return True
        chain.pop()
    return False

def find_network(board: Board, color: int) -> Optional[List[Piece]]:
    for start in board.pieces(color):
        chain = [start]
        if extend(board, chain, color): return chain
    return None

def has_network(board: Board, color: int) -> bool:
    return find_network(board, color) is not None
