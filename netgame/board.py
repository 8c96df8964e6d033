from typing import List, Optional, Sequence

from .state import *
from .errors import OccupiedOrOutOfRangeError

class Board:
    """Plain 8x8 grid of pieces indexed ``cells[x][y]``. Rules are enforced in ``rules``."""

    def __init__(self):
        self.cells: List[List[Optional[Piece]]] = [[None] * DIM for _ in range(DIM)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        # rows[y][x]: '.' empty, 'F' first, 'S' second
        if len(rows) != DIM or any(len(r) != DIM for r in rows):
            raise ValueError(f"expected {DIM} rows of {DIM} cells")
        board = cls()
        chars = {v: k for k, v in COLOR_CHARS.items()}
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch in chars: board.place(x, y, chars[ch])
                elif ch != ".": raise ValueError(f"bad cell {ch!r} at ({x}, {y})")
        return board

    def place(self, x: int, y: int, color: int) -> Piece:
        if not in_range(x, y) or self.cells[x][y] is not None:
            raise OccupiedOrOutOfRangeError(x, y, context={"color": COLOR_NAMES.get(color, color)})
        piece = Piece(color, x, y)
        self.cells[x][y] = piece
        return piece

    def remove(self, x: int, y: int):
        self.cells[x][y] = None

    def contents(self, x: int, y: int) -> Optional[Piece]:
        return self.cells[x][y]

    def neighbors(self, piece: Piece) -> List[Optional[Piece]]:
        out = []
        for i in range(piece.x - 1, piece.x + 2):
            for j in range(piece.y - 1, piece.y + 2):
                if i == piece.x and j == piece.y: continue
                out.append(self.cells[i][j] if in_range(i, j) else None)
        return out

    def pieces(self, color: Optional[int] = None) -> List[Piece]:
        out = []
        for y in range(DIM):
            for x in range(DIM):
                p = self.cells[x][y]
                if p is not None and (color is None or p.color == color):
                    out.append(p)
        return out

    def count(self, color: int) -> int:
        return sum(1 for col in self.cells for p in col if p is not None and p.color == color)

    def snapshot(self) -> tuple:
        return tuple(tuple(col) for col in self.cells)

    def copy(self) -> "Board":
        b = Board()
        b.cells = [list(col) for col in self.cells]
        return b

    def transpose(self) -> "Board":
        """Reflect across the main diagonal and swap colors, mapping each color's goal axis onto the other's."""
        b = Board()
        for p in self.pieces():
            b.place(p.y, p.x, opponent(p.color))
        return b

    def __eq__(self, other) -> bool:
        return isinstance(other, Board) and self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return f"Board(first={self.count(FIRST)}, second={self.count(SECOND)})"

def render_board(board: Board):
    print("   " + " ".join(str(x) for x in range(DIM)))
    for y in range(DIM):
        row = []
        for x in range(DIM):
            p = board.contents(x, y)
            row.append(COLOR_CHARS[p.color] if p is not None else ("#" if is_corner(x, y) else "."))
        print(f"{y:>2} " + " ".join(row))
    print(f"Pieces: First={board.count(FIRST)}  Second={board.count(SECOND)}")
    print("-" * 20)
