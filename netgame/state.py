from dataclasses import dataclass

DIM = 8
PIECE_BUDGET = 10
MIN_NETWORK = 6
MAX_SCORE = 2**31 - 1
MIN_SCORE = -2**31

FIRST, SECOND = 0, 1
COLOR_NAMES = {FIRST: "First", SECOND: "Second"}
COLOR_CHARS = {FIRST: "F", SECOND: "S"}

# NW, W, SW, N, S, NE, E, SE; opposite of d is 7 - d
NW, W, SW, N, S, NE, E, SE = range(8)
DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]
NO_DIRECTION = -1

ADD, STEP, QUIT = "add", "step", "quit"

def opponent(color: int) -> int:
    return color ^ 1

def in_range(x: int, y: int) -> bool:
    return 0 <= x < DIM and 0 <= y < DIM

def is_corner(x: int, y: int) -> bool:
    return x in (0, DIM - 1) and y in (0, DIM - 1)

def on_goal_line(color: int, x: int, y: int, line: int) -> bool:
    # FIRST joins rows 0 and 7, SECOND joins columns 0 and 7
    return (y if color == FIRST else x) == line

def in_opponent_goal(color: int, x: int, y: int) -> bool:
    edge = (0, DIM - 1)
    return x in edge if color == FIRST else y in edge

@dataclass(frozen=True)
class Piece:
    color: int
    x: int
    y: int

@dataclass(frozen=True)
class Move:
    """Tagged move value. ``x1, y1`` is the destination, ``x2, y2`` the vacated cell of a step."""
    kind: str = QUIT
    x1: int = -1
    y1: int = -1
    x2: int = -1
    y2: int = -1

    @classmethod
    def add(cls, x: int, y: int) -> "Move":
        return cls(ADD, x, y)

    @classmethod
    def step(cls, x1: int, y1: int, x2: int, y2: int) -> "Move":
        return cls(STEP, x1, y1, x2, y2)

    @classmethod
    def quit(cls) -> "Move":
        return cls(QUIT)

    def __str__(self) -> str:
        if self.kind == ADD: return f"[add to {self.x1}{self.y1}]"
        if self.kind == STEP: return f"[step from {self.x2}{self.y2} to {self.x1}{self.y1}]"
        return "[quit]"
