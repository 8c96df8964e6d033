"""
Network engine error hierarchy.

Every exception raised by the package derives from NetGameError so callers
can catch engine failures in one place. Rule violations are normally
reported as a boolean by the validation and commit entry points; the
exception types exist for the layers that must stop on them (the board's
raw ``place`` and the self-play driver).

Usage:
    from netgame.errors import IllegalMoveError

    try:
        record = play_game(first, second)
    except IllegalMoveError as e:
        logger.warning(f"Game aborted: {e.message}")
"""

from typing import Any, Dict, Optional

__all__ = [
    "ConfigurationError",
    "IllegalMoveError",
    "NetGameError",
    "NoMovesAvailableError",
    "OccupiedOrOutOfRangeError",
]


class NetGameError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values for debugging (coordinates, color, ...)
    """
    code: str = "NETGAME_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class IllegalMoveError(NetGameError):
    """Move that breaks a placement rule.

    Covers out-of-range and occupied targets, corners, the opponent's goal
    lines, the adjacency rule and moves of the wrong kind for the phase.
    """
    code: str = "ILLEGAL_MOVE"


class OccupiedOrOutOfRangeError(IllegalMoveError):
    """Raised by Board.place for a cell that is off the grid or already taken."""
    code: str = "OCCUPIED_OR_OUT_OF_RANGE"

    def __init__(self, x: int, y: int, context: Optional[Dict[str, Any]] = None):
        super().__init__(f"cannot place at ({x}, {y})", context=context)
        self.context.setdefault("x", x)
        self.context.setdefault("y", y)


class NoMovesAvailableError(NetGameError):
    """A side had no legal move to play."""
    code: str = "NO_MOVES_AVAILABLE"


class ConfigurationError(NetGameError):
    """Invalid engine configuration."""
    code: str = "CONFIGURATION_ERROR"
