import logging
from collections import namedtuple

from .state import *
from .ai import MachinePlayer
from .board import render_board
from .errors import ConfigurationError, IllegalMoveError, NoMovesAvailableError
from .network import find_network

logger = logging.getLogger(__name__)

# winner: FIRST, SECOND or None for a draw; network: winning chain of pieces
GameRecord = namedtuple("GameRecord", "winner moves network")

DEFAULT_MAX_MOVES = 200

def _winner_after(board, mover: int):
    # completing both networks at once hands the game to the other side
    other = opponent(mover)
    chain = find_network(board, other)
    if chain is not None: return other, chain
    chain = find_network(board, mover)
    if chain is not None: return mover, chain
    return None, None

def play_game(first: MachinePlayer, second: MachinePlayer, max_moves: int = DEFAULT_MAX_MOVES,
              render: bool = False) -> GameRecord:
    """
    Play one game between two engines, each told about the other's moves.
    Stops on a network, or after max_moves moves as a draw.
    """
    if first.color != FIRST or second.color != SECOND:
        raise ConfigurationError("play_game expects a FIRST and a SECOND engine",
                                 context={"first": first.color, "second": second.color})

    players = {FIRST: first, SECOND: second}
    moves = []
    mover = FIRST
    while len(moves) < max_moves:
        engine, other = players[mover], players[opponent(mover)]
        move = engine.choose_move()
        if move.kind == QUIT:
            raise NoMovesAvailableError(f"{COLOR_NAMES[mover]} has no move",
                                        context={"move_number": len(moves) + 1})
        if not other.opponent_move(move):
            raise IllegalMoveError(f"{COLOR_NAMES[opponent(mover)]} rejected {move}",
                                   context={"move_number": len(moves) + 1})
        moves.append(move)
        logger.info(f"#{len(moves)} {COLOR_NAMES[mover]}: {move}")
        if render: render_board(engine.board)

        winner, chain = _winner_after(engine.board, mover)
        if winner is not None:
            logger.info(f"{COLOR_NAMES[winner]} wins after {len(moves)} moves")
            return GameRecord(winner, moves, chain)
        mover = opponent(mover)

    logger.info(f"draw: move limit {max_moves} reached")
    return GameRecord(None, moves, None)

def play_match(depth_a: int, depth_b: int, games: int = 2, max_moves: int = DEFAULT_MAX_MOVES):
    """Engine A (depth_a) against engine B (depth_b), alternating who plays First. Returns A's (W, D, L)."""
    w = d = l = 0
    for g in range(games):
        a_first = (g % 2 == 0)
        first = MachinePlayer(FIRST, depth_a if a_first else depth_b)
        second = MachinePlayer(SECOND, depth_b if a_first else depth_a)
        rec = play_game(first, second, max_moves=max_moves)
        if rec.winner is None:
            d += 1
        elif (rec.winner == FIRST) == a_first:
            w += 1
        else:
            l += 1
    logger.info(f"depth {depth_a} vs depth {depth_b}: {w}-{d}-{l} (W-D-L) | games={games}")
    return w, d, l
