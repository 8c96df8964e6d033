import logging
import time
from collections import namedtuple
from typing import Optional

from .state import *
from .board import Board
from .config import SearchConfig
from .errors import ConfigurationError
from .eval import evaluate
from .network import has_network
from .rules import gen_moves, is_legal, make_move, phase_matches, unmake_move

logger = logging.getLogger(__name__)

Best = namedtuple("Best", "move score")

class MachinePlayer:
    """Network player that tracks both sides' moves on one board and searches it in place.

    Search applies and undoes moves on ``self.board`` instead of copying it, so
    every frame of ``best_move`` leaves the board exactly as it found it. Only
    ``choose_move`` and accepted ``opponent_move``/``force_move`` calls change
    the board for good.
    """

    def __init__(self, color: int, search_depth: Optional[int] = None, config: Optional[SearchConfig] = None):
        if color not in (FIRST, SECOND):
            raise ConfigurationError("color must be FIRST or SECOND", context={"color": color})
        if config is None:
            config = SearchConfig(search_depth) if search_depth is not None else SearchConfig.from_env()
        self.color = color
        self.opp = opponent(color)
        self.config = config
        self.search_depth = config.search_depth
        self.board = Board()
        self.pieces_left = {FIRST: PIECE_BUDGET, SECOND: PIECE_BUDGET}
        self.move_count = 0
        self.nodes_visited = 0

    # board mutation shared by search and the commit paths

    def _apply(self, move: Move, color: int):
        make_move(self.board, move, color)
        if move.kind == ADD: self.pieces_left[color] -= 1

    def _undo(self, move: Move, color: int):
        unmake_move(self.board, move, color)
        if move.kind == ADD: self.pieces_left[color] += 1

    def _horizon(self) -> int:
        # relocation widens the tree, so search one ply less once both budgets are spent.
        # Read from the budgets at the root only; search itself changes them.
        if self.pieces_left[FIRST] == 0 and self.pieces_left[SECOND] == 0:
            return max(1, self.search_depth - 1)
        return self.search_depth

    def best_move(self, color: int, opp: int, alpha: int, beta: int, depth: int,
                  previous: Optional[Move] = None, horizon: Optional[int] = None) -> Best:
        """Depth-bounded minimax with alpha-beta pruning.

        Scores are always from this player's point of view: ``self.color``
        maximizes and the opponent minimizes. Terminal positions score
        ``MAX_SCORE - depth`` when ``color`` owns a network; when ``opp``
        owns one, an odd depth returns ``previous`` with ``MAX_SCORE - depth``
        and an even depth scores ``MIN_SCORE``.

        ``horizon`` is the ply at which positions are evaluated. It is fixed
        from the budgets of the frame that omits it and handed down unchanged.
        """
        if horizon is None: horizon = self._horizon()
        self.nodes_visited += 1
        if has_network(self.board, color):
            return Best(None, MAX_SCORE - depth)
        if has_network(self.board, opp):
            if depth % 2 == 1:
                return Best(previous, MAX_SCORE - depth)
            return Best(None, MIN_SCORE)
        if depth >= horizon:
            return Best(None, evaluate(self.board, self.color, self.opp))

        maximizing = (color == self.color)
        best_val = MIN_SCORE if maximizing else MAX_SCORE
        moves = gen_moves(self.board, color, self.pieces_left[color])
        if not moves:
            logger.debug(f"no legal moves for {COLOR_NAMES[color]} at depth {depth}")
            return Best(None, best_val)

        best = moves[0]
        for m in moves:
            self._apply(m, color)
            try:
                reply = self.best_move(opp, color, alpha, beta, depth + 1, m, horizon)
            finally:
                self._undo(m, color)

            if maximizing:
                if reply.score > best_val: best, best_val = m, reply.score
                if best_val > alpha: alpha = best_val
            else:
                if reply.score < best_val: best, best_val = m, reply.score
                if best_val < beta: beta = best_val
            if alpha >= beta: break
        return Best(best, best_val)

    def choose_move(self) -> Move:
        self.nodes_visited = 0
        start = time.perf_counter()
        result = self.best_move(self.color, self.opp, MIN_SCORE, MAX_SCORE, 0, None)
        elapsed = time.perf_counter() - start
        if result.move is None:
            logger.debug(f"{self!r}: nothing to play (score {result.score})")
            return Move.quit()

        self._apply(result.move, self.color)
        self.move_count += 1
        logger.debug(f"{self!r} plays {result.move} | score={result.score} "
                     f"nodes={self.nodes_visited} time={elapsed:.3f}s")
        return result.move

    def _commit(self, move: Move, color: int) -> bool:
        if not phase_matches(move, self.pieces_left[color]) or not is_legal(self.board, move, color):
            return False
        self._apply(move, color)
        return True

    def opponent_move(self, move: Move) -> bool:
        return self._commit(move, self.opp)

    def force_move(self, move: Move) -> bool:
        if not self._commit(move, self.color):
            return False
        self.move_count += 1
        return True

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}"
                f"(color={COLOR_NAMES[self.color]}, depth={self.search_depth})")
