import argparse
import logging

from .state import *
from .ai import MachinePlayer
from .board import render_board
from .config import DEFAULT_SEARCH_DEPTH
from .selfplay import DEFAULT_MAX_MOVES, play_game

def run_match(first_depth=DEFAULT_SEARCH_DEPTH, second_depth=DEFAULT_SEARCH_DEPTH,
              max_moves=DEFAULT_MAX_MOVES, render=False):
    first = MachinePlayer(FIRST, first_depth)
    second = MachinePlayer(SECOND, second_depth)
    rec = play_game(first, second, max_moves=max_moves, render=render)
    render_board(first.board)
    if rec.winner is None:
        print(f"Result: draw after {len(rec.moves)} moves")
    else:
        path = " ".join(f"{p.x}{p.y}" for p in rec.network)
        print(f"Result: {COLOR_NAMES[rec.winner]} wins after {len(rec.moves)} moves, network {path}")
    return rec

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="netgame", description="Run an engine-vs-engine Network game.")
    ap.add_argument("--first-depth", type=int, default=DEFAULT_SEARCH_DEPTH)
    ap.add_argument("--second-depth", type=int, default=DEFAULT_SEARCH_DEPTH)
    ap.add_argument("--max-moves", type=int, default=DEFAULT_MAX_MOVES)
    ap.add_argument("--render", action="store_true", help="print the board after every move")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_match(args.first_depth, args.second_depth, args.max_moves, args.render)
    return 0
