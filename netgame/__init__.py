from .state import *
from .errors import *
from .config import SearchConfig
from .board import Board, render_board
from .rules import is_legal, gen_moves, make_move, unmake_move
from .network import has_network, find_network
from .eval import evaluate, connections
from .ai import MachinePlayer, Best
from .selfplay import play_game, play_match, GameRecord
from .cli import run_match
