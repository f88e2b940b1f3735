from eightpuzzle.domains.puzzle8 import GOAL, MOVES, InvalidBoardError, IllegalMoveError
from eightpuzzle.solver import ALGORITHMS, UnknownAlgorithmError, run, solve

__all__ = [
    "ALGORITHMS",
    "GOAL",
    "MOVES",
    "IllegalMoveError",
    "InvalidBoardError",
    "UnknownAlgorithmError",
    "run",
    "solve",
]
