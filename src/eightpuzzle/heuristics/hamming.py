from eightpuzzle.domains.puzzle8 import Board, GOAL

def hamming(s: Board) -> int:
    """Number of non-blank tiles not on their goal cell."""
    return sum(1 for tile, want in zip(s, GOAL) if tile != 0 and tile != want)
