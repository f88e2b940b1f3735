#!/usr/bin/env python3
import argparse, logging, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List

from eightpuzzle.domains.puzzle8 import Board, SIZE, apply_moves, scramble, to_rows
from eightpuzzle.solver import ALGORITHMS, HEURISTICS, run

def draw_board(state: Board, out_path: Path, title: str = ""):
    n = SIZE
    fig = plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, n], linewidth=1, color="black")
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.55, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=9)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def save_path_frames(start: Board, moves, outdir: Path) -> List[Path]:
    """One PNG per board from start to goal, named step_000.png, step_001.png, ..."""
    frames = []
    boards = apply_moves(start, moves)
    for i, s in enumerate(boards):
        title = "start" if i == 0 else f"move {i}: {tuple(moves[i - 1])}"
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p, title)
        frames.append(p)
    return frames

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one scrambled instance and save board images along the path.")
    p.add_argument("--algo", choices=ALGORITHMS, default="aStar")
    p.add_argument("--heuristic", choices=HEURISTICS, default="manhattan")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    start = scramble(args.depth, args.seed)
    res = run(to_rows(start), args.algo, args.heuristic)
    if res["path"] is None:
        print("No path (search exhausted).")
        return

    frames = save_path_frames(start, res["path"], Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
