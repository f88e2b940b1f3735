from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from eightpuzzle.domains.puzzle8 import (
    Board,
    scramble,
    is_solvable,
    make_unsolvable_variant,
)
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.best_first import best_first
from eightpuzzle.search.bfs import bfs
from eightpuzzle.solver import ALGORITHMS, HEURISTICS, choose_heuristic

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "heuristic", "depth", "seed", "moves",
    "expanded", "generated", "peak_open", "peak_closed", "time_sec",
    "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: Board

def generate(depths: Sequence[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            seed += 1
            attempts += 1
            if is_solvable(s):
                out.append(Instance(seed=seed - 1, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def run_one(algo: str, heuristic: str, state: Board):
    if algo == "bfs":
        return bfs(state)
    hfun = choose_heuristic(heuristic)
    if algo == "bestFirst":
        return best_first(state, hfun, heuristic)
    return a_star(state, hfun, heuristic)

def plan(algos: Sequence[str], heuristics: Sequence[str]):
    """(algo, heuristic) pairs to run; bfs runs once since it ignores the heuristic."""
    pairs = []
    for a in algos:
        if a == "bfs":
            pairs.append((a, ""))
        else:
            pairs.extend((a, h) for h in heuristics)
    return pairs

def write_row(w, res, inst: Instance, solvable_flag: int):
    w.writerow([
        res["algorithm"], res["heuristic"], inst.depth, inst.seed,
        res["g"] if res["g"] is not None else "",
        res["expanded"], res["generated"], res["peak_open"], res["peak_closed"],
        f"{res['time']:.6f}", res["termination"], solvable_flag,
    ])

def run_experiments(out: Path, algos: Sequence[str], heuristics: Sequence[str],
                    depths: Sequence[int], per_depth: int, start_seed: int = 0,
                    include_unsolvable: bool = False) -> int:
    """Write one CSV row per (instance, algorithm, heuristic); returns rows written."""
    insts = generate(depths, per_depth, start_seed)
    pairs = plan(algos, heuristics)
    out.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for algo, heur in pairs:
                write_row(w, run_one(algo, heur, inst.state), inst, 1)
                rows += 1
            # Parity twin: every algorithm must exhaust the reachable space.
            if include_unsolvable:
                u = Instance(seed=inst.seed, depth=inst.depth, state=make_unsolvable_variant(inst.state))
                for algo, heur in pairs:
                    write_row(w, run_one(algo, heur, u.state), u, 0)
                    rows += 1
            logger.info("depth=%d seed=%d done", inst.depth, inst.seed)
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="BFS / Best-First / A* 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=list(ALGORITHMS) + ["all"], nargs="+", default=["all"])
    ap.add_argument("--heuristic", choices=HEURISTICS, nargs="+", default=["manhattan"])
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16, 20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run each instance's unsolvable parity twin (slow: full state space)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    algos = list(ALGORITHMS) if "all" in args.algo else args.algo
    n = run_experiments(args.out, algos, args.heuristic, args.depths, args.per_depth,
                        start_seed=args.seed, include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({n} runs)")

if __name__ == "__main__":
    main()
