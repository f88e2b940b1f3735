#!/usr/bin/env python3
import argparse, json, logging, sys

from eightpuzzle.domains.puzzle8 import SIZE, to_rows
from eightpuzzle.solver import ALGORITHMS, HEURISTICS, run

def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve one 8-puzzle board.")
    ap.add_argument("--board", type=int, nargs=SIZE * SIZE, required=True,
                    help="Nine tiles, row-major, 0 is the blank")
    ap.add_argument("--algo", choices=ALGORITHMS, default="aStar")
    ap.add_argument("--heuristic", choices=HEURISTICS, default="manhattan",
                    help="Ignored for bfs")
    ap.add_argument("--json", action="store_true", help="Print {'solution': ...} / {'error': ...}")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        res = run(to_rows(tuple(args.board)), args.algo, args.heuristic)
    except ValueError as e:
        ap.error(str(e))

    path = res["path"]
    if args.json:
        if path is None:
            print(json.dumps({"error": "No solution found"}))
        else:
            print(json.dumps({"solution": [list(m) for m in path]}))
    elif path is None:
        print(f"No solution found after {res['time'] * 1000:.2f}ms "
              f"({res['expanded']} expanded)")
    else:
        print(f"{res['algorithm']}: {len(path)} moves in {res['time'] * 1000:.2f}ms "
              f"({res['expanded']} expanded)")
        print(" ".join(f"({dr},{dc})" for dr, dc in path))
    return 0 if path is not None else 1

if __name__ == "__main__":
    sys.exit(main())
