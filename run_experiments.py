#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m eightpuzzle.experiments.runner --algo all --heuristic manhattan hamming --depths 4 8 12 16 20 --per_depth 10 --out results/solvable.csv")
    run("python -m eightpuzzle.experiments.runner --algo all --heuristic manhattan --depths 8 --per_depth 2 --include_unsolvable --out results/unsolvable.csv")
    run("python -m eightpuzzle.experiments.summarize results/solvable.csv results/unsolvable.csv --out results/summary.md")
    run("python -m eightpuzzle.experiments.plot results/solvable.csv --save results/plots")

if __name__ == "__main__":
    main()
