#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd

NUMERIC = ("depth", "seed", "moves", "expanded", "generated", "peak_open", "peak_closed", "time_sec", "solvable")

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load(paths: Sequence) -> pd.DataFrame:
    """Concatenate runner CSVs, coerce numeric columns, tag each row with its file."""
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["file"] = os.path.basename(str(p))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=["file", "algorithm", "heuristic", "termination", *NUMERIC])
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["heuristic"] = df["heuristic"].fillna("").astype(str)
    df["termination"] = df["termination"].fillna("ok")
    if "solvable" not in df.columns:
        df["solvable"] = 1
    return df

def per_depth(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/SEM of time, expansions and solution length for solved runs."""
    ok = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    cols = ["algorithm", "heuristic", "depth", "time_mean", "time_sem",
            "exp_mean", "exp_sem", "moves_mean", "n"]
    if ok.empty:
        return pd.DataFrame(columns=cols)
    g = (ok.groupby(["algorithm", "heuristic", "depth"], as_index=False)
           .agg(time_mean=("time_sec", "mean"),
                time_sem =("time_sec", sem),
                exp_mean =("expanded", "mean"),
                exp_sem  =("expanded", sem),
                moves_mean=("moves", "mean"),
                n=("time_sec", "count")))
    return g.sort_values(["depth", "algorithm", "heuristic"]).reset_index(drop=True)[cols]

def by_solvability(df: pd.DataFrame) -> pd.DataFrame:
    return (df.groupby(["algorithm", "heuristic", "solvable"], as_index=False)
              .agg(time_mean=("time_sec", "mean"),
                   exp_mean=("expanded", "mean"),
                   n=("time_sec", "count"))
              .sort_values(["algorithm", "heuristic", "solvable"])
              .reset_index(drop=True))

def _label(algo: str, heur: str) -> str:
    return f"{algo} ({heur})" if heur else algo

def write_summary_md(path: Path, df: pd.DataFrame) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    table = per_depth(df)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Experiment Summary\n\n")
        f.write("This file was auto-generated from CSVs.\n\n")
        f.write("## Solved instances per depth\n\n")
        if table.empty:
            f.write("_No solvable-ok rows._\n\n")
        else:
            f.write("| depth | algorithm | time mean±sem (s) | expanded mean | moves mean | n |\n")
            f.write("|---:|:---|---:|---:|---:|---:|\n")
            for r in table.itertuples(index=False):
                f.write(f"| {r.depth} | {_label(r.algorithm, r.heuristic)} | "
                        f"{r.time_mean:.6f}±{r.time_sem:.6f} | {r.exp_mean:.1f} | "
                        f"{r.moves_mean:.2f} | {r.n} |\n")
            f.write("\n")

        f.write("## Solvable vs Unsolvable\n\n")
        f.write("| algorithm | solvable | time mean (s) | expanded mean | n |\n")
        f.write("|:---|:---:|---:|---:|---:|\n")
        for r in by_solvability(df).itertuples(index=False):
            f.write(f"| {_label(r.algorithm, r.heuristic)} | {int(r.solvable)} | "
                    f"{r.time_mean:.6f} | {r.exp_mean:.1f} | {r.n} |\n")
        f.write("\n")

    print(f"Wrote {path}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("files", nargs="+", help="CSV files from runner.py")
    ap.add_argument("--out", default="results/summary.md")
    args = ap.parse_args(argv)

    df = load(args.files)
    write_summary_md(Path(args.out), df)

    table = per_depth(df)
    if not table.empty:
        print(table.to_string(index=False, float_format=lambda v: f"{v:.4f}"))

if __name__ == "__main__":
    main()
