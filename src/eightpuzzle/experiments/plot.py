#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import matplotlib
# Non-interactive backend unless MPLBACKEND says otherwise
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from eightpuzzle.experiments.summarize import load, sem

METRICS = ("expanded", "time_sec", "moves")

def series(df: pd.DataFrame, metric: str):
    """{(algorithm, heuristic): DataFrame[depth, mean, sem]} over solved runs."""
    ok = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    out = {}
    for (algo, heur), part in ok.groupby(["algorithm", "heuristic"]):
        g = (part.groupby("depth", as_index=False)
                 .agg(mean=(metric, "mean"), sem=(metric, sem))
                 .sort_values("depth"))
        out[(algo, heur)] = g
    return out

def plot_metric(ax, df: pd.DataFrame, metric: str):
    for (algo, heur), g in sorted(series(df, metric).items()):
        label = f"{algo} | {heur or '—'}"
        ax.errorbar(g["depth"], g["mean"], yerr=g["sem"], marker="o", capsize=3, label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± sem)")
    ax.grid(True, alpha=0.25, ls=":")
    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    if metric == "expanded":
        ax.set_yscale("symlog")

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def plot_all(paths, outdir: Path):
    df = load(paths)
    if df.empty:
        return []
    base = "combo" if len(paths) > 1 else Path(paths[0]).stem
    saved = []

    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    for ax, metric in zip(axes, METRICS):
        plot_metric(ax, df, metric)
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    args = ap.parse_args(argv)

    if not plot_all(args.csv, Path(args.save)):
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

if __name__ == "__main__":
    main()
