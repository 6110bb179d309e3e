#!/usr/bin/env python3
import sys, os, argparse
from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.summarize import load_many

def agg_mean(df: pd.DataFrame, metric: str):
    """policy -> (depths, means, stds) over solvable, successfully solved rows."""
    ok = df[(df["solvable"] == 1) & (df["termination"] == "ok")]
    series = {}
    for policy, part in ok.groupby("policy"):
        by_depth = part.groupby("depth")[metric]
        means = by_depth.mean()
        stds = by_depth.std(ddof=0).fillna(0.0)
        series[policy] = (means.index.to_numpy(), means.to_numpy(), stds.to_numpy())
    return series

def plot_metric(ax, df, metric):
    series = agg_mean(df, metric)
    for policy, (xs, ys, es) in sorted(series.items()):
        # offset reopen a tiny bit so curves don't overlap
        offset = 0.12 if policy == "reopen" else -0.12
        ax.errorbar(xs + offset, ys, yerr=es, marker="o", capsize=3, label=policy)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()

def plot_solution_length(ax, df):
    """Grouped bars of mean solution length per scramble depth, one bar per policy."""
    series = agg_mean(df, "g")
    depths = np.array(sorted({int(d) for xs, _, _ in series.values() for d in xs}))
    pos = np.arange(len(depths))
    width = 0.8 / max(len(series), 1)
    for i, (policy, (xs, ys, _)) in enumerate(sorted(series.items())):
        lookup = dict(zip(xs.astype(int), ys))
        heights = np.array([lookup.get(d, np.nan) for d in depths])
        ax.bar(pos + i * width, heights, width, label=policy)
    ax.set_xticks(pos + width * (len(series) - 1) / 2)
    ax.set_xticklabels([str(d) for d in depths])
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel("Mean solution length")
    ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    # Combined 3-panel figure
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded","generated","time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    plt.close(fig)

    fig, ax = plt.subplots(figsize=(8, 6))
    plot_solution_length(ax, df)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_solution_length")
    plt.close(fig)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
