#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List

import pandas as pd

METRICS = ("time_sec", "expanded", "generated", "g")

def load_many(paths: List[str]) -> pd.DataFrame:
    dfs = []
    for fn in paths:
        try:
            df = pd.read_csv(fn)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            print(f"skip {fn}: {e}")
            continue
        df["__src__"] = os.path.basename(fn)
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Normalize schema
    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "time_sec"})
    if "policy" not in df.columns:
        df["policy"] = "closed"
    if "solvable" not in df.columns:
        df["solvable"] = 1
    if "termination" not in df.columns:
        df["termination"] = "ok"
    df["termination"] = df["termination"].fillna("ok")

    for c in ("depth","seed","expanded","generated","duplicates","g","time_sec","solvable"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.dropna(subset=["depth"])

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of each metric per (solvable, policy, depth), plus run count."""
    metrics = [m for m in METRICS if m in df.columns]
    grouped = df.groupby(["solvable", "policy", "depth"])
    out = grouped[metrics].agg(["mean", "std"])
    out.columns = [f"{m}_{stat}" for m, stat in out.columns]
    out["n"] = grouped.size()
    out["exhausted"] = grouped["termination"].apply(lambda t: int((t == "exhausted").sum()))
    return out.fillna(0.0).reset_index()

def write_summary_md(path: Path, summary: pd.DataFrame):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# Experiment Summary\n\n")
        f.write("This file was auto-generated from CSVs.\n\n")
        for solvable, part in summary.groupby("solvable"):
            f.write("## Solvable instances\n\n" if solvable == 1 else "## Unsolvable variants\n\n")
            f.write("| depth | policy | time mean±std (s) | expanded mean | generated mean | g mean | n |\n")
            f.write("|---:|:---|---:|---:|---:|---:|---:|\n")
            for _, r in part.sort_values(["depth", "policy"]).iterrows():
                f.write(
                    f"| {int(r['depth'])} | {r['policy']} "
                    f"| {r['time_sec_mean']:.4f} ± {r['time_sec_std']:.4f} "
                    f"| {r['expanded_mean']:.1f} | {r['generated_mean']:.1f} "
                    f"| {r.get('g_mean', 0.0):.2f} | {int(r['n'])} |\n"
                )
            f.write("\n")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs into a markdown table")
    ap.add_argument("csv", nargs="+", help="CSV files produced by runner.py")
    ap.add_argument("--out", type=Path, default=Path("results/SUMMARY.md"))
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return
    summary = summarize(df)
    write_summary_md(args.out, summary)
    print(f"Wrote {args.out} ({len(df)} rows)")

if __name__ == "__main__":
    main()
