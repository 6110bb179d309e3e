#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    final = "--final" in sys.argv[1:]
    depths = "6 10 14 18 22 26" if final else "6 10 14"
    per_depth = 30 if final else 10
    Path("results").mkdir(exist_ok=True)
    run("Both policies", f"python -m eightpuzzle.experiments.runner --depths {depths} --per_depth {per_depth} --policy both --out results/policies.csv")
    run("Unsolvable variants", "python -m eightpuzzle.experiments.runner --depths 10 --per_depth 2 --policy closed --include_unsolvable --out results/unsolvable.csv")
    run("Summary", "python -m eightpuzzle.experiments.summarize results/policies.csv results/unsolvable.csv --out results/SUMMARY.md")
    run("Plots", "python -m eightpuzzle.experiments.plot results/policies.csv --save results/plots")

if __name__ == "__main__":
    main()
