from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from eightpuzzle.domains.puzzle8 import (
    State,
    scramble,
    is_solvable,
    make_unsolvable_variant,
)
from eightpuzzle.search.a_star import a_star

HEADER = [
    "algorithm","policy","depth","seed",
    "expanded","generated","duplicates","reopened","g","time_sec",
    "peak_open","peak_closed","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            if is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def policies_for(name: str) -> List[bool]:
    """Map the --policy flag to a list of reopen settings."""
    if name == "closed": return [False]
    if name == "reopen": return [True]
    return [False, True]

def row_for(res, inst: Instance, solvable_flag: int) -> List:
    return [
        res.get("algorithm",""), res.get("policy",""), inst.depth, inst.seed,
        res.get("expanded",""), res.get("generated",""), res.get("duplicates",""),
        res.get("reopened",""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time',0.0):.6f}",
        res.get("peak_open",""), res.get("peak_closed",""),
        res.get("termination","ok"), solvable_flag,
    ]

def run(insts: List[Instance], out: Path, reopen_settings: List[bool], include_unsolvable: bool = False) -> int:
    """Solve every instance under each policy and write one CSV row per run. Returns rows written."""
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for reopen in reopen_settings:
                r = a_star(inst.state, reopen=reopen, return_path=False)
                w.writerow(row_for(r, inst, 1)); rows += 1
            # Optional unsolvable variants (flip parity); each one exhausts the reachable half of the space.
            if include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                for reopen in reopen_settings:
                    r = a_star(u, reopen=reopen, return_path=False)
                    w.writerow(row_for(r, inst, 0)); rows += 1
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="8-puzzle best-first search experiment runner")
    ap.add_argument("--policy", choices=["closed","reopen","both"], default="both",
                    help="'closed' never revisits expanded boards, 'reopen' is textbook A*")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run odd-parity variants (slow)")
    args = ap.parse_args(argv)

    insts = generate_instances(args.depths, args.per_depth, start_seed=args.seed)
    n = run(insts, args.out, policies_for(args.policy), include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances, {n} rows)")

if __name__ == "__main__":
    main()
