from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from eightpuzzle.domains.puzzle8 import (
    INSTANCES,
    InvalidConfigurationError,
    is_solvable,
    validate,
)
from eightpuzzle.heuristics.registry import HEURISTICS
from eightpuzzle.search.frontier import TIE_BREAKS
from eightpuzzle.search.result import CSV_HEADER
from eightpuzzle.search.solver import ALGORITHMS, solve

State = Tuple[int, ...]

@dataclass
class Instance:
    name: str
    state: State

def parse_start(text: str) -> State:
    """
    Accept an instance name ('easy'), nine digits ('134862705'),
    or a comma/space separated list ('1,3,4,8,6,2,7,0,5').
    """
    t = text.strip().lower()
    if t in INSTANCES:
        return INSTANCES[t]
    if t.isdigit():
        cells = [int(ch) for ch in t]
    else:
        try:
            cells = [int(x) for x in t.replace(",", " ").split()]
        except ValueError:
            raise InvalidConfigurationError(f"cannot parse configuration {text!r}")
    return validate(cells)

def make_unsolvable_variant(s: State) -> State:
    """Swap the first two tiles, which flips the permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def load_instances(names: List[str]) -> List[Instance]:
    out: List[Instance] = []
    for n in names:
        out.append(Instance(name=n, state=parse_start(n)))
    return out

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

def main(argv=None):
    ap = argparse.ArgumentParser(description="A*/DFBB/IDA* 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "dfbb", "ida", "all"], default="all")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS) + ["both"], default="both")
    ap.add_argument("--instances", nargs="+", default=list(INSTANCES),
                    help="Instance names or configurations (e.g. 134862705)")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run a parity-flipped variant of every instance")
    ap.add_argument("--check_solvable", action="store_true",
                    help="Answer unsolvable instances from parity instead of exhausting the search")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        insts = load_instances(args.instances)
    except InvalidConfigurationError as e:
        ap.error(str(e))

    algos = list(ALGORITHMS) if args.algo == "all" else [args.algo]
    heurs = sorted(HEURISTICS) if args.heuristic == "both" else [args.heuristic]
    args.out.parent.mkdir(parents=True, exist_ok=True)

    runs = []
    for inst in insts:
        runs.append((inst.name, inst.state))
        if args.include_unsolvable:
            runs.append((f"{inst.name}_unsolvable", make_unsolvable_variant(inst.state)))

    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_HEADER)
        w.writeheader()
        for name, state in runs:
            solvable_flag = int(is_solvable(state))
            for heur in heurs:
                for algo in algos:
                    r = solve(state, algorithm=algo, heuristic=heur,
                              tie_break=args.tie_break, check_solvable=args.check_solvable)
                    w.writerow(r.to_row(instance=name, solvable=solvable_flag))
                    print(f"{name:20s} {r.algorithm:5s} {heur:10s} g={r.g} "
                          f"expanded={r.expanded} time={r.time:.4f}s [{r.termination}]")

    print(f"Wrote {args.out} ({len(runs)} instances)")

if __name__ == "__main__":
    main()
