#!/usr/bin/env python3
import argparse, sys

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError, format_board
from eightpuzzle.experiments.runner import parse_start, setup_logging
from eightpuzzle.heuristics.registry import HEURISTICS, choose_hfun
from eightpuzzle.search.frontier import TIE_BREAKS
from eightpuzzle.search.result import SearchResult
from eightpuzzle.search.solver import ALGORITHMS, solve

def print_path(res: SearchResult, hfun) -> None:
    """Print the solution chain with the start state first."""
    for g, s in enumerate(res.path):
        h = hfun(s)
        print()
        print(f"priority = {g + h} = g+h = {g}+{h}")
        print(format_board(s))

def print_summary(res: SearchResult) -> None:
    if res.bounds:
        print("Bounds tried = " + " ".join(str(b) for b in res.bounds))
    print(f"Elapsed (ms) = {res.time * 1000:.1f}")
    if res.time_to_best is not None:
        print(f"Optimal Time (ms) = {res.time_to_best * 1000:.1f}")
    print(f"Node Expanded = {res.expanded}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one 8-puzzle instance and print the path.")
    p.add_argument("start", nargs="?", default="easy",
                   help="Instance name (easy/medium/hard/worst) or configuration such as 134862705")
    p.add_argument("--algo", choices=sorted(ALGORITHMS), default="a")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    p.add_argument("--check_solvable", action="store_true")
    p.add_argument("--quiet", action="store_true", help="Skip printing the boards")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    setup_logging(args.verbose)

    try:
        start = parse_start(args.start)
    except InvalidConfigurationError as e:
        p.error(str(e))

    res = solve(start, algorithm=args.algo, heuristic=args.heuristic,
                tie_break=args.tie_break, check_solvable=args.check_solvable)

    if not res.solved:
        print(f"No solution ({res.termination})" + (f": {res.error}" if res.error else ""))
        print_summary(res)
        return 1

    if not args.quiet:
        print_path(res, choose_hfun(args.heuristic))
        print()
    print(f"Moves = {res.g}")
    print_summary(res)
    return 0

if __name__ == "__main__":
    sys.exit(main())
