#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import Tuple

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import InvalidConfigurationError
from eightpuzzle.experiments.runner import parse_start
from eightpuzzle.heuristics.registry import HEURISTICS
from eightpuzzle.search.solver import ALGORITHMS, solve

State = Tuple[int, ...]

def draw_board(state: State, out_path: Path, title: str = ""):
    n = 3
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,n], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(path, outdir: Path) -> int:
    for i, s in enumerate(path):
        draw_board(s, outdir / f"step_{i:03d}.png", title=f"g = {i}")
    return len(path)

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("start", nargs="?", default="easy")
    p.add_argument("--algo", choices=sorted(ALGORITHMS), default="a")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    try:
        start = parse_start(args.start)
    except InvalidConfigurationError as e:
        p.error(str(e))

    res = solve(start, algorithm=args.algo, heuristic=args.heuristic, check_solvable=True)
    if not res.solved:
        print(f"No path ({res.termination}).")
        return

    outdir = Path(args.outdir)
    n = save_frames(res.path, outdir)
    print(f"Saved {n} frames to {outdir}")

if __name__ == "__main__":
    main()
