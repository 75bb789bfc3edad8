#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.analyze import load_many

# Colors (color-blind friendly)
COLORS = {
    "A*":   "#0072B2",
    "DFBB": "#E69F00",
    "IDA*": "#009E73",
}
METRICS = [("expanded", "nodes expanded"), ("time_sec", "seconds"), ("peak_open", "peak open list")]

def plot_metric(ax, df, metric, label, log=True):
    """Grouped bars: one group per (instance, heuristic), one bar per algorithm."""
    groups = df.groupby(["instance", "heuristic"], sort=True)
    keys = list(groups.groups.keys())
    algos = [a for a in COLORS if a in set(df["algorithm"])]
    x = np.arange(len(keys))
    width = 0.8 / max(len(algos), 1)
    for i, algo in enumerate(algos):
        ys = []
        for k in keys:
            vals = groups.get_group(k)
            vals = vals.loc[vals["algorithm"] == algo, metric]
            ys.append(vals.mean() if len(vals) else np.nan)
        ax.bar(x + (i - (len(algos) - 1) / 2) * width, ys, width, label=algo, color=COLORS[algo])
    ax.set_xticks(x)
    ax.set_xticklabels([f"{inst}\n{heur}" for inst, heur in keys], fontsize=8)
    ax.set_ylabel(label)
    if log:
        ax.set_yscale("log")
    ax.set_title(f"{label} by instance")
    ax.grid(True, axis="y", alpha=0.3)
    ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return
    df = df[df["termination"] == "ok"]
    if df.empty:
        print("No solved runs to plot.")
        return

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, len(METRICS), figsize=(6 * len(METRICS), 5))
    for ax, (metric, label) in zip(axes, METRICS):
        plot_metric(ax, df, metric, label)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        # Only show if user asked for it
        plt.show()
    plt.close(fig)

if __name__ == "__main__":
    main()
