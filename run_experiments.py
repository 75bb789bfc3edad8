#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m eightpuzzle.experiments.runner --algo all --heuristic both --out results/all.csv")
    run("python -m eightpuzzle.experiments.runner --algo all --heuristic manhattan --instances easy medium hard --include_unsolvable --out results/unsolvable.csv")
    run("python -m eightpuzzle.experiments.analyze results/all.csv results/unsolvable.csv --out results/summary.csv")
    run("python -m eightpuzzle.experiments.plot results/all.csv --save results/plots")

if __name__ == "__main__":
    main()
