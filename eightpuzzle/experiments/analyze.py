#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List

import pandas as pd

NUMERIC = ("expanded", "generated", "g", "time_sec", "time_to_best",
           "peak_open", "peak_closed", "bound_final", "solvable")

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
    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "termination" in df.columns:
        df["termination"] = df["termination"].fillna("ok")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean metrics per (instance, heuristic, algorithm)."""
    keys = [c for c in ("instance", "heuristic", "algorithm") if c in df.columns]
    metrics = [c for c in ("g", "expanded", "generated", "time_sec", "peak_open") if c in df.columns]
    return df.groupby(keys, sort=True)[metrics].mean().reset_index()

def disagreements(df: pd.DataFrame) -> pd.DataFrame:
    """Solved (instance, heuristic) groups where algorithms report different path lengths."""
    ok = df[df["termination"] == "ok"]
    if ok.empty:
        return ok
    spread = ok.groupby(["instance", "heuristic"])["g"].agg(["min", "max"]).reset_index()
    return spread[spread["min"] != spread["max"]]

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("csv", nargs="+", help="CSV produced by eightpuzzle.experiments.runner")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return 1

    table = summarize(df[df["termination"] == "ok"])
    print("=" * 80)
    print("Solved runs: mean metrics")
    print("=" * 80)
    print(table.to_string(index=False))

    failed = df[df["termination"] != "ok"]
    if not failed.empty:
        print("\n=== Runs without a solution ===")
        cols = [c for c in ("instance", "heuristic", "algorithm", "termination", "expanded", "time_sec")
                if c in failed.columns]
        print(failed[cols].to_string(index=False))

    bad = disagreements(df)
    if not bad.empty:
        print("\nWARNING: algorithms disagree on path length:")
        print(bad.to_string(index=False))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"\nSaved: {args.out}")
    return 0

if __name__ == "__main__":
    main()
