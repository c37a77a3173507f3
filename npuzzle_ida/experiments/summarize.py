#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import pandas as pd

NUMERIC = ("side", "h0", "solved", "moves", "iterations", "bound_final",
           "expanded", "generated", "peak_recursion", "time_sec", "solvable")


def load_many(paths):
    dfs = []
    for fn in paths:
        try:
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
        except Exception as e:
            print(f"skip {fn}: {e}")
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
    """Per (side, termination): instance count and mean moves/expanded/time."""
    if df.empty:
        return pd.DataFrame(columns=["side", "termination", "count", "mean_moves", "mean_expanded", "mean_time_sec"])
    g = df.groupby(["side", "termination"], dropna=False)
    out = g.agg(
        count=("instance", "count"),
        mean_moves=("moves", "mean"),
        mean_expanded=("expanded", "mean"),
        mean_time_sec=("time_sec", "mean"),
    ).reset_index()
    return out.sort_values(["side", "termination"]).reset_index(drop=True)


def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs by board side and termination.")
    ap.add_argument("csv", nargs="+", help="CSV produced by npuzzle_ida.experiments.runner")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV to write the summary to")
    args = ap.parse_args()

    df = load_many(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return
    table = summarize(df)
    print(table.to_string(index=False))
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
