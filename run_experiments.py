#!/usr/bin/env python3
import glob, subprocess, sys
from pathlib import Path

STEPS = [
    ["npuzzle_ida.experiments.runner", "--out", "results/puzzles.csv"],
    ["npuzzle_ida.experiments.runner", "--max-iter", "2", "--out", "results/puzzles_iter2.csv"],
]


def module(args):
    cmd = [sys.executable, "-m"] + args
    print("Running:", " ".join(cmd))
    return subprocess.run(cmd).returncode


def main():
    Path("results").mkdir(exist_ok=True)
    puzzles = sorted(glob.glob("puzzles/*.txt"))
    for step in STEPS:
        code = module(step[:1] + puzzles + step[1:])
        if code:
            sys.exit(code)
    sys.exit(module(["npuzzle_ida.experiments.summarize",
                     "results/puzzles.csv", "results/puzzles_iter2.csv", "--out", "results/summary.csv"]))

if __name__ == "__main__":
    main()
