#!/usr/bin/env python3
"""
Benchmark the scorers the way they are used: once per keystroke.
Every prefix of each query is scored (as if typed), for both modes and a few
distance thresholds; writes results to benchmark_results.csv.
"""

import csv
import sys
import time
from pathlib import Path

# Project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from queryscorer import build_default_scorer

QUERIES = (
    "how to update firefox",
    "clear cache in firefox",
    "mozilla firefox free download",
    "fire fox keeps crashing",
    "firefox not loading pages on my computer",
)
MODES = ("phrase", "flat")
THRESHOLDS = (1, 2)
RUNS = 5


def _keystrokes(query: str):
    """Each prefix of the query, as typed."""
    return [query[:i] for i in range(1, len(query) + 1)]


def _run_one(mode: str, threshold: float) -> dict:
    t0 = time.perf_counter()
    scorer = build_default_scorer(mode, distance_threshold=threshold)
    t_build = time.perf_counter() - t0

    inputs = [prefix for q in QUERIES for prefix in _keystrokes(q)]
    times = []
    for _ in range(RUNS):
        for text in inputs:
            t0 = time.perf_counter()
            scorer.score(text)
            times.append(time.perf_counter() - t0)
    row = {
        "mode": mode,
        "threshold": threshold,
        "keystrokes": len(inputs),
        "build_sec": round(t_build, 6),
        "mean_latency_sec": round(sum(times) / len(times), 6),
        "max_latency_sec": round(max(times), 6),
    }
    if mode == "phrase":
        row["trie_nodes"] = scorer.trie.node_count
    return row


def main() -> None:
    out_path = Path(__file__).parent / "benchmark_results.csv"
    rows = []
    for mode in MODES:
        for threshold in THRESHOLDS:
            print(f"Running mode={mode} threshold={threshold}...", flush=True)
            rows.append(_run_one(mode, threshold))
    fieldnames = [
        "mode", "threshold", "keystrokes", "build_sec",
        "mean_latency_sec", "max_latency_sec", "trie_nodes",
    ]
    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        w.writeheader()
        w.writerows(rows)
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
