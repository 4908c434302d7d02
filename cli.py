#!/usr/bin/env python3
"""
CLI for trying the query scorer against the bundled keyword documents.

Commands:
  score <query>  Print every document with its score, best first
  top <query>    Print the ids of the best-scoring documents within the cutoff
  demo           Run a few sample queries, typos included
"""

import argparse
import logging
import math
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from queryscorer import build_default_scorer, top_matches
from queryscorer import config

DEMO_QUERIES = (
    "how to update firefox",
    "firefox update now please",
    "updat firfox",
    "fire fox keeps crashing",
    "clear cache",
    "mozzila download",
    "firefox",
)


def _format_score(score: float) -> str:
    return "-" if score == math.inf else f"{score:g}"


def _scorer(args: argparse.Namespace):
    return build_default_scorer(args.mode, distance_threshold=args.threshold)


def cmd_score(args: argparse.Namespace) -> None:
    results = _scorer(args).score(args.query)
    print("Query:", args.query)
    for doc, score in results:
        print(f" {_format_score(score):>6}  {doc.id}")


def cmd_top(args: argparse.Namespace) -> None:
    results = _scorer(args).score(args.query)
    top = top_matches(results)
    if not top or results[0].score > args.cutoff:
        print("No match", file=sys.stderr)
        sys.exit(1)
    for doc in top:
        print(doc.id)


def cmd_demo(args: argparse.Namespace) -> None:
    """Score the sample queries and show the tip each one would surface."""
    scorer = _scorer(args)
    print(f"Demo: {len(scorer.documents)} documents, {args.mode} mode.")
    for query in DEMO_QUERIES:
        results = scorer.score(query)
        top = [doc.id for doc in top_matches(results)]
        best = results[0].score if results else math.inf
        shown = ", ".join(top) if top and best <= args.cutoff else "(none)"
        print(f"  {query!r:32} -> {shown} [{_format_score(best)}]")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Typo-tolerant phrase matching against keyword documents"
    )
    parser.add_argument(
        "--mode", choices=("phrase", "flat"), default="phrase",
        help="Scoring mode (default: phrase)",
    )
    parser.add_argument(
        "--threshold", type=float, default=None,
        help="Per-word edit distance threshold (default from QUERYSCORER_DISTANCE_THRESHOLD)",
    )
    parser.add_argument(
        "--cutoff", type=float, default=config.CUTOFF_SCORE,
        help="Highest score shown as a match",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    p_score = sub.add_parser("score", help="Score a query against all documents")
    p_score.add_argument("query", help="Query string")
    p_top = sub.add_parser("top", help="Print the best-matching document ids")
    p_top.add_argument("query", help="Query string")
    sub.add_parser("demo", help="Run sample queries")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command == "score":
        cmd_score(args)
    elif args.command == "top":
        cmd_top(args)
    elif args.command == "demo":
        cmd_demo(args)


if __name__ == "__main__":
    main()
