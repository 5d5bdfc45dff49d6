#!/usr/bin/env python3
"""
Fish Summarizer — command-line entry point

Usage (examples)
----------------
# One-sentence summary of a text file
python fish.py summary notes.txt

# Five sentences, with timing, written to an HTML page as well
python fish.py summary notes.txt --depth 3 --time -o docs/summary/index.html

# Summarize a web page (HTML reduced to text first)
python fish.py summary https://example.com/article --strip-html -d 2

# Show current config as seen by fish_core.config
python fish.py config show

Notes
-----
- Relies on fish_core/config.py to load .env (if available).
- Logs are concise by default; pass -v/--verbose multiple times to increase detail.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Optional

from fish_core.config import CONFIG, FISH_DEFAULT_DEPTH
from summarizer.engine import Summary, summarize
from summarizer.errors import SummaryError
from summarizer.report import render_summary

# ---------------------------
# Logging setup
# ---------------------------
_LOG = logging.getLogger("fish")


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING  # 0
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )


# ---------------------------
# Output
# ---------------------------


def print_summary(summary: Summary, show_time: bool = False) -> None:
    if summary.is_empty:
        print("[Summary] (empty or no sentences)")
    else:
        print(f"=== Extractive Summary (depth={summary.depth}) ===\n")
        for sentence in summary.sentences:
            print(f"{sentence}\n")

    if show_time and summary.elapsed is not None:
        print(f"[Timing] summary generated in {summary.elapsed:.4f} seconds")


# ---------------------------
# CLI definitions
# ---------------------------


def add_summary_subparser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("summary", help="Extractive TF-IDF summary of a file or URL")
    p.add_argument("source", help="Path to a text file, or an http(s) URL")
    p.add_argument(
        "-d",
        "--depth",
        type=int,
        default=FISH_DEFAULT_DEPTH,
        help="1 → 1 sentence, 2 → 3, 3 → 5, 4+ → 10 (default: env FISH_DEFAULT_DEPTH or 1)",
    )
    p.add_argument("--time", action="store_true", help="Report processing time")
    p.add_argument(
        "--strip-html", action="store_true", help="Extract text from HTML before summarizing"
    )
    p.add_argument("-o", "--output", help="Also write an HTML report to this path")


def add_config_subparser(subparsers: argparse._SubParsersAction) -> None:
    sp = subparsers.add_parser("config", help="Inspect configuration")
    csp = sp.add_subparsers(dest="config_cmd", required=True)

    p_show = csp.add_parser("show", help="Print detected config (.env and ENV vars)")
    p_show.add_argument("--as-json", action="store_true", help="Output JSON")


# ---------------------------
# Main
# ---------------------------


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="fish", description="Fish extractive summarizer")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v, -vv)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    add_summary_subparser(sub)
    add_config_subparser(sub)

    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(args.verbose)

    try:
        if args.cmd == "config":
            if args.config_cmd == "show":
                if args.as_json:
                    print(json.dumps(CONFIG, indent=2, default=str))
                else:
                    print("Detected Fish configuration:")
                    for k in sorted(CONFIG.keys()):
                        print(f"  {k}={CONFIG[k]}")
                return 0

        elif args.cmd == "summary":
            _LOG.info("Summarizing %s (depth=%d)", args.source, args.depth)
            summary = summarize(
                args.source,
                args.depth,
                time_flag=args.time,
                strip_html=args.strip_html,
            )
            print_summary(summary, show_time=args.time)
            if args.output:
                out = render_summary(summary, args.source, args.output)
                _LOG.info("Report written: %s", out)
            return 0

    except SummaryError as e:
        _LOG.error("%s", e)
        if args.verbose >= 2:
            raise
        return 1

    # Should not reach here
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
