"""
cli.py

Command line entry point:

  wordfreq <corpus-file> <ignore-file> <topN> [--workers 8] [--executor thread]
           [--csv out.csv] [--db results.db] [--encoding utf-8] [--verbose]

Exit codes: 0 ok, 1 unreadable input or unwritable output, 2 usage error.
"""

from __future__ import annotations

import argparse
import codecs
import sqlite3
import sys
from typing import List, Optional

from .errors import InputAccessError, UsageError
from .pipeline.run import DEFAULT_WORKERS, EXECUTORS, run_pipeline
from .report.format import format_report, write_ranked_csv
from .store.db import connect, init_db, save_report

EXIT_OK = 0
EXIT_IO_ERROR = 1


def parse_top_n(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise UsageError(f"topN must be a non-negative integer, got {text!r}") from None
    if n < 0:
        raise UsageError(f"topN must be a non-negative integer, got {text!r}")
    return n


def parse_workers(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise UsageError(f"workers must be a positive integer, got {text!r}") from None
    if n < 1:
        raise UsageError(f"workers must be a positive integer, got {text!r}")
    return n


def parse_encoding(text: str) -> str:
    try:
        codecs.lookup(text)
    except LookupError:
        raise UsageError(f"unknown encoding: {text!r}") from None
    return text


def _arg_type(parse):
    def convert(text: str):
        try:
            return parse(text)
        except UsageError as e:
            raise argparse.ArgumentTypeError(str(e)) from None
    return convert


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordfreq",
        description="Count word frequencies in a text file and print the top N words.",
    )
    ap.add_argument("corpus", help="Text file to count (e.g. bookfile.txt).")
    ap.add_argument("ignore", help="Words to ignore, separated by commas and/or newlines.")
    ap.add_argument("top_n", metavar="topN", type=_arg_type(parse_top_n), help="How many words to list.")

    ap.add_argument("--workers", type=_arg_type(parse_workers), default=DEFAULT_WORKERS)
    ap.add_argument("--executor", choices=EXECUTORS, default="thread")
    ap.add_argument("--encoding", type=_arg_type(parse_encoding), default="utf-8")
    ap.add_argument("--csv", default=None, help="Also write the ranked list to this CSV file.")
    ap.add_argument("--db", default=None, help="Also store the report in this SQLite DB.")
    ap.add_argument("--verbose", action="store_true", help="Print stage progress to stderr.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        report = run_pipeline(
            corpus_path=args.corpus,
            ignore_path=args.ignore,
            top_n=args.top_n,
            workers=args.workers,
            executor=args.executor,
            encoding=args.encoding,
            verbose=args.verbose,
        )
    except InputAccessError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    for line in format_report(report):
        print(line)

    try:
        if args.csv:
            out = write_ranked_csv(report.ranked, args.csv)
            print(f"✅ Wrote {len(report.ranked)} ranked words → {out}", file=sys.stderr)

        if args.db:
            conn = connect(args.db)
            try:
                init_db(conn)
                run_id = save_report(conn, report)
            finally:
                conn.close()
            print(f"✅ Stored run {run_id} in {args.db}", file=sys.stderr)
    except (OSError, sqlite3.Error) as e:
        print(f"error: cannot write output: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
