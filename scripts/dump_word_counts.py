#!/usr/bin/env python3
"""
scripts/dump_word_counts.py

Export the ranked words of a stored run (default: the latest) to CSV.

Usage:
  PYTHONPATH=src python scripts/dump_word_counts.py --db data/results.db --out data/word_counts.csv
  PYTHONPATH=src python scripts/dump_word_counts.py --db data/results.db --out run3.csv --run-id 3
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from word_frequency_pipeline.store.db import connect


def latest_run_id(conn) -> int | None:
  row = conn.execute("SELECT MAX(id) AS id FROM runs").fetchone()
  return row["id"] if row else None


def dump_run(db_path: str | Path, out_path: str | Path, run_id: int | None = None) -> int:
  db_path = Path(db_path)
  if not db_path.exists():
    raise FileNotFoundError(f"Results DB not found: {db_path}")

  conn = connect(db_path)
  try:
    if run_id is None:
      run_id = latest_run_id(conn)
    if run_id is None:
      raise ValueError(f"No runs stored in {db_path}")
    df = pd.read_sql_query(
      "SELECT rank, word, count FROM ranked_words WHERE run_id = ? ORDER BY rank",
      conn,
      params=(run_id,),
    )
  finally:
    conn.close()

  out_path = Path(out_path)
  out_path.parent.mkdir(parents=True, exist_ok=True)
  df.to_csv(out_path, index=False, encoding="utf-8")
  return len(df)


def main() -> None:
  ap = argparse.ArgumentParser()
  ap.add_argument("--db", required=True, help="SQLite DB written by `wordfreq --db`.")
  ap.add_argument("--out", required=True, help="Output CSV path.")
  ap.add_argument("--run-id", type=int, default=None, help="Run to export (default: latest).")
  args = ap.parse_args()

  n = dump_run(args.db, args.out, args.run_id)
  print(f"✅ Wrote {n} ranked words → {args.out}", file=sys.stderr)


if __name__ == "__main__":
  main()
