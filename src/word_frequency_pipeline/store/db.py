"""
store/db.py

What this file does:
- Defines the SQLite schema for stored word-frequency reports.
- Provides connect(), init_db() and save_report() helpers.

How it fits:
- Optional output of the CLI (--db). Only finished reports are written:
  one `runs` row with the totals + config hash, plus the ranked words.
- Partial per-worker maps are never stored.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from ..pipeline.run import FrequencyReport

SCHEMA_VERSION = 1

DDL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS meta (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS runs (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  created_at TEXT NOT NULL,
  corpus_path TEXT,
  ignore_path TEXT,
  top_n INTEGER NOT NULL,
  workers INTEGER NOT NULL,
  executor TEXT NOT NULL,
  tokens_total INTEGER NOT NULL,
  counted_words INTEGER NOT NULL,
  ignored_words INTEGER NOT NULL,
  ignore_list_size INTEGER NOT NULL,
  distinct_words INTEGER NOT NULL,
  elapsed_ms INTEGER NOT NULL,
  config_json TEXT NOT NULL,
  config_hash TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS ranked_words (
  run_id INTEGER NOT NULL REFERENCES runs(id),
  rank INTEGER NOT NULL,
  word TEXT NOT NULL,
  count INTEGER NOT NULL,
  PRIMARY KEY (run_id, rank)
);

CREATE INDEX IF NOT EXISTS idx_ranked_words_word ON ranked_words(word);
"""

def connect(db_path: str | Path) -> sqlite3.Connection:
  conn = sqlite3.connect(str(db_path))
  conn.row_factory = sqlite3.Row
  return conn

def init_db(conn: sqlite3.Connection) -> None:
  conn.executescript(DDL)
  conn.execute(
    "INSERT OR REPLACE INTO meta(key, value) VALUES(?, ?)",
    ("schema_version", str(SCHEMA_VERSION)),
  )
  conn.commit()

def save_report(conn: sqlite3.Connection, report: FrequencyReport) -> int:
  cfg = report.config
  now = datetime.now(timezone.utc).isoformat()
  cur = conn.execute(
    """
    INSERT INTO runs(
      created_at, corpus_path, ignore_path, top_n, workers, executor,
      tokens_total, counted_words, ignored_words, ignore_list_size,
      distinct_words, elapsed_ms, config_json, config_hash
    )
    VALUES(?,?,?,?,?,?,?,?,?,?,?,?,?,?)
    """,
    (
      now,
      report.corpus_path,
      report.ignore_path,
      cfg.top_n,
      cfg.workers,
      cfg.executor,
      report.tokens_total,
      report.counted_words,
      report.ignored_words,
      report.ignore_list_size,
      report.distinct_words,
      report.elapsed_ms,
      cfg.to_json(),
      cfg.config_hash,
    ),
  )
  run_id = int(cur.lastrowid)
  conn.executemany(
    "INSERT INTO ranked_words(run_id, rank, word, count) VALUES(?,?,?,?)",
    [(run_id, i, e.word, e.count) for i, e in enumerate(report.ranked, start=1)],
  )
  conn.commit()
  return run_id
