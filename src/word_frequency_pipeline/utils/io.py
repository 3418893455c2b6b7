"""
utils/io.py

What this file does:
- Reads the corpus file (line by line, straight into the token list).
- Reads the ignore-word file into a frozenset.

How it fits:
- This is the only place where files are opened for the counting pipeline.
- Any open/read/decode failure becomes an InputAccessError here, before the
  pipeline spawns a single worker.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import FrozenSet, Iterable, List

from ..errors import InputAccessError
from ..text.tokenize import iter_tokens

# Ignore lists are comma and/or line separated.
_IGNORE_SEP_RE = re.compile(r"[,\r\n]")


def _check_readable(path: Path) -> None:
    if not path.exists():
        raise InputAccessError(path, "file not found")
    if not path.is_file():
        raise InputAccessError(path, "not a regular file")


def parse_ignore_words(lines: Iterable[str]) -> FrozenSet[str]:
    words = set()
    for line in lines:
        for piece in _IGNORE_SEP_RE.split(line.lower()):
            w = piece.strip()
            if w:
                words.add(w)
    return frozenset(words)


def read_ignore_words(path: str | Path, encoding: str = "utf-8") -> FrozenSet[str]:
    path = Path(path)
    _check_readable(path)
    try:
        with path.open("r", encoding=encoding) as f:
            return parse_ignore_words(f)
    except UnicodeDecodeError as e:
        raise InputAccessError(path, f"not valid {encoding} text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise InputAccessError(path, e.strerror or str(e)) from e


def read_corpus_tokens(path: str | Path, encoding: str = "utf-8") -> List[str]:
    path = Path(path)
    _check_readable(path)
    try:
        with path.open("r", encoding=encoding) as f:
            return list(iter_tokens(f))
    except UnicodeDecodeError as e:
        raise InputAccessError(path, f"not valid {encoding} text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise InputAccessError(path, e.strerror or str(e)) from e
