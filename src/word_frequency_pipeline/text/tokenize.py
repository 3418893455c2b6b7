"""
text/tokenize.py

What this file does:
- Splits raw text into words: maximal runs of alphabetic characters, lower-cased.
- Any non-alphabetic character ends the current word; so do end-of-line and
  end-of-file (a last word without a trailing newline still counts).

How it fits:
- The counting core only ever sees the flat token list built here.
- Single-letter words are kept in the sequence; the counters classify them as ignored.
"""

from __future__ import annotations

import re
from itertools import groupby
from typing import Iterable, Iterator, List

# Candidate runs: word characters minus decimal digits and underscore.
# \w also admits numeric-but-not-decimal characters (², ₂, ½, Ⅻ), so every
# candidate is re-checked with str.isalpha().
_WORD_RE = re.compile(r"[^\W\d_]+")


def _alpha_runs(text: str) -> Iterator[str]:
  # Lower-case first: lower() can turn a letter into letter + combining mark.
  for m in _WORD_RE.finditer(text.lower()):
    word = m.group(0)
    if word.isalpha():
      yield word
      continue
    for is_alpha, run in groupby(word, key=str.isalpha):
      if is_alpha:
        yield "".join(run)


def tokenize_line(line: str) -> List[str]:
  return list(_alpha_runs(line))


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
  for line in lines:
    yield from _alpha_runs(line)


def tokenize_lines(lines: Iterable[str]) -> List[str]:
  return list(iter_tokens(lines))
