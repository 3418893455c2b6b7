"""
main.py

What this file does:
- Runs the word-frequency pipeline from a source checkout.

How to run:
- From project root:
  PYTHONPATH=src python main.py data/book.txt data/ignore-words.txt 100
or, once installed:
  wordfreq data/book.txt data/ignore-words.txt 100 --workers 8
"""

from __future__ import annotations

import sys

from word_frequency_pipeline.cli import main

if __name__ == "__main__":
    sys.exit(main())
