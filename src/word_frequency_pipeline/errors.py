"""
errors.py

Exception types shared by the loaders, the counting core and the CLI.

- UsageError: a caller passed a bad top-N / worker count.
- InputAccessError: the corpus or ignore file cannot be opened, read or decoded.
- LogicFault: an internal invariant broke (partition coverage, index range).
  Nothing catches this one.
"""

from __future__ import annotations

from pathlib import Path


class UsageError(ValueError):
    pass


class InputAccessError(OSError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class LogicFault(RuntimeError):
    pass
