"""
report/format.py

Console table + summary block, and CSV export of the ranked list.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import pandas as pd

from ..counting.rank import RankedEntry
from ..pipeline.run import FrequencyReport

CSV_COLUMNS = ["rank", "word", "count"]


def format_ranked_line(rank: int, entry: RankedEntry) -> str:
    return f"{rank:>4}. {entry.word:<20} {entry.count:>6}"


def format_report(report: FrequencyReport) -> List[str]:
    lines = [format_ranked_line(i, e) for i, e in enumerate(report.ranked, start=1)]
    lines += [
        f"Processed the book in {report.elapsed_ms} ms.",
        f"Total words:      {report.tokens_total}",
        f"Counted words:    {report.counted_words}",
        f"Ignore list size: {report.ignore_list_size}",
        f"Ignored words:    {report.ignored_words}",
        f"Distinct words:   {report.distinct_words}",
    ]
    return lines


def ranked_to_frame(ranked: Sequence[RankedEntry]) -> pd.DataFrame:
    records = [
        {"rank": i, "word": e.word, "count": e.count}
        for i, e in enumerate(ranked, start=1)
    ]
    return pd.DataFrame(records, columns=CSV_COLUMNS)


def write_ranked_csv(ranked: Sequence[RankedEntry], csv_path: str | Path) -> Path:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    ranked_to_frame(ranked).to_csv(csv_path, index=False, encoding="utf-8")
    return csv_path
