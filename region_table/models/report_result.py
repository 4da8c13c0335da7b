from __future__ import annotations

from dataclasses import dataclass

from .region_collection import RegionCollection

"""Result model for one report run.

Holds the rendered text together with the collection it was rendered from,
so callers can log aggregates without re-parsing the table.
"""

__all__ = [
    "ReportResult",
]


@dataclass(frozen=True)
class ReportResult:
    """Outcome of ``generate_report``.

    The collection is already trimmed and sorted; ``text`` is the rendered
    table without a trailing newline.
    """
    text: str  # 出力テーブル本文
    collection: RegionCollection
    parsed_rows: int  # CSV データ行数 (drop 前)
    dropped: int = 0  # 末尾から取り除いた件数

    @property
    def regions(self) -> int:
        return self.collection.size()

    @property
    def max_density(self) -> int | float:
        return self.collection.max_density()
