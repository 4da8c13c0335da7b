from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models.region_collection import RegionCollection
from ..models.report_result import ReportResult
from ..text.csv_parser import CsvOptions, parse_csv
from .render import RenderOptions, render_table

"""Report pipeline: CSV text -> records -> regions -> sorted collection -> table.

The pipeline is a pure function of its inputs. Printing is left to the
caller (see ``region_table.cli``).
"""

__all__ = [
    "ReportConfig",
    "ReportError",
    "generate_report",
    "render_report",
]

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Raised when the pipeline cannot run with the given configuration."""


@dataclass(frozen=True)
class ReportConfig:
    """Options for one report run.

    drop_last: number of trailing regions removed before sorting
    """
    csv: CsvOptions = field(default_factory=CsvOptions)
    render: RenderOptions = field(default_factory=RenderOptions)
    drop_last: int = 0


def generate_report(text: str, config: ReportConfig | None = None) -> ReportResult:
    """Run the full pipeline over ``text``.

    Raises:
        ReportError: headers are disabled or ``drop_last`` is negative
        InvalidRecordError: a row lacks one of the region fields
    """
    cfg = config or ReportConfig()
    if not cfg.csv.headers:
        raise ReportError("region mapping requires a header row (csv.headers=true)")
    if cfg.drop_last < 0:
        raise ReportError(f"drop_last must be >= 0, got {cfg.drop_last}")

    records = parse_csv(text, cfg.csv)
    logger.debug(f"parsed rows={len(records)}")
    collection = RegionCollection.from_records(records)

    dropped = 0
    for _ in range(cfg.drop_last):
        if collection.pop_last() is None:
            break
        dropped += 1
    if dropped:
        logger.debug(f"dropped trailing regions={dropped}")

    collection.sort_by_relative_density()
    logger.debug(f"sorted regions={collection.size()} max_density={collection.max_density()}")

    return ReportResult(
        text=render_table(collection, cfg.render),
        collection=collection,
        parsed_rows=len(records),
        dropped=dropped,
    )


def render_report(text: str, config: ReportConfig | None = None) -> str:
    return generate_report(text, config).text
