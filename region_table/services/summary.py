from __future__ import annotations

from ..models.report_result import ReportResult
from .render import format_number

"""SUMMARY line rendering for a report run."""


def render_summary_line(result: ReportResult) -> str:
    """Render a SUMMARY line from a ReportResult.

    Format:
    SUMMARY rows={parsed} regions={regions} dropped={dropped} max_density={max}

    Examples:
        >>> from region_table.models import RegionCollection, Region
        >>> c = RegionCollection([Region("A", 10, 1, 10, "X")])
        >>> render_summary_line(ReportResult(text="", collection=c, parsed_rows=2, dropped=1))
        'SUMMARY rows=2 regions=1 dropped=1 max_density=10'
    """
    # 空コレクションは -Infinity
    max_str = format_number(result.max_density)
    return (
        f"SUMMARY rows={result.parsed_rows} "
        f"regions={result.regions} "
        f"dropped={result.dropped} "
        f"max_density={max_str}"
    )
