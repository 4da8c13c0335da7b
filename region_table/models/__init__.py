"""Domain models for the region density report.

This package contains the typed entities built from parsed CSV records and
the collection that aggregates and orders them.
"""

from .region import InvalidRecordError, Region, parse_int_prefix, relative_density
from .region_collection import RegionCollection
from .report_result import ReportResult

__all__ = [
    # Entities
    "Region",
    "RegionCollection",
    "ReportResult",
    # Mapping helpers
    "InvalidRecordError",
    "parse_int_prefix",
    "relative_density",
]
