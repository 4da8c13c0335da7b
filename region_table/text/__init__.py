"""Plain-text CSV splitting."""

from .csv_parser import CsvOptions, parse_csv, split_table, zip_records

__all__ = [
    "CsvOptions",
    "parse_csv",
    "split_table",
    "zip_records",
]
