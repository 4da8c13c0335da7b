from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

"""Minimal CSV splitter.

Splitting is purely syntactic: the text is cut on the exact end-of-line string,
then every row on the exact separator string. There is no quoting, escaping or
trimming, so whitespace around values survives verbatim. The parser never
raises for ragged or malformed rows.
"""

__all__ = [
    "CsvOptions",
    "RawTable",
    "FieldRecord",
    "split_table",
    "zip_records",
    "parse_csv",
]

RawTable = list[list[str]]
FieldRecord = dict[str, "str | None"]


@dataclass(frozen=True)
class CsvOptions:
    """Dialect settings for :func:`parse_csv`.

    headers: treat row 0 as field names and return keyed records
    eol: exact row delimiter
    separator: exact field delimiter
    """
    headers: bool = True
    eol: str = "\n"
    separator: str = ","

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None = None) -> CsvOptions:
        """Build options from defaults plus ``overrides``.

        Keys with a ``None`` value keep their default. Unknown keys raise
        ``TypeError``. A new object is returned on every call, the defaults
        are never modified.
        """
        if not overrides:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"unknown csv options: {sorted(unknown)}")
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(cls(), **values)


def split_table(text: str, options: CsvOptions | None = None) -> RawTable:
    opts = options or CsvOptions()
    return [line.split(opts.separator) for line in text.split(opts.eol)]


def zip_records(table: RawTable) -> list[FieldRecord]:
    """Zip every data row against the header row (row 0).

    Short rows leave trailing headers mapped to ``None``; extra values beyond
    the header length are dropped.
    """
    if not table:
        return []
    headers, body = table[0], table[1:]
    records: list[FieldRecord] = []
    for row in body:
        records.append({h: (row[i] if i < len(row) else None) for i, h in enumerate(headers)})
    return records


def parse_csv(text: str, options: CsvOptions | None = None) -> list[FieldRecord] | RawTable:
    """Parse ``text`` into keyed records (headers on) or a raw table (headers off).

    Examples:
        >>> parse_csv("name,age\\nAlice,30")
        [{'name': 'Alice', 'age': '30'}]
        >>> parse_csv("")
        []
    """
    opts = options or CsvOptions()
    table = split_table(text, opts)
    return zip_records(table) if opts.headers else table
