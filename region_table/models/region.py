from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass

"""Region entity and record mapping.

A Region is built from one parsed CSV record (all string values). Numeric
columns use truncating base-10 parsing; values without leading digits become
the ``nan`` sentinel instead of raising. A column missing from the record
altogether is rejected at mapping time with ``InvalidRecordError``.
"""

__all__ = [
    "InvalidRecordError",
    "Region",
    "REQUIRED_FIELDS",
    "parse_int_prefix",
    "relative_density",
]

REQUIRED_FIELDS = ("city", "population", "area", "density", "country")

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class InvalidRecordError(Exception):
    """Raised when a record lacks a field required to build a Region."""


def parse_int_prefix(value: str) -> int | float:
    """Parse the leading base-10 integer of ``value``.

    Leading whitespace and a sign are accepted; parsing stops at the first
    non-digit. Returns ``nan`` when no digits lead the string.

    Examples:
        >>> parse_int_prefix("783.8")
        783
        >>> parse_int_prefix("abc")
        nan
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return math.nan
    return int(match.group(1))


def relative_density(density: int | float, reference: int | float) -> int | float:
    """Return ``density`` as a rounded percentage of ``reference``.

    Rounds half up. Division by zero follows float semantics (``inf`` /
    ``-inf`` / ``nan``), and any non-finite result is returned unrounded.
    """
    if reference == 0:
        if math.isnan(density) or density == 0:
            return math.nan
        return math.inf if density > 0 else -math.inf
    value = density * 100 / reference
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Region:
    """One city row of the dataset.

    Numeric fields hold ``int`` values, or ``nan`` when the source value was
    not numeric.
    """
    city: str
    population: int | float
    area: int | float
    density: int | float
    country: str

    def density_relative_to(self, reference: int | float) -> int | float:
        return relative_density(self.density, reference)

    @classmethod
    def from_record(cls, record: Mapping[str, str | None]) -> Region:
        """Map a parsed CSV record to a Region.

        Raises:
            InvalidRecordError: a required field is absent (key missing, or
                ``None`` because the source row was too short)
        """
        missing = [name for name in REQUIRED_FIELDS if record.get(name) is None]
        if missing:
            raise InvalidRecordError(f"record missing fields: {missing}")
        return cls(
            city=record["city"],
            population=parse_int_prefix(record["population"]),
            area=parse_int_prefix(record["area"]),
            density=parse_int_prefix(record["density"]),
            country=record["country"],
        )
