from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping

from .region import Region

"""RegionCollection: ordered, mutable sequence of Region with aggregate queries.

The maximum density is recomputed on every call so it always reflects the
current contents, including after ``pop_last`` and sorting.
"""

__all__ = [
    "RegionCollection",
]


class RegionCollection:
    def __init__(self, regions: Iterable[Region] | None = None) -> None:
        self.regions: list[Region] = list(regions) if regions is not None else []

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, str | None]]) -> RegionCollection:
        return cls(Region.from_record(r) for r in records)

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def size(self) -> int:
        return len(self.regions)

    def at(self, index: int) -> Region | None:
        """Return the region at ``index`` (negative counts from the end) or None."""
        if -len(self.regions) <= index < len(self.regions):
            return self.regions[index]
        return None

    def pop_last(self) -> Region | None:
        """Remove the last region. Empty collections are left as is."""
        if not self.regions:
            return None
        return self.regions.pop()

    def max_density(self) -> int | float:
        """Maximum density over current regions.

        Returns ``-inf`` for an empty collection and ``nan`` when any density
        is ``nan``.
        """
        best: int | float = -math.inf
        for region in self.regions:
            if math.isnan(region.density):
                return math.nan
            if region.density > best:
                best = region.density
        return best

    def sort_by_relative_density(self) -> None:
        """Sort in place by relative density, descending.

        The maximum is computed once before sorting. ``list.sort`` is stable,
        so regions with equal relative density keep their input order.
        ``nan`` values go last.
        """
        reference = self.max_density()

        def _key(region: Region) -> tuple[bool, float]:
            value = region.density_relative_to(reference)
            if math.isnan(value):
                return (True, 0.0)
            return (False, -value)

        self.regions.sort(key=_key)
