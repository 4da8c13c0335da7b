from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import TextIO

from ..models.region import Region
from ..models.region_collection import RegionCollection

"""Fixed-width table rendering for RegionCollection.

Column layout (characters):
    city       18  left-aligned
    population 10  right-aligned
    area        8  right-aligned
    density     8  right-aligned
    country    18  right-aligned
    relative    6  right-aligned (optional)

Values longer than their column are not truncated.
"""

__all__ = [
    "RenderOptions",
    "format_number",
    "compose_line",
    "render_table",
    "print_table",
]

CITY_WIDTH = 18
POPULATION_WIDTH = 10
AREA_WIDTH = 8
DENSITY_WIDTH = 8
COUNTRY_WIDTH = 18
RELATIVE_WIDTH = 6


@dataclass(frozen=True)
class RenderOptions:
    relative_density: bool = True


def format_number(value: int | float) -> str:
    """Render an integer field; non-finite sentinels become NaN / Infinity."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def compose_line(region: Region, max_density: int | float, options: RenderOptions | None = None) -> str:
    opts = options or RenderOptions()
    fragments = [
        f"{region.city:<{CITY_WIDTH}}",
        f"{format_number(region.population):>{POPULATION_WIDTH}}",
        f"{format_number(region.area):>{AREA_WIDTH}}",
        f"{format_number(region.density):>{DENSITY_WIDTH}}",
        f"{region.country:>{COUNTRY_WIDTH}}",
    ]
    if opts.relative_density:
        relative = region.density_relative_to(max_density)
        fragments.append(f"{format_number(relative):>{RELATIVE_WIDTH}}")
    return "".join(fragments)


def render_table(collection: RegionCollection, options: RenderOptions | None = None) -> str:
    """Render one line per region, joined by newlines.

    The max density is read from the collection at render time; neither the
    collection nor its regions are modified.
    """
    opts = options or RenderOptions()
    max_density = collection.max_density()
    return "\n".join(compose_line(region, max_density, opts) for region in collection)


def print_table(
    collection: RegionCollection, options: RenderOptions | None = None, stream: TextIO | None = None
) -> None:
    """Write the rendered table to ``stream`` (default stdout) in one write.

    Nothing is written for an empty collection.
    """
    text = render_table(collection, options)
    if not text:
        return
    out = stream if stream is not None else sys.stdout
    out.write(text + "\n")
