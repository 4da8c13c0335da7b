from __future__ import annotations

from region_table.sample import SAMPLE_CITIES, SAMPLE_DROP_LAST
from region_table.services.pipeline import ReportConfig, generate_report, render_report
from region_table.services.render import RenderOptions

"""End-to-end run over the embedded sample dataset."""

# city, population, area, density, country, relative density
EXPECTED_ROWS = [
    ("Lagos", 16060303, 1171, 13712, "Nigeria", 100),
    ("Delhi", 16787941, 1484, 11313, "India", 83),
    ("New York City", 8537673, 784, 10892, "United States", 79),
    ("Sao Paulo", 12038175, 1521, 7914, "Brazil", 58),
    ("Tokyo", 13513734, 2191, 6168, "Japan", 45),
    ("Mexico City", 8874724, 1486, 5974, "Mexico", 44),
    ("London", 8673713, 1572, 5431, "United Kingdom", 40),
    ("Shanghai", 24256800, 6340, 3826, "China", 28),
    ("Istanbul", 14160467, 5461, 2593, "Turkey", 19),
]


def _line(row, relative=True) -> str:
    city, population, area, density, country, rel = row
    line = f"{city:<18}{population:>10}{area:>8}{density:>8}{country:>18}"
    return line + f"{rel:>6}" if relative else line


def test_sample_report_matches_expected_table():
    text = render_report(SAMPLE_CITIES, ReportConfig(drop_last=SAMPLE_DROP_LAST))
    assert text == "\n".join(_line(row) for row in EXPECTED_ROWS)


def test_sample_report_without_relative_density():
    cfg = ReportConfig(render=RenderOptions(relative_density=False), drop_last=SAMPLE_DROP_LAST)
    text = render_report(SAMPLE_CITIES, cfg)
    assert text == "\n".join(_line(row, relative=False) for row in EXPECTED_ROWS)


def test_sample_report_keeps_last_row_when_not_dropped():
    result = generate_report(SAMPLE_CITIES)
    assert result.regions == 10
    assert result.collection.at(-1).city == "Istanbul"
    assert any(r.city == "Bangkok" for r in result.collection)


def test_indented_sample_keeps_leading_whitespace():
    indented = "\n".join("  " + line if i else line for i, line in enumerate(SAMPLE_CITIES.split("\n")))
    result = generate_report(indented, ReportConfig(drop_last=SAMPLE_DROP_LAST))
    assert result.collection.at(0).city == "  Lagos"
    assert result.text.split("\n")[0].startswith("  Lagos")
