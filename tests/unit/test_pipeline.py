from __future__ import annotations

import logging

import pytest

from region_table.models.region import InvalidRecordError
from region_table.services.pipeline import ReportConfig, ReportError, generate_report, render_report
from region_table.services.render import RenderOptions
from region_table.text.csv_parser import CsvOptions

TEXT = (
    "city,population,area,density,country\n"
    "CityA,1000,50,20,CountryA\n"
    "CityB,2000,100,30,CountryB\n"
    "CityC,3000,150,25,CountryC"
)


def _cities(result) -> list[str]:
    return [r.city for r in result.collection]


def test_generate_report_sorts_descending():
    result = generate_report(TEXT)
    assert _cities(result) == ["CityB", "CityC", "CityA"]
    assert result.parsed_rows == 3
    assert result.regions == 3
    assert result.dropped == 0
    assert result.max_density == 30


def test_generate_report_drop_last():
    result = generate_report(TEXT, ReportConfig(drop_last=1))
    assert _cities(result) == ["CityB", "CityA"]
    assert result.dropped == 1
    assert result.parsed_rows == 3


def test_drop_last_more_than_available():
    result = generate_report(TEXT, ReportConfig(drop_last=10))
    assert result.dropped == 3
    assert result.regions == 0
    assert result.text == ""


def test_render_report_returns_text_only():
    text = render_report(TEXT, ReportConfig(render=RenderOptions(relative_density=False)))
    lines = text.split("\n")
    assert len(lines) == 3
    assert all(len(line) == 62 for line in lines)
    assert lines[0].startswith("CityB")


def test_render_report_custom_dialect():
    text = TEXT.replace(",", ";").replace("\n", "\r\n")
    cfg = ReportConfig(csv=CsvOptions(eol="\r\n", separator=";"))
    assert render_report(text, cfg) == render_report(TEXT)


def test_headers_disabled_rejected():
    with pytest.raises(ReportError):
        generate_report(TEXT, ReportConfig(csv=CsvOptions(headers=False)))


def test_negative_drop_last_rejected():
    with pytest.raises(ReportError):
        generate_report(TEXT, ReportConfig(drop_last=-1))


def test_ragged_row_fails_fast():
    with pytest.raises(InvalidRecordError):
        generate_report(TEXT + "\nCityD,10")


def test_empty_input_yields_empty_report():
    result = generate_report("")
    assert result.text == ""
    assert result.parsed_rows == 0


def test_pipeline_logs_debug_steps(caplog):
    with caplog.at_level(logging.DEBUG, logger="region_table.services.pipeline"):
        generate_report(TEXT, ReportConfig(drop_last=1))
    messages = [r.getMessage() for r in caplog.records]
    assert "parsed rows=3" in messages
    assert "dropped trailing regions=1" in messages
