# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from region_table.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("REGION_TABLE_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """csv:
  headers: true
  eol: "\\n"
  separator: ","
render:
  relative_density: true
drop_last: 0
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def three_city_records() -> list[dict[str, str]]:
    return [
        {"city": "CityA", "population": "1000", "area": "50", "density": "20", "country": "CountryA"},
        {"city": "CityB", "population": "2000", "area": "100", "density": "30", "country": "CountryB"},
        {"city": "CityC", "population": "3000", "area": "150", "density": "25", "country": "CountryC"},
    ]


@pytest.fixture()
def cities_csv(temp_workdir: Path) -> Path:
    f = temp_workdir / "data" / "cities.csv"
    f.write_text(
        "city,population,area,density,country\n"
        "Alpha,1000,10,100,Aland\n"
        "Beta,2000,10,200,Bland\n"
        "Gamma,500,10,50,Cland\n",
        encoding="utf-8",
    )
    return f
