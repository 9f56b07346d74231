import csv
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from mortdash import DataLoader  # noqa: E402
from mortdash.adapters import SummaryCsvAdapter  # noqa: E402


def _write_csv(path: Path, rows: list[dict[str, str]]) -> None:
    with path.open("w", newline="", encoding="utf-8") as stream:
        writer = csv.DictWriter(stream, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


ROWS = [
    {
        "especie": "Salmón Coho",
        "region": "XI Región",
        "timepoint": "Semana 1 - Enero 2025",
        "mort_total_real": "80",
        "mort_sec_srs": "NA",
    },
    {
        "especie": "Salmón Atlántico",
        "region": "X Región",
        "timepoint": "Semana 3 - Marzo 2024",
        "mort_total_real": "150",
        "mort_sec_srs": "",
    },
    {
        "especie": "Salmón Atlántico",
        "region": "X Región",
        "timepoint": "garbage",
        "mort_total_real": "0",
        "mort_sec_srs": "4",
    },
]


def test_adapter_reads_cells_as_text(tmp_path: Path) -> None:
    csv_path = tmp_path / "datos_summary.csv"
    _write_csv(csv_path, ROWS)

    rows = list(SummaryCsvAdapter(csv_path=csv_path).read())

    assert len(rows) == 3
    assert rows[0]["mort_sec_srs"] == "NA"
    assert rows[1]["mort_sec_srs"] == ""
    assert rows[1]["mort_total_real"] == "150"


def test_loader_parses_records_and_lists_facets(tmp_path: Path) -> None:
    csv_path = tmp_path / "datos_summary.csv"
    _write_csv(csv_path, ROWS)

    loader = DataLoader.from_csv(csv_path)
    records = loader.load()

    assert len(records) == 3
    assert records[0].metric("mort_sec_srs") == 0.0
    assert records[2].year is None
    assert loader.species() == ["Salmón Atlántico", "Salmón Coho"]
    assert loader.regions() == ["X Región", "XI Región"]
    assert loader.years() == [2024, 2025]
    assert len(loader.primary_causes()) == 10
    assert len(loader.secondary_diseases()) == 20


def test_loader_requires_load_before_listing(tmp_path: Path) -> None:
    loader = DataLoader.from_csv(tmp_path / "missing.csv")

    with pytest.raises(RuntimeError):
        loader.species()


def test_missing_csv_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        DataLoader.from_csv(tmp_path / "missing.csv").load()


def test_semicolon_delimited_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "datos_summary.csv"
    csv_path.write_text(
        "especie;region;timepoint;mort_total_real\n"
        "Salmón Atlántico;X Región;Semana 7 - Febrero 2024;12,5\n",
        encoding="utf-8",
    )

    records = DataLoader(SummaryCsvAdapter(csv_path=csv_path, delimiter=";")).load()

    assert records[0].week == 7
    # Decimal comma keeps only the integer prefix.
    assert records[0].metric("mort_total_real") == 12.0
