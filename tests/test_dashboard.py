import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from mortdash import FilterState, MetricType, MortalityDashboard, RecordParser  # noqa: E402
from mortdash.dashboard import results_label  # noqa: E402
from mortdash.publishers import SeriesJsonPublisher  # noqa: E402


def _records():
    rows = [
        ("Salmón Atlántico", "X Región", "Semana 1 - Enero 2024", "10"),
        ("Salmón Atlántico", "X Región", "Semana 1 - Enero 2025", "20"),
        ("Salmón Coho", "XI Región", "Semana 2 - Enero 2024", "5"),
    ]
    return RecordParser().parse_many(
        {"especie": species, "region": region, "timepoint": timepoint, "mort_total_real": total}
        for species, region, timepoint, total in rows
    )


def test_results_label() -> None:
    assert results_label(1) == "1 Resultado"
    assert results_label(0) == "0 Resultados"
    assert results_label(3) == "3 Resultados"


def test_hidden_series_stay_hidden_across_filter_changes() -> None:
    dashboard = MortalityDashboard(_records())
    state = FilterState()

    report = dashboard.handle_filter_change(state)
    assert dashboard.results_label() == "3 Resultados"

    hidden_id = report.series[1].id
    assert dashboard.toggle_series_visibility(hidden_id) is False
    assert hidden_id not in [item.id for item in dashboard.visible_series()]

    state.years = {2024, 2025}
    dashboard.handle_filter_change(state)

    assert len(dashboard.current_series()) == 3
    assert [item.id for item in dashboard.visible_series()] == [
        "Salmón Atlántico_X Región_2024",
        "Salmón Coho_XI Región_2024",
    ]


def test_toggle_before_any_render_is_ignored() -> None:
    dashboard = MortalityDashboard(_records())

    assert dashboard.toggle_series_visibility("anything") is None
    assert dashboard.current_series() == []


def test_state_snapshot_is_not_shared_with_caller() -> None:
    dashboard = MortalityDashboard(_records())
    state = FilterState(species={"Salmón Coho"})
    dashboard.handle_filter_change(state)

    state.species.add("Salmón Atlántico")

    assert dashboard.state.species == {"Salmón Coho"}


def test_publisher_receives_visible_series(tmp_path: Path) -> None:
    output = tmp_path / "chart" / "series.json"
    dashboard = MortalityDashboard(
        _records(),
        publishers=[SeriesJsonPublisher(output_path=output)],
    )

    report = dashboard.handle_filter_change(FilterState(metric_type=MetricType.TOTAL))
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["series_count"] == 3
    assert payload["scale_type"] == "absolute"
    assert payload["series"][0]["values"] == [
        {"week": 1, "value": 10.0, "month": "Enero", "timepoint": "Semana 1 - Enero 2024"}
    ]
    assert payload["series"][0]["line_style"] == "solid"

    dashboard.toggle_series_visibility(report.series[0].id)
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [item["id"] for item in payload["series"]] == [
        "Salmón Atlántico_X Región_2025",
        "Salmón Coho_XI Región_2024",
    ]


def test_payload_includes_cause_only_for_cause_series(tmp_path: Path) -> None:
    output = tmp_path / "series.json"
    dashboard = MortalityDashboard(_records(), publishers=[SeriesJsonPublisher(output_path=output)])

    dashboard.handle_filter_change(FilterState())
    totals = json.loads(output.read_text(encoding="utf-8"))["series"]
    assert all("cause" not in item for item in totals)

    dashboard.handle_filter_change(
        FilterState(metric_type=MetricType.PRIMARY, selected_causes=["mort_prim_ambiental"])
    )
    causes = json.loads(output.read_text(encoding="utf-8"))["series"]
    assert {item["cause"] for item in causes} == {"mort_prim_ambiental"}
