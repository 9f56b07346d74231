import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from mortdash import (  # noqa: E402
    DashboardConfig,
    DashboardPipeline,
    FilterState,
    LineStyle,
    MetricType,
    RecordParser,
    ScaleType,
)


def _rows() -> list[dict[str, str]]:
    return [
        {
            "especie": "Salmón Atlántico",
            "region": "X Región",
            "timepoint": "Semana 4 - Marzo 2024",
            "mort_total_real": "200",
            "mort_prim_ambiental": "50",
        },
        {
            "especie": "Salmón Atlántico",
            "region": "X Región",
            "timepoint": "Semana 3 - Marzo 2024",
            "mort_total_real": "150",
            "mort_prim_ambiental": "30",
        },
        {
            "especie": "Salmón Coho",
            "region": "XI Región",
            "timepoint": "Semana 3 - Marzo 2025",
            "mort_total_real": "0",
            "mort_prim_ambiental": "7",
        },
    ]


def test_end_to_end_total_mortality_scenario() -> None:
    records = RecordParser().parse_many(_rows()[:2])
    state = FilterState(
        species={"Salmón Atlántico"},
        regions={"X Región"},
        years={2024},
        metric_type=MetricType.TOTAL,
    )

    report = DashboardPipeline(records).run(state)

    assert report.series_count == 1
    assert report.exceeded is False
    series = report.series[0]
    assert series.id == "Salmón Atlántico_X Región_2024"
    assert series.line_style is LineStyle.SOLID
    assert [(point.week, point.value) for point in series.values] == [(3, 150.0), (4, 200.0)]


def test_percentage_scale_on_cause_view() -> None:
    records = RecordParser().parse_many(_rows())
    state = FilterState(
        metric_type=MetricType.PRIMARY,
        selected_causes=["mort_prim_ambiental"],
        scale_type=ScaleType.PERCENTAGE,
    )

    report = DashboardPipeline(records).run(state)

    atlantic, coho = report.series
    assert [point.value for point in atlantic.values] == [pytest.approx(20.0), pytest.approx(25.0)]
    assert [point.original_value for point in atlantic.values] == [30.0, 50.0]
    assert coho.values[0].value == 0.0
    assert report.scale_type is ScaleType.PERCENTAGE


def test_repeated_runs_do_not_compound_percentages() -> None:
    pipeline = DashboardPipeline(RecordParser().parse_many(_rows()))
    state = FilterState(
        metric_type=MetricType.PRIMARY,
        selected_causes=["mort_prim_ambiental"],
        scale_type=ScaleType.PERCENTAGE,
    )

    first = pipeline.run(state)
    second = pipeline.run(state)

    assert [p.value for p in first.series[0].values] == [p.value for p in second.series[0].values]


def test_limit_reported_with_configured_cap() -> None:
    records = RecordParser().parse_many(_rows())
    state = FilterState(
        metric_type=MetricType.SECONDARY,
        selected_causes=["mort_sec_srs", "mort_sec_isa", "mort_sec_bkd"],
    )

    report = DashboardPipeline(records, config=DashboardConfig(max_lines=4)).run(state)

    assert report.built_series == 6
    assert report.series_count == 4
    assert report.exceeded is True


def test_unknown_causes_are_reported_not_raised() -> None:
    records = RecordParser().parse_many(_rows())
    state = FilterState(metric_type=MetricType.PRIMARY, selected_causes=["mort_prim_meteorito"])

    report = DashboardPipeline(records).run(state)

    assert report.unknown_causes == ("mort_prim_meteorito",)
    assert report.series[0].label.startswith("mort_prim_meteorito - ")


def test_empty_filter_result_is_empty_report() -> None:
    records = RecordParser().parse_many(_rows())

    report = DashboardPipeline(records).run(FilterState(species={"Merluza"}))

    assert report.filtered_records == 0
    assert report.series == []
    assert report.exceeded is False
