"""Chart series construction from filtered mortality records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from mortdash.causes import CauseCatalog
from mortdash.config import TOTAL_METRIC_FIELD, DashboardConfig, DEFAULT_PALETTE, MetricType
from mortdash.models import FilterState, Series, SeriesPoint, TypedRecord, year_token


def color_for_index(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    """Return the palette color for the ``index``-th series, cycling when exhausted."""

    return palette[index % len(palette)]


def week_sort_key(record: TypedRecord) -> tuple[bool, int]:
    # Undated records sort after every dated week.
    return (record.week is None, record.week or 0)


def group_by_series_key(records: Iterable[TypedRecord]) -> dict[str, list[TypedRecord]]:
    """Group records by ``series_key`` in first-seen order."""

    grouped: dict[str, list[TypedRecord]] = {}
    for record in records:
        grouped.setdefault(record.series_key, []).append(record)
    return grouped


class SeriesBuilder:
    """Turn filtered records into colored, labeled series.

    Totals produce one line per species/region/year. Primary and secondary
    views produce one line per selected cause and combination, with the
    color index running across causes first and combinations second.
    """

    def __init__(
        self,
        *,
        config: DashboardConfig | None = None,
        catalog: CauseCatalog | None = None,
    ) -> None:
        self.config = config or DashboardConfig()
        self.catalog = catalog or CauseCatalog()

    def build(self, records: Sequence[TypedRecord], state: FilterState) -> list[Series]:
        if state.metric_type in (MetricType.PRIMARY, MetricType.SECONDARY):
            return self.build_cause_series(records, state.selected_causes)
        return self.build_total_series(records)

    def build_total_series(self, records: Sequence[TypedRecord]) -> list[Series]:
        series: list[Series] = []
        for index, (key, group) in enumerate(group_by_series_key(records).items()):
            first = group[0]
            series.append(
                Series(
                    id=key,
                    label=first.display_label,
                    species=first.species,
                    region=first.region,
                    year=first.year,
                    color=color_for_index(index, self.config.palette),
                    line_style=self.config.line_style_for(first.year),
                    values=self._points(group, TOTAL_METRIC_FIELD),
                )
            )
        return series

    def build_cause_series(
        self,
        records: Sequence[TypedRecord],
        selected_causes: Sequence[str],
    ) -> list[Series]:
        if not selected_causes:
            return []

        # Same grouping as the totals view, so ids stay unique per cause.
        combinations = group_by_series_key(records)
        series: list[Series] = []
        color_index = 0

        for cause_field in selected_causes:
            cause_label = self.catalog.label_for(cause_field)
            for group in combinations.values():
                first = group[0]
                species, region, year = first.species, first.region, first.year
                year_label = year_token(year)
                series.append(
                    Series(
                        id=f"{species}_{region}_{year_label}_{cause_field}",
                        label=f"{cause_label} - {species} - {region} - {year_label}",
                        species=species,
                        region=region,
                        year=year,
                        cause=cause_field,
                        color=color_for_index(color_index, self.config.palette),
                        line_style=self.config.line_style_for(year),
                        values=self._points(group, cause_field),
                    )
                )
                color_index += 1

        return series

    @staticmethod
    def _points(records: Iterable[TypedRecord], field_name: str) -> tuple[SeriesPoint, ...]:
        return tuple(
            SeriesPoint(
                week=record.week,
                value=record.metric(field_name),
                month=record.month,
                timepoint=record.timepoint,
                record=record,
            )
            for record in sorted(records, key=week_sort_key)
        )
