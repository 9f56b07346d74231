"""Composable filter, build, rescale and limit pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from mortdash.causes import CauseCatalog
from mortdash.config import DashboardConfig, MetricType, ScaleType
from mortdash.filters import filter_records
from mortdash.limiter import limit_series
from mortdash.models import FilterState, Series, TypedRecord
from mortdash.scale import to_percentages
from mortdash.series import SeriesBuilder

logger = logging.getLogger(__name__)


@dataclass
class DashboardRunReport:
    """Result of one filter change."""

    scale_type: ScaleType
    filtered_records: int
    built_series: int
    exceeded: bool
    series: list[Series] = field(default_factory=list)
    unknown_causes: tuple[str, ...] = ()

    @property
    def series_count(self) -> int:
        return len(self.series)


class DashboardPipeline:
    """Run facet filter, series builder, scale converter and limiter in order.

    Every run starts from the immutable record collection, so repeated runs
    never compound a percentage conversion.
    """

    def __init__(
        self,
        records: Sequence[TypedRecord],
        *,
        config: DashboardConfig | None = None,
        catalog: CauseCatalog | None = None,
        builder: SeriesBuilder | None = None,
    ) -> None:
        self.records = tuple(records)
        self.config = config or DashboardConfig()
        self.catalog = catalog or CauseCatalog()
        self.builder = builder or SeriesBuilder(config=self.config, catalog=self.catalog)

    def run(self, state: FilterState) -> DashboardRunReport:
        logger.debug("Filter state changed: %s", state.to_mapping())

        filtered = filter_records(self.records, state)
        logger.debug("Filtered %d of %d records", len(filtered), len(self.records))

        unknown: tuple[str, ...] = ()
        if state.metric_type != MetricType.TOTAL:
            unknown = self.catalog.unknown_fields(state.selected_causes)
            if unknown:
                logger.warning("Unknown cause fields selected: %s", ", ".join(unknown))

        series = self.builder.build(filtered, state)
        logger.debug("Series before limit: %d", len(series))

        if state.scale_type == ScaleType.PERCENTAGE:
            if state.metric_type == MetricType.TOTAL:
                logger.debug("Percentage scale on total mortality renders every week at 100 percent")
            series = to_percentages(series)

        limited = limit_series(series, self.config.max_lines)
        logger.debug(
            "Series after limit: %d (exceeded=%s)", len(limited.series), limited.exceeded
        )

        return DashboardRunReport(
            scale_type=state.scale_type,
            filtered_records=len(filtered),
            built_series=len(series),
            exceeded=limited.exceeded,
            series=limited.series,
            unknown_causes=unknown,
        )
