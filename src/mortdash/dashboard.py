"""Session orchestration: one record set, many filter changes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mortdash.causes import CauseCatalog
from mortdash.config import DashboardConfig
from mortdash.models import FilterState, Series, TypedRecord
from mortdash.pipeline import DashboardPipeline, DashboardRunReport
from mortdash.publishers.base import Publisher
from mortdash.visibility import VisibilityRegistry

logger = logging.getLogger(__name__)


def results_label(count: int) -> str:
    return f"{count} Resultado{'' if count == 1 else 's'}"


class MortalityDashboard:
    """Recompute series on each filter change and keep the user's hidden lines."""

    def __init__(
        self,
        records: Sequence[TypedRecord],
        *,
        config: DashboardConfig | None = None,
        catalog: CauseCatalog | None = None,
        publishers: list[Publisher] | None = None,
    ) -> None:
        self.config = config or DashboardConfig()
        self.pipeline = DashboardPipeline(records, config=self.config, catalog=catalog)
        self.visibility = VisibilityRegistry()
        self.publishers = publishers or []
        self.state: FilterState | None = None
        self.report: DashboardRunReport | None = None

    def handle_filter_change(self, state: FilterState) -> DashboardRunReport:
        # The UI keeps mutating its own state object; work on a snapshot.
        self.state = state.copy()
        report = self.pipeline.run(self.state)
        report.series = self.visibility.merge(report.series)
        self.report = report

        self._publish()
        return report

    def toggle_series_visibility(self, series_id: str) -> bool | None:
        """Flip one series on or off; returns the new state or ``None`` if unknown."""

        if self.report is None:
            return None

        visible = self.visibility.toggle(series_id)
        if visible is None:
            logger.debug("Ignoring visibility toggle for unknown series %s", series_id)
            return None

        self.report.series = self.visibility.apply(self.report.series)
        logger.debug("Series %s visible=%s", series_id, visible)
        self._publish()
        return visible

    def current_series(self) -> list[Series]:
        return list(self.report.series) if self.report else []

    def visible_series(self) -> list[Series]:
        return VisibilityRegistry.visible_only(self.current_series())

    def results_label(self) -> str:
        return results_label(len(self.current_series()))

    def _publish(self) -> None:
        if self.report is None:
            return
        for publisher in self.publishers:
            publisher.publish(self.report)
