"""JSON payload publisher for the chart rendering surface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mortdash.pipeline import DashboardRunReport
from mortdash.publishers.base import Publisher


class SeriesJsonPublisher(Publisher):
    """Write the series collection and scale mode a chart needs to draw.

    Hidden series are left out unless ``include_hidden`` is set, matching
    what the chart shows after the user toggles lines off.
    """

    def __init__(
        self,
        *,
        output_path: str | Path,
        include_hidden: bool = False,
        indent: int | None = 2,
    ) -> None:
        self.output_path = Path(output_path)
        self.include_hidden = include_hidden
        self.indent = indent

    def build_payload(self, report: DashboardRunReport) -> dict[str, Any]:
        series = report.series
        if not self.include_hidden:
            series = [item for item in series if item.visible]

        return {
            "scale_type": report.scale_type.value,
            "exceeded": report.exceeded,
            "series_count": report.series_count,
            "series": [item.to_payload() for item in series],
        }

    def publish(self, report: DashboardRunReport) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with self.output_path.open("w", encoding="utf-8") as stream:
            json.dump(self.build_payload(report), stream, indent=self.indent, ensure_ascii=False)
