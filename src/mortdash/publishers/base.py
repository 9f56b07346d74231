"""Publisher interface for dashboard outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mortdash.pipeline import DashboardRunReport


class Publisher(ABC):
    """Hands a pipeline result to a consumer such as a rendering surface."""

    @abstractmethod
    def publish(self, report: DashboardRunReport) -> None:
        """Publish one run report."""
