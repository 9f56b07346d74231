"""Configuration contracts for the mortality dashboard core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MetricType(str, Enum):
    """Which mortality view the dashboard renders."""

    TOTAL = "total"
    PRIMARY = "primary"
    SECONDARY = "secondary"


class ScaleType(str, Enum):
    """Value scale used by the rendering surface."""

    ABSOLUTE = "absolute"
    PERCENTAGE = "percentage"


class LineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"


TOTAL_METRIC_FIELD = "mort_total_real"

# d3 category10 subset used by the original chart legend.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
)

DEFAULT_MAX_LINES = 6
DEFAULT_CURRENT_YEAR = 2024


@dataclass(frozen=True)
class DashboardConfig:
    """Runtime knobs for one dashboard session.

    ``max_lines`` caps the rendered series; ``current_year`` is drawn with a
    solid line and every other year dashed.
    """

    max_lines: int = DEFAULT_MAX_LINES
    current_year: int = DEFAULT_CURRENT_YEAR
    palette: tuple[str, ...] = DEFAULT_PALETTE
    debug: bool = False

    def __post_init__(self) -> None:
        if self.max_lines < 0:
            raise ValueError(f"max_lines must be >= 0, got {self.max_lines}")
        if not self.palette:
            raise ValueError("palette cannot be empty")

    def line_style_for(self, year: int | None) -> LineStyle:
        """Return the line style for a series year."""

        return LineStyle.SOLID if year == self.current_year else LineStyle.DASHED
