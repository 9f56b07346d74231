"""Data core of the salmon mortality dashboard.

This package turns the weekly mortality summary CSV into filtered, colored
and capped chart series for a rendering surface.
"""

from .causes import (
    NUMERIC_FIELDS,
    PRIMARY_CAUSES,
    SECONDARY_DISEASES,
    CauseCatalog,
    CauseField,
)
from .config import (
    DEFAULT_PALETTE,
    TOTAL_METRIC_FIELD,
    DashboardConfig,
    LineStyle,
    MetricType,
    ScaleType,
)
from .dashboard import MortalityDashboard
from .filters import filter_records
from .limiter import LimitResult, limit_series
from .loader import DataLoader
from .models import FilterState, RawRecord, Series, SeriesPoint, TypedRecord
from .parser import RecordParser
from .pipeline import DashboardPipeline, DashboardRunReport
from .profiles import DashboardProfile, DashboardProfileLoader
from .scale import to_percentages
from .series import SeriesBuilder, color_for_index
from .stats import SeriesStats, calculate_stats, month_labels, week_labels
from .visibility import VisibilityRegistry

__version__ = "0.1.0"

__all__ = [
    "CauseCatalog",
    "CauseField",
    "DEFAULT_PALETTE",
    "DashboardConfig",
    "DashboardPipeline",
    "DashboardProfile",
    "DashboardProfileLoader",
    "DashboardRunReport",
    "DataLoader",
    "FilterState",
    "LimitResult",
    "LineStyle",
    "MetricType",
    "MortalityDashboard",
    "NUMERIC_FIELDS",
    "PRIMARY_CAUSES",
    "RawRecord",
    "RecordParser",
    "SECONDARY_DISEASES",
    "ScaleType",
    "Series",
    "SeriesBuilder",
    "SeriesPoint",
    "SeriesStats",
    "TOTAL_METRIC_FIELD",
    "TypedRecord",
    "VisibilityRegistry",
    "calculate_stats",
    "color_for_index",
    "filter_records",
    "limit_series",
    "month_labels",
    "to_percentages",
    "week_labels",
]
