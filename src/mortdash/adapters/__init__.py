"""Input adapters for mortality data."""

from .base import DataAdapter
from .common import TabularAdapterMixin
from .summary_csv import SummaryCsvAdapter

__all__ = [
    "DataAdapter",
    "SummaryCsvAdapter",
    "TabularAdapterMixin",
]
