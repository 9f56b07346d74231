"""Base interface for mortality data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from mortdash.models import RawRecord


class DataAdapter(ABC):
    """Adapter that yields raw string-keyed rows from a tabular source."""

    name: str

    @abstractmethod
    def read(self) -> Iterable[RawRecord]:
        """Yield raw rows from the adapter source."""
