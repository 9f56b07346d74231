"""Load typed mortality records and list the available facet options."""

from __future__ import annotations

import logging
from pathlib import Path

from mortdash.adapters.base import DataAdapter
from mortdash.adapters.summary_csv import SummaryCsvAdapter
from mortdash.causes import CauseCatalog, CauseField
from mortdash.models import TypedRecord
from mortdash.parser import RecordParser

logger = logging.getLogger(__name__)


class DataLoader:
    """Read one source through an adapter and keep the parsed records."""

    def __init__(
        self,
        adapter: DataAdapter,
        *,
        parser: RecordParser | None = None,
        catalog: CauseCatalog | None = None,
    ) -> None:
        self.adapter = adapter
        self.parser = parser or RecordParser()
        self.catalog = catalog or CauseCatalog()
        self.records: list[TypedRecord] | None = None

    @classmethod
    def from_csv(cls, csv_path: str | Path, **adapter_params) -> "DataLoader":
        return cls(SummaryCsvAdapter(csv_path=csv_path, **adapter_params))

    def load(self) -> list[TypedRecord]:
        self.records = self.parser.parse_many(self.adapter.read())

        undated = sum(1 for record in self.records if record.year is None)
        if undated:
            logger.warning("%d of %d records have an unparsable timepoint", undated, len(self.records))
        logger.debug("Loaded %d records via %s", len(self.records), self.adapter.name)
        return self.records

    def _require_records(self) -> list[TypedRecord]:
        if self.records is None:
            raise RuntimeError("Data not loaded yet")
        return self.records

    def species(self) -> list[str]:
        return sorted({record.species for record in self._require_records()})

    def regions(self) -> list[str]:
        return sorted({record.region for record in self._require_records()})

    def years(self) -> list[int]:
        """Return the distinct years, leaving out undated records."""

        return sorted({record.year for record in self._require_records() if record.year is not None})

    def primary_causes(self) -> tuple[CauseField, ...]:
        return self.catalog.primary

    def secondary_diseases(self) -> tuple[CauseField, ...]:
        return self.catalog.secondary
