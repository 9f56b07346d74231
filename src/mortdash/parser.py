"""Raw row parsing into typed mortality records."""

from __future__ import annotations

import re
from typing import Iterable

from mortdash.adapters.common import TabularAdapterMixin
from mortdash.causes import NUMERIC_FIELDS
from mortdash.models import RawRecord, TypedRecord


TIMEPOINT_RE = re.compile(r"Semana (\d+) - (\w+) (\d{4})")


class RecordParser(TabularAdapterMixin):
    """Convert raw summary rows into ``TypedRecord`` instances.

    Parsing never raises. A timepoint that does not look like
    ``"Semana 3 - Marzo 2024"`` leaves ``week``, ``year`` and ``month`` unset,
    and unreadable numeric cells become ``0.0``.
    """

    def __init__(
        self,
        *,
        numeric_fields: tuple[str, ...] = NUMERIC_FIELDS,
        species_column: str = "especie",
        region_column: str = "region",
        timepoint_column: str = "timepoint",
    ) -> None:
        self.numeric_fields = numeric_fields
        self.species_column = species_column
        self.region_column = region_column
        self.timepoint_column = timepoint_column

    def parse(self, row: RawRecord) -> TypedRecord:
        timepoint = self._to_string(row.get(self.timepoint_column))
        week, month, year = self.parse_timepoint(timepoint)

        return TypedRecord(
            species=self._to_string(row.get(self.species_column)),
            region=self._to_string(row.get(self.region_column)),
            timepoint=timepoint,
            week=week,
            year=year,
            month=month,
            metrics={name: self._to_float(row.get(name)) for name in self.numeric_fields},
        )

    def parse_many(self, rows: Iterable[RawRecord]) -> list[TypedRecord]:
        return [self.parse(row) for row in rows]

    @staticmethod
    def parse_timepoint(timepoint: str | None) -> tuple[int | None, str | None, int | None]:
        """Return ``(week, month, year)`` or three ``None`` values."""

        match = TIMEPOINT_RE.search(timepoint or "")
        if match is None:
            return None, None, None

        return int(match.group(1)), match.group(2), int(match.group(3))
