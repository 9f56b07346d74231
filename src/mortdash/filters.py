"""Facet filtering over typed mortality records."""

from __future__ import annotations

from typing import Iterable

from mortdash.models import FilterState, TypedRecord


def matches(record: TypedRecord, state: FilterState) -> bool:
    """Return True if ``record`` passes every non-empty facet of ``state``.

    An empty facet set means "no restriction" for that facet.
    """

    if state.species and record.species not in state.species:
        return False
    if state.regions and record.region not in state.regions:
        return False
    if state.years and record.year not in state.years:
        return False
    return True


def filter_records(records: Iterable[TypedRecord], state: FilterState) -> list[TypedRecord]:
    """Keep the records matching ``state``, preserving their order."""

    return [record for record in records if matches(record, state)]
