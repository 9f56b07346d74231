"""Absolute to percentage rescaling of series values."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from mortdash.models import Series, SeriesPoint


def percentage_of(value: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return 100.0 * value / denominator


def _convert_point(point: SeriesPoint) -> SeriesPoint:
    return replace(
        point,
        value=percentage_of(point.value, point.denominator),
        original_value=point.value,
    )


def to_percentages(series: Iterable[Series]) -> list[Series]:
    """Express every point as a percentage of its record's real total mortality.

    ``original_value`` keeps the absolute figure. Points whose record has no
    positive total become ``0.0``. Converting already converted series is not
    meaningful; apply this once per freshly built collection.
    """

    return [
        replace(item, values=tuple(_convert_point(point) for point in item.values))
        for item in series
    ]
