"""Summary statistics and axis labels for mortality series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mortdash.models import Series


@dataclass(frozen=True)
class SeriesStats:
    series_id: str
    min: float | None
    max: float | None
    mean: float | None
    total: float


@dataclass(frozen=True)
class MonthLabel:
    """Approximate first week of a month on the 52-week axis."""

    week: int
    month: str
    short_month: str


MONTH_LABELS: tuple[MonthLabel, ...] = (
    MonthLabel(1, "Enero", "Ene"),
    MonthLabel(5, "Febrero", "Feb"),
    MonthLabel(9, "Marzo", "Mar"),
    MonthLabel(14, "Abril", "Abr"),
    MonthLabel(18, "Mayo", "May"),
    MonthLabel(22, "Junio", "Jun"),
    MonthLabel(27, "Julio", "Jul"),
    MonthLabel(31, "Agosto", "Ago"),
    MonthLabel(35, "Septiembre", "Sep"),
    MonthLabel(40, "Octubre", "Oct"),
    MonthLabel(44, "Noviembre", "Nov"),
    MonthLabel(48, "Diciembre", "Dic"),
)

WEEKS_PER_YEAR = 52


def week_labels() -> list[int]:
    return list(range(1, WEEKS_PER_YEAR + 1))


def month_labels() -> list[MonthLabel]:
    return list(MONTH_LABELS)


def calculate_stats(series: Iterable[Series]) -> list[SeriesStats]:
    """Compute min/max/mean/total of each series' point values.

    Series without points report ``None`` for min, max and mean.
    """

    stats: list[SeriesStats] = []
    for item in series:
        values = [point.value for point in item.values]
        total = float(sum(values))
        stats.append(
            SeriesStats(
                series_id=item.id,
                min=min(values) if values else None,
                max=max(values) if values else None,
                mean=total / len(values) if values else None,
                total=total,
            )
        )
    return stats
