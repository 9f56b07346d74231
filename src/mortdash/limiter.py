"""Deterministic cap on the number of rendered series."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from mortdash.models import Series


@dataclass
class LimitResult:
    """Limited series plus whether the cap removed anything."""

    series: list[Series] = field(default_factory=list)
    exceeded: bool = False


def limit_series(series: Sequence[Series], max_lines: int) -> LimitResult:
    """Keep at most ``max_lines`` series, preferring the largest totals.

    Series with equal totals keep their original relative order.
    """

    if max_lines < 0:
        raise ValueError(f"max_lines must be >= 0, got {max_lines}")

    if len(series) <= max_lines:
        return LimitResult(series=list(series), exceeded=False)

    ranked = sorted(series, key=lambda item: item.total, reverse=True)
    return LimitResult(series=ranked[:max_lines], exceeded=True)
