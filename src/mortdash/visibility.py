"""Per-series visibility carried across recomputed series collections."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from mortdash.models import Series


class VisibilityRegistry:
    """Remember which series ids the user hid.

    Series are rebuilt on every filter change, so visibility is keyed by
    series id and merged into each fresh collection.
    """

    def __init__(self) -> None:
        self._visible: dict[str, bool] = {}

    def merge(self, series: Iterable[Series]) -> list[Series]:
        """Apply stored visibility (default visible) and forget ids not present."""

        merged = [replace(item, visible=self._visible.get(item.id, True)) for item in series]
        self._visible = {item.id: item.visible for item in merged}
        return merged

    def toggle(self, series_id: str) -> bool | None:
        """Flip a known series and return its new state, ``None`` if unknown."""

        if series_id not in self._visible:
            return None
        self._visible[series_id] = not self._visible[series_id]
        return self._visible[series_id]

    def is_visible(self, series_id: str) -> bool:
        return self._visible.get(series_id, True)

    def apply(self, series: Iterable[Series]) -> list[Series]:
        """Return ``series`` with current visibility, without changing the registry."""

        return [replace(item, visible=self.is_visible(item.id)) for item in series]

    @staticmethod
    def visible_only(series: Iterable[Series]) -> list[Series]:
        return [item for item in series if item.visible]
