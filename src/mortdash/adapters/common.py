"""Shared value conversions for tabular mortality sources."""

from __future__ import annotations

import math
import re
from typing import Any

import pandas as pd


# Leading decimal number, the part of a cell a lenient float parse keeps.
_NUMERIC_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class TabularAdapterMixin:
    """Common conversions for CSV-based mortality sources."""

    @staticmethod
    def _to_string(value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str) and pd.isna(value):
            return ""

        return str(value).strip()

    @staticmethod
    def _to_float(value: Any) -> float:
        """Coerce a cell into a float, degrading to ``0.0``.

        Empty, missing and non-numeric cells become ``0.0``; a numeric prefix
        such as ``"12.5 kg"`` is honoured.
        """

        if value is None:
            return 0.0
        if isinstance(value, bool):
            return float(value)
        if isinstance(value, (int, float)):
            return float(value) if math.isfinite(value) else 0.0

        match = _NUMERIC_PREFIX_RE.match(str(value))
        if match is None:
            return 0.0

        parsed = float(match.group(1))
        return parsed if math.isfinite(parsed) else 0.0
