"""JSON dashboard profiles: line cap, current year and default filters."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mortdash.config import DEFAULT_CURRENT_YEAR, DEFAULT_MAX_LINES, DEFAULT_PALETTE, DashboardConfig
from mortdash.models import FilterState


@dataclass(frozen=True)
class DashboardProfile:
    """Serializable dashboard settings."""

    name: str
    description: str
    config: DashboardConfig
    default_filters: dict[str, Any] = field(default_factory=dict)

    def default_state(self) -> FilterState:
        """Return a fresh filter state built from the profile defaults."""

        return FilterState.from_mapping(self.default_filters)


class DashboardProfileLoader:
    """Load profile JSON from ``config/profiles`` or a custom path."""

    def __init__(self, profiles_dir: str | Path | None = None) -> None:
        if profiles_dir is None:
            profiles_dir = Path(__file__).resolve().parents[2] / "config" / "profiles"
        self.profiles_dir = Path(profiles_dir)

    def _candidates(self) -> dict[str, Path]:
        """Map profile names to files, skipping JSON that is not a dashboard profile."""

        found: dict[str, Path] = {}
        for path in sorted(self.profiles_dir.glob("*.json")):
            try:
                payload = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                continue
            if isinstance(payload, dict) and "name" in payload:
                found.setdefault(path.stem, path)
                found.setdefault(str(payload["name"]), path)
        return found

    def list_profiles(self) -> list[str]:
        """Return the file names of valid profiles in the profile directory."""

        return sorted({path.stem for path in self._candidates().values()})

    def load(self, name_or_path: str | Path) -> DashboardProfile:
        """Load a profile by explicit path, file name or declared ``name``."""

        requested = Path(name_or_path)
        path = requested if requested.is_file() else self._candidates().get(str(name_or_path))
        if path is None:
            raise FileNotFoundError(
                f"Dashboard profile not found: {name_or_path}. "
                f"Available: {', '.join(self.list_profiles()) or 'none'}"
            )

        return self._parse(json.loads(path.read_text(encoding="utf-8")))

    def _parse(self, payload: dict[str, Any]) -> DashboardProfile:
        palette = tuple(str(color) for color in payload.get("palette", DEFAULT_PALETTE))
        config = DashboardConfig(
            max_lines=int(payload.get("max_lines", DEFAULT_MAX_LINES)),
            current_year=int(payload.get("current_year", DEFAULT_CURRENT_YEAR)),
            palette=palette,
            debug=bool(payload.get("debug", False)),
        )

        default_filters = dict(payload.get("default_filters", {}))
        # Fail at load time on bad metric/scale values rather than on first render.
        FilterState.from_mapping(default_filters)

        return DashboardProfile(
            name=str(payload["name"]),
            description=str(payload.get("description", "")),
            config=config,
            default_filters=default_filters,
        )
