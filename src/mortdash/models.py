"""In-memory data models shared by the dashboard pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from mortdash.config import TOTAL_METRIC_FIELD, LineStyle, MetricType, ScaleType

RawRecord = Mapping[str, Any]

# Year token used in series keys and labels for records without a parsable timepoint.
UNDATED_TOKEN = "null"


def year_token(year: int | None) -> str:
    return UNDATED_TOKEN if year is None else str(year)


@dataclass(frozen=True)
class TypedRecord:
    """One parsed row of the weekly mortality summary.

    ``week``, ``year`` and ``month`` are ``None`` when the timepoint could not
    be parsed; such records are kept and group under the ``null`` year token.
    """

    species: str
    region: str
    timepoint: str
    week: int | None
    year: int | None
    month: str | None
    metrics: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    @property
    def series_key(self) -> str:
        """Grouping identity of the aggregate-mode line this record belongs to."""

        return f"{self.species}_{self.region}_{year_token(self.year)}"

    @property
    def display_label(self) -> str:
        return f"{self.species} - {self.region} - {year_token(self.year)}"

    def metric(self, field_name: str) -> float:
        """Return a numeric field, ``0.0`` when the column is absent."""

        return self.metrics.get(field_name, 0.0)


@dataclass
class FilterState:
    """User selections forwarded by the UI layer on every interaction."""

    species: set[str] = field(default_factory=set)
    regions: set[str] = field(default_factory=set)
    years: set[int] = field(default_factory=set)
    metric_type: MetricType = MetricType.TOTAL
    selected_causes: list[str] = field(default_factory=list)
    scale_type: ScaleType = ScaleType.ABSOLUTE

    def __post_init__(self) -> None:
        self.species = set(self.species)
        self.regions = set(self.regions)
        self.years = set(self.years)
        self.metric_type = MetricType(self.metric_type)
        self.selected_causes = list(self.selected_causes)
        self.scale_type = ScaleType(self.scale_type)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "FilterState":
        """Build a state from JSON-like data (lists for the facet sets).

        Raises ``ValueError`` for unknown metric or scale values.
        """

        return cls(
            species={str(item) for item in payload.get("species", ())},
            regions={str(item) for item in payload.get("regions", ())},
            years={int(item) for item in payload.get("years", ())},
            metric_type=MetricType(payload.get("metric_type", MetricType.TOTAL.value)),
            selected_causes=[str(item) for item in payload.get("selected_causes", ())],
            scale_type=ScaleType(payload.get("scale_type", ScaleType.ABSOLUTE.value)),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {
            "species": sorted(self.species),
            "regions": sorted(self.regions),
            "years": sorted(self.years),
            "metric_type": self.metric_type.value,
            "selected_causes": list(self.selected_causes),
            "scale_type": self.scale_type.value,
        }

    def copy(self) -> "FilterState":
        return FilterState(
            species=set(self.species),
            regions=set(self.regions),
            years=set(self.years),
            metric_type=self.metric_type,
            selected_causes=list(self.selected_causes),
            scale_type=self.scale_type,
        )


@dataclass(frozen=True)
class SeriesPoint:
    """One weekly observation on a series line."""

    week: int | None
    value: float
    month: str | None
    timepoint: str
    record: TypedRecord = field(repr=False, compare=False)
    original_value: float | None = None

    @property
    def denominator(self) -> float:
        """Total real mortality of the originating record."""

        return self.record.metric(TOTAL_METRIC_FIELD)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "week": self.week,
            "value": self.value,
            "month": self.month,
            "timepoint": self.timepoint,
        }
        if self.original_value is not None:
            payload["original_value"] = self.original_value
        return payload


@dataclass(frozen=True)
class Series:
    """A renderable chart line."""

    id: str
    label: str
    species: str
    region: str
    year: int | None
    color: str
    line_style: LineStyle
    values: tuple[SeriesPoint, ...] = ()
    cause: str | None = None
    visible: bool = True

    @property
    def total(self) -> float:
        return sum(point.value for point in self.values)

    def to_payload(self) -> dict[str, Any]:
        """Serialize into a plain dict for the rendering surface."""

        payload: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "species": self.species,
            "region": self.region,
            "year": self.year,
            "color": self.color,
            "line_style": self.line_style.value,
            "visible": self.visible,
            "values": [point.to_payload() for point in self.values],
        }
        if self.cause is not None:
            payload["cause"] = self.cause
        return payload
