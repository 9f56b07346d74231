"""Cause-of-mortality reference catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from mortdash.config import MetricType


@dataclass(frozen=True)
class CauseField:
    """A numeric cause column and its display label."""

    field: str
    label: str


PRIMARY_CAUSES: tuple[CauseField, ...] = (
    CauseField("mort_prim_depredadores", "Depredadores"),
    CauseField("mort_prim_embrionaria", "Embrionaria"),
    CauseField("mort_prim_eliminacion", "Eliminación"),
    CauseField("mort_prim_ambiental", "Ambiental"),
    CauseField("mort_prim_sin_causa_aparente", "Sin Causa Aparente"),
    CauseField("mort_prim_secundaria", "Secundaria (Enfermedad)"),
    CauseField("mort_prim_otras", "Otras Causas"),
    CauseField("mort_prim_desadaptado", "Desadaptado"),
    CauseField("mort_prim_deforme", "Deforme"),
    CauseField("mort_prim_dano_mecanico", "Daño Mecánico"),
)

SECONDARY_DISEASES: tuple[CauseField, ...] = (
    CauseField("mort_sec_srs", "SRS (Piscirickettsiosis)"),
    CauseField("mort_sec_isa", "ISA (Anemia Infecciosa del Salmón)"),
    CauseField("mort_sec_bkd", "BKD (Enfermedad Bacteriana del Riñón)"),
    CauseField("mort_sec_ipn", "IPN (Necrosis Pancreática Infecciosa)"),
    CauseField("mort_sec_tenacibaculosis", "Tenacibaculosis"),
    CauseField("mort_sec_vibrio", "Vibriosis"),
    CauseField("mort_sec_yersiniosis", "Yersiniosis"),
    CauseField("mort_sec_hsmi", "HSMI (Miopatía Cardíaca y Esquelética)"),
    CauseField("mort_sec_francisellosis", "Francisellosis"),
    CauseField("mort_sec_flavobacteriosis", "Flavobacteriosis"),
    CauseField("mort_sec_furunculosis_atipica", "Furunculosis Atípica"),
    CauseField("mort_sec_estreptococosis", "Estreptococosis"),
    CauseField("mort_sec_amebiasis", "Amebiasis"),
    CauseField("mort_sec_sindrome_icterico", "Síndrome Ictérico"),
    CauseField("mort_sec_micosis", "Micosis"),
    CauseField("mort_sec_sit", "SIT (Síndrome de la Trucha Arcoíris)"),
    CauseField("mort_sec_ich", "Síndrome Ich"),
    CauseField("mort_sec_shs", "SHS (Síndrome Hemorrágico del Salmón)"),
    CauseField("mort_sec_nefrocalcinosis", "Nefrocalcinosis"),
    CauseField("mort_sec_exofialosis", "Exofialosis"),
)

# Every numeric column of the summary CSV, in file order.
NUMERIC_FIELDS: tuple[str, ...] = (
    "mort_total",
    "mort_total_real",
    *(cause.field for cause in PRIMARY_CAUSES),
    *(cause.field for cause in SECONDARY_DISEASES),
    "mort_sec_real",
    "n_observaciones",
)


@dataclass
class CauseCatalog:
    """Resolve cause field identifiers into labels and categories.

    Lookups never fail: an unknown field is its own label, which keeps the
    series builder usable with columns added to the CSV after this catalog.
    """

    primary: tuple[CauseField, ...] = PRIMARY_CAUSES
    secondary: tuple[CauseField, ...] = SECONDARY_DISEASES
    _labels: dict[str, str] = field(init=False, repr=False)
    _categories: dict[str, MetricType] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._labels = {}
        self._categories = {}
        for cause in self.primary:
            self._labels[cause.field] = cause.label
            self._categories[cause.field] = MetricType.PRIMARY
        for cause in self.secondary:
            self._labels[cause.field] = cause.label
            self._categories[cause.field] = MetricType.SECONDARY

    def label_for(self, field_name: str) -> str:
        return self._labels.get(field_name, field_name)

    def is_known(self, field_name: str) -> bool:
        return field_name in self._labels

    def category_of(self, field_name: str) -> MetricType | None:
        """Return ``PRIMARY``/``SECONDARY`` for a known field, else ``None``."""

        return self._categories.get(field_name)

    def fields_for(self, metric_type: MetricType | str) -> tuple[CauseField, ...]:
        """Return the selectable causes for a metric view (empty for totals)."""

        metric_type = MetricType(metric_type)
        if metric_type is MetricType.PRIMARY:
            return self.primary
        if metric_type is MetricType.SECONDARY:
            return self.secondary
        return ()

    def unknown_fields(self, fields: Iterable[str]) -> tuple[str, ...]:
        """Return the identifiers in ``fields`` that the catalog does not know."""

        return tuple(name for name in fields if not self.is_known(name))
