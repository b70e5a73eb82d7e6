"""Static neighborhood reference dataset.

The bundled bairros.json stores every numeric field as text (FIPE/OLX prices
per m², indicator indices, amenity counts). Values are parsed defensively:
anything empty or unparsable becomes 0 and is logged at debug level.
"""

import functools
import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from fairprice.config import settings
from fairprice.models.neighborhood import Amenities, NeighborhoodRecord

logger = logging.getLogger(__name__)

BUNDLED_DATASET = Path(__file__).resolve().parent / "bairros.json"

_TRUE_VALUES = {"sim", "s", "true", "1", "yes"}


class DatasetError(ValueError):
    """The dataset file exists but can't be read as a list of records."""


def _decimal(row: dict, key: str) -> Decimal:
    raw = row.get(key)
    if raw is None or str(raw).strip() == "":
        logger.debug("%s: missing %s, defaulting to 0", row.get("bairro"), key)
        return Decimal("0")
    try:
        value = Decimal(str(raw).strip().replace(",", "."))
    except InvalidOperation:
        logger.debug("%s: unparsable %s=%r, defaulting to 0", row.get("bairro"), key, raw)
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value


def _int(row: dict, key: str) -> int:
    return int(_decimal(row, key))


def _bool(row: dict, key: str) -> bool:
    return str(row.get(key, "")).strip().lower() in _TRUE_VALUES


def _coordinate(row: dict, key: str) -> float | None:
    value = _decimal(row, key)
    return float(value) if value != 0 else None


def parse_record(row: dict) -> NeighborhoodRecord:
    """Build a NeighborhoodRecord from one raw dataset row."""
    return NeighborhoodRecord(
        name=str(row.get("bairro", "")).strip(),
        min_price_m2=_decimal(row, "preco_minimo_fipe_m2"),
        avg_price_m2=_decimal(row, "preco_medio_fipe_m2"),
        max_price_m2=_decimal(row, "preco_maximo_fipe_m2"),
        classifieds_avg_price_m2=_decimal(row, "preco_medio_olx_m2"),
        wellbeing_index=_decimal(row, "indice_bem_estar"),
        human_development_index=_decimal(row, "idh"),
        environmental_index=_decimal(row, "indice_ambiental"),
        housing_index=_decimal(row, "indice_habitacional"),
        region=str(row.get("regional", "")).strip(),
        avg_household_income=_decimal(row, "renda_media"),
        description=str(row.get("descricao", "")).strip(),
        amenities=Amenities(
            bus_stops=_int(row, "paradas_onibus"),
            bike_stations=_int(row, "estacoes_bicicletar"),
            bike_lane_km=_decimal(row, "km_ciclofaixa"),
            schools=_int(row, "total_escolas"),
            health_units=_int(row, "unidades_saude"),
            squares=_int(row, "pracas"),
            public_wifi=_bool(row, "wifi_publico"),
        ),
        latitude=_coordinate(row, "latitude"),
        longitude=_coordinate(row, "longitude"),
    )


class NeighborhoodRepository:
    """Read-only index of neighborhood records by exact name."""

    def __init__(self, records: list[NeighborhoodRecord]):
        self._records: dict[str, NeighborhoodRecord] = {}
        for record in records:
            if not record.name:
                logger.warning("Skipping dataset row without a neighborhood name")
                continue
            if record.name in self._records:
                logger.warning("Duplicate neighborhood %r in dataset, keeping first", record.name)
                continue
            self._records[record.name] = record

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def get(self, name: str | None) -> NeighborhoodRecord | None:
        """Exact-match lookup after trimming whitespace. None means not found."""
        if not name:
            return None
        return self._records.get(name.strip())

    def names(self) -> list[str]:
        return sorted(self._records, key=str.casefold)

    def search(self, term: str | None) -> list[str]:
        """Case-insensitive substring filter used by the neighborhood selector."""
        if not term or not term.strip():
            return self.names()
        needle = term.strip().casefold()
        return [name for name in self.names() if needle in name.casefold()]


def load_neighborhoods(path: str | Path | None = None) -> NeighborhoodRepository:
    """Load and index the dataset. Defaults to the bundled bairros.json."""
    path = Path(path) if path else BUNDLED_DATASET
    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"Malformed neighborhood dataset {path}: {e}") from e

    if not isinstance(rows, list):
        raise DatasetError(f"Neighborhood dataset {path} must be a JSON array")

    records = [parse_record(row) for row in rows if isinstance(row, dict)]
    repository = NeighborhoodRepository(records)
    logger.info("Loaded %d neighborhoods from %s", len(repository), path.name)
    return repository


@functools.lru_cache(maxsize=1)
def get_repository() -> NeighborhoodRepository:
    return load_neighborhoods(settings.dataset_path or None)


def lookup_neighborhood(name: str | None) -> NeighborhoodRecord | None:
    return get_repository().get(name)
