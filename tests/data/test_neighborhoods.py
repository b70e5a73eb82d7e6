"""Tests for the neighborhood dataset loader and repository."""

import json
from decimal import Decimal

import pytest

from fairprice.data.neighborhoods import (
    DatasetError,
    NeighborhoodRepository,
    load_neighborhoods,
    lookup_neighborhood,
    parse_record,
)


def _write(tmp_path, rows) -> str:
    path = tmp_path / "bairros.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return str(path)


class TestBundledDataset:
    def test_loads_all_rows(self, bundled_repo):
        assert len(bundled_repo) == 14

    def test_exact_lookup(self, bundled_repo):
        record = bundled_repo.get("Meireles")
        assert record is not None
        assert record.avg_price_m2 == Decimal("10350")
        assert record.classifieds_avg_price_m2 == Decimal("11200")
        assert record.region == "Regional 2"

    def test_lookup_trims_whitespace(self, bundled_repo):
        assert bundled_repo.get("  Meireles ") is not None

    def test_lookup_is_case_sensitive(self, bundled_repo):
        assert bundled_repo.get("meireles") is None

    def test_not_found_is_none(self, bundled_repo):
        assert bundled_repo.get("Nonexistent") is None
        assert bundled_repo.get("") is None
        assert bundled_repo.get(None) is None
        assert "Nonexistent" not in bundled_repo

    def test_default_lookup(self):
        assert lookup_neighborhood("Nonexistent") is None
        assert lookup_neighborhood("Aldeota").name == "Aldeota"

    def test_amenities_parsed(self, bundled_repo):
        amenities = bundled_repo.get("Aldeota").amenities
        assert amenities.bus_stops == 74
        assert amenities.bike_lane_km == Decimal("12.4")
        assert amenities.public_wifi is True
        assert bundled_repo.get("Cocó").amenities.public_wifi is False

    def test_empty_text_fields_default_to_zero(self, bundled_repo):
        assert bundled_repo.get("Parangaba").min_price_m2 == Decimal("0")
        pirambu = bundled_repo.get("Pirambu")
        assert pirambu.classifieds_avg_price_m2 == Decimal("0")
        assert pirambu.latitude is None
        assert not pirambu.has_coordinates

    def test_coordinates(self, bundled_repo):
        record = bundled_repo.get("Centro")
        assert record.has_coordinates
        assert record.latitude == pytest.approx(-3.7275)


class TestSearch:
    def test_names_sorted(self, bundled_repo):
        names = bundled_repo.names()
        assert names[0] == "Aldeota"
        assert names == sorted(names, key=str.casefold)

    def test_case_insensitive_substring(self, bundled_repo):
        assert bundled_repo.search("ME") == ["Meireles", "Messejana"]

    def test_empty_term_returns_all(self, bundled_repo):
        assert bundled_repo.search("") == bundled_repo.names()
        assert bundled_repo.search(None) == bundled_repo.names()

    def test_no_match(self, bundled_repo):
        assert bundled_repo.search("zzz") == []


class TestLoader:
    def test_unparsable_values_default_to_zero(self):
        record = parse_record({
            "bairro": "Teste",
            "preco_medio_fipe_m2": "n/d",
            "preco_maximo_fipe_m2": "5000,5",
            "idh": None,
            "paradas_onibus": "12",
        })
        assert record.avg_price_m2 == Decimal("0")
        assert record.max_price_m2 == Decimal("5000.5")
        assert record.human_development_index == Decimal("0")
        assert record.amenities.bus_stops == 12
        assert record.latitude is None

    def test_duplicate_names_keep_first(self, tmp_path):
        path = _write(tmp_path, [
            {"bairro": "Centro", "preco_medio_fipe_m2": "3800"},
            {"bairro": "Centro", "preco_medio_fipe_m2": "9999"},
        ])
        repo = load_neighborhoods(path)
        assert len(repo) == 1
        assert repo.get("Centro").avg_price_m2 == Decimal("3800")

    def test_rows_without_name_skipped(self, tmp_path):
        path = _write(tmp_path, [{"bairro": ""}, {"bairro": "Benfica"}, "junk"])
        assert load_neighborhoods(path).names() == ["Benfica"]

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bairros.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DatasetError, match="Malformed"):
            load_neighborhoods(path)

    def test_non_utf8_dataset(self, tmp_path):
        path = tmp_path / "bairros.json"
        path.write_bytes(b"[{\"bairro\": \"F\xe1tima\"}]")
        with pytest.raises(DatasetError, match="Malformed"):
            load_neighborhoods(path)

    def test_non_list_dataset(self, tmp_path):
        path = _write(tmp_path, {"bairro": "Centro"})
        with pytest.raises(DatasetError, match="JSON array"):
            load_neighborhoods(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_neighborhoods(tmp_path / "missing.json")

    def test_repository_from_records(self, band_record):
        repo = NeighborhoodRepository([band_record])
        assert repo.get(band_record.name) is band_record
