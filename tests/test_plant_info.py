"""
tests/test_plant_info.py — Tests for the plant reference index.

Tests cover:
- Full 14-column parsing
- Skipping short and blank rows
- Legacy two-column datasets
- Loading from CSV, including a missing file
- Info cards and the "no information" fallback
"""

import os
import tempfile

import pytest

from models import Plant, derive_info_id
from plant_info import (
    PlantInfoIndex,
    build_info_card,
    get_plant_info_path,
    NO_INFO_MESSAGE,
    SCHEMA_LEGACY,
)


HEADER = ("id,name,scientificName,originArea,family,light,temperature,water,lifecycleKind,"
          "seedToSeedlingDays,seedlingToGrowthDays,growthToFlowerDays,"
          "flowerToDormantOrDeathDays,dormantToGrowthDays")
OLIVE = "olive,Olive,Olea europaea,Eastern Mediterranean,Oleaceae,Full sun,-5-40 C,Low,Perennial,30,120,1095,180,60"
WHEAT = "wheat,Wheat,Triticum aestivum,Fertile Crescent,Poaceae,Full sun,3-32 C,Moderate,Annual,7,30,60,40,"


@pytest.fixture
def index():
    return PlantInfoIndex.load([HEADER, OLIVE, WHEAT])


# ========================================
# Parsing Tests
# ========================================

class TestLoad:
    """Tests for PlantInfoIndex.load."""

    def test_full_row(self, index):
        record = index.lookup("olive")
        assert record is not None
        assert record.name == "Olive"
        assert record.scientific_name == "Olea europaea"
        assert record.family == "Oleaceae"
        assert record.lifecycle_kind == "Perennial"
        assert record.dormant_to_growth_days == "60"
        assert record.is_perennial

    def test_numeric_fields_stay_strings(self, index):
        record = index.lookup("wheat")
        assert record.seed_to_seedling_days == "7"
        assert record.dormant_to_growth_days == ""
        assert not record.is_perennial

    def test_header_is_discarded(self, index):
        assert "id" not in index
        assert len(index) == 2

    def test_short_row_is_skipped(self):
        short = ",".join(OLIVE.split(",")[:13])
        index = PlantInfoIndex.load([HEADER, short, WHEAT])
        assert len(index) == 1
        assert index.lookup("olive") is None
        assert index.lookup("wheat") is not None

    def test_short_row_is_logged(self, caplog):
        short = ",".join(OLIVE.split(",")[:13])
        PlantInfoIndex.load([HEADER, short])
        assert "Skipping plant info row 2" in caplog.text

    def test_blank_rows_are_skipped(self):
        index = PlantInfoIndex.load([HEADER, "", "   ", OLIVE])
        assert index.ids() == ["olive"]

    def test_split_rows(self):
        index = PlantInfoIndex.load([HEADER.split(","), OLIVE.split(",")])
        assert index.lookup("olive").origin_area == "Eastern Mediterranean"

    def test_extra_columns_ignored(self):
        index = PlantInfoIndex.load([HEADER, OLIVE + ",extra,more"])
        assert index.lookup("olive").dormant_to_growth_days == "60"

    def test_duplicate_id_last_wins(self):
        renamed = OLIVE.replace("Olive,", "Wild Olive,", 1)
        index = PlantInfoIndex.load([HEADER, OLIVE, renamed])
        assert len(index) == 1
        assert index.lookup("olive").name == "Wild Olive"

    def test_header_only(self):
        assert len(PlantInfoIndex.load([HEADER])) == 0

    def test_empty_table(self):
        assert len(PlantInfoIndex.load([])) == 0

    def test_unknown_schema(self):
        with pytest.raises(ValueError):
            PlantInfoIndex.load([HEADER], schema="xml")


class TestLegacySchema:
    """Tests for the two-column id,description form."""

    def test_description_keeps_commas(self):
        index = PlantInfoIndex.load(
            ["id,description", "Fig,Sweet fruit, grows in dry soil"],
            schema=SCHEMA_LEGACY,
        )
        assert index.description("Fig") == "Sweet fruit, grows in dry soil"

    def test_row_without_comma_skipped(self):
        index = PlantInfoIndex.load(["id,description", "Fig"], schema=SCHEMA_LEGACY)
        assert len(index) == 0

    def test_missing_description_falls_back(self):
        index = PlantInfoIndex.load(["id,description"], schema=SCHEMA_LEGACY)
        assert index.description("Fig") == NO_INFO_MESSAGE


# ========================================
# Lookup Tests
# ========================================

class TestLookup:
    """Tests for lookup by id and by name."""

    def test_unknown_id(self, index):
        assert index.lookup("unknownid") is None

    def test_lookup_by_name(self, index):
        assert index.lookup_by_name("Olive").id == "olive"

    def test_derived_id_strips_spaces(self):
        assert derive_info_id("Date Palm") == "datepalm"
        assert Plant("Date Palm").info_id == "datepalm"

    def test_same_species_shares_record(self, index):
        a, b = Plant("Olive"), Plant("Olive")
        assert a != b
        assert index.lookup(a.info_id) is index.lookup(b.info_id)

    def test_unloaded_index_finds_nothing(self):
        assert PlantInfoIndex().lookup("olive") is None


# ========================================
# CSV Loading Tests
# ========================================

class TestFromCsv:
    """Tests for loading the dataset file."""

    def test_load_file(self):
        fd, path = tempfile.mkstemp(suffix='.csv')
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write("\n".join([HEADER, OLIVE, WHEAT]) + "\n")
        try:
            index = PlantInfoIndex.from_csv(path)
            assert sorted(index.ids()) == ["olive", "wheat"]
        finally:
            os.unlink(path)

    def test_missing_file_gives_empty_index(self, tmp_path):
        index = PlantInfoIndex.from_csv(str(tmp_path / "missing.csv"))
        assert len(index) == 0

    def test_path_from_environment(self, monkeypatch, tmp_path):
        path = str(tmp_path / "custom.csv")
        monkeypatch.setenv('PLANT_INFO_PATH', path)
        assert get_plant_info_path() == path

    def test_shipped_dataset(self, monkeypatch):
        monkeypatch.delenv('PLANT_INFO_PATH', raising=False)
        index = PlantInfoIndex.from_csv()
        for name in ["Wheat", "Barley", "Grape", "Fig", "Pomegranate", "Olive", "Date"]:
            assert index.lookup_by_name(name) is not None, name


# ========================================
# Info Card Tests
# ========================================

class TestInfoCard:
    """Tests for build_info_card."""

    def test_fallback_card(self):
        card = build_info_card("Mystery", "mystery", None)
        assert card == {
            'found': False,
            'name': "Mystery",
            'id_line': "ID: mystery",
            'message': "No information available.",
        }

    def test_perennial_card_has_dormancy_stage(self, index):
        card = build_info_card("Olive", "olive", index.lookup("olive"))
        labels = [s['label'] for s in card['stages']]
        assert card['found']
        assert card['family'] == "Oleaceae"
        assert "Dormant to growth" in labels
        assert "Flower to dormant" in labels

    def test_annual_card_has_no_dormancy_stage(self, index):
        card = build_info_card("Wheat", "wheat", index.lookup("wheat"))
        labels = [s['label'] for s in card['stages']]
        assert "Dormant to growth" not in labels
        assert "Flower to death" in labels
