"""Tests for src.data_pipeline.cleaning."""

import math

import pandas as pd
import pytest

from src.data_pipeline.cleaning import HeroDataCleaner
from src.hero_ranking.models import HeroAttributes


# ── Helpers ──────────────────────────────────────────────────────────

def _make_record(hero_id=1, **overrides):
    record = {
        "id": hero_id,
        "mainClass": "warrior",
        "subClass": "warrior",
        "rarity": 0,
        "rarityStr": "Common",
        "statBoost2": "STR",
    }
    record.update(overrides)
    return record


# ── Class identifiers ────────────────────────────────────────────────


class TestNormalizeClass:
    @pytest.mark.parametrize("raw,expected", [
        ("pirate", "pirate"),
        ("Pirate", "pirate"),
        ("darkknight", "darkKnight"),
        ("DREADKNIGHT", "dreadKnight"),
        ("  sage ", "sage"),
    ])
    def test_known_classes(self, raw, expected):
        assert HeroDataCleaner.normalize_class(raw) == expected

    def test_unknown_class_passes_through(self):
        assert HeroDataCleaner.normalize_class(" Necromancer ") == "Necromancer"

    @pytest.mark.parametrize("raw", [None, "", "   ", float("nan")])
    def test_missing(self, raw):
        assert HeroDataCleaner.normalize_class(raw) is None


# ── Stat codes ───────────────────────────────────────────────────────


class TestNormalizeStatCode:
    def test_upper_cases(self):
        assert HeroDataCleaner.normalize_stat_code(" wis ") == "WIS"

    def test_missing(self):
        assert HeroDataCleaner.normalize_stat_code(None) is None


# ── Hero ids ─────────────────────────────────────────────────────────


class TestNormalizeHeroId:
    @pytest.mark.parametrize("raw,expected", [
        (10000, 10000), ("10000", 10000), (" 42 ", 42), (65154.0, 65154),
    ])
    def test_numeric_ids(self, raw, expected):
        assert HeroDataCleaner.normalize_hero_id(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", 1.5, True, float("nan")])
    def test_invalid_ids(self, raw):
        assert HeroDataCleaner.normalize_hero_id(raw) is None


# ── Rarity ───────────────────────────────────────────────────────────


class TestNormalizeRarity:
    def test_numeric_rarity(self):
        assert HeroDataCleaner.normalize_rarity(2) == 2

    def test_float_and_string_rarity(self):
        assert HeroDataCleaner.normalize_rarity(3.0) == 3
        assert HeroDataCleaner.normalize_rarity("4") == 4

    def test_numeric_wins_over_name(self):
        assert HeroDataCleaner.normalize_rarity(1, "Mythic") == 1

    @pytest.mark.parametrize("name,expected", [
        ("Common", 0), ("uncommon", 1), ("RARE", 2), ("Legendary", 3), ("Mythic", 4),
    ])
    def test_falls_back_to_name(self, name, expected):
        assert HeroDataCleaner.normalize_rarity(None, name) == expected

    def test_nan_rarity_falls_back_to_name(self):
        assert HeroDataCleaner.normalize_rarity(float("nan"), "Rare") == 2

    def test_fractional_rarity_passes_through(self):
        assert HeroDataCleaner.normalize_rarity(2.5) == 2.5

    def test_out_of_range_passes_through(self):
        assert HeroDataCleaner.normalize_rarity(9) == 9

    def test_unresolvable(self):
        assert HeroDataCleaner.normalize_rarity(None, "Epic") is None
        assert HeroDataCleaner.normalize_rarity(None, None) is None


# ── DataFrame-level cleaning ─────────────────────────────────────────


class TestCleanRecords:
    def test_normalizes_columns(self, cleaner):
        df = pd.DataFrame([
            _make_record("71052", mainClass="Pirate", subClass="WARRIOR",
                        statBoost2="wis", rarity=None, rarityStr="Common"),
        ])
        out = cleaner.clean_records(df)
        row = out.iloc[0]
        assert row["id"] == 71052
        assert row["mainClass"] == "pirate"
        assert row["subClass"] == "warrior"
        assert row["statBoost2"] == "WIS"
        assert row["rarity"] == 0

    def test_does_not_modify_input(self, cleaner):
        df = pd.DataFrame([_make_record(1, mainClass="Pirate")])
        cleaner.clean_records(df)
        assert df.loc[0, "mainClass"] == "Pirate"

    def test_drops_records_without_id(self, cleaner):
        df = pd.DataFrame([_make_record(1), _make_record(None), _make_record("abc")])
        out = cleaner.clean_records(df)
        assert out["id"].tolist() == [1]

    def test_drops_duplicate_ids_keeping_first(self, cleaner):
        df = pd.DataFrame([
            _make_record(5, mainClass="sage"),
            _make_record("5", mainClass="monk"),
            _make_record(6),
        ])
        out = cleaner.clean_records(df)
        assert out["id"].tolist() == [5, 6]
        assert out.loc[0, "mainClass"] == "sage"

    def test_rarity_stays_integer(self, cleaner):
        df = pd.DataFrame([_make_record(1, rarity=2), _make_record(2, rarity=None)])
        out = cleaner.clean_records(df)
        assert out.loc[0, "rarity"] == 2
        assert isinstance(out.loc[0, "rarity"], int)


class TestToAttributes:
    def test_builds_attributes(self, cleaner):
        df = cleaner.clean_records(pd.DataFrame([
            _make_record(68846, subClass="paladin", statBoost2="END"),
        ]))
        attrs = cleaner.to_attributes(df.iloc[0])
        assert attrs == HeroAttributes(
            main_class="warrior", sub_class="paladin",
            rarity=0, stat_boost2="END", hero_id=68846,
        )

    def test_missing_values_become_none(self, cleaner):
        row = pd.Series({"id": 3, "mainClass": float("nan"), "subClass": "monk",
                         "rarity": None, "statBoost2": "AGI"})
        attrs = cleaner.to_attributes(row)
        assert attrs.main_class is None
        assert attrs.rarity is None
        assert not (isinstance(attrs.rarity, float) and math.isnan(attrs.rarity))
