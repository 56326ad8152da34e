"""Shared fixtures for the hero ranking test suite."""

import json

import pytest

from src.data_pipeline.cleaning import HeroDataCleaner
from src.data_pipeline.transformation import HeroRankingTransformer
from src.hero_ranking.ranking_engine import RankingEngine


# ------------------------------------------------------------------
# Lightweight factories - cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def engine():
    return RankingEngine()


@pytest.fixture(scope="module")
def cleaner():
    return HeroDataCleaner()


@pytest.fixture(scope="module")
def transformer():
    return HeroRankingTransformer()


# ------------------------------------------------------------------
# Reference heroes with known rankings
# ------------------------------------------------------------------

@pytest.fixture(scope="session")
def reference_heroes():
    """(record, expected ranking) pairs for heroes 71052, 68846 and 65154."""
    return [
        (
            {"id": 71052, "mainClass": "pirate", "subClass": "warrior",
             "rarity": 0, "statBoost2": "WIS"},
            {"mining": 55, "gardening": 13, "foraging": 26, "fishing": 38},
        ),
        (
            {"id": 68846, "mainClass": "warrior", "subClass": "paladin",
             "rarity": 0, "statBoost2": "END"},
            {"mining": 79, "gardening": 27, "foraging": 21, "fishing": 16},
        ),
        (
            {"id": 65154, "mainClass": "warrior", "subClass": "warrior",
             "rarity": 4, "statBoost2": "STR"},
            {"mining": 86, "gardening": 24, "foraging": 39, "fishing": 31},
        ),
    ]


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

@pytest.fixture
def write_heroes(tmp_path):
    """Write a JSON payload to a temp file and return its path."""

    def _write(payload, name="heroes.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write
