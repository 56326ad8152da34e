from src.hero_ranking.affinity_tables import DEFAULT_TABLES, AffinityTables
from src.hero_ranking.errors import (
    AffinityTableError,
    InvalidRarityError,
    RankingError,
    UnknownClassError,
    UnknownStatBoostError,
    UnknownSubclassError,
)
from src.hero_ranking.models import (
    HeroAttributes,
    HeroClass,
    Profession,
    Rarity,
    RankingResult,
    StatCode,
)
from src.hero_ranking.ranking_engine import RankingEngine, get_ranking

__all__ = [
    "AffinityTableError",
    "AffinityTables",
    "DEFAULT_TABLES",
    "HeroAttributes",
    "HeroClass",
    "InvalidRarityError",
    "Profession",
    "RankingEngine",
    "RankingError",
    "RankingResult",
    "Rarity",
    "StatCode",
    "UnknownClassError",
    "UnknownStatBoostError",
    "UnknownSubclassError",
    "get_ranking",
]
