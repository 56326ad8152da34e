"""Data models for hero profession ranking."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class Profession(str, Enum):
    """Base gathering professions, in display order."""

    MINING = "mining"
    GARDENING = "gardening"
    FORAGING = "foraging"
    FISHING = "fishing"


class HeroClass(str, Enum):
    """Combat archetypes shared by the main class and subclass genes."""

    # Basic
    WARRIOR = "warrior"
    KNIGHT = "knight"
    THIEF = "thief"
    ARCHER = "archer"
    PRIEST = "priest"
    WIZARD = "wizard"
    MONK = "monk"
    PIRATE = "pirate"
    BERSERKER = "berserker"
    SEER = "seer"
    # Advanced
    PALADIN = "paladin"
    DARK_KNIGHT = "darkKnight"
    SUMMONER = "summoner"
    NINJA = "ninja"
    SHAPESHIFTER = "shapeshifter"
    BARD = "bard"
    # Elite
    DRAGOON = "dragoon"
    SAGE = "sage"
    SPELLBOW = "spellbow"
    # Exalted
    DREAD_KNIGHT = "dreadKnight"


class StatCode(str, Enum):
    """Stat-boost gene codes."""

    STR = "STR"
    AGI = "AGI"
    INT = "INT"
    WIS = "WIS"
    LCK = "LCK"
    VIT = "VIT"
    END = "END"
    DEX = "DEX"


class Rarity(IntEnum):
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    LEGENDARY = 3
    MYTHIC = 4


@dataclass(frozen=True)
class HeroAttributes:
    """Immutable hero attributes consumed by the ranking engine.

    Class and stat fields normally hold enum members, but decoded chain
    data may carry raw strings; the engine resolves and validates both.
    """

    main_class: Union[HeroClass, str]
    sub_class: Union[HeroClass, str]
    rarity: int
    stat_boost2: Union[StatCode, str]
    hero_id: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "HeroAttributes":
        """Build attributes from a normalized hero record (camelCase keys)."""
        return cls(
            main_class=record.get("mainClass"),
            sub_class=record.get("subClass"),
            rarity=record.get("rarity"),
            stat_boost2=record.get("statBoost2"),
            hero_id=record.get("id"),
        )


@dataclass(frozen=True)
class RankingResult:
    """Affinity scores of one hero for each base profession."""

    mining: int
    gardening: int
    foraging: int
    fishing: int

    def score_for(self, profession: Union[Profession, str]) -> int:
        return getattr(self, Profession(profession).value)

    def as_dict(self) -> Dict[str, int]:
        return {p.value: self.score_for(p) for p in Profession}

    def ordered(self) -> List[Tuple[Profession, int]]:
        """Professions sorted by score, highest first.

        Ties keep the fixed profession order (mining, gardening,
        foraging, fishing).
        """
        pairs = [(p, self.score_for(p)) for p in Profession]
        return sorted(pairs, key=lambda pair: pair[1], reverse=True)

    def best_profession(self) -> Profession:
        return self.ordered()[0][0]
