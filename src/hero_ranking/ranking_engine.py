"""Profession ranking engine.

Combines the four affinity tables additively for one hero::

    score(p) = round(class_base[main][p] + subclass_adjust[sub][p]
                     + stat_boost_adjust[stat2][p] + rarity_adjust[rarity][p])

Rounding is half away from zero. There is no clamping and no normalization
across professions.
"""

import logging
import numbers
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Mapping, Type, Union

from src.hero_ranking.affinity_tables import DEFAULT_TABLES, AffinityTables
from src.hero_ranking.config import MAX_RARITY, MIN_RARITY, PROFESSIONS
from src.hero_ranking.errors import (
    InvalidRarityError,
    RankingError,
    UnknownClassError,
    UnknownStatBoostError,
    UnknownSubclassError,
)
from src.hero_ranking.models import HeroAttributes, HeroClass, RankingResult, StatCode

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (12.5 -> 13)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class RankingEngine:
    """Compute per-profession affinity scores for a single hero.

    The engine is stateless apart from the read-only tables it is given,
    so one instance can be shared across threads.
    """

    def __init__(self, tables: AffinityTables = DEFAULT_TABLES):
        self.tables = tables

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, attrs: HeroAttributes) -> RankingResult:
        """Rank the four base professions for *attrs*.

        Raises:
            UnknownClassError: main class not in the class table.
            UnknownSubclassError: subclass not in the subclass table.
            UnknownStatBoostError: stat boost not in the stat-boost table.
            InvalidRarityError: rarity is not an integer in [0, 4].
        """
        main_class = self._resolve(
            attrs.main_class, HeroClass, self.tables.class_base,
            UnknownClassError, "main class",
        )
        sub_class = self._resolve(
            attrs.sub_class, HeroClass, self.tables.subclass_adjust,
            UnknownSubclassError, "subclass",
        )
        stat_boost2 = self._resolve(
            attrs.stat_boost2, StatCode, self.tables.stat_boost_adjust,
            UnknownStatBoostError, "stat boost",
        )
        rarity = self._validate_rarity(attrs.rarity)

        class_row = self.tables.class_base[main_class]
        subclass_row = self.tables.subclass_adjust[sub_class]
        stat_row = self.tables.stat_boost_adjust[stat_boost2]
        rarity_row = self.tables.rarity_adjust[rarity]

        scores = {}
        for profession in PROFESSIONS:
            total = (
                class_row[profession]
                + subclass_row[profession]
                + stat_row[profession]
                + rarity_row[profession]
            )
            scores[profession.value] = round_half_away_from_zero(total)

        result = RankingResult(**scores)
        logger.debug(
            "Ranked hero %s (%s:%s r%d %s): %s",
            attrs.hero_id, main_class.value, sub_class.value, rarity,
            stat_boost2.value, result.as_dict(),
        )
        return result

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(
        value: Any,
        enum_cls: Type[Enum],
        table: Mapping,
        error_cls: Type[RankingError],
        label: str,
    ) -> Enum:
        """Map a raw value or enum member onto a key of *table*."""
        if isinstance(value, enum_cls):
            member = value
        else:
            try:
                member = enum_cls(value)
            except (ValueError, TypeError):
                raise error_cls(f"Unknown {label}: {value!r}", value) from None

        if member not in table:
            raise error_cls(f"No affinity entry for {label} {member.value!r}", value)
        return member

    @staticmethod
    def _validate_rarity(rarity: Any) -> int:
        if isinstance(rarity, bool) or not isinstance(rarity, numbers.Integral):
            raise InvalidRarityError(
                f"Rarity must be an integer, got {rarity!r}", rarity
            )
        if not MIN_RARITY <= rarity <= MAX_RARITY:
            raise InvalidRarityError(
                f"Rarity {rarity} outside [{MIN_RARITY}, {MAX_RARITY}]", rarity
            )
        return int(rarity)


_DEFAULT_ENGINE = RankingEngine()


def get_ranking(hero: Union[HeroAttributes, Mapping[str, Any]]) -> RankingResult:
    """Rank a hero given as attributes or as a normalized hero record."""
    if not isinstance(hero, HeroAttributes):
        hero = HeroAttributes.from_record(hero)
    return _DEFAULT_ENGINE.compute(hero)
