"""Immutable profession affinity tables.

Each table maps one hero attribute axis (main class, subclass, secondary
stat boost, rarity) to a per-profession contribution. Tables are checked for
totality when constructed, so a missing class or profession is reported at
import time rather than while ranking a hero.
"""

import numbers
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from src.hero_ranking.config import (
    CLASS_BASE,
    MAX_RARITY,
    MIN_RARITY,
    PROFESSIONS,
    RARITY_ADJUST,
    STAT_BOOST_ADJUST,
    SUBCLASS_ADJUST,
)
from src.hero_ranking.errors import AffinityTableError
from src.hero_ranking.models import HeroClass, Profession, StatCode

RARITY_TIERS = tuple(range(MIN_RARITY, MAX_RARITY + 1))


class AffinityTables:
    """Read-only lookup tables: ``table[key][profession] -> number``."""

    def __init__(
        self,
        class_base: Mapping[HeroClass, Sequence[float]],
        subclass_adjust: Mapping[HeroClass, Sequence[float]],
        stat_boost_adjust: Mapping[StatCode, Sequence[float]],
        rarity_adjust: Mapping[int, Sequence[float]],
    ):
        self.class_base = self._freeze("class_base", class_base, HeroClass)
        self.subclass_adjust = self._freeze(
            "subclass_adjust", subclass_adjust, HeroClass
        )
        self.stat_boost_adjust = self._freeze(
            "stat_boost_adjust", stat_boost_adjust, StatCode
        )
        self.rarity_adjust = self._freeze("rarity_adjust", rarity_adjust, RARITY_TIERS)

    @staticmethod
    def _freeze(
        name: str,
        rows: Mapping[Any, Sequence[float]],
        domain: Iterable[Any],
    ) -> Mapping[Any, Mapping[Profession, float]]:
        """Validate *rows* against *domain* and wrap them read-only.

        Every key of the domain needs exactly one non-negative number per
        profession; keys outside the domain are rejected as well.
        """
        domain = list(domain)
        missing = [key for key in domain if key not in rows]
        if missing:
            raise AffinityTableError(f"{name} is missing entries for {missing}")

        extra = [key for key in rows if key not in domain]
        if extra:
            raise AffinityTableError(f"{name} has entries outside its domain: {extra}")

        frozen = {}
        for key in domain:
            row = rows[key]
            if len(row) != len(PROFESSIONS):
                raise AffinityTableError(
                    f"{name}[{key!r}] has {len(row)} values, "
                    f"expected {len(PROFESSIONS)}"
                )
            for value in row:
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise AffinityTableError(
                        f"{name}[{key!r}] contains non-numeric value {value!r}"
                    )
                if value < 0:
                    raise AffinityTableError(
                        f"{name}[{key!r}] contains negative value {value!r}"
                    )
            frozen[key] = MappingProxyType(dict(zip(PROFESSIONS, row)))

        return MappingProxyType(frozen)


DEFAULT_TABLES = AffinityTables(
    class_base=CLASS_BASE,
    subclass_adjust=SUBCLASS_ADJUST,
    stat_boost_adjust=STAT_BOOST_ADJUST,
    rarity_adjust=RARITY_ADJUST,
)
