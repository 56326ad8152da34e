"""Data cleaning for normalized hero records.

Handles the inconsistencies between chain and GraphQL exports:
- Class identifiers in varying case ("DarkKnight", "darkknight")
- Stat codes in lower case ("wis")
- Rarity given as an ordinal, a numeric string, or only as rarityStr
- Hero ids serialized as strings
"""

import logging
import numbers
from typing import Any, Optional

import pandas as pd

from src.data_pipeline.config import RARITY_NAMES
from src.hero_ranking.models import HeroAttributes, HeroClass

logger = logging.getLogger(__name__)

# Lower-cased class identifier -> canonical camelCase identifier
_CLASS_LOOKUP = {c.value.lower(): c.value for c in HeroClass}


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class HeroDataCleaner:
    """Cleans hero records so they can be turned into HeroAttributes."""

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_hero_id(value: Any) -> Optional[int]:
        """Parse a hero id ("10000" -> 10000). Returns None if not numeric."""
        if _is_missing(value) or isinstance(value, bool):
            return None
        if isinstance(value, numbers.Real):
            return int(value) if float(value).is_integer() else None
        try:
            return int(str(value).strip())
        except ValueError:
            return None

    @staticmethod
    def normalize_class(value: Any) -> Optional[str]:
        """Canonicalize a class identifier.

        Examples:
            "Pirate"     -> "pirate"
            "darkknight" -> "darkKnight"
            " sage "     -> "sage"

        Unrecognized classes are returned stripped but otherwise untouched
        so the ranking engine can report them.
        """
        if _is_missing(value):
            return None
        stripped = str(value).strip()
        return _CLASS_LOOKUP.get(stripped.lower(), stripped)

    @staticmethod
    def normalize_stat_code(value: Any) -> Optional[str]:
        """Upper-case a stat-boost code ("wis" -> "WIS")."""
        if _is_missing(value):
            return None
        return str(value).strip().upper()

    @staticmethod
    def normalize_rarity(rarity: Any, rarity_str: Any = None) -> Any:
        """Resolve a rarity tier.

        The numeric rarity wins when present; otherwise rarityStr is mapped
        through RARITY_NAMES ("Rare" -> 2). Numeric values that are not
        whole numbers are passed through unchanged for the engine to
        reject, and None is returned when neither field resolves.
        """
        if not _is_missing(rarity) and not isinstance(rarity, bool):
            try:
                as_float = float(str(rarity).strip())
            except ValueError:
                as_float = None
            if as_float is not None:
                return int(as_float) if as_float.is_integer() else rarity

        if not _is_missing(rarity_str):
            return RARITY_NAMES.get(str(rarity_str).strip().lower())

        return None

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def clean_records(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean the raw hero records DataFrame.

        Normalizes id, mainClass, subClass, statBoost2 and rarity in place
        of the raw values, then drops rows without a usable id and
        duplicate heroes (first occurrence wins).
        """
        out = df.copy()
        rarity_str = out["rarityStr"] if "rarityStr" in out.columns else [None] * len(out)

        out["id"] = pd.Series(
            [self.normalize_hero_id(v) for v in out["id"]],
            index=out.index, dtype="object",
        )
        out["mainClass"] = out["mainClass"].apply(self.normalize_class)
        out["subClass"] = out["subClass"].apply(self.normalize_class)
        out["statBoost2"] = out["statBoost2"].apply(self.normalize_stat_code)
        out["rarity"] = pd.Series(
            [self.normalize_rarity(r, s) for r, s in zip(out["rarity"], rarity_str)],
            index=out.index, dtype="object",
        )

        no_id = out["id"].isna()
        if no_id.any():
            logger.warning("Dropping %d hero records without a valid id", no_id.sum())
            out = out[~no_id]

        dupes = out["id"].duplicated(keep="first")
        if dupes.any():
            logger.warning(
                "Dropping %d duplicate hero records: %s",
                dupes.sum(), out.loc[dupes, "id"].tolist(),
            )
            out = out[~dupes]

        out = out.reset_index(drop=True)
        logger.info("Cleaned hero records: %d rows", len(out))
        return out

    @staticmethod
    def to_attributes(row: pd.Series) -> HeroAttributes:
        """Build HeroAttributes from one cleaned record row."""

        def value(key):
            v = row.get(key)
            return None if _is_missing(v) else v

        return HeroAttributes(
            main_class=value("mainClass"),
            sub_class=value("subClass"),
            rarity=value("rarity"),
            stat_boost2=value("statBoost2"),
            hero_id=value("id"),
        )
