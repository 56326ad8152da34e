"""Ranks cleaned hero records and selects heroes per profession.

Adds one score column per profession (``rank_mining``, ``rank_gardening``,
``rank_foraging``, ``rank_fishing``) plus ``best_profession``. The
``rank_`` prefix keeps the scores apart from the profession skill levels
that hero exports already carry under the bare profession names.
"""

import logging
from typing import Optional, Union

import pandas as pd

from src.data_pipeline.cleaning import HeroDataCleaner
from src.hero_ranking.errors import RankingError
from src.hero_ranking.models import Profession
from src.hero_ranking.ranking_engine import RankingEngine

logger = logging.getLogger(__name__)

RANK_COLUMNS = {p: f"rank_{p.value}" for p in Profession}
BEST_PROFESSION_COLUMN = "best_profession"


class HeroRankingTransformer:
    """Applies the ranking engine to every hero of a cleaned DataFrame."""

    def __init__(
        self,
        engine: Optional[RankingEngine] = None,
        cleaner: Optional[HeroDataCleaner] = None,
    ):
        self.engine = engine or RankingEngine()
        self.cleaner = cleaner or HeroDataCleaner()

    def add_rankings(self, df: pd.DataFrame, skip_invalid: bool = True) -> pd.DataFrame:
        """Return a copy of *df* with rank columns added.

        Args:
            df: Cleaned hero records (see HeroDataCleaner.clean_records).
            skip_invalid: Drop heroes the engine rejects, logging a warning.
                When False the first RankingError propagates.

        Returns:
            DataFrame of rankable heroes with ``rank_*`` int columns and
            ``best_profession``.
        """
        # Row labels from concatenated frames may repeat
        df = df.reset_index(drop=True)

        kept_index = []
        results = []
        for idx, row in df.iterrows():
            attrs = self.cleaner.to_attributes(row)
            try:
                result = self.engine.compute(attrs)
            except RankingError as e:
                if not skip_invalid:
                    raise
                logger.warning("Skipping hero %s: %s", attrs.hero_id, e)
                continue
            kept_index.append(idx)
            results.append(result)

        out = df.loc[kept_index].copy()
        for profession, col in RANK_COLUMNS.items():
            out[col] = pd.Series(
                [r.score_for(profession) for r in results],
                index=kept_index, dtype="int64",
            )
        out[BEST_PROFESSION_COLUMN] = pd.Series(
            [r.best_profession().value for r in results],
            index=kept_index, dtype="object",
        )

        skipped = len(df) - len(out)
        if skipped:
            logger.warning("Skipped %d of %d heroes with invalid attributes", skipped, len(df))
        logger.info("Ranked %d heroes", len(out))
        return out.reset_index(drop=True)

    @staticmethod
    def top_heroes(
        ranked_df: pd.DataFrame,
        profession: Union[Profession, str],
        n: int = 10,
    ) -> pd.DataFrame:
        """Select the *n* best heroes for *profession*.

        Ties on score are broken by ascending hero id.

        Raises:
            ValueError: unknown profession or negative *n*.
        """
        try:
            profession = Profession(profession)
        except ValueError:
            raise ValueError(
                f"Invalid profession: {profession!r}. "
                f"Must be one of {[p.value for p in Profession]}."
            ) from None
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        col = RANK_COLUMNS[profession]
        ordered = ranked_df.sort_values(
            [col, "id"], ascending=[False, True], kind="mergesort"
        )
        return ordered.head(n).reset_index(drop=True)
