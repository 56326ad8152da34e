"""Rank every hero of a normalized hero export.

Usage:
    python -m src.data_pipeline.rank_heroes <input_file> [output_dir]

Examples:
    python -m src.data_pipeline.rank_heroes data/raw/heroes.json
    python -m src.data_pipeline.rank_heroes heroes.json /path/to/output
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from src.data_pipeline.cleaning import HeroDataCleaner
from src.data_pipeline.config import FILE_PATTERNS, PROCESSED_DATA_DIR
from src.data_pipeline.ingestion import HeroRecordIngester
from src.data_pipeline.transformation import (
    BEST_PROFESSION_COLUMN,
    RANK_COLUMNS,
    HeroRankingTransformer,
)
from src.hero_ranking.models import Profession
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _hero_to_dict(row: pd.Series) -> dict:
    """Convert a single ranked hero row to the output JSON structure."""
    return {
        "id": int(row["id"]),
        "main_class": row["mainClass"],
        "sub_class": row["subClass"],
        "rarity": int(row["rarity"]),
        "stat_boost2": row["statBoost2"],
        "ranking": {
            p.value: int(row[col]) for p, col in RANK_COLUMNS.items()
        },
        "best_profession": row[BEST_PROFESSION_COLUMN],
    }


def run_pipeline(input_file: Path, output_dir: Path | None = None) -> Path:
    """Run the hero ranking pipeline.

    Args:
        input_file: JSON export of normalized hero records.
        output_dir: Directory for JSON output.
            Defaults to ``data/processed/``.

    Returns:
        Path to the generated JSON file.

    Raises:
        FileNotFoundError: If the input file doesn't exist.
        IngestionError: If the input file is malformed.
    """
    input_file = Path(input_file)
    if output_dir is None:
        output_dir = PROCESSED_DATA_DIR

    logger.info("Starting hero ranking for %s", input_file)

    # 1. Ingest
    logger.info("Step 1/4: Reading hero records...")
    raw = HeroRecordIngester(input_file).read_records()

    # 2. Clean
    logger.info("Step 2/4: Cleaning hero records...")
    cleaner = HeroDataCleaner()
    heroes_df = cleaner.clean_records(raw)

    # 3. Rank
    logger.info("Step 3/4: Ranking professions...")
    transformer = HeroRankingTransformer(cleaner=cleaner)
    ranked_df = transformer.add_rankings(heroes_df)

    # 4. Output JSON
    logger.info("Step 4/4: Generating JSON output...")
    heroes_list = [_hero_to_dict(row) for _, row in ranked_df.iterrows()]

    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": input_file.name,
            "professions": [p.value for p in Profession],
            "total_heroes": len(heroes_list),
            "dropped_records": len(raw) - len(heroes_df),
            "skipped_heroes": len(heroes_df) - len(ranked_df),
        },
        "heroes": heroes_list,
    }

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / FILE_PATTERNS["rankings"].format(name=input_file.stem)

    with open(output_file, "w") as f:
        json.dump(output_data, f, indent=2)

    # Update latest symlink
    latest_link = output_dir / FILE_PATTERNS["latest"]
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    # Summary
    best_counts: dict[str, int] = {}
    for hero in heroes_list:
        best = hero["best_profession"]
        best_counts[best] = best_counts.get(best, 0) + 1

    logger.info("Ranking complete! Output: %s", output_file)
    logger.info("  Total heroes: %d", len(heroes_list))
    logger.info(
        "  By best profession: %s",
        ", ".join(f"{k}={v}" for k, v in sorted(best_counts.items())),
    )

    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    input_file = Path(sys.argv[1])
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_pipeline(input_file, output_dir)
        print(f"Ranking complete: {output}")
    except Exception:
        logger.exception("Ranking failed")
        sys.exit(1)
