"""JSON ingestion for normalized hero records.

The upstream fetcher exports heroes either as a bare JSON list of records or
wrapped in an object under a ``heroes`` key. Both are accepted.
"""

import json
import logging
from pathlib import Path

import pandas as pd

from src.data_pipeline.config import RARITY_FIELDS, REQUIRED_RECORD_FIELDS

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when hero record ingestion fails."""


class HeroRecordIngester:
    """Reads a hero export file into a DataFrame of raw records."""

    def __init__(self, input_file: Path):
        self.input_file = Path(input_file)

    def _load_json(self):
        if not self.input_file.exists():
            raise FileNotFoundError(f"Expected file not found: {self.input_file}")

        try:
            with open(self.input_file, encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise IngestionError(
                f"Invalid JSON in {self.input_file.name}: {e}"
            ) from e

    @staticmethod
    def _extract_records(payload) -> list:
        if isinstance(payload, dict):
            payload = payload.get("heroes")
        if not isinstance(payload, list):
            raise IngestionError(
                "Expected a list of hero records or an object with a 'heroes' list"
            )
        for i, record in enumerate(payload):
            if not isinstance(record, dict):
                raise IngestionError(
                    f"Hero record #{i} is {type(record).__name__}, expected object"
                )
        return payload

    def read_records(self) -> pd.DataFrame:
        """Read hero records.

        Returns DataFrame with (at least) columns:
            id, mainClass, subClass, statBoost2, rarity, rarityStr

        Raises:
            FileNotFoundError: if the input file does not exist.
            IngestionError: if the file is malformed or records lack
                required fields.
        """
        logger.info("Reading hero records: %s", self.input_file.name)
        records = self._extract_records(self._load_json())

        df = pd.DataFrame(records)

        missing = [c for c in REQUIRED_RECORD_FIELDS if c not in df.columns]
        if records and missing:
            raise IngestionError(f"Hero records missing required fields: {missing}")
        if records and not any(c in df.columns for c in RARITY_FIELDS):
            raise IngestionError(
                f"Hero records need one of {list(RARITY_FIELDS)}"
            )

        # Keep a stable column set even for empty exports
        for col in (*REQUIRED_RECORD_FIELDS, *RARITY_FIELDS):
            if col not in df.columns:
                df[col] = None

        logger.info("Loaded %d hero records", len(df))
        return df
