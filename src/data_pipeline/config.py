from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

# Fields every normalized hero record must carry (rarity may come as
# either the ordinal or its display name)
REQUIRED_RECORD_FIELDS = ("id", "mainClass", "subClass", "statBoost2")
RARITY_FIELDS = ("rarity", "rarityStr")

# rarityStr display names -> ordinal tier
RARITY_NAMES = {
    "common": 0,
    "uncommon": 1,
    "rare": 2,
    "legendary": 3,
    "mythic": 4,
}

# Output file names (use .format(name=...))
FILE_PATTERNS = {
    "rankings": "rankings_{name}.json",
    "latest": "rankings_latest.json",
}
