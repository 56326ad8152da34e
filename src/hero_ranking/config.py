from src.hero_ranking.models import HeroClass, Profession, StatCode

# Column order of every table row below
PROFESSIONS = (
    Profession.MINING,
    Profession.GARDENING,
    Profession.FORAGING,
    Profession.FISHING,
)

MIN_RARITY = 0
MAX_RARITY = 4

# Values are multiples of 0.5 so float sums stay exact.

# Main class base aptitude: (mining, gardening, foraging, fishing)
CLASS_BASE = {
    HeroClass.WARRIOR: (58, 14, 19, 12),
    HeroClass.KNIGHT: (55, 18, 14, 12),
    HeroClass.THIEF: (18, 12, 40, 38),
    HeroClass.ARCHER: (20, 14, 45, 28),
    HeroClass.PRIEST: (12, 50, 22, 16),
    HeroClass.WIZARD: (14, 48, 30, 14),
    HeroClass.MONK: (30, 22, 20, 40),
    HeroClass.PIRATE: (43, 5, 17, 30),
    HeroClass.BERSERKER: (60, 10, 16, 14),
    HeroClass.SEER: (14, 46, 26, 20),
    HeroClass.PALADIN: (56, 30, 12, 10),
    HeroClass.DARK_KNIGHT: (54, 16, 24, 14),
    HeroClass.SUMMONER: (12, 52, 28, 14),
    HeroClass.NINJA: (22, 12, 48, 36),
    HeroClass.SHAPESHIFTER: (26, 28, 30, 30),
    HeroClass.BARD: (16, 30, 22, 44),
    HeroClass.DRAGOON: (60, 20, 24, 20),
    HeroClass.SAGE: (16, 58, 30, 18),
    HeroClass.SPELLBOW: (24, 26, 50, 26),
    HeroClass.DREAD_KNIGHT: (64, 24, 28, 24),
}

# Subclass bonus: (mining, gardening, foraging, fishing)
SUBCLASS_ADJUST = {
    HeroClass.WARRIOR: (12, 3, 8, 7),
    HeroClass.KNIGHT: (11, 5, 4, 4),
    HeroClass.THIEF: (4, 3, 10, 9),
    HeroClass.ARCHER: (4, 3, 11, 6),
    HeroClass.PRIEST: (3, 12, 5, 4),
    HeroClass.WIZARD: (3, 11, 7, 3),
    HeroClass.MONK: (7, 5, 5, 10),
    HeroClass.PIRATE: (9, 2, 5, 9),
    HeroClass.BERSERKER: (13, 2, 4, 4),
    HeroClass.SEER: (3, 11, 6, 5),
    HeroClass.PALADIN: (14, 9, 0, 2),
    HeroClass.DARK_KNIGHT: (12, 4, 6, 4),
    HeroClass.SUMMONER: (3, 12, 7, 4),
    HeroClass.NINJA: (5, 3, 12, 9),
    HeroClass.SHAPESHIFTER: (6, 7, 7, 7),
    HeroClass.BARD: (4, 7, 5, 11),
    HeroClass.DRAGOON: (14, 5, 6, 5),
    HeroClass.SAGE: (4, 14, 7, 5),
    HeroClass.SPELLBOW: (6, 6, 12, 6),
    HeroClass.DREAD_KNIGHT: (15, 6, 7, 6),
}

# Secondary stat boost gene: (mining, gardening, foraging, fishing)
STAT_BOOST_ADJUST = {
    StatCode.STR: (8, 1, 2, 3),
    StatCode.AGI: (1, 1, 3, 6),
    StatCode.INT: (1, 3, 5, 1),
    StatCode.WIS: (0, 4.5, 1, 1),
    StatCode.LCK: (1, 1, 2, 6),
    StatCode.VIT: (3, 6, 1, 1),
    StatCode.END: (7, 4, 2, 2),
    StatCode.DEX: (2, 1, 6, 3),
}

# Rarity tier: (mining, gardening, foraging, fishing)
RARITY_ADJUST = {
    0: (0, 0, 0, 0),        # Common
    1: (2, 1.5, 2.5, 2),    # Uncommon
    2: (4, 3, 5, 4.5),      # Rare
    3: (6, 4.5, 7.5, 6.5),  # Legendary
    4: (8, 6, 10, 9),       # Mythic
}
