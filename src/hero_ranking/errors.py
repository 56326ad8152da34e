"""Exceptions raised by the hero ranking engine."""


class RankingError(Exception):
    """Raised when hero attributes cannot be ranked."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class UnknownClassError(RankingError):
    """Main class is not present in the class affinity table."""


class UnknownSubclassError(RankingError):
    """Subclass is not present in the subclass affinity table."""


class UnknownStatBoostError(RankingError):
    """Secondary stat boost is not present in the stat-boost table."""


class InvalidRarityError(RankingError):
    """Rarity is not an integer tier between 0 and 4."""


class AffinityTableError(Exception):
    """Raised when an affinity table does not cover its whole domain."""
