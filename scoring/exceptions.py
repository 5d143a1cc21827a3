class ScoringError(Exception):
    """Base for all scoring engine errors."""


class UnknownFormatError(ScoringError):
    """Game format has no aggregator."""


class InvalidTeamShapeError(ScoringError):
    """Team format played without exactly two teams of two players."""


class ShotChainError(ScoringError):
    """Base for shot sequence errors."""


class DuplicateShotError(ShotChainError):
    """Shot number already used for this player and hole."""


class ShotNotFoundError(ShotChainError):
    """Shot is not part of the chain."""
