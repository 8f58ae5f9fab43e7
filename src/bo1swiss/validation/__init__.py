"""Integrity checks over a tournament's pairing history."""

from bo1swiss.validation.integrity import (
    CheckResult,
    CheckStatus,
    Severity,
    TournamentValidator,
    ValidationReport,
    validate_tournament,
)

__all__ = [
    "CheckResult",
    "CheckStatus",
    "Severity",
    "TournamentValidator",
    "ValidationReport",
    "validate_tournament",
]
