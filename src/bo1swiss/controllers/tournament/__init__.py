"""Tournament controllers: ledger, tiebreaks, rounds and results."""

from bo1swiss.controllers.tournament.ledger import (
    Record,
    compute_records,
    match_win_rate,
    opponents_of,
    record_of,
)
from bo1swiss.controllers.tournament.result_recorder import ResultRecorder
from bo1swiss.controllers.tournament.round_manager import RoundManager
from bo1swiss.controllers.tournament.tiebreak_calculator import (
    StandingRow,
    TiebreakCalculator,
)

__all__ = [
    "Record",
    "ResultRecorder",
    "RoundManager",
    "StandingRow",
    "TiebreakCalculator",
    "compute_records",
    "match_win_rate",
    "opponents_of",
    "record_of",
]
