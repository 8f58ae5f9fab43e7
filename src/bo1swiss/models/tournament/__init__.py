from bo1swiss.models.tournament.match import Match, Outcome, make_match_id
from bo1swiss.models.tournament.pairing_history import PairingHistory
from bo1swiss.models.tournament.tournament_config import (
    TerminationMode,
    TournamentConfig,
    recommend_rounds,
)

__all__ = [
    "Match",
    "Outcome",
    "PairingHistory",
    "TerminationMode",
    "TournamentConfig",
    "make_match_id",
    "recommend_rounds",
]
