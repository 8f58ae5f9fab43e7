"""Swiss pairing for best-of-one rounds: bye selection and score groups."""

from bo1swiss.pairing.bye_selector import apply_bye, select_bye
from bo1swiss.pairing.score_groups import (
    create_score_group_pairings,
    has_rematch_free_pairing,
    pair_group,
)

__all__ = [
    "apply_bye",
    "create_score_group_pairings",
    "has_rematch_free_pairing",
    "pair_group",
    "select_bye",
]
