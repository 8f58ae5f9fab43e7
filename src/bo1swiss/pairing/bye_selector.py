"""Bye selection for odd-sized rounds.

Selection and application are kept apart: :func:`select_bye` only looks at
its inputs and returns an id, :func:`apply_bye` is the state transition that
marks the competitor once the bye match actually exists.
"""

# Bo1 Swiss
# Copyright (C) 2025  Bo1 Swiss developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from bo1swiss.exceptions import NoPairingAvailableException, PlayerNotFoundException
from bo1swiss.models.competitor import Competitor
from bo1swiss.utils import setup_logger

if TYPE_CHECKING:
    from bo1swiss.tournament import Tournament

logger = setup_logger(__name__)


def select_bye(
    ranked_ids: Sequence[str],
    competitors: Mapping[str, Competitor],
    first_round: bool,
    rng: Optional[random.Random] = None,
) -> str:
    """Choose the competitor who sits out this round with an automatic win.

    Args:
        ranked_ids: Unpaired active competitor ids, best ranked first
        competitors: Lookup of competitors by id
        first_round: True when generating round 1, where no ranking exists yet
        rng: Random source for the first-round draw

    Returns:
        Id of the bye recipient

    Raises:
        NoPairingAvailableException: If the pool is empty
    """
    if not ranked_ids:
        raise NoPairingAvailableException("Cannot assign a bye from an empty pool")

    if first_round:
        rng = rng or random.Random()
        selected = ranked_ids[rng.randrange(len(ranked_ids))]
        logger.info("Round 1 bye drawn at random: %s", selected)
        return selected

    for competitor_id in reversed(ranked_ids):
        competitor = competitors.get(competitor_id)
        if competitor is not None and not competitor.had_bye:
            logger.info("Assigning bye to lowest-ranked without one: %s", competitor_id)
            return competitor_id

    # Every candidate already had a bye: a second bye is unavoidable
    selected = ranked_ids[-1]
    logger.warning(
        "All %s bye candidates have already received a bye. "
        "Assigning second bye to lowest-ranked: %s",
        len(ranked_ids),
        selected,
    )
    return selected


def apply_bye(tournament: Tournament, competitor_id: str) -> Competitor:
    """Mark a competitor as having received a bye.

    Raises:
        PlayerNotFoundException: If the id is unknown
    """
    competitor = tournament.get_competitor(competitor_id)
    if competitor is None:
        raise PlayerNotFoundException(f"No competitor with id {competitor_id}")
    competitor.had_bye = True
    return competitor
