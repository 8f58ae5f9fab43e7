"""Score-group Swiss pairing with downpairing and rematch avoidance."""

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

import random
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Set

from bo1swiss.exceptions import NotEnoughActiveException
from bo1swiss.models.competitor import Competitor
from bo1swiss.models.pairing import PairingResult
from bo1swiss.models.tournament.pairing_history import PairingHistory
from bo1swiss.pairing.bye_selector import select_bye
from bo1swiss.type_hints import RankedPool, RoundSchedule
from bo1swiss.utils import setup_logger

logger = setup_logger(__name__)


def create_score_group_pairings(
    ranked_ids: RankedPool,
    points: Mapping[str, int],
    competitors: Mapping[str, Competitor],
    history: PairingHistory,
    first_round: bool,
    rng: Optional[random.Random] = None,
) -> PairingResult:
    """
    Pair the next round of a Bo1 Swiss tournament.

    - ranked_ids: active competitor ids in standings order, best first
    - points: current match points per competitor id
    - competitors: competitor lookup, used for bye history
    - history: pairings that already exist, for rematch checks
    - first_round: True when generating round 1 (random bye)
    - rng: random source for the round-1 bye
    Returns: PairingResult with the pairs (higher ranked first) and the bye.

    Raises NotEnoughActiveException with fewer than two competitors.
    """
    if len(ranked_ids) < 2:
        raise NotEnoughActiveException(
            f"Not enough active competitors to pair: {len(ranked_ids)}"
        )

    pool = list(ranked_ids)
    result = PairingResult()

    # Bye only when the active pool is odd
    if len(pool) % 2 == 1:
        result.bye_player_id = select_bye(pool, competitors, first_round, rng)
        pool.remove(result.bye_player_id)

    carry: Optional[str] = None
    for group in _group_by_points(pool, points):
        # The floater from the group above becomes this group's top member
        if carry is not None:
            group = [carry] + group
            carry = None
        if len(group) % 2 == 1:
            carry = group.pop()
        result.pairings.extend(pair_group(group, history))

    if carry is not None:
        if result.bye_player_id is None:
            logger.info("Floater %s out of the lowest group takes the bye", carry)
            result.bye_player_id = carry
        else:
            partner = next(cid for cid in reversed(pool) if cid != carry)
            logger.warning(
                "Pairing floater %s across score groups with %s as last resort",
                carry,
                partner,
            )
            result.pairings.append((carry, partner))
            result.cross_group.append((carry, partner))

    result.rematches = [
        pair for pair in result.pairings if history.have_played(pair[0], pair[1])
    ]
    if result.rematches:
        logger.warning("Round pairing contains %s forced rematch(es)", len(result.rematches))
    return result


def _group_by_points(
    pool: Sequence[str], points: Mapping[str, int]
) -> List[List[str]]:
    """Split a ranked pool into score groups, highest points first.

    Ranked order is kept inside each group.
    """
    groups: Dict[int, List[str]] = {}
    for competitor_id in pool:
        groups.setdefault(points.get(competitor_id, 0), []).append(competitor_id)
    return [groups[level] for level in sorted(groups, reverse=True)]


def pair_group(group: Sequence[str], history: PairingHistory) -> RoundSchedule:
    """Pair an even-sized score group.

    Tries a rematch-free perfect pairing first. If none exists the group is
    paired greedily, allowing as few rematches as the greedy pass finds.
    """
    pairings = _pair_without_rematches(list(group), history, set())
    if pairings is not None:
        return pairings

    logger.warning(
        "No rematch-free pairing exists for a group of %s, forcing pairings",
        len(group),
    )
    return _greedy_pair_group(group, history)


def _pair_without_rematches(
    remaining: List[str],
    history: PairingHistory,
    dead_ends: Set[FrozenSet[str]],
) -> Optional[RoundSchedule]:
    """Backtracking search for a perfect pairing with no rematches.

    The top remaining competitor is tried against opponents in ranked order,
    nearest first. ``dead_ends`` remembers sub-groups already proven
    unpairable so they are not searched twice.
    """
    if not remaining:
        return []

    key = frozenset(remaining)
    if key in dead_ends:
        return None

    first = remaining[0]
    for i in range(1, len(remaining)):
        candidate = remaining[i]
        if history.have_played(first, candidate):
            continue
        rest = remaining[1:i] + remaining[i + 1 :]
        sub_pairings = _pair_without_rematches(rest, history, dead_ends)
        if sub_pairings is not None:
            return [(first, candidate)] + sub_pairings

    dead_ends.add(key)
    return None


def _greedy_pair_group(group: Sequence[str], history: PairingHistory) -> RoundSchedule:
    """Fallback greedy pairing when no rematch-free pairing exists"""
    pairings = []
    remaining = list(group)

    while len(remaining) >= 2:
        player1 = remaining.pop(0)

        opponent_idx = next(
            (
                i
                for i, player2 in enumerate(remaining)
                if not history.have_played(player1, player2)
            ),
            0,  # Everyone left is a rematch: take the nearest
        )
        pairings.append((player1, remaining.pop(opponent_idx)))

    return pairings


def has_rematch_free_pairing(ids: Sequence[str], history: PairingHistory) -> bool:
    """Can ``ids`` (even-sized) be split into pairs that have never met?"""
    if len(ids) % 2 == 1:
        return False
    return _pair_without_rematches(list(ids), history, set()) is not None
