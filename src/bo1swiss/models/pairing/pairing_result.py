"""PairingResult data class."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from bo1swiss.type_hints import MatchPairing, RoundSchedule


@dataclass
class PairingResult:
    """Result of a pairing computation for a single round.

    Attributes
    ----------
    pairings : list of tuple of str
        (first_id, second_id) pairs, higher ranked competitor first.
    bye_player_id : str or None
        Competitor receiving the automatic win, if any.
    rematches : list of tuple of str
        Pairs in ``pairings`` that repeat an earlier match.
    cross_group : list of tuple of str
        Pairs created by the last-resort float out of the lowest score group.
    """

    pairings: RoundSchedule = field(default_factory=list)
    bye_player_id: Optional[str] = None
    rematches: List[MatchPairing] = field(default_factory=list)
    cross_group: List[MatchPairing] = field(default_factory=list)

    @property
    def paired_ids(self) -> List[str]:
        return [cid for pair in self.pairings for cid in pair]
