"""Rematch lookups over a tournament's match log."""

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
from typing import Iterable, Set

from .match import Match


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent repeat matches.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Set containing frozensets of competitor ID pairs representing
        non-bye matches that already exist, in any round and whatever
        their reporting state.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "PairingHistory":
        """Build the history from a match log. Byes are skipped."""
        history = cls()
        for match in matches:
            if not match.is_bye:
                history.add_pairing(match.first_id, match.second_id)
        return history

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two competitors have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two competitors have previously been paired."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def __len__(self) -> int:
        return len(self.previous_matches)
