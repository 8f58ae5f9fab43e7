"""Match data class."""

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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from bo1swiss.constants import (
    OUTCOME_AUTO_WIN_FIRST,
    OUTCOME_DRAW,
    OUTCOME_FIRST_WINS,
    OUTCOME_SECOND_WINS,
    OUTCOME_UNREPORTED,
)


class Outcome(str, Enum):
    """Outcome of a single best-of-one match."""

    UNREPORTED = OUTCOME_UNREPORTED
    FIRST_WINS = OUTCOME_FIRST_WINS
    SECOND_WINS = OUTCOME_SECOND_WINS
    DRAW = OUTCOME_DRAW
    AUTO_WIN_FIRST = OUTCOME_AUTO_WIN_FIRST


def make_match_id(round_number: int, table: int) -> str:
    """Match ids are stable: round number and table, e.g. ``"3-2"``."""
    return f"{round_number}-{table}"


@dataclass
class Match:
    """Represents one match of a round.

    Attributes
    ----------
    id : str
        Unique within the tournament.
    round_number : int
        Round the match belongs to (1-indexed).
    first_id : str
        Higher ranked competitor, or the bye recipient.
    second_id : str or None
        Lower ranked competitor; None marks a bye.
    outcome : Outcome
        Result of the match.
    reported : bool
        Whether the outcome counts toward records.
    """

    id: str
    round_number: int
    first_id: str
    second_id: Optional[str]
    outcome: Outcome = Outcome.UNREPORTED
    reported: bool = False

    @classmethod
    def paired(
        cls, round_number: int, table: int, first_id: str, second_id: str
    ) -> "Match":
        """Create an unreported match between two competitors."""
        return cls(
            id=make_match_id(round_number, table),
            round_number=round_number,
            first_id=first_id,
            second_id=second_id,
        )

    @classmethod
    def bye(cls, round_number: int, table: int, competitor_id: str) -> "Match":
        """Create the auto-win match of a bye recipient. It is final at creation."""
        return cls(
            id=make_match_id(round_number, table),
            round_number=round_number,
            first_id=competitor_id,
            second_id=None,
            outcome=Outcome.AUTO_WIN_FIRST,
            reported=True,
        )

    @property
    def is_bye(self) -> bool:
        return self.second_id is None

    @property
    def participants(self) -> Tuple[str, ...]:
        if self.second_id is None:
            return (self.first_id,)
        return (self.first_id, self.second_id)

    def involves(self, competitor_id: str) -> bool:
        return competitor_id in self.participants

    def opponent_of(self, competitor_id: str) -> Optional[str]:
        """The other competitor of this match, None for a bye."""
        if competitor_id == self.first_id:
            return self.second_id
        if competitor_id == self.second_id:
            return self.first_id
        raise ValueError(f"{competitor_id} did not play in match {self.id}")

    @property
    def winner_id(self) -> Optional[str]:
        """Winner of a reported match, None for draws and pending matches."""
        if not self.reported:
            return None
        if self.outcome in (Outcome.FIRST_WINS, Outcome.AUTO_WIN_FIRST):
            return self.first_id
        if self.outcome == Outcome.SECOND_WINS:
            return self.second_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "first_id": self.first_id,
            "second_id": self.second_id,
            "outcome": self.outcome.value,
            "reported": self.reported,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Raises:
            ValueError: If the outcome is not a known value
        """
        second_id = data.get("second_id")
        return cls(
            id=str(data["id"]),
            round_number=int(data["round_number"]),
            first_id=str(data["first_id"]),
            second_id=None if second_id is None else str(second_id),
            outcome=Outcome(data.get("outcome", OUTCOME_UNREPORTED)),
            reported=bool(data.get("reported", False)),
        )
