"""Result recording and validation for tournaments.

This module handles recording match outcomes with proper validation and error checking.
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

from typing import TYPE_CHECKING, Union

from bo1swiss.exceptions import (
    InvalidResultException,
    MatchIsByeException,
    MatchNotFoundException,
)
from bo1swiss.models.tournament.match import Match, Outcome
from bo1swiss.utils import setup_logger

if TYPE_CHECKING:
    from bo1swiss.tournament import Tournament

logger = setup_logger(__name__)

REPORTABLE_OUTCOMES = (Outcome.FIRST_WINS, Outcome.SECOND_WINS, Outcome.DRAW)


class ResultRecorder:
    """Handles recording and validating match outcomes.

    This class is responsible for:
    - Recording an outcome on a paired match
    - Reverting a match to unreported (undo)
    - Refusing edits to byes and unknown matches

    Results of earlier rounds may be edited too. Standings are derived from
    the full match log, so such an edit changes every later ranking.
    """

    def find_match(self, tournament: Tournament, match_id: str) -> Match:
        """Look up a match by id.

        Raises:
            MatchNotFoundException: If no match has this id
        """
        for match in tournament.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundException(f"No match with id {match_id!r}")

    def _editable_match(self, tournament: Tournament, match_id: str) -> Match:
        match = self.find_match(tournament, match_id)
        if match.is_bye:
            raise MatchIsByeException(
                f"Match {match_id} is a bye and its result cannot be changed"
            )
        if match.round_number != tournament.current_round:
            logger.warning(
                "Editing match %s of round %s while round %s is current",
                match_id,
                match.round_number,
                tournament.current_round,
            )
        return match

    def set_outcome(
        self, tournament: Tournament, match_id: str, outcome: Union[Outcome, str]
    ) -> Match:
        """Record (or re-record) the outcome of a paired match.

        Args:
            tournament: The tournament owning the match
            match_id: Id of the match
            outcome: FIRST_WINS, SECOND_WINS or DRAW

        Returns:
            The updated match

        Raises:
            MatchNotFoundException: If the match does not exist
            MatchIsByeException: If the match is a bye
            InvalidResultException: If the outcome cannot be reported
        """
        try:
            outcome = Outcome(outcome)
        except ValueError:
            raise InvalidResultException(f"Unknown outcome: {outcome!r}") from None

        match = self._editable_match(tournament, match_id)

        if outcome not in REPORTABLE_OUTCOMES:
            raise InvalidResultException(
                f"Outcome {outcome.value!r} cannot be reported; "
                "use undo_outcome to clear a result"
            )
        if outcome == Outcome.DRAW and not tournament.config.allow_draws:
            raise InvalidResultException("Draws are not allowed in this tournament")

        match.outcome = outcome
        match.reported = True
        logger.info(f"Recorded {outcome.value} for match {match.id}")
        return match

    def undo_outcome(self, tournament: Tournament, match_id: str) -> Match:
        """Revert a paired match to unreported.

        Raises:
            MatchNotFoundException: If the match does not exist
            MatchIsByeException: If the match is a bye
        """
        match = self._editable_match(tournament, match_id)
        match.outcome = Outcome.UNREPORTED
        match.reported = False
        logger.info(f"Cleared result of match {match.id}")
        return match
