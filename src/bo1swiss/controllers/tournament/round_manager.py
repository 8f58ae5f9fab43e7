"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression and the termination check.
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
from typing import TYPE_CHECKING, List, Optional

from bo1swiss.constants import STATE_COMPLETED, STATE_IN_PROGRESS, STATE_NOT_STARTED
from bo1swiss.controllers.tournament.ledger import compute_records
from bo1swiss.controllers.tournament.tiebreak_calculator import TiebreakCalculator
from bo1swiss.exceptions import (
    IncompleteReportsException,
    NotEnoughActiveException,
    TournamentCompletedException,
    TournamentStateException,
)
from bo1swiss.models.competitor import Competitor
from bo1swiss.models.pairing import PairingResult
from bo1swiss.models.tournament.match import Match
from bo1swiss.models.tournament.pairing_history import PairingHistory
from bo1swiss.pairing import apply_bye, create_score_group_pairings
from bo1swiss.utils import setup_logger

if TYPE_CHECKING:
    from bo1swiss.tournament import Tournament

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Checking that a new round may be generated
    - Running the score-group pairer and storing its matches
    - Applying the bye
    - Deciding when the tournament is over
    """

    def __init__(
        self,
        tiebreak_calculator: TiebreakCalculator,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the round manager.

        Args:
            tiebreak_calculator: Calculator providing the ranking used for pairing
            rng: Random source for the round-1 bye, a fresh one if omitted
        """
        self.tiebreak_calculator = tiebreak_calculator
        self.rng = rng or random.Random()

    # ========== Queries ==========

    def get_round(self, tournament: Tournament, round_number: int) -> List[Match]:
        """Get the matches of a round (1-indexed), empty if it does not exist."""
        return [m for m in tournament.matches if m.round_number == round_number]

    def current_round_matches(self, tournament: Tournament) -> List[Match]:
        return self.get_round(tournament, tournament.current_round)

    def all_reported_current_round(self, tournament: Tournament) -> bool:
        """Are all non-bye matches of the current round reported?"""
        if tournament.current_round == 0:
            return True
        return all(
            m.reported for m in self.current_round_matches(tournament) if not m.is_bye
        )

    def undefeated_competitors(self, tournament: Tournament) -> List[Competitor]:
        """Active competitors without a reported loss."""
        records = compute_records(tournament)
        return [
            c
            for c in tournament.competitors
            if c.active and records[c.id].losses == 0
        ]

    def is_completed(self, tournament: Tournament) -> bool:
        """Has the tournament met its termination condition?

        Evaluated on demand from the match log, never stored.
        """
        termination = tournament.config.termination
        if termination.is_fixed_rounds:
            return tournament.current_round >= termination.rounds
        if tournament.current_round == 0:
            return False
        return len(self.undefeated_competitors(tournament)) == 1

    def champion(self, tournament: Tournament) -> Optional[Competitor]:
        """The winner of a completed tournament, None while undecided.

        Single-undefeated events are won by the last undefeated competitor.
        Fixed-round events are won by the standings leader once the final
        round is fully reported.
        """
        if not self.is_completed(tournament):
            return None
        if tournament.config.termination.is_fixed_rounds:
            if not self.all_reported_current_round(tournament):
                return None
            standings = self.tiebreak_calculator.standings(tournament)
            if not standings:
                return None
            return tournament.get_competitor(standings[0].competitor_id)
        return self.undefeated_competitors(tournament)[0]

    def state(self, tournament: Tournament) -> str:
        if tournament.current_round == 0:
            return STATE_NOT_STARTED
        if self.is_completed(tournament):
            return STATE_COMPLETED
        return STATE_IN_PROGRESS

    # ========== Transitions ==========

    def create_next_round(self, tournament: Tournament) -> List[Match]:
        """Generate, store and return the matches of the next round.

        Raises:
            TournamentCompletedException: If the tournament is already over
            IncompleteReportsException: If the current round has pending matches
            NotEnoughActiveException: With fewer than two active competitors
        """
        if self.is_completed(tournament):
            raise TournamentCompletedException(
                f"Tournament is over after round {tournament.current_round}"
            )
        if not self.all_reported_current_round(tournament):
            pending = sum(
                1
                for m in self.current_round_matches(tournament)
                if not m.is_bye and not m.reported
            )
            raise IncompleteReportsException(
                f"Round {tournament.current_round} still has {pending} unreported match(es)"
            )
        active_count = len(tournament.active_competitors())
        if active_count < 2:
            raise NotEnoughActiveException(
                f"Need at least 2 active competitors, have {active_count}"
            )

        round_number = tournament.current_round + 1
        logger.info(
            f"Creating round {round_number} with {active_count} active competitors"
        )

        result = self._create_pairings(tournament)
        matches = self._build_matches(round_number, result)

        tournament.matches.extend(matches)
        if result.bye_player_id is not None:
            apply_bye(tournament, result.bye_player_id)
        tournament.current_round = round_number

        logger.info(
            f"Created pairings for round {round_number}: "
            f"{len(result.pairings)} games, bye: {result.bye_player_id or 'None'}"
        )
        return matches

    def _create_pairings(self, tournament: Tournament) -> PairingResult:
        standings = self.tiebreak_calculator.standings(tournament)
        return create_score_group_pairings(
            ranked_ids=[row.competitor_id for row in standings],
            points={row.competitor_id: row.points for row in standings},
            competitors=tournament.competitor_map(),
            history=PairingHistory.from_matches(tournament.matches),
            first_round=tournament.current_round == 0,
            rng=self.rng,
        )

    def _build_matches(self, round_number: int, result: PairingResult) -> List[Match]:
        matches = [
            Match.paired(round_number, table, first_id, second_id)
            for table, (first_id, second_id) in enumerate(result.pairings, start=1)
        ]
        if result.bye_player_id is not None:
            matches.append(
                Match.bye(round_number, len(matches) + 1, result.bye_player_id)
            )
        return matches

    def undo_last_round(self, tournament: Tournament) -> List[Match]:
        """Remove the current round while none of its games has a result.

        The bye flag of the round's bye recipient is recomputed from the
        remaining byes.

        Returns:
            The removed matches

        Raises:
            TournamentStateException: If no round exists or a result is reported
        """
        if tournament.current_round == 0:
            raise TournamentStateException("Cannot undo: no rounds exist")

        last_round = self.current_round_matches(tournament)
        if any(m.reported for m in last_round if not m.is_bye):
            raise TournamentStateException(
                f"Cannot undo round {tournament.current_round}: results are reported"
            )

        removed_ids = {m.id for m in last_round}
        tournament.matches = [m for m in tournament.matches if m.id not in removed_ids]
        for match in last_round:
            if match.is_bye:
                competitor = tournament.get_competitor(match.first_id)
                if competitor is not None:
                    competitor.had_bye = any(
                        m.is_bye and m.first_id == competitor.id
                        for m in tournament.matches
                    )

        logger.info(f"Undid round {tournament.current_round}")
        tournament.current_round -= 1
        return last_round
