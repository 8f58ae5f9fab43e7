"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
specialized managers over a single owned roster and match log.
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

import random
from typing import Any, Dict, List, Optional, Union

from bo1swiss.constants import DEFAULT_TOURNAMENT_NAME
from bo1swiss.controllers.tournament import (
    Record,
    ResultRecorder,
    RoundManager,
    StandingRow,
    TiebreakCalculator,
    compute_records,
    record_of,
)
from bo1swiss.exceptions import (
    DuplicateNameException,
    PendingMatchException,
    PlayerNotFoundException,
)
from bo1swiss.models.competitor import Competitor
from bo1swiss.models.tournament import (
    Match,
    Outcome,
    PairingHistory,
    TournamentConfig,
    recommend_rounds,
)
from bo1swiss.utils import setup_logger
from bo1swiss.utils.validation import is_name_taken, validate_name_strict

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: handles round creation, pairing and termination
    - ResultRecorder: manages result entry and validation
    - TiebreakCalculator: computes standings and tiebreak scores

    The Tournament owns its competitors and matches. Records and standings
    are never stored; they are derived from the match log on every query.
    """

    def __init__(
        self,
        name: str = DEFAULT_TOURNAMENT_NAME,
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a new tournament at round 0 with an empty roster.

        Args
        ----
        name: Tournament name
        config: Scoring and termination settings, defaults if omitted
        rng: Random source for the round-1 bye, seed it for reproducible draws
        """
        self.name = name
        self.config = config or TournamentConfig()
        self.current_round = 0
        self.competitors: List[Competitor] = []
        self.matches: List[Match] = []
        self.suggested_rounds = 0

        # Specialized managers
        self.tiebreak_calculator = TiebreakCalculator()
        self.round_manager = RoundManager(self.tiebreak_calculator, rng=rng)
        self.result_recorder = ResultRecorder()

    # ========== Properties ==========

    @property
    def state(self) -> str:
        """``"not_started"``, ``"in_progress"`` or ``"completed"``."""
        return self.round_manager.state(self)

    @property
    def pairing_history(self) -> PairingHistory:
        """Pairs that have already met, rebuilt from the match log."""
        return PairingHistory.from_matches(self.matches)

    # ========== Competitor Management ==========

    def get_competitor(self, competitor_id: str) -> Optional[Competitor]:
        for competitor in self.competitors:
            if competitor.id == competitor_id:
                return competitor
        return None

    def competitor_map(self) -> Dict[str, Competitor]:
        return {c.id: c for c in self.competitors}

    def active_competitors(self) -> List[Competitor]:
        """Competitors that have not dropped, in roster order."""
        return [c for c in self.competitors if c.active]

    def add_competitor(self, name: str) -> Competitor:
        """Add a competitor to the roster.

        Args:
            name: Display name, unique case-insensitively

        Returns:
            The new Competitor

        Raises:
            InvalidPlayerDataException: If the name is blank or too long
            DuplicateNameException: If the name is already taken
        """
        name = validate_name_strict(name)
        if is_name_taken(name, (c.name for c in self.competitors)):
            raise DuplicateNameException(f"A competitor named {name!r} already exists")

        competitor = Competitor(name=name)
        self.competitors.append(competitor)
        self._refresh_suggested_rounds()
        logger.info(f"Added competitor: {competitor.name} ({competitor.id})")
        return competitor

    def set_active(self, competitor_id: str, active: bool) -> Competitor:
        """Drop or reinstate a competitor.

        Dropping is refused while the competitor has an unreported match in
        the current round. Reinstating is always allowed.

        Raises:
            PlayerNotFoundException: If the id is unknown
            PendingMatchException: If dropping with a pending match
        """
        competitor = self.get_competitor(competitor_id)
        if competitor is None:
            raise PlayerNotFoundException(f"No competitor with id {competitor_id}")

        if not active and self.has_pending_match(competitor_id):
            raise PendingMatchException(
                f"{competitor.name} has a pending match in round {self.current_round}"
            )

        competitor.active = active
        self._refresh_suggested_rounds()
        logger.info(f"Set {competitor.name} active status to: {active}")
        return competitor

    def drop(self, competitor_id: str) -> Competitor:
        return self.set_active(competitor_id, False)

    def undrop(self, competitor_id: str) -> Competitor:
        return self.set_active(competitor_id, True)

    def has_pending_match(self, competitor_id: str) -> bool:
        return any(
            not m.reported and m.involves(competitor_id)
            for m in self.current_round_matches()
        )

    def _refresh_suggested_rounds(self) -> None:
        # The suggestion freezes once round 1 has been generated
        if self.current_round == 0:
            self.suggested_rounds = recommend_rounds(len(self.active_competitors()))

    def recommended_rounds(self) -> int:
        """Recommended round count for the current active roster."""
        return recommend_rounds(len(self.active_competitors()))

    # ========== Records and Standings ==========

    def record_of(self, competitor_id: str) -> Record:
        return record_of(self, competitor_id)

    def records(self) -> Dict[str, Record]:
        return compute_records(self)

    def have_played(self, first_id: str, second_id: str) -> bool:
        """Have the two competitors met in any non-bye match?"""
        return self.pairing_history.have_played(first_id, second_id)

    def standings(self) -> List[StandingRow]:
        """Get current standings of the active competitors, best first."""
        return self.tiebreak_calculator.standings(self)

    # ========== Round Management ==========

    def current_round_matches(self) -> List[Match]:
        return self.round_manager.current_round_matches(self)

    def get_round(self, round_number: int) -> List[Match]:
        return self.round_manager.get_round(self, round_number)

    def all_reported_current_round(self) -> bool:
        return self.round_manager.all_reported_current_round(self)

    def advance_round(self) -> List[Match]:
        """Generate the next round.

        Returns:
            The matches of the new round, byes last

        Raises:
            TournamentCompletedException: If the tournament is already over
            IncompleteReportsException: If the current round has pending matches
            NotEnoughActiveException: With fewer than two active competitors
        """
        return self.round_manager.create_next_round(self)

    def undo_last_round(self) -> List[Match]:
        return self.round_manager.undo_last_round(self)

    def undefeated_competitors(self) -> List[Competitor]:
        return self.round_manager.undefeated_competitors(self)

    def is_completed(self) -> bool:
        return self.round_manager.is_completed(self)

    def champion(self) -> Optional[Competitor]:
        return self.round_manager.champion(self)

    # ========== Result Management ==========

    def get_match(self, match_id: str) -> Match:
        return self.result_recorder.find_match(self, match_id)

    def set_outcome(self, match_id: str, outcome: Union[Outcome, str]) -> Match:
        """Report the outcome of a paired match. See ResultRecorder.set_outcome."""
        return self.result_recorder.set_outcome(self, match_id, outcome)

    def undo_outcome(self, match_id: str) -> Match:
        return self.result_recorder.undo_outcome(self, match_id)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "name": self.name,
            "current_round": self.current_round,
            "suggested_rounds": self.suggested_rounds,
            "config": self.config.to_dict(),
            "players": [c.to_dict() for c in self.competitors],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], rng: Optional[random.Random] = None
    ) -> "Tournament":
        """Deserialize tournament from dictionary.

        No referential checks happen here; ``bo1swiss.utils.storage`` validates
        untrusted input before calling this.

        Args:
            data: Dictionary containing tournament data
            rng: Random source for later round-1 draws

        Returns:
            Reconstructed Tournament object
        """
        tournament = cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            config=TournamentConfig.from_dict(data.get("config", {})),
            rng=rng,
        )
        tournament.competitors = [Competitor.from_dict(c) for c in data["players"]]
        tournament.matches = [Match.from_dict(m) for m in data["matches"]]
        tournament.current_round = int(data.get("current_round", 0))

        suggested = data.get("suggested_rounds")
        if isinstance(suggested, int) and not isinstance(suggested, bool):
            tournament.suggested_rounds = suggested
        else:
            tournament.suggested_rounds = tournament.recommended_rounds()

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self.name!r}, round={self.current_round}, "
            f"competitors={len(self.competitors)}, matches={len(self.matches)})"
        )


def create_tournament(
    name: str = DEFAULT_TOURNAMENT_NAME,
    config: Optional[TournamentConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tournament:
    """Create an empty tournament at round 0."""
    tournament = Tournament(name=name, config=config, rng=rng)
    logger.info(f"Created tournament: {tournament.name}")
    return tournament
