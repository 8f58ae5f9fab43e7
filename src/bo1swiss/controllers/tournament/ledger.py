"""Record ledger: per-competitor records derived from the match log.

Every function here is a pure function of the tournament's matches and
configuration. Nothing is cached between calls, so edits to any reported
result show up in the next query.
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

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from bo1swiss.constants import DRAW_WIN_WEIGHT
from bo1swiss.models.tournament.match import Match, Outcome

if TYPE_CHECKING:
    from bo1swiss.models.tournament.tournament_config import TournamentConfig
    from bo1swiss.tournament import Tournament


@dataclass(frozen=True)
class Record:
    """Win/loss/draw counts and match points of one competitor."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
    points: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def match_win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return (self.wins + DRAW_WIN_WEIGHT * self.draws) / self.games_played


def _result_for(match: Match, competitor_id: str) -> str:
    """Classify a counted match as ``"win"``, ``"loss"`` or ``"draw"``."""
    if match.is_bye:
        return "win"
    if match.outcome == Outcome.DRAW:
        return "draw"
    return "win" if match.winner_id == competitor_id else "loss"


def _counts(match: Match) -> bool:
    """Byes always count; paired matches only once reported."""
    return match.is_bye or (match.reported and match.outcome != Outcome.UNREPORTED)


def _build_record(
    wins: int, losses: int, draws: int, config: TournamentConfig
) -> Record:
    points = (
        wins * config.points_per_win
        + draws * config.points_per_draw
        + losses * config.points_per_loss
    )
    return Record(wins=wins, losses=losses, draws=draws, points=points)


def record_of(tournament: Tournament, competitor_id: str) -> Record:
    """Compute the record of a single competitor.

    Args:
        tournament: Tournament whose match log is scanned
        competitor_id: Competitor to compute the record for

    Returns:
        The competitor's Record. Unreported matches are ignored and a bye
        counts as a win.
    """
    tally = {"win": 0, "loss": 0, "draw": 0}
    for match in tournament.matches:
        if match.involves(competitor_id) and _counts(match):
            tally[_result_for(match, competitor_id)] += 1
    return _build_record(tally["win"], tally["loss"], tally["draw"], tournament.config)


def compute_records(tournament: Tournament) -> Dict[str, Record]:
    """Compute the records of every competitor, dropped ones included, in one pass."""
    tallies: Dict[str, Dict[str, int]] = {
        c.id: {"win": 0, "loss": 0, "draw": 0} for c in tournament.competitors
    }
    for match in tournament.matches:
        if not _counts(match):
            continue
        for competitor_id in match.participants:
            tally = tallies.setdefault(competitor_id, {"win": 0, "loss": 0, "draw": 0})
            tally[_result_for(match, competitor_id)] += 1
    return {
        cid: _build_record(t["win"], t["loss"], t["draw"], tournament.config)
        for cid, t in tallies.items()
    }


def match_win_rate(tournament: Tournament, competitor_id: str) -> float:
    """Share of games won, draws counting half; 0.0 before any game."""
    return record_of(tournament, competitor_id).match_win_rate


def opponents_of(tournament: Tournament, competitor_id: str) -> List[str]:
    """Opponents met in non-bye matches, in match-log order.

    Pending matches are included. A forced rematch lists the opponent twice.
    """
    return [
        match.opponent_of(competitor_id)
        for match in tournament.matches
        if not match.is_bye and match.involves(competitor_id)
    ]


def opponent_map(tournament: Tournament) -> Dict[str, List[str]]:
    """:func:`opponents_of` for every competitor in one pass."""
    opponents: Dict[str, List[str]] = {c.id: [] for c in tournament.competitors}
    for match in tournament.matches:
        if match.is_bye:
            continue
        opponents.setdefault(match.first_id, []).append(match.second_id)
        opponents.setdefault(match.second_id, []).append(match.first_id)
    return opponents
