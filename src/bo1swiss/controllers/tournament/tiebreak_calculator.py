"""Tiebreak calculation and standings for Bo1 Swiss tournaments."""

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

import functools
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Dict, List, Optional

from bo1swiss.constants import (
    DEFAULT_TIEBREAK_SORT_ORDER,
    TB_MATCH_WIN,
    TB_OMW,
    TB_SOS,
)
from bo1swiss.controllers.tournament.ledger import (
    Record,
    compute_records,
    opponent_map,
)
from bo1swiss.utils import setup_logger

if TYPE_CHECKING:
    from bo1swiss.tournament import Tournament

logger = setup_logger(__name__)


@dataclass(frozen=True)
class StandingRow:
    """One line of the standings table."""

    rank: int
    competitor_id: str
    name: str
    wins: int
    losses: int
    draws: int
    points: int
    match_win_rate: float
    omw: float
    sos: int

    @property
    def tiebreakers(self) -> Dict[str, float]:
        return {TB_OMW: self.omw, TB_SOS: self.sos, TB_MATCH_WIN: self.match_win_rate}


class TiebreakCalculator:
    """Calculates tiebreak scores for tournament standings.

    Tiebreaks, in the order they are applied after match points:
    - OMW%: mean match-win rate of the opponents met, a repeated opponent
      counted once per meeting
    - SOS: sum of the opponents' current match points
    - MW%: the competitor's own match-win rate
    - Name: case-insensitive alphabetical order, which makes the ranking a
      strict total order since names are unique

    Byes are not opponents, so a competitor who only ever had byes has an
    OMW% and SOS of zero.
    """

    def __init__(self, tiebreak_order: Optional[List[str]] = None) -> None:
        self.tiebreak_order = list(tiebreak_order or DEFAULT_TIEBREAK_SORT_ORDER)

    def opponents_match_win_average(
        self,
        tournament: Tournament,
        competitor_id: str,
        records: Optional[Dict[str, Record]] = None,
        opponents: Optional[Dict[str, List[str]]] = None,
    ) -> float:
        """Calculate OMW% for a competitor.

        Args:
            tournament: The tournament
            competitor_id: Competitor to calculate for
            records: Precomputed ledger records, computed if omitted
            opponents: Precomputed opponent lists, computed if omitted

        Returns:
            Mean of the opponents' match-win rates, 0.0 without opponents
        """
        records = records if records is not None else compute_records(tournament)
        opponents = opponents if opponents is not None else opponent_map(tournament)
        opps = opponents.get(competitor_id, [])
        if not opps:
            return 0.0
        return sum(records[o].match_win_rate for o in opps) / len(opps)

    def sum_of_opponents_points(
        self,
        tournament: Tournament,
        competitor_id: str,
        records: Optional[Dict[str, Record]] = None,
        opponents: Optional[Dict[str, List[str]]] = None,
    ) -> int:
        """Calculate SOS: the sum (not the mean) of the opponents' points."""
        records = records if records is not None else compute_records(tournament)
        opponents = opponents if opponents is not None else opponent_map(tournament)
        return sum(records[o].points for o in opponents.get(competitor_id, []))

    def standings(self, tournament: Tournament) -> List[StandingRow]:
        """Rank the active competitors.

        Args:
            tournament: The tournament to rank

        Returns:
            StandingRow list, best first, with 1-based ranks
        """
        records = compute_records(tournament)
        opponents = opponent_map(tournament)

        rows = []
        for competitor in tournament.competitors:
            if not competitor.active:
                continue
            record = records[competitor.id]
            rows.append(
                StandingRow(
                    rank=0,
                    competitor_id=competitor.id,
                    name=competitor.name,
                    wins=record.wins,
                    losses=record.losses,
                    draws=record.draws,
                    points=record.points,
                    match_win_rate=record.match_win_rate,
                    omw=self.opponents_match_win_average(
                        tournament, competitor.id, records, opponents
                    ),
                    sos=self.sum_of_opponents_points(
                        tournament, competitor.id, records, opponents
                    ),
                )
            )

        rows.sort(key=functools.cmp_to_key(self._compare_rows))
        ranked = [replace(row, rank=index) for index, row in enumerate(rows, start=1)]
        logger.debug("Computed standings for %s competitors", len(ranked))
        return ranked

    def _compare_rows(self, row1: StandingRow, row2: StandingRow) -> int:
        """Compare two rows for standings order.

        Returns:
            -1 if row1 ranks higher, 1 if row2 ranks higher, 0 if equal
        """
        if row1.points != row2.points:
            return -1 if row1.points > row2.points else 1

        tb1, tb2 = row1.tiebreakers, row2.tiebreakers
        for tb_key in self.tiebreak_order:
            if tb1[tb_key] != tb2[tb_key]:
                return -1 if tb1[tb_key] > tb2[tb_key] else 1

        name1, name2 = row1.name.casefold(), row2.name.casefold()
        if name1 != name2:
            return -1 if name1 < name2 else 1

        # Only reachable with duplicate names, which the roster rejects
        if row1.competitor_id != row2.competitor_id:
            return -1 if row1.competitor_id < row2.competitor_id else 1
        return 0
