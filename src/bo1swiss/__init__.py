"""Bo1 Swiss: Swiss-system pairing and ranking for best-of-one events."""

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

from bo1swiss.controllers.tournament import StandingRow
from bo1swiss.models.competitor import Competitor
from bo1swiss.models.tournament import (
    Match,
    Outcome,
    TerminationMode,
    TournamentConfig,
    recommend_rounds,
)
from bo1swiss.tournament import Tournament, create_tournament

__version__ = "0.1.0"

__all__ = [
    "Competitor",
    "Match",
    "Outcome",
    "StandingRow",
    "TerminationMode",
    "Tournament",
    "TournamentConfig",
    "create_tournament",
    "recommend_rounds",
]
