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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Match points (configurable per tournament)
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Weight of a drawn game in the match-win rate
DRAW_WIN_WEIGHT = 0.5

# Outcome values (for serialization)
OUTCOME_UNREPORTED = "unreported"
OUTCOME_FIRST_WINS = "first_wins"
OUTCOME_SECOND_WINS = "second_wins"
OUTCOME_DRAW = "draw"
OUTCOME_AUTO_WIN_FIRST = "auto_win_first"  # Bye

# Termination modes
TERMINATION_FIXED_ROUNDS = "fixed_rounds"
TERMINATION_SINGLE_UNDEFEATED = "single_undefeated"
DEFAULT_TERMINATION = TERMINATION_SINGLE_UNDEFEATED

# Tournament states (derived, never stored)
STATE_NOT_STARTED = "not_started"
STATE_IN_PROGRESS = "in_progress"
STATE_COMPLETED = "completed"

# Standings columns
TB_OMW = "omw"
TB_SOS = "sos"
TB_MATCH_WIN = "mw"


# Order used for standings after points; the name is always the final key
DEFAULT_TIEBREAK_SORT_ORDER = [TB_OMW, TB_SOS, TB_MATCH_WIN]

# Suggested number of rounds by active roster size: (max players, rounds)
SUGGESTED_ROUNDS_TABLE = [
    (1, 0),
    (4, 2),
    (8, 3),
    (16, 4),
    (32, 5),
    (64, 6),
]
SUGGESTED_ROUNDS_MAX = 7

LOG_LEVEL_ENV_VAR = "BO1SWISS_LOG_LEVEL"
