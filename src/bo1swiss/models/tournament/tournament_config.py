"""TournamentConfig data class."""

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
from typing import Any, Dict, Optional

from bo1swiss.constants import (
    DEFAULT_TERMINATION,
    DRAW_POINTS,
    LOSS_POINTS,
    SUGGESTED_ROUNDS_MAX,
    SUGGESTED_ROUNDS_TABLE,
    TERMINATION_FIXED_ROUNDS,
    TERMINATION_SINGLE_UNDEFEATED,
    WIN_POINTS,
)
from bo1swiss.exceptions import InvalidConfigurationException
from bo1swiss.type_hints import TerminationKind


@dataclass(frozen=True)
class TerminationMode:
    """When a tournament ends.

    Attributes
    ----------
    kind : str
        ``"fixed_rounds"`` or ``"single_undefeated"``.
    rounds : int or None
        Number of rounds to play, only for ``"fixed_rounds"``.
    """

    kind: TerminationKind = DEFAULT_TERMINATION
    rounds: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind == TERMINATION_FIXED_ROUNDS:
            if (
                isinstance(self.rounds, bool)
                or not isinstance(self.rounds, int)
                or self.rounds < 1
            ):
                raise InvalidConfigurationException(
                    f"Fixed rounds needs a positive round count, got {self.rounds!r}"
                )
        elif self.kind == TERMINATION_SINGLE_UNDEFEATED:
            if self.rounds is not None:
                raise InvalidConfigurationException(
                    "Single-undefeated termination takes no round count"
                )
        else:
            raise InvalidConfigurationException(
                f"Unknown termination mode: {self.kind!r}"
            )

    @classmethod
    def fixed_rounds(cls, rounds: int) -> "TerminationMode":
        return cls(kind=TERMINATION_FIXED_ROUNDS, rounds=rounds)

    @classmethod
    def single_undefeated(cls) -> "TerminationMode":
        return cls(kind=TERMINATION_SINGLE_UNDEFEATED)

    @property
    def is_fixed_rounds(self) -> bool:
        return self.kind == TERMINATION_FIXED_ROUNDS

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "rounds": self.rounds}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TerminationMode":
        return cls(
            kind=data.get("kind", DEFAULT_TERMINATION),
            rounds=data.get("rounds"),
        )


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    points_per_win : int
        Match points for a win or a bye.
    points_per_draw : int
        Match points for a draw.
    points_per_loss : int
        Match points for a loss.
    allow_draws : bool
        Whether a draw may be reported. Pure best-of-one events disable it.
    termination : TerminationMode
        Fixed number of rounds or play until a single undefeated competitor.
    """

    points_per_win: int = WIN_POINTS
    points_per_draw: int = DRAW_POINTS
    points_per_loss: int = LOSS_POINTS
    allow_draws: bool = True
    termination: TerminationMode = field(default_factory=TerminationMode)

    def __post_init__(self) -> None:
        for key in ("points_per_win", "points_per_draw", "points_per_loss"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidConfigurationException(
                    f"{key} must be a non-negative integer, got {value!r}"
                )
        if self.points_per_win <= self.points_per_loss:
            raise InvalidConfigurationException(
                "A win must be worth more points than a loss"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "points_per_win": self.points_per_win,
            "points_per_draw": self.points_per_draw,
            "points_per_loss": self.points_per_loss,
            "allow_draws": self.allow_draws,
            "termination": self.termination.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary, defaulting missing fields."""
        return cls(
            points_per_win=data.get("points_per_win", WIN_POINTS),
            points_per_draw=data.get("points_per_draw", DRAW_POINTS),
            points_per_loss=data.get("points_per_loss", LOSS_POINTS),
            allow_draws=data.get("allow_draws", True),
            termination=TerminationMode.from_dict(data.get("termination", {})),
        )


def recommend_rounds(active_count: int) -> int:
    """Suggested number of rounds for a roster of ``active_count`` competitors.

    Roughly enough rounds for a single undefeated competitor to emerge:
    0 for one competitor or fewer, then 2 up to 4, 3 up to 8 and so on, capped
    at 7.
    """
    for max_players, rounds in SUGGESTED_ROUNDS_TABLE:
        if active_count <= max_players:
            return rounds
    return SUGGESTED_ROUNDS_MAX
