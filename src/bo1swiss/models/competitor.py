"""A competitor in a Bo1 Swiss tournament."""

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
from typing import Any, Dict

from bo1swiss.utils import generate_id


@dataclass
class Competitor:
    """Represents a competitor in the tournament.

    Records (wins, points, opponents) are never stored here; they are derived
    from the tournament's match log by the ledger.

    Attributes
    ----------
    name : str
        Display name, unique case-insensitively within a tournament.
    id : str
        Opaque unique token.
    active : bool
        False once the competitor has dropped. Dropped competitors keep their
        matches but are no longer paired or ranked.
    had_bye : bool
        Set when the competitor receives a bye, so a second bye is avoided.
    """

    name: str
    id: str = field(default_factory=lambda: generate_id("competitor"))
    active: bool = True
    had_bye: bool = False

    @property
    def dropped(self) -> bool:
        """Has the competitor left the tournament?"""
        return not self.active

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competitor to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "active": self.active,
            "had_bye": self.had_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        """Deserialize competitor from dictionary."""
        return cls(
            name=data["name"],
            id=str(data["id"]),
            active=bool(data.get("active", True)),
            had_bye=bool(data.get("had_bye", False)),
        )
