"""Tournament integrity checker - audits the pairing history of a tournament.

Replays the match log round by round and checks each round's pairings
against the rules of the Bo1 Swiss pairer:

- Partition: nobody plays twice in a round or against themselves, every
  match references a known competitor and a round has at most one bye.
- Byes: nobody receives a second bye while a competitor without one was
  available in that round.
- Rematches: a round repeats a pairing only when no rematch-free pairing of
  its paired competitors existed.
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

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Set

from bo1swiss.models.tournament import Match, PairingHistory
from bo1swiss.pairing import has_rematch_free_pairing
from bo1swiss.utils import setup_logger

if TYPE_CHECKING:
    from bo1swiss.tournament import Tournament

logger = setup_logger(__name__)


class CheckStatus(Enum):
    """Outcome of a single integrity check."""

    PASSED = "PASSED"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class Severity(Enum):
    """How serious a violation is."""

    ABSOLUTE = "ABSOLUTE"  # The pairer must never produce this
    QUALITY = "QUALITY"  # Allowed, but worth flagging


@dataclass
class CheckResult:
    """Result of one check on one round."""

    check: str
    status: CheckStatus
    round_number: Optional[int] = None
    severity: Optional[Severity] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CheckStatus.VIOLATION


@dataclass
class ValidationReport:
    """All check results of a tournament audit."""

    results: List[CheckResult] = field(default_factory=list)
    summary: str = ""

    @property
    def violations(self) -> List[CheckResult]:
        return [
            r for r in self.results
            if r.is_violation and r.severity == Severity.ABSOLUTE
        ]

    @property
    def quality_warnings(self) -> List[CheckResult]:
        return [
            r for r in self.results
            if r.is_violation and r.severity == Severity.QUALITY
        ]

    @property
    def is_valid(self) -> bool:
        """True when no absolute rule was broken."""
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        applicable = [r for r in self.results if r.status != CheckStatus.NOT_APPLICABLE]
        if not applicable:
            return 100.0
        passed = sum(1 for r in applicable if r.status == CheckStatus.PASSED)
        return (passed / len(applicable)) * 100.0


class TournamentValidator:
    """Audits a tournament's rounds."""

    def check_partition(
        self, round_number: int, matches: List[Match], known_ids: Set[str]
    ) -> CheckResult:
        """Each competitor appears at most once in the round."""
        seen: Set[str] = set()
        byes = 0
        for match in matches:
            if match.is_bye:
                byes += 1
            elif match.first_id == match.second_id:
                return self._violation(
                    "partition",
                    round_number,
                    f"Match {match.id} pairs {match.first_id} with itself",
                    match_id=match.id,
                )
            for competitor_id in match.participants:
                if competitor_id not in known_ids:
                    return self._violation(
                        "partition",
                        round_number,
                        f"Match {match.id} references unknown competitor {competitor_id}",
                        match_id=match.id,
                    )
                if competitor_id in seen:
                    return self._violation(
                        "partition",
                        round_number,
                        f"{competitor_id} appears twice in round {round_number}",
                        competitor_id=competitor_id,
                    )
                seen.add(competitor_id)

        if byes > 1:
            return self._violation(
                "partition",
                round_number,
                f"Round {round_number} has {byes} byes",
                byes=byes,
            )
        return CheckResult(
            check="partition",
            status=CheckStatus.PASSED,
            round_number=round_number,
            description=f"{len(seen)} competitors placed once each",
        )

    def check_no_repeat_bye(
        self, round_number: int, matches: List[Match], prior_byes: Set[str]
    ) -> CheckResult:
        """A second bye is only allowed once every participant has had one."""
        bye = next((m for m in matches if m.is_bye), None)
        if bye is None:
            return CheckResult(
                check="repeat_bye",
                status=CheckStatus.NOT_APPLICABLE,
                round_number=round_number,
                description="No bye assigned in this round",
            )

        recipient = bye.first_id
        if recipient not in prior_byes:
            return CheckResult(
                check="repeat_bye",
                status=CheckStatus.PASSED,
                round_number=round_number,
                description=f"Bye assignment valid: {recipient}",
            )

        participants = {cid for m in matches for cid in m.participants}
        if participants <= prior_byes:
            return CheckResult(
                check="repeat_bye",
                status=CheckStatus.VIOLATION,
                round_number=round_number,
                severity=Severity.QUALITY,
                description=f"Second bye for {recipient}: every participant had one",
                details={"competitor_id": recipient},
            )
        return self._violation(
            "repeat_bye",
            round_number,
            f"Repeat bye for {recipient} while others had none",
            competitor_id=recipient,
        )

    def check_rematches(
        self, round_number: int, matches: List[Match], history: PairingHistory
    ) -> CheckResult:
        """Rematches are only allowed when no rematch-free pairing existed.

        The pairer works per score group, so a rematch can appear even though
        the round as a whole could have avoided it. That case is flagged as a
        quality warning, not an absolute violation.
        """
        paired = [m for m in matches if not m.is_bye]
        rematches = [m for m in paired if history.have_played(m.first_id, m.second_id)]
        if not rematches:
            return CheckResult(
                check="rematch",
                status=CheckStatus.PASSED,
                round_number=round_number,
                description="No rematches",
            )

        ids = [cid for m in paired for cid in m.participants]
        if not has_rematch_free_pairing(ids, history):
            return CheckResult(
                check="rematch",
                status=CheckStatus.PASSED,
                round_number=round_number,
                description=f"{len(rematches)} rematch(es), all unavoidable",
                details={"matches": [m.id for m in rematches]},
            )
        return CheckResult(
            check="rematch",
            status=CheckStatus.VIOLATION,
            round_number=round_number,
            severity=Severity.QUALITY,
            description=(
                f"{len(rematches)} rematch(es) in a round that could have avoided them"
            ),
            details={"matches": [m.id for m in rematches]},
        )

    def validate(self, tournament: Tournament) -> ValidationReport:
        """Replay every round of ``tournament`` and check it."""
        logger.info("Starting integrity validation of %s", tournament.name)

        known_ids = {c.id for c in tournament.competitors}
        history = PairingHistory()
        prior_byes: Set[str] = set()
        results: List[CheckResult] = []

        for round_number in range(1, tournament.current_round + 1):
            matches = [m for m in tournament.matches if m.round_number == round_number]
            results.append(self.check_partition(round_number, matches, known_ids))
            results.append(self.check_no_repeat_bye(round_number, matches, prior_byes))
            results.append(self.check_rematches(round_number, matches, history))

            for match in matches:
                if match.is_bye:
                    prior_byes.add(match.first_id)
                else:
                    history.add_pairing(match.first_id, match.second_id)

        report = ValidationReport(results=results)
        if report.is_valid:
            report.summary = (
                f"All absolute checks passed over {tournament.current_round} round(s); "
                f"{len(report.quality_warnings)} quality warning(s)"
            )
        else:
            report.summary = (
                f"{len(report.violations)} violation(s) detected; "
                f"{len(report.quality_warnings)} quality warning(s)"
            )
        logger.info("Integrity validation complete: %s", report.summary)
        return report

    def _violation(self, check: str, round_number: int, description: str, **details) -> CheckResult:
        return CheckResult(
            check=check,
            status=CheckStatus.VIOLATION,
            round_number=round_number,
            severity=Severity.ABSOLUTE,
            description=description,
            details=details,
        )


def validate_tournament(tournament: Tournament) -> ValidationReport:
    """Quick validation function for a whole tournament."""
    return TournamentValidator().validate(tournament)
