import random

import pytest

from bo1swiss.models.tournament import Outcome, TournamentConfig
from bo1swiss.tournament import Tournament, create_tournament


def report_all(tournament, outcome=Outcome.FIRST_WINS):
    """Report every pending paired match of the current round."""
    for match in tournament.current_round_matches():
        if not match.is_bye and not match.reported:
            tournament.set_outcome(match.id, outcome)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_tournament():
    """Factory: a tournament with the given competitor names at round 0."""

    def _make(names, config=None, seed=1234, name="Test Bo1"):
        tournament = create_tournament(
            name, config=config or TournamentConfig(), rng=random.Random(seed)
        )
        for competitor_name in names:
            tournament.add_competitor(competitor_name)
        return tournament

    return _make


@pytest.fixture
def ids():
    """Map of name to competitor id for a tournament."""

    def _ids(tournament: Tournament):
        return {c.name: c.id for c in tournament.competitors}

    return _ids


@pytest.fixture
def report():
    return report_all
