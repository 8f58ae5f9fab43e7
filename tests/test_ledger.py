import pytest

from bo1swiss.controllers.tournament.ledger import (
    compute_records,
    match_win_rate,
    opponents_of,
    record_of,
)
from bo1swiss.models.tournament import Match, Outcome, TournamentConfig


def _three_player_round(make_tournament, ids, config=None):
    tournament = make_tournament(["Ann", "Ben", "Cat"], config=config)
    p = ids(tournament)
    tournament.current_round = 1
    tournament.matches = [
        Match.paired(1, 1, p["Ann"], p["Ben"]),
        Match.bye(1, 2, p["Cat"]),
    ]
    return tournament, p


def test_bye_counts_as_win(make_tournament, ids):
    tournament, p = _three_player_round(make_tournament, ids)

    record = record_of(tournament, p["Cat"])
    assert (record.wins, record.losses, record.draws) == (1, 0, 0)
    assert record.points == 3
    assert record.match_win_rate == 1.0


def test_unreported_matches_are_ignored(make_tournament, ids):
    tournament, p = _three_player_round(make_tournament, ids)

    record = record_of(tournament, p["Ann"])
    assert record.games_played == 0
    assert record.points == 0
    assert match_win_rate(tournament, p["Ann"]) == 0.0


def test_reported_win_and_loss(make_tournament, ids):
    tournament, p = _three_player_round(make_tournament, ids)
    tournament.set_outcome("1-1", Outcome.SECOND_WINS)

    records = compute_records(tournament)
    assert records[p["Ben"]].wins == 1
    assert records[p["Ben"]].points == 3
    assert records[p["Ann"]].losses == 1
    assert records[p["Ann"]].points == 0
    assert records[p["Ann"]] == record_of(tournament, p["Ann"])


def test_draw_is_half_a_win(make_tournament, ids):
    tournament, p = _three_player_round(make_tournament, ids)
    tournament.set_outcome("1-1", Outcome.DRAW)

    record = record_of(tournament, p["Ann"])
    assert record.draws == 1
    assert record.points == 1
    assert record.match_win_rate == pytest.approx(0.5)


def test_custom_point_values(make_tournament, ids):
    config = TournamentConfig(points_per_win=2, points_per_draw=1, points_per_loss=1)
    tournament, p = _three_player_round(make_tournament, ids, config=config)
    tournament.set_outcome("1-1", Outcome.FIRST_WINS)

    assert record_of(tournament, p["Ann"]).points == 2
    assert record_of(tournament, p["Ben"]).points == 1
    assert record_of(tournament, p["Cat"]).points == 2


def test_opponents_include_pending_and_exclude_byes(make_tournament, ids):
    tournament, p = _three_player_round(make_tournament, ids)

    assert opponents_of(tournament, p["Ann"]) == [p["Ben"]]
    assert opponents_of(tournament, p["Cat"]) == []


def test_forced_rematch_lists_opponent_twice(make_tournament, ids):
    tournament = make_tournament(["Ann", "Ben"])
    p = ids(tournament)
    tournament.current_round = 2
    tournament.matches = [
        Match.paired(1, 1, p["Ann"], p["Ben"]),
        Match.paired(2, 1, p["Ann"], p["Ben"]),
    ]

    assert opponents_of(tournament, p["Ben"]) == [p["Ann"], p["Ann"]]
