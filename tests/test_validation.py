from bo1swiss.models.tournament import Match
from bo1swiss.validation import (
    CheckStatus,
    Severity,
    TournamentValidator,
    validate_tournament,
)


def _checks(report, check):
    return [r for r in report.results if r.check == check]


def test_engine_rounds_pass_every_check(make_tournament, report):
    tournament = make_tournament(["A", "B", "C", "D", "E", "F", "G"])
    for _ in range(3):
        tournament.advance_round()
        report(tournament)

    result = TournamentValidator().validate(tournament)

    assert result.is_valid
    assert len(result.results) == 9
    assert result.compliance_percentage == 100.0


def test_competitor_twice_in_a_round(make_tournament, ids):
    tournament = make_tournament(["A", "B", "C"])
    p = ids(tournament)
    tournament.current_round = 1
    tournament.matches = [
        Match.paired(1, 1, p["A"], p["B"]),
        Match.paired(1, 2, p["B"], p["C"]),
    ]

    result = TournamentValidator().validate(tournament)

    assert not result.is_valid
    assert _checks(result, "partition")[0].status == CheckStatus.VIOLATION


def test_repeat_bye_while_others_had_none(make_tournament, ids):
    tournament = make_tournament(["A", "B", "C"])
    p = ids(tournament)
    tournament.current_round = 2
    tournament.matches = [
        Match.paired(1, 1, p["A"], p["B"]),
        Match.bye(1, 2, p["C"]),
        Match.paired(2, 1, p["A"], p["B"]),
        Match.bye(2, 2, p["C"]),
    ]

    result = TournamentValidator().validate(tournament)

    bye_checks = _checks(result, "repeat_bye")
    assert bye_checks[0].status == CheckStatus.PASSED
    assert bye_checks[1].status == CheckStatus.VIOLATION
    assert bye_checks[1].severity == Severity.ABSOLUTE


def test_unavoidable_rematch_passes(make_tournament, ids):
    tournament = make_tournament(["A", "B"])
    p = ids(tournament)
    tournament.current_round = 2
    tournament.matches = [
        Match.paired(1, 1, p["A"], p["B"]),
        Match.paired(2, 1, p["A"], p["B"]),
    ]

    result = TournamentValidator().validate(tournament)

    assert result.is_valid
    assert all(r.status == CheckStatus.PASSED for r in _checks(result, "rematch"))


def test_avoidable_rematch_is_a_quality_warning(make_tournament, ids):
    tournament = make_tournament(["A", "B", "C", "D"])
    p = ids(tournament)
    tournament.current_round = 2
    tournament.matches = [
        Match.paired(1, 1, p["A"], p["B"]),
        Match.paired(1, 2, p["C"], p["D"]),
        Match.paired(2, 1, p["A"], p["B"]),
        Match.paired(2, 2, p["C"], p["D"]),
    ]

    result = TournamentValidator().validate(tournament)

    assert result.is_valid
    assert [w.round_number for w in result.quality_warnings] == [2]


def test_validate_tournament_shortcut(make_tournament, ids):
    tournament = make_tournament(["A", "B"])
    p = ids(tournament)
    tournament.current_round = 1
    tournament.matches = [Match.paired(1, 1, p["A"], p["A"])]

    result = validate_tournament(tournament)

    assert not result.is_valid
    assert result.violations[0].check == "partition"
