"""JSON import/export of tournaments.

Everything crossing this boundary is untrusted: loaded data is checked for
structure and referential integrity before a Tournament is built from it, so
broken files fail here rather than in the middle of a standings computation.
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

import json
import random
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from bo1swiss.constants import DEFAULT_TOURNAMENT_NAME, SAVE_FILE_EXTENSION
from bo1swiss.exceptions import (
    ConfigurationException,
    FileLoadException,
    FileSaveException,
    MalformedImportException,
)
from bo1swiss.models.tournament import Outcome
from bo1swiss.tournament import Tournament
from bo1swiss.utils import setup_logger
from bo1swiss.utils.validation import normalize_name

logger = setup_logger(__name__)

PathLike = Union[str, Path]

_OUTCOME_VALUES = {o.value for o in Outcome}

# Engine-generated match ids: "<round>-<table>"
_MATCH_ID_PATTERN = re.compile(r"^([1-9][0-9]*)-[1-9][0-9]*$")


def default_filename(tournament: Tournament) -> str:
    """Export file name: the tournament name with whitespace runs as ``_``.

    Example:
        >>> default_filename(Tournament("Friday Night  Bo1"))
        'Friday_Night_Bo1.json'
    """
    name = tournament.name or DEFAULT_TOURNAMENT_NAME
    return re.sub(r"\s+", "_", name) + SAVE_FILE_EXTENSION


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_optional_bool(data: Dict[str, Any], key: str, owner: str) -> None:
    if key in data and not isinstance(data[key], bool):
        raise MalformedImportException(
            f"{owner} has non-boolean '{key}': {data[key]!r}"
        )


def _validate_config(config: Any) -> None:
    if not isinstance(config, dict):
        raise MalformedImportException("'config' must be an object")
    _check_optional_bool(config, "allow_draws", "Config")
    if "termination" in config and not isinstance(config["termination"], dict):
        raise MalformedImportException("'config.termination' must be an object")


def _validate_players(players: List[Any]) -> Set[str]:
    seen_ids: Set[str] = set()
    seen_names: Set[str] = set()
    for index, player in enumerate(players):
        if not isinstance(player, dict):
            raise MalformedImportException(f"Player #{index} is not an object")
        if not isinstance(player.get("id"), str) or not player["id"]:
            raise MalformedImportException(f"Player #{index} has no id")
        player_id = player["id"]
        if not isinstance(player.get("name"), str) or not player["name"].strip():
            raise MalformedImportException(f"Player {player_id} has no name")
        if player_id in seen_ids:
            raise MalformedImportException(f"Duplicate player id {player_id!r}")
        name_key = normalize_name(player["name"])
        if name_key in seen_names:
            raise MalformedImportException(
                f"Duplicate player name {player['name']!r}"
            )
        for key in ("active", "had_bye"):
            _check_optional_bool(player, key, f"Player {player_id}")
        seen_ids.add(player_id)
        seen_names.add(name_key)
    return seen_ids


def _validate_match_state(match: Dict[str, Any], match_id: str) -> None:
    """Outcome, reported flag and bye-ness must agree."""
    outcome = match.get("outcome", Outcome.UNREPORTED.value)
    reported = match.get("reported", False)
    if match.get("second_id") is None:
        if outcome != Outcome.AUTO_WIN_FIRST.value or not reported:
            raise MalformedImportException(
                f"Bye {match_id} must be a reported {Outcome.AUTO_WIN_FIRST.value}"
            )
        return
    if outcome == Outcome.AUTO_WIN_FIRST.value:
        raise MalformedImportException(
            f"Match {match_id} is paired but has outcome {outcome!r}"
        )
    if reported != (outcome != Outcome.UNREPORTED.value):
        raise MalformedImportException(
            f"Match {match_id} has outcome {outcome!r} but reported={reported!r}"
        )


def validate_tournament_data(data: Any) -> None:
    """Check decoded JSON before it becomes a Tournament.

    Besides structure and references, match ids must have the ``round-table``
    form the engine generates, so later rounds cannot collide with them.

    Raises:
        MalformedImportException: Describing the first problem found
    """
    if not isinstance(data, dict):
        raise MalformedImportException("Tournament data must be a JSON object")
    for key in ("players", "matches"):
        if not isinstance(data.get(key), list):
            raise MalformedImportException(f"'{key}' must be a list")
    if "name" in data and not isinstance(data["name"], str):
        raise MalformedImportException("'name' must be a string")
    if "config" in data:
        _validate_config(data["config"])

    current_round = data.get("current_round", 0)
    if not _is_int(current_round) or current_round < 0:
        raise MalformedImportException(
            f"'current_round' must be a non-negative integer, got {current_round!r}"
        )

    seen_ids = _validate_players(data["players"])

    match_ids = set()
    for index, match in enumerate(data["matches"]):
        if not isinstance(match, dict):
            raise MalformedImportException(f"Match #{index} is not an object")
        match_id = match.get("id")
        if not isinstance(match_id, str) or not match_id:
            raise MalformedImportException(f"Match #{index} has no id")
        if match_id in match_ids:
            raise MalformedImportException(f"Duplicate match id {match_id!r}")
        match_ids.add(match_id)

        round_number = match.get("round_number")
        if not _is_int(round_number) or not 1 <= round_number <= current_round:
            raise MalformedImportException(
                f"Match {match_id} has invalid round number {round_number!r}"
            )
        id_match = _MATCH_ID_PATTERN.match(match_id)
        if id_match is None or int(id_match.group(1)) != round_number:
            raise MalformedImportException(
                f"Match id {match_id!r} does not match round {round_number}"
            )
        if match.get("first_id") not in seen_ids:
            raise MalformedImportException(
                f"Match {match_id} references unknown competitor "
                f"{match.get('first_id')!r}"
            )
        second_id = match.get("second_id")
        if second_id is not None and second_id not in seen_ids:
            raise MalformedImportException(
                f"Match {match_id} references unknown competitor {second_id!r}"
            )
        if second_id is not None and second_id == match["first_id"]:
            raise MalformedImportException(f"Match {match_id} pairs a competitor with itself")
        if match.get("outcome", Outcome.UNREPORTED.value) not in _OUTCOME_VALUES:
            raise MalformedImportException(
                f"Match {match_id} has unknown outcome {match.get('outcome')!r}"
            )
        _check_optional_bool(match, "reported", f"Match {match_id}")
        _validate_match_state(match, match_id)


def tournament_from_data(
    data: Any, rng: Optional[random.Random] = None
) -> Tournament:
    """Validate decoded JSON and build a Tournament from it.

    Missing ``current_round``, ``config`` and ``suggested_rounds`` fall back
    to defaults.

    Raises:
        MalformedImportException: If the data is not a valid tournament
    """
    validate_tournament_data(data)
    try:
        return Tournament.from_dict(data, rng=rng)
    except ConfigurationException as e:
        raise MalformedImportException(f"Invalid configuration: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedImportException(f"Invalid tournament data: {e}") from e


def dumps_tournament(tournament: Tournament, indent: Optional[int] = 2) -> str:
    return json.dumps(tournament.to_dict(), indent=indent, ensure_ascii=False)


def loads_tournament(text: str, rng: Optional[random.Random] = None) -> Tournament:
    """Parse a JSON document into a Tournament.

    Raises:
        MalformedImportException: If the text is not JSON or not a tournament
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedImportException(f"Not valid JSON: {e}") from e
    return tournament_from_data(data, rng=rng)


def save_tournament(tournament: Tournament, path: PathLike) -> Path:
    """Write a tournament to a JSON file.

    If ``path`` is a directory, the default file name is used inside it.

    Returns:
        The path written

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    if path.is_dir():
        path = path / default_filename(tournament)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps_tournament(tournament))
    except OSError as e:
        logger.error("Could not save tournament to %s: %s", path, e)
        raise FileSaveException(f"Could not save tournament to {path}: {e}") from e

    logger.info("Tournament saved to: %s", path)
    return path


def load_tournament(path: PathLike, rng: Optional[random.Random] = None) -> Tournament:
    """Read a tournament from a JSON file.

    Raises:
        FileLoadException: If the file cannot be read
        MalformedImportException: If its content is not a valid tournament
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        logger.error("Could not load tournament from %s: %s", path, e)
        raise FileLoadException(f"Could not load tournament from {path}: {e}") from e

    tournament = loads_tournament(text, rng=rng)
    logger.info("Tournament loaded from: %s", path)
    return tournament

