"""Exceptions for use in Bo1 Swiss"""

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


# ========== Base Application Exception ==========


class Bo1SwissException(Exception):
    """Base exception for all Bo1 Swiss errors.

    All custom exceptions in the application should inherit from this class.
    Every one of them is recoverable by user action (fix the input, report the
    pending match, add competitors), so callers can catch this single class.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(Bo1SwissException):
    """Base exception for pairing-related errors."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no valid pairing can be generated."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(Bo1SwissException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class NotEnoughActiveException(TournamentStateException, NoPairingAvailableException):
    """Raised when fewer than two active competitors remain to be paired."""

    pass


class IncompleteReportsException(TournamentStateException):
    """Raised when the current round still has unreported matches."""

    pass


class TournamentCompletedException(TournamentStateException):
    """Raised when the tournament has already met its termination condition."""

    pass


class PendingMatchException(TournamentStateException):
    """Raised when dropping a competitor who has an unreported match this round."""

    pass


class DuplicateNameException(TournamentException):
    """Raised when attempting to add a competitor whose name is already taken."""

    pass


# ========== Player Exceptions ==========


class PlayerException(Bo1SwissException):
    """Base exception for competitor-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested competitor cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when competitor data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(Bo1SwissException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when an outcome cannot be recorded for a match."""

    pass


class MatchNotFoundException(ResultException):
    """Raised when a requested match cannot be found."""

    pass


class MatchIsByeException(ResultException):
    """Raised when attempting to edit the outcome of a bye."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(Bo1SwissException):
    """Base exception for resource-related errors."""

    pass


class MalformedImportException(ResourceException):
    """Raised when imported tournament data is structurally invalid."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(Bo1SwissException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
