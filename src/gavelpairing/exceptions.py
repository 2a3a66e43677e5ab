"""Exceptions for use in Gavel Pairing"""

# Gavel Pairing
# Copyright (C) 2025  Gavel Pairing developers
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


class GavelPairingException(Exception):
    """Base exception for all Gavel Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(GavelPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing configuration is invalid (e.g. a team paired with itself)."""

    pass


class NotEnoughTeamsException(PairingException):
    """Raised by callers when fewer than two teams are available for pairing."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(GavelPairingException):
    """Base exception for tournament-related errors."""

    pass


class InvalidRoundException(TournamentException):
    """Raised when a requested round number is outside the tournament."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(GavelPairingException):
    """Base exception for validation errors."""

    pass


class InvalidTeamDataException(ValidationException):
    """Raised when team data is invalid or incomplete."""

    pass


class InvalidMatchDataException(ValidationException):
    """Raised when match, assignment or score data is structurally invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(GavelPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GavelPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
