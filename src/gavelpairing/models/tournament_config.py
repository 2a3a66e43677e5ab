"""TournamentConfig data class."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from gavelpairing.constants import DEFAULT_PAIRING_SYSTEM, SAVE_FILE_EXTENSION
from gavelpairing.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidConfigurationException,
)
from gavelpairing.utils import setup_logger
from gavelpairing.utils.validation import validate_pairing_system

logger = setup_logger(__name__)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int
        Number of rounds in the tournament.
    pairing_system : str
        Pairing system used for generating pairings. Supported values are
        "swiss" and "round_robin".
    seed : int or None
        Seed for the round-one Swiss shuffle. ``None`` draws a fresh shuffle.
    tournament_over : bool
        Indicates whether the tournament is complete.
    """

    name: str
    num_rounds: int
    pairing_system: str = DEFAULT_PAIRING_SYSTEM
    seed: Optional[int] = None
    # Is the tournament complete?
    tournament_over: bool = False

    def __post_init__(self):
        result = validate_pairing_system(self.pairing_system)
        if not result:
            raise InvalidConfigurationException(result.error_message)
        self.pairing_system = result.sanitized_value

        if isinstance(self.num_rounds, bool) or not isinstance(self.num_rounds, int):
            raise InvalidConfigurationException(
                f"num_rounds must be an integer, got {self.num_rounds!r}"
            )
        if self.num_rounds < 1:
            raise InvalidConfigurationException(
                f"num_rounds must be at least 1, got {self.num_rounds}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "pairing_system": self.pairing_system,
            "seed": self.seed,
            "tournament_over": self.tournament_over,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        if "num_rounds" not in data:
            raise InvalidConfigurationException("Configuration is missing num_rounds")
        return cls(
            name=data.get("name", "Untitled Tournament"),
            num_rounds=data["num_rounds"],
            pairing_system=data.get("pairing_system", DEFAULT_PAIRING_SYSTEM),
            seed=data.get("seed"),
            tournament_over=data.get("tournament_over", False),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "TournamentConfig":
        """Read a configuration from a JSON file."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise FileLoadException(f"Cannot read configuration {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise FileLoadException(f"Configuration {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration {path} must contain a JSON object"
            )
        config = cls.from_dict(data)
        logger.debug(f"Loaded configuration '{config.name}' from {path}")
        return config

    def save(self, path: Union[str, Path]) -> Path:
        """Write the configuration to a JSON file.

        A path without a suffix gets the save-file extension. Returns the
        path actually written.
        """
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        try:
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise FileSaveException(f"Cannot write configuration {path}: {e}") from e
        logger.debug(f"Saved configuration '{self.name}' to {path}")
        return path
