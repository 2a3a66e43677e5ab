"""Team data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from gavelpairing.exceptions import InvalidTeamDataException


@dataclass(frozen=True)
class Team:
    """A competing team.

    Teams are opaque identities to the engine; nothing in the pairing or
    scoring code mutates them.

    Attributes
    ----------
    id : str
        Stable team identifier.
    name : str
        Display name.
    school : str or None
        School or institution the team represents.
    """

    id: str
    name: str
    school: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {"id": self.id, "name": self.name, "school": self.school}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        team_id = data.get("id")
        if team_id is None or str(team_id).strip() == "":
            raise InvalidTeamDataException(f"Team record without an id: {data!r}")
        return cls(
            id=str(team_id),
            name=data.get("name") or str(team_id),
            school=data.get("school"),
        )
