"""JSON snapshot persistence for rosters, matches and pairings."""

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
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from gavelpairing.constants import DEFAULT_PAIRING_SYSTEM
from gavelpairing.exceptions import FileLoadException, FileSaveException
from gavelpairing.models.match import Match
from gavelpairing.models.pairing import Pairing
from gavelpairing.models.team import Team
from gavelpairing.models.tournament_config import TournamentConfig
from gavelpairing.tournament.results import EventSummary
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentSnapshot:
    """Everything the engine needs about an event at one point in time."""

    config: TournamentConfig
    teams: List[Team] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)

    def team_by_id(self, team_id: str) -> Team:
        for team in self.teams:
            if team.id == team_id:
                return team
        raise KeyError(team_id)

    def matches_in_round(self, round_number: int) -> List[Match]:
        return [match for match in self.matches if match.round_number == round_number]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "teams": [team.to_dict() for team in self.teams],
            "matches": [match.to_dict() for match in self.matches],
        }


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FileLoadException(f"Cannot read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Snapshot {path} is not valid JSON: {e}") from e


def _write_json(path: Path, payload: Any) -> None:
    try:
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Cannot write {path}: {e}") from e


def _load_matches(rows: Sequence[Dict[str, Any]]) -> List[Match]:
    matches: List[Match] = []
    for row in rows:
        if row.get("teamBId") is None:
            logger.warning(f"Skipping match {row.get('id')} without a second team")
            continue
        matches.append(Match.from_dict(row))
    return matches


def load_snapshot(path: Union[str, Path]) -> TournamentSnapshot:
    """Read a snapshot file.

    The file holds a JSON object with ``config``, ``teams`` and ``matches``.
    When ``config`` is absent, a default configuration covering the rounds
    already present is used.

    Raises:
        FileLoadException: If the file cannot be read or is not a JSON object
        InvalidTeamDataException, InvalidMatchDataException: On malformed rows
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise FileLoadException(f"Snapshot {path} must contain a JSON object")

    teams = [Team.from_dict(row) for row in data.get("teams") or []]
    matches = _load_matches(data.get("matches") or [])

    if data.get("config"):
        config = TournamentConfig.from_dict(data["config"])
    else:
        played_rounds = max((match.round_number for match in matches), default=0)
        config = TournamentConfig(
            name=path.stem,
            num_rounds=max(played_rounds + 1, 1),
            pairing_system=DEFAULT_PAIRING_SYSTEM,
        )

    logger.info(
        f"Loaded snapshot {path}: {len(teams)} teams, {len(matches)} matches"
    )
    return TournamentSnapshot(config=config, teams=teams, matches=matches)


def save_snapshot(path: Union[str, Path], snapshot: TournamentSnapshot) -> None:
    """Write a snapshot file readable by :func:`load_snapshot`."""
    path = Path(path)
    _write_json(path, snapshot.to_dict())
    logger.info(f"Saved snapshot to {path}")


def save_pairings(
    path: Union[str, Path], round_number: int, pairings: Sequence[Pairing]
) -> None:
    """Write one round of pairings as JSON."""
    path = Path(path)
    _write_json(
        path,
        {
            "roundNumber": round_number,
            "pairings": [pairing.to_dict() for pairing in pairings],
        },
    )
    logger.info(f"Saved {len(pairings)} pairings for round {round_number} to {path}")


def save_event_summary(path: Union[str, Path], summary: EventSummary) -> None:
    """Write an event summary (rounds, match results, standings) as JSON."""
    path = Path(path)
    _write_json(path, summary.to_dict())
    logger.info(f"Saved event summary to {path}")
