"""Standings, result summaries and snapshot persistence."""

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

from gavelpairing.tournament.results import (
    EventSummary,
    JudgeScoreLine,
    MatchSummary,
    RoundSummary,
    completed_match_results,
    resolve_winner_id,
    summarize_event,
    summarize_match,
    summarize_rounds,
)
from gavelpairing.tournament.snapshot import (
    TournamentSnapshot,
    load_snapshot,
    save_event_summary,
    save_pairings,
    save_snapshot,
)
from gavelpairing.tournament.standings_calculator import (
    StandingsCalculator,
    calculate_standings,
)

__all__ = [
    "StandingsCalculator",
    "calculate_standings",
    "EventSummary",
    "JudgeScoreLine",
    "MatchSummary",
    "RoundSummary",
    "completed_match_results",
    "resolve_winner_id",
    "summarize_event",
    "summarize_match",
    "summarize_rounds",
    "TournamentSnapshot",
    "load_snapshot",
    "save_event_summary",
    "save_pairings",
    "save_snapshot",
]
