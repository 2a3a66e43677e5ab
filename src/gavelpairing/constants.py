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

# --- Constants ---

SAVE_FILE_EXTENSION = ".json"

# Match outcome values (standings "wins" column)
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Judge ballot values
FULL_VOTE = 1.0
SPLIT_VOTE = 0.5

# Panel size the two-judge protocol tops up to
TWO_JUDGE_PANEL = 2
VIRTUAL_JUDGE_ID = "simulated"
VIRTUAL_JUDGE_LABEL = "Simulated Judge 3"

# Tally outcome markers
WINNER_TEAM_A = "A"
WINNER_TEAM_B = "B"
WINNER_TIE = "tie"

# Match statuses the engine cares about. Upstream has many intermediate
# moderator/judge-question statuses; anything that is not "completed" is
# treated as in progress.
MATCH_STATUS_DRAFT = "draft"
MATCH_STATUS_COMPLETED = "completed"

# Pairing systems
PAIRING_SWISS = "swiss"
PAIRING_ROUND_ROBIN = "round_robin"
PAIRING_SYSTEMS = (PAIRING_SWISS, PAIRING_ROUND_ROBIN)
DEFAULT_PAIRING_SYSTEM = PAIRING_SWISS

MIN_TEAMS_FOR_PAIRING = 2

# Logging
LOG_LEVEL_ENV_VAR = "GAVEL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
