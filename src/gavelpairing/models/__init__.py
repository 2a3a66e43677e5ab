from gavelpairing.models.match import JudgeAssignment, Match, Score
from gavelpairing.models.pairing import Bye, MatchPairing, Pairing
from gavelpairing.models.pairing_history import PairingHistory
from gavelpairing.models.standing import Standing
from gavelpairing.models.team import Team
from gavelpairing.models.tournament_config import TournamentConfig

__all__ = [
    "Team",
    "JudgeAssignment",
    "Score",
    "Match",
    "MatchPairing",
    "Bye",
    "Pairing",
    "PairingHistory",
    "Standing",
    "TournamentConfig",
]
