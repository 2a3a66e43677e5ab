"""Type hints used in Gavel Pairing."""

from typing import Dict, List, Literal, Union

# Tally outcome from team A's side of the match
Winner = Literal["A", "B", "tie"]

# Raw criteria payload as it arrives from storage: a mapping or JSON text
CriteriaPayload = Union[Dict[str, object], str, None]
# Raw judge-question payload: a list or JSON text
CommentPayload = Union[List[object], str, None]

# Unordered pair of team ids that already met
PlayedPair = frozenset

#  LocalWords:  PlayedPair
