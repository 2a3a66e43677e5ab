"""Reduction of a judge's ballot to a single total.

A ballot has two parts: criteria points, which are summed, and judge-question
points, which are averaged. Averaging the questions keeps events that ask a
different number of judge questions on the same scale.
"""

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
import math
from typing import List, Optional

from gavelpairing.models.match import Score
from gavelpairing.utils import setup_logger

logger = setup_logger(__name__)


def _to_number(value: object) -> float:
    """Coerce one ballot entry to a float; anything unusable counts as 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


class ScoreAggregator:
    """Turns a :class:`Score` into a numeric total.

    The aggregator never raises on bad data. Payloads that cannot be parsed
    contribute 0 and are reported at warning level, so a broken ballot shows
    up as a low score rather than a failed standings page.
    """

    def total(self, score: Score) -> float:
        """Criteria sum plus judge-question mean.

        Args:
            score: The ballot to reduce

        Returns:
            ``sum(criteria) + mean(comments)``; an empty comment list adds 0
        """
        return self.criteria_total(score) + self.comment_average(score)

    def criteria_total(self, score: Score) -> float:
        """Sum of the criteria points."""
        criteria = self._load(score, "criteria_scores", dict)
        if not criteria:
            return 0.0
        return sum(_to_number(value) for value in criteria.values())

    def comment_average(self, score: Score) -> float:
        """Mean of the judge-question points, 0 when there are none."""
        comments: Optional[List[object]] = self._load(score, "comment_scores", list)
        if not comments:
            return 0.0
        # Unusable entries count as 0 but still count toward the mean
        return sum(_to_number(value) for value in comments) / len(comments)

    def _load(self, score: Score, attribute: str, expected_type: type):
        """Return a parsed payload of ``expected_type`` or None."""
        raw = getattr(score, attribute, None)
        if raw is None:
            return None

        if isinstance(raw, (str, bytes)):
            if not raw.strip():
                return None
            try:
                raw = json.loads(raw)
            except ValueError:
                # JSONDecodeError, UnicodeDecodeError and oversized integer literals
                logger.warning(
                    f"Unparseable {attribute} from judge {score.judge_id} for team "
                    f"{score.team_id}; counting it as 0"
                )
                return None

        if not isinstance(raw, expected_type):
            logger.warning(
                f"Expected {expected_type.__name__} for {attribute} from judge "
                f"{score.judge_id} for team {score.team_id}, got "
                f"{type(raw).__name__}; counting it as 0"
            )
            return None

        return raw


_default_aggregator = ScoreAggregator()


def total_score(score: Score) -> float:
    """Shortcut for :meth:`ScoreAggregator.total`."""
    return _default_aggregator.total(score)
