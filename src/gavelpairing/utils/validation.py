"""Validation utilities for Gavel Pairing.

The pairing and scoring engine assumes validated input. These helpers are the
caller-side checks run before the engine is invoked.
"""

from typing import Optional, Sequence

from gavelpairing.constants import MIN_TEAMS_FOR_PAIRING, PAIRING_SYSTEMS


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Roster Validation ==========


def validate_team_count(teams: Sequence[object]) -> ValidationResult:
    """Check that a roster is large enough to pair.

    Args:
        teams: The roster handed to a pairing call

    Returns:
        ValidationResult whose sanitized value is the team count

    Example:
        >>> bool(validate_team_count(["a"]))
        False
    """
    count = len(teams)
    if count < MIN_TEAMS_FOR_PAIRING:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"At least {MIN_TEAMS_FOR_PAIRING} teams are required to generate "
                f"pairings, got {count}"
            ),
        )

    ids = [getattr(team, "id", team) for team in teams]
    if len(set(ids)) != len(ids):
        return ValidationResult(
            is_valid=False,
            error_message="Roster contains duplicate team ids",
        )

    return ValidationResult(is_valid=True, sanitized_value=count)


# ========== Round Validation ==========


def validate_round_number(
    round_number: object, num_rounds: Optional[int] = None
) -> ValidationResult:
    """Validate a 1-indexed target round.

    Args:
        round_number: Requested round; ints and integer strings are accepted
        num_rounds: Upper bound from the tournament configuration, if known

    Returns:
        ValidationResult whose sanitized value is the round as ``int``
    """
    if isinstance(round_number, bool):
        return ValidationResult(
            is_valid=False, error_message="Round number must be an integer"
        )
    try:
        value = int(str(round_number).strip())
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Round number must be an integer, got {round_number!r}",
        )

    if value < 1:
        return ValidationResult(
            is_valid=False, error_message=f"Round number must be >= 1, got {value}"
        )

    if num_rounds is not None and value > num_rounds:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Round {value} is beyond the tournament's {num_rounds} rounds"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


# ========== Configuration Validation ==========


def validate_pairing_system(system: Optional[str]) -> ValidationResult:
    """Normalize and validate a pairing system name."""
    if not system or not str(system).strip():
        return ValidationResult(
            is_valid=False, error_message="Pairing system is required"
        )

    normalized = str(system).strip().lower().replace("-", "_")
    if normalized not in PAIRING_SYSTEMS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Unknown pairing system {system!r}; expected one of "
                f"{', '.join(PAIRING_SYSTEMS)}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=normalized)
