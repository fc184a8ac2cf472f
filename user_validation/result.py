"""
Validation result types.

A rule evaluation produces exactly one of two values:

- Valid: the record satisfied the rule. Carries no reason.
- Invalid: the record failed the rule. Carries one non-empty reason string.

ValidationResult is the closed union of the two, so callers can match
exhaustively:

    if isinstance(result, Invalid):
        print(result.reason)
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Valid:
    """Successful validation outcome."""

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def reason(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Invalid:
    """Failed validation outcome with a human-readable reason."""

    reason: str

    def __post_init__(self):
        if not self.reason:
            raise ValueError("Invalid result requires a non-empty reason")

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]

# Valid has no state, one instance serves every caller
VALID = Valid()
