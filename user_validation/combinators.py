"""
Combinator engine for user validation rules.

A Rule is any callable taking a User and returning a ValidationResult. Rules
are built with check() and combined with the functions below; every
combinator returns a new Rule, so combinations nest freely:

    rule = all_of(
        and_(email_ends_with_il(), email_length_bigger_than_10()),
        or_(password_includes_dollar_sign(), password_length_bigger_than_8()),
    )
    result = evaluate(rule, user)

Evaluation order matters for the reason a caller sees:

- and_, all_of, none_of stop at the first deciding rule.
- or_ and xor always evaluate both operands, because their failure messages
  are built from both outcomes.
"""

import logging
from typing import Callable

from .result import VALID, Invalid, ValidationResult
from .users import User

logger = logging.getLogger(__name__)

Rule = Callable[[User], ValidationResult]
Predicate = Callable[[User], bool]

UNKNOWN_REASON = "Unknown"
NONE_EXPECTED_REASON = "At least one validation passed, expected none."


def check(predicate: Predicate, reason: str) -> Rule:
    """
    Build a rule from a predicate and a fixed failure reason.

    Args:
        predicate: Function returning True when the user is acceptable
        reason: Message reported when the predicate is false

    Returns:
        Rule yielding Valid when the predicate holds, else Invalid(reason)
    """

    def rule(user: User) -> ValidationResult:
        return VALID if predicate(user) else Invalid(reason)

    return rule


def and_(first: Rule, second: Rule) -> Rule:
    """Fail fast conjunction: the first failure is returned as-is."""

    def rule(user: User) -> ValidationResult:
        result = first(user)
        if not result.is_valid:
            return result
        return second(user)

    return rule


def or_(first: Rule, second: Rule) -> Rule:
    """
    Disjunction over both operands.

    Both rules are always evaluated. When both fail the reasons are joined
    as "<first> or <second>".
    """

    def rule(user: User) -> ValidationResult:
        first_result = first(user)
        second_result = second(user)
        if first_result.is_valid or second_result.is_valid:
            return VALID
        return Invalid(
            f"{first_result.reason or UNKNOWN_REASON} or "
            f"{second_result.reason or UNKNOWN_REASON}"
        )

    return rule


def xor(first: Rule, second: Rule) -> Rule:
    """
    Exclusive or over both operands.

    Valid when exactly one rule passes. Sub-reasons are discarded on failure;
    the message only reports the shared outcome of both rules.
    """

    def rule(user: User) -> ValidationResult:
        first_valid = first(user).is_valid
        second_valid = second(user).is_valid
        if first_valid != second_valid:
            return VALID
        outcome = "true" if first_valid else "false"
        return Invalid(f"XOR failed: both validations were {outcome}")

    return rule


def all_of(*rules: Rule) -> Rule:
    """Valid when every rule passes. Returns the first failure in order."""

    def rule(user: User) -> ValidationResult:
        for validation in rules:
            result = validation(user)
            if not result.is_valid:
                return result
        return VALID

    return rule


def none_of(*rules: Rule) -> Rule:
    """Valid when no rule passes. Stops at the first rule that does."""

    def rule(user: User) -> ValidationResult:
        for validation in rules:
            if validation(user).is_valid:
                return Invalid(NONE_EXPECTED_REASON)
        return VALID

    return rule


def evaluate(rule: Rule, user: User) -> ValidationResult:
    """
    Apply a rule to a user.

    Args:
        rule: Rule built with check() or one of the combinators
        user: Record to validate

    Returns:
        Valid or Invalid. Exceptions raised by predicates propagate.
    """
    result = rule(user)
    logger.debug(
        "Rule evaluated",
        extra={'username': user.username, 'valid': result.is_valid,
               'reason': result.reason}
    )
    return result
