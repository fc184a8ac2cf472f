"""
Rule library: concrete checks over user profile fields.

Each function returns a fresh rule built with check(). The library does no
composition of its own; callers combine rules with the combinators.

RULE_CATALOGUE maps rule names to their factories so rules can be referenced
by name from configuration.
"""

import re
from typing import Callable, Dict

from .combinators import Rule, check

_LETTERS_AND_DIGITS = re.compile(r"[a-zA-Z0-9]+")


def email_ends_with_il() -> Rule:
    return check(lambda user: user.email.endswith(".il"),
                 "Email must end with .il")


def email_length_bigger_than_10() -> Rule:
    return check(lambda user: len(user.email) > 10,
                 "Email must be longer than 10 characters")


def password_length_bigger_than_8() -> Rule:
    return check(lambda user: len(user.password) > 8,
                 "Password must be longer than 8 characters")


def password_includes_letters_numbers_only() -> Rule:
    """Whole password must be ASCII letters and digits; empty fails."""
    return check(lambda user: _LETTERS_AND_DIGITS.fullmatch(user.password) is not None,
                 "Password must contain only letters and numbers")


def password_includes_dollar_sign() -> Rule:
    return check(lambda user: "$" in user.password,
                 "Password must include $ character")


def password_is_different_from_username() -> Rule:
    return check(lambda user: user.password != user.username,
                 "Password must be different from username")


def age_bigger_than_18() -> Rule:
    return check(lambda user: user.age > 18,
                 "User must be older than 18")


def username_length_bigger_than_8() -> Rule:
    return check(lambda user: len(user.username) > 8,
                 "Username must be longer than 8 characters")


RULE_CATALOGUE: Dict[str, Callable[[], Rule]] = {
    factory.__name__: factory
    for factory in (
        email_ends_with_il,
        email_length_bigger_than_10,
        password_length_bigger_than_8,
        password_includes_letters_numbers_only,
        password_includes_dollar_sign,
        password_is_different_from_username,
        age_bigger_than_18,
        username_length_bigger_than_8,
    )
}


def get_rule(name: str) -> Rule:
    """
    Build a catalogue rule by name.

    Raises:
        ValueError: If name is not in RULE_CATALOGUE
    """
    factory = RULE_CATALOGUE.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown rule '{name}'. Must be one of: {', '.join(RULE_CATALOGUE)}"
        )
    return factory()
