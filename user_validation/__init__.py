"""
user-validation-lib: composable validation rules for user profiles

This library provides:
- Valid / Invalid validation results
- Rule construction from predicates with fixed failure reasons
- Combinators (and_, or_, xor, all_of, none_of) preserving failure reasons
- A catalogue of user profile rules
- Config-driven rulesets with per-check reports

Example:
    from user_validation import (
        and_, evaluate, create_user, email_ends_with_il,
        email_length_bigger_than_10,
    )

    user = create_user("basic", "johndoe123", "user@site.il", "secret99", 30)
    rule = and_(email_ends_with_il(), email_length_bigger_than_10())
    result = evaluate(rule, user)
"""

from .result import Valid, Invalid, ValidationResult, VALID
from .combinators import Rule, check, and_, or_, xor, all_of, none_of, evaluate
from .rules import (
    RULE_CATALOGUE,
    get_rule,
    email_ends_with_il,
    email_length_bigger_than_10,
    password_length_bigger_than_8,
    password_includes_letters_numbers_only,
    password_includes_dollar_sign,
    password_is_different_from_username,
    age_bigger_than_18,
    username_length_bigger_than_8,
)
from .users import (
    User,
    BasicUser,
    PremiumUser,
    PlatinumUser,
    UserKind,
    UnrecognizedKindError,
    create_user,
)
from .sorting import sort_users, by_username, by_age
from .api import ValidationService

__version__ = "0.1.0"
__all__ = [
    "Valid", "Invalid", "ValidationResult", "VALID",
    "Rule", "check", "and_", "or_", "xor", "all_of", "none_of", "evaluate",
    "RULE_CATALOGUE", "get_rule",
    "email_ends_with_il", "email_length_bigger_than_10",
    "password_length_bigger_than_8", "password_includes_letters_numbers_only",
    "password_includes_dollar_sign", "password_is_different_from_username",
    "age_bigger_than_18", "username_length_bigger_than_8",
    "User", "BasicUser", "PremiumUser", "PlatinumUser", "UserKind",
    "UnrecognizedKindError", "create_user",
    "sort_users", "by_username", "by_age",
    "ValidationService",
]
