"""
User records and the user factory.

Records are immutable. The validation rules only read the four fields, so the
kind of user (basic, premium, platinum) never affects a validation outcome.

    user = create_user("premium", "johndoe123", "john@site.il", "secret99", 30)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """User profile being validated."""

    username: str
    email: str
    password: str
    age: int


@dataclass(frozen=True)
class BasicUser(User):
    pass


@dataclass(frozen=True)
class PremiumUser(User):
    pass


@dataclass(frozen=True)
class PlatinumUser(User):
    pass


class UserKind(Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    PLATINUM = "platinum"


class UnrecognizedKindError(ValueError):
    """Raised when create_user() is given a kind outside UserKind."""

    def __init__(self, kind):
        self.kind = kind
        known = ", ".join(k.value for k in UserKind)
        super().__init__(f"Unknown user kind: {kind!r}. Must be one of: {known}")


_USER_CLASSES: Dict[UserKind, Type[User]] = {
    UserKind.BASIC: BasicUser,
    UserKind.PREMIUM: PremiumUser,
    UserKind.PLATINUM: PlatinumUser,
}


def create_user(kind: Union[UserKind, str], username: str, email: str,
                password: str, age: int) -> User:
    """
    Create a user record of the given kind.

    Args:
        kind: UserKind member or its exact string value ("basic", "premium",
              "platinum"). Strings are not case folded.
        username, email, password, age: Record fields

    Returns:
        BasicUser, PremiumUser or PlatinumUser instance

    Raises:
        UnrecognizedKindError: If kind is not a known user kind
    """
    if not isinstance(kind, UserKind):
        try:
            kind = UserKind(kind)
        except ValueError:
            raise UnrecognizedKindError(kind) from None

    user_class = _USER_CLASSES[kind]
    logger.debug(f"Creating {user_class.__name__} for {username}")
    return user_class(username, email, password, age)
