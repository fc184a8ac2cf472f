"""Ordering of user collections with an injected comparator."""

from functools import cmp_to_key
from typing import Callable, Iterable, List

from .users import User

Comparator = Callable[[User, User], int]


def sort_users(users: Iterable[User], comparator: Comparator) -> List[User]:
    """
    Return a new list of users ordered by comparator.

    The comparator returns a negative number, zero or a positive number when
    the first user sorts before, together with or after the second. The sort
    is stable and the input is left untouched.
    """
    return sorted(users, key=cmp_to_key(comparator))


def by_username(a: User, b: User) -> int:
    return (a.username > b.username) - (a.username < b.username)


def by_age(a: User, b: User) -> int:
    return a.age - b.age
