"""Route Dependencies — injects the app-owned UserStore and parses path identifiers.

Invariants:
    - Routes never touch a module-level store; the store lives on app.state
    - Path ids must be optionally signed base-10 integers within the 64-bit signed
      range, else InvalidUserIdError

Design Decisions:
    - id taken as str and parsed here instead of `int` path typing: a malformed id
      is "invalid_id", not a generic validation_error
"""

import re

from fastapi import Request

from user_service.core.errors import InvalidUserIdError
from user_service.core.user_store import UserStore

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# 64-bit signed range; ids outside it are malformed, not missing
_ID_MIN = -(2 ** 63)
_ID_MAX = 2 ** 63 - 1


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def parse_user_id(user_id: str) -> int:
    """Parse a path identifier. Raises InvalidUserIdError."""
    if not _INT_PATTERN.fullmatch(user_id):
        raise InvalidUserIdError(user_id)
    try:
        value = int(user_id)
    except ValueError:
        # digit count beyond the interpreter's int conversion limit
        raise InvalidUserIdError(user_id)
    if not _ID_MIN <= value <= _ID_MAX:
        raise InvalidUserIdError(user_id)
    return value
