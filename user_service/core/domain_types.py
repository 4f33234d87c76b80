"""Domain Types — the user record and the bounds its fields must respect.

Invariants:
    - UserId wraps int; identifiers are assigned by the store, never by callers
    - Field bounds are the single source of truth for shape validation
    - id and created_at never change after creation

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - User as plain dataclass: the store hands out copies, so callers mutating
      their copy never reach stored state
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Field Bounds ────────────────────────────────────────────────

USERNAME_MIN_LENGTH: int = 3
USERNAME_MAX_LENGTH: int = 50
NAME_MIN_LENGTH: int = 1
NAME_MAX_LENGTH: int = 100
EMAIL_MAX_LENGTH: int = 254
AGE_MIN: int = 1
AGE_MAX: int = 120

# local@domain.tld, no whitespace, exactly one "@"
EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


# ─── Entities ────────────────────────────────────────────────────

@dataclass
class User:
    """A live user record."""
    id: UserId
    username: str
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime

