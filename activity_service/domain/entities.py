from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"


@dataclass(frozen=True)
class User:
    id: int
    username: str
    password: str
    role: Role


@dataclass(frozen=True)
class Activity:
    id: int
    title: str
    description: str
    date: str
    participants: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TokenClaims:
    """Identity context recovered from a verified access token."""
    id: int
    username: str
    role: Role
    issued_at: datetime
    expires_at: datetime
