"""Core message types: status codes, URIs, attributes and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class UCode(IntEnum):
    """Canonical status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class UStatus(Exception):
    """A failure carrying a status code and a message."""

    def __init__(self, code: UCode | int, message: str = "") -> None:
        super().__init__(message)
        self.code = UCode(code)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}"

    def __repr__(self) -> str:
        return f"UStatus(code={self.code.name}, message={self.message!r})"


@dataclass(frozen=True)
class UUri:
    """Address of a resource on a software entity."""

    authority_name: str = ""
    ue_id: int = 0
    ue_version_major: int = 0
    resource_id: int = 0


@dataclass
class UAttributes:
    """Metadata attached to a message."""

    source: UUri | None = None
    sink: UUri | None = None


@dataclass
class UMessage:
    """A message with optional attributes and an optional payload."""

    attributes: UAttributes | None = None
    payload: bytes | None = None
    extra: dict[str, str] = field(default_factory=dict)