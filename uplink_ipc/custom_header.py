"""User header sent alongside every published sample."""

from __future__ import annotations

from dataclasses import dataclass

from .message import UAttributes, UMessage

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class CustomHeader:
    """Protocol version and timestamp attached to a sample."""

    version: int = 0
    timestamp: int = 0

    def __post_init__(self) -> None:
        if not _I32_MIN <= self.version <= _I32_MAX:
            raise ValueError(f"version out of 32-bit signed range: {self.version}")
        if not 0 <= self.timestamp <= _U64_MAX:
            raise ValueError(f"timestamp out of 64-bit unsigned range: {self.timestamp}")

    @classmethod
    def from_user_header(cls, header: CustomHeader) -> CustomHeader:
        """Copy another header."""
        return cls(version=header.version, timestamp=header.timestamp)

    @classmethod
    def from_message(cls, message: UMessage) -> CustomHeader:
        """Build the header for a message; messages carry no header fields yet."""
        return cls()

    def to_attributes(self) -> UAttributes:
        """Attributes corresponding to this header."""
        return UAttributes()