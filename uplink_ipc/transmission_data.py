"""Fixed-layout payload exchanged over the publish-subscribe service."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .message import UCode, UMessage, UStatus

# Two 32-bit signed integers followed by a 64-bit float, no padding.
_LAYOUT = struct.Struct("=iid")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class TransmissionData:
    """A pair of 32-bit integers and a double, packed as a C struct."""

    x: int = 0
    y: int = 0
    funky: float = 0.0

    SIZE = _LAYOUT.size

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not _I32_MIN <= value <= _I32_MAX:
                raise ValueError(f"{name} out of 32-bit signed range: {value}")

    @classmethod
    def from_bytes(cls, data: bytes) -> TransmissionData:
        """Decode from exactly SIZE bytes; raise UStatus otherwise."""
        if len(data) != _LAYOUT.size:
            raise UStatus(
                UCode.INVALID_ARGUMENT, "Invalid byte length for TransmissionData"
            )
        x, y, funky = _LAYOUT.unpack(bytes(data))
        return cls(x, y, funky)

    def to_bytes(self) -> bytes:
        """Encode into the fixed struct layout."""
        return _LAYOUT.pack(self.x, self.y, self.funky)

    @classmethod
    def from_message(cls, message: UMessage) -> TransmissionData:
        """Decode the payload of a message; a missing payload counts as empty."""
        return cls.from_bytes(message.payload or b"")