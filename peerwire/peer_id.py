"""Peer identifiers and the direction of network events."""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

PEER_ID_LENGTH = 32
"""Length of a peer identifier: the size of an ed25519 public key."""


@dataclass(frozen=True, order=True, repr=False)
class PeerId:
    """Identifier of a peer, the 32 bytes of its public key."""

    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, int):
            raise TypeError("PeerId expects bytes, not an integer")
        data = bytes(self.value)
        if len(data) != PEER_ID_LENGTH:
            raise ValueError(
                f"PeerId must be {PEER_ID_LENGTH} bytes long, got {len(data)}"
            )
        object.__setattr__(self, "value", data)

    @classmethod
    def random(cls) -> PeerId:
        """Return a peer id made of random bytes."""
        return cls(secrets.token_bytes(PEER_ID_LENGTH))

    @classmethod
    def from_hex(cls, text: str) -> PeerId:
        """Parse a peer id from its hexadecimal form."""
        return cls(bytes.fromhex(text))

    def short_display(self, length: int) -> str:
        """Hex of the first ``length`` bytes of the id."""
        return self.value[:length].hex()

    def to_json(self) -> str:
        """Encode as a JSON string holding the hex form."""
        return json.dumps(self.value.hex())

    @classmethod
    def from_json(cls, text: str | bytes) -> PeerId:
        """Decode from a JSON string holding the hex form."""
        decoded = json.loads(text)
        if not isinstance(decoded, str):
            raise ValueError("expected a JSON string holding a hex peer id")
        return cls.from_hex(decoded)

    def to_bincode(self) -> bytes:
        """Encode in the compact binary form: the raw bytes."""
        return self.value

    @classmethod
    def from_bincode(cls, data: bytes) -> PeerId:
        """Decode from the compact binary form; trailing bytes are ignored."""
        if len(data) < PEER_ID_LENGTH:
            raise ValueError("unexpected end of input while decoding PeerId")
        return cls(bytes(data[:PEER_ID_LENGTH]))

    def __str__(self) -> str:
        return self.value.hex()

    def __format__(self, spec: str) -> str:
        if spec.startswith(".") and spec[1:].isdigit():
            return self.short_display(int(spec[1:]))
        return format(str(self), spec)

    def __repr__(self) -> str:
        return f"PeerId({self})"


class Direction(Enum):
    """Direction of a network event."""

    INBOUND = "inbound"
    """The remote side initiated the event."""
    OUTBOUND = "outbound"
    """We initiated the event."""

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Direction::{self.value.capitalize()}"


@dataclass(frozen=True, repr=False)
class ConnectionOrigin:
    """How a connection was established: as listener (inbound) or dialer (outbound)."""

    direction: Direction

    INBOUND: ClassVar[ConnectionOrigin]
    OUTBOUND: ClassVar[ConnectionOrigin]

    def as_str(self) -> str:
        return self.direction.as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"ConnectionOrigin({self.direction!r})"


ConnectionOrigin.INBOUND = ConnectionOrigin(Direction.INBOUND)
ConnectionOrigin.OUTBOUND = ConnectionOrigin(Direction.OUTBOUND)