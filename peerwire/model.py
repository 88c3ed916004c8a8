"""Protocol version, header names and peer bookkeeping types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union

from peerwire.address import Address
from peerwire.peer_id import PeerId

HeaderMap = dict[str, str]

CONTENT_TYPE = "content-type"
STATUS_MESSAGE = "status-message"
TIMEOUT = "timeout"
"""Header holding a timeout in nanoseconds, as an unsigned integer."""


class Version(IntEnum):
    """Wire protocol version; ``V1`` is the default."""

    V1 = 1

    @classmethod
    def from_u16(cls, version: int) -> Version:
        try:
            return cls(version)
        except ValueError:
            raise ValueError(f"invalid version {version}") from None

    def to_u16(self) -> int:
        return int(self)


class PeerAffinity(Enum):
    HIGH = "high"
    """Always attempt to maintain a connection with this peer."""
    ALLOWED = "allowed"
    """Do not connect proactively, but always accept inbound connections."""
    NEVER = "never"
    """Never connect, and reject inbound connections from this peer."""


@dataclass
class PeerInfo:
    peer_id: PeerId
    affinity: PeerAffinity
    address: list[Address] = field(default_factory=list)


class DisconnectReason(Enum):
    REQUESTED = "requested"
    VERSION_MISMATCH = "version_mismatch"
    TRANSPORT_ERROR = "transport_error"
    CONNECTION_CLOSED = "connection_closed"
    APPLICATION_CLOSED = "application_closed"
    RESET = "reset"
    TIMED_OUT = "timed_out"
    LOCALLY_CLOSED = "locally_closed"


@dataclass(frozen=True)
class NewPeer:
    """A connection to a peer was established."""

    peer_id: PeerId


@dataclass(frozen=True)
class LostPeer:
    """A connection to a peer was lost."""

    peer_id: PeerId
    reason: DisconnectReason


PeerEvent = Union[NewPeer, LostPeer]