"""Network addresses that can be dialed."""

from __future__ import annotations

import ipaddress
import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AddressError(OSError, ValueError):
    """An address string could not be parsed."""


def _check_port(port: int) -> None:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")


def _parse_port(text: str) -> int | None:
    if not text.isdigit() or not text.isascii():
        return None
    port = int(text)
    return port if port <= 0xFFFF else None


def _parse_socket_addr(text: str) -> SocketAddress | None:
    """Parse ``ip:port`` or ``[ipv6]:port`` without any lookup."""
    if text.startswith("["):
        host, sep, port_text = text[1:].partition("]:")
        if not sep:
            return None
        try:
            ip: IPAddress = ipaddress.IPv6Address(host)
        except ValueError:
            return None
    else:
        host, sep, port_text = text.rpartition(":")
        if not sep:
            return None
        try:
            ip = ipaddress.IPv4Address(host)
        except ValueError:
            return None
    port = _parse_port(port_text)
    if port is None:
        return None
    return SocketAddress(ip, port)


def _lookup(host: str, port: int) -> list[SocketAddress]:
    infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    return [SocketAddress(info[4][0], info[4][1]) for info in infos]


class Address(ABC):
    """An address that can be turned into one or more socket addresses."""

    @abstractmethod
    def to_socket_addrs(self) -> list[SocketAddress]:
        """Return every socket address this address stands for."""

    def resolve(self) -> SocketAddress:
        """Return the first socket address this address resolves to."""
        addrs = self.to_socket_addrs()
        if not addrs:
            raise OSError("unable to resolve host")
        return addrs[0]


@dataclass(frozen=True)
class SocketAddress(Address):
    """An IP address and a port."""

    ip: IPAddress
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            object.__setattr__(self, "ip", ipaddress.ip_address(self.ip))
        _check_port(self.port)

    def to_socket_addrs(self) -> list[SocketAddress]:
        return [self]

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class HostAndPort(Address):
    """An IP address in text form or a host name to look up, and a port."""

    host: str
    port: int

    def __post_init__(self) -> None:
        _check_port(self.port)

    def to_socket_addrs(self) -> list[SocketAddress]:
        return _lookup(self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class AddressString(Address):
    """A socket address in text form, or ``<host_name>:<port>``."""

    text: str

    def to_socket_addrs(self) -> list[SocketAddress]:
        parsed = _parse_socket_addr(self.text)
        if parsed is not None:
            return [parsed]
        host, sep, port_text = self.text.rpartition(":")
        if not sep:
            raise AddressError("invalid socket address")
        port = _parse_port(port_text)
        if port is None:
            raise AddressError("invalid port value")
        return _lookup(host, port)

    def __str__(self) -> str:
        return self.text


def to_address(value: object) -> Address:
    """Turn an address, a string or a ``(host, port)`` pair into an Address."""
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return AddressString(value)
    if isinstance(value, tuple) and len(value) == 2:
        host, port = value
        if isinstance(host, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return SocketAddress(host, port)
        if isinstance(host, str):
            return HostAndPort(host, port)
    raise TypeError(f"cannot convert {value!r} to an Address")