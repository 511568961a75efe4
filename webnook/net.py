"""IP addresses and non-blocking TCP sockets."""

from __future__ import annotations

import errno
import os
import socket
from dataclasses import dataclass

from webnook.text import cut_find, int_from_hex_str, int_from_str

__all__ = [
    "INVALID_ADDRESS",
    "IPAddr",
    "create_client_socket",
    "create_server_socket",
    "format_ip",
    "ipv4_address",
    "ipv4_localhost",
    "ipv6_address",
    "ipv6_localhost",
    "parse_ip",
]

_V4_PREFIX = bytes(10) + b"\xff\xff"
_IPV6_SEGMENTS = 8
_IPV4_SEGMENTS = 4
_CONNECT_PENDING = frozenset(
    {0, errno.EINPROGRESS, errno.EWOULDBLOCK, errno.EALREADY}
)


@dataclass(frozen=True)
class IPAddr:
    """A 128-bit address in network byte order.

    IPv4 addresses are kept in the IPv4-mapped range ``::ffff:a.b.c.d``.
    """

    packed: bytes = bytes(16)
    valid: bool = True

    def __post_init__(self) -> None:
        if len(self.packed) != 16:
            raise ValueError("an address holds exactly 16 bytes")

    def is_ipv6(self) -> bool:
        """Tell whether this is a valid address outside the IPv4-mapped range."""
        if not self.valid:
            return False
        return self.packed[:12] != _V4_PREFIX

    @property
    def segments(self) -> tuple[int, ...]:
        """The eight 16-bit groups, most significant first."""
        return tuple(
            int.from_bytes(self.packed[i:i + 2], "big") for i in range(0, 16, 2)
        )

    @property
    def octets(self) -> tuple[int, ...]:
        """The four bytes of an IPv4 address."""
        return tuple(self.packed[12:])

    def __str__(self) -> str:
        return format_ip(self)


INVALID_ADDRESS = IPAddr(bytes(16), valid=False)


def ipv4_address(a: int, b: int, c: int, d: int) -> IPAddr:
    """Build the IPv4 address ``a.b.c.d``; each part is truncated to a byte."""
    return IPAddr(_V4_PREFIX + bytes(part & 0xFF for part in (a, b, c, d)))


def ipv6_address(*args: int) -> IPAddr:
    """Build an IPv6 address from eight 16-bit groups, most significant first."""
    if len(args) != _IPV6_SEGMENTS:
        raise TypeError(f"an IPv6 address takes {_IPV6_SEGMENTS} groups, got {len(args)}")
    return IPAddr(b"".join((part & 0xFFFF).to_bytes(2, "big") for part in args))


def ipv4_localhost() -> IPAddr:
    """The IPv4 loopback address, 127.0.0.1."""
    return ipv4_address(127, 0, 0, 1)


def ipv6_localhost() -> IPAddr:
    """The IPv6 loopback address, ::1."""
    return ipv6_address(0, 0, 0, 0, 0, 0, 0, 1)


def _parse_ipv4(text: str) -> IPAddr:
    octets = []
    for _ in range(_IPV4_SEGMENTS):
        piece, text = cut_find(text, ".")
        if not piece:
            return INVALID_ADDRESS
        value, extra = int_from_str(piece)
        if extra:
            return INVALID_ADDRESS
        octets.append(value)
    return ipv4_address(*octets)


def _parse_hex_groups(text: str) -> list[int] | None:
    groups: list[int] = []
    while text:
        if len(groups) >= _IPV6_SEGMENTS:
            return None
        piece, text = cut_find(text, ":")
        if not piece:
            return None
        value, extra = int_from_hex_str(piece)
        if extra:
            return None
        groups.append(value)
    return groups


def _parse_ipv6(text: str) -> IPAddr:
    flexible = "::" in text
    head_text, tail_text = cut_find(text, "::")

    head = _parse_hex_groups(head_text)
    if head is None:
        return INVALID_ADDRESS

    if flexible:
        tail = _parse_hex_groups(tail_text)
        if tail is None or len(head) + len(tail) > _IPV6_SEGMENTS:
            return INVALID_ADDRESS
        fill = [0] * (_IPV6_SEGMENTS - len(head) - len(tail))
        return ipv6_address(*head, *fill, *tail)

    if len(head) != _IPV6_SEGMENTS:
        return INVALID_ADDRESS
    return ipv6_address(*head)


def parse_ip(text: str) -> IPAddr:
    """Parse a dotted IPv4 or a colon-separated IPv6 address.

    Text that is neither gives ``INVALID_ADDRESS``.
    """
    if "." in text:
        return _parse_ipv4(text)
    if ":" in text:
        return _parse_ipv6(text)
    return INVALID_ADDRESS


def format_ip(address: IPAddr) -> str:
    """Write an address as dotted IPv4 or as eight uncompressed hex groups."""
    if not address.valid:
        return "Invalid."
    if address.is_ipv6():
        return ":".join(format(group, "x") for group in address.segments)
    return ".".join(str(octet) for octet in address.octets)


def _new_socket(family: socket.AddressFamily) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_STREAM, socket.IPPROTO_TCP)
    sock.setblocking(False)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    return sock


def create_server_socket(port: int, backlog: int) -> socket.socket:
    """Open a non-blocking IPv4 TCP socket listening on every interface."""
    sock = _new_socket(socket.AF_INET)
    try:
        sock.bind(("", port))
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    return sock


def create_client_socket(port: int, address: IPAddr) -> socket.socket:
    """Open a non-blocking TCP socket and start connecting it to ``address``.

    The connection may still be in progress when the socket is returned.
    """
    if not address.valid:
        raise ValueError("cannot connect to an invalid address")
    if address.is_ipv6():
        sock = _new_socket(socket.AF_INET6)
        target: tuple = (format_ip(address), port, 0, 0)
    else:
        sock = _new_socket(socket.AF_INET)
        target = (format_ip(address), port)
    result = sock.connect_ex(target)
    if result not in _CONNECT_PENDING:
        sock.close()
        raise OSError(result, os.strerror(result))
    return sock