"""Network protocols given either by number or by name."""

from __future__ import annotations

from .uint8orstring import NumOrStringType, Uint8OrString

PROTOCOL_UDP = "UDP"
PROTOCOL_TCP = "TCP"
PROTOCOL_ICMP = "ICMP"
PROTOCOL_ICMPV6 = "ICMPv6"
PROTOCOL_SCTP = "SCTP"
PROTOCOL_UDPLITE = "UDPLite"

PROTOCOL_UDP_V1 = "udp"
PROTOCOL_TCP_V1 = "tcp"
PROTOCOL_SCTP_V1 = "sctp"

ALL_PROTOCOL_NAMES = (
    PROTOCOL_UDP,
    PROTOCOL_TCP,
    PROTOCOL_ICMP,
    PROTOCOL_ICMPV6,
    PROTOCOL_SCTP,
    PROTOCOL_UDPLITE,
)

_PORT_PROTOCOL_NUMBERS = frozenset({6, 17, 132})
_PORT_PROTOCOL_NAMES = frozenset(
    {
        PROTOCOL_TCP,
        PROTOCOL_UDP,
        PROTOCOL_TCP_V1,
        PROTOCOL_UDP_V1,
        PROTOCOL_SCTP,
        PROTOCOL_SCTP_V1,
    }
)


def _canonical_name(name: str) -> str | None:
    folded = name.lower()
    return next((n for n in ALL_PROTOCOL_NAMES if n.lower() == folded), None)


class Protocol(Uint8OrString):
    """A protocol held as a number or a name."""

    def to_v1(self) -> Protocol:
        """Return the lower-case v1 form of a named protocol."""
        if self.type == NumOrStringType.NUM:
            return self
        return protocol_from_string_v1(self.str_val)

    def supports_ports(self) -> bool:
        """True if the protocol is TCP (6), UDP (17) or SCTP (132)."""
        try:
            return self.num_value() in _PORT_PROTOCOL_NUMBERS
        except ValueError:
            return self.str_val in _PORT_PROTOCOL_NAMES


def protocol_from_int(p: int) -> Protocol:
    """Create a protocol from its number."""
    return Protocol(NumOrStringType.NUM, num_val=p)


def protocol_from_string(p: str) -> Protocol:
    """Create a protocol from a name, normalising the case of known names.

    Unknown names are kept unchanged.
    """
    return Protocol(NumOrStringType.STRING, str_val=_canonical_name(p) or p)


def protocol_from_string_v1(p: str) -> Protocol:
    """Create a v1 protocol, whose names are lower case."""
    return Protocol(NumOrStringType.STRING, str_val=p.lower())


def protocol_v3_from_protocol_v1(p: Protocol) -> Protocol:
    """Convert a v1 protocol to v3, restoring the case of known names."""
    if p.type == NumOrStringType.NUM:
        return p
    name = _canonical_name(p.str_val)
    if name is None:
        return p
    return Protocol(NumOrStringType.STRING, str_val=name)