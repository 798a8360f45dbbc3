"""Ports given as a single number, a numeric range or a name."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .uint8orstring import JSONText, _decode_json, _decode_json_uint, _json_string, _parse_uint, _to_text

_UINT16_MAX = 0xFFFF

_ALL_DIGITS = re.compile(r"[0-9]+")
_PORT_RANGE = re.compile(r"([0-9]+):([0-9]+)")
_NAME = re.compile(r"[a-zA-Z0-9_.-]{1,128}")


@dataclass(frozen=True)
class Port:
    """A range of numeric ports or a named port.

    A named port has ``port_name`` set and both numbers zero.  A range has
    inclusive ``min_port`` and ``max_port`` and an empty name; a single port
    has ``min_port == max_port``.
    """

    min_port: int = 0
    max_port: int = 0
    port_name: str = ""

    def __post_init__(self) -> None:
        for number in (self.min_port, self.max_port):
            if not 0 <= number <= _UINT16_MAX:
                raise ValueError(f"port number {number} does not fit in 16 bits")

    @classmethod
    def from_json(cls, text: JSONText) -> Port:
        """Decode a JSON number, or a string holding a port, range or name."""
        source = _to_text(text)
        if not source:
            raise ValueError("unexpected end of JSON input")
        if source[0] == '"':
            value = _decode_json(source)
            if not isinstance(value, str):
                raise ValueError(f"cannot decode {source!r} as a string")
            return port_from_string(value)
        return single_port(_decode_json_uint(source, 16))

    def to_json(self) -> str:
        """Encode a single port as a number, anything else as a string."""
        if self.port_name:
            return _json_string(self.port_name)
        if self.min_port == self.max_port:
            return str(self.min_port)
        return _json_string(str(self))

    def __str__(self) -> str:
        if self.port_name:
            return self.port_name
        if self.min_port == self.max_port:
            return str(self.min_port)
        return f"{self.min_port}:{self.max_port}"


def single_port(port: int) -> Port:
    """Create a port that covers one port number."""
    return Port(min_port=port, max_port=port)


def named_port(name: str) -> Port:
    """Create a named port."""
    return Port(port_name=name)


def port_from_range(min_port: int, max_port: int) -> Port:
    """Create an inclusive range of ports."""
    if min_port > max_port:
        raise ValueError(
            f"minimum port number ({min_port}) is greater than maximum port number "
            f"({max_port}) in port range"
        )
    return Port(min_port=min_port, max_port=max_port)


def port_from_string(s: str) -> Port:
    """Parse ``"1234"``, a range ``"100:200"`` or a name such as ``"http"``."""
    if _ALL_DIGITS.fullmatch(s):
        try:
            return single_port(_parse_uint(s, 16))
        except ValueError:
            raise ValueError(f"invalid port format ({s})") from None

    groups = _PORT_RANGE.fullmatch(s)
    if groups:
        try:
            low = _parse_uint(groups.group(1), 16)
        except ValueError:
            raise ValueError(f"invalid minimum port number in range ({s})") from None
        try:
            high = _parse_uint(groups.group(2), 16)
        except ValueError:
            raise ValueError(f"invalid maximum port number in range ({s})") from None
        return port_from_range(low, high)

    if not _NAME.fullmatch(s):
        raise ValueError(f"invalid name for named port ({s})")
    return named_port(s)