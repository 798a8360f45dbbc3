"""Values that serialise as either a small unsigned number or a string.

In JSON or YAML such a field may hold either a number or a name, for example
a protocol given as ``6`` or as ``"TCP"``.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Union

JSONText = Union[str, bytes, bytearray]

UINT8_MAX = 0xFF


class NumOrStringType(enum.IntEnum):
    """Which member of a number-or-string value is in use."""

    NUM = 0
    STRING = 1


def _to_text(text: JSONText) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _decode_json(text: JSONText) -> Any:
    """Decode a JSON document strictly (no NaN or Infinity)."""
    return json.loads(_to_text(text), parse_constant=_reject_constant)


def _parse_uint(s: str, bits: int) -> int:
    """Parse a base-10 unsigned integer that must fit in ``bits`` bits."""
    if not s or not (s.isascii() and s.isdigit()):
        raise ValueError(f"invalid syntax for unsigned integer: {s!r}")
    value = int(s)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {s!r}")
    return value


def _decode_json_uint(text: JSONText, bits: int) -> int:
    """Decode a JSON number into an unsigned integer of ``bits`` bits.

    A JSON ``null`` leaves the value at zero.
    """
    source = _to_text(text)
    value = _decode_json(source)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {source!r} as an unsigned integer")
    if source.lstrip().startswith("-") or not 0 <= value < 1 << bits:
        raise ValueError(f"value {source!r} out of range for {bits}-bit unsigned integer")
    return value


def _json_string(s: str) -> str:
    """Encode a string as JSON, escaping HTML-sensitive characters."""
    encoded = json.dumps(s, ensure_ascii=False)
    return (
        encoded.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


@dataclass(frozen=True)
class Uint8OrString:
    """Holds either an unsigned 8-bit number or a string."""

    type: NumOrStringType = NumOrStringType.NUM
    num_val: int = 0
    str_val: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.num_val <= UINT8_MAX:
            raise ValueError(f"number {self.num_val} does not fit in 8 bits")

    @classmethod
    def from_json(cls, text: JSONText):
        """Decode a JSON number or string.

        A string holding a number in 0..255 is stored as a number.
        """
        source = _to_text(text)
        if not source:
            raise ValueError("unexpected end of JSON input")
        if source[0] == '"':
            value = _decode_json(source)
            if not isinstance(value, str):
                raise ValueError(f"cannot decode {source!r} as a string")
            try:
                return cls(NumOrStringType.NUM, num_val=_parse_uint(value, 8))
            except ValueError:
                return cls(NumOrStringType.STRING, str_val=value)
        return cls(NumOrStringType.NUM, num_val=_decode_json_uint(source, 8))

    def to_json(self) -> str:
        """Encode as a JSON number if a number can be derived, else a string."""
        try:
            return json.dumps(self.num_value())
        except ValueError:
            return _json_string(self.str_val)

    def __str__(self) -> str:
        if self.type == NumOrStringType.STRING:
            return self.str_val
        return str(self.num_val)

    def num_value(self) -> int:
        """Return the number, converting a string value if it holds one."""
        if self.type == NumOrStringType.STRING:
            return _parse_uint(self.str_val, 8)
        return self.num_val