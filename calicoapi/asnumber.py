"""BGP autonomous system numbers."""

from __future__ import annotations

from .uint8orstring import JSONText, _decode_json, _decode_json_uint, _parse_uint

_UINT32_MAX = 0xFFFFFFFF


class ASNumber(int):
    """An unsigned 32-bit AS number."""

    def __new__(cls, value: int = 0) -> ASNumber:
        number = int(value)
        if not 0 <= number <= _UINT32_MAX:
            raise ValueError(f"AS number {number} out of range")
        return super().__new__(cls, number)

    @classmethod
    def from_json(cls, text: JSONText) -> ASNumber:
        """Decode a JSON number, or a string in plain or dotted notation."""
        try:
            return cls(_decode_json_uint(text, 32))
        except ValueError:
            value = _decode_json(text)
            if not isinstance(value, str):
                raise ValueError(f"cannot decode {text!r} as an AS number") from None
            return as_number_from_string(value)

    def to_json(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"ASNumber({int.__repr__(self)})"


def as_number_from_string(s: str) -> ASNumber:
    """Parse an AS number given as a plain number or in dotted notation."""
    try:
        return ASNumber(_parse_uint(s, 32))
    except ValueError:
        pass
    parts = s.split(".")
    if len(parts) != 2:
        raise ValueError(f"invalid AS Number format ({s})")
    try:
        high, low = (_parse_uint(part, 16) for part in parts)
    except ValueError:
        raise ValueError(f"invalid AS Number format ({s})") from None
    return ASNumber((high << 16) + low)