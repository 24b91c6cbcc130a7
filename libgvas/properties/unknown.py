"""Opaque pass-through for property kinds the codec does not understand.

The bytes are kept verbatim so an unmodified file re-encodes identically.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..binio import Bin, BinWriter


@dataclass(frozen=True)
class UnknownProperty:
    property_type: str
    raw: bytes

    @classmethod
    def read_with_header(cls, b: Bin, property_type: str) -> "UnknownProperty":
        length = b.u64()
        b.u8()  # separator
        return cls(property_type, b.read(length))

    @classmethod
    def read_with_length(cls, b: Bin, property_type: str, length: int) -> "UnknownProperty":
        return cls(property_type, b.read(length))

    def write(self, w: BinWriter, include_header: bool) -> None:
        if include_header:
            w.fstring(self.property_type)
            w.u64(len(self.raw))
            w.u8(0)
        w.write(self.raw)
