"""MapProperty.

Layout:
    uint64  length
    FString key_type
    FString value_type
    uint8   0
    int32   removed_count
    int32   count
    (key, value) pairs, without per-element headers

Keys are decoded under the extra path segment "Key" and values under "Value",
so struct keys and struct values are hinted separately, e.g.
`Seasons.MapProperty.Key.StructProperty`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..binio import Bin, BinWriter
from ..errors import InvalidValue
from ..hints import HintStack
from . import dispatch
from .common import check_element, check_end, read_count, slot_length, suggested_length

if TYPE_CHECKING:
    from . import Property


@dataclass(frozen=True)
class MapProperty:
    key_type: str
    value_type: str
    entries: Tuple[Tuple["Property", "Property"], ...] = ()
    removed_count: int = 0

    property_type: ClassVar[str] = "MapProperty"

    def get(self, key: "Property") -> Optional["Property"]:
        for k, v in self.entries:
            if k == key:
                return v
        return None

    @classmethod
    def read(cls, b: Bin, hints: HintStack) -> "MapProperty":
        length = b.u64()
        key_type = b.fstring()
        value_type = b.fstring()
        b.u8()  # separator

        start = b.tell()
        removed_count = b.s32()
        count = read_count(b)

        end = start + length
        even = suggested_length(length, 8, count * 2)
        entries = []
        for i in range(count):
            with hints.scope("Key"):
                key = dispatch.read_property(b, hints, key_type, False, even)
            with hints.scope("Value"):
                value = dispatch.read_property(
                    b, hints, value_type, False, slot_length(b, end, even, i == count - 1)
                )
            entries.append((key, value))

        check_end(b, hints, start, length)
        return cls(key_type, value_type, tuple(entries), removed_count)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            raise InvalidValue("MapProperty cannot be stored inside another container")

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.fstring(self.key_type)
        w.fstring(self.value_type)
        w.u8(0)

        start = w.tell()
        w.s32(self.removed_count)
        w.s32(len(self.entries))
        for key, value in self.entries:
            check_element(key, self.key_type)
            check_element(value, self.value_type)
            key.write(w, False)
            value.write(w, False)

        w.patch_u64(begin, w.tell() - start)
