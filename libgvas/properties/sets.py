"""SetProperty.

Layout:
    uint64  length
    FString inner_type
    uint8   0
    int32   removed_count
    int32   count
    elements, without per-element headers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Tuple

from ..binio import Bin, BinWriter
from ..errors import InvalidValue
from ..hints import HintStack
from . import dispatch
from .common import check_element, check_end, read_count, slot_length, suggested_length

if TYPE_CHECKING:
    from . import Property


@dataclass(frozen=True)
class SetProperty:
    inner_type: str
    properties: Tuple["Property", ...] = ()
    removed_count: int = 0

    property_type: ClassVar[str] = "SetProperty"

    @classmethod
    def read(cls, b: Bin, hints: HintStack) -> "SetProperty":
        length = b.u64()
        inner_type = b.fstring()
        b.u8()  # separator

        start = b.tell()
        removed_count = b.s32()
        count = read_count(b)

        even = suggested_length(length, 8, count)
        properties = tuple(
            dispatch.read_property(
                b, hints, inner_type, False, slot_length(b, start + length, even, i == count - 1)
            )
            for i in range(count)
        )

        check_end(b, hints, start, length)
        return cls(inner_type, properties, removed_count)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            raise InvalidValue("SetProperty cannot be stored inside another container")

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.fstring(self.inner_type)
        w.u8(0)

        start = w.tell()
        w.s32(self.removed_count)
        w.s32(len(self.properties))
        for prop in self.properties:
            check_element(prop, self.inner_type)
            prop.write(w, False)

        w.patch_u64(begin, w.tell() - start)
