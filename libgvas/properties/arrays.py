"""ArrayProperty.

Layout:
    uint64  length            (bytes from `count` to the end of the elements)
    FString inner_type
    uint8   0
    int32   count
    elements, without per-element headers

Struct arrays store the struct identity once, between `count` and the elements:
    FString field_name
    FString "StructProperty"
    uint64  inner_length      (bytes of the element bodies)
    FString struct type name
    16 bytes guid
    uint8   0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Tuple

from ..binio import Bin, BinWriter
from ..errors import InvalidValue
from ..hints import HintStack
from ..model import Guid
from . import dispatch
from .common import check_element, check_end, read_count, slot_length, suggested_length
from .structs import StructProperty

if TYPE_CHECKING:
    from . import Property


@dataclass(frozen=True)
class ArrayStructInfo:
    field_name: str
    type_name: str
    guid: Guid = Guid()


@dataclass(frozen=True)
class ArrayProperty:
    inner_type: str
    properties: Tuple["Property", ...] = ()
    struct_info: Optional[ArrayStructInfo] = None

    property_type: ClassVar[str] = "ArrayProperty"

    @classmethod
    def of_structs(
        cls,
        field_name: str,
        type_name: str,
        properties: Iterable[StructProperty],
        guid: Guid = Guid(),
    ) -> "ArrayProperty":
        return cls("StructProperty", tuple(properties), ArrayStructInfo(field_name, type_name, guid))

    @classmethod
    def read(cls, b: Bin, hints: HintStack) -> "ArrayProperty":
        length = b.u64()
        inner_type = b.fstring()
        b.u8()  # separator

        start = b.tell()
        count = read_count(b)

        if inner_type == "StructProperty":
            field_name = b.fstring()
            b.fstring()  # inner type again
            b.u64()  # inner length
            type_name = b.fstring()
            guid = b.guid()
            b.u8()  # separator

            properties = tuple(
                StructProperty.read_with_type_name(b, hints, type_name) for _ in range(count)
            )
            struct_info = ArrayStructInfo(field_name, type_name, guid)
        else:
            even = suggested_length(length, 4, count)
            properties = tuple(
                dispatch.read_property(
                    b, hints, inner_type, False, slot_length(b, start + length, even, i == count - 1)
                )
                for i in range(count)
            )
            struct_info = None

        check_end(b, hints, start, length)
        return cls(inner_type, properties, struct_info)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            raise InvalidValue("ArrayProperty cannot be stored inside another container")

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.fstring(self.inner_type)
        w.u8(0)

        start = w.tell()
        w.s32(len(self.properties))

        if self.inner_type == "StructProperty":
            self._write_structs(w)
        else:
            for prop in self.properties:
                check_element(prop, self.inner_type)
                prop.write(w, False)

        w.patch_u64(begin, w.tell() - start)

    def _write_structs(self, w: BinWriter) -> None:
        info = self.struct_info
        if info is None:
            raise InvalidValue("Array of StructProperty has no struct_info")

        w.fstring(info.field_name)
        w.fstring("StructProperty")
        inner_begin = w.tell()
        w.u64(0)
        w.fstring(info.type_name)
        w.guid(info.guid)
        w.u8(0)

        inner_start = w.tell()
        for prop in self.properties:
            check_element(prop, "StructProperty")
            if prop.type_name != info.type_name:
                raise InvalidValue(
                    f"Array of {info.type_name} structs holds a {prop.type_name} struct"
                )
            prop.write(w, False)

        w.patch_u64(inner_begin, w.tell() - inner_start)
