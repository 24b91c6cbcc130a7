"""StructProperty and nested property lists.

Header layout:
    uint64  length        (size of the body)
    FString type_name
    16 bytes guid
    uint8   0             (separator)
    <body>

The body is a fixed layout from `struct_types` when the type name is
registered there, otherwise a property list:

    (FString name, FString type, property with header)*  FString "None"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Iterator, Optional, Tuple

from ..binio import Bin, BinWriter
from ..errors import InvalidValue
from ..hints import HintStack
from ..model import Guid
from ..struct_types import lookup_struct_type
from . import dispatch

if TYPE_CHECKING:
    from . import Property


@dataclass(frozen=True)
class CustomStruct:
    """Ordered (name, property) pairs; names may repeat for static arrays."""

    properties: Tuple[Tuple[str, "Property"], ...] = ()

    def get(self, name: str) -> Optional["Property"]:
        for n, p in self.properties:
            if n == name:
                return p
        return None

    def __iter__(self) -> Iterator[Tuple[str, "Property"]]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)


@dataclass(frozen=True)
class StructProperty:
    type_name: str
    value: Any
    guid: Guid = Guid()

    property_type: ClassVar[str] = "StructProperty"

    @classmethod
    def read_with_header(cls, b: Bin, hints: HintStack) -> "StructProperty":
        b.u64()  # length
        type_name = b.fstring()
        guid = b.guid()
        b.u8()  # separator
        return cls.read_with_type_name(b, hints, type_name, guid)

    @classmethod
    def read_with_type_name(
        cls, b: Bin, hints: HintStack, type_name: str, guid: Guid = Guid()
    ) -> "StructProperty":
        layout = lookup_struct_type(type_name)
        if layout is not None:
            return cls(type_name, layout.read(b), guid)
        return cls(type_name, CustomStruct(tuple(dispatch.read_property_list(b, hints))), guid)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if include_header:
            w.fstring(self.property_type)
            begin = w.tell()
            w.u64(0)
            w.fstring(self.type_name)
            w.guid(self.guid)
            w.u8(0)

        start = w.tell()
        self._write_body(w)

        if include_header:
            w.patch_u64(begin, w.tell() - start)

    def _write_body(self, w: BinWriter) -> None:
        layout = lookup_struct_type(self.type_name)
        if layout is None:
            if not isinstance(self.value, CustomStruct):
                raise InvalidValue(
                    f"Struct {self.type_name} has no fixed layout; value must be a CustomStruct"
                )
            dispatch.write_property_list(w, self.value.properties)
            return

        if not isinstance(self.value, layout.value_type):
            raise InvalidValue(
                f"Struct {self.type_name} expects {layout.value_type.__name__}, "
                f"got {type(self.value).__name__}"
            )
        layout.write(w, self.value)


def custom_struct(type_name: str, properties: Iterable[Tuple[str, "Property"]], guid: Guid = Guid()) -> StructProperty:
    return StructProperty(type_name, CustomStruct(tuple(properties)), guid)
