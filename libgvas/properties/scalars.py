"""Fixed-encoding property kinds.

Header layout shared by the numeric kinds:

    uint64 length    (size of the value bytes)
    uint8  0         (separator)
    <value>

Inside array/set/map elements only <value> is stored.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..binio import Bin, BinWriter
from ..errors import InvalidValue
from ..model import FloatValueEq


@dataclass(frozen=True, eq=False)
class _NumericProperty(FloatValueEq):
    value: Union[int, float]

    property_type: ClassVar[str] = ""
    _fmt: ClassVar[str] = ""

    @classmethod
    def read(cls, b: Bin, include_header: bool):
        if include_header:
            b.u64()  # length
            b.u8()  # separator
        return cls(struct.unpack(cls._fmt, b.read(struct.calcsize(cls._fmt)))[0])

    def write(self, w: BinWriter, include_header: bool) -> None:
        try:
            packed = struct.pack(self._fmt, self.value)
        except (struct.error, OverflowError) as e:
            raise InvalidValue(f"{self.property_type} cannot hold {self.value!r}: {e}") from e

        if include_header:
            w.fstring(self.property_type)
            w.u64(len(packed))
            w.u8(0)
        w.write(packed)


class Int8Property(_NumericProperty):
    property_type = "Int8Property"
    _fmt = "<b"


class Int16Property(_NumericProperty):
    property_type = "Int16Property"
    _fmt = "<h"


class UInt16Property(_NumericProperty):
    property_type = "UInt16Property"
    _fmt = "<H"


class IntProperty(_NumericProperty):
    property_type = "IntProperty"
    _fmt = "<i"


class UInt32Property(_NumericProperty):
    property_type = "UInt32Property"
    _fmt = "<I"


class Int64Property(_NumericProperty):
    property_type = "Int64Property"
    _fmt = "<q"


class UInt64Property(_NumericProperty):
    property_type = "UInt64Property"
    _fmt = "<Q"


class FloatProperty(_NumericProperty):
    property_type = "FloatProperty"
    _fmt = "<f"


class DoubleProperty(_NumericProperty):
    property_type = "DoubleProperty"
    _fmt = "<d"


@dataclass(frozen=True)
class ByteProperty:
    """A byte, or an enum member name when the header names an enum.

    Header layout:
        uint64 length
        FString enum_name ("None" for a plain byte)
        uint8  0
        uint8 value        if length == 1
        FString value      otherwise
    """

    value: Union[int, str]
    enum_name: Optional[str] = None

    property_type: ClassVar[str] = "ByteProperty"

    @classmethod
    def read(cls, b: Bin, include_header: bool) -> "ByteProperty":
        if not include_header:
            return cls(b.u8())

        length = b.u64()
        enum_name = b.fstring()
        b.u8()  # separator
        value: Union[int, str] = b.u8() if length == 1 else b.fstring()
        return cls(value, None if enum_name == "None" else enum_name)

    def _write_byte(self, w: BinWriter) -> None:
        try:
            w.u8(self.value)
        except (struct.error, OverflowError) as e:
            raise InvalidValue(f"ByteProperty cannot hold {self.value!r}") from e

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            if isinstance(self.value, str):
                raise InvalidValue(f"ByteProperty element must be an int, got {self.value!r}")
            self._write_byte(w)
            return

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.fstring(self.enum_name if self.enum_name is not None else "None")
        w.u8(0)
        start = w.tell()
        if isinstance(self.value, str):
            w.fstring(self.value)
        else:
            self._write_byte(w)
        w.patch_u64(begin, w.tell() - start)


@dataclass(frozen=True)
class BoolProperty:
    """Header layout: uint64 0, uint8 value, uint8 separator. The value lives in the header."""

    value: bool

    property_type: ClassVar[str] = "BoolProperty"

    @classmethod
    def read(cls, b: Bin, include_header: bool) -> "BoolProperty":
        if include_header:
            b.u64()  # always 0
            value = b.u8()
            b.u8()  # separator
        else:
            value = b.u8()
        return cls(value != 0)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if include_header:
            w.fstring(self.property_type)
            w.u64(0)
            w.u8(1 if self.value else 0)
            w.u8(0)
        else:
            w.u8(1 if self.value else 0)


@dataclass(frozen=True)
class EnumProperty:
    value: str
    # Only present when read with a per-property header.
    enum_type: Optional[str] = None

    property_type: ClassVar[str] = "EnumProperty"

    @classmethod
    def read(cls, b: Bin, include_header: bool) -> "EnumProperty":
        if not include_header:
            return cls(b.fstring())

        b.u64()  # length
        enum_type = b.fstring()
        b.u8()  # separator
        return cls(b.fstring(), None if enum_type == "None" else enum_type)

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            w.fstring(self.value)
            return

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.fstring(self.enum_type if self.enum_type is not None else "None")
        w.u8(0)
        start = w.tell()
        w.fstring(self.value)
        w.patch_u64(begin, w.tell() - start)


@dataclass(frozen=True)
class StrProperty:
    value: str

    property_type: ClassVar[str] = "StrProperty"

    @classmethod
    def read(cls, b: Bin, include_header: bool) -> "StrProperty":
        if include_header:
            b.u64()  # length
            b.u8()  # separator
        return cls(b.fstring())

    def write(self, w: BinWriter, include_header: bool) -> None:
        if not include_header:
            w.fstring(self.value)
            return

        w.fstring(self.property_type)
        begin = w.tell()
        w.u64(0)
        w.u8(0)
        start = w.tell()
        w.fstring(self.value)
        w.patch_u64(begin, w.tell() - start)
