"""Type-tag driven property decoding.

`read_property` maps a type tag string to the reader for that kind. Container
and struct readers call back into this module for their elements, so they
import it as a module rather than importing names from it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from ..binio import Bin, BinWriter
from ..errors import UnknownPropertyLength
from ..hints import HintStack
from . import arrays, maps, sets, structs
from .scalars import (
    BoolProperty,
    ByteProperty,
    DoubleProperty,
    EnumProperty,
    FloatProperty,
    Int8Property,
    Int16Property,
    Int64Property,
    IntProperty,
    StrProperty,
    UInt16Property,
    UInt32Property,
    UInt64Property,
)
from .unknown import UnknownProperty

if TYPE_CHECKING:
    from . import Property

log = logging.getLogger(__name__)

# Kinds whose reader only needs the cursor and the header flag.
SCALAR_READERS = {
    cls.property_type: cls.read
    for cls in (
        Int8Property,
        ByteProperty,
        Int16Property,
        UInt16Property,
        IntProperty,
        UInt32Property,
        Int64Property,
        UInt64Property,
        FloatProperty,
        DoubleProperty,
        BoolProperty,
        EnumProperty,
        StrProperty,
    )
}

END_OF_PROPERTIES = "None"


def read_property(
    b: Bin,
    hints: HintStack,
    property_type: str,
    include_header: bool,
    suggested_length: Optional[int] = None,
) -> "Property":
    """Decode one property of kind `property_type` at the cursor.

    `include_header` says whether a per-property header precedes the value
    (top level and struct members) or not (array/set/map elements).
    `suggested_length` sizes an unknown kind when there is no header.
    """
    with hints.scope(property_type):
        scalar = SCALAR_READERS.get(property_type)
        if scalar is not None:
            return scalar(b, include_header)

        if property_type == "StructProperty":
            if include_header:
                return structs.StructProperty.read_with_header(b, hints)
            type_name = hints.resolve(property_type, b.tell())
            return structs.StructProperty.read_with_type_name(b, hints, type_name)

        if property_type == "ArrayProperty":
            return arrays.ArrayProperty.read(b, hints)
        if property_type == "SetProperty":
            return sets.SetProperty.read(b, hints)
        if property_type == "MapProperty":
            return maps.MapProperty.read(b, hints)

        if include_header:
            return UnknownProperty.read_with_header(b, property_type)
        if suggested_length is not None:
            return UnknownProperty.read_with_length(b, property_type, suggested_length)
        raise UnknownPropertyLength(property_type, hints.path, b.tell())


def read_property_list(b: Bin, hints: HintStack) -> List[Tuple[str, "Property"]]:
    """Read (name, type, property) triples up to the "None" name."""
    props: List[Tuple[str, "Property"]] = []
    while True:
        name = b.fstring()
        if name == END_OF_PROPERTIES:
            return props

        property_type = b.fstring()
        with hints.scope(name):
            prop = read_property(b, hints, property_type, True)
        log.debug("%s%s: %s ends at %d", "  " * hints.depth, name, property_type, b.tell())
        props.append((name, prop))


def write_property_list(w: BinWriter, props: Iterable[Tuple[str, "Property"]]) -> None:
    for name, prop in props:
        w.fstring(name)
        prop.write(w, True)
    w.fstring(END_OF_PROPERTIES)
