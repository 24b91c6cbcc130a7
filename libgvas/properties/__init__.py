"""Property kinds of the GVAS property system.

`dispatch` is imported first: the struct and container modules import it back
as a module for their element reads.
"""

from typing import Union

from . import dispatch
from .arrays import ArrayProperty, ArrayStructInfo
from .dispatch import read_property, read_property_list, write_property_list
from .maps import MapProperty
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
from .sets import SetProperty
from .structs import CustomStruct, StructProperty, custom_struct
from .unknown import UnknownProperty

Property = Union[
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
    StructProperty,
    ArrayProperty,
    SetProperty,
    MapProperty,
    UnknownProperty,
]

__all__ = [
    "ArrayProperty",
    "ArrayStructInfo",
    "BoolProperty",
    "ByteProperty",
    "CustomStruct",
    "DoubleProperty",
    "EnumProperty",
    "FloatProperty",
    "Int8Property",
    "Int16Property",
    "Int64Property",
    "IntProperty",
    "MapProperty",
    "Property",
    "SetProperty",
    "StrProperty",
    "StructProperty",
    "UInt16Property",
    "UInt32Property",
    "UInt64Property",
    "UnknownProperty",
    "custom_struct",
    "dispatch",
    "read_property",
    "read_property_list",
    "write_property_list",
]
