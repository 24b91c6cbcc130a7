"""libgvas

Reader/writer for Unreal Engine GVAS save files.

    from libgvas import decode, encode

    gvas = decode(data)                      # no hints
    gvas = decode(data, {"Path.To.StructProperty": "Guid"})
    data = encode(gvas)
"""

from .errors import (
    DeserializeError,
    GvasError,
    InvalidCount,
    InvalidString,
    InvalidValue,
    MissingHint,
    SerializeError,
    UnexpectedEof,
    UnknownPropertyLength,
)
from .model import FCustomVersion, FEngineVersion, GvasFile, GvasHeader, Guid
from .reader import decode_gvas, read_gvas
from .writer import encode_gvas, write_gvas

decode = decode_gvas
encode = encode_gvas

__all__ = [
    "DeserializeError",
    "FCustomVersion",
    "FEngineVersion",
    "GvasError",
    "GvasFile",
    "GvasHeader",
    "Guid",
    "InvalidCount",
    "InvalidString",
    "InvalidValue",
    "MissingHint",
    "SerializeError",
    "UnexpectedEof",
    "UnknownPropertyLength",
    "decode",
    "decode_gvas",
    "encode",
    "encode_gvas",
    "read_gvas",
    "write_gvas",
]
