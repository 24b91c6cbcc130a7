from __future__ import annotations
import os
from typing import Mapping, Optional
from .model import GvasSummary, GvasPropertyInfo
from .properties import (
    ArrayProperty,
    CustomStruct,
    EnumProperty,
    MapProperty,
    SetProperty,
    StructProperty,
    UnknownProperty,
)
from .reader import decode_gvas

_MAX_PREVIEW = 60

def describe(prop) -> str:
    # One-line preview; containers and custom structs only report their shape.
    if isinstance(prop, ArrayProperty):
        inner = prop.struct_info.type_name if prop.struct_info else prop.inner_type
        return f"[{len(prop.properties)} x {inner}]"
    if isinstance(prop, SetProperty):
        return f"{{{len(prop.properties)} x {prop.inner_type}}}"
    if isinstance(prop, MapProperty):
        return f"{{{len(prop.entries)} x {prop.key_type} -> {prop.value_type}}}"
    if isinstance(prop, StructProperty):
        if isinstance(prop.value, CustomStruct):
            return f"{prop.type_name} ({len(prop.value.properties)} fields)"
        return f"{prop.type_name} {prop.value}"
    if isinstance(prop, EnumProperty):
        return prop.value
    if isinstance(prop, UnknownProperty):
        return f"<{len(prop.raw)} raw bytes>"

    text = repr(getattr(prop, "value", prop))
    if len(text) > _MAX_PREVIEW:
        text = text[: _MAX_PREVIEW - 3] + "..."
    return text

def summarize_gvas(path: str, hints: Optional[Mapping[str, str]] = None) -> GvasSummary:
    size = os.path.getsize(path)
    with open(path, "rb") as f:
        data = f.read()

    gvas = decode_gvas(data, hints)

    properties = [
        GvasPropertyInfo(name=name, property_type=prop.property_type, value=describe(prop))
        for name, prop in gvas.properties.items()
    ]

    return GvasSummary(
        path=path,
        file_size=size,
        engine_version=str(gvas.header.engine_version),
        save_game_class_name=gvas.header.save_game_class_name,
        custom_version_count=len(gvas.header.custom_versions),
        properties=properties,
    )
