"""libgvas.errors

Exception hierarchy for the GVAS codec.

Read-side errors carry the byte offset where decoding stopped; hint errors also
carry the dotted property path so a caller can look at the file, add a hint and
decode again.
"""

from __future__ import annotations

from typing import Optional


class GvasError(RuntimeError):
    pass


class DeserializeError(GvasError):
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnexpectedEof(DeserializeError):
    def __init__(self, position: int, need: int):
        super().__init__(f"Unexpected EOF at {position}, need {need}", position)
        self.need = need


class InvalidString(DeserializeError):
    def __init__(self, length: int, position: int):
        super().__init__(f"Invalid string length {length} at {position}", position)
        self.length = length


class InvalidCount(DeserializeError):
    def __init__(self, count: int, position: int):
        super().__init__(f"Invalid element count {count} at {position}", position)
        self.count = count


class MissingHint(DeserializeError):
    """A struct inside an array/set/map has no type name on the wire."""

    def __init__(self, property_type: str, path: str, position: int):
        super().__init__(
            f"Missing hint for {property_type} at path '{path}' (offset {position})",
            position,
        )
        self.property_type = property_type
        self.path = path


class UnknownPropertyLength(DeserializeError):
    def __init__(self, property_type: str, path: str, position: int):
        super().__init__(
            f"Cannot size unknown property {property_type} at path '{path}' (offset {position})",
            position,
        )
        self.property_type = property_type
        self.path = path


class SerializeError(GvasError):
    pass


class InvalidValue(SerializeError):
    pass
