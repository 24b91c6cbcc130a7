"""libgvas.hints

Scoped property-path tracking and struct-type hint lookup.

Structs stored inside ArrayProperty/SetProperty/MapProperty elements do not
carry their type name. The decoder tracks where it is as a dotted path, e.g.

    UnLockedMissionParameters.MapProperty.Key.StructProperty

and looks that path up in a caller-supplied hint map to learn the struct type.
The same path is reported when a hint is missing.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Mapping, Optional

from .errors import MissingHint


class HintStack:
    def __init__(self, hints: Optional[Mapping[str, str]] = None):
        self.hints: Mapping[str, str] = hints if hints is not None else {}
        self._stack: List[str] = []

    @property
    def path(self) -> str:
        return ".".join(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    @contextmanager
    def scope(self, segment: str) -> Iterator[None]:
        self._stack.append(segment)
        try:
            yield
        finally:
            self._stack.pop()

    def resolve(self, property_type: str, position: int) -> str:
        path = self.path
        try:
            return self.hints[path]
        except KeyError:
            raise MissingHint(property_type, path, position) from None
