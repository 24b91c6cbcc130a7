"""Helpers shared by the container kinds (array, set, map)."""

from __future__ import annotations

import logging

from ..binio import Bin
from ..errors import InvalidCount, InvalidValue
from ..hints import HintStack

log = logging.getLogger(__name__)


def read_count(b: Bin) -> int:
    # Every element takes at least one byte, so a count larger than what is
    # left in the buffer can only come from a corrupt length.
    pos = b.tell()
    count = b.s32()
    if count < 0 or count > b.remaining:
        raise InvalidCount(count, pos)
    return count


def suggested_length(length: int, header_bytes: int, slots: int) -> int:
    """Even split of a container body across its element slots.

    Only used to size elements of unknown kind; it is an estimate, not an
    element boundary.
    """
    if slots <= 0:
        return 0
    return max(length - header_bytes, 0) // slots


def slot_length(b: Bin, end: int, even: int, last: bool) -> int:
    """Length handed to one element slot.

    The last slot takes whatever is left up to `end`, so an uneven split still
    leaves the cursor on the container boundary.
    """
    if last:
        return max(end - b.tell(), 0)
    return even


def check_end(b: Bin, hints: HintStack, start: int, length: int) -> None:
    end = start + length
    if b.tell() != end:
        log.warning(
            "Container at '%s' ended at offset %d but its header declares %d",
            hints.path,
            b.tell(),
            end,
        )


def check_element(prop, expected_type: str) -> None:
    actual = getattr(prop, "property_type", type(prop).__name__)
    if actual != expected_type:
        raise InvalidValue(f"Container of {expected_type} holds a {actual}")
