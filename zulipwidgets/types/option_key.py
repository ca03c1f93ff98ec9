# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Optional, Pattern, Tuple
import re

from .primitive import OptionKey, UserID
from .util import SerializerError

# "canned" is the marker the web client coined for options from the initial widget data.
CANNED = "canned"

option_key_regex: Pattern = re.compile(r"(canned|[0-9]+),([0-9]+)")


class MalformedKeyShapeError(SerializerError, ValueError):
    """
    Raised when a poll option key is a string, but doesn't look like ``<owner>,<index>``.

    This is not a :class:`MalformedFieldError`: the field is present, but the identifier in it
    can't be matched to any option.
    """

    key: str

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid poll option key {key!r}")
        self.key = key


def option_key(sender_id: Optional[UserID], idx: int) -> OptionKey:
    """
    Get the key identifying the ``idx``'th option added to a poll by user ``sender_id``.

    Args:
        sender_id: The user who added the option with a ``new_option`` event, or ``None`` for
            options that are part of the initial poll widget data.
        idx: The index of the option among the initial options, or the ``idx`` field of the
            ``new_option`` event.

    Examples:
        >>> option_key(None, 2)
        'canned,2'
        >>> option_key(42, 0)
        '42,0'
    """
    return OptionKey(f"{CANNED if sender_id is None else sender_id},{idx}")


def parse_option_key(key: str) -> Tuple[Optional[UserID], int]:
    """
    Split an option key back into the sender ID and index passed to :func:`option_key`.

    Raises:
        MalformedKeyShapeError: if the key isn't in the ``<owner>,<index>`` format.
    """
    match = option_key_regex.fullmatch(key)
    if not match:
        raise MalformedKeyShapeError(key)
    owner, idx = match.groups()
    return (None if owner == CANNED else UserID(int(owner))), int(idx)
