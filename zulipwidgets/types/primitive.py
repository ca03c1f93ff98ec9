# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Dict, List, NewType, Union

JSON = NewType("JSON", Union[str, int, float, bool, None, Dict[str, "JSON"], List["JSON"]])
JSON.__doc__ = "A union type that covers all JSON-serializable data."

UserID = NewType("UserID", int)
UserID.__doc__ = "A Zulip user ID, e.g. the sender of a submessage."

OptionKey = NewType("OptionKey", str)
OptionKey.__doc__ = """
A string identifying one poll option for its whole lifetime (``canned,0`` or ``42,3``).
See :func:`zulipwidgets.types.option_key`.
"""
