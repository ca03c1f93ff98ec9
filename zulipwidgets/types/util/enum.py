# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Any, Type, TypeVar

from ..primitive import JSON
from .serializable import SerializableEnum

T = TypeVar("T", bound="FallbackEnum")


class FallbackEnum(SerializableEnum):
    """
    A :class:`SerializableEnum` for a closed set of tags that the server may extend at any time.

    Subclasses must define an ``UNKNOWN`` member. Deserializing a value that isn't one of the
    other members returns ``UNKNOWN`` instead of raising. Matching is exact: strings are
    case-sensitive and ``True`` is not ``1``.

    Examples:
        >>> class Fruit(FallbackEnum):
        ...     APPLE = "apple"
        ...     UNKNOWN = "unknown"
        >>> Fruit.deserialize("apple")
        Fruit.APPLE
        >>> Fruit.deserialize("Apple")
        Fruit.UNKNOWN
    """

    @classmethod
    def find(cls: Type[T], raw: Any) -> T:
        for member in cls:
            if type(member.value) is type(raw) and member.value == raw:
                return member
        return cls.UNKNOWN

    @classmethod
    def deserialize(cls: Type[T], raw: JSON) -> T:
        return cls.find(raw)

    @property
    def is_known(self) -> bool:
        return self is not type(self).UNKNOWN
