# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import ClassVar, List, NewType, Union

from attr import dataclass

from .option_key import option_key
from .primitive import JSON, OptionKey
from .util import FallbackEnum, Serializable, SerializableAttrs, deserializer, field


class WidgetType(FallbackEnum):
    """The ``widget_type`` in the content of the first submessage of a message."""

    POLL = "poll"
    UNKNOWN = "unknown"


@dataclass
class PollWidgetExtraData(SerializableAttrs):
    # Both seem to always be present, but the server doesn't enforce any structure on
    # submessage data and the web client treats them as optional.
    question: str = ""
    options: List[str] = field(factory=list)


@dataclass
class PollWidgetData(SerializableAttrs):
    """The data in the first submessage of a message that makes the message a poll."""

    widget_type: ClassVar[WidgetType] = WidgetType.POLL

    extra_data: PollWidgetExtraData = field(factory=PollWidgetExtraData)

    def serialize(self) -> JSON:
        return {"widget_type": self.widget_type.serialize(), **super().serialize()}

    def option_keys(self) -> List[OptionKey]:
        """Get the keys of the initial ("canned") options, in the same order as the options."""
        return [option_key(None, idx) for idx in range(len(self.extra_data.options))]


@dataclass
class UnsupportedWidgetData(Serializable):
    """
    Widget data with a ``widget_type`` that isn't supported. The original value is stored as-is,
    so it can be shown to the user or serialized back unchanged. It is stored by reference, not
    copied, so it must not be modified after deserializing.
    """

    widget_type: ClassVar[WidgetType] = WidgetType.UNKNOWN

    raw: JSON

    def serialize(self) -> JSON:
        return self.raw

    @classmethod
    def deserialize(cls, raw: JSON) -> "UnsupportedWidgetData":
        return cls(raw=raw)


@dataclass
class UnsupportedWidgetEvent(Serializable):
    """A later submessage on a widget whose type isn't supported, stored as-is by reference."""

    raw: JSON

    def serialize(self) -> JSON:
        return self.raw

    @classmethod
    def deserialize(cls, raw: JSON) -> "UnsupportedWidgetEvent":
        return cls(raw=raw)


widget_type_to_class = {
    WidgetType.POLL: PollWidgetData,
}

WidgetData = NewType("WidgetData", Union[PollWidgetData, UnsupportedWidgetData])


@deserializer(WidgetData)
def deserialize_widget_data(data: JSON) -> WidgetData:
    if not isinstance(data, dict):
        return UnsupportedWidgetData(data)
    try:
        data_class = widget_type_to_class[WidgetType.find(data.get("widget_type"))]
    except KeyError:
        return UnsupportedWidgetData(data)
    return data_class.deserialize({k: v for k, v in data.items() if k != "widget_type"})


setattr(WidgetData, "deserialize", deserialize_widget_data)
