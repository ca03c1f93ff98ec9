# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Union
import json

from attr import dataclass

from .poll import PollEvent
from .primitive import JSON, UserID
from .util import FallbackEnum, MalformedFieldError, Serializable, SerializableAttrs
from .widget import UnsupportedWidgetEvent, WidgetData, WidgetType

WidgetEventData = Union[PollEvent, UnsupportedWidgetEvent]


class SubmessageType(FallbackEnum):
    """
    The ``msg_type`` of a submessage. The only type that actually exists (as of 2024, and since
    submessages were introduced in 2017) is ``widget``.
    """

    WIDGET = "widget"
    UNKNOWN = "unknown"


@dataclass
class Submessage(SerializableAttrs):
    """
    Data attached to a message for implementing widgets like polls.

    The content can't be deserialized on its own, because its meaning depends on the position of
    the submessage in the message's list of submessages: the first one is :class:`WidgetData`,
    and the rest are events whose type depends on the widget type of the first one. Use
    :meth:`parse_widget_data` and :meth:`parse_widget_event` respectively, or
    :func:`zulipwidgets.widget.parse_widget` to handle the whole list.
    """

    # The sender of this submessage, which isn't necessarily the sender of the message.
    sender_id: UserID
    # A JSON encoding of the widget data or event.
    content: str
    msg_type: SubmessageType = SubmessageType.UNKNOWN

    # TODO should submessages be sorted by id like the web client does?
    #      The id is currently only kept in unrecognized_.

    @classmethod
    def from_data(cls, sender_id: UserID, data: Serializable) -> "Submessage":
        """Create a widget submessage with the given widget data or event as the content."""
        return cls(sender_id=sender_id, content=data.json(), msg_type=SubmessageType.WIDGET)

    def parse_content(self) -> JSON:
        try:
            return json.loads(self.content)
        except (ValueError, RecursionError) as e:
            raise MalformedFieldError(
                f"Submessage content is not valid JSON: {e}", key="content"
            ) from e

    def parse_widget_data(self) -> WidgetData:
        """Parse the content as widget data. Only valid for the first submessage of a message."""
        return WidgetData.deserialize(self.parse_content())

    def parse_widget_event(self, widget_type: WidgetType) -> WidgetEventData:
        """
        Parse the content as an event on a widget. Only valid for the second and later submessages
        of a message.

        Args:
            widget_type: The type of the widget, as found in the first submessage.

        Returns:
            A poll event if the widget is a poll, or an :class:`UnsupportedWidgetEvent` containing
            the parsed content for unsupported widget types.
        """
        content = self.parse_content()
        if widget_type == WidgetType.POLL:
            return PollEvent.deserialize(content)
        return UnsupportedWidgetEvent(content)
