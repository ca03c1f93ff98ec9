# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Iterable, Iterator, Optional, Union
import logging

from attr import dataclass

from .types import (
    JSON,
    OptionKey,
    PollNewOptionEvent,
    SerializerError,
    Submessage,
    SubmessageType,
    UserID,
    WidgetData,
    WidgetEventData,
    WidgetType,
)

SubmessageInput = Union[Submessage, JSON]

log = logging.getLogger("zw.widget")


@dataclass
class WidgetEvent:
    sender_id: UserID
    data: WidgetEventData

    def option_key(self) -> Optional[OptionKey]:
        """Get the key of the option this event adds, or ``None`` if it's not a new option."""
        if isinstance(self.data, PollNewOptionEvent):
            return self.data.option_key(self.sender_id)
        return None


@dataclass
class ParsedWidget:
    """
    The widget data from the first submessage of a message, plus the events from the rest.

    :attr:`events` is a lazy iterator that yields the events in the order the server sent them.
    It can only be consumed once.
    """

    sender_id: UserID
    data: WidgetData
    events: Iterator[WidgetEvent]

    @property
    def widget_type(self) -> WidgetType:
        return self.data.widget_type


def _to_submessage(raw: SubmessageInput) -> Submessage:
    if isinstance(raw, Submessage):
        return raw
    return Submessage.deserialize(raw)


def _iter_events(
    submessages: Iterator[SubmessageInput], widget_type: WidgetType, skip_errors: bool
) -> Iterator[WidgetEvent]:
    for index, raw in enumerate(submessages, start=1):
        try:
            submessage = _to_submessage(raw)
            if submessage.msg_type != SubmessageType.WIDGET:
                log.debug("Skipping submessage #%d with unknown msg_type", index)
                continue
            data = submessage.parse_widget_event(widget_type)
        except SerializerError:
            if not skip_errors:
                raise
            log.warning("Failed to parse submessage #%d, skipping", index, exc_info=True)
            continue
        yield WidgetEvent(sender_id=submessage.sender_id, data=data)


def parse_widget(
    submessages: Iterable[SubmessageInput], skip_errors: bool = False
) -> Optional[ParsedWidget]:
    """
    Parse the submessages of a message.

    The first submessage is parsed as :class:`WidgetData`, and the widget type in it decides how
    the rest are parsed. The rest are parsed lazily while iterating :attr:`ParsedWidget.events`.

    Args:
        submessages: The ``submessages`` list of a message, either as the raw dicts from the
            server or as :class:`Submessage` objects.
        skip_errors: If ``True``, submessages that fail to parse are logged and skipped. If the
            first submessage fails to parse, ``None`` is returned. If ``False``, the first
            :class:`SerializerError` is raised (from the iterator, in case of events).

    Returns:
        The parsed widget, or ``None`` if there are no submessages or the first one isn't a
        widget submessage.

    Raises:
        MalformedFieldError: if a required field is missing or has the wrong type.
        MalformedKeyShapeError: if a poll vote refers to an option key in an invalid format.
    """
    items = iter(submessages)
    try:
        first = next(items)
    except StopIteration:
        return None
    try:
        first = _to_submessage(first)
        if first.msg_type != SubmessageType.WIDGET:
            log.debug("First submessage has unknown msg_type, not parsing as widget")
            return None
        data = first.parse_widget_data()
    except SerializerError:
        if not skip_errors:
            raise
        log.warning("Failed to parse widget data, ignoring submessages", exc_info=True)
        return None
    return ParsedWidget(
        sender_id=first.sender_id,
        data=data,
        events=_iter_events(items, data.widget_type, skip_errors),
    )
