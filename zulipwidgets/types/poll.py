# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import ClassVar, Dict, NewType, Union

from attr import dataclass

from .option_key import option_key, parse_option_key
from .primitive import JSON, OptionKey, UserID
from .util import (
    FallbackEnum,
    MalformedFieldError,
    Serializable,
    SerializableAttrs,
    deserializer,
    field,
)


class PollEventType(FallbackEnum):
    """The ``type`` in the content of a submessage acting on a poll."""

    NEW_OPTION = "new_option"
    QUESTION = "question"
    VOTE = "vote"
    UNKNOWN = "unknown"


class PollVoteOp(FallbackEnum):
    """
    The ``vote`` field of a :class:`PollVoteEvent`. Any value other than ``1`` and ``-1``
    (including ``null``) is ``UNKNOWN``, which has no numeric value of its own.
    """

    ADD = 1
    REMOVE = -1
    UNKNOWN = None


class BasePollEvent(SerializableAttrs):
    type: ClassVar[PollEventType]

    def serialize(self) -> JSON:
        return {"type": self.type.serialize(), **super().serialize()}


@dataclass
class PollNewOptionEvent(BasePollEvent):
    """A poll event when an option is added."""

    type: ClassVar[PollEventType] = PollEventType.NEW_OPTION

    option: str
    # A sequence number among the options added to this poll by the submessage sender.
    idx: int

    def option_key(self, sender_id: UserID) -> OptionKey:
        """Get the key of the added option. ``sender_id`` is the sender of the submessage."""
        return option_key(sender_id, self.idx)


@dataclass
class PollQuestionEvent(BasePollEvent):
    """A poll event when the question has been edited."""

    type: ClassVar[PollEventType] = PollEventType.QUESTION

    question: str


@dataclass
class PollVoteEvent(BasePollEvent):
    """
    A poll event when a vote has been cast or removed.

    Deserializing also checks that :attr:`key` is a valid option key and raises
    :class:`MalformedKeyShapeError` if it isn't.
    """

    type: ClassVar[PollEventType] = PollEventType.VOTE

    key: OptionKey
    op: PollVoteOp = field(json="vote", default=PollVoteOp.UNKNOWN, omit_empty=False)

    @classmethod
    def deserialize(cls, data: JSON) -> "PollVoteEvent":
        # null is allowed (it's an unknown op), but the key itself must be there
        if isinstance(data, dict) and "vote" not in data:
            raise MalformedFieldError(
                f"Missing value for required key vote in {cls.__name__}", key="vote"
            )
        evt = super().deserialize(data)
        parse_option_key(evt.key)
        return evt


@dataclass
class UnknownPollEvent(Serializable):
    """
    A poll event with a ``type`` that isn't supported. The original dict is stored by reference,
    not copied, so it must not be modified after deserializing.
    """

    type: ClassVar[PollEventType] = PollEventType.UNKNOWN

    raw: Dict[str, JSON]

    def serialize(self) -> JSON:
        return self.raw

    @classmethod
    def deserialize(cls, raw: JSON) -> "UnknownPollEvent":
        return cls(raw=raw)


poll_event_type_to_class = {
    PollEventType.NEW_OPTION: PollNewOptionEvent,
    PollEventType.QUESTION: PollQuestionEvent,
    PollEventType.VOTE: PollVoteEvent,
}

PollEvent = NewType(
    "PollEvent",
    Union[PollNewOptionEvent, PollQuestionEvent, PollVoteEvent, UnknownPollEvent],
)


@deserializer(PollEvent)
def deserialize_poll_event(data: JSON) -> PollEvent:
    if not isinstance(data, dict):
        raise MalformedFieldError(f"Expected an object for a poll event, got {data!r}")
    raw_type = data.get("type")
    if raw_type is not None and not isinstance(raw_type, str):
        raise MalformedFieldError(
            f"Expected str for poll event type, got {type(raw_type).__name__}", key="type"
        )
    try:
        event_class = poll_event_type_to_class[PollEventType.find(raw_type)]
    except KeyError:
        return UnknownPollEvent(data)
    return event_class.deserialize({k: v for k, v in data.items() if k != "type"})


setattr(PollEvent, "deserialize", deserialize_poll_event)
