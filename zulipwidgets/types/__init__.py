from .primitive import JSON, UserID, OptionKey
from .option_key import CANNED, MalformedKeyShapeError, option_key, parse_option_key
from .widget import (
    WidgetType,
    WidgetData,
    PollWidgetData,
    PollWidgetExtraData,
    UnsupportedWidgetData,
    UnsupportedWidgetEvent,
)
from .poll import (
    PollEventType,
    PollVoteOp,
    PollEvent,
    PollNewOptionEvent,
    PollQuestionEvent,
    PollVoteEvent,
    UnknownPollEvent,
)
from .submessage import Submessage, SubmessageType, WidgetEventData
from .util import (
    AbstractSerializable,
    FallbackEnum,
    MalformedFieldError,
    Serializable,
    SerializableAttrs,
    SerializableEnum,
    SerializerError,
    deserializer,
    field,
)

__all__ = [
    "JSON",
    "UserID",
    "OptionKey",
    "CANNED",
    "MalformedKeyShapeError",
    "option_key",
    "parse_option_key",
    "WidgetType",
    "WidgetData",
    "PollWidgetData",
    "PollWidgetExtraData",
    "UnsupportedWidgetData",
    "UnsupportedWidgetEvent",
    "PollEventType",
    "PollVoteOp",
    "PollEvent",
    "PollNewOptionEvent",
    "PollQuestionEvent",
    "PollVoteEvent",
    "UnknownPollEvent",
    "Submessage",
    "SubmessageType",
    "WidgetEventData",
    "AbstractSerializable",
    "FallbackEnum",
    "MalformedFieldError",
    "Serializable",
    "SerializableAttrs",
    "SerializableEnum",
    "SerializerError",
    "deserializer",
    "field",
]
