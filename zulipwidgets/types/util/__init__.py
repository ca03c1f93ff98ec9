from .serializable import (
    AbstractSerializable,
    MalformedFieldError,
    Serializable,
    SerializableEnum,
    SerializerError,
)
from .serializable_attrs import SerializableAttrs, deserializer, field
from .enum import FallbackEnum
