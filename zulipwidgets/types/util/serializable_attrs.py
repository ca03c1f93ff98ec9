# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from typing import Any, Callable, Dict, Iterator, NewType, Optional, Tuple, Type, TypeVar, Union
import copy
import logging

import attr

from ..primitive import JSON
from .serializable import (
    AbstractSerializable,
    MalformedFieldError,
    Serializable,
    SerializableSubtype,
    SerializerError,
    UnknownSerializationError,
)

T = TypeVar("T")
T2 = TypeVar("T2")

Deserializer = NewType("Deserializer", Callable[[JSON], T])
deserializer_map: Dict[Type[T], Deserializer] = {}

META_JSON = "json"
META_OMIT_EMPTY = "omitempty"

log = logging.getLogger("zw.attrs")


def field(
    default: Any = attr.NOTHING,
    factory: Optional[Callable[[], Any]] = None,
    json: Optional[str] = None,
    omit_empty: bool = True,
    metadata: Optional[Dict[str, Any]] = None,
    **kwargs,
):
    """
    A wrapper around :meth:`attr.ib` to conveniently add SerializableAttrs metadata fields.

    Args:
        default: Same as attr.ib, the default value for the field.
        factory: Same as attr.ib, a factory function that creates the default value.
        json: The JSON key used for de/serializing the object.
        omit_empty: Set to omit the key from serialized objects if the value is ``None``.
        metadata: Additional metadata for attr.ib.
        **kwargs: Additional keyword arguments for attr.ib.

    Returns:
        The decorator function returned by attr.ib.

    Examples:
        >>> from attr import dataclass
        >>> from zulipwidgets.types import SerializableAttrs, field
        >>> @dataclass
        ... class PollOption(SerializableAttrs):
        ...     text: str = field(json="option", default="")
        ...
        >>> PollOption().serialize()
        {'option': ''}
        >>> PollOption.deserialize({"option": "Pizza"})
        PollOption(text='Pizza')
    """
    custom_meta = {
        META_JSON: json,
        META_OMIT_EMPTY: omit_empty,
    }
    metadata = metadata or {}
    metadata.update({k: v for k, v in custom_meta.items() if v is not None})
    return attr.ib(default=default, factory=factory, metadata=metadata, **kwargs)


def deserializer(elem_type: Type[T]) -> Callable[[Deserializer], Deserializer]:
    """
    Define a custom deserialization function for a given type hint.

    This is how tagged unions are decoded: the union is declared as a ``NewType`` and the
    deserializer picks the concrete class by looking at the tag.

    Args:
        elem_type: The type hint to define the deserializer for.

    Returns:
        Decorator for the function. The decorator will simply add the function to a map of
        deserializers and return the function.
    """

    def decorator(func: Deserializer) -> Deserializer:
        deserializer_map[elem_type] = func
        return func

    return decorator


def _fields(attrs_type: Type[T]) -> Iterator[Tuple[str, Type[T2]]]:
    for field in attr.fields(attrs_type):
        yield field.metadata.get(META_JSON, field.name), field


immutable = int, str, float, bool, type(None)
primitives = str, int, float, bool


def _safe_default(val: T) -> T:
    if isinstance(val, immutable):
        return val
    elif val is attr.NOTHING:
        return None
    elif isinstance(val, attr.Factory):
        if val.takes_self:
            return None
        else:
            return val.factory()
    return copy.copy(val)


def _dict_to_attrs(
    attrs_type: Type[T], data: JSON, default: Optional[T] = None, default_if_empty: bool = False
) -> T:
    if data is None:
        data = {}
    elif not isinstance(data, dict):
        raise MalformedFieldError(f"Expected an object for {attrs_type.__name__}, got {data!r}")
    unrecognized = {}
    new_items = {}
    fields = dict(_fields(attrs_type))
    for key, value in data.items():
        try:
            field_meta = fields[key]
        except KeyError:
            unrecognized[key] = value
            continue
        name = field_meta.name.lstrip("_")
        try:
            new_items[name] = _try_deserialize(field_meta, value)
        except MalformedFieldError as e:
            if e.key is None:
                e.key = key
            raise
        except SerializerError as e:
            raise MalformedFieldError(
                f"Failed to deserialize {value!r} into key {key} of {attrs_type.__name__}: {e}",
                key=key,
            ) from e
        except Exception as e:
            raise MalformedFieldError(
                f"Failed to deserialize {value!r} into key {key} of {attrs_type.__name__}",
                key=key,
            ) from e
    if (
        len(new_items) == 0
        and len(unrecognized) == 0
        and default_if_empty
        and default is not attr.NOTHING
    ):
        return _safe_default(default)
    try:
        obj = attrs_type(**new_items)
    except TypeError as e:
        for key, field_meta in _fields(attrs_type):
            if field_meta.default is attr.NOTHING and field_meta.name.lstrip("_") not in new_items:
                log.debug("Failed to deserialize %s into %s", data, attrs_type.__name__)
                raise MalformedFieldError(
                    f"Missing value for required key {key} in {attrs_type.__name__}", key=key
                ) from e
        raise UnknownSerializationError() from e
    if len(unrecognized) > 0:
        obj.unrecognized_ = unrecognized
    return obj


def _try_deserialize(field, value: JSON) -> T:
    try:
        return _deserialize(field.type, value, field.default)
    except (TypeError, ValueError, KeyError) as e:
        raise UnknownSerializationError() from e


def _has_custom_deserializer(cls) -> bool:
    return issubclass(cls, Serializable) and getattr(cls.deserialize, "__func__") != getattr(
        SerializableAttrs.deserialize, "__func__"
    )


def _is_optional(cls: Type[T]) -> bool:
    if cls == Any or cls == JSON:
        return True
    args = getattr(cls, "__args__", None)
    return getattr(cls, "__origin__", None) is Union and type(None) in args


def _check_primitive(cls: Type[T], value: JSON) -> T:
    # bool is a subclass of int, but true isn't a number in JSON
    if isinstance(value, bool):
        valid = cls is bool
    elif cls is float:
        valid = isinstance(value, (int, float))
    else:
        valid = isinstance(value, cls)
    if not valid:
        raise SerializerError(f"Expected {cls.__name__}, got {type(value).__name__}")
    return value


def _deserialize(cls: Type[T], value: JSON, default: Optional[T] = None) -> T:
    if value is None:
        if default is attr.NOTHING and not _is_optional(cls):
            raise SerializerError("Unexpected null value")
        return _safe_default(default)

    try:
        deser = deserializer_map[cls]
    except KeyError:
        pass
    else:
        return deser(value)
    supertype = getattr(cls, "__supertype__", None)
    if supertype:
        cls = supertype
        try:
            deser = deserializer_map[supertype]
        except KeyError:
            pass
        else:
            return deser(value)

    if attr.has(cls):
        if _has_custom_deserializer(cls):
            return cls.deserialize(value)
        return _dict_to_attrs(cls, value, default, default_if_empty=True)
    elif cls == Any or cls == JSON:
        return value
    elif cls in primitives:
        return _check_primitive(cls, value)
    elif isinstance(cls, type) and issubclass(cls, Serializable):
        return cls.deserialize(value)

    type_class = getattr(cls, "__origin__", None)
    args = getattr(cls, "__args__", None)
    if type_class is Union:
        if len(args) == 2 and isinstance(None, args[1]):
            return _deserialize(args[0], value, default)
    elif type_class == list:
        (item_cls,) = args
        if not isinstance(value, list):
            raise SerializerError(f"Expected list, got {type(value).__name__}")
        return [_deserialize(item_cls, item, attr.NOTHING) for item in value]

    return value


def _serialize_attrs_field(data: T, field: T2) -> JSON:
    field_val = getattr(data, field.name)
    if field_val is None:
        if not field.metadata.get(META_OMIT_EMPTY, True):
            if field.default is not attr.NOTHING:
                field_val = _safe_default(field.default)
        else:
            return attr.NOTHING

    return _serialize(field_val)


def _attrs_to_dict(data: T) -> JSON:
    new_dict = {}
    for json_name, field in _fields(data.__class__):
        serialized = _serialize_attrs_field(data, field)
        if serialized is not attr.NOTHING:
            new_dict[json_name] = serialized
    try:
        new_dict.update(data.unrecognized_)
    except (AttributeError, TypeError):
        pass
    return new_dict


def _serialize(val: Any) -> JSON:
    if isinstance(val, Serializable):
        return val.serialize()
    elif isinstance(val, (tuple, list, set)):
        return [_serialize(subval) for subval in val]
    elif isinstance(val, dict):
        return {_serialize(subkey): _serialize(subval) for subkey, subval in val.items()}
    elif attr.has(val.__class__):
        return _attrs_to_dict(val)
    return val


class SerializableAttrs(AbstractSerializable):
    """
    An abstract :class:`Serializable` that assumes the subclass is an attrs dataclass.

    Keys in the input that don't match any field are stored in ``unrecognized_`` and written
    back out by :meth:`serialize`.

    Examples:
        >>> from attr import dataclass
        >>> from zulipwidgets.types import SerializableAttrs
        >>> @dataclass
        ... class Foo(SerializableAttrs):
        ...     index: int
        ...     field: Optional[str] = None
    """

    unrecognized_: Dict[str, JSON]

    def __init__(self):
        self.unrecognized_ = {}

    @classmethod
    def deserialize(cls: Type[SerializableSubtype], data: JSON) -> SerializableSubtype:
        return _dict_to_attrs(cls, data)

    def serialize(self) -> JSON:
        return _attrs_to_dict(self)
