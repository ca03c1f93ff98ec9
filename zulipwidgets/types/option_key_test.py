# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import pytest

from .option_key import MalformedKeyShapeError, option_key, parse_option_key
from .primitive import UserID
from .util import MalformedFieldError, SerializerError

tests = {
    "canned,0": (None, 0),
    "canned,2": (None, 2),
    "42,0": (UserID(42), 0),
    "7,13": (UserID(7), 13),
}


def test_option_key() -> None:
    assert option_key(None, 2) == "canned,2"
    assert option_key(UserID(42), 0) == "42,0"


def test_option_key_roundtrip() -> None:
    for key, (sender_id, idx) in tests.items():
        assert option_key(sender_id, idx) == key
        assert parse_option_key(key) == (sender_id, idx)


def test_parse_errors() -> None:
    tests = [
        "",
        "canned",
        "abc,1",
        "Canned,1",
        "canned,abc",
        "canned,",
        ",1",
        "canned,1,2",
        "42,1,2",
        "-1,0",
        "1,-1",
        "+1,0",
        " 1,0",
        "1,0\n",
        "1.5,0",
    ]
    for test in tests:
        with pytest.raises(MalformedKeyShapeError) as excinfo:
            parse_option_key(test)
        assert excinfo.value.key == test


def test_error_hierarchy() -> None:
    with pytest.raises(SerializerError):
        parse_option_key("abc,1")
    with pytest.raises(ValueError):
        parse_option_key("abc,1")
    assert not issubclass(MalformedKeyShapeError, MalformedFieldError)
