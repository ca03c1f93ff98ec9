# Copyright (c) 2022 Tulir Asokan
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import json

import pytest

from .option_key import MalformedKeyShapeError
from .poll import (
    PollEvent,
    PollEventType,
    PollNewOptionEvent,
    PollQuestionEvent,
    PollVoteEvent,
    PollVoteOp,
    UnknownPollEvent,
)
from .primitive import OptionKey, UserID
from .util import MalformedFieldError


def test_new_option() -> None:
    serialized = {"type": "new_option", "option": "Sushi", "idx": 0}
    evt = PollEvent.deserialize(serialized)
    assert evt == PollNewOptionEvent(option="Sushi", idx=0)
    assert evt.type == PollEventType.NEW_OPTION
    assert evt.option_key(UserID(7)) == "7,0"
    assert evt.serialize() == serialized


def test_question() -> None:
    serialized = {"type": "question", "question": "Dinner?"}
    evt = PollEvent.deserialize(serialized)
    assert evt == PollQuestionEvent(question="Dinner?")
    assert evt.type == PollEventType.QUESTION
    assert evt.serialize() == serialized


def test_vote() -> None:
    serialized = {"type": "vote", "key": "canned,0", "vote": 1}
    evt = PollEvent.deserialize(serialized)
    assert evt == PollVoteEvent(key=OptionKey("canned,0"), op=PollVoteOp.ADD)
    assert evt.type == PollEventType.VOTE
    assert evt.serialize() == serialized


def test_roundtrip() -> None:
    tests = [
        PollNewOptionEvent(option="Sushi", idx=0),
        PollNewOptionEvent(option="", idx=12),
        PollQuestionEvent(question="Lunch?"),
        PollQuestionEvent(question=""),
        PollVoteEvent(key=OptionKey("canned,1"), op=PollVoteOp.ADD),
        PollVoteEvent(key=OptionKey("42,3"), op=PollVoteOp.REMOVE),
        PollVoteEvent(key=OptionKey("42,3"), op=PollVoteOp.UNKNOWN),
    ]
    for test in tests:
        assert PollEvent.deserialize(test.serialize()) == test
        assert PollEvent.deserialize(json.loads(test.json())) == test


def test_vote_op() -> None:
    # A list rather than a dict, since True and 1 are the same dict key
    tests = [
        (1, PollVoteOp.ADD),
        (-1, PollVoteOp.REMOVE),
        (7, PollVoteOp.UNKNOWN),
        (0, PollVoteOp.UNKNOWN),
        (None, PollVoteOp.UNKNOWN),
        (True, PollVoteOp.UNKNOWN),
        (1.0, PollVoteOp.UNKNOWN),
        ("1", PollVoteOp.UNKNOWN),
    ]
    for value, op in tests:
        evt = PollEvent.deserialize({"type": "vote", "key": "canned,0", "vote": value})
        assert evt.op == op


def test_vote_op_unknown_serialize() -> None:
    evt = PollVoteEvent(key=OptionKey("canned,0"), op=PollVoteOp.UNKNOWN)
    assert evt.serialize() == {"type": "vote", "key": "canned,0", "vote": None}
    assert PollVoteOp.ADD.serialize() == 1
    assert PollVoteOp.REMOVE.serialize() == -1


def test_vote_key_shape() -> None:
    assert PollEvent.deserialize({"type": "vote", "key": "canned,1", "vote": 1}).key == "canned,1"
    assert PollEvent.deserialize({"type": "vote", "key": "1234,1", "vote": -1}).key == "1234,1"
    for key in ("abc,1", "canned,x", "canned", "1,2,3", ""):
        with pytest.raises(MalformedKeyShapeError) as excinfo:
            PollEvent.deserialize({"type": "vote", "key": key, "vote": 1})
        assert excinfo.value.key == key


def test_missing_fields() -> None:
    tests = {
        "option": {"type": "new_option", "idx": 0},
        "idx": {"type": "new_option", "option": "Sushi"},
        "question": {"type": "question"},
        "key": {"type": "vote", "vote": 1},
        "vote": {"type": "vote", "key": "canned,0"},
    }
    for key, test in tests.items():
        with pytest.raises(MalformedFieldError) as excinfo:
            PollEvent.deserialize(test)
        assert excinfo.value.key == key


def test_wrong_types() -> None:
    tests = {
        "option": {"type": "new_option", "option": 5, "idx": 0},
        "idx": {"type": "new_option", "option": "Sushi", "idx": "0"},
        "question": {"type": "question", "question": ["Lunch?"]},
        "key": {"type": "vote", "key": 5, "vote": 1},
    }
    for key, test in tests.items():
        with pytest.raises(MalformedFieldError) as excinfo:
            PollEvent.deserialize(test)
        assert excinfo.value.key == key
    with pytest.raises(MalformedFieldError):
        PollEvent.deserialize({"type": "new_option", "option": "Sushi", "idx": True})
    with pytest.raises(MalformedFieldError):
        PollEvent.deserialize({"type": "new_option", "option": "Sushi", "idx": None})
    with pytest.raises(MalformedFieldError):
        PollEvent.deserialize({"type": "question", "question": None})


def test_unknown() -> None:
    tests = [
        {"type": "new_task", "key": 2, "task": "Groceries"},
        {"type": "Vote", "key": "canned,0", "vote": 1},
        {"type": "unknown"},
        {"type": None, "question": "Lunch?"},
        {"question": "Lunch?"},
        {},
    ]
    for test in tests:
        evt = PollEvent.deserialize(test)
        assert evt == UnknownPollEvent(test)
        assert evt.raw is test
        assert evt.type == PollEventType.UNKNOWN
        assert evt.serialize() == test


def test_garbled() -> None:
    with pytest.raises(MalformedFieldError) as excinfo:
        PollEvent.deserialize({"type": 5, "question": "Lunch?"})
    assert excinfo.value.key == "type"
    for test in (["vote"], "vote", 5, None):
        with pytest.raises(MalformedFieldError):
            PollEvent.deserialize(test)


def test_extra_keys() -> None:
    serialized = {"type": "question", "question": "Lunch?", "id": 1234}
    evt = PollEvent.deserialize(serialized)
    assert evt == PollQuestionEvent(question="Lunch?")
    assert evt.serialize() == serialized


def test_independent() -> None:
    raw = [
        {"type": "vote", "key": "9,0", "vote": 1},
        {"type": "new_option", "option": "Sushi", "idx": 0},
    ]
    forwards = [PollEvent.deserialize(item) for item in raw]
    backwards = [PollEvent.deserialize(item) for item in reversed(raw)]
    assert forwards == list(reversed(backwards))
