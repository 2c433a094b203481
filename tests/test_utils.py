import time

import pytest

from symposium.utils import State, now_ms, parse_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("+5", 5),
        ("  -17abc", -17),
        ("\t\n\v\f\r 7", 7),
        ("abc", 0),
        ("", 0),
        ("--3", 0),
        ("12 34", 12),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_like_32_bit():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("2147483648") == -2147483648
    assert parse_int("-2147483648") == -2147483648


def test_parse_int_ignores_non_ascii_digits():
    assert parse_int("\u0661\u0662") == 0


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


@pytest.mark.parametrize(
    ("state", "text"),
    [
        (State.EATING, "is eating"),
        (State.SLEEPING, "is sleeping"),
        (State.THINKING, "is thinking"),
        (State.HUNGRY, "has taken a fork"),
        (State.DEAD, "died"),
    ],
)
def test_state_messages(state, text):
    assert state.message == text