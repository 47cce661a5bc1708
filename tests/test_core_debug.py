import pytest

from apiengine.core_debug import (
    DebugText,
    core_output_string,
    drain_debug_texts,
    is_debug,
    set_is_debug,
    switch_is_debug,
)
from apiengine.engine_math import Vector2D


@pytest.fixture(autouse=True)
def clean_state():
    set_is_debug(True)
    drain_debug_texts()
    yield
    set_is_debug(True)
    drain_debug_texts()


def test_lines_stack_downwards():
    core_output_string("first")
    core_output_string("second")
    assert drain_debug_texts() == [
        DebugText("first", Vector2D(0, 0)),
        DebugText("second", Vector2D(0, 20)),
    ]


def test_explicit_position_does_not_advance():
    core_output_string("placed", Vector2D(5, 7))
    core_output_string("auto")
    assert drain_debug_texts() == [
        DebugText("placed", Vector2D(5, 7)),
        DebugText("auto", Vector2D.ZERO),
    ]


def test_drain_clears_and_resets_position():
    core_output_string("a")
    drain_debug_texts()
    core_output_string("b")
    assert drain_debug_texts() == [DebugText("b", Vector2D.ZERO)]
    assert drain_debug_texts() == []


def test_disabled_debug_keeps_texts():
    set_is_debug(False)
    core_output_string("hidden")
    assert drain_debug_texts() == []
    set_is_debug(True)
    assert [entry.text for entry in drain_debug_texts()] == ["hidden"]


def test_switch_toggles():
    set_is_debug(False)
    switch_is_debug()
    assert is_debug() is True
    switch_is_debug()
    assert is_debug() is False


def test_text_is_stored_as_string():
    core_output_string(42)
    assert drain_debug_texts()[0].text == "42"