"""On-screen debug text collected during a frame and drawn once it ends."""

from dataclasses import dataclass

from apiengine.engine_math import Vector2D

_LINE_HEIGHT = 20


@dataclass(frozen=True)
class DebugText:
    """A line of debug text and the screen position it is drawn at."""

    text: str
    pos: Vector2D


class _DebugState:
    def __init__(self):
        self.enabled = __debug__
        self.texts = []
        self.next_pos = Vector2D.ZERO


_state = _DebugState()


def set_is_debug(enabled):
    _state.enabled = bool(enabled)


def switch_is_debug():
    _state.enabled = not _state.enabled


def is_debug():
    return _state.enabled


def core_output_string(text, pos=None):
    """Queue a line of debug text.

    Without ``pos`` the line goes below the previous automatically placed one.
    """
    if pos is None:
        _state.texts.append(DebugText(str(text), _state.next_pos))
        _state.next_pos = _state.next_pos + Vector2D(0, _LINE_HEIGHT)
    else:
        _state.texts.append(DebugText(str(text), pos))


def drain_debug_texts():
    """Take the queued lines and start a new frame.

    While debug output is switched off nothing is returned and the queue is kept.
    """
    if not _state.enabled:
        return []
    texts = list(_state.texts)
    _state.texts.clear()
    _state.next_pos = Vector2D.ZERO
    return texts