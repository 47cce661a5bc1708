"""Keyboard and mouse button state tracking with per-key event bindings."""

import functools
from dataclasses import dataclass, field
from enum import Enum, IntEnum

import pygame

from apiengine.base import EngineError


class KeyEvent(Enum):
    """The four phases a key can be in during a frame."""

    DOWN = "down"
    PRESS = "press"
    FREE = "free"
    UP = "up"


class VirtualKey(IntEnum):
    """Virtual key codes for the non-alphanumeric keys the engine tracks."""

    LBUTTON = 0x01
    RBUTTON = 0x02
    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87


_LETTERS = "QWERTYUIOPASDFGHJKLZXCVBNM"
_DIGITS = "1234567890"
_REGISTERED_KEYS = sorted({ord(c) for c in _LETTERS + _DIGITS} | {int(k) for k in VirtualKey})


def _key_code(key):
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key must be a single character: {key!r}")
        return ord(key)
    return int(key)


@dataclass
class KeyState:
    """The state of one key and the callbacks bound to its phases."""

    key: int
    is_down: bool = False
    is_press: bool = False
    is_up: bool = False
    is_free: bool = True
    press_time: float = 0.0
    events: dict = field(default_factory=lambda: {event: [] for event in KeyEvent})

    def _set(self, down=False, press=False, free=False, up=False):
        self.is_down = down
        self.is_press = press
        self.is_free = free
        self.is_up = up

    def key_check(self, pressed, delta_time):
        """Advance the key's state given whether it is held this frame."""
        if pressed:
            self.press_time += delta_time
            if self.is_free:
                self._set(down=True, press=True)
            elif self.is_down:
                self._set(press=True)
        else:
            self.press_time = 0.0
            if self.is_press:
                self._set(free=True, up=True)
            elif self.is_up:
                self._set(free=True)

    def event_check(self):
        """Run the callbacks for every phase the key is currently in."""
        phases = (
            (KeyEvent.DOWN, self.is_down),
            (KeyEvent.PRESS, self.is_press),
            (KeyEvent.FREE, self.is_free),
            (KeyEvent.UP, self.is_up),
        )
        for event, active in phases:
            if active:
                for function in list(self.events[event]):
                    function()


_LETTER_AND_DIGIT_MAP = {ord(c): ord(c.lower()) for c in _LETTERS + _DIGITS}

_SPECIAL_MAP = {
    VirtualKey.SPACE: pygame.K_SPACE,
    VirtualKey.PRIOR: pygame.K_PAGEUP,
    VirtualKey.NEXT: pygame.K_PAGEDOWN,
    VirtualKey.END: pygame.K_END,
    VirtualKey.HOME: pygame.K_HOME,
    VirtualKey.LEFT: pygame.K_LEFT,
    VirtualKey.UP: pygame.K_UP,
    VirtualKey.RIGHT: pygame.K_RIGHT,
    VirtualKey.DOWN: pygame.K_DOWN,
    VirtualKey.PRINT: pygame.K_PRINT,
    VirtualKey.SNAPSHOT: pygame.K_PRINT,
    VirtualKey.INSERT: pygame.K_INSERT,
    VirtualKey.DELETE: pygame.K_DELETE,
    VirtualKey.HELP: pygame.K_HELP,
    VirtualKey.NUMPAD0: pygame.K_KP0,
    VirtualKey.NUMPAD1: pygame.K_KP1,
    VirtualKey.NUMPAD2: pygame.K_KP2,
    VirtualKey.NUMPAD3: pygame.K_KP3,
    VirtualKey.NUMPAD4: pygame.K_KP4,
    VirtualKey.NUMPAD5: pygame.K_KP5,
    VirtualKey.NUMPAD6: pygame.K_KP6,
    VirtualKey.NUMPAD7: pygame.K_KP7,
    VirtualKey.NUMPAD8: pygame.K_KP8,
    VirtualKey.NUMPAD9: pygame.K_KP9,
    VirtualKey.MULTIPLY: pygame.K_KP_MULTIPLY,
    VirtualKey.ADD: pygame.K_KP_PLUS,
    VirtualKey.SUBTRACT: pygame.K_KP_MINUS,
    VirtualKey.DECIMAL: pygame.K_KP_PERIOD,
    VirtualKey.DIVIDE: pygame.K_KP_DIVIDE,
    VirtualKey.F1: pygame.K_F1,
    VirtualKey.F2: pygame.K_F2,
    VirtualKey.F3: pygame.K_F3,
    VirtualKey.F4: pygame.K_F4,
    VirtualKey.F5: pygame.K_F5,
    VirtualKey.F6: pygame.K_F6,
    VirtualKey.F7: pygame.K_F7,
    VirtualKey.F8: pygame.K_F8,
    VirtualKey.F9: pygame.K_F9,
    VirtualKey.F10: pygame.K_F10,
    VirtualKey.F11: pygame.K_F11,
    VirtualKey.F12: pygame.K_F12,
    VirtualKey.F13: pygame.K_F13,
    VirtualKey.F14: pygame.K_F14,
    VirtualKey.F15: pygame.K_F15,
}

_MOUSE_MAP = {VirtualKey.LBUTTON: 0, VirtualKey.RBUTTON: 2}


def _pygame_key_source(key):
    """Report whether a key is held, using pygame's keyboard and mouse state."""
    if not pygame.display.get_init():
        return False
    try:
        if key in _MOUSE_MAP:
            return bool(pygame.mouse.get_pressed()[_MOUSE_MAP[key]])
        code = _LETTER_AND_DIGIT_MAP.get(key, _SPECIAL_MAP.get(key))
        if code is None:
            return False
        return bool(pygame.key.get_pressed()[code])
    except pygame.error:
        return False


class EngineInput:
    """Tracks every registered key; ``key_source(code)`` says whether a key is held."""

    def __init__(self, key_source=None):
        self._key_source = _pygame_key_source if key_source is None else key_source
        self._keys = {code: KeyState(code) for code in _REGISTERED_KEYS}

    def _state(self, key):
        code = _key_code(key)
        try:
            return self._keys[code]
        except KeyError:
            raise EngineError(f"key is not registered: {key!r}") from None

    def key_check(self, delta_time):
        for code, state in self._keys.items():
            state.key_check(bool(self._key_source(code)), delta_time)

    def event_check(self, delta_time):
        for state in self._keys.values():
            state.event_check()

    def is_down(self, key):
        return self._state(key).is_down

    def is_up(self, key):
        return self._state(key).is_up

    def is_press(self, key):
        return self._state(key).is_press

    def is_free(self, key):
        return self._state(key).is_free

    def press_time(self, key):
        """Seconds the key has been held; zero once released."""
        return self._state(key).press_time

    def bind_action(self, key, event, function):
        """Call ``function`` on every event check while the key is in phase ``event``."""
        state = self._state(key)
        state.events[KeyEvent(event)].append(function)


@functools.lru_cache(maxsize=None)
def get_input():
    """The engine-wide input instance."""
    return EngineInput()