"""The engine core: levels, the per-frame tick and engine start-up."""

import abc
import time

import pygame

from apiengine.base import EngineError
from apiengine.core_debug import drain_debug_texts
from apiengine.input import get_input
from apiengine.level import Level
from apiengine.timer import EngineTimer
from apiengine.window import EngineWindow, window_message_loop

_TEXT_COLOUR = (0, 0, 0)
_FONT_SIZE = 20


class ContentsCore(abc.ABC):
    """The game's entry points, called by the engine."""

    @abc.abstractmethod
    def begin_play(self):
        """Called once when the engine starts."""

    @abc.abstractmethod
    def tick(self):
        """Called once per frame before the engine's own tick."""


class EngineAPICore:
    """Owns the windows, the levels and the current level.

    The most recently created core becomes the one ``get_core`` returns.
    """

    _main_core = None

    def __init__(self, use_display=True, engine_input=None, clock=time.perf_counter):
        self.main_window = EngineWindow(use_display)
        self.sub_window = EngineWindow(use_display=False)
        self.input = get_input() if engine_input is None else engine_input
        self.levels = {}
        self.cur_level = None
        self.next_level = None
        self._timer = EngineTimer(clock)
        self._font = None
        EngineAPICore._main_core = self

    def create_level(self, name, game_mode_type, main_pawn_type):
        """Create a level with its game mode and main pawn.

        A name already in use keeps its existing level.
        """
        level = Level(window=self.main_window)
        level.after_render = self._print_engine_debug_text
        level.create_game_mode(game_mode_type, main_pawn_type)
        self.levels.setdefault(str(name), level)
        return level

    def open_level(self, name):
        """Make the named level current from the next tick on."""
        try:
            self.next_level = self.levels[str(name)]
        except KeyError:
            raise EngineError(f"there is no level named {name}") from None

    def tick(self):
        """Switch level if asked, measure time, read input, then tick and draw."""
        if self.next_level is not None:
            if self.cur_level is not None:
                self.cur_level.level_change_end()
            self.cur_level = self.next_level
            self.cur_level.level_change_start()
            self.next_level = None
            self._timer.time_start()

        self._timer.time_check()
        delta_time = self._timer.delta_time
        self.input.key_check(delta_time)

        if self.cur_level is None:
            raise EngineError("the engine core has no current level")

        self.input.event_check(delta_time)
        self.cur_level.tick(delta_time)
        self.cur_level.render(delta_time)

    def delta_time(self):
        """Seconds taken by the last frame."""
        return self._timer.delta_time

    def _debug_font(self):
        if self._font is None:
            try:
                pygame.font.init()
                self._font = pygame.font.Font(None, _FONT_SIZE)
            except (pygame.error, OSError, NotImplementedError):
                self._font = False
        return self._font or None

    def _print_engine_debug_text(self):
        texts = drain_debug_texts()
        back_buffer = self.main_window.back_buffer
        if not texts or back_buffer is None or back_buffer.surface is None:
            return
        font = self._debug_font()
        if font is None:
            return
        for entry in texts:
            rendered = font.render(entry.text, True, _TEXT_COLOUR)
            back_buffer.surface.blit(rendered, (entry.pos.ix(), entry.pos.iy()))


def get_core():
    """The engine core currently in use, or None."""
    return EngineAPICore._main_core


def engine_start(user_core):
    """Open the windows and run the game until every window is closed."""
    core = EngineAPICore()
    core.main_window.open()
    core.sub_window.open()

    def frame():
        user_core.tick()
        core.tick()

    try:
        return window_message_loop(user_core.begin_play, frame)
    finally:
        core.sub_window.close()
        core.main_window.close()