"""Engine windows drawn with pygame, each with a back buffer, plus the frame loop."""

import pygame

from apiengine.base import EngineError
from apiengine.engine_math import Transform, Vector2D
from apiengine.image import EngineImage

_DEFAULT_SIZE = (640, 480)
_FALLBACK_SCREEN = (1280, 720)


def screen_size():
    """The desktop resolution, or a fallback when it cannot be determined."""
    try:
        if not pygame.display.get_init():
            pygame.display.init()
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error:
        sizes = []
    width, height = sizes[0] if sizes else _FALLBACK_SCREEN
    if width <= 0 or height <= 0:
        width, height = _FALLBACK_SCREEN
    return Vector2D(width, height)


class EngineWindow:
    """A window with a drawable window image and a back buffer.

    With ``use_display`` the window is the pygame display; otherwise it is an
    off-screen surface of the same behaviour.
    """

    _open_windows = []

    def __init__(self, use_display=True):
        self.use_display = use_display
        self.title = ""
        self.position = Vector2D.ZERO
        self.window_size = Vector2D.ZERO
        self.window_image = None
        self.back_buffer = None

    @classmethod
    def open_window_count(cls):
        """How many windows are currently open."""
        return len(cls._open_windows)

    @property
    def is_open(self):
        return any(window is self for window in self._open_windows)

    def _create(self, title):
        self.title = str(title)
        if self.use_display:
            try:
                pygame.display.init()
                surface = pygame.display.set_mode(_DEFAULT_SIZE)
                pygame.display.set_caption(self.title)
            except pygame.error as exc:
                raise EngineError(f"window creation failed: {title}") from exc
            self.window_image = EngineImage(self.title).from_surface(surface)
        else:
            self.window_image = EngineImage(self.title).create(Vector2D(*_DEFAULT_SIZE))

    def open(self, title="Window"):
        """Create the window if needed and show it."""
        if self.window_image is None:
            self._create(title)
        if not self.is_open:
            self._open_windows.append(self)
        return self

    def close(self):
        """Close the window and release its images."""
        self._open_windows[:] = [w for w in self._open_windows if w is not self]
        if self.use_display and pygame.display.get_init():
            pygame.display.quit()
        self.window_image = None
        self.back_buffer = None

    def set_window_title(self, text):
        self.title = str(text)
        if self.use_display and self.is_open and pygame.display.get_init():
            pygame.display.set_caption(self.title)

    def set_window_pos_and_scale(self, title, pos, scale):
        """Place and size the window; a new back buffer is made when the size changes."""
        if self.window_image is None:
            raise EngineError("the window must be open before it can be placed")
        if scale.ix() <= 0 or scale.iy() <= 0:
            raise EngineError(f"window size must be positive: {scale}")
        self.position = pos
        if not self.window_size.equal_to_int(scale):
            size = (scale.ix(), scale.iy())
            if self.use_display:
                try:
                    surface = pygame.display.set_mode(size)
                except pygame.error as exc:
                    raise EngineError(f"window resize failed: {title}") from exc
                self.window_image.from_surface(surface)
            else:
                self.window_image.create(scale)
            self.back_buffer = EngineImage(f"{title} back buffer").create(scale)
        self.window_size = scale

    def present(self):
        """Copy the back buffer onto the window image and show it."""
        if self.window_image is None or self.back_buffer is None:
            raise EngineError("the window has no back buffer to present")
        size = self.window_size
        self.back_buffer.copy_to_bit(self.window_image, Transform(scale=size, location=size.half()))
        if self.use_display and pygame.display.get_init():
            pygame.display.flip()


def window_message_loop(start_function=None, frame_function=None):
    """Run ``start_function`` once, then ``frame_function`` every frame while any window is open."""
    if start_function is not None:
        start_function()
    while EngineWindow.open_window_count() > 0:
        if pygame.display.get_init():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    for window in list(EngineWindow._open_windows):
                        window.close()
        if frame_function is not None:
            frame_function()
    return 0