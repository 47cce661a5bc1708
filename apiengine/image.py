"""Images backed by pygame surfaces, with plain and colour-keyed blits."""

import pygame

from apiengine.base import EngineError, EngineObject
from apiengine.engine_math import Color, Vector2D
from apiengine.paths import EnginePath
from apiengine.strings import to_upper

_PNG_BACKGROUND = (255, 0, 255)
_DEFAULT_KEY = Color(255, 0, 255, 0)


class EngineImage(EngineObject):
    """A drawable image; ``surface`` is None until created or loaded."""

    def __init__(self, name=""):
        super().__init__(name)
        self.surface = None

    def _require_surface(self):
        if self.surface is None:
            raise EngineError(f"image has no surface: {self.name}")
        return self.surface

    def create(self, scale):
        """Create a blank image of the given size."""
        self.surface = pygame.Surface((max(scale.ix(), 0), max(scale.iy(), 0)))
        return self

    def from_surface(self, surface):
        """Wrap an existing surface, such as a window's display surface."""
        self.surface = surface
        return self

    def load(self, path):
        """Load a PNG or BMP file; PNG transparency is flattened onto magenta."""
        engine_path = EnginePath(path)
        extension = to_upper(engine_path.extension())
        if extension not in (".PNG", ".BMP"):
            raise EngineError(f"image loading failed: {engine_path}")
        try:
            loaded = pygame.image.load(str(engine_path))
        except (pygame.error, OSError) as exc:
            raise EngineError(f"image loading failed: {engine_path}") from exc
        if extension == ".PNG":
            surface = pygame.Surface(loaded.get_size())
            surface.fill(_PNG_BACKGROUND)
            surface.blit(loaded, (0, 0))
        else:
            surface = loaded
        self.surface = surface
        return self

    def copy_to_bit(self, target, transform):
        """Copy this image unscaled onto ``target``, centred on the transform."""
        if target is None or target.surface is None:
            raise EngineError("there is no target to copy onto")
        source = self._require_surface()
        width, height = transform.scale.ix(), transform.scale.iy()
        if width <= 0 or height <= 0:
            return
        left_top = transform.center_left_top()
        target.surface.blit(source, (left_top.ix(), left_top.iy()), area=pygame.Rect(0, 0, width, height))

    def copy_to_trans(self, target, render_transform, image_transform, color=_DEFAULT_KEY):
        """Draw the part of this image given by ``image_transform`` (left-top based)
        stretched onto ``render_transform``, skipping pixels of ``color``."""
        if target is None or target.surface is None:
            raise EngineError("there is no target to copy onto")
        source = self._require_surface()
        dest_w, dest_h = render_transform.scale.ix(), render_transform.scale.iy()
        src_w, src_h = image_transform.scale.ix(), image_transform.scale.iy()
        if dest_w <= 0 or dest_h <= 0 or src_w <= 0 or src_h <= 0:
            return
        part = pygame.Surface((src_w, src_h))
        part.fill(color.rgb())
        area = pygame.Rect(image_transform.location.ix(), image_transform.location.iy(), src_w, src_h)
        part.blit(source, (0, 0), area=area)
        if (src_w, src_h) != (dest_w, dest_h):
            part = pygame.transform.scale(part, (dest_w, dest_h))
        part.set_colorkey(color.rgb())
        left_top = render_transform.center_left_top()
        target.surface.blit(part, (left_top.ix(), left_top.iy()))

    def image_scale(self):
        """The image size in pixels; zero when there is no surface."""
        if self.surface is None:
            return Vector2D.ZERO
        width, height = self.surface.get_size()
        return Vector2D(width, height)