"""Sprites: ordered lists of rectangles cut from images."""

from dataclasses import dataclass

from apiengine.base import EngineError, EngineObject
from apiengine.engine_math import Transform


@dataclass(frozen=True)
class SpriteData:
    """One frame: the image and the left-top based rectangle within it."""

    image: object
    transform: Transform


class EngineSprite(EngineObject):
    """A named sequence of frames."""

    def __init__(self, name=""):
        super().__init__(name)
        self._data = []

    def push_data(self, image, transform):
        if transform.scale.is_zeroed():
            raise EngineError("cannot create a frame of zero size")
        self._data.append(SpriteData(image, transform))

    def get_sprite_data(self, index=0):
        if not 0 <= index < len(self._data):
            raise EngineError(f"sprite index out of range: {index} {self.name}")
        return self._data[index]

    def clear_sprite_data(self):
        self._data.clear()

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)