"""Registry of loaded images and the sprites cut from them, keyed by upper-case name."""

import functools
import math

import pygame

from apiengine.base import EngineError
from apiengine.engine_math import Transform, Vector2D
from apiengine.image import EngineImage
from apiengine.paths import EngineDirectory, EnginePath
from apiengine.sprite import EngineSprite
from apiengine.strings import to_upper


class ImageManager:
    """Loads images, builds sprites from them and finds both by name."""

    def __init__(self):
        self._images = {}
        self._sprites = {}

    def load(self, path, key_name=None):
        """Load one image file; the key defaults to the file name."""
        engine_path = EnginePath(path)
        if engine_path.is_directory():
            raise EngineError(f"a directory cannot be loaded as an image: {path}")
        if not engine_path.exists():
            raise EngineError(f"invalid file path: {path}")
        if key_name is None:
            key_name = engine_path.file_name()
        upper_name = to_upper(key_name)
        if upper_name in self._images or upper_name in self._sprites:
            raise EngineError(f"image is already loaded: {upper_name}")

        image = EngineImage(upper_name).load(engine_path.path)
        self._images[upper_name] = image

        sprite = EngineSprite(upper_name)
        sprite.push_data(image, Transform(scale=image.image_scale(), location=Vector2D.ZERO))
        self._sprites[upper_name] = sprite

    def load_folder(self, path, key_name=None):
        """Make one sprite whose frames are every image file under a directory."""
        engine_path = EnginePath(path)
        if not engine_path.exists():
            raise EngineError(f"invalid file path: {path}")
        if key_name is None:
            key_name = engine_path.directory_name()
        upper_name = to_upper(key_name)
        if upper_name in self._sprites:
            raise EngineError(f"image is already loaded: {upper_name}")

        sprite = EngineSprite(upper_name)
        self._sprites[upper_name] = sprite

        for file in EngineDirectory(engine_path.path).get_all_files():
            upper_file_name = to_upper(file.file_name())
            image = self._images.get(upper_file_name)
            if image is None:
                image = EngineImage(upper_file_name).load(file.path)
                self._images[upper_file_name] = image
            sprite.push_data(image, Transform(scale=image.image_scale(), location=Vector2D.ZERO))

    def _sprite_and_image(self, key_name):
        upper_name = to_upper(key_name)
        if upper_name not in self._sprites:
            raise EngineError(f"tried to cut a sprite that does not exist: {key_name}")
        if upper_name not in self._images:
            raise EngineError(f"tried to cut a sprite from an image that does not exist: {key_name}")
        return self._sprites[upper_name], self._images[upper_name]

    def cutting_sprite(self, key_name, cutting_size):
        """Replace a sprite's frames with equal cells of ``cutting_size``, row by row."""
        sprite, image = self._sprite_and_image(key_name)
        sprite.clear_sprite_data()

        cell_w, cell_h = cutting_size.ix(), cutting_size.iy()
        if cell_w == 0 or cell_h == 0:
            raise EngineError(f"sprite cell size must not be zero: {key_name}")
        image_scale = image.image_scale()
        if image_scale.ix() % cell_w != 0:
            raise EngineError(f"sprite cutting does not divide x evenly: {key_name}")
        if image_scale.iy() % cell_h != 0:
            raise EngineError(f"sprite cutting does not divide y evenly: {key_name}")

        columns = image_scale.ix() // cell_w
        rows = image_scale.iy() // cell_h
        for row in range(rows):
            for column in range(columns):
                location = Vector2D(cutting_size.x * column, cutting_size.y * row)
                sprite.push_data(image, Transform(scale=cutting_size, location=location))

    def cutting_sprite_grid(self, key_name, x, y):
        """Cut a sprite into ``x`` columns and ``y`` rows."""
        sprite, image = self._sprite_and_image(key_name)
        sprite.clear_sprite_data()
        if x == 0 or y == 0:
            raise EngineError(f"sprite grid must have at least one cell: {key_name}")
        scale = image.image_scale()
        self.cutting_sprite(key_name, Vector2D(scale.x / x, scale.y / y))

    def create_cut_sprite(self, search_key_name, new_key_name, start_pos, cutting_size, offset,
                          x_count, image_count):
        """Copy a region of an existing image into a new image and cut it into a grid.

        Cells are ``cutting_size`` apart by ``offset``; ``x_count`` per row and
        enough rows for ``image_count`` cells.
        """
        search_name = to_upper(search_key_name)
        new_name = to_upper(new_key_name)

        if x_count <= 0:
            raise EngineError("the number of images per row must be positive")
        if image_count <= 0:
            raise EngineError("the total number of images must be positive")
        if search_name not in self._sprites or search_name not in self._images:
            raise EngineError(f"no sprite named {search_key_name} is loaded")
        if new_name in self._sprites:
            raise EngineError(f"a sprite named {new_key_name} already exists")
        if new_name in self._images:
            raise EngineError(f"an image named {new_key_name} already exists")

        source_sprite = self._sprites[search_name]
        source_image = self._images[search_name]
        source_sprite.clear_sprite_data()

        y_count = math.ceil(image_count / x_count)
        total_x = start_pos.x + cutting_size.x * x_count + offset.x * (x_count - 1)
        total_y = start_pos.y + cutting_size.y * y_count + offset.y * (y_count - 1)

        image_scale = source_image.image_scale()
        if total_x > image_scale.x:
            raise EngineError("the required width is larger than the source image")
        if total_y > image_scale.y:
            raise EngineError("the required height is larger than the source image")

        total_size = Vector2D(int(total_x), int(total_y))
        new_image = EngineImage(new_name).create(total_size)
        if source_image.surface is not None:
            area = pygame.Rect(start_pos.ix(), start_pos.iy(), total_size.ix(), total_size.iy())
            new_image.surface.blit(source_image.surface, (0, 0), area=area)
        new_sprite = EngineSprite(new_name)
        self._images[new_name] = new_image
        self._sprites[new_name] = new_sprite

        for row in range(y_count):
            for column in range(x_count):
                location = Vector2D(
                    cutting_size.x * column + offset.x * column,
                    cutting_size.y * row + offset.y * row,
                )
                new_sprite.push_data(new_image, Transform(scale=cutting_size, location=location))

    def is_load_sprite(self, key_name):
        return to_upper(key_name) in self._sprites

    def find_sprite(self, key_name):
        try:
            return self._sprites[to_upper(key_name)]
        except KeyError:
            raise EngineError(f"tried to use a sprite that is not loaded: {key_name}") from None

    def find_image(self, key_name):
        try:
            return self._images[to_upper(key_name)]
        except KeyError:
            raise EngineError(f"tried to use an image that is not loaded: {key_name}") from None


@functools.lru_cache(maxsize=None)
def get_image_manager():
    """The engine-wide image manager."""
    return ImageManager()