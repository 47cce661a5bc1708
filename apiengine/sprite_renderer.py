"""Sprite renderers: components that draw sprite frames and play animations."""

from dataclasses import dataclass, field

from apiengine.actor import SceneComponent
from apiengine.base import EngineError
from apiengine.engine_math import Vector2D
from apiengine.image_manager import get_image_manager
from apiengine.strings import to_upper


@dataclass
class FrameAnimation:
    """A sequence of sprite frames with a duration for each."""

    sprite: object = None
    frame_index: list = field(default_factory=list)
    frame_time: list = field(default_factory=list)
    events: dict = field(default_factory=dict)
    cur_index: int = 0
    result_index: int = 0
    cur_time: float = 0.0
    loop: bool = True

    def reset(self):
        self.cur_index = 0
        self.cur_time = 0.0
        self.result_index = 0

    def _fire(self, position):
        for function in list(self.events.get(position, ())):
            function()


class SpriteRenderer(SceneComponent):
    """Draws one frame of a sprite at its actor's location, in draw ``order``."""

    def __init__(self):
        super().__init__()
        self.order = 0
        self.cur_index = 0
        self.sprite = None
        self.frame_animations = {}
        self.cur_animation = None
        self._registered = False

    def render(self, delta_time):
        """Advance the current animation and draw the current frame."""
        animation = self.cur_animation
        if animation is not None:
            self.sprite = animation.sprite
            animation.cur_time += delta_time
            frame_time = animation.frame_time[animation.cur_index]
            if animation.cur_time > frame_time:
                animation.cur_time -= frame_time
                animation.cur_index += 1
                animation._fire(animation.cur_index)
                if animation.cur_index >= len(animation.frame_index):
                    if animation.loop:
                        animation.cur_index = 0
                        animation._fire(animation.cur_index)
                    else:
                        animation.cur_index -= 1
            self.cur_index = animation.frame_index[animation.cur_index]

        if self.sprite is None:
            raise EngineError("cannot render an actor whose sprite is not set")

        data = self.sprite.get_sprite_data(self.cur_index)
        level = self.actor.world
        window = level.window if level is not None else None
        back_buffer = window.back_buffer if window is not None else None
        if back_buffer is None:
            return
        transform = self.actor_transform()
        location = transform.location - level.camera_pos
        render_transform = type(transform)(scale=transform.scale, location=location)
        data.image.copy_to_trans(back_buffer, render_transform, data.transform)

    def begin_play(self):
        super().begin_play()
        level = self.actor.world if self.actor is not None else None
        if level is None:
            raise EngineError("a sprite renderer's actor must be in a level")
        level.push_renderer(self)
        self._registered = True

    def component_tick(self, delta_time):
        super().component_tick(delta_time)

    def set_order(self, order):
        """Set the draw order; accepts an int or an integer enum member."""
        prev_order = self.order
        self.order = int(order)
        level = self.actor.world if self.actor is not None else None
        if level is not None and self._registered:
            level.change_render_order(self, prev_order)

    def set_sprite(self, name, index=0):
        self.sprite = get_image_manager().find_sprite(name)
        self.cur_index = index

    def set_sprite_scale(self, ratio=1.0, index=0):
        """Size the renderer to the current frame times ``ratio`` and return that size."""
        if self.sprite is None:
            raise EngineError("cannot size a renderer from its sprite before the sprite is set")
        data = self.sprite.get_sprite_data(self.cur_index)
        scale = data.transform.scale * ratio
        self.set_component_scale(scale)
        return scale

    def create_animation(self, animation_name, sprite_name, start, end, time=0.1, loop=True):
        """Create an animation over the consecutive frames ``start`` to ``end``."""
        if start > end:
            raise EngineError(f"animation start cannot be after its end: {animation_name}")
        indexes = list(range(start, end + 1))
        self.create_animation_frames(animation_name, sprite_name, indexes, [time] * len(indexes), loop)

    def create_animation_frames(self, animation_name, sprite_name, indexes, times, loop=True):
        """Create an animation from explicit frame indexes and per-frame times."""
        upper_name = to_upper(animation_name)
        if len(indexes) != len(times):
            raise EngineError(f"{upper_name}: frame and time counts differ")
        if upper_name in self.frame_animations:
            return
        sprite = get_image_manager().find_sprite(sprite_name)
        animation = FrameAnimation(sprite=sprite, frame_index=list(indexes), frame_time=list(times), loop=loop)
        animation.reset()
        self.frame_animations[upper_name] = animation

    def change_animation(self, animation_name, force=False):
        """Switch to an animation, restarting it unless it is already playing."""
        upper_name = to_upper(animation_name)
        try:
            animation = self.frame_animations[upper_name]
        except KeyError:
            raise EngineError(f"tried to change to an animation that does not exist: {upper_name}") from None
        if self.cur_animation is animation and not force:
            return
        self.cur_animation = animation
        animation.reset()
        animation._fire(animation.cur_index)

    def set_animation_event(self, animation_name, frame, function):
        """Call ``function`` whenever the animation reaches ``frame``."""
        upper_name = to_upper(animation_name)
        try:
            animation = self.frame_animations[upper_name]
        except KeyError:
            raise EngineError(f"no animation named {upper_name}") from None
        if frame not in animation.frame_index:
            raise EngineError(f"tried to add an event on a frame that does not exist: {animation_name}")
        animation.events.setdefault(frame, []).append(function)


__all__ = ["FrameAnimation", "SpriteRenderer", "Vector2D"]