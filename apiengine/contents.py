"""The demo game: a title level and a play level with a walking player."""

import argparse
import math
from enum import IntEnum

from apiengine.actor import Actor, GameMode
from apiengine.base import EngineError
from apiengine.core import ContentsCore, engine_start, get_core
from apiengine.core_debug import core_output_string
from apiengine.engine_math import Vector2D
from apiengine.image_manager import get_image_manager
from apiengine.paths import EngineDirectory
from apiengine.sprite_renderer import SpriteRenderer
from apiengine.window import screen_size


class RenderOrder(IntEnum):
    BACKGROUND = -1000
    PLAYER = 0


def _core():
    core = get_core()
    if core is None:
        raise EngineError("the engine core has not been started")
    return core


class TitleLogo(Actor):
    """The title screen logo."""


class PlayMap(Actor):
    """The play level's background, placed with its left-top at the origin."""

    def __init__(self):
        super().__init__()
        renderer = self.create_default_sub_object(SpriteRenderer)
        renderer.set_order(RenderOrder.BACKGROUND)
        renderer.set_sprite("bg-1-1.png")
        map_scale = renderer.set_sprite_scale(1.0)
        renderer.set_component_location(map_scale.half())
        self.sprite_renderer = renderer


class Player(Actor):
    """The character moved with W, A, S and D; R returns to the title."""

    speed = 300.0

    def __init__(self):
        super().__init__()
        self.run_sound_count = 0
        self.set_actor_location(Vector2D(100, 100))

        renderer = self.create_default_sub_object(SpriteRenderer)
        renderer.set_sprite("Player_Right.png")
        renderer.set_component_scale(Vector2D(300, 300))
        renderer.create_animation("Run_Right", "Player_Right.png", 2, 4, 0.1)
        renderer.create_animation("Idle_Right", "Player_Right.png", 0, 0, 0.1)
        renderer.change_animation("Idle_Right")
        renderer.set_animation_event("Run_Right", 2, self.run_sound_play)
        self.sprite_renderer = renderer

    def run_sound_play(self):
        """Called when the run animation reaches frame 2; counts the footsteps."""
        self.run_sound_count += 1

    def begin_play(self):
        super().begin_play()
        size = _core().main_window.window_size
        self.world.set_camera_pivot(size.half() * -1.0)

    def tick(self, delta_time):
        super().tick(delta_time)
        fps = 1.0 / delta_time if delta_time > 0 else math.inf
        core_output_string(f"FPS : {fps:f}")
        core_output_string(f"PlayerPos : {self.actor_location}")

        core = _core()
        keys = core.input
        if keys.is_down("R"):
            core.open_level("Title")

        moves = (
            ("D", Vector2D.RIGHT),
            ("A", Vector2D.LEFT),
            ("S", Vector2D.DOWN),
            ("W", Vector2D.UP),
        )
        moving = False
        for key, direction in moves:
            if keys.is_press(key):
                moving = True
                self.sprite_renderer.change_animation("Run_Right")
                self.add_actor_location(direction * delta_time * self.speed)

        if not moving:
            self.sprite_renderer.change_animation("Idle_Right")

    def level_change_start(self):
        super().level_change_start()

    def level_change_end(self):
        super().level_change_end()


class PlayGameMode(GameMode):
    """Prepares the play level."""

    def begin_play(self):
        self.world.spawn_actor(PlayMap)


class TitleGameMode(GameMode):
    """The title level; R starts the game."""

    def begin_play(self):
        super().begin_play()

    def tick(self, delta_time):
        super().tick(delta_time)
        core = _core()
        if core.input.is_down("R"):
            core.open_level("Play")


class EduContentsCore(ContentsCore):
    """Loads the resources, sets up the windows and creates the levels.

    Resources are found in the nearest ``Resources`` directory above
    ``start_dir``, which defaults to the working directory.
    """

    def __init__(self, start_dir=None):
        self.start_dir = start_dir
        self.frame_count = 0

    def begin_play(self):
        resources = EngineDirectory(self.start_dir)
        if not resources.move_parent_to_directory("Resources"):
            raise EngineError("could not find the resources folder")

        manager = get_image_manager()
        for file in resources.get_all_files():
            manager.load(file.path)

        manager.cutting_sprite("Player_Right.png", Vector2D(128, 128))

        bomb_dir = EngineDirectory(resources.path)
        bomb_dir.append("bomb")
        manager.load_folder(bomb_dir.path)

        core = _core()
        core.main_window.set_window_title("EduWindow")
        core.main_window.set_window_pos_and_scale("EduWindow", Vector2D(0, 0), screen_size())
        core.sub_window.set_window_title("SubWindow")
        core.sub_window.set_window_pos_and_scale("SubWindow", Vector2D(1000, 10), Vector2D(10000, 10))

        core.create_level("Play", PlayGameMode, Player)
        core.create_level("Title", TitleGameMode, Actor)
        core.open_level("Title")

    def tick(self):
        """Count the frames the engine has run."""
        self.frame_count += 1


def main(argv=None):
    parser = argparse.ArgumentParser(prog="apiengine", description="Run the demo game.")
    parser.parse_args(argv)
    return engine_start(EduContentsCore())