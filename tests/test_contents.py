import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from types import SimpleNamespace

import pygame
import pytest

from apiengine.actor import Actor
from apiengine.base import EngineError
from apiengine.contents import (
    EduContentsCore,
    PlayMap,
    Player,
    RenderOrder,
    TitleGameMode,
)
from apiengine.core import EngineAPICore
from apiengine.engine_math import Vector2D
from apiengine.image_manager import get_image_manager
from apiengine.input import EngineInput
from apiengine.window import screen_size


def _save(path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture(scope="module")
def game(tmp_path_factory):
    root = tmp_path_factory.mktemp("game")
    resources = root / "Resources"
    bomb = resources / "bomb"
    bomb.mkdir(parents=True)
    start = root / "project" / "bin"
    start.mkdir(parents=True)
    _save(resources / "Player_Right.png", (640, 128), (10, 20, 30))
    _save(resources / "bg-1-1.png", (400, 300), (40, 50, 60))
    _save(bomb / "bomb_0.png", (32, 32), (70, 80, 90))
    _save(bomb / "bomb_1.png", (32, 32), (90, 80, 70))

    held = set()
    core = EngineAPICore(
        use_display=False,
        engine_input=EngineInput(key_source=lambda code: code in held),
    )
    core.main_window.open()
    core.sub_window.open()
    Actor._pending_components.clear()
    EduContentsCore(start_dir=start).begin_play()
    yield SimpleNamespace(core=core, held=held)
    core.sub_window.close()
    core.main_window.close()


def _goto(game, name):
    game.held.clear()
    game.core.open_level(name)
    game.core.tick()
    return game.core.cur_level


def test_render_orders_used_by_play_level(game):
    play = _goto(game, "Play")
    play_map = next(actor for actor in play.all_actors if isinstance(actor, PlayMap))
    assert play_map.sprite_renderer.order == -1000
    assert play.main_pawn.sprite_renderer.order == 0


def test_missing_resources_raises(tmp_path):
    with pytest.raises(EngineError):
        EduContentsCore(start_dir=tmp_path).begin_play()


def test_resources_are_loaded_and_cut(game):
    manager = get_image_manager()
    assert len(manager.find_sprite("player_right.png")) == 640 // 128
    assert len(manager.find_sprite("bomb")) == 2
    assert manager.is_load_sprite("BG-1-1.PNG") is True


def test_windows_are_configured(game):
    core = game.core
    assert core.main_window.title == "EduWindow"
    assert core.sub_window.title == "SubWindow"
    assert core.sub_window.window_size == Vector2D(10000, 10)
    assert core.sub_window.position == Vector2D(1000, 10)
    assert core.main_window.window_size == screen_size()


def test_levels_are_created(game):
    levels = game.core.levels
    assert set(levels) == {"Play", "Title"}
    assert isinstance(levels["Title"].game_mode, TitleGameMode)
    assert type(levels["Title"].main_pawn) is Actor
    assert isinstance(levels["Play"].main_pawn, Player)


def test_title_r_opens_play(game):
    core = game.core
    level = _goto(game, "Title")
    assert level is core.levels["Title"]
    game.held.add(ord("R"))
    core.tick()
    game.held.clear()
    core.tick()
    assert core.cur_level is core.levels["Play"]


def test_play_level_setup(game):
    core = game.core
    play = _goto(game, "Play")
    assert RenderOrder.BACKGROUND in play.renderers
    assert RenderOrder.PLAYER in play.renderers
    assert play.camera_pivot == core.main_window.window_size.half() * -1.0
    assert any(isinstance(actor, PlayMap) for actor in play.all_actors)


def test_play_map_fills_background(game):
    play = _goto(game, "Play")
    play_map = next(actor for actor in play.all_actors if isinstance(actor, PlayMap))
    renderer = play_map.sprite_renderer
    assert renderer.component_scale == Vector2D(400, 300)
    assert renderer.component_location == renderer.component_scale.half()
    assert renderer.order == RenderOrder.BACKGROUND


def test_player_moves_right_and_runs(game):
    core = game.core
    play = _goto(game, "Play")
    player = play.main_pawn
    start = player.actor_location
    game.held.add(ord("D"))
    core.tick()
    moved = player.actor_location - start
    assert moved.x == pytest.approx(core.delta_time() * player.speed)
    assert moved.y == 0.0
    animations = player.sprite_renderer.frame_animations
    assert player.sprite_renderer.cur_animation is animations["RUN_RIGHT"]
    game.held.clear()
    core.tick()
    assert player.sprite_renderer.cur_animation is animations["IDLE_RIGHT"]


def test_player_moves_up_with_w(game):
    core = game.core
    play = _goto(game, "Play")
    player = play.main_pawn
    start = player.actor_location
    game.held.add(ord("W"))
    core.tick()
    game.held.clear()
    moved = player.actor_location - start
    assert moved.y == pytest.approx(-core.delta_time() * player.speed)
    assert moved.x == 0.0


def test_r_in_play_returns_to_title(game):
    core = game.core
    _goto(game, "Play")
    game.held.add(ord("R"))
    core.tick()
    game.held.clear()
    core.tick()
    assert core.cur_level is core.levels["Title"]


def test_run_animation_has_sound_event(game):
    player = game.core.levels["Play"].main_pawn
    run = player.sprite_renderer.frame_animations["RUN_RIGHT"]
    assert run.frame_index == [2, 3, 4]
    assert run.events[2] == [player.run_sound_play]