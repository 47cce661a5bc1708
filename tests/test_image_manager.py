import pygame
import pytest

from apiengine.base import EngineError
from apiengine.engine_math import Vector2D
from apiengine.image_manager import ImageManager, get_image_manager


def make_bmp(path, width, height, color=(10, 20, 30)):
    surface = pygame.Surface((width, height))
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def manager():
    return ImageManager()


def test_load_registers_image_and_sprite(manager, tmp_path):
    path = make_bmp(tmp_path / "player.bmp", 8, 4)
    manager.load(path)
    assert manager.is_load_sprite("PLAYER.BMP")
    sprite = manager.find_sprite("player.bmp")
    assert len(sprite) == 1
    frame = sprite.get_sprite_data(0)
    assert frame.transform.scale == Vector2D(8, 4)
    assert frame.transform.location == Vector2D.ZERO
    assert frame.image is manager.find_image("Player.Bmp")


def test_load_with_key_name(manager, tmp_path):
    path = make_bmp(tmp_path / "player.bmp", 8, 4)
    manager.load(path, "hero")
    assert manager.is_load_sprite("HERO")
    assert not manager.is_load_sprite("player.bmp")


def test_load_twice_is_an_error(manager, tmp_path):
    path = make_bmp(tmp_path / "player.bmp", 8, 4)
    manager.load(path)
    with pytest.raises(EngineError):
        manager.load(path)


def test_load_directory_or_missing_is_an_error(manager, tmp_path):
    with pytest.raises(EngineError):
        manager.load(tmp_path)
    with pytest.raises(EngineError):
        manager.load(tmp_path / "missing.bmp")


def test_find_missing_is_an_error(manager):
    assert not manager.is_load_sprite("nothing")
    with pytest.raises(EngineError):
        manager.find_sprite("nothing")
    with pytest.raises(EngineError):
        manager.find_image("nothing")


def test_cutting_sprite_row_major(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "sheet.bmp", 8, 4))
    manager.cutting_sprite("sheet.bmp", Vector2D(4, 2))
    sprite = manager.find_sprite("sheet.bmp")
    locations = [frame.transform.location for frame in sprite]
    assert locations == [Vector2D(0, 0), Vector2D(4, 0), Vector2D(0, 2), Vector2D(4, 2)]
    assert all(frame.transform.scale == Vector2D(4, 2) for frame in sprite)


def test_cutting_sprite_uneven_is_an_error(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "sheet.bmp", 8, 4))
    with pytest.raises(EngineError):
        manager.cutting_sprite("sheet.bmp", Vector2D(3, 2))


def test_cutting_missing_sprite_is_an_error(manager):
    with pytest.raises(EngineError):
        manager.cutting_sprite("nothing", Vector2D(2, 2))


def test_cutting_sprite_grid(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "sheet.bmp", 8, 4))
    manager.cutting_sprite_grid("sheet.bmp", 2, 2)
    sprite = manager.find_sprite("sheet.bmp")
    assert len(sprite) == 4
    assert sprite.get_sprite_data(3).transform.scale == Vector2D(4, 2)


def test_load_folder(manager, tmp_path):
    folder = tmp_path / "bomb"
    folder.mkdir()
    for name in ("a.bmp", "b.bmp", "c.bmp"):
        make_bmp(folder / name, 6, 6)
    manager.load_folder(folder)
    sprite = manager.find_sprite("BOMB")
    assert len(sprite) == 3
    assert sprite.get_sprite_data(1).image is manager.find_image("b.bmp")


def test_load_folder_reuses_loaded_image(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "a.bmp", 6, 6))
    folder = tmp_path / "bomb"
    folder.mkdir()
    make_bmp(folder / "a.bmp", 6, 6)
    manager.load_folder(folder, "boom")
    assert manager.find_sprite("boom").get_sprite_data(0).image is manager.find_image("a.bmp")


def test_load_folder_twice_is_an_error(manager, tmp_path):
    folder = tmp_path / "bomb"
    folder.mkdir()
    make_bmp(folder / "a.bmp", 6, 6)
    manager.load_folder(folder)
    with pytest.raises(EngineError):
        manager.load_folder(folder)


def test_create_cut_sprite(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "sheet.bmp", 10, 4))
    manager.create_cut_sprite("sheet.bmp", "cells", Vector2D(0, 0), Vector2D(2, 2), Vector2D(1, 0), 3, 5)
    cells = manager.find_sprite("cells")
    assert len(cells) == 6
    assert cells.get_sprite_data(1).transform.location == Vector2D(3, 0)
    assert cells.get_sprite_data(3).transform.location == Vector2D(0, 2)
    assert manager.find_image("cells").image_scale() == Vector2D(8, 4)
    assert len(manager.find_sprite("sheet.bmp")) == 0


def test_create_cut_sprite_errors(manager, tmp_path):
    manager.load(make_bmp(tmp_path / "sheet.bmp", 10, 4))
    with pytest.raises(EngineError):
        manager.create_cut_sprite("sheet.bmp", "cells", Vector2D(0, 0), Vector2D(2, 2), Vector2D(0, 0), 0, 5)
    with pytest.raises(EngineError):
        manager.create_cut_sprite("sheet.bmp", "cells", Vector2D(0, 0), Vector2D(20, 2), Vector2D(0, 0), 1, 1)
    with pytest.raises(EngineError):
        manager.create_cut_sprite("sheet.bmp", "sheet.bmp", Vector2D(0, 0), Vector2D(2, 2), Vector2D(0, 0), 1, 1)
    with pytest.raises(EngineError):
        manager.create_cut_sprite("missing", "cells", Vector2D(0, 0), Vector2D(2, 2), Vector2D(0, 0), 1, 1)


def test_get_image_manager_is_shared(tmp_path):
    path = make_bmp(tmp_path / "shared.bmp", 4, 4)
    get_image_manager().load(path, "shared_manager_check")
    assert get_image_manager().is_load_sprite("SHARED_MANAGER_CHECK") is True