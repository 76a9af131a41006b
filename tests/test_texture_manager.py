import pygame
import pytest

from samuraigame.texture_manager import (
    TextureLoadError,
    load_cut_texture,
    load_texture,
    load_textures_by_name,
    numbered_file_name,
)
from samuraigame.vectors import I2V

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _save(path, size, fill):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(fill)
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def sheet(tmp_path):
    surface = pygame.Surface((4, 2), pygame.SRCALPHA)
    surface.fill(RED, pygame.Rect(0, 0, 2, 2))
    surface.fill(BLUE, pygame.Rect(2, 0, 2, 2))
    path = tmp_path / "sheet.png"
    pygame.image.save(surface, str(path))
    return str(path)


@pytest.mark.parametrize(
    "index,expected",
    [(1, "Ground_01.png"), (9, "Ground_09.png"), (13, "Ground_13.png"), (100, "Ground_100.png")],
)
def test_numbered_file_name(index, expected):
    assert numbered_file_name("Ground_", index) == expected


def test_load_texture_round_trip(tmp_path):
    path = _save(tmp_path / "a.png", (3, 5), BLUE)
    surface = load_texture(str(path))
    assert surface.get_size() == (3, 5)
    assert tuple(surface.get_at((1, 1))) == BLUE


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(TextureLoadError):
        load_texture(str(tmp_path / "missing.png"))


def test_cut_texture_takes_requested_region(sheet):
    cut = load_cut_texture(sheet, I2V(2, 0), I2V(2, 2))
    assert cut.get_size() == (2, 2)
    assert tuple(cut.get_at((0, 0))) == BLUE
    assert tuple(cut.get_at((1, 1))) == BLUE


def test_cut_texture_outside_sheet_is_transparent(sheet):
    cut = load_cut_texture(sheet, I2V(3, 0), I2V(2, 2))
    assert tuple(cut.get_at((0, 0))) == BLUE
    assert cut.get_at((1, 0)).a == 0


def test_cut_texture_rejects_empty_size(sheet):
    with pytest.raises(TextureLoadError):
        load_cut_texture(sheet, I2V(0, 0), I2V(0, 2))


def test_cut_texture_missing_file(tmp_path):
    with pytest.raises(TextureLoadError):
        load_cut_texture(str(tmp_path / "none.png"), I2V(0, 0), I2V(1, 1))


def test_load_textures_by_name_keeps_gaps(tmp_path):
    base = tmp_path / "Building_"
    _save(tmp_path / "Building_01.png", (2, 2), RED)
    _save(tmp_path / "Building_03.png", (2, 2), BLUE)
    textures = load_textures_by_name(str(base), 3)
    assert len(textures) == 3
    assert textures[1] is None
    assert tuple(textures[0].get_at((0, 0))) == RED
    assert tuple(textures[2].get_at((0, 0))) == BLUE


def test_load_textures_by_name_zero_count(tmp_path):
    assert load_textures_by_name(str(tmp_path / "x_"), 0) == []