import pytest

from samuraigame.texture_notation import TextureId, texture_path


def test_first_id_is_101():
    assert TextureId(101) is TextureId.CANOPY_01


def test_ids_are_consecutive():
    members = [TextureId(value) for value in range(101, 161)]
    assert members == list(TextureId)


def test_all_ids_fit_building_tile_range():
    with pytest.raises(ValueError):
        TextureId(161)
    assert TextureId(160) is TextureId.WINDOW_03


def test_lookup_by_tile_number():
    assert TextureId(TextureId.WALL_A_01.value) is TextureId.WALL_A_01


@pytest.mark.parametrize(
    "texture_id,path",
    [
        (TextureId.CANOPY_01, "textures/Village/Building/Canopy_01.png"),
        (TextureId.WALL_A_01, "textures/Village/Building/Wall_A_01.png"),
        (TextureId.WALL_A_02, "textures/Village/Building/Wall_A_02.png"),
    ],
)
def test_known_paths(texture_id, path):
    assert texture_path(texture_id) == path


def test_unknown_path_is_empty():
    assert texture_path(TextureId.WINDOW_03) == ""


def test_invalid_tile_number_rejected():
    with pytest.raises(ValueError):
        TextureId(100)