"""Identifiers of village building textures and their file paths."""

from __future__ import annotations

from enum import IntEnum, auto


class TextureId(IntEnum):
    """Tile numbers of building textures as they appear in level grids."""

    CANOPY_01 = 101
    CANOPY_02 = auto()
    CANOPY_03 = auto()
    CANOPY_04 = auto()

    CHIMNEY_01 = auto()
    CHIMNEY_02 = auto()
    CHIMNEY_03 = auto()
    CHIMNEY_04 = auto()

    DECOR_ROOF_01 = auto()
    DECOR_ROOF_02 = auto()

    DECOR_WINDOW_01 = auto()
    DECOR_WINDOW_02 = auto()
    DECOR_WINDOW_03 = auto()
    DECOR_WINDOW_04 = auto()
    DECOR_WINDOW_05 = auto()
    DECOR_WINDOW_06 = auto()
    DECOR_WINDOW_07 = auto()
    DECOR_WINDOW_08 = auto()

    DOOR_01 = auto()
    DOOR_02 = auto()
    DOOR_03 = auto()
    DOOR_04 = auto()

    LADDER_01 = auto()
    LADDER_02 = auto()

    PILLAR_01 = auto()
    PILLAR_02 = auto()
    PILLAR_03 = auto()
    PILLAR_04 = auto()
    PILLAR_05 = auto()
    PILLAR_06 = auto()
    PILLAR_07 = auto()

    ROOF_A_01 = auto()
    ROOF_A_02 = auto()
    ROOF_A_03 = auto()
    ROOF_A_04 = auto()
    ROOF_A_05 = auto()

    ROOF_B_01 = auto()
    ROOF_B_02 = auto()
    ROOF_B_03 = auto()
    ROOF_B_04 = auto()
    ROOF_B_05 = auto()

    STONE_WINDOW_01 = auto()
    STONE_WINDOW_02 = auto()
    STONE_WINDOW_03 = auto()

    WALL_A_01 = auto()
    WALL_A_02 = auto()
    WALL_A_03 = auto()

    WALL_B_01 = auto()
    WALL_B_02 = auto()
    WALL_B_03 = auto()

    WALL_C_01 = auto()
    WALL_C_02 = auto()
    WALL_C_03 = auto()

    WIDE_DOOR_01 = auto()
    WIDE_DOOR_02 = auto()
    WIDE_DOOR_03 = auto()
    WIDE_DOOR_04 = auto()

    WINDOW_01 = auto()
    WINDOW_02 = auto()
    WINDOW_03 = auto()


_PATHS: dict[TextureId, str] = {
    TextureId.CANOPY_01: "textures/Village/Building/Canopy_01.png",
    TextureId.WALL_A_01: "textures/Village/Building/Wall_A_01.png",
    TextureId.WALL_A_02: "textures/Village/Building/Wall_A_02.png",
}


def texture_path(texture_id: TextureId) -> str:
    """Path of the texture file for ``texture_id``, or an empty string if unknown."""
    return _PATHS.get(texture_id, "")