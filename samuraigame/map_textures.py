"""Shared store of the tile textures used by level grids."""

from __future__ import annotations

import os
from enum import Enum
from typing import ClassVar

import pygame

from samuraigame.texture_manager import load_textures_by_name

DEFAULT_ASSETS_DIR = os.path.join("..", "assets")

GROUND_TEXTURE_COUNT = 13
BUILDING_TEXTURE_COUNT = 61
BUILDING_TILE_OFFSET = 100


class TextureType(Enum):
    """Families of map tile textures."""

    GROUND = 0
    BUILDING = 1


class MapTextureError(LookupError):
    """Raised when a tile texture is asked for with a wrong type or index."""


class MapTextures:
    """Ground and building tile textures, loaded once and shared by all layers."""

    _shared: ClassVar[MapTextures | None] = None

    def __init__(self) -> None:
        self.ground_textures: list[pygame.Surface | None] = []
        self.building_textures: list[pygame.Surface | None] = []
        self.initialized = False

    @classmethod
    def instance(cls) -> MapTextures:
        """The store shared by the whole game."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def init(self, assets_dir: str = DEFAULT_ASSETS_DIR) -> None:
        """Load all tile textures from ``assets_dir``; later calls do nothing."""
        if self.initialized:
            return
        village = os.path.join(assets_dir, "textures", "Village")
        self.ground_textures = load_textures_by_name(
            os.path.join(village, "Platformer", "Ground_"), GROUND_TEXTURE_COUNT
        )
        self.building_textures = load_textures_by_name(
            os.path.join(village, "Building", "Building_"), BUILDING_TEXTURE_COUNT
        )
        self.initialized = True

    def get_texture(self, texture_type: TextureType, k: int) -> pygame.Surface | None:
        """Texture for tile number ``k``; None if its image failed to load.

        Ground tiles are numbered from 1, building tiles from 101.
        """
        if texture_type is TextureType.GROUND:
            if not 1 <= k <= len(self.ground_textures):
                raise MapTextureError(f"wrong ground texture value {k}")
            return self.ground_textures[k - 1]
        if texture_type is TextureType.BUILDING:
            first = BUILDING_TILE_OFFSET + 1
            if not first <= k <= len(self.building_textures) + BUILDING_TILE_OFFSET:
                raise MapTextureError(f"wrong building texture value {k}")
            return self.building_textures[k - first]
        raise MapTextureError(f"wrong map texture type {texture_type!r}")