"""A level made of background images and tile grid layers."""

from __future__ import annotations

import pygame

from samuraigame.camera import Camera
from samuraigame.layer import Layer, LayerType
from samuraigame.map_textures import DEFAULT_ASSETS_DIR, MapTextures
from samuraigame.vectors import I2V

_IMAGE_LAYERS = (LayerType.BACKGROUND, LayerType.FAR, LayerType.NEAR)
_GRID_LAYERS = (LayerType.DECORATION, LayerType.INTERACTIVE, LayerType.MAP)


class Level:
    """All layers of one level, drawn back to front."""

    def __init__(
        self,
        level: int,
        tile_size: int,
        window_size: I2V,
        *,
        assets_dir: str = DEFAULT_ASSETS_DIR,
        map_textures: MapTextures | None = None,
    ) -> None:
        self.level = level
        self.layers = [
            Layer(layer_type, level, assets_dir=assets_dir, parallax_vel=1.0)
            for layer_type in _IMAGE_LAYERS
        ] + [
            Layer(
                layer_type,
                level,
                assets_dir=assets_dir,
                tile_size=tile_size,
                window_size=window_size,
                map_textures=map_textures,
            )
            for layer_type in _GRID_LAYERS
        ]

    @property
    def map_grid(self) -> list[list[int]]:
        """Grid of the solid map layer."""
        return next(layer.grid for layer in self.layers if layer.type is LayerType.MAP)

    def render(self, surface: pygame.Surface, camera: Camera) -> int:
        """Draw every layer in order; returns how many items were drawn."""
        return sum(layer.render(surface, camera) for layer in self.layers)