"""Level layers: full-screen images and tile grids."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from enum import Enum

import pygame

from samuraigame.camera import Camera
from samuraigame.map_textures import (
    DEFAULT_ASSETS_DIR,
    MapTextureError,
    MapTextures,
    TextureType,
)
from samuraigame.texture_manager import TextureLoadError, load_texture
from samuraigame.vectors import F2V, I2V

log = logging.getLogger(__name__)

_CELL_WIDTH = 3


class LayerType(Enum):
    """Kinds of layer; the value is the stem of the layer's file."""

    BACKGROUND = "background"
    FAR = "far"
    NEAR = "near"
    DECORATION = "decoration"
    INTERACTIVE = "interactive"
    MAP = "map"

    @property
    def is_grid(self) -> bool:
        """Whether the layer is a tile grid rather than a single image."""
        return self not in (LayerType.BACKGROUND, LayerType.FAR, LayerType.NEAR)


def level_directory(assets_dir: str, level: int) -> str:
    """Directory holding the files of level number ``level``."""
    return os.path.join(assets_dir, "levels", f"level_{level:03d}")


def parse_grid(lines: Iterable[str]) -> list[list[int]]:
    """Parse grid text in which every tile takes three characters."""
    grid = []
    for line in lines:
        line = line.rstrip("\r\n")
        grid.append(
            [int(line[start:start + _CELL_WIDTH]) for start in range(0, len(line), _CELL_WIDTH)]
        )
    return grid


def _tile_kind(tile: int) -> TextureType | None:
    if 0 < tile < 14:
        return TextureType.GROUND
    if 100 < tile < 162:
        return TextureType.BUILDING
    return None


class Layer:
    """One layer of a level, drawn either as an image or as a grid of tiles."""

    def __init__(
        self,
        layer_type: LayerType,
        level: int,
        *,
        assets_dir: str = DEFAULT_ASSETS_DIR,
        tile_size: int = 0,
        window_size: I2V | None = None,
        parallax_vel: float = 1.0,
        map_textures: MapTextures | None = None,
    ) -> None:
        self.type = layer_type
        self.level = level
        self.tile_size = tile_size
        self.window_size = None if window_size is None else I2V(window_size.x, window_size.y)
        self.parallax_vel = float(parallax_vel)
        self.texture: pygame.Surface | None = None
        self.grid: list[list[int]] = []
        self._map_textures = map_textures

        directory = level_directory(assets_dir, level)
        if layer_type.is_grid:
            self._load_grid(os.path.join(directory, f"{layer_type.value}.txt"))
        else:
            path = os.path.join(directory, "textures", f"{layer_type.value}.png")
            try:
                self.texture = load_texture(path)
            except TextureLoadError as exc:
                log.error("failed to initialize layer texture: %s", exc)

    def _load_grid(self, path: str) -> None:
        try:
            with open(path, encoding="utf-8") as file:
                self.grid = parse_grid(file)
        except FileNotFoundError:
            log.error("error opening grid file: %s, file does not exist", path)
        except OSError as exc:
            log.error("error opening grid file: %s, %s", path, exc)

    def render(self, surface: pygame.Surface, camera: Camera) -> int:
        """Draw the layer; returns how many images or tiles were drawn."""
        if self.type.is_grid:
            return self._render_grid(surface, camera)
        return self._render_image(surface)

    def _render_image(self, surface: pygame.Surface) -> int:
        if self.texture is None:
            return 0
        surface.blit(pygame.transform.scale(self.texture, surface.get_size()), (0, 0))
        return 1

    def _render_grid(self, surface: pygame.Surface, camera: Camera) -> int:
        if not self.grid:
            return 0
        textures = self._map_textures or MapTextures.instance()
        window = self.window_size or I2V(*surface.get_size())
        size = F2V(self.tile_size, self.tile_size)
        drawn = 0

        for row_index, row in enumerate(self.grid):
            y = row_index * self.tile_size
            for col_index, tile in enumerate(row):
                kind = _tile_kind(tile)
                if kind is None:
                    continue
                try:
                    texture = textures.get_texture(kind, tile)
                except MapTextureError as exc:
                    log.error("%s", exc)
                    texture = None
                if texture is None:
                    log.error("cannot read tile texture for tile type %s and index %d", kind.name, tile)
                    return drawn

                rect = camera.apply(F2V(col_index * self.tile_size, y), size)
                if rect.right < 0 or rect.x > window.x or rect.bottom < 0 or rect.y > window.y:
                    continue

                image = pygame.transform.scale(texture, (max(rect.w, 0), max(rect.h, 0)))
                surface.blit(image, rect.topleft)
                drawn += 1
        return drawn