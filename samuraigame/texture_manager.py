"""Loading images from disk into surfaces."""

from __future__ import annotations

import logging

import pygame

from samuraigame.vectors import I2V

log = logging.getLogger(__name__)


class TextureLoadError(Exception):
    """Raised when an image cannot be loaded or cut."""


def numbered_file_name(base_name: str, index: int) -> str:
    """File name of the ``index``-th image in a numbered series."""
    return f"{base_name}{index:02d}.png"


def _prepare(surface: pygame.Surface) -> pygame.Surface:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surface.convert_alpha()
    return surface


def _load(file_name: str) -> pygame.Surface:
    try:
        return pygame.image.load(file_name)
    except (pygame.error, OSError) as exc:
        raise TextureLoadError(f"cannot load image {file_name!r}: {exc}") from exc


def load_texture(file_name: str) -> pygame.Surface:
    """Load a whole image."""
    return _prepare(_load(file_name))


def load_cut_texture(file_name: str, pos: I2V, size: I2V) -> pygame.Surface:
    """Load the ``size`` region of an image whose top-left corner is ``pos``.

    Parts of the region lying outside the image stay transparent.
    """
    if size.x <= 0 or size.y <= 0:
        raise TextureLoadError(f"invalid texture size {size.x}x{size.y}")
    sheet = _load(file_name)
    cut = pygame.Surface((size.x, size.y), pygame.SRCALPHA)
    cut.fill((0, 0, 0, 0))
    cut.blit(sheet, (0, 0), area=pygame.Rect(pos.x, pos.y, size.x, size.y))
    return _prepare(cut)


def load_textures_by_name(base_name: str, count: int) -> list[pygame.Surface | None]:
    """Load images numbered 1 to ``count``; a missing image leaves None in its slot."""
    textures: list[pygame.Surface | None] = []
    for index in range(1, count + 1):
        try:
            textures.append(load_texture(numbered_file_name(base_name, index)))
        except TextureLoadError as exc:
            log.error("%s", exc)
            textures.append(None)
    return textures