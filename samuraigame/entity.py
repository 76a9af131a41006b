"""Animated game objects drawn from a sprite sheet."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence

import pygame

from samuraigame.camera import Camera
from samuraigame.constants import SHOW_HITBOXES
from samuraigame.texture_manager import TextureLoadError, load_texture
from samuraigame.vectors import F2V, I2V

log = logging.getLogger(__name__)

_ENTITY_COLOR = (255, 0, 0, 255)
_TEXTURE_COLOR = (128, 128, 128, 255)
_WEAPON_COLOR = (0, 0, 255, 255)
_PROTECTING_COLOR = (0, 255, 0, 255)


def _cut(sheet: pygame.Surface, pos: I2V, width: int, height: int) -> pygame.Surface:
    frame = pygame.Surface((width, height), pygame.SRCALPHA)
    frame.fill((0, 0, 0, 0))
    frame.blit(sheet, (0, 0), area=pygame.Rect(pos.x, pos.y, width, height))
    return frame


def slice_sprite_sheet(
    sheet: pygame.Surface,
    texture_counts: Sequence[int],
    single_size: I2V,
    margin: I2V,
) -> list[list[pygame.Surface]]:
    """Cut a sheet into animation frames.

    Row ``i`` of the sheet holds ``texture_counts[i]`` frames, each occupying a
    ``single_size`` cell trimmed by ``margin``.
    """
    width = single_size.x - 2 * margin.x
    height = single_size.y - margin.y
    if width <= 0 or height <= 0:
        raise TextureLoadError(f"invalid frame size {width}x{height}")
    return [
        [
            _cut(
                sheet,
                I2V(col * single_size.x + margin.x, row * single_size.y + margin.y),
                width,
                height,
            )
            for col in range(count)
        ]
        for row, count in enumerate(texture_counts)
    ]


class Entity:
    """Something in the world with a hitbox and frame-based animations."""

    def __init__(
        self,
        pos: F2V,
        size: F2V,
        texture_size: F2V,
        animation_target_time: float,
        sprite_sheet: str | os.PathLike[str] | pygame.Surface,
        direction: int,
        texture_counts: Sequence[int],
        single_size: I2V,
        margin: I2V,
        *,
        ticks: Callable[[], float] = pygame.time.get_ticks,
    ) -> None:
        self.pos = F2V(pos.x, pos.y)
        self.size = F2V(size.x, size.y)
        self.texture_size = F2V(texture_size.x, texture_size.y)

        if isinstance(sprite_sheet, pygame.Surface):
            sheet = sprite_sheet
        else:
            sheet = load_texture(os.fspath(sprite_sheet))
        self.textures: list[list[pygame.Surface | None]] = slice_sprite_sheet(
            sheet, texture_counts, single_size, margin
        )

        self.last_direction = direction
        self.animation_target_time = animation_target_time
        self._ticks = ticks
        self.last_animation_time = float(ticks())
        self.current_animation = 0
        self.current_frame = 0

        self.weapon_hitbox_pos = F2V()
        self.weapon_hitbox_size = F2V()
        self.protecting_hitbox_pos = F2V()
        self.protecting_hitbox_size = F2V()

    def render(self, surface: pygame.Surface, camera: Camera) -> pygame.Rect | None:
        """Centre the camera on the entity and draw its current frame.

        Returns the screen rectangle of the frame, or None if there is no frame.
        """
        camera.center_on(F2V(self.pos.x - self.size.x / 2, self.pos.y - self.size.y / 2))

        texture = self.textures[self.current_animation][self.current_frame]
        if texture is None:
            log.error(
                "no texture of entity animation: animation: %d, frame: %d",
                self.current_animation,
                self.current_frame,
            )
            return None

        texture_pos = F2V(
            self.pos.x - (self.texture_size.x - self.size.x) / 2,
            self.pos.y - (self.texture_size.y - self.size.y),
        )
        texture_rect = camera.apply(texture_pos, self.texture_size)

        if SHOW_HITBOXES:
            pygame.draw.rect(surface, _ENTITY_COLOR, camera.apply(self.pos, self.size), 1)
            pygame.draw.rect(surface, _TEXTURE_COLOR, texture_rect, 1)
            if self.weapon_hitbox_pos.x != 0.0:
                pygame.draw.rect(
                    surface,
                    _WEAPON_COLOR,
                    camera.apply(self.weapon_hitbox_pos, self.weapon_hitbox_size),
                    1,
                )
            if self.protecting_hitbox_pos.x != 0.0:
                pygame.draw.rect(
                    surface,
                    _PROTECTING_COLOR,
                    camera.apply(self.protecting_hitbox_pos, self.protecting_hitbox_size),
                    1,
                )

        image = pygame.transform.scale(
            texture, (max(texture_rect.w, 0), max(texture_rect.h, 0))
        )
        if self.last_direction <= 0:
            image = pygame.transform.flip(image, True, False)
        surface.blit(image, texture_rect.topleft)
        return texture_rect