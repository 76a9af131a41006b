"""The player-controlled samurai."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

import pygame

from samuraigame.entity import Entity
from samuraigame.physics import aabb_cast
from samuraigame.vectors import F2V, I2V

RUN_MULTIPLIER = 3
PROTECTING_SPEED_DIVISOR = 3.0
ATTACKING_SPEED_DIVISOR = 2.0
FALL_GRAVITY_FACTOR = 1.8


class PlayerState(IntEnum):
    """Animation rows of the player's sprite sheet."""

    IDLE = 0
    WALKING = 1
    RUNNING = 2
    ATTACK1 = 3
    ATTACK2 = 4
    ATTACK3 = 5
    PROTECTING = 6
    JUMPING = 7
    HURT = 8
    DEAD = 9


@dataclass(frozen=True)
class _Attack:
    key: int
    state: PlayerState
    offset: float
    width: float
    height: float
    top: float


_ATTACKS = (
    _Attack(pygame.K_z, PlayerState.ATTACK1, 0.6, 1.75, 0.45, 0.2),
    _Attack(pygame.K_x, PlayerState.ATTACK2, 0.15, 2.3, 1.3, -0.45),
    _Attack(pygame.K_c, PlayerState.ATTACK3, -0.1, 2.1, 0.65, 0.05),
)


class Player(Entity):
    """Entity moved by the keyboard, falling under gravity and colliding with the map."""

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
        default_speed: float,
        *,
        gravity: float = 0.0,
        map_grid: Sequence[Sequence[int]] | None = None,
        tile_size: int = 0,
        ticks: Callable[[], float] = pygame.time.get_ticks,
    ) -> None:
        super().__init__(
            pos,
            size,
            texture_size,
            int(animation_target_time),
            sprite_sheet,
            direction,
            texture_counts,
            single_size,
            margin,
            ticks=ticks,
        )
        self.vel = F2V()
        self.default_speed = default_speed / 20
        self.jump_vel = default_speed / 4
        self.health = 10.0
        self.state = PlayerState.IDLE
        self.is_on_ground = False
        self.gravity = gravity
        self.map_grid: list[list[int]] = [list(row) for row in map_grid or []]
        self.tile_size = int(tile_size)

    def update(self, delta_time: float, key_states: Mapping[int, bool]) -> None:
        """Advance the player by ``delta_time`` seconds given the pressed keys."""

        def pressed(key: int) -> bool:
            return bool(key_states.get(key, False))

        self._steer(pressed(pygame.K_LEFT), pressed(pygame.K_RIGHT), pressed(pygame.K_LSHIFT))
        self._apply_gravity(delta_time)

        if pressed(pygame.K_e):
            self.current_animation = PlayerState.PROTECTING
            if self.vel.x != 0:
                self.vel.x = self.default_speed * self.last_direction / PROTECTING_SPEED_DIVISOR

        self._move(delta_time)
        self._attack(pressed)

        if pressed(pygame.K_UP) and self.is_on_ground:
            self.vel.y = -self.jump_vel
            self.is_on_ground = False

        if pressed(pygame.K_p):
            self.current_animation = PlayerState.DEAD
        elif pressed(pygame.K_o):
            self.current_animation = PlayerState.HURT

        self._animate()

    def _steer(self, left: bool, right: bool, shift: bool) -> None:
        multiplier = RUN_MULTIPLIER if shift else 1
        moving = PlayerState.RUNNING if shift else PlayerState.WALKING
        if left and right:
            self.vel.x = self.default_speed * self.last_direction
            self.current_animation = PlayerState.WALKING
        elif left:
            self.vel.x = -self.default_speed * multiplier
            self.last_direction = -1
            self.current_animation = moving
        elif right:
            self.vel.x = self.default_speed * multiplier
            self.last_direction = 1
            self.current_animation = moving
        else:
            self.vel.x = 0.0
            self.current_animation = PlayerState.IDLE

    def _apply_gravity(self, delta_time: float) -> None:
        if self.is_on_ground:
            self.vel.y = 0.0
        elif self.vel.y < 0:
            self.vel.y += self.gravity * delta_time
        else:
            self.vel.y += FALL_GRAVITY_FACTOR * self.gravity * delta_time

    def _move(self, delta_time: float) -> None:
        self.is_on_ground = False
        body = pygame.Rect(
            int(self.pos.x), int(self.pos.y), int(self.size.x), int(self.size.y)
        )
        collision_x = False
        collision_y = False
        tile = self.tile_size

        for row_index, row in enumerate(self.map_grid):
            y = row_index * tile
            for col_index, value in enumerate(row):
                if value == 0:
                    continue
                hit = aabb_cast(body, pygame.Rect(col_index * tile, y, tile, tile), self.vel, delta_time)
                if hit is None:
                    continue
                if abs(hit.normal.x) > 0.5:
                    collision_x = True
                if abs(hit.normal.y) > 0.5:
                    collision_y = True
                    if hit.normal.y < 0:
                        self.is_on_ground = True
                        self.pos.y = y - self.size.y
                        self.vel.y = 0.0

        if collision_x:
            self.vel.x = 0.0
        else:
            self.pos.x += self.vel.x * delta_time

        if not collision_y:
            self.pos.y += self.vel.y * delta_time
        elif self.vel.y > 0:
            self.is_on_ground = True

    def _attack(self, pressed: Callable[[int], bool]) -> None:
        attack = next((a for a in _ATTACKS if pressed(a.key)), None)
        if attack is None:
            self.weapon_hitbox_pos = F2V(0.0, 0.0)
            return

        self.current_animation = attack.state
        width = attack.width * self.size.x
        offset = attack.offset * self.size.x
        if self.last_direction == 1:
            x = self.pos.x + offset
        else:
            x = self.pos.x + self.size.x - offset - width
        self.weapon_hitbox_pos = F2V(x, self.pos.y + attack.top * self.size.y)
        self.weapon_hitbox_size = F2V(width, attack.height * self.size.y)

        if self.vel.x != 0.0:
            self.vel.x = self.default_speed * self.last_direction / ATTACKING_SPEED_DIVISOR

    def _animate(self) -> None:
        now = float(self._ticks())
        if now - self.last_animation_time >= self.animation_target_time:
            self.last_animation_time = now
            self.current_frame += 1
        if self.current_frame >= len(self.textures[self.current_animation]):
            self.current_frame = 0