import pygame
import pytest

from samuraigame.player import Player, PlayerState
from samuraigame.vectors import F2V, I2V

COUNTS = [6, 9, 8, 4, 5, 4, 2, 9, 3, 6]
CELL = 8


class _Clock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


def make_player(
    *,
    default_speed=200.0,
    gravity=0.0,
    map_grid=None,
    tile_size=10,
    pos=(5.0, 0.0),
    size=(5.0, 10.0),
    direction=1,
    clock=None,
):
    sheet = pygame.Surface((9 * CELL, len(COUNTS) * CELL), pygame.SRCALPHA)
    return Player(
        F2V(*pos),
        F2V(*size),
        F2V(15.0, 15.0),
        100,
        sheet,
        direction,
        COUNTS,
        I2V(CELL, CELL),
        I2V(0, 0),
        default_speed,
        gravity=gravity,
        map_grid=map_grid,
        tile_size=tile_size,
        ticks=clock or _Clock(),
    )


def test_no_keys_is_idle_and_still():
    player = make_player()
    player.update(0.1, {})
    assert player.vel.x == 0
    assert player.pos.x == 5.0
    assert player.current_animation == PlayerState.IDLE


def test_walking_right_moves_by_velocity():
    player = make_player()
    player.update(0.5, {pygame.K_RIGHT: True})
    assert player.vel.x > 0
    assert player.last_direction == 1
    assert player.current_animation == PlayerState.WALKING
    assert player.pos.x == pytest.approx(5.0 + player.vel.x * 0.5)


def test_running_is_three_times_walking():
    walker = make_player()
    runner = make_player()
    walker.update(0.1, {pygame.K_RIGHT: True})
    runner.update(0.1, {pygame.K_RIGHT: True, pygame.K_LSHIFT: True})
    assert runner.vel.x == pytest.approx(3 * walker.vel.x)
    assert runner.current_animation == PlayerState.RUNNING


def test_walking_left_turns_around():
    player = make_player()
    player.update(0.1, {pygame.K_LEFT: True})
    assert player.vel.x < 0
    assert player.last_direction == -1
    assert player.pos.x < 5.0


def test_both_directions_keep_last_direction():
    player = make_player()
    player.update(0.1, {pygame.K_LEFT: True})
    walk_speed = player.vel.x
    player.update(0.1, {pygame.K_LEFT: True, pygame.K_RIGHT: True})
    assert player.vel.x == pytest.approx(walk_speed)
    assert player.current_animation == PlayerState.WALKING


def test_falls_without_ground():
    player = make_player(gravity=100.0)
    player.update(0.1, {})
    assert player.vel.y > 0
    assert player.pos.y > 0
    assert player.is_on_ground is False


def test_lands_on_tile():
    player = make_player(gravity=100.0, map_grid=[[0, 0, 0], [1, 1, 1]])
    player.update(0.1, {})
    assert player.is_on_ground is True
    assert player.pos.y == 0.0
    assert player.vel.y == 0.0


def test_jump_on_landing_frame():
    player = make_player(gravity=100.0, map_grid=[[0, 0, 0], [1, 1, 1]])
    player.update(0.1, {pygame.K_UP: True})
    assert player.vel.y < 0
    assert player.is_on_ground is False


def test_wall_stops_horizontal_motion():
    player = make_player(map_grid=[[0, 1]], pos=(4.0, 0.0))
    player.update(1.0, {pygame.K_RIGHT: True})
    assert player.pos.x == 4.0
    assert player.vel.x == 0


def test_attack_z_hitbox_size():
    player = make_player()
    player.update(0.1, {pygame.K_z: True})
    assert player.current_animation == PlayerState.ATTACK1
    assert player.weapon_hitbox_size.x == pytest.approx(1.75 * 5.0)
    assert player.weapon_hitbox_size.y == pytest.approx(0.45 * 10.0)
    assert player.weapon_hitbox_pos.x > player.pos.x


@pytest.mark.parametrize(
    "key, state",
    [
        (pygame.K_z, PlayerState.ATTACK1),
        (pygame.K_x, PlayerState.ATTACK2),
        (pygame.K_c, PlayerState.ATTACK3),
    ],
)
def test_attack_hitbox_is_mirrored(key, state):
    right = make_player(direction=1)
    left = make_player(direction=-1)
    right.update(0.1, {key: True})
    left.update(0.1, {key: True})
    assert right.current_animation == state
    right_gap = right.weapon_hitbox_pos.x - right.pos.x
    left_gap = (left.pos.x + left.size.x) - (left.weapon_hitbox_pos.x + left.weapon_hitbox_size.x)
    assert right_gap == pytest.approx(left_gap)
    assert right.weapon_hitbox_pos.y == pytest.approx(left.weapon_hitbox_pos.y)


def test_releasing_attack_clears_hitbox():
    player = make_player()
    player.update(0.1, {pygame.K_x: True})
    assert player.weapon_hitbox_pos.x != 0.0
    player.update(0.1, {})
    assert player.weapon_hitbox_pos.x == 0.0


def test_attacking_halves_walking_speed():
    walker = make_player()
    attacker = make_player()
    walker.update(0.1, {pygame.K_RIGHT: True})
    attacker.update(0.1, {pygame.K_RIGHT: True, pygame.K_z: True})
    assert attacker.vel.x == pytest.approx(walker.vel.x / 2)


def test_protecting_slows_to_a_third():
    walker = make_player()
    guard = make_player()
    walker.update(0.1, {pygame.K_RIGHT: True})
    guard.update(0.1, {pygame.K_RIGHT: True, pygame.K_e: True})
    assert guard.current_animation == PlayerState.PROTECTING
    assert guard.vel.x == pytest.approx(walker.vel.x / 3)


def test_dead_wins_over_hurt():
    player = make_player()
    player.update(0.1, {pygame.K_o: True})
    assert player.current_animation == PlayerState.HURT
    player.update(0.1, {pygame.K_o: True, pygame.K_p: True})
    assert player.current_animation == PlayerState.DEAD


def test_frame_advances_and_wraps():
    clock = _Clock()
    player = make_player(clock=clock)
    player.update(0.1, {})
    assert player.current_frame == 0
    clock.now = 100
    player.update(0.1, {})
    assert player.current_frame == 1
    player.current_frame = COUNTS[PlayerState.IDLE] - 1
    clock.now = 200
    player.update(0.1, {})
    assert player.current_frame == 0