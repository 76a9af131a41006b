"""The game window, its main loop steps and the command that starts it."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

import pygame

from samuraigame.camera import Camera
from samuraigame.constants import FRAME_TARGET_TIME, FULLSCREEN, TITLE
from samuraigame.level import Level
from samuraigame.map_textures import DEFAULT_ASSETS_DIR, MapTextures
from samuraigame.player import Player
from samuraigame.texture_manager import TextureLoadError
from samuraigame.vectors import F2V, I2V

log = logging.getLogger(__name__)

WINDOWED_SIZE = I2V(720, 450)
BACKGROUND_COLOR = (50, 200, 200)
PLAYER_TEXTURE_COUNTS = (6, 9, 8, 4, 5, 4, 2, 9, 3, 6)


class GameInitError(RuntimeError):
    """Raised when the window, audio or player cannot be set up."""


class Game:
    """Owns the window, the current level, the player and the camera."""

    def __init__(
        self,
        *,
        fullscreen: bool = FULLSCREEN,
        assets_dir: str = DEFAULT_ASSETS_DIR,
        audio: bool = True,
    ) -> None:
        self.running = False
        self.fullscreen = fullscreen
        self.master_volume = 1
        self.key_states: dict[int, bool] = {}
        self._audio = audio
        self._closed = False
        try:
            self._init_pygame()
            self._init_world(assets_dir)
        except BaseException:
            pygame.quit()
            raise
        self.running = True
        log.info("Game running...")

    def _init_pygame(self) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise GameInitError(f"failed to initialize display: {exc}") from exc

        flags = 0
        if self.fullscreen:
            flags = pygame.FULLSCREEN
            info = pygame.display.Info()
            if info.current_w <= 0 or info.current_h <= 0:
                raise GameInitError("failed to initialize window dimensions")
            self.window_size = I2V(info.current_w, info.current_h)
        else:
            self.window_size = I2V(WINDOWED_SIZE.x, WINDOWED_SIZE.y)

        try:
            self.screen = pygame.display.set_mode((self.window_size.x, self.window_size.y), flags)
        except pygame.error as exc:
            raise GameInitError(f"failed to create window: {exc}") from exc
        pygame.display.set_caption(TITLE)

        try:
            pygame.font.init()
        except pygame.error as exc:
            raise GameInitError(f"failed to initialize fonts: {exc}") from exc

        if self._audio:
            try:
                pygame.mixer.init(44100, -16, 2, 2048)
            except pygame.error as exc:
                raise GameInitError(f"failed to initialize mixer: {exc}") from exc
            pygame.mixer.music.set_volume(self.master_volume / 10)

    def _init_world(self, assets_dir: str) -> None:
        self.last_frame_time = float(pygame.time.get_ticks())
        MapTextures.instance().init(assets_dir)
        self.tile_size = int(0.1 * self.window_size.y)

        self.current_level = 1
        self.levels = [
            Level(self.current_level, self.tile_size, self.window_size, assets_dir=assets_dir)
        ]

        tile = self.tile_size
        size = F2V(0.85 * tile, 1.8 * tile)
        pos = F2V(self.window_size.x * 0.5 - size.x / 2, self.window_size.y * 0.5 - size.y / 2)
        sheet = os.path.join(assets_dir, "textures", "Samurai", "sprite_sheet.png")
        try:
            self.player = Player(
                pos,
                size,
                F2V(3 * tile, 3 * tile),
                1000 // 7,
                sheet,
                1,
                PLAYER_TEXTURE_COUNTS,
                I2V(128, 128),
                I2V(0, 0),
                50.0 * tile,
                gravity=tile * 20.0,
                map_grid=self.levels[self.current_level - 1].map_grid,
                tile_size=tile,
            )
        except TextureLoadError as exc:
            raise GameInitError(f"failed to load player: {exc}") from exc

        self.camera = Camera(
            I2V(int(pos.x - size.x / 2), int(pos.y - size.y / 2)), self.window_size, 0.6
        )

    def handle_events(self) -> None:
        """Process one pending event."""
        event = pygame.event.poll()
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_q:
                self.running = False
            self.key_states[event.key] = True
        elif event.type == pygame.KEYUP:
            self.key_states[event.key] = False

    def update(self) -> None:
        """Wait for the frame time to pass, then move the player."""
        wait = FRAME_TARGET_TIME - (pygame.time.get_ticks() - self.last_frame_time)
        if 0 < wait <= FRAME_TARGET_TIME:
            pygame.time.delay(int(wait))
        delta_time = (pygame.time.get_ticks() - self.last_frame_time) / 1000.0
        self.last_frame_time = float(pygame.time.get_ticks())
        self.player.update(delta_time, self.key_states)

    def render(self) -> None:
        """Draw the level and the player and show the frame."""
        self.screen.fill(BACKGROUND_COLOR)
        self.levels[self.current_level - 1].render(self.screen, self.camera)
        self.player.render(self.screen, self.camera)
        pygame.display.flip()

    def close(self) -> None:
        """Shut down audio and the window."""
        if self._closed:
            return
        self._closed = True
        self.running = False
        if self._audio:
            pygame.mixer.quit()
        pygame.quit()
        log.info("Game cleaned!")

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window is closed or Q is pressed."""
    parser = argparse.ArgumentParser(prog="samuraigame", description="Side-scrolling samurai game.")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--assets-dir", default=DEFAULT_ASSETS_DIR, help="directory of game assets")
    parser.add_argument("--no-audio", action="store_true", help="do not open the audio device")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        game = Game(
            fullscreen=FULLSCREEN and not args.windowed,
            assets_dir=args.assets_dir,
            audio=not args.no_audio,
        )
    except GameInitError as exc:
        log.error("Error: %s", exc)
        return 1

    with game:
        while game.running:
            game.handle_events()
            game.update()
            game.render()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())