"""A camera mapping world coordinates to screen rectangles."""

from __future__ import annotations

import pygame

from samuraigame.vectors import F2V, I2V


class Camera:
    """Zoomable view onto the world whose top-left corner is ``pos``."""

    def __init__(self, pos: I2V, window_size: I2V, zoom: float) -> None:
        self.pos = I2V(pos.x, pos.y)
        self.window_size = I2V(window_size.x, window_size.y)
        self.zoom = zoom

    def viewport(self) -> pygame.Rect:
        """Visible region of the world."""
        return pygame.Rect(
            int(self.pos.x),
            int(self.pos.y),
            int(self.window_size.x / self.zoom),
            int(self.window_size.y / self.zoom),
        )

    def apply(self, pos: F2V, size: F2V) -> pygame.Rect:
        """Screen rectangle for a world-space box."""
        return pygame.Rect(
            int((pos.x - self.pos.x) * self.zoom),
            int((pos.y - self.pos.y) * self.zoom),
            int(size.x * self.zoom),
            int(size.y * self.zoom),
        )

    def center_on(self, target: F2V) -> None:
        """Move the camera so that ``target`` is in the middle of the window."""
        self.pos = I2V(
            int(target.x - self.window_size.x / (2 * self.zoom)),
            int(target.y - self.window_size.y / (2 * self.zoom)),
        )