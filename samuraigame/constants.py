"""Game-wide settings."""

FULLSCREEN = True
TITLE = "Game"
FPS = 60.0
FRAME_TARGET_TIME = 1000.0 / FPS
SHOW_HITBOXES = True