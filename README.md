# samuraigame

A small side-scrolling platformer built on pygame. You control a samurai who
walks, runs, jumps, guards and attacks across a tile-based level. The level is
drawn over full-screen background images.

## Installation

```
pip install .
```

To install it with the test tools as well:

```
pip install ".[test]"
```

## Running

```
samuraigame
```

Options:

| Option              | Effect                                                  |
|---------------------|---------------------------------------------------------|
| `--windowed`        | open a 720×450 window instead of going full screen      |
| `--assets-dir DIR`  | directory to load art and levels from (default `../assets`) |
| `--no-audio`        | do not open the audio device                            |

If the window, the audio device or the player sprite sheet cannot be set up,
the command logs the error and exits with status 1.

### Assets

The game reads these files below the assets directory:

- `textures/Samurai/sprite_sheet.png`: the player sprite sheet. It is made of
  128×128 frames with one row for each animation. The rows hold 6, 9, 8, 4, 5,
  4, 2, 9, 3 and 6 frames, in the order idle, walking, running, attack 1–3,
  protecting, jumping, hurt, dead.
- `textures/Village/Platformer/Ground_01.png` … `Ground_13.png`: ground tiles.
- `textures/Village/Building/Building_01.png` … `Building_61.png`: building tiles.
- `levels/level_001/textures/{background,far,near}.png`: the background images.
  Each one is stretched over the whole window.
- `levels/level_001/{decoration,interactive,map}.txt`: the tile grids.

Each line of a grid file is one row of tiles. Every tile is written as a
three-character number. `1`–`13` are ground tiles and `101`–`161` are building
tiles. Any other value is drawn as empty space. In the `map` grid every non-zero
tile is solid for the player.

If an image or grid file is missing, the error is logged and that layer stays
empty. A missing tile image stops the drawing of the rest of that grid.

## Controls

| Key            | Action                                              |
|----------------|-----------------------------------------------------|
| Left / Right   | walk (both together: walk on in the last direction) |
| Left Shift     | run three times as fast while walking               |
| Up             | jump, when standing on ground                       |
| E              | guard; moving while guarding is slowed to a third   |
| Z / X / C      | the three attacks; moving while attacking is halved |
| O              | hurt animation                                      |
| P              | death animation                                     |
| Q              | quit                                                |

Hitboxes are drawn as outlines. Red is the body, grey is the sprite bounds and
blue is the reach of the current attack. The camera follows the player.

## Using the pieces

The building blocks can also be used on their own:

- `samuraigame.vectors`: `I2V` and `F2V` vector types, `Ray` and `RaycastHit`.
- `samuraigame.camera.Camera`: converts world boxes to screen rectangles with
  zoom (`apply`, `viewport`, `center_on`).
- `samuraigame.physics.aabb_cast`: per-axis box collision for a moving box.
  It returns a `RaycastHit` whose normal marks the colliding axes, or `None`.
- `samuraigame.layer.parse_grid` and `level_directory`: read level grids and
  find level folders.
- `samuraigame.texture_manager`: `load_texture`, `load_cut_texture` and
  `load_textures_by_name`. Failures raise `TextureLoadError`, except in
  `load_textures_by_name`, which leaves `None` in the slot of a missing image.
- `samuraigame.map_textures.MapTextures`: the shared tile-texture store.
- `samuraigame.entity`, `samuraigame.player`, `samuraigame.level`,
  `samuraigame.game`: the animated entity, the player, levels and the game loop.
  `Game` can be used as a context manager.

```python
from samuraigame.camera import Camera
from samuraigame.vectors import F2V, I2V

camera = Camera(I2V(0, 0), I2V(720, 450), 0.6)
camera.center_on(F2V(500.0, 300.0))
print(camera.apply(F2V(500.0, 300.0), F2V(64.0, 64.0)))
```

## What it does not do

- Only level 1 is loaded, and there is no way to move to another level.
- There are no enemies. Attacks set a weapon hitbox, but it is only drawn, and
  the player's health is never changed.
- The audio mixer is opened, but no sounds or music are played.
- Background images do not scroll. Each one is stretched to fill the window.
- Guarding plays its animation and slows movement, but it sets no guard hitbox.
- The jumping animation is never chosen automatically.