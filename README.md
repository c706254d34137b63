# shotter

A small vertical space shooter built on pygame. Fly your ship around the
screen, shoot the insects that drop in from above, dodge their aimed fire and
pick up the bonus lives they sometimes leave behind. When you run out of
health, type your name to enter the high-score table.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
shotter
```

The same entry point can be started with `python -m shotter.app`.

Options:

| Option          | Default            | Meaning                                                  |
|-----------------|--------------------|----------------------------------------------------------|
| `--fps N`       | `60`               | Frames per second; must be a positive integer            |
| `--save PATH`   | `assets/save.dat`  | High-score file; assets are read from its directory      |

With the defaults, start the game from the directory that holds the `assets/`
folder. Images, sounds, music and fonts are looked up below the directory of
the save file, for example `assets/image/SpaceShip.png`,
`assets/sound/laser_shoot4.wav`, `assets/music/06_Battle_in_Space_Intro.ogg`
and `assets/font/VonwaonBitmap-16px.ttf`.

### Controls

| Key                 | Action                                    |
|---------------------|-------------------------------------------|
| Arrow keys / WASD   | Move the ship                             |
| J                   | Fire; start a game from the title screen  |
| Esc                 | Back to the title screen during play      |
| F4                  | Toggle full screen                        |
| Enter / Esc         | Confirm your name on the game-over screen |
| Backspace           | Delete the last character of your name    |

On the game-over screen, after your name is recorded the high-score table is
shown; press J or Esc to play again. An empty name is recorded as `匿名玩家`.
The on-screen texts are in Chinese.

### Rules

- You start with 3 health points and can hold at most 3.
- Your shots fire at most once every 100 ms; each does one point of damage.
- Each enemy takes two hits and is worth 10 points. Enemies fire at your ship
  every two seconds.
- A destroyed enemy drops a bonus life half of the time. Collecting one is
  worth 5 points and restores a health point. Bonuses bounce off the screen
  edges up to three times before drifting away.
- Colliding with an enemy destroys it and costs you one health point.
- Two seconds after your ship explodes the game-over screen appears.

### High scores

The best eight scores are kept in the save file (`assets/save.dat` by
default), one `score name` pair per line, highest first; equal scores keep the
order they were entered in. The file is read when the game starts and written
when it exits. A missing save file simply starts an empty table.

## Using the pieces

The game logic runs without a window, which makes it easy to script or test:

- `shotter.world.World(width, height, templates, rng, play_sound)` holds the
  play field: the player, enemies, projectiles, explosions and items. Advance
  it with `World.update(delta_time, now, controls)`, where `controls` is a
  `shotter.world.Controls` holding the keys pressed and `now` is the time in
  milliseconds. `World.finished()` tells when the round is over, and
  `World.score` holds the points. Entities are copied from the prototypes in
  a `shotter.world.Templates`; `rng` is anything with a `random()` method and
  `play_sound(name, channel)` is called for each sound effect.
- `shotter.leaderboard.LeaderBoard(capacity)` is the bounded high-score table
  with `insert(score, name)`, `save(path)` and `load(path)`; iterating it
  yields `Entry(score, name)` tuples, highest score first.
- `shotter.objects` holds the entity dataclasses (`Player`, `Enemy`,
  `ProjectilePlayer`, `ProjectileEnemy`, `Explosion`, `Item`, `Background`),
  the `ItemType` enum, and the `bounds` and `rects_intersect` helpers used for
  collision checks.
- `shotter.game.Game` owns the window, the main loop and the scenes
  (`shotter.scene_title.SceneTitle`, `shotter.scene_main.SceneMain`,
  `shotter.scene_end.SceneEnd`, all built on `shotter.scene.Scene`).

## What is not included

The package ships no images, sounds, music or fonts. They must be supplied in
the asset directory described above. A sound, music track or in-game image
that cannot be loaded is logged and left out, but if the window cannot be
opened or the star backgrounds or the main font cannot be loaded, the game
logs the error and stops at once.