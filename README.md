# redsattack

*Attack of the Reds* is a small arcade shooter built on `pygame`. You fly a
ship along the bottom of the screen. Above you a fleet of aliens marches from
side to side. The fleet has three rows of aqua aliens, one row of purple
aliens, one row of red aliens and two flagships. Now and then aliens break
formation and dive at you along sine-wave paths. Red escorts fly down beside
their flagship.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Playing

```
redsattack
```

The title screen offers **[Play]** and **[Quit]**:

- The up and down arrows switch between the two options.
- Space chooses the highlighted option.

During a game:

- The left and right arrows move your ship.
- Space fires. At most three of your shots can be on screen at once.
- An alien hit while diving is worth double points; a diving flagship is worth
  two and a half times its formation value.
- You get one bonus life at 5000 points.
- When a wave is cleared, a warning appears and the next stage begins.
- After you respawn you are invincible for a short time.

When your last life is gone, the score is entered in the high-score table and
the Game Over screen shows the three best scores. Press Space to go back to
the title screen. Closing the window quits at any point.

### Options

```
redsattack --help
```

- `--data-dir DIR` – the directory holding `images/`, `sounds/` and `fonts/`
  (default: the current directory).
- `--scores FILE` – the high-score file (default: `hs.txt`). It holds one score
  per line; if it does not exist the table starts at zero.
- `--width N`, `--height N` – the window size (default 1000 × 700). Formation
  positions are scaled to match.

## Game data

The package does not ship any images, sounds or fonts; they must be supplied
under the data directory:

- `images/galaxian/`: `GalaxianAquaAlien.gif`, `GalaxianPurpleAlien.gif`,
  `GalaxianRedAlien.gif`, `GalaxianFlagship.gif`, `GalaxianGalaxip.gif` and
  `explosion1.gif` … `explosion6.gif`.
- `sounds/`: `laser.wav` and `explosion.wav`, plus the music tracks
  `StarSpangledBanner.wav`, `AmericaFYeah.wav` and `USSR.wav`.
- `fonts/`: `MarsAttacks.ttf`, `Astron.ttf` and `FreeMonoBold.ttf`.

If any of the images or sound effects is missing, `redsattack` prints a message
and exits with status 1. Sounds and music are skipped when no audio device is
available.

## Using it as a library

The game logic runs without a display, so it can be driven and tested directly:

- `redsattack.settings.Settings` holds every dimension, speed and score;
  `Settings.scaled(width, height)` adapts it to another screen size.
- `redsattack.fleet.Formation` and `redsattack.fleet.Fleet` build and run the
  alien formation.
- `redsattack.game.GameSession` advances one frame of play at a time through
  `step(controls)`, taking a `redsattack.game.Controls` and returning the names
  of the sounds to play.
- `redsattack.game.HighScores` loads, records and saves the score table.
- `redsattack.menu.MainMenu` and `redsattack.gameover.GameOverScreen` hold the
  state of the title and game-over screens.