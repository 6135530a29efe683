# mazechase

A small tile-map maze game. A player walks around a walled board, picks up
every collectible, keeps away from the mobs that chase them and leaves
through the exit. Moves are counted as it goes.

## Maps

A map is a plain text file. Every line must be the same length and no line
may be empty. A map is at least 3×3 tiles and at most 30 tiles wide and 16
tiles high. These characters are allowed:

| Char | Meaning                     |
|------|-----------------------------|
| `1`  | wall                        |
| `0`  | floor                       |
| `P`  | player start (exactly one)  |
| `E`  | exit (exactly one)          |
| `C`  | collectible (at least one)  |
| `X`  | mob (at least one)          |

The whole border must be wall, and every collectible, every mob and the exit
must be reachable from the player's start by steps up, down, left and right.
A map that breaks a rule is rejected with a `MapError` whose message says
which rule.

```
1111111111
1P0C0000E1
10X0001111
1111111111
```

## Playing from the command line

```
mazechase path/to/level.ber
```

The command takes exactly one argument, a file name ending in `.ber`.
It prints the board (mobs shown as `X`) and then reads moves from standard
input as whitespace-separated words:

- `w`, `a`, `s`, `d` or `up`, `left`, `down`, `right` move the player
  (case does not matter);
- `esc` or `escape` quits;
- any other word does nothing but still lets time pass.

After each successful move it prints `Moves: N`. After every word, each mob
takes one step: towards the player's row if the cell that way is open,
otherwise sideways, turning round at walls. The game ends when the player
steps on the exit with every collectible taken (`You won in N moves!`), when
a mob steps onto the player (`You were caught!`), or on quit or end of input
(`Game closed.`). The result is printed between lines of stars and the
command exits with status 0. Bad arguments or a bad map print `Error:`
followed by the reason, and the exit status is 1.

The command does not open a window, draw sprites or read the keyboard in real
time; it is played turn by turn through standard input.

## Using it as a library

- `mazechase.board` — `load_board(path)` reads and fully validates a map
  file; `parse_board(text)` and `Board.from_lines(lines)` build a board with
  shape and size checks only, and `check_walls`, `check_content` and
  `check_paths` apply the remaining rules. A `Board` offers `tile`,
  `set_tile`, `positions` and `reachable`; cells are `Position(x, y)` and
  tiles are members of the `Tile` enum.
- `mazechase.game` — `Game(board)` holds the running state. `Game.move`
  takes a `Direction`, `Game.handle_key` takes a keysym or key name, and
  `Game.update_mobs(current_ms)` steps every mob whose interval has passed.
  The end of a game is raised as `GameWon`, `GameLost` or `GameQuit`, all
  subclasses of `GameOver` carrying `moves`. `direction_for_key` maps keys to
  directions and `now_ms` gives the clock in milliseconds.
- `mazechase.render` — `Renderer(game, draw, text)` draws the board through
  the callables you pass: `draw(sprite, x, y)` with a `Sprite` member and
  pixel coordinates, and `text(x, y, color, string)`. It hooks itself to the
  game so that moves, mob steps and the move counter are redrawn.
- `mazechase.xpm` — `xpm_from_file(path)`, `xpm_from_text(text)` and
  `parse_xpm(lines)` decode XPM pixmaps into images; failures raise
  `XpmError`. Colours may be `#RRGGBB` or names; `None` becomes a
  transparent pixel.
- `mazechase.image` — `Image(width, height, bits_per_pixel, byte_order)` is a
  pixel buffer with `set_pixel`, `get_pixel` and `row`.
- `mazechase.colors` — `lookup_color(name)` resolves X11 colour names
  case-insensitively.
- `mazechase.visual` — `mask_shifts` and `good_color` convert 0xRRGGBB
  colours to pixel values for visuals of a given depth and channel masks.

## Tests

```
pip install -e ".[test]"
pytest
```