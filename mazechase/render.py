"""Drawing a game through caller-supplied sprite and text callbacks."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from mazechase.board import Position, Tile
from mazechase.game import Direction, Game, Mob

SPRITE_SIZE = 64
COUNTER_PREFIX = "Moves: "
COUNTER_COLOR = 0xFF69B4
COUNTER_X = 70
COUNTER_Y = 80
COUNTER_GAP = 60
COUNTER_CELL = Position(2, 1)


class Sprite(Enum):
    """The textures a game is drawn with."""

    WALL = "wall"
    FLOOR = "floor"
    EXIT = "exit"
    EXIT_OPEN = "exit_open"
    COLLECTIBLE_1 = "collectible_1"
    COLLECTIBLE_2 = "collectible_2"
    COLLECTIBLE_3 = "collectible_3"
    PLAYER_R1 = "player_right_1"
    PLAYER_R2 = "player_right_2"
    PLAYER_L1 = "player_left_1"
    PLAYER_L2 = "player_left_2"
    PLAYER_U1 = "player_up_1"
    PLAYER_U2 = "player_up_2"
    PLAYER_D1 = "player_down_1"
    PLAYER_D2 = "player_down_2"
    MOB1_1 = "mob1_1"
    MOB1_2 = "mob1_2"
    MOB2_1 = "mob2_1"
    MOB2_2 = "mob2_2"
    MOB3_1 = "mob3_1"
    MOB3_2 = "mob3_2"
    MOB4_1 = "mob4_1"
    MOB4_2 = "mob4_2"


_PLAYER = {
    Direction.RIGHT: (Sprite.PLAYER_R1, Sprite.PLAYER_R2),
    Direction.LEFT: (Sprite.PLAYER_L1, Sprite.PLAYER_L2),
    Direction.UP: (Sprite.PLAYER_U1, Sprite.PLAYER_U2),
    Direction.DOWN: (Sprite.PLAYER_D1, Sprite.PLAYER_D2),
}
_MOBS = (
    (Sprite.MOB1_1, Sprite.MOB1_2),
    (Sprite.MOB2_1, Sprite.MOB2_2),
    (Sprite.MOB3_1, Sprite.MOB3_2),
    (Sprite.MOB4_1, Sprite.MOB4_2),
)
_COLLECTIBLES = (Sprite.COLLECTIBLE_1, Sprite.COLLECTIBLE_2, Sprite.COLLECTIBLE_3)

DrawFn = Callable[[Sprite, int, int], None]
TextFn = Callable[[int, int, int, str], None]


class Renderer:
    """Draws a game and keeps the picture current as it changes.

    ``draw(sprite, x, y)`` puts a sprite at pixel coordinates and
    ``text(x, y, color, string)`` writes a string. Creating a renderer
    hooks it to the game's move and enemy listeners.
    """

    def __init__(self, game: Game, draw: DrawFn, text: TextFn, sprite_size: int = SPRITE_SIZE):
        self.game = game
        self.draw = draw
        self.text = text
        self.sprite_size = sprite_size
        self.player_frame = 0
        self.collectible_frame = 0
        game.on_move = self._after_move
        game.on_mob_move = self.render_mob

    def _next_player_frame(self) -> int:
        frame = self.player_frame % 2
        self.player_frame += 1
        return frame

    def _next_collectible(self) -> Sprite:
        sprite = _COLLECTIBLES[self.collectible_frame % len(_COLLECTIBLES)]
        self.collectible_frame += 1
        return sprite

    def put_sprite(self, sprite: Sprite, grid: Position) -> None:
        """Draw ``sprite`` over the board cell ``grid``."""
        self.draw(sprite, grid[0] * self.sprite_size, grid[1] * self.sprite_size)

    def render_map(self) -> None:
        """Draw the whole board, the enemies and the move counter."""
        board = self.game.board
        for y in range(board.height):
            for x in range(board.width):
                pos = Position(x, y)
                tile = board.tile(pos)
                if tile is Tile.WALL:
                    self.put_sprite(Sprite.WALL, pos)
                    continue
                self.put_sprite(Sprite.FLOOR, pos)
                if tile is Tile.PLAYER:
                    self.put_sprite(_PLAYER[Direction.RIGHT][self._next_player_frame()], pos)
                elif tile is Tile.EXIT:
                    self.put_sprite(Sprite.EXIT, pos)
                elif tile is Tile.COLLECTIBLE:
                    self.put_sprite(self._next_collectible(), pos)
        for mob in self.game.mobs:
            self.put_sprite(_MOBS[mob.mob_id][mob.current_frame], mob.pos)
        self.render_counter()

    def render_counter(self) -> None:
        """Write the move counter."""
        self.text(COUNTER_X, COUNTER_Y, COUNTER_COLOR, COUNTER_PREFIX)
        self.text(COUNTER_X + COUNTER_GAP, COUNTER_Y, COUNTER_COLOR, str(self.game.moves))

    def render_move(self, previous: Position, target_tile: Tile, direction: Direction) -> None:
        """Redraw the cells touched by the player's last move."""
        target = self.game.player
        frame = self._next_player_frame()
        self.put_sprite(Sprite.FLOOR, COUNTER_CELL)
        if self.game.board.tile(previous) is Tile.EXIT:
            self.put_sprite(Sprite.EXIT, previous)
        else:
            self.put_sprite(Sprite.FLOOR, previous)
        if target_tile is Tile.COLLECTIBLE:
            self.put_sprite(Sprite.FLOOR, target)
        if target_tile is Tile.EXIT:
            self.put_sprite(Sprite.EXIT_OPEN, target)
        else:
            self.put_sprite(_PLAYER[direction][frame], target)

    def _after_move(self, previous: Position, target_tile: Tile, direction: Direction) -> None:
        self.render_move(previous, target_tile, direction)
        self.render_counter()

    def render_mob(self, mob: Mob) -> None:
        """Redraw an enemy that has moved, advancing its animation frame."""
        if mob.pos == mob.old_pos:
            return
        behind = self.game.board.tile(mob.old_pos)
        mob.current_frame = 1 - mob.current_frame
        if behind is Tile.EXIT:
            self.put_sprite(Sprite.EXIT, mob.old_pos)
        elif behind is Tile.COLLECTIBLE:
            self.put_sprite(self._next_collectible(), mob.old_pos)
        else:
            self.put_sprite(Sprite.FLOOR, mob.old_pos)
        self.put_sprite(_MOBS[mob.mob_id][mob.current_frame], mob.pos)