"""Running a game: loading a map file, handling keys and drawing the board."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .board import (
    CHEST,
    EXIT,
    FLOOR,
    OPENED,
    PLAYER,
    WALL,
    Board,
    Direction,
    MapError,
    Outcome,
    Position,
    Sprite,
    Step,
)
from .lines import read_lines
from .output import printf

PROGRAM = "zoolworld"
MAP_SUFFIX = ".ber"
WINDOW_TITLE = "ZooL WorlD"
DEFAULT_RESOLUTION = 32
ESCAPE_KEYS = frozenset({"Escape", "\x1b"})

CHEST_IMAGES: dict[Sprite, str] = {
    Sprite.CHEST_CLOSED: "img/chest_close.xpm",
    Sprite.CHEST_OPEN: "img/chest_open.xpm",
    Sprite.PLAYER_IN_CHEST_DOWN: "img/chest_open_down.xpm",
    Sprite.PLAYER_IN_CHEST_UP: "img/chest_open_up.xpm",
    Sprite.PLAYER_IN_CHEST_LEFT: "img/chest_open_left.xpm",
    Sprite.PLAYER_IN_CHEST_RIGHT: "img/chest_open_right.xpm",
    Sprite.PLAYER_IN_EMPTY_CHEST_DOWN: "img/chest_open_down_empty.xpm",
    Sprite.PLAYER_IN_EMPTY_CHEST_UP: "img/chest_open_up_empty.xpm",
    Sprite.PLAYER_IN_EMPTY_CHEST_LEFT: "img/chest_open_left_empty.xpm",
    Sprite.PLAYER_IN_EMPTY_CHEST_RIGHT: "img/chest_open_right_empty.xpm",
}

_INITIAL_SPRITES = {
    WALL: Sprite.WALL,
    FLOOR: Sprite.BACKGROUND,
    PLAYER: Sprite.PLAYER_DOWN,
    EXIT: Sprite.DOOR_CLOSED,
    CHEST: Sprite.CHEST_CLOSED,
    OPENED: Sprite.CHEST_OPEN,
}

_GLYPHS = {
    Sprite.BACKGROUND: "0",
    Sprite.WALL: "1",
    Sprite.CHEST_CLOSED: "C",
    Sprite.CHEST_OPEN: "c",
    Sprite.DOOR_CLOSED: "E",
    Sprite.DOOR_OPEN: "O",
    Sprite.PLAYER_UP: "^",
    Sprite.PLAYER_DOWN: "v",
    Sprite.PLAYER_LEFT: "<",
    Sprite.PLAYER_RIGHT: ">",
    Sprite.PLAYER_IN_CHEST_UP: "^",
    Sprite.PLAYER_IN_CHEST_DOWN: "v",
    Sprite.PLAYER_IN_CHEST_LEFT: "<",
    Sprite.PLAYER_IN_CHEST_RIGHT: ">",
    Sprite.PLAYER_IN_EMPTY_CHEST_UP: "^",
    Sprite.PLAYER_IN_EMPTY_CHEST_DOWN: "v",
    Sprite.PLAYER_IN_EMPTY_CHEST_LEFT: "<",
    Sprite.PLAYER_IN_EMPTY_CHEST_RIGHT: ">",
}


class QuitGame(Exception):
    """Raised when the game ends, by the escape key or by reaching the open exit."""


def _read_board(path: str | Path) -> Board:
    """Read a map file into a board without checking the game's rules."""
    name = str(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapError(f"map file must end with {MAP_SUFFIX}: {name}")
    try:
        with open(name, encoding="utf-8") as stream:
            rows = [line.rstrip("\n") for line in read_lines(stream)]
    except OSError as exc:
        raise MapError(f"cannot read map file {name}: {exc}") from exc
    return Board([list(row) for row in rows])


def load_board(path: str | Path) -> Board:
    """Read a ``.ber`` map file and return a validated board."""
    board = _read_board(path)
    board.validate()
    return board


@dataclass
class Game:
    """A board together with what is currently drawn on each of its cells."""

    board: Board
    resolution: int = DEFAULT_RESOLUTION
    canvas: dict[Position, Sprite] = field(init=False)

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        self.canvas = {
            (r, c): _INITIAL_SPRITES.get(ch, Sprite.BACKGROUND)
            for r, row in enumerate(self.board.grid)
            for c, ch in enumerate(row)
        }

    @property
    def window_size(self) -> tuple[int, int]:
        """Width and height of the window in pixels."""
        return self.board.width * self.resolution, self.board.height * self.resolution

    def handle_key(self, key: str) -> Step | None:
        """React to a key press; return the move made, or None for an ignored key.

        Raises QuitGame on the escape key or when the player walks into the open exit.
        """
        if key in ESCAPE_KEYS:
            raise QuitGame("escape pressed")
        try:
            direction = Direction(key)
        except ValueError:
            return None
        step = self.board.move(direction)
        if step.outcome is Outcome.EXIT:
            raise QuitGame("exit reached")
        for sprite, position in step.draws:
            self.canvas[position] = sprite
        return step

    def render(self) -> str:
        """The board as drawn, one text line per row."""
        return "\n".join(
            "".join(_GLYPHS[self.canvas[(r, c)]] for c in range(self.board.width))
            for r in range(self.board.height)
        )


def _play(game: Game) -> None:
    printf("%s\n", game.render())
    for line in sys.stdin:
        text = line.rstrip("\n")
        keys = [text] if text in ESCAPE_KEYS else list(text)
        for key in keys:
            step = game.handle_key(key)
            if step is not None and step.draws:
                printf("%s\n", game.render())


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game from the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\nUsage: %s < file_name > \n", PROGRAM)
        return 1
    try:
        board = _read_board(args[0])
    except MapError:
        printf("Error\nError map\n")
        return 1
    try:
        board.validate()
    except MapError:
        printf("Error\nBad Parsing\n")
        return 1
    game = Game(board)
    try:
        _play(game)
    except QuitGame:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())