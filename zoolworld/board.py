"""The game board: map validation, movement rules and chest collection.

A map is a rectangle of single-character cells:

* ``1`` wall
* ``0`` floor
* ``P`` the player's starting cell (floor once the player has left it)
* ``E`` the exit, closed until every chest has been opened
* ``C`` a closed chest holding a collectible
* ``c`` a chest that has already been opened

Every move returns a :class:`Step` listing what has to be redrawn and where.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
CHEST = "C"
OPENED = "c"

Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map is malformed or breaks the rules of the game."""


class Sprite(Enum):
    """The images a board asks to have drawn."""

    BACKGROUND = "background"
    WALL = "wall"
    CHEST_CLOSED = "chest_closed"
    CHEST_OPEN = "chest_open"
    DOOR_CLOSED = "door_closed"
    DOOR_OPEN = "door_open"
    PLAYER_UP = "player_up"
    PLAYER_DOWN = "player_down"
    PLAYER_LEFT = "player_left"
    PLAYER_RIGHT = "player_right"
    PLAYER_IN_CHEST_UP = "player_in_chest_up"
    PLAYER_IN_CHEST_DOWN = "player_in_chest_down"
    PLAYER_IN_CHEST_LEFT = "player_in_chest_left"
    PLAYER_IN_CHEST_RIGHT = "player_in_chest_right"
    PLAYER_IN_EMPTY_CHEST_UP = "player_in_empty_chest_up"
    PLAYER_IN_EMPTY_CHEST_DOWN = "player_in_empty_chest_down"
    PLAYER_IN_EMPTY_CHEST_LEFT = "player_in_empty_chest_left"
    PLAYER_IN_EMPTY_CHEST_RIGHT = "player_in_empty_chest_right"


class Direction(Enum):
    """A direction of movement, valued by the key that triggers it."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"

    @property
    def delta(self) -> Position:
        """Row and column offsets of one step in this direction."""
        return _DELTAS[self]

    @property
    def player_sprite(self) -> Sprite:
        """The player facing this direction."""
        return _PLAYER_SPRITES[self]

    @property
    def chest_sprite(self) -> Sprite:
        """The player opening a full chest while moving this way."""
        return _CHEST_SPRITES[self]

    @property
    def empty_chest_sprite(self) -> Sprite:
        """The player standing in an already opened chest, having moved this way."""
        return _EMPTY_CHEST_SPRITES[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_PLAYER_SPRITES = {
    Direction.UP: Sprite.PLAYER_UP,
    Direction.DOWN: Sprite.PLAYER_DOWN,
    Direction.LEFT: Sprite.PLAYER_LEFT,
    Direction.RIGHT: Sprite.PLAYER_RIGHT,
}

_CHEST_SPRITES = {
    Direction.UP: Sprite.PLAYER_IN_CHEST_UP,
    Direction.DOWN: Sprite.PLAYER_IN_CHEST_DOWN,
    Direction.LEFT: Sprite.PLAYER_IN_CHEST_LEFT,
    Direction.RIGHT: Sprite.PLAYER_IN_CHEST_RIGHT,
}

_EMPTY_CHEST_SPRITES = {
    Direction.UP: Sprite.PLAYER_IN_EMPTY_CHEST_UP,
    Direction.DOWN: Sprite.PLAYER_IN_EMPTY_CHEST_DOWN,
    Direction.LEFT: Sprite.PLAYER_IN_EMPTY_CHEST_LEFT,
    Direction.RIGHT: Sprite.PLAYER_IN_EMPTY_CHEST_RIGHT,
}


class Outcome(Enum):
    """What an attempted move leads to."""

    MOVED = 0
    BLOCKED = 1
    COLLECT = 2
    LEAVE_CHEST = 3
    EMPTY_CHEST = 4
    EXIT = 5


@dataclass(frozen=True)
class Step:
    """The result of a move: its outcome, the cells to redraw and the player's position."""

    outcome: Outcome
    draws: tuple[tuple[Sprite, Position], ...]
    position: Position


@dataclass
class Board:
    """A rectangular map together with the player's position and the chests left."""

    grid: list[list[str]]
    player: Position = field(default=(0, 0), init=False)
    exit: Position = field(default=(0, 0), init=False)
    remaining: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not self.grid or not self.grid[0]:
            raise MapError("map is empty")
        width = len(self.grid[0])
        if any(len(row) != width for row in self.grid):
            raise MapError("map is not rectangular")

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build and validate a board from lines of text."""
        board = cls([list(row.rstrip("\n")) for row in rows])
        board.validate()
        return board

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def rows(self) -> list[str]:
        """The current map as lines of text."""
        return ["".join(row) for row in self.grid]

    def validate(self) -> None:
        """Check the map's rules and set the starting player position and chest count.

        The map must be closed by walls and hold exactly one player, exactly
        one exit and at least one chest.
        """
        last_row, last_col = self.height - 1, self.width - 1
        players: list[Position] = []
        exits: list[Position] = []
        chests = 0
        for r, row in enumerate(self.grid):
            for c, ch in enumerate(row):
                if r in (0, last_row) or c in (0, last_col):
                    if ch != WALL:
                        raise MapError(
                            f"map is not closed by walls at row {r}, column {c}"
                        )
                elif ch == PLAYER:
                    players.append((r, c))
                elif ch == EXIT:
                    exits.append((r, c))
                elif ch == CHEST:
                    chests += 1
        if len(players) != 1:
            raise MapError(f"map needs exactly one player, found {len(players)}")
        if len(exits) != 1:
            raise MapError(f"map needs exactly one exit, found {len(exits)}")
        if chests < 1:
            raise MapError("map needs at least one chest")
        self.player = players[0]
        self.exit = exits[0]
        self.remaining = chests

    def cell(self, row: int, col: int) -> str:
        """The character at a cell."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the map")
        return self.grid[row][col]

    def _target(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        row, col = self.player
        return row + dr, col + dc

    def probe(self, direction: Direction) -> Outcome:
        """What moving the player in direction would lead to, without moving."""
        here = self.cell(*self.player)
        there = self.cell(*self._target(direction))
        if there == WALL or (there == EXIT and self.remaining > 0):
            return Outcome.BLOCKED
        if there == EXIT:
            return Outcome.EXIT
        if there == OPENED:
            return Outcome.EMPTY_CHEST
        if there == CHEST:
            return Outcome.COLLECT
        if here == OPENED:
            return Outcome.LEAVE_CHEST
        return Outcome.MOVED

    def move(self, direction: Direction) -> Step:
        """Move the player one cell in direction where the rules allow it.

        A blocked move or a move onto the open exit leaves the player where
        they are and asks for nothing to be drawn.
        """
        outcome = self.probe(direction)
        origin = self.player
        if outcome in (Outcome.BLOCKED, Outcome.EXIT):
            return Step(outcome, (), origin)

        target = self._target(direction)
        here = self.cell(*origin)
        draws: list[tuple[Sprite, Position]] = []
        if outcome is Outcome.MOVED:
            draws.append((Sprite.BACKGROUND, origin))
            sprite = direction.player_sprite
        elif outcome is Outcome.LEAVE_CHEST:
            draws.append((Sprite.CHEST_OPEN, origin))
            sprite = direction.player_sprite
        else:
            behind = Sprite.BACKGROUND if here in (FLOOR, PLAYER) else Sprite.CHEST_OPEN
            draws.append((behind, origin))
            sprite = (
                direction.chest_sprite
                if outcome is Outcome.COLLECT
                else direction.empty_chest_sprite
            )

        self.player = target
        draws.append((sprite, target))

        if outcome is Outcome.COLLECT:
            row, col = target
            self.grid[row][col] = OPENED
            self.remaining -= 1
            if self.remaining == 0:
                draws.append((Sprite.DOOR_OPEN, self.exit))

        return Step(outcome, tuple(draws), target)