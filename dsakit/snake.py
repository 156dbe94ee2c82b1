"""Console snake game."""

from __future__ import annotations

import argparse
import enum
import os
import random
import select
import sys
import time
from collections.abc import Sequence

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

WIDTH = 80
HEIGHT = 20
FRUIT_POINTS = 10
_CLEAR = "\x1b[2J\x1b[H"

DIFFICULTY_PROMPT = (
    "\nSET DIFFICULTY\n1: Easy\n2: Medium\n3: hard "
    "\nNOTE: if not chosen or pressed any other "
    "key, the difficulty will be automatically set "
    "to medium\nChoose difficulty level: "
)


class Direction(enum.Enum):
    """Where the snake is heading."""

    STOP = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


_KEYS = {
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
}


class SnakeGame:
    """State of one game on a width by height board."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.x = width // 2
        self.y = height // 2
        self.fruit = self._place_fruit()
        self.score = 0
        self.tail: list[tuple[int, int]] = []
        self.tail_length = 0
        self.direction = Direction.STOP
        self.game_over = False

    def _place_fruit(self) -> tuple[int, int]:
        return self._rng.randrange(self.width), self._rng.randrange(self.height)

    def steer(self, key: str) -> None:
        """React to a key: w, a, s, d turn the snake, x ends the game."""
        if key == "x":
            self.game_over = True
        elif key in _KEYS:
            self.direction = _KEYS[key]

    def step(self) -> None:
        """Advance the game by one tick."""
        if self.game_over:
            return
        self.tail = ([(self.x, self.y)] + self.tail)[: self.tail_length]

        if self.direction is Direction.LEFT:
            self.x -= 1
        elif self.direction is Direction.RIGHT:
            self.x += 1
        elif self.direction is Direction.UP:
            self.y -= 1
        elif self.direction is Direction.DOWN:
            self.y += 1

        if not (0 <= self.x < self.width and 0 <= self.y < self.height):
            self.game_over = True
        if (self.x, self.y) in self.tail:
            self.game_over = True

        if (self.x, self.y) == self.fruit:
            self.score += FRUIT_POINTS
            self.fruit = self._place_fruit()
            self.tail_length += 1

    def render(self, player_name: str) -> str:
        """Return the board, walls and score as text."""
        wall = "-" * (self.width + 2)
        tail = set(self.tail)
        lines = [wall]
        for row in range(self.height):
            cells = []
            for col in range(self.width + 1):
                if col in (0, self.width):
                    cells.append("|")
                if (col, row) == (self.x, self.y):
                    cells.append("O")
                elif (col, row) == self.fruit:
                    cells.append("#")
                elif (col, row) in tail:
                    cells.append("o")
                else:
                    cells.append(" ")
            lines.append("".join(cells))
        lines.append(wall)
        lines.append(f"{player_name}'s Score: {self.score}")
        return "\n".join(lines)


def difficulty_delay(choice: str) -> int:
    """Return the delay per tick in milliseconds for a difficulty choice."""
    return {"1": 50, "2": 100, "3": 150}.get(choice.strip(), 100)


class _KeyReader:
    """Reads single key presses from the terminal without blocking."""

    def __enter__(self) -> _KeyReader:
        self._saved = None
        self._fd = None
        if msvcrt is None and termios is not None and sys.stdin.isatty():
            self._fd = sys.stdin.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)

    def read(self) -> str | None:
        if msvcrt is not None:
            return msvcrt.getwch() if msvcrt.kbhit() else None
        ready, _, _ = select.select([sys.stdin], [], [], 0)
        if not ready:
            return None
        data = os.read(sys.stdin.fileno(), 1)
        if not data:
            return "x"
        return data.decode(errors="ignore") or None


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a name and difficulty, then play until the game is over."""
    parser = argparse.ArgumentParser(prog="snake", description="Play snake in the terminal.")
    parser.add_argument("--name", help="player name")
    parser.add_argument("--difficulty", help="1, 2 or 3")
    args = parser.parse_args(argv)

    if args.name:
        name = args.name
    else:
        words = input("enter your name: ").split()
        name = words[0] if words else ""
    choice = args.difficulty if args.difficulty else input(DIFFICULTY_PROMPT)
    delay = difficulty_delay(choice)

    game = SnakeGame()
    with _KeyReader() as keys:
        while not game.game_over:
            sys.stdout.write(_CLEAR + game.render(name) + "\n")
            sys.stdout.flush()
            key = keys.read()
            if key:
                game.steer(key)
            game.step()
            time.sleep(delay / 1000)
    return 0