"""Messages as variants and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[ChangeColor, Echo, Move, Quit]


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message {message!r}")