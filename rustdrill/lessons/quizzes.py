"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


def calculate_price_of_apples(apple_amt: int) -> int:
    """Two per apple, or one each when buying more than 40."""
    return apple_amt if apple_amt > 40 else apple_amt * 2


class CommandKind(Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """An operation applied to a string by ``transformer``."""

    kind: CommandKind
    times: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)


def transformer(commands: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in commands:
        match command.kind:
            case CommandKind.UPPERCASE:
                output.append(text.upper())
            case CommandKind.TRIM:
                output.append(text.strip())
            case CommandKind.APPEND:
                output.append(text + "bar" * command.times)
    return output


@dataclass
class ReportCard:
    """A report card with a grade of any printable kind."""

    grade: Any
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )