"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping

RUSTC_COLOR_ARGS = ["--color", "always"]
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary path unique to this process and thread."""
    thread_id = "".join(c for c in f"ThreadId{threading.get_ident()}" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or binary run."""

    stdout: str
    stderr: str


class ExerciseError(Exception):
    """A step of checking an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


class CompilationFailed(ExerciseError):
    """The exercise did not compile."""


class RunFailed(ExerciseError):
    """The compiled exercise exited with an error."""


def _output(proc: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=proc.stdout.decode("utf-8", errors="replace"),
        stderr=proc.stderr.decode("utf-8", errors="replace"),
    )


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exercise:
        try:
            return cls(
                name=str(data["name"]),
                path=Path(data["path"]),
                mode=Mode(data["mode"]),
                hint=str(data["hint"]),
            )
        except KeyError as exc:
            raise ValueError(f"exercise entry is missing field {exc.args[0]!r}") from exc

    def _clippy_commands(self) -> list[list[str]]:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        return [
            ["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS],
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ],
        ]

    def compile(self) -> CompiledExercise:
        """Compile the exercise, raising CompilationFailed on error."""
        match self.mode:
            case Mode.COMPILE:
                commands = [["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]]
            case Mode.TEST:
                commands = [["rustc", "--test", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]]
            case Mode.CLIPPY:
                commands = self._clippy_commands()
        *preparation, final = commands
        for command in preparation:
            subprocess.run(command, capture_output=True)
        proc = subprocess.run(final, capture_output=True)
        if proc.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationFailed(_output(proc))

    def run(self) -> ExerciseOutput:
        """Run the compiled binary, raising RunFailed on a non-zero exit."""
        command = [temp_file()]
        if self.mode is Mode.TEST:
            command.append("--show-output")
        proc = subprocess.run(command, capture_output=True)
        output = _output(proc)
        if proc.returncode != 0:
            raise RunFailed(output)
        return output

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = source.splitlines()
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        first = max(matched - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[first : matched + CONTEXT + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    entries: Iterable[Mapping[str, Any]] = data.get("exercises", [])
    return [Exercise.from_dict(entry) for entry in entries]