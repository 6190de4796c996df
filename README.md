# rustdrill

rustdrill is a Python library for working with small, self-checking Rust
exercises. It reads an exercise list and compiles each exercise with `rustc`
(or checks it with `cargo clippy`). It runs the result and tells whether the
learner has removed the `// I AM NOT DONE` marker from the file. It also
writes a `rust-project.json` file so that rust-analyzer can work with the
exercise files.

The `rustdrill.lessons` package holds worked solutions to many of the
exercises, written in plain Python.

## Requirements

- Python 3.11 or later
- For compiling and running exercises: a Rust toolchain with `rustc` on your
  `PATH`. The clippy exercises also need `cargo`.

## Installation

```
pip install .
```

## The exercise list

An exercise list is a TOML file, usually `info.toml`. Each entry has a name,
a path, a mode and a hint:

```toml
[[exercises]]
name = "quiz1"
path = "exercises/quiz1.rs"
mode = "test"
hint = "No hints this time ;)"
```

The mode sets how an exercise is checked (`rustdrill.exercise.Mode`):

- `compile` (`Mode.COMPILE`): build the file as a binary
- `test` (`Mode.TEST`): build it as a test harness; running it passes `--show-output`
- `clippy` (`Mode.CLIPPY`): write `./exercises/clippy/Cargo.toml`, build the
  file, run `cargo clean`, then run `cargo clippy` with `-D warnings -D clippy::float_cmp`

## Checking exercises

```python
from rustdrill.exercise import CompilationFailed, RunFailed, load_exercises

exercises = load_exercises("info.toml")
exercise = exercises[0]

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompilationFailed as exc:
    print(exc.output.stderr)
except RunFailed as exc:
    print(exc.output.stdout, exc.output.stderr)
```

- `load_exercises(path)` returns a list of `Exercise` objects. An entry that
  lacks a field raises `ValueError`.
- `Exercise.compile()` returns a `CompiledExercise`, or it raises
  `CompilationFailed`. The binary is written to `./temp_<pid>_<thread>` in the
  current directory. It is removed when the `CompiledExercise` is closed,
  either by leaving the `with` block or by calling `close()`.
- `CompiledExercise.run()` returns an `ExerciseOutput` with `stdout` and
  `stderr`. It raises `RunFailed` when the binary exits with a non-zero status.
- Both errors are subclasses of `ExerciseError` and carry the captured output
  as `.output`.

## Completion state

```python
state = exercise.state()
if not state.done():
    for line in state.context:
        marker = ">" if line.important else " "
        print(f"{marker}{line.number:>3} | {line.line}")
```

An exercise counts as unfinished while its file has a line matching
`// I AM NOT DONE` (or `/// I AM NOT DONE`). In that case `state()` returns the
marker line together with up to two lines before and after it, as
`ContextLine` records. The marker line is the one flagged `important`.
`looks_done()` is a shortcut for `state().done()`.

## rust-analyzer support

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # asks `rustc --print sysroot`
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk("./rust-project.json")
```

Every file below the given directory whose name has the extension `rs` after
its first dot becomes a crate. The crate uses edition 2021 and has the `test`
cfg enabled.

## Terminal messages

`rustdrill.ui` prints coloured status lines with rich: `warn(message)` in red
and `success(message)` in green. Each returns the plain text it printed.
`bold(text)` returns a bold `rich.text.Text`. When the `NO_EMOJI` environment
variable is set, these messages use plain symbols (`!`, `✓`) instead of emoji.

## Reference lessons

The modules under `rustdrill.lessons` are `conditionals`, `conversions`,
`enums`, `errors`, `functions`, `generics`, `hashmaps`, `iterators`,
`lifetimes`, `options`, `pointers`, `quizzes`, `strings`, `structs`,
`threads`, `traits` and `vecs`. For example:

```python
from rustdrill.lessons.quizzes import calculate_price_of_apples
from rustdrill.lessons.iterators import factorial

calculate_price_of_apples(41)   # 41
factorial(4)                    # 24
```

## What this package does not do

rustdrill is a library only. It installs no command-line program. It has no
command for verifying all exercises in order, no watch mode that re-checks
exercises when files change, and no commands for running, resetting, hinting
at or listing exercises. To do those things, build them on top of `Exercise`,
`CompiledExercise` and `State`.