"""Compile, run and track the completion of small Rust exercises."""

__version__ = "5.2.1"