"""Worked solutions to the exercises, written in Python."""

__all__ = [
    "conditionals",
    "conversions",
    "enums",
    "errors",
    "functions",
    "generics",
    "hashmaps",
    "iterators",
    "lifetimes",
    "options",
    "pointers",
    "quizzes",
    "strings",
    "structs",
    "threads",
    "traits",
    "vecs",
]