[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustdrill"
version = "5.2.1"
description = "A library for checking small Rust exercises: compile, run, track completion markers and generate rust-analyzer project files."
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["rust", "exercises", "learning", "education", "rustc", "clippy", "rust-analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rustdrill"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
