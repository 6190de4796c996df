"""Generation of a rust-project.json file for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The content of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def add_path(self, path: str) -> None:
        """Add a crate for ``path`` if its extension is exactly ``rs``."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below ``root``."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the toolchain and derive the library source path."""
        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        ).stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )