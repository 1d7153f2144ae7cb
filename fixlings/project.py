"""Generation of rust-project.json for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json and how to build them."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "rust-project.json") -> None:
        """Write the project as compact JSON."""
        data = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_bytes(data.encode("utf-8"))

    def path_to_json(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if it has a .rs extension."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below root."""
        for path in sorted(Path(root).rglob("*")):
            self.path_to_json(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources of the default toolchain."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        output = result.stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )