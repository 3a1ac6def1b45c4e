#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates / refreshes the source tree used by the
codecollector test-suite.

Idempotent and pure Python. The tests call `populate(root)` on a
temporary directory; running the script builds the same tree under
./test-fixtures for manual inspection.
"""
from __future__ import annotations

import os
import shutil
import sys
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()

# Every *.java file created by `populate`, relative to the root.
JAVA_FILES = (
    "App.java",
    "src/main/Service.java",
    "src/main/util/Strings.java",
    "src/test/ServiceTest.java",
    "unicode dir/Ünicode.java",
    ".Hidden.java",
    ".config/Settings.java",
)


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


# ───────────────────── source files ─────────────────────
def populate(root: Path) -> Path:
    _write(root / "App.java", """
        public class App {

            public static void main(String[] args) {
                new Service().run();
            }
        }
    """)
    _write(root / "src/main/Service.java", """
        class Service {
            \t
            void run() {}
        }
    """)
    _write(root / "src/main/util/Strings.java", "final class Strings {}\n")
    _write(root / "src/test/ServiceTest.java", "class ServiceTest {}")
    _write(root / "unicode dir/Ünicode.java", "// ü\n")
    _write(root / ".Hidden.java", "class Hidden {}\n")
    _write(root / ".config/Settings.java", "class Settings {}\n")

    # Near misses: none of these may be collected with "-e java".
    _write(root / "README.md", "# readme\n")
    _write(root / "src/main/Service.javaextra", "nope\n")
    _write(root / "src/main/Upper.JAVA", "nope\n")
    _write(root / "src/main/java", "nope\n")
    (root / "build/classes.java").mkdir(parents=True, exist_ok=True)

    _write_bytes(root / "legacy/Latin1.java.bak", b"caf\xe9\n")
    _write_bytes(root / "legacy/Crlf.txt", b"one\r\n\r\ntwo\r\n")
    return root


def add_symlinks(root: Path) -> bool:
    """Add a symlinked file and a symlinked directory; False if unsupported."""
    try:
        os.symlink(root / "App.java", root / "Link.java")
        os.symlink(root / "src", root / "linked_src", target_is_directory=True)
    except (OSError, NotImplementedError):
        return False
    return True


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"⚙️  Rebuilding fixture tree → {ROOT}", file=sys.stderr)
    populate(ROOT)
    print("✅  Fixture tree READY", file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    main()
