"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real files under tmp_path for anything that walks or deletes
- In-memory fakes for the capability protocols when call order matters
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path so tests can import nozombie package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# === SAMPLE SOURCES ===

FOO_SOURCE = """import React from 'react';

export default function Foo() {
  return <div className="foo">Foo</div>;
}
"""

BAR_SOURCE = """import React from 'react';
import Foo from './Foo';

const Bar = () => (
  <section>
    <Foo />
  </section>
);

export default Bar;
"""

UTIL_SOURCE = """export const add = (a, b) => a + b;
"""


# === CAPABILITY FAKES ===


class FakeFileSystem:
    """In-memory FileSystem: ``files`` maps path -> text, directories are implied."""

    def __init__(self, files: dict[str, str], fail_on: dict[str, OSError] | None = None):
        self.files = dict(files)
        self.fail_on = fail_on or {}
        self.reads: list[str] = []
        self.deleted: list[str] = []

    def _check(self, path: str) -> None:
        if path in self.fail_on:
            raise self.fail_on[path]

    def list_entries(self, directory: str) -> list[str]:
        self._check(directory)
        prefix = directory.rstrip("/") + "/"
        names = {path[len(prefix) :].split("/")[0] for path in self.files if path.startswith(prefix)}
        return sorted(names)

    def is_directory(self, path: str) -> bool:
        prefix = path.rstrip("/") + "/"
        return any(p.startswith(prefix) for p in self.files)

    def read_text(self, path: str) -> str:
        self._check(path)
        self.reads.append(path)
        return self.files[path]

    def delete_file(self, path: str) -> None:
        self._check(path)
        del self.files[path]
        self.deleted.append(path)


class ScriptedConfirmer:
    """Confirmer answering from a fixed list, recording every question."""

    def __init__(self, answers: list[bool]):
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, message: str) -> bool:
        self.questions.append(message)
        return self.answers.pop(0)


class RecordingProgress:
    """ProgressReporter that records calls as (kind, text) tuples."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def start(self, text: str) -> None:
        self.events.append(("start", text))

    def stop(self) -> None:
        self.events.append(("stop", ""))

    def log(self, text: str) -> None:
        self.events.append(("log", text))


# === FIXTURES ===


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to ``tmp_path/relative``, creating parent directories."""

    def _write(relative: str, content: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def react_project(tmp_path: Path, write_file) -> Path:
    """
    Small project tree:

        src/Foo.tsx            used by Bar
        src/Bar.tsx            unused
        src/utils.ts           no component
        node_modules/lib/Lib.jsx  vendored, unused
    """
    write_file("src/Foo.tsx", FOO_SOURCE)
    write_file("src/Bar.tsx", BAR_SOURCE)
    write_file("src/utils.ts", UTIL_SOURCE)
    write_file("node_modules/lib/Lib.jsx", "export default function Lib() {\n  return <span />;\n}\n")
    return tmp_path


@pytest.fixture
def make_component():
    """Factory for in-memory Components (default path /project/<name>.tsx)."""
    from nozombie.helpers.dto.component_dto import Component

    def _make(name: str, content: str = "", path: str | None = None) -> Component:
        return Component(name=name, path=path or f"/project/{name}.tsx", content=content)

    return _make


@pytest.fixture
def fake_fs():
    """Factory for FakeFileSystem instances."""
    return FakeFileSystem


@pytest.fixture
def confirmer():
    """Factory for ScriptedConfirmer instances."""
    return ScriptedConfirmer


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
