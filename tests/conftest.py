# tests/conftest.py
import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cmdmenus.rendering import MenuRenderer  # noqa: E402


class ScriptedInput:
    """Input source replaying canned lines, then raising EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("no more scripted input")
        return self.lines.pop(0)


class Terminal:
    """A renderer wired to a string buffer and scripted input."""

    def __init__(self, *lines: str):
        self.buffer = io.StringIO()
        self.reader = ScriptedInput(lines)
        self.renderer = MenuRenderer(
            console=Console(file=self.buffer, width=120, color_system=None),
            read_line=self.reader,
        )

    @property
    def output(self) -> str:
        return self.buffer.getvalue()

    @property
    def reads(self) -> int:
        return len(self.reader.prompts)


@pytest.fixture
def terminal():
    """Factory: ``terminal("a", "q")`` answers the first two prompts."""
    return Terminal
