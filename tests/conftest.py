from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from fonts import FontDescriptor


def fake_measure(text: str, descriptor: FontDescriptor) -> float:
    """Half an em per character; bold text is one pixel wider per character."""
    return len(text) * (descriptor.size / 2 + (1 if descriptor.bold else 0))


class RecordingSurface:
    """Stands in for tk.Canvas: records every drawing call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.bindings: dict = {}
        self.idle: list = []
        self._next_id = 0

    def bind(self, sequence: str, callback) -> None:
        self.bindings[sequence] = callback

    def focus_set(self) -> None:
        pass

    def after_idle(self, callback) -> str:
        self.idle.append(callback)
        return f"after#{len(self.idle)}"

    def run_idle(self) -> None:
        pending, self.idle = self.idle, []
        for callback in pending:
            callback()

    def _record(self, name: str, args: tuple, kwargs: dict) -> int:
        self._next_id += 1
        self.calls.append((name, args, kwargs))
        return self._next_id

    def delete(self, *args) -> None:
        self.calls.append(("delete", args, {}))

    def create_text(self, *args, **kwargs) -> int:
        return self._record("text", args, kwargs)

    def create_rectangle(self, *args, **kwargs) -> int:
        return self._record("rectangle", args, kwargs)

    def create_line(self, *args, **kwargs) -> int:
        return self._record("line", args, kwargs)

    def of_kind(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def measure():
    return fake_measure


@pytest.fixture
def surface():
    return RecordingSurface()
