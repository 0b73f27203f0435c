from __future__ import annotations

from typing import Protocol


class Navigator(Protocol):
    def navigate(self, path: str) -> None:
        raise NotImplementedError


class HistoryNavigator(Navigator):
    """Keeps the visited paths; ``location`` is the latest one."""

    def __init__(self, start: str = "/"):
        self.history: list[str] = [start]

    @property
    def location(self) -> str:
        return self.history[-1]

    def navigate(self, path: str) -> None:
        self.history.append(path)
