"""Containers for the common puzzle input shapes.

Most puzzles fall into one of two layouts:
- one item per line (``Lines``)
- groups of lines separated by blank lines (``GroupedLines``)

Both are thin list wrappers so solvers can iterate, index and ``len`` them.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Lines(Generic[T]):
    """A list of items where each item sits on its own line."""

    __slots__ = ("items",)

    def __init__(self, items: List[T]):
        self.items = list(items)

    @classmethod
    def parse(cls, text: str, item: Callable[[str], T]) -> "Lines[T]":
        """Convert every non-empty line with ``item``.

        Lines are stripped first. Errors raised by ``item`` propagate unchanged.
        """
        items = []
        for line in text.splitlines():
            if line.strip():
                items.append(item(line.strip()))
        return cls(items)

    @classmethod
    def of(cls, item: Callable[[str], T]) -> Callable[[str], "Lines[T]"]:
        """Return a text -> Lines parser, handy for ``challenge(parse=...)``."""

        def _parse(text: str) -> "Lines[T]":
            return cls.parse(text, item)

        return _parse

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Lines):
            return self.items == other.items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Lines({self.items!r})"


class GroupedLines:
    """Groups of stripped lines, separated by one or more blank lines."""

    __slots__ = ("groups",)

    def __init__(self, groups: List[List[str]]):
        self.groups = [list(g) for g in groups]

    @classmethod
    def parse(cls, text: str) -> "GroupedLines":
        groups: List[List[str]] = []
        current: List[str] = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                if current:
                    groups.append(current)
                    current = []
                continue
            current.append(line)
        if current:
            groups.append(current)
        return cls(groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __getitem__(self, index) -> List[str]:
        return self.groups[index]

    def __iter__(self) -> Iterator[List[str]]:
        return iter(self.groups)

    def __repr__(self) -> str:
        return f"GroupedLines({self.groups!r})"
