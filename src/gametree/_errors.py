"""Exception types raised while loading and evaluating a game tree.

Every failure is fatal to the run: there is no partial result. The CLI
catches `GameTreeError` at the top level and prints its message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class GameTreeError(Exception):
    """Base class for all game tree errors."""


class NoRootError(GameTreeError):
    """No node appears as a parent without also appearing as a child."""

    def __init__(self) -> None:
        super().__init__("Invalid input. No root found.")


def format_root_list(roots: Sequence[str]) -> str:
    """Quote root names and join them as `"A", "B" and "C"`.

    Example:
        >>> format_root_list(["A", "B", "C"])
        '"A", "B" and "C"'

    """
    quoted = [f'"{root}"' for root in roots]
    if len(quoted) <= 1:
        return "".join(quoted)
    return ", ".join(quoted[:-1]) + " and " + quoted[-1]


class MultipleRootsError(GameTreeError):
    """More than one node has no incoming reference."""

    def __init__(self, roots: Sequence[str]) -> None:
        self.roots = tuple(roots)
        super().__init__(f"multiple roots: {format_root_list(self.roots)}")


class CyclicGraphError(GameTreeError):
    """A directed cycle is reachable from the root."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__("Invalid input. Tree contains a cycle.")


class OutOfRangeLeafError(GameTreeError):
    """A leaf value lies outside the symmetric `[-bound, bound]` range."""

    def __init__(self, name: str, value: int, bound: int) -> None:
        self.name = name
        self.value = value
        self.bound = bound
        super().__init__(f"Input values are out of range. {name}={value} is outside [-{bound}, {bound}].")


class MissingLeafValueError(GameTreeError):
    """A leaf reached during evaluation has no assigned value."""

    def __init__(self, leaf: str, parent: str | None) -> None:
        self.leaf = leaf
        self.parent = parent
        if parent is None:
            msg = f'root node "{leaf}" has no children and no value'
        else:
            msg = f'child node "{leaf}" of "{parent}" not found'
        super().__init__(msg)


class MalformedInputError(GameTreeError):
    """A directive or argument could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FileAccessError(GameTreeError):
    """The input file could not be read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file does not exist in this directory: {path}")
