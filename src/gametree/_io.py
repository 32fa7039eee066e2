"""Loading game tree descriptions from text.

Each non-empty line that does not start with `#` is a directive:

- `name=value` assigns an integer value to a leaf.
- `name: [child1, child2]` (brackets optional) declares the ordered children
  of a node. An empty list declares a node without children.

A line containing both `=` and `:` is applied as both directives.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from ._errors import FileAccessError, MalformedInputError, OutOfRangeLeafError

logger = logging.getLogger(__name__)

INPUT_FILENAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+\.txt")

_CHILD_LIST_JUNK = re.compile(r"[\s\[\]]")


@dataclass(frozen=True, slots=True)
class GameTreeInput:
    """Relations and leaf values parsed from a game tree description.

    Attributes:
        relations: Mapping from node name to ordered child names, in the
            order the parents were first declared.
        variables: Mapping from node name to leaf value.

    """

    relations: dict[str, list[str]] = field(default_factory=dict)
    variables: dict[str, int] = field(default_factory=dict)


def _parse_assignment(line: str, line_number: int) -> tuple[str, int]:
    parts = [part.strip() for part in line.split("=")]
    if len(parts) < 2 or not parts[0] or not parts[1]:  # noqa: PLR2004
        msg = f"Expected 'name=value', got {line!r}"
        raise MalformedInputError(msg, line_number)
    name, raw_value = parts[0], parts[1]
    try:
        value = int(raw_value)
    except ValueError as e:
        msg = f"Leaf value for {name!r} is not an integer: {raw_value!r}"
        raise MalformedInputError(msg, line_number) from e
    return name, value


def _parse_relation(line: str, line_number: int) -> tuple[str, list[str]]:
    parts = line.split(":")
    parent = parts[0].strip()
    if not parent:
        msg = f"Expected 'name: [children]', got {line!r}"
        raise MalformedInputError(msg, line_number)
    raw_children = parts[1] if len(parts) > 1 else ""
    children = [child for child in _CHILD_LIST_JUNK.sub("", raw_children).split(",") if child]
    return parent, children


def parse_game_tree(text: str, *, bound: int | None = None) -> GameTreeInput:
    """Parse a game tree description.

    Args:
        text: The file contents.
        bound: If given, every leaf value must satisfy `|value| <= bound`.

    Returns:
        The parsed relation and variable maps.

    Raises:
        MalformedInputError: If a directive cannot be parsed.
        OutOfRangeLeafError: If a leaf value lies outside `[-bound, bound]`.

    Example:
        >>> parse_game_tree("A: [B, C]\\nB=3\\nC=5")
        GameTreeInput(relations={'A': ['B', 'C']}, variables={'B': 3, 'C': 5})

    """
    result = GameTreeInput()

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" in line:
            name, value = _parse_assignment(line, line_number)
            if bound is not None and abs(value) > abs(bound):
                raise OutOfRangeLeafError(name, value, abs(bound))
            if name in result.variables:
                logger.debug("Line %d: reassigning %s", line_number, name)
            result.variables[name] = value

        if ":" in line:
            parent, children = _parse_relation(line, line_number)
            if parent in result.relations:
                logger.debug("Line %d: redeclaring children of %s", line_number, parent)
            result.relations[parent] = children

    logger.debug("Parsed %d relations and %d leaf values", len(result.relations), len(result.variables))
    return result


def load_game_tree(path: Path, *, bound: int | None = None) -> GameTreeInput:
    """Read and parse a game tree description file.

    Raises:
        FileAccessError: If the file does not exist or cannot be read.

    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(path) from e
    logger.debug("Loaded %s", path)
    return parse_game_tree(text, bound=bound)
