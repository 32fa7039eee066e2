"""Immutable parent -> children relation graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._algorithms import find_roots, has_cycle, resolve_root

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@dataclass(frozen=True, slots=True)
class RelationGraph:
    """A directed graph of parent -> ordered children relations.

    This is a pure, immutable data structure with query methods. Child lists
    keep their declared order, duplicates and self-references, so that cycle
    detection (not deduplication) is what rejects malformed input.

    Attributes:
        _children: Mapping from parent name to its ordered child names.

    """

    _children: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_relations(cls, relations: Mapping[str, Sequence[str]]) -> RelationGraph:
        """Build a graph from a mapping of parent name to child names.

        Example:
            >>> graph = RelationGraph.from_relations({"A": ["B", "C"]})
            >>> graph.children("A")
            ('B', 'C')

        """
        return cls(_children={parent: tuple(children) for parent, children in relations.items()})

    @property
    def parents(self) -> tuple[str, ...]:
        """Names declared with a child list, in declaration order."""
        return tuple(self._children)

    @property
    def nodes(self) -> frozenset[str]:
        """All names appearing as a parent or as a child."""
        return frozenset(self._children) | frozenset(
            child for children in self._children.values() for child in children
        )

    def children(self, node: str) -> tuple[str, ...]:
        """Get the ordered children of a node (empty for undeclared names)."""
        return self._children.get(node, ())

    def roots(self) -> tuple[str, ...]:
        """Get parents that never appear as a child, in declaration order."""
        return tuple(find_roots(self._children))

    def root(self) -> str:
        """Get the unique root.

        Raises:
            NoRootError: If there is no root.
            MultipleRootsError: If there is more than one root.

        """
        return resolve_root(self._children)

    def has_cycle(self, start: str) -> bool:
        """Check if a directed cycle is reachable from `start`."""
        return has_cycle(start, self._children)

    def descendants(self, node: str) -> frozenset[str]:
        """Get all names transitively reachable from a node.

        Args:
            node: The node to query.

        Returns:
            Set of reachable names, excluding `node` unless it lies on a cycle.

        """
        visited: set[str] = set()
        stack = list(self.children(node))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.children(current))
        return frozenset(visited)

    def leaves(self) -> frozenset[str]:
        """Get names without children."""
        return frozenset(n for n in self.nodes if not self._children.get(n))

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self.nodes)

    def __contains__(self, node: str) -> bool:
        """Check if a name appears anywhere in the graph."""
        return node in self.nodes
