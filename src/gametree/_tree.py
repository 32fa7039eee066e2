"""In-memory game tree built from relation and variable maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the game tree.

    Represents either a leaf or an inner node with children. A leaf normally
    carries `leaf_value`; a leaf without one is only an error if the search
    reaches it. Every node is owned by exactly one parent, so a name that is
    reachable along two paths appears as two separate subtrees.

    Attributes:
        name: The node name from the input.
        children: Tuple of child nodes in declared order (empty for leaves).
        leaf_value: The assigned value, or None if the name was never assigned.

    """

    name: str
    children: tuple[TreeNode, ...] = ()
    leaf_value: int | None = None

    @property
    def is_leaf(self) -> bool:
        """Check if this is a leaf node (has no children)."""
        return len(self.children) == 0

    def iter_leaves(self) -> Generator[TreeNode]:
        """Iterate over all leaf nodes in this subtree, left to right.

        Yields:
            TreeNode instances that have no children.

        """
        if self.is_leaf:
            yield self
        else:
            for child in self.children:
                yield from child.iter_leaves()

    def get_child(self, name: str) -> TreeNode | None:
        """Get the first direct child with the given name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    @property
    def depth(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        if self.is_leaf:
            return 0
        return 1 + max(child.depth for child in self.children)

    def __len__(self) -> int:
        """Return the number of nodes in this subtree."""
        return 1 + sum(len(child) for child in self.children)


def build_tree(
    root: str,
    relations: Mapping[str, Sequence[str]],
    variables: Mapping[str, int],
) -> TreeNode:
    """Recursively materialize the subtree under `root`.

    The relation map must already be known to be acyclic from `root`.

    Args:
        root: Name of the node to build.
        relations: Mapping from node name to ordered child names.
        variables: Mapping from node name to leaf value.

    Returns:
        The TreeNode for `root` with all descendants attached.

    """
    children = tuple(build_tree(child, relations, variables) for child in relations.get(root, ()))
    leaf_value = variables.get(root)
    if not children and leaf_value is None:
        logger.debug("Leaf %s has no value yet", root)
    return TreeNode(name=root, children=children, leaf_value=leaf_value)
