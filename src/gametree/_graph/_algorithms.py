"""Graph algorithms for relation maps."""

from collections.abc import Mapping, Sequence

from gametree._errors import MultipleRootsError, NoRootError


def find_roots(relations: Mapping[str, Sequence[str]]) -> list[str]:
    """Find nodes that appear as a parent but never as a child.

    Args:
        relations: Mapping from node name to its ordered child names.

    Returns:
        Root names in the insertion order of `relations`.

    Example:
        >>> find_roots({"A": ["B"], "C": ["D"], "B": []})
        ['A', 'C']

    """
    child_nodes = {child for children in relations.values() for child in children}
    return [node for node in relations if node not in child_nodes]


def resolve_root(relations: Mapping[str, Sequence[str]]) -> str:
    """Return the unique root of a relation map.

    Raises:
        NoRootError: If every parent also appears as a child.
        MultipleRootsError: If more than one root exists.

    """
    roots = find_roots(relations)
    if not roots:
        raise NoRootError
    if len(roots) > 1:
        raise MultipleRootsError(roots)
    return roots[0]


def has_cycle(start: str, relations: Mapping[str, Sequence[str]]) -> bool:
    """Check whether a directed cycle is reachable from `start`.

    A node is on the current path from entry until all of its children are
    explored, so a node reached twice through different branches (a diamond)
    is not a cycle. Names missing from `relations` have no children.

    Args:
        start: Node to start the depth-first walk from.
        relations: Mapping from node name to its ordered child names.

    Returns:
        True if some node reachable from `start` can reach itself.

    Example:
        >>> has_cycle("A", {"A": ["B", "C"], "B": ["D"], "C": ["D"]})
        False
        >>> has_cycle("A", {"A": ["B"], "B": ["A"]})
        True

    """
    on_path: set[str] = set()
    # Nodes whose whole subgraph is known to be acyclic
    finished: set[str] = set()

    def visit(node: str) -> bool:
        if node in on_path:
            return True
        if node in finished:
            return False
        on_path.add(node)
        for child in relations.get(node, ()):
            if visit(child):
                return True
        on_path.remove(node)
        finished.add(node)
        return False

    return visit(start)
