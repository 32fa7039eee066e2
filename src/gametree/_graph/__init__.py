"""Graph module providing relation graph abstractions.

This module contains:
- RelationGraph: An immutable, ordered view of parent -> children relations
- find_roots / resolve_root: Locating the unique root of a relation map
- has_cycle: Depth-first detection of a directed cycle reachable from a node
"""

from ._algorithms import find_roots, has_cycle, resolve_root
from ._relation_graph import RelationGraph

__all__ = ["RelationGraph", "find_roots", "has_cycle", "resolve_root"]
