from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import CyclicGraphError
from ._eval_engine import evaluate_tree
from ._graph import RelationGraph
from ._tree import build_tree

if TYPE_CHECKING:
    from ._config import EvaluationConfig
    from ._eval_engine import EvaluationResult
    from ._io import GameTreeInput
    from ._tree import TreeNode

logger = logging.getLogger(__name__)


def prepare_game_tree(game_input: GameTreeInput) -> TreeNode:
    """Resolve the root, reject cycles and build the tree.

    Raises:
        NoRootError: If the relations have no root.
        MultipleRootsError: If the relations have more than one root.
        CyclicGraphError: If a cycle is reachable from the root.

    """
    graph = RelationGraph.from_relations(game_input.relations)
    root = graph.root()
    logger.debug(f"Found root: {root}")

    if graph.has_cycle(root):
        raise CyclicGraphError(root)

    unreachable = graph.nodes - graph.descendants(root) - {root}
    if unreachable:
        logger.debug(f"Ignoring {len(unreachable)} node(s) unreachable from {root}: {sorted(unreachable)}")

    tree = build_tree(root, game_input.relations, game_input.variables)
    logger.debug(f"Built tree with {len(tree)} nodes, depth {tree.depth}")
    # Only an error if the search reaches them
    unvalued = [leaf.name for leaf in tree.iter_leaves() if leaf.leaf_value is None]
    if unvalued:
        logger.debug(f"Leaves without a value: {unvalued}")
    return tree


def evaluate_game_tree(game_input: GameTreeInput, config: EvaluationConfig) -> EvaluationResult:
    """Validate the relations, build the tree and evaluate it.

    Raises:
        NoRootError: If the relations have no root.
        MultipleRootsError: If the relations have more than one root.
        CyclicGraphError: If a cycle is reachable from the root.
        MissingLeafValueError: If the search reaches a leaf without a value.

    """
    return evaluate_tree(prepare_game_tree(game_input), config)
