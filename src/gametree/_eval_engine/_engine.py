"""Core minimax evaluation engine for game trees."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gametree._config import PlayerKind
from gametree._errors import MissingLeafValueError

from ._trace import TraceRecord

if TYPE_CHECKING:
    from gametree._config import EvaluationConfig
    from gametree._tree import TreeNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Result of evaluating a game tree.

    Attributes:
        value: The minimax value of the root.
        trace: Decision records in the order the search completed them.
        root: Name of the evaluated root.
        nodes_visited: Number of nodes the search entered, root included.

    """

    value: int
    trace: tuple[TraceRecord, ...] = ()
    root: str = ""
    nodes_visited: int = 0

    @property
    def messages(self) -> list[str]:
        """The trace formatted one line per record."""
        return [record.message for record in self.trace]


@dataclass(frozen=True, slots=True)
class _SearchContext:
    """Fixed inputs of one search plus its output accumulators."""

    root: TreeNode
    config: EvaluationConfig
    trace: list[TraceRecord] = field(default_factory=list)
    visited: list[str] = field(default_factory=list)


def _leaf_value(node: TreeNode, parent: TreeNode | None) -> int:
    if node.leaf_value is None:
        raise MissingLeafValueError(node.name, None if parent is None else parent.name)
    return node.leaf_value


def _improves(value: int, best: float, *, is_max_player: bool) -> bool:
    # Strict comparison keeps the first child on ties
    return value > best if is_max_player else value < best


def _reaches_bound(value: int, bound: float, *, is_max_player: bool) -> bool:
    return value >= bound if is_max_player else value <= -bound


def _record(ctx: _SearchContext, node: TreeNode, chosen: TreeNode | None, value: int, *, is_max_player: bool) -> None:
    if chosen is None:
        # Only reachable for a node without children, which returns before recording
        msg = f"No child chosen for {node.name}"
        raise RuntimeError(msg)
    ctx.trace.append(
        TraceRecord(
            player=PlayerKind.for_layer(is_max_player=is_max_player),
            node=node.name,
            chosen_child=chosen.name,
            chosen_value=value,
        ),
    )


def _minimax(node: TreeNode, parent: TreeNode | None, ctx: _SearchContext, *, is_max_player: bool) -> int:
    ctx.visited.append(node.name)
    if node.is_leaf:
        return _leaf_value(node, parent)

    bound = ctx.config.bound
    chosen_child: TreeNode | None = None
    chosen_value: float = -math.inf if is_max_player else math.inf

    for child in node.children:
        value = _minimax(child, node, ctx, is_max_player=not is_max_player)
        if _improves(value, chosen_value, is_max_player=is_max_player):
            chosen_child = child
            chosen_value = value
        if _reaches_bound(value, bound, is_max_player=is_max_player):
            logger.debug("Cutoff at %s: %s reached bound %s", node.name, child.name, bound)
            break

    if ctx.config.verbose or node is ctx.root:
        _record(ctx, node, chosen_child, int(chosen_value), is_max_player=is_max_player)
    return int(chosen_value)


def _alphabeta(  # noqa: PLR0913
    node: TreeNode,
    parent: TreeNode | None,
    ctx: _SearchContext,
    alpha: float,
    beta: float,
    *,
    is_max_player: bool,
) -> int:
    ctx.visited.append(node.name)
    if node.is_leaf:
        return _leaf_value(node, parent)

    bound = ctx.config.bound
    chosen_child: TreeNode | None = None
    chosen_value: float = -math.inf if is_max_player else math.inf
    pruned = False

    for child in node.children:
        value = _alphabeta(child, node, ctx, alpha, beta, is_max_player=not is_max_player)
        if _improves(value, chosen_value, is_max_player=is_max_player):
            chosen_child = child
            chosen_value = value
        if is_max_player:
            alpha = max(alpha, value)
        else:
            beta = min(beta, value)
        if _reaches_bound(value, bound, is_max_player=is_max_player):
            logger.debug("Cutoff at %s: %s reached bound %s", node.name, child.name, bound)
            break
        if beta <= alpha:
            logger.debug("Pruned remaining children of %s after %s (alpha=%s, beta=%s)", node.name, child.name, alpha, beta)
            pruned = True
            break

    if (ctx.config.verbose and not pruned) or node is ctx.root:
        _record(ctx, node, chosen_child, int(chosen_value), is_max_player=is_max_player)
    return int(chosen_value)


def evaluate_tree(root: TreeNode, config: EvaluationConfig) -> EvaluationResult:
    """Compute the minimax value of a game tree.

    This is a pure function: the tree is not modified and the trace is
    returned as part of the result. Layers alternate between max and min
    starting from `config.is_max_player` at the root. The root decision is
    always traced; other inner nodes are traced only when `config.verbose`
    is set (and, with pruning, only when their scan was not pruned).

    Args:
        root: The root of the tree to evaluate.
        config: Player, pruning, range and verbosity settings.

    Returns:
        EvaluationResult with the root value and the trace.

    Raises:
        MissingLeafValueError: If the search reaches a leaf without a value.

    Example:
        >>> tree = TreeNode("A", (TreeNode("B", leaf_value=3), TreeNode("C", leaf_value=5)))
        >>> result = evaluate_tree(tree, EvaluationConfig(is_max_player=True))
        >>> result.value, result.messages
        (5, ['max(A) chooses C for 5'])

    """
    ctx = _SearchContext(root=root, config=config)
    logger.debug(
        "Evaluating %s as %s (pruning=%s, range=%s)",
        root.name,
        config.root_player,
        config.pruning_enabled,
        config.range,
    )

    if config.pruning_enabled:
        value = _alphabeta(root, None, ctx, -math.inf, math.inf, is_max_player=config.is_max_player)
    else:
        value = _minimax(root, None, ctx, is_max_player=config.is_max_player)

    logger.debug("Visited %d of %d nodes", len(ctx.visited), len(root))
    return EvaluationResult(
        value=value,
        trace=tuple(ctx.trace),
        root=root.name,
        nodes_visited=len(ctx.visited),
    )
