"""Rich rendering utilities for game trees and traces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

from gametree._config import PlayerKind

if TYPE_CHECKING:
    from rich.console import Console

    from gametree._eval_engine import EvaluationResult
    from gametree._tree import TreeNode


def _player_style(player: PlayerKind) -> str:
    """Get Rich style for a layer's player."""
    match player:
        case PlayerKind.MAX:
            return "green"
        case PlayerKind.MIN:
            return "magenta"


def _node_label(node: TreeNode, player: PlayerKind) -> str:
    name = escape(node.name)
    if node.is_leaf:
        if node.leaf_value is None:
            return f"{name} [red](no value)[/red]"
        return f"{name} = [bold]{node.leaf_value}[/bold]"
    style = _player_style(player)
    return f"[{style}]{player}[/{style}] {name}"


def build_rich_tree(root: TreeNode, root_player: PlayerKind) -> Tree:
    """Build a Rich Tree with every inner node labelled by its player.

    Args:
        root: The game tree to render.
        root_player: The player at the root layer.

    Returns:
        A Rich Tree mirroring the game tree.

    """
    rich_tree = Tree(_node_label(root, root_player))

    def add_children(node: TreeNode, branch: Tree, player: PlayerKind) -> None:
        for child in node.children:
            child_branch = branch.add(_node_label(child, player))
            add_children(child, child_branch, player.opponent)

    add_children(root, rich_tree, root_player.opponent)
    return rich_tree


def render_game_tree(root: TreeNode, root_player: PlayerKind, console: Console) -> None:
    """Render the game tree with a node count footer.

    Args:
        root: The game tree to render.
        root_player: The player at the root layer.
        console: Rich Console to output to.

    """
    console.print(build_rich_tree(root, root_player))
    console.print(f"[dim]{len(root)} nodes, depth {root.depth}[/dim]")


def render_trace(result: EvaluationResult, console: Console) -> None:
    """Print the trace, one plain line per record, in evaluation order.

    Args:
        result: The evaluation result to render.
        console: Rich Console to output to.

    """
    for message in result.messages:
        console.print(message, markup=False, highlight=False, soft_wrap=True)
