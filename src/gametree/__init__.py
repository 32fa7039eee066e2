"""Minimax and alpha-beta evaluation of game trees described in text files."""

__all__ = [
    "CyclicGraphError",
    "EvaluationConfig",
    "EvaluationResult",
    "FileAccessError",
    "GameTreeError",
    "GameTreeInput",
    "MalformedInputError",
    "MissingLeafValueError",
    "MultipleRootsError",
    "NoRootError",
    "OutOfRangeLeafError",
    "PlayerKind",
    "RelationGraph",
    "TraceRecord",
    "TreeNode",
    "build_tree",
    "evaluate_game_tree",
    "evaluate_tree",
    "find_roots",
    "format_root_list",
    "has_cycle",
    "load_game_tree",
    "parse_game_tree",
    "prepare_game_tree",
    "resolve_root",
]

from ._config import EvaluationConfig, PlayerKind
from ._errors import (
    CyclicGraphError,
    FileAccessError,
    GameTreeError,
    MalformedInputError,
    MissingLeafValueError,
    MultipleRootsError,
    NoRootError,
    OutOfRangeLeafError,
    format_root_list,
)
from ._eval import evaluate_game_tree, prepare_game_tree
from ._eval_engine import EvaluationResult, TraceRecord, evaluate_tree
from ._graph import RelationGraph, find_roots, has_cycle, resolve_root
from ._io import GameTreeInput, load_game_tree, parse_game_tree
from ._tree import TreeNode, build_tree
