"""Evaluation engine module for gametree.

This module provides pure functions for evaluating game trees.
The evaluation engine takes a TreeNode and an EvaluationConfig, and produces
the minimax value together with a trace of decisions, without side effects.

Key types:
- TraceRecord: One "max(A) chooses C for 5" decision
- EvaluationResult: Root value, trace and search statistics
- evaluate_tree: Pure function to evaluate a TreeNode
"""

from ._engine import EvaluationResult, evaluate_tree
from ._trace import TraceRecord

__all__ = [
    "EvaluationResult",
    "TraceRecord",
    "evaluate_tree",
]
