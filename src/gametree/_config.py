"""Evaluation settings shared by the engine and the CLI."""

from __future__ import annotations

import math
from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class PlayerKind(StrEnum):
    """The player moving at a tree layer."""

    MAX = auto()  # Picks the largest child value
    MIN = auto()  # Picks the smallest child value

    @classmethod
    def for_layer(cls, *, is_max_player: bool) -> PlayerKind:
        return cls.MAX if is_max_player else cls.MIN

    @property
    def opponent(self) -> PlayerKind:
        return PlayerKind.MIN if self is PlayerKind.MAX else PlayerKind.MAX


class EvaluationConfig(BaseModel):
    """Settings for a single minimax evaluation.

    Attributes:
        is_max_player: Whether the root layer maximizes. Layers alternate by depth.
        pruning_enabled: Use alpha-beta pruning instead of plain minimax.
        range: Symmetric bound on leaf values. A child reaching `range` (or
            `-range` when minimizing) stops the scan of its siblings.
            None means unbounded.
        verbose: Trace every inner node, not only the root.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_max_player: bool = False
    pruning_enabled: bool = False
    range: int | None = Field(default=None, gt=0)
    verbose: bool = False

    @property
    def bound(self) -> float:
        """The cutoff magnitude, `math.inf` when unbounded."""
        return math.inf if self.range is None else self.range

    @property
    def root_player(self) -> PlayerKind:
        return PlayerKind.for_layer(is_max_player=self.is_max_player)
