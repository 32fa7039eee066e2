"""Decision records produced during a search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gametree._config import PlayerKind


@dataclass(frozen=True, slots=True)
class TraceRecord:
    """The child an inner node selected and the value it backed up.

    Attributes:
        player: Whether the node maximizes or minimizes.
        node: Name of the deciding node.
        chosen_child: Name of the first child achieving the best value.
        chosen_value: The backed-up value.

    """

    player: PlayerKind
    node: str
    chosen_child: str
    chosen_value: int

    @property
    def message(self) -> str:
        """Human-readable form, e.g. `max(A) chooses C for 5`."""
        return f"{self.player}({self.node}) chooses {self.chosen_child} for {self.chosen_value}"

    def __str__(self) -> str:
        return self.message
