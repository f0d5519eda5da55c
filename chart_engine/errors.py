"""Exception types raised by the layout and statistics engine."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "ChartEngineError",
    "InvalidHierarchyError",
    "InvalidFlowError",
    "CyclicFlowError",
]


class ChartEngineError(Exception):
    """Base class for engine failures."""


class InvalidHierarchyError(ChartEngineError, ValueError):
    """A hierarchy node carries a negative or non-finite value."""


class InvalidFlowError(ChartEngineError, ValueError):
    """A flow connection or chord matrix carries an unusable value."""


class CyclicFlowError(ChartEngineError, RuntimeError):
    """Sankey layering stalled because the connection graph contains a cycle."""

    def __init__(self, unassigned: Sequence[str]):
        self.unassigned = tuple(unassigned)
        preview = ", ".join(self.unassigned[:5])
        if len(self.unassigned) > 5:
            preview += ", ..."
        super().__init__(
            f"Flow graph contains a cycle; {len(self.unassigned)} node(s) could not be "
            f"assigned a column: {preview}"
        )
