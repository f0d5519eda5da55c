"""Tree model with value aggregation used by treemap and sunburst layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Tuple

from .errors import InvalidHierarchyError


@dataclass(frozen=True, slots=True)
class HierarchyNode:
    """
    A named node that exclusively owns its children.

    ``total_value`` is the node's own value for leaves and the sum of the children's
    totals otherwise. It is computed once at construction; since children must exist
    before their parent, the tree is acyclic by construction.

    Raises
    ------
    InvalidHierarchyError
        If ``value`` is negative or not finite.
    """

    name: str
    value: float = 0.0
    children: Tuple[HierarchyNode, ...] = ()
    color: str | None = None
    total_value: float = field(init=False, default=0.0, compare=False)

    def __post_init__(self) -> None:
        try:
            value = float(self.value)
        except (TypeError, ValueError) as exc:
            raise InvalidHierarchyError(f"Node {self.name!r} has non-numeric value {self.value!r}") from exc
        if not math.isfinite(value):
            raise InvalidHierarchyError(f"Node {self.name!r} has non-finite value {self.value!r}")
        if value < 0:
            raise InvalidHierarchyError(f"Node {self.name!r} has negative value {self.value!r}")
        object.__setattr__(self, "value", value)

        children = tuple(self.children)
        for child in children:
            if not isinstance(child, HierarchyNode):
                raise TypeError(f"Children of {self.name!r} must be HierarchyNode instances, got {type(child).__name__}")
        object.__setattr__(self, "children", children)

        total = value if not children else math.fsum(child.total_value for child in children)
        object.__setattr__(self, "total_value", total)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def depth(self) -> int:
        """Number of levels below this node (0 for a leaf)."""
        if not self.children:
            return 0
        return 1 + max(child.depth() for child in self.children)

    def iter_nodes(self) -> Iterator[HierarchyNode]:
        """Pre-order traversal including this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> list[HierarchyNode]:
        return [node for node in self.iter_nodes() if node.is_leaf]

    def find(self, name: str) -> HierarchyNode | None:
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HierarchyNode:
        """
        Build a tree from nested mappings.

        Each mapping needs a ``name`` and may carry ``value``, ``color`` and a list of
        ``children`` mappings.
        """
        if "name" not in data:
            raise InvalidHierarchyError("Hierarchy mapping is missing the 'name' key")
        children = [cls.from_dict(child) for child in data.get("children", ()) or ()]
        return cls(
            name=str(data["name"]),
            value=data.get("value", 0.0),
            children=tuple(children),
            color=data.get("color"),
        )


def build_hierarchy(name: str, children: Iterable[HierarchyNode], *, color: str | None = None) -> HierarchyNode:
    """Convenience constructor for an internal node."""
    return HierarchyNode(name=name, children=tuple(children), color=color)
