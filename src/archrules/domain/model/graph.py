"""Immutable directed graph with O(1) bidirectional lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class DiGraph[T]:
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - every edge endpoint is a node
    - forward[a] contains b ⟺ reverse[b] contains a

    Attributes:
        forward: Node → successors (outgoing edges)
        reverse: Node → predecessors (incoming edges)
        nodes: All nodes (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    reverse: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")
                if node not in self.reverse.get(succ, frozenset()):
                    raise ValueError(
                        f"inconsistent: {node}→{succ} in forward but {node} not in reverse[{succ}]"
                    )

        for node, predecessors in self.reverse.items():
            if node not in self.nodes:
                raise ValueError(f"reverse key '{node}' not in nodes")
            for pred in predecessors:
                if node not in self.forward.get(pred, frozenset()):
                    raise ValueError(
                        f"inconsistent: {pred}→{node} in reverse but {node} not in forward[{pred}]"
                    )

    def successors(self, node: T) -> frozenset[T]:
        """Direct successors. O(1)."""
        return self.forward.get(node, frozenset())

    def predecessors(self, node: T) -> frozenset[T]:
        """Direct predecessors. O(1)."""
        return self.reverse.get(node, frozenset())

    def has_edge(self, from_: T, to: T) -> bool:
        """Check if edge exists. O(1)."""
        return to in self.forward.get(from_, frozenset())

    @property
    def edge_count(self) -> int:
        """Total number of edges."""
        return sum(len(succs) for succs in self.forward.values())

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] = (),
    ) -> DiGraph[T]:
        """Build graph from (from, to) pairs plus isolated nodes.

        Time: O(N + E)
        """
        forward: dict[T, set[T]] = {}
        reverse: dict[T, set[T]] = {}
        nodes: set[T] = set(extra_nodes)

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)
            reverse.setdefault(to_node, set()).add(from_node)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            reverse={k: frozenset(v) for k, v in reverse.items()},
            nodes=frozenset(nodes),
        )
