"""Directed graph model of a computational process."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Generic, Hashable, Iterable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Graph(Generic[K, V]):
    """Nodes keyed by ``K`` holding ``V``, with an adjacency list of successors."""

    def __init__(self) -> None:
        self._nodes: dict[K, V] = {}
        self._adjacency: dict[K, list[K]] = {}

    def add_node(self, key: K, value: V, predecessors: Iterable[K] | None = None) -> None:
        """Set the node ``key`` and link it after every key in ``predecessors``."""
        self._nodes[key] = value
        for prev in predecessors or ():
            self._adjacency.setdefault(prev, []).append(key)

    def successors(self, key: K) -> list[K]:
        return list(self._adjacency.get(key, ()))

    def __getitem__(self, key: K) -> V:
        return self._nodes[key]

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def copy(self) -> "Graph[K, V]":
        clone: Graph[K, V] = Graph()
        clone._nodes = dict(self._nodes)
        clone._adjacency = {k: list(v) for k, v in self._adjacency.items()}
        return clone

    def lines(self) -> list[str]:
        result = ["Graph"]
        for key in sorted(self._nodes):
            succ = "".join(f"{node} " for node in self._adjacency.get(key, ()))
            result.append(f"{key} ({self._nodes[key]}) -> {{ {succ}}}")
        return result


class CalcProcessStep(Enum):
    """Stages of a computational process."""

    START = 0
    CREATE_VECTOR = 1
    INIT_VECTOR = 2
    SCALAR_PRODUCT = 3
    END = 4

    def __str__(self) -> str:
        return _STEP_LABELS[self]

    def __lt__(self, other: "CalcProcessStep") -> bool:
        if not isinstance(other, CalcProcessStep):
            return NotImplemented
        return self.value < other.value


_STEP_LABELS = {
    CalcProcessStep.START: "Start",
    CalcProcessStep.CREATE_VECTOR: "CreateVector",
    CalcProcessStep.INIT_VECTOR: "InitVector",
    CalcProcessStep.SCALAR_PRODUCT: "ScalarProduct",
    CalcProcessStep.END: "End",
}


class DataLocation(Enum):
    """Where data lives."""

    RAM = 0
    VRAM = 1
    RAM_VRAM = 2

    def __str__(self) -> str:
        return self.name


def _build(values: list) -> Graph:
    graph: Graph = Graph()
    graph.add_node(0, values[0])
    graph.add_node(1, values[1], [0])
    graph.add_node(2, values[2], [0])
    graph.add_node(3, values[3], [1])
    graph.add_node(4, values[4], [2])
    graph.add_node(5, values[5], [3, 4])
    graph.add_node(6, values[6], [5])
    return graph


def main(argv: list[str] | None = None) -> int:
    def show(graph: Graph) -> None:
        for line in graph.lines():
            print(line)

    print("---Graph of labels---")
    graph = _build(["start", "create a", "create b", "init a", "init b", "(a, b)", "end"])
    show(graph)
    print("---Copy---")
    show(graph.copy())

    print("---Graph of steps---")
    S = CalcProcessStep
    steps = _build(
        [S.START, S.CREATE_VECTOR, S.CREATE_VECTOR, S.INIT_VECTOR,
         S.INIT_VECTOR, S.SCALAR_PRODUCT, S.END]
    )
    show(steps)
    print("---Copy---")
    show(steps.copy())

    locations = {
        CalcProcessStep.CREATE_VECTOR: [DataLocation.RAM, DataLocation.VRAM, DataLocation.RAM_VRAM]
    }
    for step in sorted(locations):
        items = "".join(f"{loc} " for loc in locations[step])
        print(f"{step} -> {{ {items}}}")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())