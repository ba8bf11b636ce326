"""Dependency graph over raw event references."""

from __future__ import annotations

from collections import defaultdict

from timetable.schema import Event

_UNVISITED, _ON_PATH, _DONE = 0, 1, 2


class DependencyGraph:
    """Directed multigraph of ``depends_on -> name`` edges.

    Nodes are the raw strings stored on events, not resolved records, so a
    dependency typed as an id and one typed as a name are different nodes.
    """

    def __init__(self) -> None:
        self.adj: dict[str, list[str]] = defaultdict(list)

    def add_edge(self, source: str, target: str) -> None:
        self.adj[source].append(target)

    def edges(self) -> list[tuple[str, str]]:
        return [(source, target) for source, targets in self.adj.items() for target in targets]

    def nodes(self) -> list[str]:
        """Every node in first-seen order, including edge targets with no outgoing edges."""

        seen: dict[str, None] = {}
        for source, targets in self.adj.items():
            seen.setdefault(source)
            for target in targets:
                seen.setdefault(target)
        return list(seen)

    def __len__(self) -> int:
        return sum(len(targets) for targets in self.adj.values())

    def find_cycle(self) -> list[str] | None:
        """Return one cycle as ``[a, b, ..., a]``, or None if the graph is acyclic."""

        state: dict[str, int] = defaultdict(int)
        path: list[str] = []

        def visit(node: str) -> list[str] | None:
            state[node] = _ON_PATH
            path.append(node)
            for neighbour in self.adj.get(node, ()):
                if state[neighbour] == _ON_PATH:
                    return path[path.index(neighbour):] + [neighbour]
                if state[neighbour] == _UNVISITED:
                    found = visit(neighbour)
                    if found:
                        return found
            path.pop()
            state[node] = _DONE
            return None

        for node in self.nodes():
            if state[node] == _UNVISITED:
                found = visit(node)
                if found:
                    return found
        return None

    def has_cycle(self) -> bool:
        return self.find_cycle() is not None


def build_graph(events: list[Event]) -> DependencyGraph:
    """One edge per event with a dependency, from the dependency to the event name."""

    graph = DependencyGraph()
    for event in events:
        if event.depends_on:
            graph.add_edge(event.depends_on, event.name)
    return graph


def has_cycle(graph: DependencyGraph) -> bool:
    return graph.has_cycle()
