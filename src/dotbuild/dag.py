# dag.py
from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Tuple

from .errors import CycleError
from .model import BuildGraph, ModuleDescriptor


class DependencyGraph:
    """
    Module names plus forward (module -> deps) and reverse (dep -> dependents)
    adjacency lists.

    Edges keep declaration order and duplicates. Every dependency name becomes
    a node, even when no descriptor exists for it.

    Nodes are kept in first-seen order so everything derived from the graph
    (cycle reports, build order) is reproducible for identical input.
    """

    def __init__(self):
        self._nodes: Dict[str, None] = {}  # insertion-ordered set
        self._deps: Dict[str, List[str]] = {}
        self._dependents: Dict[str, List[str]] = {}

    @classmethod
    def from_descriptors(cls, modules: Iterable[ModuleDescriptor]) -> "DependencyGraph":
        graph = cls()
        for m in modules:
            graph.add_module(m)
        return graph

    def add_module(self, module: ModuleDescriptor) -> None:
        """Register a module and its edges. Repeated calls for one name accumulate."""
        name = module.name
        self._nodes.setdefault(name, None)
        forward = self._deps.setdefault(name, [])

        for dep in module.dependencies:
            self._nodes.setdefault(dep, None)
            forward.append(dep)
            self._dependents.setdefault(dep, []).append(name)

    def dependencies_of(self, name: str) -> List[str]:
        return list(self._deps.get(name, ()))

    def dependents_of(self, name: str) -> List[str]:
        return list(self._dependents.get(name, ()))

    def all_nodes(self) -> List[str]:
        return list(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes


# ----------------------------------------------------------------------
# Cycle detection
# ----------------------------------------------------------------------

class CycleDetector:
    """
    Depth-first search with a visited set and an on-stack set.

    Uses an explicit stack instead of recursion so long dependency chains
    can't hit the interpreter's recursion limit.
    """

    def __init__(self, graph: DependencyGraph):
        self.graph = graph

    def find_cycle(self) -> List[str]:
        """
        Return the first cycle found as a closed path (`[A, B, C, A]`), or [].

        The path starts at the first node of the current DFS path that an
        edge leads back to.
        """
        visited = set()
        on_stack = set()

        for root in self.graph.all_nodes():
            if root in visited:
                continue

            path: List[str] = [root]
            visited.add(root)
            on_stack.add(root)
            stack = [(root, iter(self.graph.dependencies_of(root)))]

            while stack:
                node, deps = stack[-1]
                for dep in deps:
                    if dep in on_stack:
                        start = path.index(dep)
                        return path[start:] + [dep]
                    if dep not in visited:
                        visited.add(dep)
                        on_stack.add(dep)
                        path.append(dep)
                        stack.append((dep, iter(self.graph.dependencies_of(dep))))
                        break
                else:
                    # all deps explored: backtrack
                    stack.pop()
                    path.pop()
                    on_stack.discard(node)

        return []

    def has_cycle(self) -> Tuple[bool, List[str]]:
        cycle = self.find_cycle()
        return bool(cycle), cycle


# ----------------------------------------------------------------------
# Build order
# ----------------------------------------------------------------------

class TopologicalSorter:
    """
    Kahn's algorithm producing dependency-first build order.

    "In-degree" here is the number of a node's own declared dependencies
    (duplicates counted). Nodes with none are buildable first.

    Tie-break: the queue is seeded in graph node order (first seen), and a
    node's dependents are released in the order their edges were recorded.

    On a cyclic graph, nodes in or behind a cycle are silently left out;
    run CycleDetector first.
    """

    def __init__(self, graph: DependencyGraph):
        self.graph = graph

    def sort(self) -> List[str]:
        nodes = self.graph.all_nodes()
        indeg = {n: len(self.graph.dependencies_of(n)) for n in nodes}
        q = deque(n for n in nodes if indeg[n] == 0)

        order: List[str] = []
        while q:
            node = q.popleft()
            order.append(node)

            # node is built, so everything that needs it has one dependency fewer
            for dependent in self.graph.dependents_of(node):
                indeg[dependent] -= 1
                if indeg[dependent] == 0:
                    q.append(dependent)

        return order


# ----------------------------------------------------------------------
# Graph gate
# ----------------------------------------------------------------------

def missing_dependencies(build_graph: BuildGraph, graph: DependencyGraph) -> Dict[str, List[str]]:
    """Dependency names with no descriptor -> modules referencing them (first-seen order)."""
    missing: Dict[str, List[str]] = {}
    for name in graph.all_nodes():
        if name in build_graph:
            continue
        users = graph.dependents_of(name)
        if users:
            missing[name] = list(dict.fromkeys(users))
    return missing


def compute_build_order(build_graph: BuildGraph) -> List[str]:
    """
    Build the dependency graph, reject cycles, return the build order.

    Raises:
        CycleError: with the offending path when the graph is cyclic
    """
    graph = DependencyGraph.from_descriptors(build_graph)
    cycle = CycleDetector(graph).find_cycle()
    if cycle:
        raise CycleError.from_path(cycle)
    return TopologicalSorter(graph).sort()
