"""
Data models for the POM dependency graph
Coordinates identify artifacts; artifacts are nodes owned by an ArtifactRegistry.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, FrozenSet, List

import networkx as nx


@dataclass(frozen=True)
class Coordinate:
    """Two-part identity (group, name) of an artifact"""
    group: str
    name: str

    def group_contains(self, text: str) -> bool:
        return text in self.group

    def name_contains(self, text: str) -> bool:
        return text in self.name

    def matches(self, group: str, name: str) -> bool:
        return self.group == group and self.name == name

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


class Artifact:
    """
    A graph node: one coordinate plus its outgoing and incoming edges.

    Artifacts do not store edges themselves. Both edge maps are read from the
    owning registry's graph, so `depends_on` and `required_by` are always
    mutual inverses. Only ArtifactRegistry creates instances.
    """

    def __init__(self, coordinate: Coordinate, graph: nx.DiGraph):
        self.coordinate = coordinate
        self._graph = graph

    @property
    def depends_on(self) -> Dict[Coordinate, "Artifact"]:
        """Artifacts this one declares as dependencies, in insertion order"""
        if self.coordinate not in self._graph:
            return {}
        nodes = self._graph.nodes
        return {coord: nodes[coord]['artifact'] for coord in self._graph.successors(self.coordinate)}

    @property
    def required_by(self) -> Dict[Coordinate, "Artifact"]:
        """Artifacts that declare this one as a dependency"""
        if self.coordinate not in self._graph:
            return {}
        nodes = self._graph.nodes
        return {coord: nodes[coord]['artifact'] for coord in self._graph.predecessors(self.coordinate)}

    def reaches(self, group: str, name: str) -> bool:
        """Returns whether this artifact is group:name or directly or indirectly depends on it"""
        visited = set()
        to_visit = [self]
        while to_visit:
            current = to_visit.pop()
            if current.coordinate in visited:
                continue
            visited.add(current.coordinate)
            if current.coordinate.matches(group, name):
                return True
            to_visit.extend(current.depends_on.values())
        return False

    def __repr__(self) -> str:
        return f"Artifact({self.coordinate})"

    def __str__(self) -> str:
        return str(self.coordinate)


@dataclass
class Cycle:
    """A closed walk of artifacts; the last member depends on the first"""
    artifacts: List[Artifact] = field(default_factory=list)

    @cached_property
    def key(self) -> FrozenSet[Coordinate]:
        """Cycles are identified by their member set, not their order"""
        return frozenset(a.coordinate for a in self.artifacts)

    def contains(self, a: Artifact, b: Artifact) -> bool:
        key = self.key
        return a.coordinate in key and b.coordinate in key

    def describe(self) -> str:
        names = [str(a.coordinate) for a in self.artifacts]
        return " -> ".join(names + names[:1])

    def __len__(self) -> int:
        return len(self.artifacts)
