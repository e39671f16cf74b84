"""
Cycle Detector
Finds the shortest dependency cycle through each artifact and answers edge-membership queries
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import networkx as nx

from .graph_builder import ArtifactRegistry
from .models import Artifact, Coordinate, Cycle

logger = logging.getLogger(__name__)


class CycleStatus(Enum):
    ACYCLIC = "acyclic"
    CYCLIC = "cyclic"


@dataclass
class CycleReport:
    """Outcome of a full cycle scan; ACYCLIC is a successful result, not an error"""
    status: CycleStatus
    cycles: List[Cycle] = field(default_factory=list)

    @property
    def has_cycles(self) -> bool:
        return self.status is CycleStatus.CYCLIC


class CycleDetector:
    """Detects shortest cycles in an artifact registry, cached per registry revision"""

    def __init__(self, registry: ArtifactRegistry):
        self.registry = registry
        self._cycles: Optional[List[Cycle]] = None
        self._cached_revision: Optional[int] = None

    def find_shortest_cycle(self, start: Artifact) -> List[Artifact]:
        """
        Breadth-first search from start back to start.

        Returns the artifacts of the shortest cycle through start in traversal
        order (start first), or an empty list when start lies on no cycle.
        """
        # traversal buffer: coordinate -> parent coordinate, doubles as the visited set
        parents: Dict[Coordinate, Optional[Coordinate]] = {start.coordinate: None}
        queue = deque([start])

        while queue:
            parent = queue.popleft()
            for child_coord, child in parent.depends_on.items():
                if child_coord == start.coordinate:
                    path = []
                    current = parent.coordinate
                    while current != start.coordinate:
                        path.append(self.registry.get(current))
                        current = parents[current]
                    path.append(start)
                    path.reverse()
                    return path
                if child_coord not in parents:
                    parents[child_coord] = parent.coordinate
                    queue.append(child)
        return []

    def detect_cycles(self) -> List[Cycle]:
        """Shortest cycle per artifact, deduplicated by member set"""
        if self._cycles is not None and self._cached_revision == self.registry.revision:
            return self._cycles

        cycles: List[Cycle] = []
        seen = set()
        for artifact in self.registry.all():
            path = self.find_shortest_cycle(artifact)
            if not path:
                continue
            cycle = Cycle(path)
            if cycle.key in seen:
                continue
            seen.add(cycle.key)
            cycles.append(cycle)
            logger.debug(f"Found cycle: {cycle.describe()}")

        self._cycles = cycles
        self._cached_revision = self.registry.revision
        logger.info(f"Found {len(cycles)} cycles in dependency graph")
        return cycles

    def scan(self) -> CycleReport:
        cycles = self.detect_cycles()
        status = CycleStatus.CYCLIC if cycles else CycleStatus.ACYCLIC
        return CycleReport(status=status, cycles=list(cycles))

    def has_cycles(self) -> bool:
        return bool(self.detect_cycles())

    def shortest_cycle_containing(self, a: Artifact, b: Artifact) -> Optional[Cycle]:
        """Shortest detected cycle that contains both artifacts, if any"""
        candidates = [c for c in self.detect_cycles() if c.contains(a, b)]
        if not candidates:
            return None
        return min(candidates, key=len)

    def is_on_shortest_cycle(self, a: Artifact, b: Artifact) -> bool:
        """Whether the edge a -> b belongs to some detected cycle"""
        return any(c.contains(a, b) for c in self.detect_cycles())

    def find_strongly_connected_components(self) -> List[List[Coordinate]]:
        """Strongly connected components with more than one member or a self-loop"""
        graph = self.registry.graph
        significant_sccs = []
        for scc in nx.strongly_connected_components(graph):
            if len(scc) > 1:
                significant_sccs.append(list(scc))
            else:
                node = next(iter(scc))
                if graph.has_edge(node, node):
                    significant_sccs.append([node])
        logger.info(f"Found {len(significant_sccs)} significant strongly connected components")
        return significant_sccs

    def get_analysis_summary(self) -> Dict:
        """Get a summary of the graph and its cycles"""
        report = self.scan()
        sccs = self.find_strongly_connected_components()
        return {
            'graph_stats': self.registry.get_graph_stats(),
            'is_dag': nx.is_directed_acyclic_graph(self.registry.graph),
            'status': report.status.value,
            'cycle_count': len(report.cycles),
            'cycles': [c.describe() for c in report.cycles],
            'strongly_connected_components': {
                'count': len(sccs),
                'largest_component_size': max(len(scc) for scc in sccs) if sccs else 0
            }
        }
