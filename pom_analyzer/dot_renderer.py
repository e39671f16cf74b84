"""
DOT Renderer
Serializes the artifact graph as Graphviz DOT, highlighting edges that lie on cycles
"""

import io
import logging
from typing import Dict, Optional, TextIO

from .config import Config
from .cycle_detector import CycleDetector
from .graph_builder import ArtifactRegistry
from .models import Coordinate

logger = logging.getLogger(__name__)


def _quote(text: str) -> str:
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


class DotRenderer:
    """Writes `digraph { ... }` output for a registry"""

    def __init__(self, registry: ArtifactRegistry, detector: Optional[CycleDetector] = None):
        self.registry = registry
        self.detector = detector if detector is not None else CycleDetector(registry)
        self._identifiers: Optional[Dict[Coordinate, str]] = None
        self._identifier_revision: Optional[int] = None

    def assign_identifiers(self) -> Dict[Coordinate, str]:
        """Node ids label1, label2, ... in registry order; reused while the registry is unchanged"""
        if self._identifiers is not None and self._identifier_revision == self.registry.revision:
            return self._identifiers
        self._identifiers = {
            artifact.coordinate: f"{Config.NODE_ID_PREFIX}{index}"
            for index, artifact in enumerate(self.registry.all(), start=1)
        }
        self._identifier_revision = self.registry.revision
        return self._identifiers

    def render(self, out: TextIO):
        ids = self.assign_identifiers()
        cycle_attrs = f" [color={Config.CYCLE_EDGE_COLOR},penwidth={Config.CYCLE_EDGE_PENWIDTH}]"

        out.write("digraph {\n")
        for artifact in self.registry.all():
            out.write(f"{ids[artifact.coordinate]} [label={_quote(str(artifact.coordinate))}]\n")

        cycle_edges = 0
        for artifact in self.registry.all():
            for dep_coord, dependency in artifact.depends_on.items():
                line = f"{ids[artifact.coordinate]} -> {ids[dep_coord]}"
                if self.detector.is_on_shortest_cycle(artifact, dependency):
                    line += cycle_attrs
                    cycle_edges += 1
                out.write(line + "\n")
        out.write("}\n")
        logger.debug(f"Rendered {len(ids)} nodes, {cycle_edges} cycle edges")

    def render_to_string(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()
