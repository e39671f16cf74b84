"""
Dependency Graph Builder
Owns the artifact registry and fills it from pom.xml descriptors
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

import networkx as nx

from .exceptions import DescriptorError, UnregisteredArtifactError
from .models import Artifact, Coordinate
from .pom_parser import PomDescriptor, find_pom_files, parse_pom

logger = logging.getLogger(__name__)


class ArtifactRegistry:
    """
    Exclusive owner of all artifacts in one dependency graph.

    Nodes of the backing DiGraph are Coordinates with the Artifact stored as
    the 'artifact' node attribute. An edge u -> v means u depends on v.
    """

    def __init__(self):
        self.graph = nx.DiGraph()
        self.revision = 0

    def get_or_create(self, coordinate: Coordinate) -> Artifact:
        """Return the artifact for coordinate, registering it on first use"""
        if coordinate in self.graph:
            return self.graph.nodes[coordinate]['artifact']
        artifact = Artifact(coordinate, self.graph)
        self.graph.add_node(coordinate, artifact=artifact)
        self.revision += 1
        return artifact

    def get(self, coordinate: Coordinate) -> Optional[Artifact]:
        if coordinate in self.graph:
            return self.graph.nodes[coordinate]['artifact']
        return None

    def add_dependency(self, from_coord: Coordinate, to_coord: Coordinate):
        """Record that from_coord depends on to_coord; both must already be registered"""
        for coord in (from_coord, to_coord):
            if coord not in self.graph:
                raise UnregisteredArtifactError(coord)
        if self.graph.has_edge(from_coord, to_coord):
            return
        self.graph.add_edge(from_coord, to_coord)
        self.revision += 1

    def all(self) -> Iterator[Artifact]:
        """Iterate over registered artifacts in insertion order"""
        return (data['artifact'] for _, data in self.graph.nodes(data=True))

    def remove(self, coordinates: Iterable[Coordinate]):
        """Drop artifacts together with every edge that references them"""
        present = [c for c in coordinates if c in self.graph]
        if not present:
            return
        self.graph.remove_nodes_from(present)
        self.revision += 1

    def get_graph_stats(self) -> Dict:
        """Get statistics about the dependency graph"""
        node_count = self.graph.number_of_nodes()
        return {
            'total_artifacts': node_count,
            'total_dependencies': self.graph.number_of_edges(),
            'is_connected': nx.is_weakly_connected(self.graph) if node_count > 0 else False,
            'density': nx.density(self.graph),
            'average_degree': sum(dict(self.graph.degree()).values()) / node_count if node_count > 0 else 0
        }

    def __contains__(self, coordinate: Coordinate) -> bool:
        return coordinate in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()


class DependencyGraphBuilder:
    """Builds an artifact registry from pom.xml files"""

    def __init__(self, registry: Optional[ArtifactRegistry] = None):
        self.registry = registry if registry is not None else ArtifactRegistry()
        self.failed_files: List[DescriptorError] = []

    def add_descriptor(self, descriptor: PomDescriptor) -> Artifact:
        """Register a project and link it to each of its declared dependencies"""
        project = self.registry.get_or_create(descriptor.coordinate)
        for dep_coord in descriptor.dependencies:
            self.registry.get_or_create(dep_coord)
            self.registry.add_dependency(descriptor.coordinate, dep_coord)
        return project

    def add_pom_file(self, path: Union[str, Path]) -> Artifact:
        return self.add_descriptor(parse_pom(path))

    def scan_folders(self, folders: Iterable[Union[str, Path]], max_depth: Optional[int] = None,
                     keep_going: bool = False) -> ArtifactRegistry:
        """Parse every pom.xml below the given folders into the registry"""
        for folder in folders:
            for pom_file in find_pom_files(folder, max_depth):
                try:
                    self.add_pom_file(pom_file)
                except DescriptorError as e:
                    if not keep_going:
                        raise
                    logger.error(f"Skipping {e.path}: {e.message}")
                    self.failed_files.append(e)

        logger.info(f"Registered {len(self.registry)} artifacts with "
                    f"{self.registry.graph.number_of_edges()} dependencies")
        return self.registry
