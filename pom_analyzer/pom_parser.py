"""
POM Parser
Finds pom.xml files below a folder and extracts project and dependency coordinates
"""

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .config import Config
from .exceptions import DescriptorError
from .models import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class PomDescriptor:
    """Coordinates read from a single pom.xml"""
    path: Path
    coordinate: Coordinate
    dependencies: List[Coordinate] = field(default_factory=list)


def find_pom_files(folder: Union[str, Path], max_depth: Optional[int] = None) -> Iterator[Path]:
    """Yield pom.xml files below folder; files directly inside folder are at depth 0"""
    yield from _visit(Path(folder), 0, max_depth)


def _visit(folder: Path, current_depth: int, max_depth: Optional[int]) -> Iterator[Path]:
    if max_depth is not None and current_depth > max_depth:
        return
    try:
        entries = sorted(folder.iterdir())
    except OSError as e:
        logger.warning(f"Cannot list {folder}: {e}")
        return
    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink():
                logger.debug(f"Not following symlinked directory {entry}")
                continue
            yield from _visit(entry, current_depth + 1, max_depth)
        elif entry.is_file() and entry.name == Config.POM_FILENAME:
            yield entry


def _local_name(tag: str) -> str:
    # '{http://maven.apache.org/POM/4.0.0}groupId' -> 'groupId'
    return tag.rsplit('}', 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [c for c in element if isinstance(c.tag, str) and _local_name(c.tag) == name]


def _text(element: Optional[ET.Element], *path: str) -> Optional[str]:
    """Text of the element found by walking path, or None when missing or blank"""
    for name in path:
        if element is None:
            return None
        element = _child(element, name)
    if element is None or element.text is None:
        return None
    text = element.text.strip()
    return text or None


def parse_pom(path: Union[str, Path]) -> PomDescriptor:
    """Parse a pom.xml into a PomDescriptor, raising DescriptorError if ids are missing"""
    path = Path(path)
    logger.debug(f"Scanning {os.path.abspath(path)} ...")
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise DescriptorError(path, f"malformed XML: {e}")
    except OSError as e:
        raise DescriptorError(path, f"cannot read file: {e}")

    if _local_name(root.tag) != 'project':
        raise DescriptorError(path, f"root element is <{_local_name(root.tag)}>, expected <project>")

    parent_group_id = _text(root, 'parent', 'groupId')
    logger.debug(f"Parent group ID: {parent_group_id}")

    group_id = _text(root, 'groupId') or parent_group_id
    if group_id is None:
        raise DescriptorError(path, "no groupId on project or parent")
    artifact_id = _text(root, 'artifactId')
    if artifact_id is None:
        raise DescriptorError(path, "no artifactId on project")

    descriptor = PomDescriptor(path=path, coordinate=Coordinate(group_id, artifact_id))
    logger.debug(f"====== Got project {descriptor.coordinate} ======")

    dependencies = _child(root, 'dependencies')
    for dep in _children(dependencies, 'dependency') if dependencies is not None else []:
        dep_group = _text(dep, 'groupId')
        dep_artifact = _text(dep, 'artifactId')
        if dep_group is None or dep_artifact is None:
            raise DescriptorError(path, f"dependency without groupId/artifactId in {descriptor.coordinate}")
        dep_coord = Coordinate(dep_group, dep_artifact)
        logger.debug(f"Found dependency {dep_coord}")
        descriptor.dependencies.append(dep_coord)

    return descriptor
