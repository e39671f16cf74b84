"""
Analysis Pipeline
Scan -> filter -> detect cycles -> render, shared by the CLI and the dashboard
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Set, TextIO, Union

from .cycle_detector import CycleDetector, CycleReport
from .dot_renderer import DotRenderer
from .exceptions import ConfigurationError, DescriptorError
from .filters import ArtifactPredicate, FilterApplier
from .graph_builder import ArtifactRegistry, DependencyGraphBuilder
from .models import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Data model for one analysis run"""
    registry: ArtifactRegistry
    detector: CycleDetector
    report: CycleReport
    removed: Set[Coordinate] = field(default_factory=set)
    failed_files: List[DescriptorError] = field(default_factory=list)


def _check_folders(folders: Iterable[Union[str, Path]]) -> List[Path]:
    checked: List[Path] = []
    for folder in folders:
        path = Path(folder)
        if path in checked:
            raise ConfigurationError(f"Duplicate folder name: {folder}")
        if not path.is_dir():
            raise ConfigurationError(f"File {folder} does not exist or is no directory")
        checked.append(path)
    if not checked:
        raise ConfigurationError("At least one folder is required")
    return checked


def run_analysis(folders: Iterable[Union[str, Path]], predicate: Optional[ArtifactPredicate] = None,
                 max_depth: Optional[int] = None, keep_going: bool = False) -> AnalysisResult:
    """Build the registry from all folders, apply the filter and scan for cycles"""
    builder = DependencyGraphBuilder()
    builder.scan_folders(_check_folders(folders), max_depth=max_depth, keep_going=keep_going)
    registry = builder.registry

    removed: Set[Coordinate] = set()
    if predicate is not None:
        removed = FilterApplier.apply(registry, predicate)

    detector = CycleDetector(registry)
    report = detector.scan()
    return AnalysisResult(registry=registry, detector=detector, report=report,
                          removed=removed, failed_files=list(builder.failed_files))


def generate_dot(folders: Iterable[Union[str, Path]], predicate: Optional[ArtifactPredicate],
                 max_depth: Optional[int], out: TextIO, keep_going: bool = False) -> AnalysisResult:
    """Run the analysis and write the DOT graph to out"""
    result = run_analysis(folders, predicate=predicate, max_depth=max_depth, keep_going=keep_going)
    DotRenderer(result.registry, result.detector).render(out)
    return result
