"""
POM Analyzer
Maven artifact dependency graphs with shortest-cycle detection and Graphviz output
"""

from .models import Artifact, Coordinate, Cycle
from .graph_builder import ArtifactRegistry, DependencyGraphBuilder
from .cycle_detector import CycleDetector, CycleReport, CycleStatus
from .filters import ExpressionFilter, FilterApplier
from .dot_renderer import DotRenderer
from .pipeline import AnalysisResult, generate_dot, run_analysis

__all__ = [
    'Artifact', 'Coordinate', 'Cycle',
    'ArtifactRegistry', 'DependencyGraphBuilder',
    'CycleDetector', 'CycleReport', 'CycleStatus',
    'ExpressionFilter', 'FilterApplier',
    'DotRenderer',
    'AnalysisResult', 'generate_dot', 'run_analysis',
]
