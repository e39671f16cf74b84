"""
Error hierarchy for the POM dependency analyzer
"""

from pathlib import Path
from typing import Union


class PomAnalyzerError(Exception):
    """Base class for all analyzer errors"""


class ConfigurationError(PomAnalyzerError):
    """Invalid command line or environment configuration"""


class DescriptorError(PomAnalyzerError):
    """A single pom.xml could not be turned into coordinates"""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class UnregisteredArtifactError(PomAnalyzerError):
    """An edge was requested for a coordinate the registry does not know"""

    def __init__(self, coordinate):
        self.coordinate = coordinate
        super().__init__(f"Unregistered artifact: {coordinate}")


class FilterExpressionError(PomAnalyzerError):
    """The artifact filter expression is not usable"""


class FilterEvaluationError(PomAnalyzerError):
    """The artifact filter failed or did not produce a boolean"""
