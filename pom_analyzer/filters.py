"""
Artifact Filters
Prunes the registry with a boolean predicate, typically compiled from a user expression
"""

import ast
import logging
from typing import Callable, Set

from .config import Config
from .exceptions import FilterEvaluationError, FilterExpressionError
from .graph_builder import ArtifactRegistry
from .models import Artifact, Coordinate

logger = logging.getLogger(__name__)

ArtifactPredicate = Callable[[Artifact], bool]

_ALLOWED_BUILTINS = {
    'len': len,
    'any': any,
    'all': all,
    'str': str,
    'bool': bool,
}

# str.format can reach attributes through replacement fields like "{0.__class__}"
_BLOCKED_ATTRIBUTES = {'format', 'format_map'}


def _check_expression(tree: ast.AST, expression: str):
    """Reject private and dunder names so the expression cannot walk out of its namespace"""
    for node in ast.walk(tree):
        if isinstance(node, ast.Attribute):
            name = node.attr
        elif isinstance(node, ast.Name):
            name = node.id
        else:
            continue
        if name.startswith('_') or name in _BLOCKED_ATTRIBUTES:
            raise FilterExpressionError(f"Invalid filter expression: \n{expression}\n'{name}' is not allowed")


class ExpressionFilter:
    """
    Artifact predicate written as a Python expression.

    The expression sees `artifact`, `coordinate`, `group_id` and `artifact_id`,
    e.g. ``group_id.startswith('com.acme') and not artifact.reaches('junit', 'junit')``.
    """

    def __init__(self, expression: str = Config.DEFAULT_FILTER):
        self.expression = expression
        try:
            tree = ast.parse(expression, mode='eval')
        except (SyntaxError, ValueError) as e:
            raise FilterExpressionError(f"Invalid filter expression: \n{expression}\n{e}")
        _check_expression(tree, expression)
        self._code = compile(tree, '<filter>', 'eval')

        # evaluate once against a sample artifact so that typos in names fail before any scanning output
        sample_registry = ArtifactRegistry()
        sample = sample_registry.get_or_create(Coordinate("test", "test"))
        try:
            self._evaluate(sample)
        except Exception as e:
            raise FilterExpressionError(f"Invalid filter expression: \n{expression}\n{e}")

    def _evaluate(self, artifact: Artifact):
        namespace = {
            'artifact': artifact,
            'coordinate': artifact.coordinate,
            'group_id': artifact.coordinate.group,
            'artifact_id': artifact.coordinate.name,
        }
        return eval(self._code, {'__builtins__': _ALLOWED_BUILTINS}, namespace)

    def __call__(self, artifact: Artifact):
        return self._evaluate(artifact)

    def __repr__(self) -> str:
        return f"ExpressionFilter({self.expression!r})"


class FilterApplier:
    """Removes artifacts rejected by a predicate, along with all their edges"""

    @staticmethod
    def apply(registry: ArtifactRegistry, predicate: ArtifactPredicate) -> Set[Coordinate]:
        """Evaluate predicate once per artifact and remove the rejected ones"""
        logger.debug("Applying artifact-level filter...")
        rejected: Set[Coordinate] = set()
        for artifact in list(registry.all()):
            try:
                result = predicate(artifact)
            except Exception as e:
                raise FilterEvaluationError(f"Filter failed on {artifact.coordinate}: {e}") from e
            if not isinstance(result, bool):
                raise FilterEvaluationError(
                    f"Filter didn't yield a boolean result but {result!r} for {artifact.coordinate}")
            if not result:
                logger.debug(f"Not matched by artifact-level filter: {artifact.coordinate}")
                rejected.add(artifact.coordinate)

        registry.remove(rejected)
        logger.info(f"Filter removed {len(rejected)} artifacts")
        return rejected
