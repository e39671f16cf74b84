"""Click CLI: scan folders for pom.xml files and write a DOT dependency graph."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import Config
from .exceptions import PomAnalyzerError
from .filters import ExpressionFilter
from .pipeline import generate_dot

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else getattr(logging, Config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")


@click.command()
@click.argument("folders", nargs=-1, required=True,
                type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Enable debug output on stderr")
@click.option("--maxdepth", "max_depth", type=click.IntRange(min=0), default=None,
              help="How many subdirectory levels to search for pom.xml files [env POM_ANALYZER_MAX_DEPTH]")
@click.option("--filter", "filter_expr", default=Config.DEFAULT_FILTER, show_default=True,
              help="Python expression over artifact/group_id/artifact_id deciding which artifacts to keep")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              help="Write DOT output to this file instead of stdout")
@click.option("--keep-going", is_flag=True, help="Skip malformed pom.xml files instead of aborting")
@click.option("--summary", is_flag=True, help="Print a cycle summary to stderr")
def cli(folders: Tuple[Path, ...], verbose: bool, max_depth: Optional[int], filter_expr: str,
        output: Optional[Path], keep_going: bool, summary: bool):
    """Search FOLDERS for pom.xml files and write a Graphviz dependency graph."""
    _configure_logging(verbose)
    try:
        if max_depth is None:
            max_depth = Config.max_depth()
        predicate = ExpressionFilter(filter_expr)
        if output is not None:
            with open(output, "w", encoding="utf-8") as out:
                result = generate_dot(folders, predicate, max_depth, out, keep_going=keep_going)
        else:
            result = generate_dot(folders, predicate, max_depth, sys.stdout, keep_going=keep_going)
    except PomAnalyzerError as e:
        logger.debug("Analysis failed", exc_info=True)
        raise click.ClickException(str(e))

    if summary:
        report = result.report
        click.echo(f"{len(result.registry)} artifacts, {len(result.removed)} filtered out, "
                   f"{len(result.failed_files)} pom.xml files skipped", err=True)
        if report.has_cycles:
            click.echo(f"{len(report.cycles)} cycle(s) found:", err=True)
            for cycle in report.cycles:
                click.echo(f"  {cycle.describe()}", err=True)
        else:
            click.echo("No circular dependencies found.", err=True)


def main():
    cli()


if __name__ == "__main__":
    main()
