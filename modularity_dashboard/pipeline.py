"""
End-to-end dashboard run: classpath and tree text in, report out.
"""

import os
import time
from typing import Optional

from .annotator import TreeAnnotator
from .config import Config
from .coordinates import parse_classpath
from .inspector import ModuleStatusInspector
from .logging_config import get_logger
from .maven import MavenRunner
from .models import DashboardResult
from .reporting import HTMLReporter, JSONReporter

logger = get_logger('pipeline')


def build_dashboard(classpath: str, tree: str, verbose_tree: Optional[str] = None,
                    config: Optional[Config] = None,
                    inspector: Optional[ModuleStatusInspector] = None,
                    project_name: Optional[str] = None) -> DashboardResult:
    """
    Classify the classpath and annotate the tree text.

    Args:
        classpath: Classpath text as written by ``dependency:build-classpath``
        tree: Plain tree text as written by ``dependency:tree``
        verbose_tree: Optional verbose tree text
        config: Configuration, defaults when not given
        inspector: Inspector to use, built from ``config`` when not given
        project_name: Name shown on the report

    Raises:
        MalformedCoordinateError: If a classpath entry cannot be parsed
        DuplicateCoordinateError: If a coordinate appears with two statuses
    """
    config = config or Config()
    started = time.time()

    dependencies = parse_classpath(classpath, marker=config.inspection.repository_marker)
    logger.info(f"Checking {len(dependencies)} dependencies for module infos")

    if inspector is None:
        inspector = ModuleStatusInspector(config.inspection.max_java_release)
    errors = []
    registry = inspector.classify(dependencies, errors)

    annotator = TreeAnnotator(registry, config.annotation)
    plain = annotator.annotate(tree)
    verbose = annotator.annotate(verbose_tree, verbose=True) if verbose_tree is not None else None

    return DashboardResult(
        registry=registry,
        plain_tree=plain,
        verbose_tree=verbose,
        errors=errors,
        project_name=project_name,
        processing_time=time.time() - started,
    )


def run(project_dir: str, config: Optional[Config] = None) -> DashboardResult:
    """
    Run Maven in ``project_dir``, build the dashboard and write the reports.

    Nothing is written unless every step succeeds.
    """
    config = config or Config()
    runner = MavenRunner(project_dir, config.maven)

    tree = runner.dependency_tree()
    verbose_tree = runner.dependency_tree(verbose=True) if config.maven.verbose_tree else None
    classpath = runner.build_classpath()

    result = build_dashboard(
        classpath,
        tree,
        verbose_tree,
        config=config,
        project_name=os.path.basename(os.path.abspath(project_dir)),
    )

    HTMLReporter(config.output).generate_report(result, config.output.output_path)
    logger.info(f"Wrote dashboard to {config.output.output_path}")

    if config.output.json_path:
        JSONReporter().generate_report(result, config.output.json_path)
        logger.info(f"Wrote summary to {config.output.json_path}")

    return result
