"""
Command line interface for the Modularization Dashboard.
"""

import argparse
import sys
import time
from typing import List, Optional

from .config import get_default_config_path, load_config
from .exceptions import DashboardError, ExternalToolFailure
from .logging_config import get_logger, setup_logging
from .pipeline import run
from .version import get_full_name_with_version

logger = get_logger('cli')

DEFAULT_PROJECT_DIR = "demo"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='modularity-dashboard',
        description='Classify Maven dependencies by Java Module System adoption and render an annotated tree',
    )
    parser.add_argument('project_dir', nargs='?', default=DEFAULT_PROJECT_DIR,
                        help=f'Maven project directory (default: {DEFAULT_PROJECT_DIR})')
    parser.add_argument('-c', '--config', help='Path to a YAML configuration file')
    parser.add_argument('-o', '--output', help='Output HTML file path (default: site/index.html)')
    parser.add_argument('--json', dest='json_path', help='Also write a JSON summary to this path')
    parser.add_argument('--no-verbose-tree', action='store_true',
                        help='Skip the verbose dependency tree')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level')
    parser.add_argument('--log-file', help='Also write a debug log to this file')
    parser.add_argument('--version', action='version', version=get_full_name_with_version())
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the dashboard and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config or get_default_config_path())
    except DashboardError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    if args.output:
        config.output.output_path = args.output
    if args.json_path:
        config.output.json_path = args.json_path
    if args.no_verbose_tree:
        config.maven.verbose_tree = False
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_file:
        config.logging.log_file = args.log_file
    if args.verbose:
        config.logging.verbose = True

    setup_logging(config.logging.level, config.logging.log_file, config.logging.verbose)

    start_time = time.time()
    try:
        result = run(args.project_dir, config)
    except ExternalToolFailure as e:
        logger.error(str(e))
        return e.exit_code
    except DashboardError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    logger.info(f"Classified {result.registry.total()} dependencies in {time.time() - start_time:.2f}s")
    return 0


if __name__ == '__main__':
    sys.exit(main())
