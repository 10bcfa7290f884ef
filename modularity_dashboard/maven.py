"""
Runs the Maven goals that produce the raw classpath and tree files.
"""

import os
import shutil
import subprocess
from typing import List, Optional

from .config import MavenConfig
from .exceptions import ExternalToolFailure
from .logging_config import get_logger

logger = get_logger('maven')

WRAPPER_NAMES = ('mvnw', 'mvnw.cmd')
NOT_FOUND_EXIT_CODE = 127


class MavenRunner:
    """Invokes Maven in a project directory, one blocking goal at a time."""

    def __init__(self, project_dir: str, config: Optional[MavenConfig] = None):
        self.project_dir = project_dir
        self.config = config or MavenConfig()
        self.executable = self.config.executable or self._find_executable()

    def _find_executable(self) -> str:
        for name in WRAPPER_NAMES:
            if os.path.isfile(os.path.join(self.project_dir, name)):
                return os.path.join('.', name)
        return shutil.which('mvn') or 'mvn'

    def _run(self, goal_args: List[str]) -> None:
        command = [self.executable, *self.config.extra_args, *goal_args]
        logger.info(f"Running {' '.join(command)} in {self.project_dir}")
        try:
            completed = subprocess.run(command, cwd=self.project_dir)
        except FileNotFoundError as e:
            raise ExternalToolFailure(f"Maven executable not found ({e})", command, NOT_FOUND_EXIT_CODE) from e

        if completed.returncode != 0:
            raise ExternalToolFailure("Maven invocation failed", command, completed.returncode)

    def _read_output(self, file_name: str) -> str:
        path = os.path.join(self.project_dir, file_name)
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def dependency_tree(self, verbose: bool = False) -> str:
        """Run ``dependency:tree`` and return the tree text."""
        file_name = self.config.verbose_tree_file if verbose else self.config.tree_file
        args = ['dependency:tree', f'-DoutputFile={file_name}']
        if verbose:
            args.append('-Dverbose=true')
        self._run(args)
        return self._read_output(file_name)

    def build_classpath(self) -> str:
        """Run ``dependency:build-classpath`` and return the classpath text."""
        file_name = self.config.classpath_file
        self._run(['dependency:build-classpath', f'-Dmdep.outputFile={file_name}'])
        return self._read_output(file_name)
