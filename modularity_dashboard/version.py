"""
Tool name and version strings shown by ``--version`` and on reports.
"""

from . import __version__

TOOL_NAME = "Modularization Dashboard"


def get_version() -> str:
    return __version__


def get_full_name_with_version() -> str:
    """``Modularization Dashboard v<version>``, used in report footers."""
    return f"{TOOL_NAME} v{get_version()}"
