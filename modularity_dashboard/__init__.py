"""
Modularization Dashboard

A Python tool for inspecting the resolved dependencies of a Maven build,
classifying each one by its level of Java Module System adoption, and
rendering an annotated dependency tree as an HTML page.
"""

__version__ = "0.1.0"
__author__ = "Modularization Dashboard Team"


def get_version():
    """Get the current version of the Modularization Dashboard."""
    return __version__


def main(argv=None):
    """Run the command line interface."""
    from .cli import main as cli_main
    return cli_main(argv)


__all__ = ['get_version', 'main']
