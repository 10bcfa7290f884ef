"""
Rewrites Maven dependency tree text with module-status markup.

The tree is handled as plain text: every registered dependency gets a
line-anchored pattern of the form
``<groupId>:<artifactId>:<type...>:<version><decoration>`` and each
match is replaced by a coloured link to the artifact. The tree prefix
(``+- ``, ``|  \\- `` ...) in front of the coordinate is left untouched.
"""

import html
import re
from typing import Optional, Tuple

from .config import AnnotationConfig
from .logging_config import get_logger
from .models import AnnotatedTree, Dependency
from .registry import DependencyRegistry

logger = get_logger('annotator')

# Informational verbose lines that do not stand for a distinct dependency
_COLLAPSED_LINE_PATTERN = re.compile(
    r'^[^\r\n]* - (?:version managed|omitted for conflict)[^\r\n]*(?:\r?\n|$)',
    re.MULTILINE,
)

_ROOT_LINE_PATTERN = re.compile(r'^([\w.\-]+):([\w.\-]+):[\w.\-]+:([\w.\-]+)\s*$')

# Output of render_dependency, left untouched when text is escaped again
_RENDERED_LINK_PATTERN = re.compile(
    r'<span style="color:[^"<>]*"><a style="color:inherit" href="[^"<>]*">[^<>]*</a></span>'
)

_BARE_AMPERSAND_PATTERN = re.compile(r'&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)')

# Coordinate boundaries shared by dependency and root patterns
_COORDINATE_START = r'(?<![\w.\-])'
_COORDINATE_END = r'(?=[:\s)]|$)'


def dependency_pattern(dependency: Dependency) -> re.Pattern:
    """
    Compile the tree-line pattern for one dependency.

    The group must not be preceded by a coordinate character and the
    version must be followed by ``:``, whitespace, ``)`` or the end of the
    line, so neighbouring coordinates such as ``1.0`` and ``1.0.1`` never
    share a line.
    """
    return re.compile(
        _COORDINATE_START
        + re.escape(dependency.group_id) + ':'
        + re.escape(dependency.artifact_id) + ':'
        + r'(?:[^:\s]+:)+?'
        + re.escape(dependency.version)
        + _COORDINATE_END + r'[^\r\n]*',
        re.MULTILINE,
    )


def _escape_fragment(text: str) -> str:
    text = _BARE_AMPERSAND_PATTERN.sub('&amp;', text)
    return text.replace('<', '&lt;').replace('>', '&gt;')


def escape_tree_text(text: str) -> str:
    """
    HTML-escape tree text so decoration cannot inject markup.

    Dependency links produced by ``TreeAnnotator.render_dependency`` and
    existing character references are kept as they are, so escaping
    already annotated text changes nothing.
    """
    parts = []
    position = 0
    for match in _RENDERED_LINK_PATTERN.finditer(text):
        parts.append(_escape_fragment(text[position:match.start()]))
        parts.append(match.group(0))
        position = match.end()
    parts.append(_escape_fragment(text[position:]))
    return ''.join(parts)


def normalize_verbose(text: str) -> str:
    """
    Flatten the verbose tree notation.

    Lines that only record version management or conflict resolution are
    removed and the parenthesised ``- (`` marker becomes ``- ``.
    """
    text = _COLLAPSED_LINE_PATTERN.sub('', text)
    return text.replace('- (', '- ')


def detect_root_coordinate(text: str, registry: Optional[DependencyRegistry] = None) -> Optional[str]:
    """
    Return the project coordinate printed on the first tree line, if any.

    The project line is ``group:artifact:packaging:version`` with no scope
    and no tree prefix. A coordinate that is itself a registered
    dependency is never taken for the project.
    """
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROOT_LINE_PATTERN.match(line)
        if not match:
            return None
        if registry is not None and match.group(1, 2, 3) in registry:
            return None
        return line.strip()
    return None


def strip_root(text: str, root_coordinate: Optional[str]) -> str:
    """
    Remove the project's own coordinate from the tree text.

    A line holding only the coordinate is dropped. Elsewhere the
    coordinate is cut out only where it stands on its own, never from
    inside a longer coordinate.
    """
    if not root_coordinate:
        return text
    kept = [line for line in text.splitlines(keepends=True) if line.strip() != root_coordinate]
    fragment = re.compile(_COORDINATE_START + re.escape(root_coordinate) + _COORDINATE_END, re.MULTILINE)
    return fragment.sub('', ''.join(kept))


class TreeAnnotator:
    """Applies registry statuses to dependency tree text."""

    def __init__(self, registry: DependencyRegistry, config: Optional[AnnotationConfig] = None):
        self.registry = registry
        self.config = config or AnnotationConfig()
        self._patterns = [(dependency, dependency_pattern(dependency)) for dependency in registry]

    def render_dependency(self, dependency: Dependency) -> str:
        """Coloured, hyperlinked ``group/artifact@version`` for one dependency."""
        url = self.config.artifact_url.format(
            group_id=dependency.group_id,
            artifact_id=dependency.artifact_id,
            version=dependency.version,
        )
        return (
            f'<span style="color:{dependency.module_status.color}">'
            f'<a style="color:inherit" href="{html.escape(url)}">{dependency.display_name}</a>'
            '</span>'
        )

    def substitute(self, text: str) -> Tuple[str, int]:
        """
        Rewrite every tree line that names a registered dependency.

        Returns:
            Tuple of (rewritten text, number of rewritten lines)
        """
        total = 0
        for dependency, pattern in self._patterns:
            replacement = self.render_dependency(dependency)
            text, count = pattern.subn(lambda _match: replacement, text)
            if count:
                logger.debug(f"Annotated {count} line(s) for {dependency.gav}")
            total += count
        return text, total

    def annotate(self, text: str, verbose: bool = False) -> AnnotatedTree:
        """
        Annotate one tree variant.

        Args:
            text: Raw tree text as written by ``dependency:tree``
            verbose: Whether ``text`` is the verbose variant

        Returns:
            AnnotatedTree with the rewritten text and the number of lines
            that matched a dependency
        """
        text = escape_tree_text(text)
        root = self.config.root_coordinate or detect_root_coordinate(text, self.registry)
        text = strip_root(text, root)
        if verbose:
            text = normalize_verbose(text)

        annotated, count = self.substitute(text)
        variant = "verbose" if verbose else "plain"
        logger.debug(f"Annotated {count} line(s) in the {variant} tree")
        return AnnotatedTree(variant=variant, text=annotated, match_count=count)
