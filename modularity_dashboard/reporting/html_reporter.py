"""
HTML dashboard page generator.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .base import ReportGenerator
from ..config import OutputConfig
from ..models import DashboardResult, ModuleStatus
from ..version import get_full_name_with_version

TEMPLATE_NAME = "index.html.j2"
TEMPLATES_FOLDER = Path(__file__).parent / "templates"


class HTMLReporter(ReportGenerator):
    """
    Renders the summary and the annotated dependency trees into a single
    self-contained HTML page.
    """
    
    def __init__(self, config: Optional[OutputConfig] = None):
        self.config = config or OutputConfig()
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATES_FOLDER),
            autoescape=select_autoescape(['html', 'j2']),
            keep_trailing_newline=True,
        )
    
    def generate_report(self, result: DashboardResult, output_path: Optional[str] = None) -> str:
        """
        Generate the dashboard page.
        
        Args:
            result: DashboardResult with registry and annotated trees
            output_path: Optional path to write the page to
            
        Returns:
            HTML content as string
        """
        template = self.env.get_template(TEMPLATE_NAME)
        content = template.render(**self.get_template_context(result))
        
        if output_path:
            self.write_report(content, output_path)
        
        return content
    
    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "html"
    
    def get_template_context(self, result: DashboardResult) -> Dict[str, Any]:
        groups = result.registry.group_by_status()
        unreadable = groups[ModuleStatus.UNREADABLE]
        
        # Annotated trees already carry their markup
        return {
            "title": self.config.title,
            "intro": self.config.intro,
            "project_name": result.project_name,
            "summary": [groups[status] for status in ModuleStatus.main_statuses()],
            "unreadable": unreadable if unreadable.count else None,
            "total": result.registry.total(),
            "errors": result.errors,
            "plain_tree": Markup(result.plain_tree.text),
            "verbose_tree": Markup(result.verbose_tree.text) if result.verbose_tree else None,
            "generator": get_full_name_with_version(),
        }
