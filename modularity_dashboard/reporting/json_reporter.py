"""
JSON summary generator for dashboard runs.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .base import ReportGenerator
from ..models import DashboardResult, ModuleStatus
from ..version import TOOL_NAME, get_version


class JSONReporter(ReportGenerator):
    """
    Writes the per-status summary and dependency lists as JSON.
    The annotated trees are left to the HTML report.
    """
    
    def __init__(self, include_metadata: bool = True, pretty_print: bool = True):
        self.include_metadata = include_metadata
        self.pretty_print = pretty_print
    
    def generate_report(self, result: DashboardResult, output_path: Optional[str] = None) -> str:
        report_data = self.get_structured_data(result)
        
        if self.pretty_print:
            content = json.dumps(report_data, indent=2, ensure_ascii=False)
        else:
            content = json.dumps(report_data, ensure_ascii=False)
        
        if output_path:
            self.write_report(content, output_path)
        
        return content
    
    def get_format_name(self) -> str:
        """Get the name of the report format."""
        return "json"
    
    def get_structured_data(self, result: DashboardResult) -> Dict[str, Any]:
        """
        Build the report data structure.
        
        Args:
            result: Dashboard run to structure
            
        Returns:
            Dictionary with summary, dependencies and errors
        """
        groups = result.registry.group_by_status()
        
        summary = {"total": result.registry.total()}
        for status in ModuleStatus:
            summary[status.value] = {
                "count": groups[status].count,
                "percentage": groups[status].percentage,
            }
        
        report = {
            "summary": summary,
            "dependencies": [
                {
                    "group_id": dep.group_id,
                    "artifact_id": dep.artifact_id,
                    "version": dep.version,
                    "file_name": dep.file_name,
                    "path": dep.path,
                    "module_status": dep.module_status.value,
                }
                for dep in result.registry
            ],
            "errors": list(result.errors),
        }
        
        if self.include_metadata:
            report["metadata"] = {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "generator": TOOL_NAME,
                "version": get_version(),
                "project": result.project_name,
                "processing_time_seconds": round(result.processing_time, 2),
            }
        
        return report
