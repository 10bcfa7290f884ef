"""
Abstract base classes for report generation.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional

from ..exceptions import ReportGenerationError
from ..models import DashboardResult


class ReportGenerator(ABC):
    """Abstract base class for report generators."""
    
    @abstractmethod
    def generate_report(self, result: DashboardResult, output_path: Optional[str] = None) -> str:
        """
        Generate a report from a dashboard run.
        
        Args:
            result: DashboardResult to generate report from
            output_path: Optional path to write report to file
            
        Returns:
            Report content as string
        """
        pass
    
    @abstractmethod
    def get_format_name(self) -> str:
        """
        Get the name of the report format.
        
        Returns:
            String identifier for the report format (e.g., "html", "json")
        """
        pass
    
    def write_report(self, content: str, output_path: str) -> None:
        """Write report content, creating parent directories as needed."""
        try:
            parent = os.path.dirname(output_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise ReportGenerationError(str(e), self.get_format_name(), output_path) from e
