"""
Custom exceptions for the Modularization Dashboard.
"""

from typing import Optional, Sequence, Tuple


class DashboardError(Exception):
    """Base exception class for all Modularization Dashboard errors."""
    pass


class ExternalToolFailure(DashboardError):
    """Raised when an invocation of the build tool fails."""
    
    def __init__(self, message: str, command: Sequence[str] = None, exit_code: int = 1):
        self.command = list(command) if command else []
        self.exit_code = exit_code
        
        if self.command:
            message = f"{message}: '{' '.join(self.command)}' exited with code {exit_code}"
        
        super().__init__(message)


class MalformedCoordinateError(DashboardError):
    """Raised when a classpath entry does not follow the local repository layout."""
    
    def __init__(self, message: str, path: str = None):
        self.path = path
        
        if path:
            message = f"Cannot derive coordinates from '{path}': {message}"
        
        super().__init__(message)


class ArtifactUnreadableError(DashboardError):
    """Raised when an artifact archive cannot be opened or read."""
    
    def __init__(self, message: str, path: str = None, coordinate: Optional[Tuple[str, str, str]] = None):
        self.path = path
        self.coordinate = coordinate
        
        if coordinate:
            message = f"Unreadable artifact {':'.join(coordinate)}: {message}"
            if path:
                message += f" (path: {path})"
        elif path:
            message = f"Unreadable artifact '{path}': {message}"
        
        super().__init__(message)


class DuplicateCoordinateError(DashboardError):
    """Raised when the classpath lists one coordinate twice with conflicting statuses."""
    
    def __init__(self, coordinate: Tuple[str, str, str], existing_status=None, new_status=None):
        self.coordinate = coordinate
        self.existing_status = existing_status
        self.new_status = new_status
        
        message = f"Duplicate coordinate {':'.join(coordinate)}"
        if existing_status is not None and new_status is not None:
            message += f" recorded as {existing_status.value} and {new_status.value}"
        
        super().__init__(message)


class ConfigurationError(DashboardError):
    """Raised when configuration is invalid."""
    pass


class ReportGenerationError(DashboardError):
    """Raised when report generation fails."""
    
    def __init__(self, message: str, format_name: str = None, output_path: str = None):
        self.format_name = format_name
        self.output_path = output_path
        
        if format_name:
            message = f"Report generation error for format '{format_name}': {message}"
            if output_path:
                message += f" (output: {output_path})"
        
        super().__init__(message)
