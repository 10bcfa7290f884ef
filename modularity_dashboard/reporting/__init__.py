"""
Reporting Module

Contains report generators for the dashboard page (HTML) and a machine
readable summary (JSON).
"""

from .base import ReportGenerator
from .html_reporter import HTMLReporter
from .json_reporter import JSONReporter

__all__ = ['ReportGenerator', 'HTMLReporter', 'JSONReporter']
