"""
Reports package for the box league tracker.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
