"""
Configuration package for the box league tracker.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
