"""
Database package for the box league tracker.
"""

from .database_manager import DatabaseManager
from .box_league_manager import BoxLeagueManager

__all__ = ['DatabaseManager', 'BoxLeagueManager']
