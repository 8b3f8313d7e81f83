"""
Models package for the box league tracker.

This package contains all data models and dataclasses used throughout the system.
"""

from .player import Player, Handedness
from .match import MatchResult, MatchStatus, Result
from .box_league import BoxLeague
from .fixture import Fixture, PlayerStanding

__all__ = ['Player', 'Handedness', 'MatchResult', 'MatchStatus', 'Result',
           'BoxLeague', 'Fixture', 'PlayerStanding']
