"""
Standings package for the box league tracker.
"""

from .score_parser import (SetScore, ScoreParseError, parse_score, is_valid_set, sets_won, result_sets,
                           is_valid_match_score, format_score, match_winner)
from .fixture_generator import generate_fixtures, find_match_result, played_fixtures, unplayed_fixtures
from .standings_engine import compute_standings, rank_standings
from .box_league_processor import BoxLeagueProcessor

__all__ = ['SetScore', 'ScoreParseError', 'parse_score', 'is_valid_set', 'sets_won', 'result_sets',
           'is_valid_match_score', 'format_score', 'match_winner',
           'generate_fixtures', 'find_match_result', 'played_fixtures', 'unplayed_fixtures',
           'compute_standings', 'rank_standings', 'BoxLeagueProcessor']
