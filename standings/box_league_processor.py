"""
Box league processor: fixtures, standings and result recording for a league.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from models.box_league import BoxLeague
from models.fixture import Fixture, PlayerStanding
from models.match import MatchResult, MatchStatus, Result
from models.player import Player
from .fixture_generator import generate_fixtures
from .score_parser import SetScore, format_score, is_valid_match_score, match_winner
from .standings_engine import POINTS_PER_WIN, compute_standings

logger = logging.getLogger(__name__)


class BoxLeagueProcessor:
    """Derives fixtures and standings for box leagues and builds new results."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.points_per_win = self.config.get('points_per_win', POINTS_PER_WIN)

    def get_fixtures(self, league: BoxLeague) -> List[Fixture]:
        return generate_fixtures(league.players, league.matches)

    def get_outstanding_fixtures(self, league: BoxLeague) -> List[Fixture]:
        return [f for f in self.get_fixtures(league) if not f.is_played]

    def get_standings(self, league: BoxLeague) -> List[PlayerStanding]:
        return compute_standings(league.players, league.matches, self.points_per_win)

    def get_leader(self, league: BoxLeague) -> Optional[PlayerStanding]:
        standings = self.get_standings(league)
        return standings[0] if standings else None

    def get_league_statistics(self, league: BoxLeague) -> Dict[str, Any]:
        """Get progress statistics for a box league."""
        fixtures = self.get_fixtures(league)
        played = sum(1 for f in fixtures if f.is_played)
        total = len(fixtures)

        status_counts = {}
        for fixture in fixtures:
            if fixture.match is not None and fixture.match.status is not None:
                key = fixture.match.status.value
                status_counts[key] = status_counts.get(key, 0) + 1

        return {
            'players': len(league.players),
            'total_fixtures': total,
            'played_fixtures': played,
            'remaining_fixtures': total - played,
            'completion_percent': round(played / total * 100, 1) if total > 0 else 0.0,
            'recorded_results': len(league.matches),
            'status_distribution': status_counts,
        }

    def build_result(self, fixture: Fixture, sets: Sequence[SetScore],
                     status: Optional[MatchStatus] = None,
                     selected_winner: Optional[Player] = None,
                     notes: Optional[str] = None,
                     date: Optional[datetime] = None,
                     round_label: str = "1") -> MatchResult:
        """
        Build the result for a fixture from entered set scores.

        Raises ValueError when the score is not complete enough to be saved, or
        when the selected winner is not one of the two fixture players.
        """
        if selected_winner is not None and not (selected_winner == fixture.player1 or
                                                selected_winner == fixture.player2):
            raise ValueError(f"{selected_winner.name} is not a player in {fixture.versus_text}")
        if not is_valid_match_score(sets, status, selected_winner):
            raise ValueError(f"Incomplete score for {fixture.versus_text}: {format_score(sets, status)!r}")

        player1, player2 = fixture.player1, fixture.player2
        winner = match_winner(player1, player2, sets, status, selected_winner)
        return MatchResult(
            player=player1.name,
            opponent=player2.name,
            player_id=player1.id,
            opponent_id=player2.id,
            score=format_score(sets, status),
            result=Result.WIN if winner == player1 else Result.LOSS,
            date=date or datetime.now(),
            round=round_label,
            status=status,
            handedness=player2.handedness,
            wtn=player2.wtn,
            ranking=player2.ranking,
            notes=notes or None,
        )
