"""
Round-robin fixture generation for box leagues.
"""

import logging
from typing import List, Optional, Sequence

from models.fixture import Fixture
from models.match import MatchResult
from models.player import Player
from .participants import is_between

logger = logging.getLogger(__name__)


def find_match_result(player1: Player, player2: Player,
                      results: Sequence[MatchResult]) -> Optional[MatchResult]:
    """Return the first recorded result between the two players, in list order."""
    for match in results:
        if is_between(match, player1, player2):
            return match
    return None


def generate_fixtures(roster: Sequence[Player], results: Sequence[MatchResult]) -> List[Fixture]:
    """
    Build every pairing of the roster, each bound to its recorded result if any.

    Pairs come out in roster order: (0, 1), (0, 2), ..., (1, 2), ...
    A roster of fewer than two players yields no fixtures.
    """
    fixtures = []
    for i in range(len(roster)):
        for j in range(i + 1, len(roster)):
            player1, player2 = roster[i], roster[j]
            fixtures.append(Fixture(player1, player2, find_match_result(player1, player2, results)))

    logger.debug(f"Generated {len(fixtures)} fixtures for {len(roster)} players")
    return fixtures


def played_fixtures(roster: Sequence[Player], results: Sequence[MatchResult]) -> List[Fixture]:
    return [f for f in generate_fixtures(roster, results) if f.is_played]


def unplayed_fixtures(roster: Sequence[Player], results: Sequence[MatchResult]) -> List[Fixture]:
    return [f for f in generate_fixtures(roster, results) if not f.is_played]
