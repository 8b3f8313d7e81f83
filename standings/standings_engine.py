"""
Standings computation for box leagues.
"""

import logging
from typing import List, Sequence, Tuple

from models.fixture import PlayerStanding
from models.match import MatchResult, Result
from models.player import Player
from .participants import involves, is_opponent_side, is_player_side
from .score_parser import parse_score

logger = logging.getLogger(__name__)

POINTS_PER_WIN = 2


def count_wins(player: Player, matches: Sequence[MatchResult]) -> int:
    return sum(1 for m in matches
               if (is_player_side(m, player) and m.result == Result.WIN) or
               (is_opponent_side(m, player) and m.result == Result.LOSS))


def count_losses(player: Player, matches: Sequence[MatchResult]) -> int:
    # Draws fall into neither tally
    return sum(1 for m in matches
               if (is_player_side(m, player) and m.result == Result.LOSS) or
               (is_opponent_side(m, player) and m.result == Result.WIN))


def count_sets(player: Player, matches: Sequence[MatchResult]) -> Tuple[int, int]:
    """Sets won and lost by the player, reading each score from the player's side."""
    won = 0
    lost = 0
    for match in matches:
        as_player = is_player_side(match, player)
        for set_score in parse_score(match.score):
            if set_score.winner is None:
                continue
            if (set_score.winner == 1) == as_player:
                won += 1
            else:
                lost += 1
    return won, lost


def player_standing(player: Player, results: Sequence[MatchResult],
                    points_per_win: int = POINTS_PER_WIN) -> PlayerStanding:
    matches = [m for m in results if involves(m, player)]
    sets_won, sets_lost = count_sets(player, matches)
    return PlayerStanding(
        player=player,
        played=len(matches),
        wins=count_wins(player, matches),
        losses=count_losses(player, matches),
        sets_won=sets_won,
        sets_lost=sets_lost,
        points_per_win=points_per_win,
    )


def rank_standings(standings: Sequence[PlayerStanding]) -> List[PlayerStanding]:
    """Order by points, then set ratio, both descending. Ties keep their input order."""
    return sorted(standings, key=lambda s: (-s.points, -s.set_ratio))


def compute_standings(roster: Sequence[Player], results: Sequence[MatchResult],
                      points_per_win: int = POINTS_PER_WIN) -> List[PlayerStanding]:
    """Compute the ranked standings table for a roster from its recorded results."""
    standings = [player_standing(player, results, points_per_win) for player in roster]
    for standing in standings:
        logger.debug(f"Sets for {standing.name}: won {standing.sets_won}, lost {standing.sets_lost}")
    return rank_standings(standings)
