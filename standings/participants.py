"""
Matching of recorded results to roster players.

A side of a result that carries a player id is matched by id. Older results
only carry names and are matched by name equality.
"""

from models.match import MatchResult
from models.player import Player


def is_player_side(match: MatchResult, player: Player) -> bool:
    if match.player_id:
        return match.player_id == player.id
    return match.player == player.name


def is_opponent_side(match: MatchResult, player: Player) -> bool:
    if match.opponent_id:
        return match.opponent_id == player.id
    return match.opponent == player.name


def involves(match: MatchResult, player: Player) -> bool:
    return is_player_side(match, player) or is_opponent_side(match, player)


def is_between(match: MatchResult, a: Player, b: Player) -> bool:
    """True when the result is a match between ``a`` and ``b`` in either orientation."""
    return ((is_player_side(match, a) and is_opponent_side(match, b)) or
            (is_player_side(match, b) and is_opponent_side(match, a)))
