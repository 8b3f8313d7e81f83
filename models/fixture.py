"""
Derived fixture and standing models. These are recomputed on every read and never stored.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .match import MatchResult
from .player import Player


@dataclass(frozen=True)
class Fixture:
    """One pairing of two roster players, played or unplayed."""
    player1: Player
    player2: Player
    match: Optional[MatchResult] = field(default=None, compare=False)

    @property
    def is_played(self) -> bool:
        return self.match is not None

    @property
    def versus_text(self) -> str:
        return f"{self.player1.name} vs {self.player2.name}"

    def result_summary(self) -> Optional[Tuple[str, Optional[str]]]:
        """Score and winner name of the bound result, or None when unplayed."""
        if self.match is None:
            return None
        return self.match.score, self.match.winner_name


@dataclass(frozen=True)
class PlayerStanding:
    """Aggregated box league performance of one player."""
    player: Player
    played: int = 0
    wins: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points_per_win: int = 2

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def points(self) -> int:
        return self.wins * self.points_per_win

    @property
    def set_ratio(self) -> float:
        # No sets lost: the raw count stands in for an infinite ratio
        if self.sets_lost == 0:
            return float(self.sets_won)
        return self.sets_won / self.sets_lost
