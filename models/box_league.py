"""
Box league model for the box league tracker.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .match import MatchResult
from .player import Player

MIN_PLAYERS = 2


@dataclass
class BoxLeague:
    """A round-robin group owning its roster and its ordered result list."""
    name: str
    box: str
    season: str
    players: List[Player]
    matches: List[MatchResult] = field(default_factory=list)
    league_url: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if self.matches is None:
            self.matches = []
        if len(self.players) < MIN_PLAYERS:
            raise ValueError(
                f"Box league '{self.name}' needs at least {MIN_PLAYERS} players, got {len(self.players)}"
            )

    def set_players(self, players: List[Player]) -> None:
        """Replace the roster. Existing results are left untouched."""
        if len(players) < MIN_PLAYERS:
            raise ValueError(f"Box league '{self.name}' needs at least {MIN_PLAYERS} players")
        self.players = list(players)

    def add_match(self, match: MatchResult) -> None:
        self.matches.append(match)

    def replace_match(self, match: MatchResult) -> bool:
        """Replace the result with the same id in place. Returns False if absent."""
        for index, existing in enumerate(self.matches):
            if existing.id == match.id:
                self.matches[index] = match
                return True
        return False

    def remove_match(self, match_id: str) -> bool:
        """Remove the result with the given id, keeping the order of the rest."""
        remaining = [m for m in self.matches if m.id != match_id]
        removed = len(remaining) != len(self.matches)
        self.matches = remaining
        return removed

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'box': self.box,
            'season': self.season,
            'league_url': self.league_url,
            'players': [p.to_dict() for p in self.players],
            'matches': [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoxLeague":
        return cls(
            id=data.get('id') or str(uuid.uuid4()),
            name=data['name'],
            box=data.get('box', ''),
            season=data.get('season', ''),
            league_url=data.get('league_url'),
            players=[Player.from_dict(p) for p in data.get('players', [])],
            matches=[MatchResult.from_dict(m) for m in data.get('matches', [])],
        )
