"""
Match result models for the box league tracker.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .player import Handedness


class Result(Enum):
    """Outcome of a match from the point of view of the ``player`` field."""
    WIN = "Win"
    LOSS = "Loss"
    DRAW = "Draw"


class MatchStatus(Enum):
    """Special outcomes that override normal score semantics."""
    WALKOVER = "Walkover"
    RETIRED = "Retired"
    DEFAULTED = "Default"


@dataclass
class MatchResult:
    """A recorded result between two participants, identified by name."""
    player: str
    opponent: str
    score: str
    result: Result
    date: datetime = field(default_factory=datetime.now)
    round: str = "1"
    status: Optional[MatchStatus] = None
    handedness: Handedness = Handedness.UNKNOWN
    wtn: Optional[float] = None
    ranking: Optional[int] = None
    notes: Optional[str] = None
    player_id: Optional[str] = None
    opponent_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def winner_name(self) -> Optional[str]:
        if self.result == Result.WIN:
            return self.player
        if self.result == Result.LOSS:
            return self.opponent
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'player': self.player,
            'opponent': self.opponent,
            'score': self.score,
            'result': self.result.value,
            'date': self.date.isoformat(),
            'round': self.round,
            'status': self.status.value if self.status else None,
            'handedness': self.handedness.value,
            'wtn': self.wtn,
            'ranking': self.ranking,
            'notes': self.notes,
            'player_id': self.player_id,
            'opponent_id': self.opponent_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        status = data.get('status')
        date = data.get('date')
        return cls(
            id=data.get('id') or str(uuid.uuid4()),
            player=data['player'],
            opponent=data['opponent'],
            score=data.get('score', ''),
            result=Result(data['result']),
            date=datetime.fromisoformat(date) if date else datetime.now(),
            round=data.get('round', '1'),
            status=MatchStatus(status) if status else None,
            handedness=Handedness.from_value(data.get('handedness')),
            wtn=data.get('wtn'),
            ranking=data.get('ranking'),
            notes=data.get('notes'),
            player_id=data.get('player_id'),
            opponent_id=data.get('opponent_id'),
        )
