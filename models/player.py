"""
Player data models for the box league tracker.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Handedness(Enum):
    """Playing hand of a player."""
    RIGHT = "Right"
    LEFT = "Left"
    UNKNOWN = "Unknown"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "Handedness":
        """Parse a stored handedness value, falling back to UNKNOWN."""
        if value is None:
            return cls.UNKNOWN
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        return cls.UNKNOWN


@dataclass(eq=False)
class Player:
    """A roster entry in a box league. Identity is the id, never the name."""
    name: str
    wtn: Optional[float] = None
    ranking: Optional[int] = None
    handedness: Handedness = Handedness.RIGHT
    notes: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __eq__(self, other):
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'wtn': self.wtn,
            'ranking': self.ranking,
            'handedness': self.handedness.value,
            'notes': self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        return cls(
            id=data.get('id') or str(uuid.uuid4()),
            name=data['name'],
            wtn=data.get('wtn'),
            ranking=data.get('ranking'),
            handedness=Handedness.from_value(data.get('handedness')),
            notes=data.get('notes'),
        )
