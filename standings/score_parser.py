"""
Score string parsing and validation for box league results.

Scores are stored as whitespace separated set tokens such as ``"6-4 7-5"``.
Each token reads from the point of view of the ``player`` field of the result.
Status markers (``w/o``, ``def.``, ``ret.``) may appear alongside the sets.
"""

import logging
import re
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from models.match import MatchResult, MatchStatus

logger = logging.getLogger(__name__)

SETS_TO_WIN = 2

WALKOVER_TEXT = "w/o"
DEFAULTED_TEXT = "def."
RETIRED_TEXT = "ret."
STATUS_MARKERS = {WALKOVER_TEXT, DEFAULTED_TEXT, RETIRED_TEXT}

# Commas are tolerated so that scores saved as "6-4, 7-5" still count
_TOKEN_SEPARATOR = re.compile(r'[\s,]+')
# Optional tie-break points after the set, e.g. "7-6(5)"
_SET_PATTERN = re.compile(r'^(\d+)-(\d+)(?:\(\d+\))?$')


class ScoreParseError(ValueError):
    """Raised by strict parsing when a token is not a set score."""


class SetScore(NamedTuple):
    """Games won by each side in a single set."""
    first: int
    second: int

    @property
    def winner(self) -> Optional[int]:
        """1 or 2 for the side that took the set, None when level."""
        if self.first > self.second:
            return 1
        if self.second > self.first:
            return 2
        return None

    def flipped(self) -> "SetScore":
        return SetScore(self.second, self.first)

    def __str__(self) -> str:
        return f"{self.first}-{self.second}"


def parse_score(text: Optional[str], strict: bool = False) -> List[SetScore]:
    """
    Parse a score string into set scores.

    Tokens that are not ``<int>-<int>`` are skipped. With ``strict`` a malformed
    token raises ScoreParseError instead; status markers are accepted either way.
    """
    if not text:
        return []

    sets = []
    for token in _TOKEN_SEPARATOR.split(text.strip()):
        if not token:
            continue
        match = _SET_PATTERN.match(token)
        if match:
            sets.append(SetScore(int(match.group(1)), int(match.group(2))))
        elif token.lower() in STATUS_MARKERS:
            continue
        elif strict:
            raise ScoreParseError(f"Invalid set score '{token}' in '{text}'")
        else:
            logger.debug(f"Skipping unparsable score token '{token}' in '{text}'")
    return sets


def is_valid_set(a: int, b: int) -> bool:
    """Check a completed set: no ties, someone reaches 6, two clear games below 7."""
    if a == b:
        return False
    if a < 6 and b < 6:
        return False
    if max(a, b) < 7 and abs(a - b) < 2:
        return False
    return True


def sets_won(sets: Sequence[SetScore]) -> Tuple[int, int]:
    """Count the sets taken by each side."""
    first = sum(1 for s in sets if s.winner == 1)
    second = sum(1 for s in sets if s.winner == 2)
    return first, second


def result_sets(match: MatchResult) -> Tuple[int, int]:
    """Sets won by the ``player`` and ``opponent`` sides of a recorded result."""
    return sets_won(parse_score(match.score))


def is_valid_match_score(sets: Sequence[SetScore], status: Optional[MatchStatus] = None,
                         selected_winner: Any = None) -> bool:
    """
    Decide whether a result is complete enough to be saved.

    Walkovers and defaults need no score. A retirement needs a selected winner and
    at least one set won by either side. A normal match needs at least one valid
    set and exactly one side on two sets.
    """
    if status in (MatchStatus.WALKOVER, MatchStatus.DEFAULTED):
        return True

    first, second = sets_won(sets)
    if status == MatchStatus.RETIRED:
        return selected_winner is not None and (first > 0 or second > 0)

    has_valid_set = any(is_valid_set(s.first, s.second) for s in sets)
    return has_valid_set and (first == SETS_TO_WIN) != (second == SETS_TO_WIN)


def format_score(sets: Sequence[SetScore], status: Optional[MatchStatus] = None) -> str:
    """Render the display/storage text for a result."""
    if status == MatchStatus.WALKOVER:
        return WALKOVER_TEXT
    if status == MatchStatus.DEFAULTED:
        return DEFAULTED_TEXT

    text = " ".join(str(s) for s in sets)
    if status == MatchStatus.RETIRED:
        text += f" {RETIRED_TEXT}"
    return text


def match_winner(player1, player2, sets: Sequence[SetScore],
                 status: Optional[MatchStatus] = None, selected_winner=None):
    """
    Pick the winner of a fixture being recorded.

    Walkovers and defaults go to ``player1``. A retirement goes to the selected
    winner (``player1`` if none). Otherwise the side with more sets wins.
    """
    if status in (MatchStatus.WALKOVER, MatchStatus.DEFAULTED):
        return player1
    if status == MatchStatus.RETIRED:
        return selected_winner if selected_winner is not None else player1

    first, second = sets_won(sets)
    return player1 if first > second else player2
