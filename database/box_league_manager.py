"""
Box league management for the box league tracker database.
"""

import json
import sqlite3
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from models.box_league import BoxLeague
from models.fixture import Fixture
from models.match import MatchResult, MatchStatus
from models.player import Player
from standings.box_league_processor import BoxLeagueProcessor
from standings.score_parser import SetScore

logger = logging.getLogger(__name__)

DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class BoxLeagueManager:
    """Manages box league records. Every change rewrites the whole collection."""

    def __init__(self, database_manager):
        self.db_manager = database_manager
        self.config = database_manager.config
        self.storage_key = self.config.get('storage_key', 'MatchTrackerData')
        self.processor = BoxLeagueProcessor(self.config)

    def _read_stored_entries(self) -> List[Dict[str, Any]]:
        """Return the raw league entries of the stored blob. Raises on unreadable data."""
        blob = self.db_manager.read_blob(self.storage_key)
        if blob is None:
            return []
        entries = json.loads(blob).get('box_leagues', [])
        if not isinstance(entries, list):
            raise ValueError("stored box leagues are not a list")
        return entries

    def _load_all(self) -> List[BoxLeague]:
        """Load every stored league. Raises if any part of the stored data cannot be read."""
        return [BoxLeague.from_dict(item) for item in self._read_stored_entries()]

    def _load_for_write(self) -> Optional[List[BoxLeague]]:
        """Load the full collection for a change, or None if it cannot be read completely."""
        try:
            return self._load_all()
        except sqlite3.Error as e:
            logger.error(f"Error reading box leagues, change not saved: {e}")
        except DECODE_ERRORS as e:
            logger.error(f"Stored box leagues could not be decoded, change not saved: {e}")
        return None

    def load_box_leagues(self) -> List[BoxLeague]:
        """Load all readable box leagues. Unreadable entries are logged and skipped."""
        try:
            entries = self._read_stored_entries()
        except sqlite3.Error as e:
            logger.error(f"Error reading box leagues: {e}")
            return []
        except DECODE_ERRORS as e:
            logger.error(f"Error decoding stored box leagues: {e}")
            return []

        leagues = []
        for index, item in enumerate(entries):
            try:
                leagues.append(BoxLeague.from_dict(item))
            except DECODE_ERRORS as e:
                logger.error(f"Skipping stored box league #{index}: {e}")
        logger.debug(f"Loaded {len(leagues)} of {len(entries)} box leagues")
        return leagues

    def save_box_leagues(self, leagues: Sequence[BoxLeague]) -> bool:
        """Save all box leagues. Returns False if the write failed."""
        payload = json.dumps({'box_leagues': [league.to_dict() for league in leagues]})
        try:
            self.db_manager.write_blob(self.storage_key, payload)
            return True
        except sqlite3.Error as e:
            logger.error(f"Failed to save data: {e}")
            return False

    def get_box_league(self, league_id: str) -> Optional[BoxLeague]:
        for league in self.load_box_leagues():
            if league.id == league_id:
                return league
        return None

    def add_box_league(self, league: BoxLeague) -> bool:
        leagues = self._load_for_write()
        if leagues is None:
            return False
        leagues.append(league)
        logger.info(f"Added box league {league.name} ({league.box}, {league.season})")
        return self.save_box_leagues(leagues)

    def update_box_league(self, league: BoxLeague) -> bool:
        """Replace a stored league with the same id."""
        leagues = self._load_for_write()
        if leagues is None:
            return False
        for index, existing in enumerate(leagues):
            if existing.id == league.id:
                leagues[index] = league
                logger.info(f"Updated box league {league.name}")
                return self.save_box_leagues(leagues)
        logger.warning(f"Box league {league.id} not found for update")
        return False

    def delete_box_league(self, league_id: str) -> bool:
        leagues = self._load_for_write()
        if leagues is None:
            return False
        remaining = [league for league in leagues if league.id != league_id]
        if len(remaining) == len(leagues):
            logger.warning(f"Box league {league_id} not found for deletion")
            return False
        logger.info(f"Deleted box league {league_id}")
        return self.save_box_leagues(remaining)

    def _modify_league(self, league_id: str, change: Callable[[BoxLeague], bool]) -> bool:
        leagues = self._load_for_write()
        if leagues is None:
            return False
        for league in leagues:
            if league.id == league_id:
                if not change(league):
                    return False
                return self.save_box_leagues(leagues)
        logger.warning(f"Box league {league_id} not found")
        return False

    def add_match(self, league_id: str, match: MatchResult) -> bool:
        def append(league: BoxLeague) -> bool:
            league.add_match(match)
            return True
        return self._modify_league(league_id, append)

    def update_match(self, league_id: str, match: MatchResult) -> bool:
        return self._modify_league(league_id, lambda league: league.replace_match(match))

    def remove_match(self, league_id: str, match_id: str) -> bool:
        return self._modify_league(league_id, lambda league: league.remove_match(match_id))

    def update_players(self, league_id: str, players: Sequence[Player]) -> bool:
        """Replace a league roster. Results already recorded are kept as they are."""
        def replace(league: BoxLeague) -> bool:
            league.set_players(list(players))
            return True
        return self._modify_league(league_id, replace)

    def record_fixture_result(self, league_id: str, fixture: Fixture, sets: Sequence[SetScore],
                              status: Optional[MatchStatus] = None,
                              selected_winner: Optional[Player] = None,
                              notes: Optional[str] = None) -> Optional[MatchResult]:
        """
        Save a result for a fixture, replacing any result already bound to it.
        Returns the new result, or None if the score was incomplete or saving failed.
        """
        try:
            match = self.processor.build_result(fixture, sets, status, selected_winner, notes)
        except ValueError as e:
            logger.warning(f"Not saving result: {e}")
            return None

        def record(league: BoxLeague) -> bool:
            if fixture.match is not None:
                league.remove_match(fixture.match.id)
            league.add_match(match)
            return True

        if not self._modify_league(league_id, record):
            return None
        logger.info(f"Recorded {fixture.versus_text}: {match.score}")
        return match
