"""
Report generator for the box league tracker.
"""

import os
import pandas as pd
import logging
from typing import Dict, Optional
from models.box_league import BoxLeague
from database.database_manager import DatabaseManager
from database.box_league_manager import BoxLeagueManager
from standings.box_league_processor import BoxLeagueProcessor

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generates standings and fixture reports for box leagues."""
    
    def __init__(self, database_manager: DatabaseManager, processor: Optional[BoxLeagueProcessor] = None):
        self.db_manager = database_manager
        self.box_league_manager = BoxLeagueManager(database_manager)
        self.processor = processor or BoxLeagueProcessor(database_manager.config)
        self.date_format = database_manager.config.get('date_format', '%d %b %Y')
    
    def standings_dataframe(self, league: BoxLeague) -> pd.DataFrame:
        """Build the standings table of a league, one row per player in rank order."""
        data = []
        for position, standing in enumerate(self.processor.get_standings(league), 1):
            data.append({
                'Pos': position,
                'Player': standing.name,
                'P': standing.played,
                'W': standing.wins,
                'L': standing.losses,
                'Sets': f"{standing.sets_won}-{standing.sets_lost}",
                'Set Ratio': round(standing.set_ratio, 2),
                'Pts': standing.points
            })
        return pd.DataFrame(data, columns=['Pos', 'Player', 'P', 'W', 'L', 'Sets', 'Set Ratio', 'Pts'])
    
    def fixtures_dataframe(self, league: BoxLeague) -> pd.DataFrame:
        """Build the fixture list of a league with the recorded result of each pairing."""
        data = []
        for fixture in self.processor.get_fixtures(league):
            match = fixture.match
            data.append({
                'Match': fixture.versus_text,
                'Played': fixture.is_played,
                'Score': match.score if match else '',
                'Winner': (match.winner_name or '') if match else '',
                'Status': match.status.value if match and match.status else '',
                'Date': match.date.strftime(self.date_format) if match else '',
                'Notes': (match.notes or '') if match else ''
            })
        return pd.DataFrame(data, columns=['Match', 'Played', 'Score', 'Winner', 'Status', 'Date', 'Notes'])
    
    def generate_standings_report(self, league: BoxLeague, output_file: str) -> int:
        """
        Export the standings of a league to CSV.
        Returns the number of players in the report.
        """
        df = self.standings_dataframe(league)
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated standings report for {league.name} with {len(df)} players: {output_file}")
        return len(df)
    
    def generate_fixtures_report(self, league: BoxLeague, output_file: str, unplayed_only: bool = False) -> int:
        """
        Export the fixture list of a league to CSV.
        Returns the number of fixtures in the report.
        """
        df = self.fixtures_dataframe(league)
        if unplayed_only:
            df = df[~df['Played'].astype(bool)]
        
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated fixtures report for {league.name} with {len(df)} fixtures: {output_file}")
        return len(df)
    
    def generate_summary_report(self, output_file: str) -> int:
        """Export one line of progress statistics per stored box league."""
        leagues = self.box_league_manager.load_box_leagues()
        if not leagues:
            logger.warning("No box leagues found for summary report")
            return 0
        
        data = []
        for league in leagues:
            stats = self.processor.get_league_statistics(league)
            leader = self.processor.get_leader(league)
            data.append({
                'League': league.name,
                'Box': league.box,
                'Season': league.season,
                'Players': stats['players'],
                'Played': stats['played_fixtures'],
                'Remaining': stats['remaining_fixtures'],
                'Completion %': stats['completion_percent'],
                'Leader': leader.name if leader else ''
            })
        
        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')
        
        logger.info(f"Generated summary report with {len(leagues)} box leagues: {output_file}")
        return len(leagues)
    
    def generate_all_reports(self, output_directory: str = "output") -> Dict[str, int]:
        """Generate standings and fixture reports for every stored box league."""
        os.makedirs(output_directory, exist_ok=True)
        report_results = {}
        
        for league in self.box_league_manager.load_box_leagues():
            slug = self._safe_filename(f"{league.name}_{league.box}_{league.season}")
            
            standings_report = os.path.join(output_directory, f"{slug}_standings.csv")
            report_results[f"{slug}_standings"] = self.generate_standings_report(league, standings_report)
            
            fixtures_report = os.path.join(output_directory, f"{slug}_fixtures.csv")
            report_results[f"{slug}_fixtures"] = self.generate_fixtures_report(league, fixtures_report)
        
        summary_report = os.path.join(output_directory, "summary_report.csv")
        report_results['summary'] = self.generate_summary_report(summary_report)
        
        logger.info(f"Generated all reports in directory: {output_directory}")
        return report_results
    
    @staticmethod
    def _safe_filename(name: str) -> str:
        safe_name = "".join(c for c in name if c.isalnum() or c in (' ', '-', '_')).strip()
        return safe_name.replace(' ', '_')
