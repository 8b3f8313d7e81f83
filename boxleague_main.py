"""
Main application for the box league tracker.
"""

import logging
import sys

from config.config_manager import ConfigManager
from database.database_manager import DatabaseManager
from database.box_league_manager import BoxLeagueManager
from standings.box_league_processor import BoxLeagueProcessor
from reports.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


def main(config_file: str = "config.yaml") -> None:
    """Main application entry point."""
    config = ConfigManager.load_config(config_file)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        logger.info("Starting box league tracker...")
        
        db_manager = DatabaseManager(config.get('database_path'), config_file)
        box_league_manager = BoxLeagueManager(db_manager)
        processor = BoxLeagueProcessor(db_manager.config)
        report_generator = ReportGenerator(db_manager, processor)
        
        leagues = box_league_manager.load_box_leagues()
        logger.info(f"Loaded {len(leagues)} box leagues")
        
        for league in leagues:
            stats = processor.get_league_statistics(league)
            logger.info(f"{league.name} ({league.box}, {league.season}): {stats}")
            
            for position, standing in enumerate(processor.get_standings(league), 1):
                logger.info(f"  {position}. {standing.name} P{standing.played} W{standing.wins} "
                            f"L{standing.losses} sets {standing.sets_won}-{standing.sets_lost} pts {standing.points}")
            
            for fixture in processor.get_outstanding_fixtures(league):
                logger.info(f"  To play: {fixture.versus_text}")
        
        report_results = report_generator.generate_all_reports(config.get('reports_dir', 'output'))
        logger.info(f"Generated reports: {report_results}")
        
        logger.info(f"Database statistics: {db_manager.get_database_stats()}")
        logger.info("Box league tracker completed successfully")
        
    except Exception as e:
        logger.error(f"Error in box league tracker: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
