#!/usr/bin/env python3
"""
Tests for standings and fixture report generation.
"""

import unittest
import tempfile
import os
import shutil
import pandas as pd
from datetime import datetime

from database.database_manager import DatabaseManager
from database.box_league_manager import BoxLeagueManager
from models.box_league import BoxLeague
from models.match import MatchResult, MatchStatus, Result
from models.player import Player
from reports.report_generator import ReportGenerator


class TestReportGenerator(unittest.TestCase):
    """Test cases for ReportGenerator."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.output_dir = os.path.join(self.test_dir, "reports")
        self.db = DatabaseManager(os.path.join(self.test_dir, "test_reports.db"),
                                  os.path.join(self.test_dir, "none.yaml"))
        self.generator = ReportGenerator(self.db)
        
        self.league = BoxLeague(name="Club Box", box="Box 1", season="Autumn 2024",
                                players=[Player(name="Alice"), Player(name="Bea"), Player(name="Cara")])
        self.league.add_match(MatchResult(player="Bea", opponent="Alice", score="6-3 6-2",
                                          result=Result.WIN, date=datetime(2024, 9, 14)))
        self.league.add_match(MatchResult(player="Cara", opponent="Alice", score="w/o",
                                          result=Result.LOSS, status=MatchStatus.WALKOVER,
                                          date=datetime(2024, 9, 21), notes="Injury"))
        BoxLeagueManager(self.db).add_box_league(self.league)
    
    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)
    
    def test_standings_dataframe(self):
        df = self.generator.standings_dataframe(self.league)
        
        self.assertEqual(list(df.columns), ['Pos', 'Player', 'P', 'W', 'L', 'Sets', 'Set Ratio', 'Pts'])
        self.assertEqual(list(df['Player']), ["Bea", "Alice", "Cara"])
        self.assertEqual(list(df['Pts']), [2, 2, 0])
        self.assertEqual(df.iloc[0]['Sets'], "2-0")
        self.assertEqual(df.iloc[1]['Sets'], "0-2")
    
    def test_fixtures_dataframe(self):
        df = self.generator.fixtures_dataframe(self.league)
        
        self.assertEqual(list(df['Match']), ["Alice vs Bea", "Alice vs Cara", "Bea vs Cara"])
        self.assertEqual(list(df['Played']), [True, True, False])
        self.assertEqual(df.iloc[0]['Winner'], "Bea")
        self.assertEqual(df.iloc[1]['Winner'], "Alice")
        self.assertEqual(df.iloc[1]['Status'], "Walkover")
        self.assertEqual(df.iloc[1]['Date'], "21 Sep 2024")
        self.assertEqual(df.iloc[2]['Score'], "")
    
    def test_generate_standings_report(self):
        os.makedirs(self.output_dir)
        output_file = os.path.join(self.output_dir, "standings.csv")
        
        self.assertEqual(self.generator.generate_standings_report(self.league, output_file), 3)
        df = pd.read_csv(output_file)
        self.assertEqual(len(df), 3)
        self.assertEqual(df.iloc[0]['Player'], "Bea")
    
    def test_generate_unplayed_fixtures_report(self):
        os.makedirs(self.output_dir)
        output_file = os.path.join(self.output_dir, "fixtures.csv")
        
        self.assertEqual(self.generator.generate_fixtures_report(self.league, output_file, unplayed_only=True), 1)
        df = pd.read_csv(output_file)
        self.assertEqual(list(df['Match']), ["Bea vs Cara"])
    
    def test_generate_all_reports(self):
        results = self.generator.generate_all_reports(self.output_dir)
        
        self.assertEqual(results['Club_Box_Box_1_Autumn_2024_standings'], 3)
        self.assertEqual(results['Club_Box_Box_1_Autumn_2024_fixtures'], 3)
        self.assertEqual(results['summary'], 1)
        
        summary = pd.read_csv(os.path.join(self.output_dir, "summary_report.csv"))
        self.assertEqual(summary.iloc[0]['Remaining'], 1)
        self.assertEqual(summary.iloc[0]['Leader'], "Bea")
    
    def test_summary_without_leagues(self):
        empty_db = DatabaseManager(os.path.join(self.test_dir, "empty.db"),
                                   os.path.join(self.test_dir, "none.yaml"))
        generator = ReportGenerator(empty_db)
        self.assertEqual(generator.generate_summary_report(os.path.join(self.test_dir, "summary.csv")), 0)


if __name__ == '__main__':
    unittest.main()
