"""
Configuration management for the box league tracker.
"""

import logging
import yaml
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and provides default values."""
    
    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling in defaults for missing keys."""
        config = ConfigManager.get_default_config()
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return config
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return config

        if not isinstance(loaded, dict):
            logger.warning(f"Configuration file '{config_file}' is not a mapping. Using default configuration.")
            return config

        config.update(loaded)
        return config
    
    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'database_path': 'match_tracker.db',
            'storage_key': 'MatchTrackerData',
            'reports_dir': 'output',
            'log_level': 'INFO',
            'points_per_win': 2,
            'date_format': '%d %b %Y',
        }
