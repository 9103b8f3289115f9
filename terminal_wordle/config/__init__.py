"""
Configuration Package

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, MAX_DEBUG_LENGTH, MAX_GUESSES, WIN_TEXT_LINES, WORD_LENGTH,
    get_word_statistics, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'ALPHABET', 'MAX_DEBUG_LENGTH', 'WIN_TEXT_LINES',
    'validate_word_list_integrity', 'get_word_statistics'
]
