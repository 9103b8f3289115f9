"""
Configuration Management Module

All runtime configuration is loaded from environment variables with sensible
defaults. An optional ``config.env`` file in the working directory is read first.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv('config.env')

DEFAULT_WORD_LIST_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class with all settings."""

    # Word List Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', 'words')
    WORD_LIST_URL = os.getenv('WORD_LIST_URL', DEFAULT_WORD_LIST_URL)
    DOWNLOAD_TIMEOUT_SECONDS = float(os.getenv('DOWNLOAD_TIMEOUT_SECONDS', 30))

    # Game Settings
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 6))
    REQUIRE_DICTIONARY_WORD = _env_flag('REQUIRE_DICTIONARY_WORD')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration: the environment settings as they are."""


class TestingConfig(Config):
    """Testing configuration."""
    WORD_LIST_URL = 'http://words.invalid/words.txt'
    DOWNLOAD_TIMEOUT_SECONDS = 1.0
    REQUIRE_DICTIONARY_WORD = False
    MAX_GUESSES = 6


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """
    Look up a configuration class by name.

    Args:
        name: Key in ``config``; defaults to the ``WORDLE_ENV`` environment
            variable, then ``'default'``

    Raises:
        ValueError: If the name is not a known configuration
    """
    name = (name or os.getenv('WORDLE_ENV') or 'default').strip().lower()
    if name not in config:
        raise ValueError(f"Unknown configuration '{name}', expected one of {sorted(config)}")
    return config[name]
