"""
Readiness configuration with environment-specific settings.

Usage:
    from config import get_config
    settings = get_config()
    service = ReadinessService(settings)
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration with common settings."""

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Trend boost/penalty (limited to 3 points either way by the engine)
    TREND_ENABLED = _env_bool('TREND_ENABLED', True)
    TREND_MAX_BOOST = int(os.environ.get('TREND_MAX_BOOST', 3))
    TREND_MAX_PENALTY = int(os.environ.get('TREND_MAX_PENALTY', 3))

    # Coach calibration
    CALIBRATION_ENABLED = _env_bool('CALIBRATION_ENABLED', True)
    CALIBRATION_MIN_SNAPSHOTS = int(os.environ.get('CALIBRATION_MIN_SNAPSHOTS', 5))

    # Multi-coach consensus hides coach names unless disabled
    CONSENSUS_ANONYMIZE = _env_bool('CONSENSUS_ANONYMIZE', True)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = True
    TESTING = True
    LOG_LEVEL = 'DEBUG'

    # Deterministic defaults regardless of the local .env
    TREND_ENABLED = True
    TREND_MAX_BOOST = 3
    TREND_MAX_PENALTY = 3
    CALIBRATION_ENABLED = True
    CALIBRATION_MIN_SNAPSHOTS = 5
    CONSENSUS_ANONYMIZE = True


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses READINESS_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('READINESS_ENV', 'production')

    return config.get(env_name, config['default'])
