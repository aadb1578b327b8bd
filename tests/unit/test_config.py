"""
Unit tests for configuration and logging setup.
"""

import logging

from config import get_config, DevelopmentConfig, ProductionConfig, TestingConfig
from utils.logger import setup_logger


class TestGetConfig:

    def test_named_environments(self):
        assert get_config('development') is DevelopmentConfig
        assert get_config('production') is ProductionConfig
        assert get_config('testing') is TestingConfig

    def test_unknown_environment_uses_default(self):
        assert get_config('staging') is ProductionConfig

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv('READINESS_ENV', 'testing')
        assert get_config() is TestingConfig

    def test_testing_defaults(self):
        assert TestingConfig.TREND_ENABLED is True
        assert TestingConfig.TREND_MAX_BOOST == 3
        assert TestingConfig.TREND_MAX_PENALTY == 3
        assert TestingConfig.CALIBRATION_MIN_SNAPSHOTS == 5
        assert TestingConfig.CONSENSUS_ANONYMIZE is True


class TestSetupLogger:

    def test_handler_added_once(self):
        logger = setup_logger('readiness.test', 'INFO')
        setup_logger('readiness.test', 'DEBUG')

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger('readiness.test_level', 'LOUD')
        assert logger.level == logging.INFO
