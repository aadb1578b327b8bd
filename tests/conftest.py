"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the readiness engine and the
services built on top of it.
"""

import pytest


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def engine():
    """ReadinessEngine with the default config."""
    from analyzers import ReadinessEngine
    return ReadinessEngine()


@pytest.fixture
def readiness_service(test_config):
    """ReadinessService configured for testing."""
    from services import ReadinessService
    return ReadinessService(test_config)


@pytest.fixture
def cm_metrics():
    """Metrics for a balanced central midfielder (overall 71)."""
    from models import MetricValue, MetricCategory
    return [
        MetricValue(metric_key='passing', value=80, category=MetricCategory.TECHNICAL),
        MetricValue(metric_key='stamina', value=70, category=MetricCategory.PHYSICAL),
        MetricValue(metric_key='positioning', value=60, category=MetricCategory.MENTAL),
    ]


@pytest.fixture
def cm_traits():
    """Traits for the balanced central midfielder."""
    from models import TraitValue
    return [
        TraitValue(trait_key='discipline', value=80),
        TraitValue(trait_key='work_rate', value=70),
    ]


@pytest.fixture
def elite_metrics():
    """Metrics for a technically elite midfielder (pre-gate overall 89 with poor discipline)."""
    from models import MetricValue, MetricCategory
    return [
        MetricValue(metric_key='passing', value=95, category=MetricCategory.TECHNICAL),
        MetricValue(metric_key='dribbling', value=95, category=MetricCategory.TECHNICAL),
        MetricValue(metric_key='stamina', value=90, category=MetricCategory.PHYSICAL),
        MetricValue(metric_key='positioning', value=90, category=MetricCategory.MENTAL),
        MetricValue(metric_key='decision_making', value=90, category=MetricCategory.MENTAL),
    ]


@pytest.fixture
def cm_payload():
    """Raw API payload for the balanced central midfielder."""
    return {
        'playerId': 101,
        'position': 'CM',
        'metrics': [
            {'metricKey': 'passing', 'value': 80, 'category': 'TECHNICAL'},
            {'metricKey': 'stamina', 'value': 70, 'category': 'PHYSICAL'},
            {'metricKey': 'positioning', 'value': 60, 'category': 'MENTAL'},
        ],
        'traits': [
            {'traitKey': 'discipline', 'value': 80},
            {'traitKey': 'work_rate', 'value': 70},
        ],
    }


@pytest.fixture
def elite_payload():
    """Raw API payload for the elite midfielder with poor discipline (capped at 74)."""
    return {
        'playerId': 102,
        'position': 'CM',
        'metrics': [
            {'metricKey': 'passing', 'value': 95, 'category': 'TECHNICAL'},
            {'metricKey': 'dribbling', 'value': 95, 'category': 'TECHNICAL'},
            {'metricKey': 'stamina', 'value': 90, 'category': 'PHYSICAL'},
            {'metricKey': 'positioning', 'value': 90, 'category': 'MENTAL'},
            {'metricKey': 'decision_making', 'value': 90, 'category': 'MENTAL'},
        ],
        'traits': [
            {'traitKey': 'discipline', 'value': 30},
            {'traitKey': 'work_rate', 'value': 90},
        ],
    }
