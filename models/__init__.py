"""
Models package for the Readiness Index.

Provides data models for player observations, position weights,
and readiness results.
"""
from .constants import PlayerPosition, MetricCategory, StatusBand
from .position_weights import PositionWeights, DEFAULT_WEIGHTS
from .readiness import (
    MetricValue,
    TraitValue,
    PlayerSnapshot,
    CategoryScores,
    ReadinessExplanation,
    ReadinessResult
)

__all__ = [
    'PlayerPosition',
    'MetricCategory',
    'StatusBand',
    'PositionWeights',
    'DEFAULT_WEIGHTS',
    'MetricValue',
    'TraitValue',
    'PlayerSnapshot',
    'CategoryScores',
    'ReadinessExplanation',
    'ReadinessResult'
]
