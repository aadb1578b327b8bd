"""
Services Package - Business Logic Layer

This package contains service classes that wrap the readiness engine
for callers: payload validation, batch review, coach calibration and
multi-coach consensus.
"""

from .readiness_service import ReadinessService
from .calibration_service import (
    CalibrationService, CoachScoringProfile, ReadinessRecord,
    ObservedMetric, ContextualAverage, CalibrationHint
)
from .consensus_service import (
    ConsensusService, PlayerConsensus, RatedSnapshot,
    PlayerRatingHistory, MultiCoachPlayer
)

__all__ = [
    'ReadinessService',
    'CalibrationService',
    'CoachScoringProfile',
    'ReadinessRecord',
    'ObservedMetric',
    'ContextualAverage',
    'CalibrationHint',
    'ConsensusService',
    'PlayerConsensus',
    'RatedSnapshot',
    'PlayerRatingHistory',
    'MultiCoachPlayer'
]
