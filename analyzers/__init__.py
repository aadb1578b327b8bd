"""
Analyzers Package

Contains the Readiness Index engine and the gate rules it applies.
"""

from .gates import ReadinessGate, GateOutcome, TraitThresholdGate, MetricThresholdGate, DEFAULT_GATES
from .readiness_engine import (
    ReadinessEngine,
    ReadinessConfig,
    TrendSettings,
    compute_readiness_index,
    classify_status_band,
    determine_next_action
)

__all__ = [
    'ReadinessGate',
    'GateOutcome',
    'TraitThresholdGate',
    'MetricThresholdGate',
    'DEFAULT_GATES',
    'ReadinessEngine',
    'ReadinessConfig',
    'TrendSettings',
    'compute_readiness_index',
    'classify_status_band',
    'determine_next_action'
]
