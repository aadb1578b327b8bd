"""
Validation Schemas Package

Contains Pydantic models for input validation and data sanitization.
"""

from .readiness import (
    MetricValueSchema,
    TraitValueSchema,
    SnapshotSchema,
    ReadinessRequestSchema,
    validate_readiness_request
)

__all__ = [
    'MetricValueSchema',
    'TraitValueSchema',
    'SnapshotSchema',
    'ReadinessRequestSchema',
    'validate_readiness_request'
]
