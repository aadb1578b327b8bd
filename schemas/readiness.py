"""
Readiness Validation Schemas

Pydantic models for validating snapshot payloads fetched from the
academy backend before they reach the readiness engine.
Accepts both camelCase (API) and snake_case keys.
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict, ValidationError
from typing import List, Optional

from models.constants import PlayerPosition, MetricCategory
from models.readiness import MetricValue, TraitValue, PlayerSnapshot


class MetricValueSchema(BaseModel):
    """Validation schema for a single metric observation."""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    metric_key: str = Field(
        ...,
        alias='metricKey',
        min_length=1,
        max_length=100,
        description="Metric identifier"
    )
    value: float = Field(
        ...,
        ge=0,
        le=100,
        description="Metric score on the 0-100 scale"
    )
    category: MetricCategory = Field(
        ...,
        description="TECHNICAL, PHYSICAL, MENTAL, GOALKEEPING or ATTITUDE"
    )
    confidence: Optional[float] = Field(
        default=None,
        ge=0,
        le=100,
        description="Coach's confidence in the rating"
    )

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        """Convert category to uppercase."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_model(self) -> MetricValue:
        return MetricValue(
            metric_key=self.metric_key,
            value=self.value,
            category=self.category,
            confidence=self.confidence
        )


class TraitValueSchema(BaseModel):
    """Validation schema for a single trait observation."""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    trait_key: str = Field(
        ...,
        alias='traitKey',
        min_length=1,
        max_length=100,
        description="Trait identifier"
    )
    value: float = Field(
        ...,
        ge=0,
        le=100,
        description="Trait score on the 0-100 scale"
    )

    def to_model(self) -> TraitValue:
        return TraitValue(trait_key=self.trait_key, value=self.value)


class SnapshotSchema(BaseModel):
    """
    Validation schema for one set of observations.

    Metric keys and trait keys must each be unique within the snapshot.
    """
    model_config = ConfigDict(populate_by_name=True)

    metrics: List[MetricValueSchema] = Field(
        default_factory=list,
        description="Metric observations"
    )
    traits: List[TraitValueSchema] = Field(
        default_factory=list,
        description="Trait observations"
    )

    @field_validator('metrics')
    @classmethod
    def unique_metric_keys(cls, v: List[MetricValueSchema]) -> List[MetricValueSchema]:
        keys = [m.metric_key for m in v]
        if len(keys) != len(set(keys)):
            raise ValueError("Metric keys must be unique within a snapshot")
        return v

    @field_validator('traits')
    @classmethod
    def unique_trait_keys(cls, v: List[TraitValueSchema]) -> List[TraitValueSchema]:
        keys = [t.trait_key for t in v]
        if len(keys) != len(set(keys)):
            raise ValueError("Trait keys must be unique within a snapshot")
        return v

    def to_model(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            metrics=[m.to_model() for m in self.metrics],
            traits=[t.to_model() for t in self.traits]
        )


class ReadinessRequestSchema(SnapshotSchema):
    """
    Validation schema for a full readiness request.

    Carries the current observations, the player's position and,
    optionally, the previous snapshot and the rating coach.
    """
    player_id: Optional[int] = Field(
        default=None,
        alias='playerId',
        description="Player identifier, echoed back in batch results"
    )
    coach_id: Optional[int] = Field(
        default=None,
        alias='coachId',
        description="Coach who recorded the snapshot"
    )
    position: PlayerPosition = Field(
        ...,
        description="Position code (GK, CB, FB, WB, DM, CM, AM, W, ST)"
    )
    previous_snapshot: Optional[SnapshotSchema] = Field(
        default=None,
        alias='previousSnapshot',
        description="Prior observations for trend comparison"
    )

    @field_validator('position', mode='before')
    @classmethod
    def normalize_position(cls, v):
        """Convert position code to uppercase."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


def validate_readiness_request(data: dict) -> ReadinessRequestSchema:
    """
    Validate and sanitize a readiness request dictionary.

    Args:
        data: Raw dictionary from the backend API

    Returns:
        Validated ReadinessRequestSchema instance

    Raises:
        ValueError: If validation fails
    """
    try:
        return ReadinessRequestSchema.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid readiness request: {e.error_count()} error(s): {_summarize(e)}")


def _summarize(error: ValidationError) -> str:
    """Compact one-line description of pydantic errors."""
    parts = []
    for detail in error.errors():
        location = '.'.join(str(loc) for loc in detail['loc'])
        parts.append(f"{location}: {detail['msg']}")
    return '; '.join(parts)
