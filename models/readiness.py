"""
Readiness Index Data Models

Dataclasses for the observations a coach records against a player
(metrics and traits), the prior snapshot used for trend comparison,
and the readiness result handed back to profile views and dashboards.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .constants import MetricCategory, StatusBand


@dataclass(frozen=True)
class MetricValue:
    """
    One observed metric for a player.

    Attributes:
        metric_key: Metric identifier, unique within a snapshot (e.g. "passing")
        value: Score on the 0-100 scale
        category: MetricCategory the metric belongs to
        confidence: Coach's confidence in the rating (0-100), if given
    """
    metric_key: str
    value: float
    category: MetricCategory
    confidence: Optional[float] = None

    def __post_init__(self):
        """Allow string initialization for convenience."""
        if isinstance(self.category, str):
            object.__setattr__(self, 'category', MetricCategory(self.category.upper()))


@dataclass(frozen=True)
class TraitValue:
    """One observed behavioural trait (0-100). Traits stand in for attitude."""
    trait_key: str
    value: float


@dataclass(frozen=True)
class PlayerSnapshot:
    """The observations recorded for a player at one point in time."""
    metrics: List[MetricValue] = field(default_factory=list)
    traits: List[TraitValue] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryScores:
    """Integer category scores produced by aggregation."""
    technical: int
    physical: int
    mental: int
    attitude: int
    tactical_fit: int


@dataclass
class ReadinessExplanation:
    """
    Human-readable reasoning behind a readiness score.

    Attributes:
        top_strengths: Highest-valued metric/trait keys (up to 5)
        top_risks: Lowest-valued metric/trait keys (up to 3)
        recommended_focus: Keys to work on next (currently the risk list)
        rule_triggers: One message per failing gate, plus at most one trend message
        calibration_adjustment: Coach calibration shift applied, if any
        calibration_insights: Notes explaining the calibration shift
    """
    top_strengths: List[str] = field(default_factory=list)
    top_risks: List[str] = field(default_factory=list)
    recommended_focus: List[str] = field(default_factory=list)
    rule_triggers: List[str] = field(default_factory=list)
    calibration_adjustment: Optional[int] = None
    calibration_insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'topStrengths': list(self.top_strengths),
            'topRisks': list(self.top_risks),
            'recommendedFocus': list(self.recommended_focus),
            'ruleTriggers': list(self.rule_triggers),
        }
        if self.calibration_adjustment is not None:
            data['calibrationAdjustment'] = self.calibration_adjustment
            data['calibrationInsights'] = list(self.calibration_insights)
        return data


@dataclass
class ReadinessResult:
    """
    Readiness Index for one player snapshot.

    All scores are integers in [0, 100].
    score_cap is the tightest cap among failing gates, or None when no
    capping gate failed. It is not part of the serialized result.
    """
    overall: int
    technical: int
    physical: int
    mental: int
    attitude: int
    tactical_fit: int
    status_band: StatusBand
    explanation: ReadinessExplanation
    next_action: Optional[str] = None
    score_cap: Optional[int] = None

    @property
    def is_gated(self) -> bool:
        """True if any rule fired during evaluation."""
        return len(self.explanation.rule_triggers) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape consumed by the UI layer."""
        return {
            'overall': self.overall,
            'technical': self.technical,
            'physical': self.physical,
            'mental': self.mental,
            'attitude': self.attitude,
            'tacticalFit': self.tactical_fit,
            'statusBand': self.status_band.value,
            'explanation': self.explanation.to_dict(),
            'nextAction': self.next_action,
        }
