"""
Coach Calibration Service

Builds coach scoring profiles from the readiness records a coach has
produced and turns them into a small correcting adjustment, so that
consistently generous or harsh raters do not skew readiness scores.

Also produces entry-time hints: how a value being entered compares with
the club, centre and position averages for that metric.
"""

import logging
import statistics
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from models.constants import PlayerPosition
from models.readiness import ReadinessResult
from analyzers.readiness_engine import (
    round_half_up, clamp_score, classify_status_band, determine_next_action
)

logger = logging.getLogger("readiness.calibration")

# Midpoint a well-calibrated coach is expected to average around
NEUTRAL_COACH_AVERAGE = 57.5
MAX_CALIBRATION_ADJUSTMENT = 3
LARGE_JUMP_THRESHOLD = 12
CONSISTENT_STDDEV = 10
VARIABLE_STDDEV = 20

DISTRIBUTION_BUCKETS = ['0-20', '21-40', '41-60', '61-80', '81-100']

EXTREME_PERCENTILE_HIGH = 95
EXTREME_PERCENTILE_LOW = 5
TOP_EXTREME_SUGGESTION = (
    'This score is in the top 5% for this metric. Consider adding a note to explain the rating.'
)
BOTTOM_EXTREME_SUGGESTION = (
    'This score is in the bottom 5% for this metric. Consider adding a note to explain the rating.'
)


@dataclass
class ReadinessRecord:
    """A readiness score previously recorded by a coach."""
    overall: float
    technical: float
    physical: float
    mental: float
    attitude: float
    confidences: List[float] = field(default_factory=list)


@dataclass
class CoachScoringProfile:
    """
    Summary of how a coach tends to score players.

    Attributes:
        coach_id: Coach identifier
        total_snapshots: Number of records the profile is built from
        average_*_score: Mean category/overall scores
        standard_deviation: Population std dev of overall scores
        percent_above_70: Share of records scoring 70 or more
        percent_below_40: Share of records scoring 40 or less
        average_confidence: Mean self-reported rating confidence
        large_jump_frequency: Share of consecutive records that moved more than 12 points
        score_distribution: Record counts per 20-point bucket
    """
    coach_id: int
    total_snapshots: int
    average_overall_score: float
    average_technical_score: float
    average_physical_score: float
    average_mental_score: float
    average_attitude_score: float
    standard_deviation: float
    percent_above_70: float
    percent_below_40: float
    average_confidence: float
    large_jump_frequency: float
    score_distribution: Dict[str, int]


@dataclass
class ObservedMetric:
    """A recorded metric value together with where it was recorded."""
    metric_key: str
    value: float
    center_id: Optional[int] = None
    positions: List[PlayerPosition] = field(default_factory=list)


@dataclass
class ContextualAverage:
    """Average of a metric over one context (club-wide, a centre, or a position)."""
    metric_key: str
    average_score: float
    sample_size: int
    center_id: Optional[int] = None
    position: Optional[PlayerPosition] = None


@dataclass
class CalibrationHint:
    """
    Comparison of a value being entered against recorded values.

    Attributes:
        metric_key: Metric being rated
        entered_value: Value the coach is entering
        club_average / center_average / position_average: Context means, if any
        percentile: Share of recorded values strictly below the entered value
        is_extreme: True in the top or bottom 5%
        suggestion: Prompt to justify an extreme rating
    """
    metric_key: str
    entered_value: float
    club_average: Optional[float] = None
    center_average: Optional[float] = None
    position_average: Optional[float] = None
    percentile: Optional[float] = None
    is_extreme: bool = False
    suggestion: Optional[str] = None


def _mean(values: Sequence[float]) -> float:
    return statistics.mean(values) if values else 0.0


def _population_stddev(values: Sequence[float]) -> float:
    return statistics.pstdev(values) if values else 0.0


def _bucket_for(overall: float) -> str:
    if overall <= 20:
        return '0-20'
    elif overall <= 40:
        return '21-40'
    elif overall <= 60:
        return '41-60'
    elif overall <= 80:
        return '61-80'
    return '81-100'


class CalibrationService:
    """Computes coach scoring profiles and calibration adjustments."""

    def __init__(self, min_snapshots: int = 5):
        self.min_snapshots = min_snapshots

    def compute_coach_profile(self, coach_id: int,
                              records: Sequence[ReadinessRecord]) -> Optional[CoachScoringProfile]:
        """
        Build a scoring profile from a coach's records (newest first).

        Returns:
            CoachScoringProfile, or None when the coach has no records
        """
        if not records:
            return None

        overall_scores = [r.overall for r in records]
        confidences = [c for r in records for c in r.confidences]

        distribution = {bucket: 0 for bucket in DISTRIBUTION_BUCKETS}
        for overall in overall_scores:
            distribution[_bucket_for(overall)] += 1

        above_70 = sum(1 for overall in overall_scores if overall >= 70)
        below_40 = sum(1 for overall in overall_scores if overall <= 40)
        large_jumps = sum(
            1 for previous, current in zip(overall_scores, overall_scores[1:])
            if abs(current - previous) > LARGE_JUMP_THRESHOLD
        )

        total = len(records)
        return CoachScoringProfile(
            coach_id=coach_id,
            total_snapshots=total,
            average_overall_score=_mean(overall_scores),
            average_technical_score=_mean([r.technical for r in records]),
            average_physical_score=_mean([r.physical for r in records]),
            average_mental_score=_mean([r.mental for r in records]),
            average_attitude_score=_mean([r.attitude for r in records]),
            standard_deviation=_population_stddev(overall_scores),
            percent_above_70=above_70 / total * 100,
            percent_below_40=below_40 / total * 100,
            average_confidence=_mean(confidences),
            large_jump_frequency=large_jumps / max(1, total - 1) * 100,
            score_distribution=distribution
        )

    def calibration_adjustment(self, profile: Optional[CoachScoringProfile]) -> Tuple[int, List[str]]:
        """
        Correcting adjustment for a coach's scoring bias.

        Coaches who score high on average are nudged down, low scorers up.
        Consistent coaches (lower std dev) get a larger share of the
        correction. Limited to +/-3 points.

        Returns:
            Tuple of (adjustment, insights); (0, []) when not enough data
        """
        if profile is None or profile.total_snapshots < self.min_snapshots:
            return 0, []

        deviation = profile.average_overall_score - NEUTRAL_COACH_AVERAGE
        consistency_factor = max(0.5, 1 - (profile.standard_deviation / 30))
        adjustment = round_half_up((deviation / 10) * consistency_factor * -1)
        adjustment = max(-MAX_CALIBRATION_ADJUSTMENT, min(MAX_CALIBRATION_ADJUSTMENT, adjustment))

        if adjustment == 0:
            return 0, []

        insights = [
            f"Calibration: Adjusted {adjustment:+d} based on coach's scoring pattern "
            f"(tends to score {profile.average_overall_score:.1f} avg)"
        ]
        if profile.standard_deviation < CONSISTENT_STDDEV:
            insights.append('Coach shows consistent scoring patterns')
        elif profile.standard_deviation > VARIABLE_STDDEV:
            insights.append('Coach shows variable scoring patterns')

        return adjustment, insights

    def apply_calibration(self, result: ReadinessResult, adjustment: int,
                          insights: List[str]) -> ReadinessResult:
        """
        Apply a calibration adjustment to a readiness result.

        Re-derives the status band and next action from the adjusted
        overall. Rule triggers are left untouched. A result held down by a
        gate cap is never lifted above that cap (or above its current
        overall, when a trend boost already took it past the cap).

        The recorded calibration_adjustment is the shift actually applied.
        """
        if adjustment == 0:
            return result

        overall = clamp_score(result.overall + adjustment)
        insights = list(insights)

        if result.score_cap is not None and adjustment > 0:
            ceiling = max(result.score_cap, result.overall)
            if overall > ceiling:
                overall = ceiling
                insights.append(f"Calibration limited by readiness gate cap of {result.score_cap}")

        explanation = replace(
            result.explanation,
            calibration_adjustment=overall - result.overall,
            calibration_insights=insights
        )

        logger.debug(f"Calibration adjusted overall {result.overall} -> {overall}")

        return replace(
            result,
            overall=overall,
            status_band=classify_status_band(overall),
            next_action=determine_next_action(overall, result.physical),
            explanation=explanation
        )

    def contextual_averages(self, metric_key: str, observations: Sequence[ObservedMetric],
                            center_id: Optional[int] = None,
                            position: Optional[PlayerPosition] = None) -> List[ContextualAverage]:
        """
        Averages of a metric club-wide and, when requested, for one centre
        and one position.

        Contexts with no recorded values are left out, so the list is empty
        when the metric has never been recorded.
        """
        recorded = [o for o in observations if o.metric_key == metric_key]
        averages = []

        club_values = [o.value for o in recorded]
        if club_values:
            averages.append(ContextualAverage(
                metric_key=metric_key,
                average_score=_mean(club_values),
                sample_size=len(club_values)
            ))

        if center_id is not None:
            center_values = [o.value for o in recorded if o.center_id == center_id]
            if center_values:
                averages.append(ContextualAverage(
                    metric_key=metric_key,
                    average_score=_mean(center_values),
                    sample_size=len(center_values),
                    center_id=center_id
                ))

        if position is not None:
            position_values = [o.value for o in recorded if position in o.positions]
            if position_values:
                averages.append(ContextualAverage(
                    metric_key=metric_key,
                    average_score=_mean(position_values),
                    sample_size=len(position_values),
                    position=position
                ))

        return averages

    def calibration_hints(self, metric_key: str, entered_value: float,
                          observations: Sequence[ObservedMetric],
                          center_id: Optional[int] = None,
                          position: Optional[PlayerPosition] = None) -> CalibrationHint:
        """
        Hint for a value a coach is entering.

        The percentile is taken over every recorded value of the metric.
        Values in the top or bottom 5% are flagged as extreme with a prompt
        to add a note.
        """
        hint = CalibrationHint(metric_key=metric_key, entered_value=entered_value)

        for average in self.contextual_averages(metric_key, observations, center_id, position):
            if average.center_id is not None:
                hint.center_average = average.average_score
            elif average.position is not None:
                hint.position_average = average.average_score
            else:
                hint.club_average = average.average_score

        if hint.club_average is None:
            return hint

        values = [o.value for o in observations if o.metric_key == metric_key]
        below = sum(1 for value in values if value < entered_value)
        hint.percentile = below / len(values) * 100

        if hint.percentile >= EXTREME_PERCENTILE_HIGH:
            hint.is_extreme = True
            hint.suggestion = TOP_EXTREME_SUGGESTION
        elif hint.percentile <= EXTREME_PERCENTILE_LOW:
            hint.is_extreme = True
            hint.suggestion = BOTTOM_EXTREME_SUGGESTION

        return hint
