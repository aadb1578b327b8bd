"""
Readiness Engine - Position-aware Readiness Index calculation

Turns a player's metric and trait observations into a single 0-100
readiness score, a status band, and an explanation.

Pipeline:
1. Category aggregation (technical, physical, mental, attitude, tactical fit)
2. Weighted composition using the position's weights
3. Gate battery (hard caps for non-negotiable red flags)
4. Trend adjustment against a previous snapshot, then classification

The engine is stateless and never mutates its inputs or config.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from models.constants import (
    PlayerPosition, StatusBand, NEUTRAL_SCORE, SCORE_MIN, SCORE_MAX,
    TECHNICAL_CATEGORIES, POSITIONING_METRIC, STATUS_BAND_THRESHOLDS,
    TREND_ADJUSTMENT_LIMIT, TREND_MIN_IMPROVEMENTS, TREND_MIN_DECLINES,
    POSITIVE_MOMENTUM_MESSAGE, DECLINE_MESSAGE, TOP_STRENGTHS_COUNT, TOP_RISKS_COUNT,
    NEXT_ACTION_PROMOTE, NEXT_ACTION_INTEGRATE, NEXT_ACTION_FOCUS_BLOCK,
    NEXT_ACTION_FITNESS, NEXT_ACTION_CONTINUE, FITNESS_INTERVENTION_THRESHOLD,
    MetricCategory
)
from models.position_weights import PositionWeights, DEFAULT_WEIGHTS
from models.readiness import (
    MetricValue, TraitValue, PlayerSnapshot, CategoryScores,
    ReadinessExplanation, ReadinessResult
)
from .gates import ReadinessGate, DEFAULT_GATES, find_metric, run_gates, apply_gate_caps, tightest_cap

logger = logging.getLogger("readiness.engine")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp to the 0-100 score range."""
    return int(max(SCORE_MIN, min(SCORE_MAX, value)))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean, or the neutral score for an empty sequence."""
    if not values:
        return NEUTRAL_SCORE
    return sum(values) / len(values)


@dataclass(frozen=True)
class TrendSettings:
    """
    Trend boost/penalty parameters.

    Attributes:
        enabled: Whether previous snapshots are compared at all
        max_boost: Points added on positive momentum (limited to 3)
        max_penalty: Points removed on decline (limited to 3)
    """
    enabled: bool = True
    max_boost: int = TREND_ADJUSTMENT_LIMIT
    max_penalty: int = TREND_ADJUSTMENT_LIMIT


@dataclass(frozen=True)
class ReadinessConfig:
    """
    Full parameter set for a readiness calculation.

    Build partial overrides with from_overrides(); anything not supplied
    falls back to the engine defaults.
    """
    weights: Dict[PlayerPosition, PositionWeights] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    gates: Tuple[ReadinessGate, ...] = tuple(DEFAULT_GATES)
    trend: TrendSettings = TrendSettings()

    @classmethod
    def from_overrides(cls, weights: Optional[Dict[PlayerPosition, PositionWeights]] = None,
                       gates: Optional[Sequence[ReadinessGate]] = None,
                       trend: Optional[TrendSettings] = None) -> 'ReadinessConfig':
        """
        Build a config from optional overrides.

        Weight overrides are merged per position over the default table,
        so a partial table still covers every position. Gates and trend
        settings replace the defaults wholesale when given.
        """
        merged_weights = dict(DEFAULT_WEIGHTS)
        if weights:
            merged_weights.update(weights)

        return cls(
            weights=merged_weights,
            gates=tuple(gates) if gates is not None else tuple(DEFAULT_GATES),
            trend=trend if trend is not None else TrendSettings()
        )

    def weights_for(self, position: PlayerPosition) -> PositionWeights:
        """Weights for a position, falling back to the default set."""
        return self.weights.get(position, DEFAULT_WEIGHTS[position])


class ReadinessEngine:
    """Computes the Readiness Index for a single player snapshot."""

    def __init__(self, config: Optional[ReadinessConfig] = None):
        self.config = config or ReadinessConfig()

    def evaluate(self, metrics: Sequence[MetricValue], traits: Sequence[TraitValue],
                 position: PlayerPosition,
                 previous_snapshot: Optional[PlayerSnapshot] = None) -> ReadinessResult:
        """
        Run the full readiness pipeline.

        Args:
            metrics: Current metric observations
            traits: Current trait observations
            position: Player's position
            previous_snapshot: Optional prior observations for trend comparison

        Returns:
            ReadinessResult with scores, status band and explanation
        """
        scores = self.aggregate_categories(metrics, traits)
        provisional = self.compose_overall(scores, position)

        outcomes = run_gates(self.config.gates, metrics, traits, position)
        rule_triggers = [outcome.message for outcome in outcomes if not outcome.passed]
        capped = apply_gate_caps(provisional, outcomes)

        trend_adjustment, trend_message = self.evaluate_trend(metrics, previous_snapshot)
        if trend_message:
            rule_triggers.append(trend_message)

        overall = clamp_score(capped + trend_adjustment)

        logger.debug(
            f"Readiness {position.value}: provisional={provisional} capped={capped} "
            f"trend={trend_adjustment:+d} overall={overall}"
        )

        explanation = self.build_explanation(metrics, traits, rule_triggers)

        return ReadinessResult(
            overall=overall,
            technical=scores.technical,
            physical=scores.physical,
            mental=scores.mental,
            attitude=scores.attitude,
            tactical_fit=scores.tactical_fit,
            status_band=classify_status_band(overall),
            explanation=explanation,
            next_action=determine_next_action(overall, scores.physical),
            score_cap=tightest_cap(outcomes)
        )

    def aggregate_categories(self, metrics: Sequence[MetricValue],
                             traits: Sequence[TraitValue]) -> CategoryScores:
        """Average each category; empty categories score 50."""
        technical_values = [m.value for m in metrics if m.category in TECHNICAL_CATEGORIES]
        physical_values = [m.value for m in metrics if m.category == MetricCategory.PHYSICAL]
        mental_values = [m.value for m in metrics if m.category == MetricCategory.MENTAL]
        attitude_values = [t.value for t in traits]

        technical = clamp_score(round_half_up(average(technical_values)))
        physical = clamp_score(round_half_up(average(physical_values)))
        mental = clamp_score(round_half_up(average(mental_values)))
        attitude = clamp_score(round_half_up(average(attitude_values)))

        # Tactical fit blends two categories with the named positioning metric
        positioning = find_metric(metrics, POSITIONING_METRIC)
        tactical_fit = clamp_score(round_half_up((technical + mental + positioning) / 3))

        return CategoryScores(
            technical=technical,
            physical=physical,
            mental=mental,
            attitude=attitude,
            tactical_fit=tactical_fit
        )

    def compose_overall(self, scores: CategoryScores, position: PlayerPosition) -> int:
        """Weighted composite of the category scores (pre-gate)."""
        weights = self.config.weights_for(position)
        weighted_sum = (
            scores.technical * weights.technical +
            scores.physical * weights.physical +
            scores.mental * weights.mental +
            scores.attitude * weights.attitude +
            scores.tactical_fit * weights.tactical_fit
        )
        return round_half_up(weighted_sum / 100)

    def evaluate_trend(self, metrics: Sequence[MetricValue],
                       previous_snapshot: Optional[PlayerSnapshot]) -> Tuple[int, Optional[str]]:
        """
        Compare current metrics with the previous snapshot.

        Only metrics present in both snapshots are compared.

        Returns:
            Tuple of (adjustment, message); (0, None) when no trend applies
        """
        trend = self.config.trend
        if not trend.enabled or previous_snapshot is None:
            return 0, None

        previous_values = {}
        for metric in previous_snapshot.metrics:
            previous_values.setdefault(metric.metric_key, metric.value)

        improvements = 0
        declines = 0
        for metric in metrics:
            if metric.metric_key not in previous_values:
                continue
            previous = previous_values[metric.metric_key]
            if metric.value > previous:
                improvements += 1
            elif metric.value < previous:
                declines += 1

        if improvements >= TREND_MIN_IMPROVEMENTS and declines == 0:
            return min(trend.max_boost, TREND_ADJUSTMENT_LIMIT), POSITIVE_MOMENTUM_MESSAGE
        elif declines >= TREND_MIN_DECLINES:
            return -min(trend.max_penalty, TREND_ADJUSTMENT_LIMIT), DECLINE_MESSAGE

        return 0, None

    def build_explanation(self, metrics: Sequence[MetricValue], traits: Sequence[TraitValue],
                          rule_triggers: List[str]) -> ReadinessExplanation:
        """
        Rank all observations by value.

        Strengths and risks may overlap when fewer than 8 observations exist.
        """
        observations = [(m.metric_key, m.value) for m in metrics]
        observations.extend((t.trait_key, t.value) for t in traits)

        # Stable sort keeps input order for ties
        ranked = sorted(observations, key=lambda item: item[1], reverse=True)
        ranked_keys = [key for key, _ in ranked]

        top_strengths = ranked_keys[:TOP_STRENGTHS_COUNT]
        top_risks = ranked_keys[-TOP_RISKS_COUNT:]

        return ReadinessExplanation(
            top_strengths=top_strengths,
            top_risks=top_risks,
            recommended_focus=top_risks,
            rule_triggers=rule_triggers
        )


def classify_status_band(overall: int) -> StatusBand:
    """Map an overall score to its status band."""
    for threshold, band in STATUS_BAND_THRESHOLDS:
        if overall >= threshold:
            return band
    return StatusBand.FOUNDATION


def determine_next_action(overall: int, physical_score: int) -> str:
    """Recommended next step for the player. First matching rule wins."""
    if overall >= 85:
        return NEXT_ACTION_PROMOTE
    elif overall >= 75:
        return NEXT_ACTION_INTEGRATE
    elif overall >= 60:
        return NEXT_ACTION_FOCUS_BLOCK
    elif physical_score < FITNESS_INTERVENTION_THRESHOLD:
        return NEXT_ACTION_FITNESS
    else:
        return NEXT_ACTION_CONTINUE


def compute_readiness_index(metrics: Sequence[MetricValue], traits: Sequence[TraitValue],
                            position: Union[PlayerPosition, str],
                            previous_snapshot: Optional[PlayerSnapshot] = None,
                            config_override: Optional[Union[ReadinessConfig, dict]] = None) -> ReadinessResult:
    """
    Compute the Readiness Index for one player snapshot.

    Args:
        metrics: Current metric observations
        traits: Current trait observations
        position: PlayerPosition (or its code, e.g. "CM")
        previous_snapshot: Optional prior snapshot for trend comparison
        config_override: A ReadinessConfig, or a dict with any of
                         'weights', 'gates', 'trend' to merge over defaults

    Returns:
        ReadinessResult

    Raises:
        ValueError: If position is not a known position code
    """
    if isinstance(position, str):
        position = PlayerPosition(position.upper())

    if isinstance(config_override, dict):
        config = ReadinessConfig.from_overrides(**config_override)
    else:
        config = config_override

    return ReadinessEngine(config).evaluate(metrics, traits, position, previous_snapshot)
