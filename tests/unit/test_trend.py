"""
Unit tests for trend adjustment against a previous snapshot.
"""

import pytest

from models import MetricValue, TraitValue, MetricCategory, PlayerPosition, PlayerSnapshot, StatusBand
from analyzers import ReadinessEngine, ReadinessConfig, TrendSettings, compute_readiness_index


MOMENTUM = 'Positive momentum detected'
DECLINE = 'Decline in key metrics detected'


def snapshot(passing, stamina, positioning, traits=None):
    """Previous snapshot with the three midfielder metrics."""
    return PlayerSnapshot(
        metrics=[
            MetricValue('passing', passing, MetricCategory.TECHNICAL),
            MetricValue('stamina', stamina, MetricCategory.PHYSICAL),
            MetricValue('positioning', positioning, MetricCategory.MENTAL),
        ],
        traits=traits or []
    )


class TestTrendAdjustment:
    """Test momentum boosts and decline penalties."""

    def test_positive_momentum(self, cm_metrics, cm_traits):
        """Two improvements and no declines add 3 points."""
        previous = snapshot(75, 65, 60)
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.overall == 74
        assert result.explanation.rule_triggers == [MOMENTUM]

    def test_decline(self, cm_metrics, cm_traits):
        """Three declines remove 3 points."""
        previous = snapshot(85, 75, 65)
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.overall == 68
        assert result.explanation.rule_triggers == [DECLINE]

    def test_mixed_trend_has_no_effect(self, cm_metrics, cm_traits):
        previous = snapshot(75, 75, 60)
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.overall == 71
        assert result.explanation.rule_triggers == []

    def test_single_improvement_is_not_momentum(self, cm_metrics, cm_traits):
        previous = snapshot(75, 70, 60)
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.overall == 71

    def test_unmatched_metrics_are_ignored(self, cm_metrics, cm_traits):
        """Metrics missing from the previous snapshot count as neither."""
        previous = PlayerSnapshot(metrics=[
            MetricValue('passing', 70, MetricCategory.TECHNICAL),
            MetricValue('crossing', 99, MetricCategory.TECHNICAL),
        ])
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.overall == 71
        assert result.explanation.rule_triggers == []

    def test_traits_do_not_count_towards_trend(self, cm_metrics, cm_traits):
        previous = snapshot(80, 70, 60, traits=[TraitValue('discipline', 10), TraitValue('work_rate', 10)])
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, previous)

        assert result.explanation.rule_triggers == []

    def test_empty_previous_snapshot(self, cm_metrics, cm_traits):
        result = compute_readiness_index(cm_metrics, cm_traits, PlayerPosition.CM, PlayerSnapshot())
        assert result.overall == 71

    def test_disabled_trend(self, cm_metrics, cm_traits):
        config = ReadinessConfig.from_overrides(trend=TrendSettings(enabled=False))
        result = ReadinessEngine(config).evaluate(
            cm_metrics, cm_traits, PlayerPosition.CM, snapshot(75, 65, 60)
        )

        assert result.overall == 71
        assert result.explanation.rule_triggers == []

    @pytest.mark.parametrize('max_boost,expected', [(0, 71), (1, 72), (3, 74), (10, 74)])
    def test_boost_limited_to_three(self, cm_metrics, cm_traits, max_boost, expected):
        config = ReadinessConfig.from_overrides(trend=TrendSettings(max_boost=max_boost))
        result = ReadinessEngine(config).evaluate(
            cm_metrics, cm_traits, PlayerPosition.CM, snapshot(75, 65, 60)
        )

        assert result.overall == expected
        assert result.explanation.rule_triggers == [MOMENTUM]

    @pytest.mark.parametrize('max_penalty,expected', [(1, 70), (3, 68), (10, 68)])
    def test_penalty_limited_to_three(self, cm_metrics, cm_traits, max_penalty, expected):
        config = ReadinessConfig.from_overrides(trend=TrendSettings(max_penalty=max_penalty))
        result = ReadinessEngine(config).evaluate(
            cm_metrics, cm_traits, PlayerPosition.CM, snapshot(85, 75, 65)
        )

        assert result.overall == expected

    def test_trend_applies_after_gate_cap(self, elite_metrics):
        """A capped player can still move by the trend adjustment."""
        traits = [TraitValue('discipline', 30)]
        previous = PlayerSnapshot(metrics=[
            MetricValue('passing', 90, MetricCategory.TECHNICAL),
            MetricValue('dribbling', 90, MetricCategory.TECHNICAL),
        ])
        result = compute_readiness_index(elite_metrics, traits, PlayerPosition.CM, previous)

        assert result.overall == 77
        assert result.status_band == StatusBand.ADVANCED
        assert result.explanation.rule_triggers == [
            'Discipline below 45 blocks readiness', MOMENTUM
        ]


class TestTrendBounds:
    """Final score stays within 0-100."""

    def test_clamped_at_100(self):
        metrics = [
            MetricValue('passing', 100, MetricCategory.TECHNICAL),
            MetricValue('stamina', 100, MetricCategory.PHYSICAL),
            MetricValue('positioning', 100, MetricCategory.MENTAL),
        ]
        traits = [TraitValue('discipline', 100), TraitValue('work_rate', 100)]
        result = compute_readiness_index(metrics, traits, PlayerPosition.ST, snapshot(90, 90, 90))

        assert result.overall == 100
        assert result.explanation.rule_triggers == [MOMENTUM]

    def test_clamped_at_0(self):
        metrics = [
            MetricValue('passing', 0, MetricCategory.TECHNICAL),
            MetricValue('stamina', 0, MetricCategory.PHYSICAL),
            MetricValue('positioning', 0, MetricCategory.MENTAL),
        ]
        traits = [TraitValue('discipline', 0), TraitValue('work_rate', 0)]
        result = compute_readiness_index(metrics, traits, PlayerPosition.CM, snapshot(10, 10, 10))

        assert result.overall == 0
        assert result.status_band == StatusBand.FOUNDATION
        assert result.next_action == 'Fitness intervention required'
        assert result.explanation.rule_triggers == [
            'Discipline below 45 blocks readiness',
            'Low injury resilience and stamina blocks readiness',
            'Work rate below 45 is a warning flag',
            DECLINE,
        ]


class TestTrendExclusivity:
    """At most one trend message per evaluation."""

    @pytest.mark.parametrize('previous_values', [
        (70, 60, 50), (90, 80, 70), (80, 70, 60), (70, 80, 60), (79, 71, 59), (81, 69, 61),
    ])
    def test_only_one_trend_message(self, cm_metrics, cm_traits, previous_values):
        result = compute_readiness_index(
            cm_metrics, cm_traits, PlayerPosition.CM, snapshot(*previous_values)
        )
        trend_messages = [
            m for m in result.explanation.rule_triggers if m in (MOMENTUM, DECLINE)
        ]

        assert len(trend_messages) <= 1
