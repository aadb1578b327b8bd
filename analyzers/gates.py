"""
Readiness Gates - Hard rules that cap a readiness score.

Each gate is a small rule object. A failing gate always records its
message; gates carrying a max_cap also limit the overall score.
Gates only ever restrict the score, never inflate it.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from models.constants import PlayerPosition, NEUTRAL_SCORE, GATE_SCORE_CAP
from models.readiness import MetricValue, TraitValue


def find_metric(metrics: Sequence[MetricValue], metric_key: str,
                default: float = NEUTRAL_SCORE) -> float:
    """Value of the first metric with this key, or the default if absent."""
    for metric in metrics:
        if metric.metric_key == metric_key:
            return metric.value
    return default


def find_trait(traits: Sequence[TraitValue], trait_key: str,
               default: float = NEUTRAL_SCORE) -> float:
    """Value of the first trait with this key, or the default if absent."""
    for trait in traits:
        if trait.trait_key == trait_key:
            return trait.value
    return default


@dataclass(frozen=True)
class GateOutcome:
    """Result of running one gate against a snapshot."""
    name: str
    passed: bool
    message: str
    max_cap: Optional[int] = None

    @property
    def caps_score(self) -> bool:
        return not self.passed and self.max_cap is not None


class ReadinessGate:
    """Base class for readiness gates."""

    name: str = ""
    message: str = ""
    max_cap: Optional[int] = None

    def passes(self, metrics: Sequence[MetricValue], traits: Sequence[TraitValue],
               position: PlayerPosition) -> bool:
        raise NotImplementedError

    def evaluate(self, metrics: Sequence[MetricValue], traits: Sequence[TraitValue],
                 position: PlayerPosition) -> GateOutcome:
        """Run this gate and package the outcome."""
        return GateOutcome(
            name=self.name,
            passed=self.passes(metrics, traits, position),
            message=self.message,
            max_cap=self.max_cap
        )


class TraitThresholdGate(ReadinessGate):
    """Fails when a trait falls below a minimum value."""

    def __init__(self, name: str, trait_key: str, minimum: float, message: str,
                 max_cap: Optional[int] = None):
        self.name = name
        self.trait_key = trait_key
        self.minimum = minimum
        self.message = message
        self.max_cap = max_cap

    def passes(self, metrics, traits, position) -> bool:
        return find_trait(traits, self.trait_key) >= self.minimum


class MetricThresholdGate(ReadinessGate):
    """
    Fails when any listed metric falls below its minimum.

    Optionally restricted to a set of positions; players in any other
    position always pass.
    """

    def __init__(self, name: str, minimums: dict, message: str,
                 max_cap: Optional[int] = None, positions: Optional[Sequence[PlayerPosition]] = None):
        self.name = name
        self.minimums = dict(minimums)
        self.message = message
        self.max_cap = max_cap
        self.positions = tuple(positions) if positions else None

    def passes(self, metrics, traits, position) -> bool:
        if self.positions is not None and position not in self.positions:
            return True

        return all(
            find_metric(metrics, metric_key) >= minimum
            for metric_key, minimum in self.minimums.items()
        )


# =============================================================================
# DEFAULT GATES
# =============================================================================

DISCIPLINE_GATE = TraitThresholdGate(
    name='Discipline Gate',
    trait_key='discipline',
    minimum=45,
    message='Discipline below 45 blocks readiness',
    max_cap=GATE_SCORE_CAP
)

INJURY_RESILIENCE_GATE = MetricThresholdGate(
    name='Injury Resilience Gate',
    minimums={'injury_resilience': 35, 'stamina': 40},
    message='Low injury resilience and stamina blocks readiness',
    max_cap=GATE_SCORE_CAP
)

DEFENSIVE_POSITIONING_GATE = MetricThresholdGate(
    name='Positioning Gate (Defensive)',
    minimums={'positioning': 40},
    message='Defensive positioning below 40 blocks readiness for CB/DM',
    max_cap=GATE_SCORE_CAP,
    positions=[PlayerPosition.CB, PlayerPosition.DM]
)

# Warning only, no cap
WORK_RATE_GATE = TraitThresholdGate(
    name='Work Rate Gate',
    trait_key='work_rate',
    minimum=45,
    message='Work rate below 45 is a warning flag'
)

DEFAULT_GATES: List[ReadinessGate] = [
    DISCIPLINE_GATE,
    INJURY_RESILIENCE_GATE,
    DEFENSIVE_POSITIONING_GATE,
    WORK_RATE_GATE,
]


def run_gates(gates: Sequence[ReadinessGate], metrics: Sequence[MetricValue],
              traits: Sequence[TraitValue], position: PlayerPosition) -> List[GateOutcome]:
    """Run every gate in order. Never short-circuits."""
    return [gate.evaluate(metrics, traits, position) for gate in gates]


def tightest_cap(outcomes: Sequence[GateOutcome]) -> Optional[int]:
    """Lowest cap among failing gates, or None when no capping gate failed."""
    caps = [outcome.max_cap for outcome in outcomes if outcome.caps_score]
    return min(caps) if caps else None


def apply_gate_caps(overall: int, outcomes: Sequence[GateOutcome]) -> int:
    """Lower overall to the tightest cap among failing gates."""
    cap = tightest_cap(outcomes)
    return overall if cap is None else min(overall, cap)
