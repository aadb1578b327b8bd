"""
Position Weight Definitions for the Readiness Index

Defines how much each category contributes to the overall readiness
score for each of the 9 playing positions. Weights are percentages and
each set sums to 100.

Attacking and goalkeeping roles lean on technical ability,
wide and central defenders lean on physical output.
"""

from dataclasses import dataclass, fields
from typing import Dict

from .constants import PlayerPosition


@dataclass(frozen=True)
class PositionWeights:
    """
    Percentage weights applied to the five category scores.

    Attributes:
        technical: Weight for technical (and goalkeeping) metrics
        physical: Weight for physical metrics
        mental: Weight for mental metrics
        attitude: Weight for behavioural traits
        tactical_fit: Weight for the derived tactical fit score
    """
    technical: float
    physical: float
    mental: float
    attitude: float
    tactical_fit: float

    @property
    def total(self) -> float:
        """Sum of all weights (expected, not required, to be 100)."""
        return sum(getattr(self, f.name) for f in fields(self))


# =============================================================================
# DEFAULT WEIGHT TABLE
# =============================================================================

DEFAULT_WEIGHTS: Dict[PlayerPosition, PositionWeights] = {
    PlayerPosition.GK: PositionWeights(technical=35, physical=20, mental=25, attitude=10, tactical_fit=10),
    PlayerPosition.CB: PositionWeights(technical=25, physical=30, mental=25, attitude=10, tactical_fit=10),
    PlayerPosition.FB: PositionWeights(technical=30, physical=30, mental=20, attitude=10, tactical_fit=10),
    PlayerPosition.WB: PositionWeights(technical=30, physical=30, mental=20, attitude=10, tactical_fit=10),
    PlayerPosition.DM: PositionWeights(technical=30, physical=25, mental=25, attitude=10, tactical_fit=10),
    PlayerPosition.CM: PositionWeights(technical=30, physical=25, mental=25, attitude=10, tactical_fit=10),
    PlayerPosition.AM: PositionWeights(technical=35, physical=20, mental=25, attitude=10, tactical_fit=10),
    PlayerPosition.W: PositionWeights(technical=30, physical=30, mental=20, attitude=10, tactical_fit=10),
    PlayerPosition.ST: PositionWeights(technical=35, physical=25, mental=20, attitude=10, tactical_fit=10),
}
