"""
Centralized constants and enums for the Readiness Index.
"""

from enum import Enum


class PlayerPosition(Enum):
    GK = "GK"
    CB = "CB"
    FB = "FB"
    WB = "WB"
    DM = "DM"
    CM = "CM"
    AM = "AM"
    W = "W"
    ST = "ST"


class MetricCategory(Enum):
    TECHNICAL = "TECHNICAL"
    PHYSICAL = "PHYSICAL"
    MENTAL = "MENTAL"
    GOALKEEPING = "GOALKEEPING"
    ATTITUDE = "ATTITUDE"


class StatusBand(Enum):
    """Readiness tiers, lowest first."""
    FOUNDATION = "Foundation"
    DEVELOPING = "Developing"
    COMPETITIVE = "Competitive"
    ADVANCED = "Advanced"
    READY = "Ready"


# Score used whenever a category or named observation is missing
NEUTRAL_SCORE = 50

# Cap applied by the blocking gates; sits one point under the Advanced threshold
GATE_SCORE_CAP = 74

SCORE_MIN = 0
SCORE_MAX = 100

# Categories aggregated into the technical score
TECHNICAL_CATEGORIES = (MetricCategory.TECHNICAL, MetricCategory.GOALKEEPING)

POSITIONING_METRIC = "positioning"

# Evaluated highest threshold first
STATUS_BAND_THRESHOLDS = [
    (85, StatusBand.READY),
    (75, StatusBand.ADVANCED),
    (60, StatusBand.COMPETITIVE),
    (40, StatusBand.DEVELOPING),
]

# Trend settings
TREND_ADJUSTMENT_LIMIT = 3
TREND_MIN_IMPROVEMENTS = 2
TREND_MIN_DECLINES = 3
POSITIVE_MOMENTUM_MESSAGE = "Positive momentum detected"
DECLINE_MESSAGE = "Decline in key metrics detected"

# Explanation sizes
TOP_STRENGTHS_COUNT = 5
TOP_RISKS_COUNT = 3

# Next action recommendations, first match wins
NEXT_ACTION_PROMOTE = "Promote to next age group for training"
NEXT_ACTION_INTEGRATE = "Integrate 1 session/week with senior"
NEXT_ACTION_FOCUS_BLOCK = "Keep in current group, focus block recommended"
NEXT_ACTION_FITNESS = "Fitness intervention required"
NEXT_ACTION_CONTINUE = "Continue development in current group"

FITNESS_INTERVENTION_THRESHOLD = 60

