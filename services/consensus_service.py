"""
Multi-Coach Consensus Service

Aggregates the ratings several coaches have given the same player into
per-metric consensus figures and an overall readiness spread.
"""

import statistics
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from models.readiness import MetricValue


@dataclass
class RatedSnapshot:
    """One coach's snapshot of a player, as fetched from the backend."""
    coach_id: int
    created_at: datetime
    metrics: List[MetricValue] = field(default_factory=list)
    coach_name: Optional[str] = None
    readiness_overall: Optional[int] = None


@dataclass
class CoachRating:
    coach_id: int
    rating: float
    created_at: datetime
    coach_name: Optional[str] = None
    confidence: Optional[float] = None


@dataclass
class MetricConsensus:
    """Spread of coach ratings for one metric."""
    metric_key: str
    category: str
    average_rating: float
    min_rating: float
    max_rating: float
    rating_count: int
    standard_deviation: float
    coach_ratings: List[CoachRating] = field(default_factory=list)


@dataclass
class ReadinessConsensus:
    average: float
    min: int
    max: int
    coach_readiness: List[CoachRating] = field(default_factory=list)


@dataclass
class PlayerConsensus:
    """
    Consensus view of a player across all coaches who rated them.

    Attributes:
        player_id: Player identifier
        player_name: Player display name
        total_snapshots: Number of snapshots considered
        unique_coaches: Number of distinct coaches
        metrics: Per-metric consensus, in first-seen order
        overall_readiness: Readiness spread, if any snapshot carried one
    """
    player_id: int
    player_name: str
    total_snapshots: int
    unique_coaches: int
    metrics: List[MetricConsensus]
    overall_readiness: Optional[ReadinessConsensus] = None

    def get_metric(self, metric_key: str) -> Optional[MetricConsensus]:
        for metric in self.metrics:
            if metric.metric_key == metric_key:
                return metric
        return None


@dataclass
class PlayerRatingHistory:
    """All rated snapshots recorded for one player."""
    player_id: int
    player_name: str
    snapshots: List[RatedSnapshot] = field(default_factory=list)
    is_active: bool = True


@dataclass
class MultiCoachPlayer:
    """Summary row for a player rated by several coaches."""
    player_id: int
    player_name: str
    unique_coaches: int
    total_snapshots: int
    latest_snapshot_date: datetime


class ConsensusService:
    """Builds multi-coach consensus views."""

    def __init__(self, anonymize: bool = True):
        self.anonymize = anonymize

    def multi_coach_players(self, histories: Sequence[PlayerRatingHistory],
                            min_coaches: int = 2) -> List[MultiCoachPlayer]:
        """
        Active players rated by at least min_coaches distinct coaches.

        Returns:
            Summary rows, most recently rated player first
        """
        players = []
        for history in histories:
            if not history.is_active or not history.snapshots:
                continue

            unique_coaches = len({s.coach_id for s in history.snapshots})
            if unique_coaches < min_coaches:
                continue

            players.append(MultiCoachPlayer(
                player_id=history.player_id,
                player_name=history.player_name,
                unique_coaches=unique_coaches,
                total_snapshots=len(history.snapshots),
                latest_snapshot_date=max(s.created_at for s in history.snapshots)
            ))

        players.sort(key=lambda p: p.latest_snapshot_date, reverse=True)
        return players

    def player_consensus(self, player_id: int, player_name: str,
                         snapshots: Sequence[RatedSnapshot],
                         anonymize: Optional[bool] = None) -> Optional[PlayerConsensus]:
        """
        Compute consensus for a player from their rated snapshots (newest first).

        Args:
            player_id: Player identifier
            player_name: Player display name
            snapshots: Snapshots recorded by any coach
            anonymize: Hide coach names; defaults to the service setting

        Returns:
            PlayerConsensus, or None when there are no snapshots
        """
        if not snapshots:
            return None

        if anonymize is None:
            anonymize = self.anonymize

        unique_coaches = len({s.coach_id for s in snapshots})

        ratings_by_metric: Dict[str, List[CoachRating]] = {}
        categories: Dict[str, str] = {}
        for snapshot in snapshots:
            coach_name = None if anonymize else snapshot.coach_name
            for metric in snapshot.metrics:
                categories.setdefault(metric.metric_key, metric.category.value)
                ratings_by_metric.setdefault(metric.metric_key, []).append(CoachRating(
                    coach_id=snapshot.coach_id,
                    coach_name=coach_name,
                    rating=metric.value,
                    confidence=metric.confidence,
                    created_at=snapshot.created_at
                ))

        metrics = [
            self._metric_consensus(metric_key, categories[metric_key], ratings)
            for metric_key, ratings in ratings_by_metric.items()
        ]

        return PlayerConsensus(
            player_id=player_id,
            player_name=player_name,
            total_snapshots=len(snapshots),
            unique_coaches=unique_coaches,
            metrics=metrics,
            overall_readiness=self._readiness_consensus(snapshots, anonymize)
        )

    def _metric_consensus(self, metric_key: str, category: str,
                          ratings: List[CoachRating]) -> MetricConsensus:
        values = [r.rating for r in ratings]
        average = statistics.mean(values)

        return MetricConsensus(
            metric_key=metric_key,
            category=category,
            average_rating=average,
            min_rating=min(values),
            max_rating=max(values),
            rating_count=len(values),
            standard_deviation=statistics.pstdev(values),
            coach_ratings=ratings
        )

    def _readiness_consensus(self, snapshots: Sequence[RatedSnapshot],
                             anonymize: bool) -> Optional[ReadinessConsensus]:
        rated = [s for s in snapshots if s.readiness_overall is not None]
        if not rated:
            return None

        values = [s.readiness_overall for s in rated]
        return ReadinessConsensus(
            average=statistics.mean(values),
            min=min(values),
            max=max(values),
            coach_readiness=[
                CoachRating(
                    coach_id=s.coach_id,
                    coach_name=None if anonymize else s.coach_name,
                    rating=s.readiness_overall,
                    created_at=s.created_at
                )
                for s in rated
            ]
        )
