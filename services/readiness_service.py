"""
Readiness Service - Orchestrates readiness evaluation for callers.

Validates snapshot payloads from the backend API, runs the readiness
engine with environment settings, applies coach calibration and
serves multi-coach consensus views.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from config import get_config
from models.readiness import ReadinessResult
from analyzers.readiness_engine import ReadinessEngine, ReadinessConfig, TrendSettings
from schemas.readiness import ReadinessRequestSchema, validate_readiness_request
from services.calibration_service import CalibrationService, CoachScoringProfile
from services.consensus_service import ConsensusService, PlayerConsensus, RatedSnapshot
from utils.logger import setup_logger

logger = logging.getLogger("readiness.service")


class ReadinessService:
    """Handles business logic for readiness evaluation."""

    def __init__(self, settings=None):
        self.settings = settings or get_config()
        setup_logger('readiness', self.settings.LOG_LEVEL)

        self.engine = ReadinessEngine(self.build_engine_config())
        self.calibration = CalibrationService(min_snapshots=self.settings.CALIBRATION_MIN_SNAPSHOTS)
        self.consensus = ConsensusService(anonymize=self.settings.CONSENSUS_ANONYMIZE)

    def build_engine_config(self) -> ReadinessConfig:
        """Translate environment settings into an engine config."""
        trend = TrendSettings(
            enabled=self.settings.TREND_ENABLED,
            max_boost=self.settings.TREND_MAX_BOOST,
            max_penalty=self.settings.TREND_MAX_PENALTY
        )
        return ReadinessConfig.from_overrides(trend=trend)

    def evaluate(self, payload: dict,
                 coach_profile: Optional[CoachScoringProfile] = None) -> ReadinessResult:
        """
        Evaluate one readiness request.

        Args:
            payload: Raw request dict (metrics, traits, position, previousSnapshot)
            coach_profile: Scoring profile of the rating coach, if known

        Returns:
            ReadinessResult

        Raises:
            ValueError: If the payload fails validation
        """
        request = validate_readiness_request(payload)
        return self.evaluate_request(request, coach_profile)

    def evaluate_request(self, request: ReadinessRequestSchema,
                         coach_profile: Optional[CoachScoringProfile] = None) -> ReadinessResult:
        """Evaluate an already validated request."""
        current = request.to_model()
        previous = request.previous_snapshot.to_model() if request.previous_snapshot else None

        result = self.engine.evaluate(current.metrics, current.traits, request.position, previous)

        if self.settings.CALIBRATION_ENABLED and coach_profile is not None:
            adjustment, insights = self.calibration.calibration_adjustment(coach_profile)
            if adjustment:
                result = self.calibration.apply_calibration(result, adjustment, insights)
            else:
                logger.debug(f"No calibration applied for coach {coach_profile.coach_id}")

        return result

    def evaluate_batch(self, payloads: Sequence[dict],
                       coach_profiles: Optional[Dict[int, CoachScoringProfile]] = None
                       ) -> Tuple[List[Dict], List[str]]:
        """
        Evaluate readiness for a batch of players.

        Invalid payloads are reported in the error list; the rest of the
        batch is still evaluated. Coach profiles are looked up by the
        validated coach id.

        Returns:
            Tuple of (results, errors). Each result is the serialized
            readiness result plus the player's id.
        """
        coach_profiles = coach_profiles or {}
        results = []
        errors = []

        for index, payload in enumerate(payloads):
            if not isinstance(payload, dict):
                logger.warning(f"Rejected readiness payload {index + 1}: not an object")
                errors.append(f"Player {index + 1}: payload must be an object")
                continue

            try:
                request = validate_readiness_request(payload)
            except ValueError as ve:
                player_ref = payload.get('playerId', payload.get('player_id', index + 1))
                logger.warning(f"Rejected readiness payload for player {player_ref}: {ve}")
                errors.append(f"Player {player_ref}: {ve}")
                continue

            player_ref = request.player_id if request.player_id is not None else index + 1

            coach_profile = None
            if request.coach_id is not None:
                coach_profile = coach_profiles.get(request.coach_id)
                if coach_profile is None and self.settings.CALIBRATION_ENABLED:
                    logger.warning(
                        f"Player {player_ref}: no scoring profile for coach {request.coach_id}, "
                        f"calibration skipped"
                    )

            result = self.evaluate_request(request, coach_profile)

            logger.debug(
                f"Player {player_ref}: overall={result.overall} band={result.status_band.value} "
                f"gated={result.is_gated}"
            )
            results.append({'playerId': player_ref, **result.to_dict()})

        logger.info(f"Evaluated readiness for {len(results)} players ({len(errors)} rejected)")
        return results, errors

    def player_consensus(self, player_id: int, player_name: str,
                         snapshots: Sequence[RatedSnapshot]) -> Optional[PlayerConsensus]:
        """Multi-coach consensus for a player, anonymized per settings."""
        return self.consensus.player_consensus(player_id, player_name, snapshots)
