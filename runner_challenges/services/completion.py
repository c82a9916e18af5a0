# runner_challenges/services/completion.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from runner_challenges.schemas.activity import Activity, ActivityMetrics
from runner_challenges.schemas.challenge import Challenge

SECONDS_PER_MINUTE = 60.0


def pace_of(metrics: ActivityMetrics) -> Optional[float]:
    """minutes per km, None when the distance is not positive"""
    if metrics.distance_km <= 0:
        return None
    return (metrics.duration_seconds / SECONDS_PER_MINUTE) / metrics.distance_km


class CompletionCriterion:
    def is_satisfied_by(self, activity: Activity) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class MinimumDistanceCriterion(CompletionCriterion):
    minimum_distance: float  # km

    def is_satisfied_by(self, activity: Activity) -> bool:
        if activity.metrics is None:
            return False
        return activity.metrics.distance_km >= self.minimum_distance


@dataclass(frozen=True)
class MinimumPaceCriterion(CompletionCriterion):
    minimum_pace: float  # minutes per km

    def is_satisfied_by(self, activity: Activity) -> bool:
        if activity.metrics is None:
            return False
        pace = pace_of(activity.metrics)
        if pace is None:
            return False
        # lower pace is faster
        return pace <= self.minimum_pace


def build_completion_criteria(challenge: Challenge) -> List[CompletionCriterion]:
    """Distance first, then pace; only thresholds the challenge sets."""
    criteria: List[CompletionCriterion] = []
    if challenge.minimum_distance is not None:
        criteria.append(MinimumDistanceCriterion(challenge.minimum_distance))
    if challenge.minimum_pace is not None:
        criteria.append(MinimumPaceCriterion(challenge.minimum_pace))
    return criteria


class CompletionEvaluator:
    def can_be_completed_by(self, challenge: Challenge, activity: Optional[Activity]) -> bool:
        if activity is None:
            return False

        criteria = build_completion_criteria(challenge)
        # no requirements: any activity completes the challenge
        if not criteria:
            return True

        return all(criterion.is_satisfied_by(activity) for criterion in criteria)
