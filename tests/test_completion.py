from __future__ import annotations

import pytest

from builders import an_activity, an_activity_with_pace
from runner_challenges.schemas.activity import ActivityMetrics
from runner_challenges.schemas.challenge import Challenge, UserId
from runner_challenges.services.completion import (
    CompletionEvaluator,
    MinimumDistanceCriterion,
    MinimumPaceCriterion,
    build_completion_criteria,
    pace_of,
)

RUNNER = UserId.of("runner-1")


@pytest.fixture
def evaluator() -> CompletionEvaluator:
    return CompletionEvaluator()


def test_pace_is_minutes_per_km() -> None:
    assert pace_of(ActivityMetrics(distance_km=5.0, duration_seconds=1500)) == pytest.approx(5.0)
    assert pace_of(ActivityMetrics(distance_km=5.5, duration_seconds=1800)) == pytest.approx(5.4545, abs=1e-4)


@pytest.mark.parametrize("distance", [0.0, -1.0])
def test_pace_is_undefined_without_positive_distance(distance: float) -> None:
    assert pace_of(ActivityMetrics(distance_km=distance, duration_seconds=600)) is None


def test_criteria_follow_thresholds_distance_then_pace() -> None:
    assert build_completion_criteria(Challenge(number=1)) == []
    assert build_completion_criteria(Challenge(number=4, minimum_distance=5.0)) == [MinimumDistanceCriterion(5.0)]
    assert build_completion_criteria(Challenge(number=5, minimum_pace=6.0)) == [MinimumPaceCriterion(6.0)]
    assert build_completion_criteria(Challenge(number=6, minimum_pace=6.0, minimum_distance=10.0)) == [
        MinimumDistanceCriterion(10.0),
        MinimumPaceCriterion(6.0),
    ]


def test_missing_activity_never_completes(evaluator) -> None:
    assert evaluator.can_be_completed_by(Challenge(number=1), None) is False


def test_challenge_without_criteria_is_completed_by_any_activity(evaluator) -> None:
    assert evaluator.can_be_completed_by(Challenge(number=1), an_activity(RUNNER)) is True
    assert evaluator.can_be_completed_by(Challenge(number=1), an_activity(RUNNER, 0.1, 60)) is True


def test_minimum_distance(evaluator) -> None:
    challenge = Challenge(number=4, minimum_distance=5.0)

    assert evaluator.can_be_completed_by(challenge, an_activity(RUNNER, 5.5, 1800)) is True
    assert evaluator.can_be_completed_by(challenge, an_activity(RUNNER, 5.0, 1800)) is True
    assert evaluator.can_be_completed_by(challenge, an_activity(RUNNER, 4.99, 1800)) is False


def test_minimum_pace_lower_is_better(evaluator) -> None:
    run = an_activity(RUNNER, 5.5, 1800)  # ~5.45 min/km

    assert evaluator.can_be_completed_by(Challenge(number=5, minimum_pace=6.0), run) is True
    assert evaluator.can_be_completed_by(Challenge(number=8, minimum_pace=5.0), run) is False


def test_minimum_pace_exact_threshold_passes(evaluator) -> None:
    assert evaluator.can_be_completed_by(
        Challenge(number=5, minimum_pace=5.5),
        an_activity_with_pace(RUNNER, pace=5.5, distance_km=5.0),
    ) is True


def test_minimum_pace_fails_on_zero_distance() -> None:
    assert MinimumPaceCriterion(6.0).is_satisfied_by(an_activity(RUNNER, 0.0, 0)) is False


def test_numeric_criteria_fail_without_metrics(evaluator) -> None:
    no_metrics = an_activity(RUNNER)

    assert evaluator.can_be_completed_by(Challenge(number=4, minimum_distance=5.0), no_metrics) is False
    assert evaluator.can_be_completed_by(Challenge(number=5, minimum_pace=6.0), no_metrics) is False


def test_all_criteria_must_hold(evaluator) -> None:
    challenge = Challenge(number=6, minimum_distance=10.0, minimum_pace=5.5)

    assert evaluator.can_be_completed_by(challenge, an_activity_with_pace(RUNNER, 5.0, 10.0)) is True
    # far enough, too slow
    assert evaluator.can_be_completed_by(challenge, an_activity_with_pace(RUNNER, 6.0, 12.0)) is False
    # fast enough, too short
    assert evaluator.can_be_completed_by(challenge, an_activity_with_pace(RUNNER, 4.5, 5.0)) is False
