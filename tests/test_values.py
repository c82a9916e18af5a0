from __future__ import annotations

import pytest

from runner_challenges.schemas.activity import Activity
from runner_challenges.schemas.challenge import Challenge, ChallengeNumber, UserId


@pytest.mark.parametrize("value", [0, -1, -100])
def test_challenge_number_rejects_non_positive(value: int) -> None:
    with pytest.raises(ValueError, match="must start from 1"):
        ChallengeNumber.of(value)


def test_challenge_number_starts_from_one() -> None:
    assert ChallengeNumber.of(1).value == 1


def test_challenge_numbers_are_ordered_and_hashable() -> None:
    numbers = [ChallengeNumber.of(3), ChallengeNumber.of(1), ChallengeNumber.of(2)]
    assert [n.value for n in sorted(numbers)] == [1, 2, 3]
    assert ChallengeNumber.of(1) < ChallengeNumber.of(2)
    assert ChallengeNumber.of(2) >= ChallengeNumber.of(2)
    assert {ChallengeNumber.of(1), ChallengeNumber.of(1)} == {ChallengeNumber.of(1)}


def test_challenge_number_parse() -> None:
    assert ChallengeNumber.parse(" 4 ") == ChallengeNumber.of(4)
    assert ChallengeNumber.parse("") is None
    assert ChallengeNumber.parse(None) is None
    with pytest.raises(ValueError, match="Cannot convert 'abc'"):
        ChallengeNumber.parse("abc")
    with pytest.raises(ValueError, match="must start from 1"):
        ChallengeNumber.parse("0")


def test_user_id_is_trimmed() -> None:
    assert UserId.of("  runner-1 ").value == "runner-1"
    assert UserId.of("runner-1") == UserId.of(" runner-1")


@pytest.mark.parametrize("value", ["", "   "])
def test_user_id_rejects_blank(value: str) -> None:
    with pytest.raises(ValueError):
        UserId.of(value)


def test_user_id_generate_is_unique() -> None:
    assert UserId.generate() != UserId.generate()


def test_challenge_identity_is_number() -> None:
    assert Challenge(number=1, locked=True) == Challenge(number=1, minimum_distance=3.0)
    assert Challenge(number=1) != Challenge(number=2)


def test_challenge_accepts_plain_ints() -> None:
    challenge = Challenge(number=7, prerequisites=[1, 2, 2])
    assert challenge.number == ChallengeNumber.of(7)
    assert challenge.prerequisites == frozenset({ChallengeNumber.of(1), ChallengeNumber.of(2)})


def test_activity_parses_user_id_from_plain_string() -> None:
    activity = Activity.model_validate(
        {"user_id": " abc ", "occurred_at": "2024-05-01T07:30:00Z", "metrics": {"distance_km": 5, "duration_seconds": 1500}}
    )
    assert activity.user_id == UserId.of("abc")
    assert activity.metrics.distance_km == 5.0
