# runner_challenges/services/availability.py
from __future__ import annotations

from typing import AbstractSet, List, Sequence

from runner_challenges.schemas.challenge import Challenge, ChallengeNumber, UserId
from runner_challenges.services.exceptions import ChallengeUnavailable
from runner_challenges.services.progress_store import ProgressStore


class AvailabilitySpecification:
    """A rule deciding whether a user may start a challenge."""

    def test(self, challenge: Challenge, user_id: UserId) -> bool:
        raise NotImplementedError

    def validate(self, challenge: Challenge, user_id: UserId) -> None:
        raise NotImplementedError

    def test_against(
        self,
        challenge: Challenge,
        user_id: UserId,
        completed_numbers: AbstractSet[ChallengeNumber],
    ) -> bool:
        """Same as test(), reusing completed numbers the caller already loaded."""
        return self.test(challenge, user_id)


class NotLockedSpecification(AvailabilitySpecification):
    def test(self, challenge: Challenge, user_id: UserId) -> bool:
        return not challenge.locked

    def validate(self, challenge: Challenge, user_id: UserId) -> None:
        if challenge.locked:
            raise ChallengeUnavailable.locked(challenge.number)


class PrerequisitesMetSpecification(AvailabilitySpecification):
    def __init__(self, store: ProgressStore):
        self.store = store

    def test(self, challenge: Challenge, user_id: UserId) -> bool:
        if not challenge.prerequisites:
            return True
        # one lookup per evaluation, not one per prerequisite
        return self.test_against(challenge, user_id, self.store.completed_numbers(user_id))

    def test_against(
        self,
        challenge: Challenge,
        user_id: UserId,
        completed_numbers: AbstractSet[ChallengeNumber],
    ) -> bool:
        return challenge.prerequisites <= completed_numbers

    def validate(self, challenge: Challenge, user_id: UserId) -> None:
        if not self.test(challenge, user_id):
            raise ChallengeUnavailable.prerequisites_not_met(challenge.number)


def build_availability_specifications(store: ProgressStore) -> List[AvailabilitySpecification]:
    """
    Evaluation order is part of the contract:
    a locked challenge reports "locked" even when prerequisites are also missing.
    """
    return [
        NotLockedSpecification(),
        PrerequisitesMetSpecification(store),
    ]


class AvailabilityEvaluator(AvailabilitySpecification):
    def __init__(self, specifications: Sequence[AvailabilitySpecification]):
        self.specifications = list(specifications)

    @classmethod
    def for_store(cls, store: ProgressStore) -> "AvailabilityEvaluator":
        return cls(build_availability_specifications(store))

    def test(self, challenge: Challenge, user_id: UserId) -> bool:
        return all(spec.test(challenge, user_id) for spec in self.specifications)

    def test_against(
        self,
        challenge: Challenge,
        user_id: UserId,
        completed_numbers: AbstractSet[ChallengeNumber],
    ) -> bool:
        return all(
            spec.test_against(challenge, user_id, completed_numbers) for spec in self.specifications
        )

    def validate(self, challenge: Challenge, user_id: UserId) -> None:
        for spec in self.specifications:
            spec.validate(challenge, user_id)
