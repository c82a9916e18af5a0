# runner_challenges/services/exceptions.py
from __future__ import annotations

import enum

from runner_challenges.schemas.challenge import ChallengeNumber


class ChallengeError(Exception):
    """Base class for progression rule failures."""


class NoSuchChallenge(ChallengeError):
    def __init__(self, number: ChallengeNumber):
        self.number = number
        super().__init__(f"No such challenge: {number.value}")


class UnavailableReason(str, enum.Enum):
    locked = "locked"
    prerequisites_not_met = "prerequisites_not_met"

    @property
    def description(self) -> str:
        return self.value.replace("_", " ")


class ChallengeUnavailable(ChallengeError):
    def __init__(self, number: ChallengeNumber, reason: UnavailableReason):
        self.number = number
        self.reason = reason
        super().__init__(f"Challenge {number.value} is {reason.description}")

    @classmethod
    def locked(cls, number: ChallengeNumber) -> "ChallengeUnavailable":
        return cls(number, UnavailableReason.locked)

    @classmethod
    def prerequisites_not_met(cls, number: ChallengeNumber) -> "ChallengeUnavailable":
        return cls(number, UnavailableReason.prerequisites_not_met)


class InvalidSessionToken(Exception):
    def __init__(self, token: str):
        self.token = token
        super().__init__("Invalid session token")
