# runner_challenges/schemas/challenge.py
from __future__ import annotations

import uuid
from functools import total_ordering
from typing import Any, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


@total_ordering
class ChallengeNumber(BaseModel):
    """Position of a challenge in the catalog, starting from 1."""

    model_config = ConfigDict(frozen=True)

    value: int

    @model_validator(mode="before")
    @classmethod
    def from_plain_int(cls, data: Any):
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    @field_validator("value")
    @classmethod
    def starts_from_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Challenge number must start from 1")
        return v

    @classmethod
    def of(cls, value: int) -> "ChallengeNumber":
        return cls(value=value)

    @classmethod
    def parse(cls, source: Optional[str]) -> Optional["ChallengeNumber"]:
        """
        Text -> ChallengeNumber.
        Blank text gives None; anything that is not an integer raises ValueError.
        """
        if source is None or not source.strip():
            return None
        try:
            value = int(source.strip())
        except ValueError as e:
            raise ValueError(f"Cannot convert '{source}' to ChallengeNumber") from e
        return cls.of(value)

    def __lt__(self, other: "ChallengeNumber") -> bool:
        if not isinstance(other, ChallengeNumber):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


class UserId(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str

    @model_validator(mode="before")
    @classmethod
    def from_plain_str(cls, data: Any):
        if isinstance(data, str):
            return {"value": data}
        return data

    @field_validator("value")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("UserId cannot be null or empty")
        return v

    @classmethod
    def of(cls, value: str) -> "UserId":
        return cls(value=value)

    @classmethod
    def generate(cls) -> "UserId":
        return cls(value=str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value


class Challenge(BaseModel):
    """
    Catalog entry. Identity is the number.
    - minimum_distance: km
    - minimum_pace: minutes per km (lower is faster)
    """

    model_config = ConfigDict(frozen=True)

    number: ChallengeNumber
    locked: bool = False
    prerequisites: FrozenSet[ChallengeNumber] = Field(default_factory=frozenset)
    minimum_distance: Optional[float] = None
    minimum_pace: Optional[float] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Challenge):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)


class MyChallenge(BaseModel):
    """One row of a user's challenge list."""

    number: int
    locked: bool
    available: bool
    started: bool
    completed: bool
    minimum_distance: Optional[float] = None
    minimum_pace: Optional[float] = None


class ChallengeCatalogFile(BaseModel):
    challenges: List[Challenge] = Field(default_factory=list)
