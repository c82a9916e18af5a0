# runner_challenges/services/catalog.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List

from runner_challenges.config.settings import settings
from runner_challenges.schemas.challenge import Challenge, ChallengeCatalogFile, ChallengeNumber
from runner_challenges.services.exceptions import NoSuchChallenge

logger = logging.getLogger(__name__)


class ChallengeCatalog:
    """Read-only lookup of challenge definitions by number."""

    def __init__(self, challenges: Iterable[Challenge]):
        by_number: Dict[ChallengeNumber, Challenge] = {}
        for challenge in challenges:
            if challenge.number in by_number:
                raise ValueError(f"Duplicate challenge number in catalog: {challenge.number.value}")
            by_number[challenge.number] = challenge

        for challenge in by_number.values():
            missing = sorted(p for p in challenge.prerequisites if p not in by_number)
            if missing:
                raise ValueError(
                    f"Challenge {challenge.number.value} requires unknown challenges: "
                    + ", ".join(str(m.value) for m in missing)
                )

        self._by_number = by_number

    @classmethod
    def from_file(cls, path: Path) -> "ChallengeCatalog":
        raw = Path(path).read_text(encoding="utf-8")
        parsed = ChallengeCatalogFile.model_validate_json(raw)
        logger.info("[catalog] loaded %d challenges from %s", len(parsed.challenges), path)
        return cls(parsed.challenges)

    def get(self, number: ChallengeNumber) -> Challenge:
        challenge = self._by_number.get(number)
        if challenge is None:
            raise NoSuchChallenge(number)
        return challenge

    def find_all(self) -> List[Challenge]:
        return sorted(self._by_number.values(), key=lambda c: c.number)

    def __len__(self) -> int:
        return len(self._by_number)


@lru_cache(maxsize=1)
def get_catalog() -> ChallengeCatalog:
    return ChallengeCatalog.from_file(settings.resolved_catalog_path)
