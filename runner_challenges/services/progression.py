# runner_challenges/services/progression.py
from __future__ import annotations

import datetime as dt
import logging
import uuid
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from runner_challenges.models.progress import CompletedChallenge, StartedChallenge
from runner_challenges.schemas.activity import Activity
from runner_challenges.schemas.challenge import ChallengeNumber, MyChallenge, UserId
from runner_challenges.services.availability import AvailabilityEvaluator
from runner_challenges.services.catalog import ChallengeCatalog
from runner_challenges.services.completion import CompletionEvaluator
from runner_challenges.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class ProgressionWorkflow:
    """
    start / complete / list for one user's challenge progression.

    State per user:
      - at most one started challenge (overwritten by the next start)
      - completed history, append-only
    Completing a challenge does not clear the started record.
    """

    def __init__(
        self,
        catalog: ChallengeCatalog,
        store: ProgressStore,
        availability: Optional[AvailabilityEvaluator] = None,
        completion: Optional[CompletionEvaluator] = None,
        clock: Callable[[], dt.datetime] = utcnow,
    ):
        self.catalog = catalog
        self.store = store
        self.availability = availability or AvailabilityEvaluator.for_store(store)
        self.completion = completion or CompletionEvaluator()
        self.clock = clock

    @classmethod
    def for_session(cls, db: Session, catalog: ChallengeCatalog) -> "ProgressionWorkflow":
        return cls(catalog, ProgressStore(db))

    def start(self, number: ChallengeNumber, user_id: UserId) -> StartedChallenge:
        """
        Raises NoSuchChallenge / ChallengeUnavailable.
        Replaces whatever the user had started before.
        """
        challenge = self.catalog.get(number)
        self.availability.validate(challenge, user_id)

        started = self.store.upsert_started(user_id, number, self.clock())
        logger.info("[progression] user=%s started challenge %d", user_id, number.value)
        return started

    def complete(self, activity: Activity) -> Optional[CompletedChallenge]:
        """
        Never fails on business grounds:
        no started challenge or unmet criteria -> None, nothing written.
        """
        started = self.store.find_started(activity.user_id)
        if started is None:
            logger.debug("[progression] user=%s has no started challenge, activity ignored", activity.user_id)
            return None

        # a started number was valid at start time; a miss here is a catalog/config problem
        challenge = self.catalog.get(ChallengeNumber.of(started.challenge_number))

        if not self.completion.can_be_completed_by(challenge, activity):
            logger.debug(
                "[progression] user=%s activity does not meet challenge %d criteria",
                activity.user_id, challenge.number.value,
            )
            return None

        completed = self.store.append_completed(
            activity.user_id,
            challenge.number,
            activity.activity_id or str(uuid.uuid4()),
            activity.occurred_at,
        )
        logger.info(
            "[progression] user=%s completed challenge %d (activity=%s)",
            activity.user_id, challenge.number.value, completed.activity_id,
        )
        return completed

    def list_challenges(self, user_id: UserId) -> List[MyChallenge]:
        completed_numbers = self.store.completed_numbers(user_id)
        started = self.store.find_started(user_id)
        started_number = started.challenge_number if started else None

        return [
            MyChallenge(
                number=c.number.value,
                locked=c.locked,
                available=self.availability.test_against(c, user_id, completed_numbers),
                started=c.number.value == started_number,
                completed=c.number in completed_numbers,
                minimum_distance=c.minimum_distance,
                minimum_pace=c.minimum_pace,
            )
            for c in self.catalog.find_all()
        ]
