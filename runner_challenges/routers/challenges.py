# runner_challenges/routers/challenges.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from runner_challenges.auth.dependencies import get_current_user_id
from runner_challenges.db.database import get_db
from runner_challenges.schemas.challenge import ChallengeNumber, MyChallenge, UserId
from runner_challenges.services.catalog import ChallengeCatalog, get_catalog
from runner_challenges.services.progression import ProgressionWorkflow

router = APIRouter(prefix="/api/my/challenges", tags=["challenges"])


def get_workflow(
    db: Session = Depends(get_db),
    catalog: ChallengeCatalog = Depends(get_catalog),
) -> ProgressionWorkflow:
    return ProgressionWorkflow.for_session(db, catalog)


# --------------------- representations ---------------------
class MyChallengeItem(BaseModel):
    number: int
    is_locked: bool
    is_available: bool
    is_started: bool
    is_completed: bool
    minimum_distance: Optional[float] = None
    minimum_pace: Optional[float] = None

    @classmethod
    def of(cls, c: MyChallenge) -> "MyChallengeItem":
        return cls(
            number=c.number,
            is_locked=c.locked,
            is_available=c.available,
            is_started=c.started,
            is_completed=c.completed,
            minimum_distance=c.minimum_distance,
            minimum_pace=c.minimum_pace,
        )


class EmbeddedChallenges(BaseModel):
    challenges: List[MyChallengeItem]


class MyChallengeCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: EmbeddedChallenges = Field(alias="_embedded")


# --------------------- API ---------------------
@router.get("", response_model=MyChallengeCollection)
def list_my_challenges(
    user_id: UserId = Depends(get_current_user_id),
    workflow: ProgressionWorkflow = Depends(get_workflow),
):
    """
    GET /api/my/challenges
    - every catalog challenge, ascending by number, with this user's status
    """
    items = [MyChallengeItem.of(c) for c in workflow.list_challenges(user_id)]
    return MyChallengeCollection(embedded=EmbeddedChallenges(challenges=items))


@router.post("/{number}/start", response_model=MyChallengeItem)
def start_challenge(
    number: str,
    user_id: UserId = Depends(get_current_user_id),
    workflow: ProgressionWorkflow = Depends(get_workflow),
):
    """
    POST /api/my/challenges/{number}/start
    - 404: no such challenge
    - 412: locked / prerequisites not met
    - replaces the challenge the user had started before
    """
    try:
        challenge_number = ChallengeNumber.parse(number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if challenge_number is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="challenge number missing")

    started = workflow.start(challenge_number, user_id)
    challenge = workflow.catalog.get(challenge_number)

    return MyChallengeItem(
        number=started.challenge_number,
        is_locked=challenge.locked,
        is_available=True,
        is_started=True,
        is_completed=False,
        minimum_distance=challenge.minimum_distance,
        minimum_pace=challenge.minimum_pace,
    )
