# runner_challenges/routers/activities.py
from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, status

from runner_challenges.schemas.activity import Activity
from runner_challenges.services.activity_listener import handle_user_activity
from runner_challenges.services.catalog import ChallengeCatalog, get_catalog

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.post("", status_code=status.HTTP_202_ACCEPTED)
def deliver_activity(
    activity: Activity,
    background_tasks: BackgroundTasks,
    catalog: ChallengeCatalog = Depends(get_catalog),
):
    """
    POST /api/activities
    - accepts a recorded activity and returns immediately
    - completion of the user's started challenge is evaluated in the background
    """
    background_tasks.add_task(handle_user_activity, activity, catalog)
    return {"status": "accepted"}
