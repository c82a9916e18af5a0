# runner_challenges/schemas/activity.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from runner_challenges.schemas.challenge import UserId


class ActivityMetrics(BaseModel):
    distance_km: float
    duration_seconds: int = Field(ge=0)


class Activity(BaseModel):
    """
    A recorded run delivered to the service.
    metrics may be missing (e.g. manual entry); such an activity never meets a numeric criterion.
    """

    user_id: UserId
    occurred_at: datetime
    activity_id: Optional[str] = None
    type: Optional[str] = None
    metrics: Optional[ActivityMetrics] = None
