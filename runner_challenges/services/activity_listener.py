# runner_challenges/services/activity_listener.py
from __future__ import annotations

import logging
from typing import Optional

from runner_challenges.db.database import SessionLocal
from runner_challenges.models.progress import CompletedChallenge
from runner_challenges.schemas.activity import Activity
from runner_challenges.services.catalog import ChallengeCatalog, get_catalog
from runner_challenges.services.progression import ProgressionWorkflow

logger = logging.getLogger(__name__)


def handle_user_activity(
    activity: Activity,
    catalog: Optional[ChallengeCatalog] = None,
) -> Optional[CompletedChallenge]:
    """
    Entry point of the activity delivery path (fire-and-forget).
    Runs outside any request, so it owns its session.
    Redelivery is the deliverer's decision; nothing is retried here.
    """
    db = SessionLocal()
    try:
        workflow = ProgressionWorkflow.for_session(db, catalog or get_catalog())
        return workflow.complete(activity)
    except Exception:
        db.rollback()
        logger.exception("[activity] failed to process activity of user=%s", activity.user_id)
        raise
    finally:
        db.close()
