# runner_challenges/services/progress_store.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.orm import Session

from runner_challenges.models.progress import CompletedChallenge, StartedChallenge
from runner_challenges.schemas.challenge import ChallengeNumber, UserId


class ProgressStore:
    """
    Started/completed progress records of users.
    Writes commit immediately; the caller does not manage the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------------- started ----------------
    def find_started(self, user_id: UserId) -> Optional[StartedChallenge]:
        stmt = (
            select(StartedChallenge)
            .where(StartedChallenge.user_id == user_id.value)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalars().first()

    def upsert_started(
        self,
        user_id: UserId,
        number: ChallengeNumber,
        started_at: dt.datetime,
    ) -> StartedChallenge:
        """
        Single INSERT ... ON CONFLICT statement keyed on user_id,
        so concurrent starts for one user leave exactly one row.
        """
        values = {
            "user_id": user_id.value,
            "challenge_number": number.value,
            "started_at": started_at,
        }
        dialect = self.db.get_bind().dialect.name

        if dialect == "mysql":
            stmt = mysql.insert(StartedChallenge).values(**values)
            stmt = stmt.on_duplicate_key_update(
                challenge_number=stmt.inserted.challenge_number,
                started_at=stmt.inserted.started_at,
            )
        elif dialect in ("sqlite", "postgresql"):
            insert = sqlite.insert if dialect == "sqlite" else postgresql.insert
            stmt = insert(StartedChallenge).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[StartedChallenge.user_id],
                set_={
                    "challenge_number": stmt.excluded.challenge_number,
                    "started_at": stmt.excluded.started_at,
                },
            )
        else:
            raise NotImplementedError(f"started challenge upsert is not supported on {dialect}")

        self.db.execute(stmt)
        self.db.commit()
        return self.find_started(user_id)

    # ---------------- completed ----------------
    def find_completed_by_user(self, user_id: UserId) -> List[CompletedChallenge]:
        stmt = (
            select(CompletedChallenge)
            .where(CompletedChallenge.user_id == user_id.value)
            .order_by(CompletedChallenge.completed_at.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def completed_numbers(self, user_id: UserId) -> set[ChallengeNumber]:
        return {ChallengeNumber.of(c.challenge_number) for c in self.find_completed_by_user(user_id)}

    def append_completed(
        self,
        user_id: UserId,
        number: ChallengeNumber,
        activity_id: Optional[str],
        completed_at: dt.datetime,
    ) -> CompletedChallenge:
        row = CompletedChallenge(
            user_id=user_id.value,
            challenge_number=number.value,
            activity_id=activity_id,
            completed_at=completed_at,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row
