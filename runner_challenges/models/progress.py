# runner_challenges/models/progress.py
from __future__ import annotations

import datetime as dt
import uuid
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from runner_challenges.db.database import Base


class StartedChallenge(Base):
    """
    The challenge a user is currently working on.
    - user_id is the PK: at most one started challenge per user
    - starting another challenge overwrites the row (upsert)
    """
    __tablename__ = "started_challenge"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    challenge_number: Mapped[int] = mapped_column(Integer, nullable=False)
    started_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class CompletedChallenge(Base):
    """
    Append-only completion history.
    (user_id, challenge_number) is not unique: repeated qualifying activities add rows.
    """
    __tablename__ = "challenge_completed"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    challenge_number: Mapped[int] = mapped_column(Integer, nullable=False)
    activity_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    completed_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_challenge_completed_user", "user_id"),
    )
