# runner_challenges/services/session_tokens.py
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from runner_challenges.models.user_session import UserSession
from runner_challenges.schemas.challenge import UserId
from runner_challenges.services.exceptions import InvalidSessionToken


def get_user_id_by_token(db: Session, token: str) -> UserId:
    row = db.execute(select(UserSession).where(UserSession.token == token)).scalars().first()
    if row is None:
        raise InvalidSessionToken(token)
    return UserId.of(row.user_id)


def register_session(db: Session, token: str, user_id: UserId) -> UserSession:
    """token -> user mapping; re-registering a token moves it to the new user"""
    row = db.execute(select(UserSession).where(UserSession.token == token)).scalars().first()
    if row:
        row.user_id = user_id.value
    else:
        row = UserSession(token=token, user_id=user_id.value)
        db.add(row)
    db.commit()
    db.refresh(row)
    return row
