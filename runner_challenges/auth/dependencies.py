# runner_challenges/auth/dependencies.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from runner_challenges.db.database import get_db
from runner_challenges.schemas.challenge import UserId
from runner_challenges.services.exceptions import InvalidSessionToken
from runner_challenges.services.session_tokens import get_user_id_by_token

SESSION_TOKEN_HEADER = "X-Session-Token"


def get_current_user_id(
    db: Session = Depends(get_db),
    x_session_token: Optional[str] = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> UserId:
    if not x_session_token or not x_session_token.strip():
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, f"{SESSION_TOKEN_HEADER} header missing")

    try:
        return get_user_id_by_token(db, x_session_token.strip())
    except InvalidSessionToken:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "invalid session token")
