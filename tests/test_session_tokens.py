from __future__ import annotations

import pytest

from runner_challenges.schemas.challenge import UserId
from runner_challenges.services.exceptions import InvalidSessionToken
from runner_challenges.services.session_tokens import get_user_id_by_token, register_session


def test_registered_token_resolves_to_user(db) -> None:
    register_session(db, "token-1", UserId.of("runner-1"))

    assert get_user_id_by_token(db, "token-1") == UserId.of("runner-1")


def test_unknown_token(db) -> None:
    with pytest.raises(InvalidSessionToken):
        get_user_id_by_token(db, "nope")


def test_re_registering_moves_token(db) -> None:
    register_session(db, "token-1", UserId.of("runner-1"))
    register_session(db, "token-1", UserId.of("runner-2"))

    assert get_user_id_by_token(db, "token-1") == UserId.of("runner-2")
