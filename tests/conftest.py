from __future__ import annotations

import os

# must be set before runner_challenges.config.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("DB_HOST", None)
os.environ.pop("CATALOG_PATH", None)

import pytest  # noqa: E402

import runner_challenges.models  # noqa: E402,F401
from runner_challenges.db.database import Base, SessionLocal, engine  # noqa: E402
from runner_challenges.schemas.challenge import Challenge, UserId  # noqa: E402
from runner_challenges.services.catalog import ChallengeCatalog  # noqa: E402
from runner_challenges.services.progress_store import ProgressStore  # noqa: E402
from runner_challenges.services.progression import ProgressionWorkflow  # noqa: E402


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog() -> ChallengeCatalog:
    return ChallengeCatalog(
        [
            Challenge(number=1),
            Challenge(number=2, prerequisites=[1]),
            Challenge(number=3),
            Challenge(number=4, minimum_distance=5.0),
            Challenge(number=5, minimum_pace=6.0),
            Challenge(number=6, locked=True, prerequisites=[1, 2]),
            Challenge(number=7, prerequisites=[1, 2]),
            Challenge(number=8, minimum_pace=5.0),
        ]
    )


@pytest.fixture
def store(db) -> ProgressStore:
    return ProgressStore(db)


@pytest.fixture
def workflow(catalog, store) -> ProgressionWorkflow:
    return ProgressionWorkflow(catalog, store)


@pytest.fixture
def user_id() -> UserId:
    return UserId.generate()
