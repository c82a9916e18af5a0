# runner_challenges/db/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from runner_challenges.config.settings import settings


def _database_url(s=settings):
    # MySQL when DB_HOST is set, DATABASE_URL otherwise
    if s.db_host:
        return URL.create(
            "mysql+pymysql",
            username=s.db_user,
            password=s.db_pass,
            host=s.db_host,
            port=s.db_port,
            database=s.db_name,
        )
    return make_url(s.database_url)


def _engine_kwargs(url: URL) -> dict:
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # in-memory database must be shared by every session
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,  # detect dropped connections
        "pool_recycle": 1800,   # recycle connections every 30 minutes
        "pool_size": 5,
        "max_overflow": 10,
    }


url = _database_url()
engine = create_engine(url, **_engine_kwargs(url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# per-request session for FastAPI dependency injection
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
