# runner_challenges/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from runner_challenges.config.settings import settings
from runner_challenges.db.database import engine, Base
from runner_challenges.routers import activities, challenges
from runner_challenges.services.catalog import get_catalog
from runner_challenges.services.exceptions import ChallengeUnavailable, NoSuchChallenge

# create_all needs every model imported
import runner_challenges.models  # noqa: F401

VERSION = "1.0.0"

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # fail fast on a broken catalog file instead of on the first request
    catalog = get_catalog()
    logger.info("runner-challenges %s started with %d challenges", VERSION, len(catalog))
    yield
    logger.info("runner-challenges stopped")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NoSuchChallenge)
async def no_such_challenge_handler(request: Request, exc: NoSuchChallenge):
    logger.info("Challenge not found: %s", exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(ChallengeUnavailable)
async def challenge_unavailable_handler(request: Request, exc: ChallengeUnavailable):
    logger.info("Challenge unavailable: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_412_PRECONDITION_FAILED,
        content={"detail": str(exc), "reason": exc.reason.value},
    )


app.include_router(challenges.router)
app.include_router(activities.router)


@app.get("/")
async def root():
    return {
        "message": "runner-challenges API is running",
        "version": VERSION,
    }


@app.get("/health")
async def health():
    return {"status": "UP"}
