from runner_challenges.models.progress import StartedChallenge, CompletedChallenge
from runner_challenges.models.user_session import UserSession
