from app.repositories.base import BaseRepository
from app.repositories.user_repo import UserRepository
from app.repositories.study_plan_repo import StudyPlanRepository
from app.repositories.quiz_repo import QuizRepository
from app.repositories.study_group_repo import StudyGroupRepository
from app.repositories.idea_repo import IdeaRepository
from app.repositories.notification_repo import NotificationRepository, PeerMatchRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "StudyPlanRepository",
    "QuizRepository",
    "StudyGroupRepository",
    "IdeaRepository",
    "NotificationRepository",
    "PeerMatchRepository",
]
