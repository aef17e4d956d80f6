from app.models.base import Base
from app.models.user import User
from app.models.study_plan import StudyPlan, PlanDifficulty
from app.models.quiz import Quiz
from app.models.study_group import StudyGroup, StudyGroupMember
from app.models.idea import Idea
from app.models.peer_match import PeerMatch, PeerMatchStatus
from app.models.notification import Notification

__all__ = [
    "Base",
    "User",
    "StudyPlan",
    "PlanDifficulty",
    "Quiz",
    "StudyGroup",
    "StudyGroupMember",
    "Idea",
    "PeerMatch",
    "PeerMatchStatus",
    "Notification",
]
