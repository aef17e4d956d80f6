from fastapi import APIRouter
from app.api.v1.endpoints import auth, study_plans, quizzes, collaboration, learning, notifications

# ============================================================
# Main API Router
# ============================================================

api_router = APIRouter()

# Routes define their own prefixes (/auth/verify, /user/profile)
api_router.include_router(auth.router)

# /study-plans
api_router.include_router(study_plans.router)

# /quizzes
api_router.include_router(quizzes.router)

# /study-groups, /ideas, /peer-matches
api_router.include_router(collaboration.router)

# /learning-buddy, /analytics, /classroom
api_router.include_router(learning.router)

# /notifications
api_router.include_router(notifications.router)
