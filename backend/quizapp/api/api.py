from fastapi import APIRouter

from .endpoints import auth, users, questions, quiz, results, health

api_router = APIRouter()

api_router.include_router(auth.router, tags=["authentication"])
api_router.include_router(users.router, prefix="/user", tags=["users"])
api_router.include_router(questions.router, prefix="/questions", tags=["questions"])
api_router.include_router(quiz.router, prefix="/quiz", tags=["quiz"])
api_router.include_router(results.router, prefix="/results", tags=["results"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
