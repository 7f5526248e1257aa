from fastapi import APIRouter

from .feedback.api import router as feedback_router
from .sessions.api import router as sessions_router

router = APIRouter()
router.include_router(sessions_router)
router.include_router(feedback_router)


@router.get("/health")
async def health_check():
    return {"ok": True}
