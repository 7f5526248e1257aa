"""
Message Feedback API

Records like/dislike reactions on messages.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import Field, field_validator

from ..manager_singleton import ManagerSingleton
from ..schema import CamelModel
from ..sessions.service import SessionsService
from ..sessions.session import Feedback
from ..sessions.store import SessionStore

router = APIRouter(tags=["Feedback"])


class FeedbackRequest(CamelModel):
    """Request model for message feedback. A null or empty feedback clears it."""
    session_id: Optional[str] = Field(None, description="Session holding the message")
    message_id: Optional[str] = Field(None, description="Message to react to")
    feedback: Optional[Feedback] = Field(None, description="'like', 'dislike' or null")

    @field_validator("feedback", mode="before")
    @classmethod
    def blank_clears(cls, value):
        return value or None


class FeedbackResponse(CamelModel):
    success: bool = True
    message: str


@router.post("/feedback", response_model=FeedbackResponse)
async def save_feedback(
    request: FeedbackRequest,
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """Save feedback on a message."""
    result = await SessionsService.save_feedback(
        session_id=request.session_id,
        message_id=request.message_id,
        feedback=request.feedback,
        session_store=session_store,
    )
    return FeedbackResponse(**result)
