"""
Sessions Management API

This module provides API endpoints for managing chat sessions,
including session creation, deletion, listing and question answering.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from ..manager_singleton import ManagerSingleton
from ..schema import CamelModel
from .service import SessionsService
from .session import AssistantMessage, Session, SessionSummary
from .store import SessionStore

# Router setup
router = APIRouter(prefix="/sessions", tags=["Sessions"])


class CreateSessionRequest(CamelModel):
    """Request model for session creation."""
    title: Optional[str] = Field(None, description="Session title; derived from the first question if omitted")
    first_question: Optional[str] = Field(None, description="Question to seed the session with")


class CreateSessionResponse(CamelModel):
    """Response model for session creation."""
    id: str
    title: str


class MessageRequest(CamelModel):
    """Request model for questions."""
    question: Optional[str] = Field(None, description="The question text")


class AssistantReplyResponse(CamelModel):
    """Response model for an answered question."""
    assistant: AssistantMessage


class SessionListResponse(CamelModel):
    """Response model for session list."""
    sessions: List[SessionSummary]


class SessionResponse(CamelModel):
    """Response model for a single session."""
    session: Session


class DeleteSessionResponse(CamelModel):
    success: bool = True


@router.post("", response_model=CreateSessionResponse)
async def create_session(
    request: Optional[CreateSessionRequest] = None,
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """Create a new session."""
    request = request or CreateSessionRequest()
    session_data = await SessionsService.create_session(request.title, request.first_question, session_store)
    return CreateSessionResponse(**session_data)


@router.get("", response_model=SessionListResponse)
async def list_sessions_by_date_desc(
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """List all sessions sorted by date (newest first)."""
    session_data = await SessionsService.list_sessions_by_date_desc(session_store)
    return SessionListResponse(**session_data)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session_info(
    session_id: str,
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """Get a specific session with all of its messages."""
    session_info = await SessionsService.get_session_info(session_id, session_store)
    return SessionResponse(**session_info)


@router.delete("/{session_id}", response_model=DeleteSessionResponse)
async def delete_session(
    session_id: str,
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """Delete a specific session and its history."""
    result = await SessionsService.delete_session(session_id, session_store)
    return DeleteSessionResponse(**result)


@router.post("/{session_id}/messages", response_model=AssistantReplyResponse)
async def message(
    session_id: str,
    request: Optional[MessageRequest] = None,
    session_store: SessionStore = Depends(ManagerSingleton.get_session_store),
):
    """Send a question to a specific session."""
    question = request.question if request else None
    reply = await SessionsService.process_message(session_id, question, session_store)
    return AssistantReplyResponse(**reply)
