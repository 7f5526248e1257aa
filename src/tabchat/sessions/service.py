"""
Sessions Service Layer

This module contains the business logic for session management operations,
separated from the API layer for better maintainability.
"""

from typing import Any, Optional

from fastapi import HTTPException
from loguru import logger

from ..constants import FEEDBACK_SAVED
from .exceptions import InvalidQuestion, MessageNotFound, SessionNotFound
from .session import Feedback
from .store import SessionStore


class SessionsService:
    """Service class for session management operations."""

    @staticmethod
    async def create_session(
        title: Optional[str], first_question: Optional[str], session_store: SessionStore
    ) -> dict[str, Any]:
        """Create a session and return its id and title."""
        try:
            session = await session_store.create_session(title=title, first_question=first_question)
            return {"id": session.id, "title": session.title}
        except Exception as e:
            logger.error(f"Failed to create session: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create session: {str(e)}")

    @staticmethod
    async def process_message(
        session_id: str, question: Optional[str], session_store: SessionStore
    ) -> dict[str, Any]:
        """Post a question to a session and return the assistant's answer."""
        try:
            _, assistant_message = await session_store.append_exchange(session_id, question)
            return {"assistant": assistant_message}
        except SessionNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except InvalidQuestion as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Failed to process message for session {session_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to process message: {str(e)}")

    @staticmethod
    async def list_sessions_by_date_desc(session_store: SessionStore) -> dict[str, Any]:
        """List all sessions sorted by creation date (newest first)."""
        try:
            sessions = await session_store.list_sessions()
            return {"sessions": sessions}
        except Exception as e:
            logger.error(f"Failed to list sessions: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to list sessions: {str(e)}")

    @staticmethod
    async def get_session_info(session_id: str, session_store: SessionStore) -> dict[str, Any]:
        """Get a session with its full message history."""
        try:
            session = await session_store.get_session(session_id)
            return {"session": session}
        except SessionNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except Exception as e:
            logger.error(f"Failed to get session {session_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to get session info: {str(e)}")

    @staticmethod
    async def save_feedback(
        session_id: Optional[str],
        message_id: Optional[str],
        feedback: Optional[Feedback],
        session_store: SessionStore,
    ) -> dict[str, Any]:
        """Record (or clear) the feedback on a message."""
        try:
            await session_store.set_feedback(session_id, message_id, feedback)
            return {"success": True, "message": FEEDBACK_SAVED}
        except (SessionNotFound, MessageNotFound) as e:
            raise HTTPException(status_code=404, detail=str(e))
        except Exception as e:
            logger.error(f"Failed to save feedback for message {message_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to save feedback: {str(e)}")

    @staticmethod
    async def delete_session(session_id: str, session_store: SessionStore) -> dict[str, Any]:
        """Delete a specific session and its history."""
        try:
            await session_store.delete_session(session_id)
            return {"success": True}
        except SessionNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except Exception as e:
            logger.error(f"Failed to delete session {session_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete session: {str(e)}")
