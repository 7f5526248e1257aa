"""
In-Memory Session Store

Holds every chat session for the lifetime of the process. Nothing is
persisted; a restart starts from an empty store.
"""

import asyncio
from typing import Dict, List, Optional, Tuple, Union

from loguru import logger

from ..answers.source import MockAnswerSource
from ..constants import DEFAULT_TITLE_PREFIX, TITLE_ELLIPSIS, TITLE_MAX_LENGTH
from ..schema import utc_now
from .exceptions import InvalidQuestion, MessageNotFound, SessionNotFound
from .session import AssistantMessage, Feedback, Session, SessionSummary, UserMessage


def make_title_from_question(question: str) -> str:
    """First TITLE_MAX_LENGTH characters of the question, with an ellipsis when cut."""
    if len(question) > TITLE_MAX_LENGTH:
        return question[:TITLE_MAX_LENGTH] + TITLE_ELLIPSIS
    return question


class SessionStore:
    """Session registry. One instance per process, injected into the request handlers."""

    def __init__(self, answer_source: MockAnswerSource):
        self.answer_source = answer_source
        self.sessions: Dict[str, Session] = {}
        # append_exchange suspends while reading the answer file
        self._lock = asyncio.Lock()
        logger.debug("SessionStore initialized")

    def count(self) -> int:
        return len(self.sessions)

    def _get_or_raise(self, session_id: str) -> Session:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    async def create_session(self, title: Optional[str] = None, first_question: Optional[str] = None) -> Session:
        """
        Create a session, optionally seeded with the user's first question.

        The title is the one supplied, else the (truncated) first question,
        else "Session N" where N is one more than the number of sessions held.
        """
        async with self._lock:
            if not title:
                if first_question:
                    title = make_title_from_question(first_question)
                else:
                    title = f"{DEFAULT_TITLE_PREFIX} {self.count() + 1}"

            created_at = utc_now()
            session = Session(title=title, created_at=created_at)
            if first_question:
                session.add_message(UserMessage(text=first_question, created_at=created_at))

            self.sessions[session.id] = session
            logger.debug(f"Created session {session.id} ({session.title!r})")
            return session

    async def get_session(self, session_id: str) -> Session:
        return self._get_or_raise(session_id)

    async def list_sessions(self) -> List[SessionSummary]:
        """Summaries of all sessions, newest first."""
        summaries = [session.to_summary() for session in self.sessions.values()]
        summaries.sort(key=lambda s: s.created_at, reverse=True)
        return summaries

    async def append_exchange(self, session_id: str, question: Optional[str]) -> Tuple[UserMessage, AssistantMessage]:
        """
        Answer a question in a session.

        Appends the user's question and the canned assistant answer, in that
        order, and returns both.

        Raises:
            SessionNotFound: the session id is unknown.
            InvalidQuestion: the question is missing or blank.
        """
        async with self._lock:
            session = self._get_or_raise(session_id)
            if not question or not question.strip():
                raise InvalidQuestion()

            answer = await asyncio.to_thread(self.answer_source.fetch_answer)

            created_at = utc_now()
            user_message = UserMessage(text=question, created_at=created_at)
            assistant_message = AssistantMessage.from_answer(answer, created_at=created_at)

            session.add_message(user_message)
            session.add_message(assistant_message)
            logger.debug(f"Appended exchange to session {session_id}, now {session.message_count} messages")
            return user_message, assistant_message

    async def set_feedback(
        self, session_id: str, message_id: Optional[str], feedback: Optional[Feedback]
    ) -> Union[UserMessage, AssistantMessage]:
        """Set or clear (None) the feedback on a message of any role."""
        async with self._lock:
            session = self._get_or_raise(session_id)
            message = session.find_message(message_id) if message_id else None
            if message is None:
                raise MessageNotFound(message_id)

            message.feedback = feedback
            logger.debug(f"Feedback on message {message_id} in session {session_id} set to {feedback}")
            return message

    async def delete_session(self, session_id: str) -> None:
        async with self._lock:
            self._get_or_raise(session_id)
            del self.sessions[session_id]
            logger.debug(f"Deleted session {session_id}")

    async def clear(self) -> None:
        """Drop every session."""
        async with self._lock:
            self.sessions.clear()
