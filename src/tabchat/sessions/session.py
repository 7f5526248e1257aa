"""
Session Data Models

Encapsulates a chat session and the messages it holds.
"""

import uuid
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, model_serializer

from ..answers.models import AnswerPayload, AnswerTable
from ..constants import ROLE_ASSISTANT, ROLE_USER
from ..schema import CamelModel, Timestamp, utc_now


def new_id() -> str:
    return str(uuid.uuid4())


class Feedback(str, Enum):
    """Reaction a reader can leave on a message."""

    LIKE = "like"
    DISLIKE = "dislike"


class UserMessage(CamelModel):
    """A question asked by the user."""

    id: str = Field(default_factory=new_id)
    role: Literal["user"] = ROLE_USER
    text: str
    created_at: Timestamp = Field(default_factory=utc_now)
    # Not part of a user message's shape, but the store accepts feedback on any message
    feedback: Optional[Feedback] = None

    @model_serializer(mode="wrap")
    def omit_unset_feedback(self, handler):
        data = handler(self)
        if self.feedback is None:
            data.pop("feedback", None)
        return data


class AssistantMessage(CamelModel):
    """A canned answer attached to the preceding user question."""

    id: str = Field(default_factory=new_id)
    role: Literal["assistant"] = ROLE_ASSISTANT
    answer_text: str = ""
    table: AnswerTable = Field(default_factory=AnswerTable)
    description: str = ""
    created_at: Timestamp = Field(default_factory=utc_now)
    feedback: Optional[Feedback] = None

    @classmethod
    def from_answer(cls, answer: AnswerPayload, **kwargs) -> "AssistantMessage":
        """Build an assistant message carrying the payload as-is."""
        return cls(
            answer_text=answer.answer_text,
            table=answer.table.model_copy(deep=True),
            description=answer.description,
            **kwargs,
        )


Message = Annotated[Union[UserMessage, AssistantMessage], Field(discriminator="role")]


class SessionSummary(CamelModel):
    """Listing entry for a session."""

    id: str
    title: str
    created_at: Timestamp
    message_count: int


class Session(CamelModel):
    """
    A single chat session.
    Messages are append-only; their order is the order they were asked in.
    """

    id: str = Field(default_factory=new_id)
    title: str
    created_at: Timestamp = Field(default_factory=utc_now)
    messages: list[Message] = Field(default_factory=list)

    @property
    def message_count(self) -> int:
        return len(self.messages)

    def add_message(self, message: Union[UserMessage, AssistantMessage]):
        """Adds a message to the session's history."""
        self.messages.append(message)

    def find_message(self, message_id: str) -> Optional[Union[UserMessage, AssistantMessage]]:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    def to_summary(self) -> SessionSummary:
        return SessionSummary(
            id=self.id,
            title=self.title,
            created_at=self.created_at,
            message_count=self.message_count,
        )
