"""
Answer Module

The canned answer payload and the file-backed source that serves it.
"""

from .models import AnswerPayload, AnswerTable
from .source import MockAnswerSource, get_fallback_answer

__all__ = ["AnswerPayload", "AnswerTable", "MockAnswerSource", "get_fallback_answer"]
