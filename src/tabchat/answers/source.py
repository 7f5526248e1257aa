"""
Mock Answer Source

Supplies the canned answer payload. The JSON file is re-read on every call so
edits show up without a restart; any failure falls back to a built-in payload.
"""

import json

from loguru import logger
from pydantic import ValidationError

from ..constants import (
    FALLBACK_ANSWER_TEXT,
    FALLBACK_COLUMNS,
    FALLBACK_DESCRIPTION,
    FALLBACK_ROWS,
    get_mock_data_path,
)
from .models import AnswerPayload, AnswerTable


def get_fallback_answer() -> AnswerPayload:
    """Build the payload used when the mock data file cannot be used."""
    return AnswerPayload(
        answer_text=FALLBACK_ANSWER_TEXT,
        table=AnswerTable(
            columns=list(FALLBACK_COLUMNS),
            rows=[list(row) for row in FALLBACK_ROWS],
        ),
        description=FALLBACK_DESCRIPTION,
    )


class MockAnswerSource:
    """Loads the answer payload from a static JSON file."""

    def __init__(self, data_path: str | None = None):
        self.data_path = data_path or get_mock_data_path()
        logger.debug(f"MockAnswerSource reading from {self.data_path}")

    def fetch_answer(self) -> AnswerPayload:
        """
        Read and validate the mock data file.

        Returns:
            The payload from the file, or the fallback payload if the file is
            missing, unreadable, not JSON, or does not match the answer shape.
        """
        try:
            with open(self.data_path, encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError(f"Expected a JSON object, got {type(raw).__name__}")
            # null values mean "use the default", as for absent keys
            return AnswerPayload.model_validate({key: value for key, value in raw.items() if value is not None})
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to load {self.data_path}: {e}")
            return get_fallback_answer()
