"""
Constants for the chat session backend.
Centralizes magic strings and configuration values.
"""

import os


def get_package_directory():
    """Get the directory holding the tabchat package."""
    return os.path.dirname(os.path.abspath(__file__))


def get_mock_data_path():
    """Get the path of the bundled mock answer file."""
    return os.path.join(get_package_directory(), "answers", "data", MOCK_DATA_FILENAME)


# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_LOG_LEVEL = "INFO"
API_PREFIX = "/api"

# Mock answer source
MOCK_DATA_FILENAME = "mock_data.json"

FALLBACK_ANSWER_TEXT = "Fallback sample answer"
FALLBACK_COLUMNS = ["Col1", "Col2"]
FALLBACK_ROWS = [["A", "B"], ["C", "D"]]
FALLBACK_DESCRIPTION = "Fallback description"

# Session titles
TITLE_MAX_LENGTH = 50
TITLE_ELLIPSIS = "..."
DEFAULT_TITLE_PREFIX = "Session"

# Message roles
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

# Error messages
SESSION_NOT_FOUND = "Session not found"
MESSAGE_NOT_FOUND = "Message not found"
QUESTION_REQUIRED = "Question is required"
FEEDBACK_SAVED = "Feedback saved"
