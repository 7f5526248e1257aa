import copy
import json

import pytest
from fastapi.testclient import TestClient

from main import app
from tabchat.answers.source import MockAnswerSource
from tabchat.manager_singleton import ManagerSingleton
from tabchat.sessions.store import SessionStore

SAMPLE_ANSWER = {
    "answerText": "Sample answer",
    "table": {
        "columns": ["Name", "Value", "Unit"],
        "rows": [["alpha", "1", "kg"], ["beta", "2", "kg"]],
    },
    "description": "Sample description",
}


@pytest.fixture
def sample_answer():
    return copy.deepcopy(SAMPLE_ANSWER)


@pytest.fixture
def mock_data_file(tmp_path):
    """A valid mock answer file."""
    path = tmp_path / "mock_data.json"
    path.write_text(json.dumps(SAMPLE_ANSWER), encoding="utf-8")
    return path


@pytest.fixture
def answer_source(mock_data_file):
    return MockAnswerSource(data_path=str(mock_data_file))


@pytest.fixture
def session_store(answer_source):
    """A fresh store, isolated from the application's own instance."""
    return SessionStore(answer_source=answer_source)


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client(session_store):
    app.dependency_overrides[ManagerSingleton.get_session_store] = lambda: session_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
