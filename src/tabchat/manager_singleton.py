"""
Manager Singleton

Owns the process-wide configuration, answer source and session store.
Built once at startup and handed to routes through FastAPI dependencies.
"""

from loguru import logger

from .answers.source import MockAnswerSource
from .config import AppConfig, load_config_from_env
from .sessions.store import SessionStore


class ManagerSingleton:
    _config: AppConfig | None = None
    _answer_source: MockAnswerSource | None = None
    _session_store: SessionStore | None = None
    _initialized: bool = False

    @classmethod
    async def initialize(cls, config: AppConfig | None = None):
        if cls._initialized:
            return

        logger.info("Initializing ManagerSingleton...")

        cls._config = config or load_config_from_env()
        logger.info(f"Using mock data path: {cls._config.mock_data_path}")

        cls._answer_source = MockAnswerSource(data_path=cls._config.mock_data_path)
        cls._session_store = SessionStore(answer_source=cls._answer_source)
        logger.info("✅ SessionStore initialized.")

        cls._initialized = True
        logger.info("✅ ManagerSingleton initialized successfully.")

    @classmethod
    async def get_session_store(cls) -> SessionStore:
        if not cls._session_store:
            await cls.initialize()
        return cls._session_store

    @classmethod
    async def close_all(cls):
        """Release all singleton instances. Sessions are discarded."""
        if cls._session_store:
            session_count = cls._session_store.count()
            await cls._session_store.clear()
            cls._session_store = None
            logger.info(f"✅ SessionStore closed, discarded {session_count} sessions")

        cls._answer_source = None
        cls._config = None
        cls._initialized = False
        logger.info("✅ All singleton instances closed")
