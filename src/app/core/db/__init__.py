from src.app.core.db.engine import dispose_engine, get_engine, get_session_factory
from src.app.core.db.session import get_session

__all__ = ["dispose_engine", "get_engine", "get_session", "get_session_factory"]
