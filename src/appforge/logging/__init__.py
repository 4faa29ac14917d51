from .config import get_logger, setup_logging
from .correlation import bind_session, clear_context, get_session_id

__all__ = ["setup_logging", "get_logger", "bind_session", "get_session_id", "clear_context"]
