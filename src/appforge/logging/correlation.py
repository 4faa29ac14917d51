import structlog


def bind_session(session_id: str) -> None:
    """Attach a session id to every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(session_id=session_id)


def get_session_id() -> str | None:
    return structlog.contextvars.get_contextvars().get("session_id")


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
