from .session import DatabaseSessionManager

__all__ = ["DatabaseSessionManager"]
