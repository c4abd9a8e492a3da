"""A JSON task API with JWT login and in-memory, MongoDB or SQL storage."""

__version__ = "1.0.0"

__all__ = [
    "app",
    "auth",
    "handlers",
    "middleware",
    "model",
    "mongo_repository",
    "repository",
    "service",
    "sql_repository",
]