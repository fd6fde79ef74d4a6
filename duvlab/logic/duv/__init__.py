from .session import DuvSession

__all__ = ["DuvSession"]
