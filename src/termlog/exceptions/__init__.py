from .base import TermlogError, UnknownStyleError, UnknownLoggerError

__all__ = ["TermlogError", "UnknownStyleError", "UnknownLoggerError"]
