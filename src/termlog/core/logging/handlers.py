# src/termlog/core/logging/handlers.py
"""
Console handler factory for logging.dictConfig.

Kept separate from the builder so the handler shape can be unit tested as a
plain dict and changed in one place.
"""

from termlog.config.settings import Settings


def get_console_handler(settings: Settings) -> dict:
    """
    Return a dictConfig handler entry for the console.

    - "formatter": "color" (ColorFormatter, registered by the builder)
    - "level": settings.LOG_LEVEL
    - "stream": stdout or stderr, following settings.LOG_TO_STDOUT like the
      default semantic sink does
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": "color",
        "level": settings.LOG_LEVEL,
        "stream": "ext://sys.stdout" if settings.LOG_TO_STDOUT else "ext://sys.stderr",
    }
