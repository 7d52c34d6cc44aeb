import logging


def to_level_name(value: str | int | None) -> str | None:
    """
    Normalise a log level given as " debug ", "Warning" or a number (10, 30, ...)
    to the upper-case name the stdlib logging module uses.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return logging.getLevelName(value)
    return value.strip().upper()
