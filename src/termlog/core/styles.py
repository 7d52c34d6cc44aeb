# src/termlog/core/styles.py
"""
Composable text stylers.

A `Style` is a callable `str -> str` that wraps text in ANSI escape codes.
Styles are built by chaining named attributes off the root `style` object:

    style.red("failed")            # red text
    style.red.bold("failed")       # red + bold
    style.gray.italic("verbose")   # gray + italic

Every attribute access returns a *new* Style; a Style is never mutated, so the
module-level stylers used by the semantic logger table can be shared freely.

Colour codes come from colorama (Fore / Style). colorama has no italic or
underline constants, so those two use the raw SGR codes directly.

Colour output can be turned off with `TERMLOG_LOG_COLOR=false`; the check runs
on every call, so toggling the setting (and clearing the settings cache) takes
effect for stylers that were created earlier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from colorama import Fore, Style as AnsiStyle, just_fix_windows_console

from termlog.config.settings import get_settings
from termlog.exceptions import UnknownStyleError

# Lets ANSI sequences render on legacy Windows consoles; a no-op elsewhere.
just_fix_windows_console()

TextStyler = Callable[[str], str]

ITALIC = "\033[3m"
UNDERLINE = "\033[4m"

STYLE_CODES: dict[str, str] = {
    # colours
    "black": Fore.BLACK,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
    "gray": Fore.LIGHTBLACK_EX,
    "grey": Fore.LIGHTBLACK_EX,
    # modifiers
    "bold": AnsiStyle.BRIGHT,
    "dim": AnsiStyle.DIM,
    "italic": ITALIC,
    "underline": UNDERLINE,
}


class Style:
    """
    Immutable chain of ANSI codes.

    Attribute access with a known name (see STYLE_CODES) returns a new Style with
    that code appended. Unknown names raise UnknownStyleError, which is also an
    AttributeError, so a typo in a colour name fails at import time instead of
    silently rendering unstyled text.
    """

    __slots__ = ("_names",)

    def __init__(self, names: tuple[str, ...] = ()) -> None:
        self._names = names

    def __getattr__(self, name: str) -> "Style":
        if name.startswith("__"):
            raise AttributeError(name)
        if name not in STYLE_CODES:
            raise UnknownStyleError(name)
        return Style(self._names + (name,))

    def __call__(self, text: str) -> str:
        if not self._names or not get_settings().LOG_COLOR:
            return text
        codes = "".join(STYLE_CODES[name] for name in self._names)
        return f"{codes}{text}{AnsiStyle.RESET_ALL}"

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Style) and other._names == self._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return "style" + "".join(f".{name}" for name in self._names)


# Root of every style chain; `style("x")` returns "x" unchanged.
style = Style()


@dataclass(frozen=True)
class LogStyle:
    """
    Title and message stylers for one log line.

    Either may be None; the formatter then falls back to gray titles and
    white messages.
    """

    title: TextStyler | None = None
    message: TextStyler | None = None


DEFAULT_TITLE_STYLE: TextStyler = style.gray
DEFAULT_MESSAGE_STYLE: TextStyler = style.white


__all__ = [
    "TextStyler",
    "Style",
    "style",
    "LogStyle",
    "STYLE_CODES",
    "DEFAULT_TITLE_STYLE",
    "DEFAULT_MESSAGE_STYLE",
]
