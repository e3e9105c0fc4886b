"""Parser for the leading ``PROTOCOL/VERSION STATUS`` line of a response.

Built from three small combinators. A parser takes the input text and
returns ``(remaining, value)``, or raises StatusLineError. Only the
consumed prefix is interpreted; whatever follows the status digits
(reason phrase, further header lines) is handed back untouched.

Grammar::

    protocol := alphabetic+
    "/"
    version  := (digit | ".")+
    " "
    status   := digit+          -> int, at most 2**32 - 1
"""

from __future__ import annotations

from typing import Callable, TypeVar

from dolarhoy.core.exceptions import StatusLineError
from dolarhoy.core.models import StatusLine

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str], tuple[str, T]]

_DIGITS = frozenset("0123456789")

# Largest accepted status code (unsigned 32-bit)
MAX_STATUS = 0xFFFFFFFF


def _is_alpha(c: str) -> bool:
    return c.isalpha()


def _is_digit(c: str) -> bool:
    return c in _DIGITS


def _is_version(c: str) -> bool:
    return c in _DIGITS or c == "."


def _to_status(digits: str) -> int:
    value = int(digits)
    if value > MAX_STATUS:
        raise ValueError(f"status code out of range: {digits}")
    return value


def take_while1(predicate: Callable[[str], bool], expected: str) -> Parser[str]:
    """Consume the longest non-empty prefix whose characters satisfy predicate."""

    def parse(text: str) -> tuple[str, str]:
        end = 0
        while end < len(text) and predicate(text[end]):
            end += 1
        if end == 0:
            raise StatusLineError(
                f"expected {expected} at {text[:20]!r}",
                context={"expected": expected, "input": text[:20]},
            )
        return text[end:], text[:end]

    return parse


def tag(literal: str) -> Parser[str]:
    """Consume exactly ``literal``."""

    def parse(text: str) -> tuple[str, str]:
        if not text.startswith(literal):
            raise StatusLineError(
                f"expected {literal!r} at {text[:20]!r}",
                context={"expected": literal, "input": text[:20]},
            )
        return text[len(literal) :], literal

    return parse


def map_res(parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """Apply ``func`` to the parser's output; a ValueError fails the parse."""

    def parse(text: str) -> tuple[str, U]:
        remaining, value = parser(text)
        try:
            return remaining, func(value)
        except ValueError as e:
            raise StatusLineError(
                f"could not convert {value!r}: {e}",
                context={"expected": "convertible value", "input": str(value)},
            ) from e

    return parse


_protocol = take_while1(_is_alpha, "protocol name")
_slash = tag("/")
_version = take_while1(_is_version, "protocol version")
_space = tag(" ")
_status = map_res(take_while1(_is_digit, "status code"), _to_status)


def parse_status_line(text: str) -> tuple[str, StatusLine]:
    """Parse the status line at the start of ``text``.

    Args:
        text: Header block (or any text starting with the status line).

    Returns:
        (remaining text, StatusLine).

    Raises:
        StatusLineError: If any step of the grammar fails to match.
    """
    text, protocol = _protocol(text)
    text, _ = _slash(text)
    text, version = _version(text)
    text, _ = _space(text)
    text, status = _status(text)
    return text, StatusLine(protocol=protocol, version=version, status=status)
