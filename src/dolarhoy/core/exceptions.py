"""Custom exception hierarchy for dolarhoy."""

from typing import Any


class DolarHoyError(Exception):
    """Base exception for all dolarhoy errors.

    All exceptions carry an optional `context` dict for structured error
    metadata that can be logged or serialized without parsing the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(DolarHoyError):
    """Invalid or missing configuration.

    Raised by load_config() during startup. Should be treated as fatal.

    Context keys:
        field: str — the config field that failed validation
        value: Any — the invalid value
    """


class ClientError(DolarHoyError):
    """A quote could not be fetched.

    Every failure of DolarHoyClient.fetch_quote() is a subclass of this.
    Policy: terminal for the call. Nothing is retried and no fallback
    price is substituted.
    """


class TransportError(ClientError):
    """Address resolution, connect, TLS or socket I/O failed.

    The underlying OSError is chained as __cause__.

    Context keys:
        host: str — remote host
        port: int — remote port
        path: str — request path
    """


class InvalidResponseError(ClientError):
    """The response was not valid UTF-8, had no header/body separator,
    or its status line did not match the grammar.
    """

    def __init__(self, reason: str, context: dict[str, Any] | None = None):
        super().__init__(f"invalid response: {reason}", context)
        self.reason = reason


class UnexpectedStatusError(ClientError):
    """Status line parsed but the status was not 200."""

    def __init__(self, status: int, context: dict[str, Any] | None = None):
        super().__init__(f"unexpected status code: {status}", context)
        self.status = status


class QuoteParseError(ClientError):
    """The response body did not contain an extractable quote.

    Wraps an ExtractionError, which is chained as __cause__.

    Context keys:
        text: str — the offending text
        type_name: str — the requested numeric type
        reason: str — "element not found" or "conversion error"
    """


class ExtractionError(DolarHoyError):
    """A title or price element is missing, or its text did not convert."""

    def __init__(self, text: str, type_name: str, reason: str):
        super().__init__(
            f"{text} cannot be parsed as {type_name}: {reason}",
            context={"text": text, "type_name": type_name, "reason": str(reason)},
        )
        self.text = text
        self.type_name = type_name
        self.reason = reason


class StatusLineError(DolarHoyError):
    """The leading status line did not match PROTOCOL/VERSION STATUS.

    Context keys:
        expected: str — what the failing step wanted
        input: str — the start of the text the step was applied to
    """
