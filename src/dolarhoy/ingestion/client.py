"""Async client for dolarhoy.com currency quotes."""

from __future__ import annotations

import logging
from typing import TypeVar

from dolarhoy.core.catalog import endpoint, is_single_value
from dolarhoy.core.config import ClientConfig
from dolarhoy.core.exceptions import (
    ExtractionError,
    InvalidResponseError,
    QuoteParseError,
    StatusLineError,
    UnexpectedStatusError,
)
from dolarhoy.core.models import QuoteKind
from dolarhoy.ingestion.parser import PriceType, Quote, extract_quote
from dolarhoy.ingestion.status import parse_status_line
from dolarhoy.ingestion.transport import Fetcher, TlsFetcher, create_ssl_context

logger = logging.getLogger(__name__)

T = TypeVar("T")

HEADER_SEPARATOR = "\r\n\r\n"


def split_response(text: str) -> tuple[str, str]:
    """Split a raw response into (header block, body) at the first blank line.

    Raises:
        InvalidResponseError: The response has no header/body separator.
    """
    index = text.find(HEADER_SEPARATOR)
    if index == -1:
        raise InvalidResponseError("invalid content", context={"size": len(text)})
    return text[:index], text[index + len(HEADER_SEPARATOR) :]


class DolarHoyClient:
    """Fetches and parses currency quotes from dolarhoy.com.

    Each fetch_quote() call opens its own connection and keeps no state,
    so one client can serve concurrent calls. There is no internal timeout
    and no retry.

    Usage::

        client = DolarHoyClient()
        quote = await client.fetch_quote(QuoteKind.BLUE)
        buy, sell = quote.price_pair()
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        fetcher: Fetcher | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._fetcher = fetcher or TlsFetcher(
            port=self._config.port,
            ssl_context=create_ssl_context(self._config.ca_file),
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def fetch_quote(
        self,
        kind: QuoteKind,
        price_type: PriceType[T] = float,
    ) -> Quote[T]:
        """Fetch the current prices of a quote kind.

        Args:
            kind: Which quote to fetch.
            price_type: Parses the price text, e.g. float, numpy.float32
                or decimal.Decimal.

        Returns:
            SingleValueQuote for CRYPTO, BuySellQuote otherwise. Both
            expose ``title`` and ``price_pair()``.

        Raises:
            TransportError: Network, TLS or socket failure.
            InvalidResponseError: Undecodable response, missing header/body
                separator, or malformed status line.
            UnexpectedStatusError: Status other than 200.
            QuoteParseError: Title or price missing, or not convertible.
        """
        path = endpoint(kind)
        logger.debug("Fetching %s from %s%s", kind.name, self._config.host, path)
        text = await self._fetcher.fetch(self._config.host, path)

        header, body = split_response(text)
        try:
            _, status_line = parse_status_line(header)
        except StatusLineError as e:
            raise InvalidResponseError(str(e), context=e.context) from e

        if not status_line.status_ok():
            raise UnexpectedStatusError(
                status_line.status,
                context={"path": path, "not_found": status_line.status_not_found()},
            )

        try:
            return extract_quote(body, price_type, single_value=is_single_value(kind))
        except ExtractionError as e:
            raise QuoteParseError(f"failed to parse data: {e}", context=e.context) from e
