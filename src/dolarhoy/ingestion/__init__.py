"""Quote ingestion: transport, status line, extraction, and client."""

from dolarhoy.ingestion.client import DolarHoyClient, split_response
from dolarhoy.ingestion.parser import (
    BuySellQuote,
    PriceQuote,
    Quote,
    SingleValueQuote,
    extract_price,
    extract_quote,
)
from dolarhoy.ingestion.status import parse_status_line
from dolarhoy.ingestion.transport import Fetcher, TlsFetcher, build_request, fetch

__all__ = [
    "DolarHoyClient",
    "split_response",
    "BuySellQuote",
    "SingleValueQuote",
    "PriceQuote",
    "Quote",
    "extract_price",
    "extract_quote",
    "parse_status_line",
    "Fetcher",
    "TlsFetcher",
    "build_request",
    "fetch",
]
