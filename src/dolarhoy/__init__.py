"""dolarhoy — typed currency quotes scraped from dolarhoy.com."""

from dolarhoy.core import (
    BaseCurrency,
    ClientError,
    DolarHoyError,
    ExtractionError,
    InvalidResponseError,
    QuoteKind,
    QuoteParseError,
    TransportError,
    UnexpectedStatusError,
    base_currency,
    endpoint,
    resolve_from_alias,
    resolve_from_resource_name,
)
from dolarhoy.ingestion import BuySellQuote, DolarHoyClient, PriceQuote, SingleValueQuote

__version__ = "0.3.0"

__all__ = [
    "DolarHoyClient",
    "QuoteKind",
    "BaseCurrency",
    "BuySellQuote",
    "SingleValueQuote",
    "PriceQuote",
    "base_currency",
    "endpoint",
    "resolve_from_alias",
    "resolve_from_resource_name",
    "DolarHoyError",
    "ClientError",
    "TransportError",
    "InvalidResponseError",
    "UnexpectedStatusError",
    "QuoteParseError",
    "ExtractionError",
]
