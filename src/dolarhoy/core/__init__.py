"""dolarhoy.core — Foundation types, catalog, config, and exceptions."""

from dolarhoy.core.catalog import (
    CATALOG,
    DOLARHOY_HOST,
    DOLARHOY_PORT,
    ENDPOINT_BASE,
    QuoteSpec,
    aliases,
    base_currency,
    endpoint,
    is_single_value,
    label,
    resolve_from_alias,
    resolve_from_resource_name,
)
from dolarhoy.core.config import (
    ClientConfig,
    DolarHoyConfig,
    OutputConfig,
    load_config,
)
from dolarhoy.core.exceptions import (
    ClientError,
    ConfigError,
    DolarHoyError,
    ExtractionError,
    InvalidResponseError,
    QuoteParseError,
    StatusLineError,
    TransportError,
    UnexpectedStatusError,
)
from dolarhoy.core.models import (
    BaseCurrency,
    ExtractionFailure,
    QuoteKind,
    StatusLine,
)

__all__ = [
    # Enums
    "BaseCurrency",
    "QuoteKind",
    "ExtractionFailure",
    # Models
    "StatusLine",
    # Catalog
    "CATALOG",
    "DOLARHOY_HOST",
    "DOLARHOY_PORT",
    "ENDPOINT_BASE",
    "QuoteSpec",
    "aliases",
    "base_currency",
    "endpoint",
    "is_single_value",
    "label",
    "resolve_from_alias",
    "resolve_from_resource_name",
    # Config
    "DolarHoyConfig",
    "ClientConfig",
    "OutputConfig",
    "load_config",
    # Exceptions
    "DolarHoyError",
    "ConfigError",
    "ClientError",
    "TransportError",
    "InvalidResponseError",
    "UnexpectedStatusError",
    "QuoteParseError",
    "ExtractionError",
    "StatusLineError",
]
