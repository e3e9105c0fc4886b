"""Static catalog of quote kinds: endpoints, aliases and base currencies.

Pure lookups, no I/O. Every lookup is total: unknown input resolves to
None instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from dolarhoy.core.models import BaseCurrency, QuoteKind

DOLARHOY_HOST = "dolarhoy.com"
DOLARHOY_PORT = 443
ENDPOINT_BASE = "/i/cotizaciones/"


@dataclass(frozen=True)
class QuoteSpec:
    """One catalog row. The resource name is always the first alias."""

    kind: QuoteKind
    aliases: tuple[str, ...]
    base_currency: BaseCurrency
    label: str

    @property
    def resource_name(self) -> str:
        return self.kind.value


# Declaration order is the alias priority order: first match wins.
CATALOG: tuple[QuoteSpec, ...] = (
    QuoteSpec(QuoteKind.BLUE, ("dolar-blue", "blue"), BaseCurrency.ARS, "Blue"),
    QuoteSpec(
        QuoteKind.OFICIAL,
        ("dolar-bancos-y-casas-de-cambio", "oficial"),
        BaseCurrency.ARS,
        "Oficial",
    ),
    QuoteSpec(QuoteKind.BOLSA, ("dolar-mep", "bolsa", "mep"), BaseCurrency.ARS, "Bolsa"),
    QuoteSpec(
        QuoteKind.CONTADO_CON_LIQUI,
        ("dolar-contado-con-liquidacion", "ccl", "contado"),
        BaseCurrency.ARS,
        "Contado Con Liqui",
    ),
    QuoteSpec(
        QuoteKind.CRYPTO,
        ("bitcoin-usd", "crypto", "cripto", "bitcoin"),
        BaseCurrency.USD,
        "Crypto",
    ),
    QuoteSpec(
        QuoteKind.SOLIDARIO,
        ("banco-nacion", "solidario", "bna"),
        BaseCurrency.ARS,
        "Solidario",
    ),
    QuoteSpec(
        QuoteKind.TARJETA,
        ("dolar-tarjeta", "tarjeta", "turista"),
        BaseCurrency.ARS,
        "Tarjeta",
    ),
)

_BY_KIND: dict[QuoteKind, QuoteSpec] = {spec.kind: spec for spec in CATALOG}
_BY_RESOURCE_NAME: dict[str, QuoteKind] = {spec.resource_name: spec.kind for spec in CATALOG}

# Kinds whose page lists a single value instead of a buy/sell pair
_SINGLE_VALUE_KINDS = frozenset({QuoteKind.CRYPTO})


def endpoint(kind: QuoteKind) -> str:
    """Return the request path for a quote kind, e.g. /i/cotizaciones/dolar-blue."""
    return f"{ENDPOINT_BASE}{_BY_KIND[kind].resource_name}"


def base_currency(kind: QuoteKind) -> BaseCurrency:
    return _BY_KIND[kind].base_currency


def label(kind: QuoteKind) -> str:
    return _BY_KIND[kind].label


def aliases(kind: QuoteKind) -> tuple[str, ...]:
    return _BY_KIND[kind].aliases


def is_single_value(kind: QuoteKind) -> bool:
    return kind in _SINGLE_VALUE_KINDS


def resolve_from_resource_name(name: str) -> QuoteKind | None:
    """Exact match against the canonical resource names."""
    return _BY_RESOURCE_NAME.get(name)


def resolve_from_alias(text: str) -> QuoteKind | None:
    """Case-sensitive exact match against every kind's alias set.

    Kinds are checked in catalog order and the first kind whose aliases
    contain ``text`` wins, so overlapping alias sets stay deterministic.
    """
    for spec in CATALOG:
        if text in spec.aliases:
            return spec.kind
    return None
