"""Pydantic data models and enumerations — the system's type contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

HTTP_STATUS_OK = 200
HTTP_STATUS_NOT_FOUND = 404

# --- Enumerations ---


class BaseCurrency(StrEnum):
    """Currency a quote's prices are denominated in."""

    ARS = "ARS"
    USD = "USD"

    @property
    def display_name(self) -> str:
        return _CURRENCY_NAMES[self]


_CURRENCY_NAMES: dict[BaseCurrency, str] = {
    BaseCurrency.ARS: "Peso Argentino",
    BaseCurrency.USD: "Dolar Estadounidense",
}


class QuoteKind(StrEnum):
    """Quote categories published by dolarhoy.com.

    Values are the canonical resource names (the last path segment of each
    quote's page). Declaration order is the alias resolution priority.
    """

    BLUE = "dolar-blue"
    OFICIAL = "dolar-bancos-y-casas-de-cambio"
    BOLSA = "dolar-mep"
    CONTADO_CON_LIQUI = "dolar-contado-con-liquidacion"
    CRYPTO = "bitcoin-usd"
    SOLIDARIO = "banco-nacion"
    TARJETA = "dolar-tarjeta"


class ExtractionFailure(StrEnum):
    """Why a price could not be extracted from markup."""

    ELEMENT_NOT_FOUND = "element not found"
    CONVERSION_ERROR = "conversion error"


# --- Response Models ---


class StatusLine(BaseModel):
    """The leading PROTOCOL/VERSION STATUS line of a response."""

    model_config = ConfigDict(frozen=True)

    protocol: str
    version: str
    status: int = Field(ge=0)

    def status_ok(self) -> bool:
        """True if the response was a 200."""
        return self.status == HTTP_STATUS_OK

    def status_not_found(self) -> bool:
        """True if the response was a 404."""
        return self.status == HTTP_STATUS_NOT_FOUND
