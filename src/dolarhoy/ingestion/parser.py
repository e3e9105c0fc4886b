"""Quote extraction from dolarhoy.com HTML fragments.

Every quote page renders one container holding a title and one or two
price paragraphs::

    <div class="container__data">
        <h2 class="data__titulo">Dólar Blue</h2>
        <div class="data__valores">
            <p>566.00<span>Compra</span></p>
            <p>571.00<span>Venta</span></p>
        </div>
    </div>

Element selection is delegated to BeautifulSoup (CSS selectors via
soupsieve). This module owns the price decoding and the error taxonomy on
top of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar, Union, runtime_checkable

from bs4 import BeautifulSoup, Tag

from dolarhoy.core.exceptions import ExtractionError
from dolarhoy.core.models import ExtractionFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

CONTAINER_SELECTOR = ".container__data"
TITLE_SELECTOR = "h2.data__titulo"
FIRST_PRICE_SELECTOR = "p:nth-child(1)"
SECOND_PRICE_SELECTOR = "p:nth-child(2)"

# Tree builder handed to BeautifulSoup
HTML_FEATURES = "lxml"

# Type name reported when an element is missing; nothing has been parsed yet
_MISSING_TYPE_NAME = "float"

_PRICE_CHARS = frozenset("0123456789.")

PriceType = Callable[[str], T]

# Buy price and, where the quote has one, sell price
BuySell = tuple[T, Union[T, None]]


@runtime_checkable
class PriceQuote(Protocol[T_co]):
    """Capability shared by every quote document shape."""

    title: str

    def price_pair(self) -> tuple[T_co, T_co | None]: ...


def type_name(price_type: PriceType) -> str:
    return getattr(price_type, "__name__", repr(price_type))


def numeric_prefix(markup: str) -> str:
    """Return the longest leading run of digits and dots in ``markup``."""
    end = 0
    while end < len(markup) and markup[end] in _PRICE_CHARS:
        end += 1
    return markup[:end]


def extract_price(element: Tag | None, price_type: PriceType[T]) -> T:
    """Decode the price held by a price paragraph.

    The element's inner markup is cut to its leading ``[0-9.]`` run, which
    is then handed to ``price_type``.

    Raises:
        ExtractionError: element is None (element not found), or the
            numeric run does not convert (conversion error).
    """
    if element is None:
        raise ExtractionError("content", _MISSING_TYPE_NAME, ExtractionFailure.ELEMENT_NOT_FOUND)

    value = numeric_prefix(element.decode_contents())
    try:
        return price_type(value)
    except (ValueError, ArithmeticError) as e:
        raise ExtractionError(
            value, type_name(price_type), ExtractionFailure.CONVERSION_ERROR
        ) from e


def _select_container(html: str) -> Tag:
    soup = BeautifulSoup(html, HTML_FEATURES)
    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        raise ExtractionError("container", _MISSING_TYPE_NAME, ExtractionFailure.ELEMENT_NOT_FOUND)
    return container


def _extract_title(container: Tag) -> str:
    heading = container.select_one(TITLE_SELECTOR)
    if heading is None:
        raise ExtractionError("title", _MISSING_TYPE_NAME, ExtractionFailure.ELEMENT_NOT_FOUND)
    return heading.get_text(strip=True)


@dataclass(frozen=True)
class BuySellQuote(Generic[T]):
    """A quote listing a buy price and a sell price."""

    title: str
    buy: T
    sell: T

    @classmethod
    def from_html(cls, html: str, price_type: PriceType[T] = float) -> BuySellQuote[T]:
        """Extract title, buy and sell prices from a quote fragment.

        Raises:
            ExtractionError: A required element is missing or a price does
                not convert to ``price_type``.
        """
        container = _select_container(html)
        title = _extract_title(container)
        buy = extract_price(container.select_one(FIRST_PRICE_SELECTOR), price_type)
        sell = extract_price(container.select_one(SECOND_PRICE_SELECTOR), price_type)
        return cls(title=title, buy=buy, sell=sell)

    def price_pair(self) -> BuySell[T]:
        return self.buy, self.sell


@dataclass(frozen=True)
class SingleValueQuote(Generic[T]):
    """A quote listing a single value (no buy/sell spread)."""

    title: str
    value: T

    @classmethod
    def from_html(cls, html: str, price_type: PriceType[T] = float) -> SingleValueQuote[T]:
        """Extract title and the single price from a quote fragment."""
        container = _select_container(html)
        title = _extract_title(container)
        value = extract_price(container.select_one(FIRST_PRICE_SELECTOR), price_type)
        return cls(title=title, value=value)

    def price_pair(self) -> BuySell[T]:
        return self.value, None


Quote = Union[BuySellQuote[T], SingleValueQuote[T]]


def extract_quote(html: str, price_type: PriceType[T], single_value: bool) -> Quote[T]:
    """Extract a quote using the document shape selected by ``single_value``."""
    shape = SingleValueQuote if single_value else BuySellQuote
    logger.debug("Extracting %s as %s", shape.__name__, type_name(price_type))
    return shape.from_html(html, price_type)
