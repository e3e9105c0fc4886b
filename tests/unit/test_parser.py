"""Tests for quote extraction (dolarhoy.ingestion.parser)."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest
from bs4 import BeautifulSoup

from dolarhoy.core.exceptions import ExtractionError
from dolarhoy.core.models import ExtractionFailure
from dolarhoy.ingestion.parser import (
    BuySellQuote,
    PriceQuote,
    SingleValueQuote,
    extract_price,
    extract_quote,
    numeric_prefix,
)


def _first_p(markup: str):
    return BeautifulSoup(markup, "lxml").select_one("p")


class TestBuySellQuote:
    def test_parse_double(self, blue_html):
        quote = BuySellQuote.from_html(blue_html, float)
        assert quote.title == "Dólar Blue"
        assert quote.buy == 566.00
        assert quote.sell == 571.00
        assert quote.price_pair() == (566.00, 571.00)

    def test_parse_single(self, blue_html):
        quote = BuySellQuote.from_html(blue_html, np.float32)
        assert quote.title == "Dólar Blue"
        assert isinstance(quote.buy, np.float32)
        assert quote.buy == np.float32(566.00)
        assert quote.sell == np.float32(571.00)

    def test_parse_decimal(self, blue_html):
        quote = BuySellQuote.from_html(blue_html, Decimal)
        assert quote.price_pair() == (Decimal("566.00"), Decimal("571.00"))

    def test_defaults_to_float(self, blue_html):
        buy, _ = BuySellQuote.from_html(blue_html).price_pair()
        assert isinstance(buy, float)

    def test_missing(self, empty_values_html):
        with pytest.raises(ExtractionError) as exc_info:
            BuySellQuote.from_html(empty_values_html, float)
        assert str(exc_info.value) == "content cannot be parsed as float: element not found"
        assert exc_info.value.reason == ExtractionFailure.ELEMENT_NOT_FOUND

    def test_missing_sell_only(self):
        html = """
        <div class="container__data">
            <h2 class="data__titulo">Dólar Blue</h2>
            <div class="data__valores"><p>566.00<span>Compra</span></p></div>
        </div>
        """
        with pytest.raises(ExtractionError, match="element not found"):
            BuySellQuote.from_html(html, float)

    def test_invalid(self, dot_values_html):
        with pytest.raises(ExtractionError) as exc_info:
            BuySellQuote.from_html(dot_values_html, float)
        assert str(exc_info.value) == ". cannot be parsed as float: conversion error"
        assert exc_info.value.text == "."
        assert exc_info.value.reason == ExtractionFailure.CONVERSION_ERROR

    def test_invalid_names_requested_type(self, dot_values_html):
        with pytest.raises(ExtractionError) as exc_info:
            BuySellQuote.from_html(dot_values_html, np.float32)
        assert str(exc_info.value) == ". cannot be parsed as float32: conversion error"

    def test_invalid_decimal(self, dot_values_html):
        with pytest.raises(ExtractionError, match=r"^\. cannot be parsed as Decimal"):
            BuySellQuote.from_html(dot_values_html, Decimal)

    def test_missing_title(self):
        html = """
        <div class="container__data">
            <div class="data__valores"><p>1.00</p><p>2.00</p></div>
        </div>
        """
        with pytest.raises(ExtractionError) as exc_info:
            BuySellQuote.from_html(html, float)
        assert exc_info.value.text == "title"
        assert exc_info.value.reason == ExtractionFailure.ELEMENT_NOT_FOUND
        assert str(exc_info.value) == "title cannot be parsed as float: element not found"

    def test_missing_container(self):
        with pytest.raises(ExtractionError) as exc_info:
            BuySellQuote.from_html("<html><body><p>404</p></body></html>", float)
        assert exc_info.value.text == "container"
        assert str(exc_info.value) == "container cannot be parsed as float: element not found"

    def test_idempotent(self, blue_html):
        first = BuySellQuote.from_html(blue_html, np.float32)
        second = BuySellQuote.from_html(blue_html, np.float32)
        assert first == second
        assert first.buy.tobytes() == second.buy.tobytes()


class TestSingleValueQuote:
    def test_parse_double(self, crypto_html):
        quote = SingleValueQuote.from_html(crypto_html, float)
        assert quote.title == "Dólar Crypto"
        assert quote.value == 29169.00
        assert quote.price_pair() == (29169.00, None)

    def test_parse_single(self, crypto_html):
        quote = SingleValueQuote.from_html(crypto_html, np.float32)
        assert quote.title == "Dólar Crypto"
        assert quote.value == np.float32(29169.00)

    def test_missing(self, empty_values_html):
        with pytest.raises(ExtractionError) as exc_info:
            SingleValueQuote.from_html(empty_values_html, float)
        assert str(exc_info.value) == "content cannot be parsed as float: element not found"

    def test_invalid(self):
        html = """
        <div class="container__data">
            <h2 class="data__titulo">Dólar Crypto</h2>
            <div class="data__valores"><p>.<span>Valor</span></p></div>
        </div>
        """
        with pytest.raises(ExtractionError) as exc_info:
            SingleValueQuote.from_html(html, float)
        assert str(exc_info.value) == ". cannot be parsed as float: conversion error"

    def test_ignores_second_value(self, blue_html):
        quote = SingleValueQuote.from_html(blue_html, float)
        assert quote.price_pair() == (566.00, None)


class TestExtractPrice:
    def test_stops_at_markup(self):
        assert extract_price(_first_p("<p>1234.50<span>Compra</span></p>"), float) == 1234.50

    def test_integer_text(self):
        assert extract_price(_first_p("<p>950</p>"), float) == 950.0

    def test_none_is_element_not_found(self):
        with pytest.raises(ExtractionError, match="element not found"):
            extract_price(None, float)

    def test_leading_text_is_conversion_error(self):
        # The run must start at the first character; "$" yields an empty run
        with pytest.raises(ExtractionError) as exc_info:
            extract_price(_first_p("<p>$566.00</p>"), float)
        assert exc_info.value.text == ""
        assert exc_info.value.reason == ExtractionFailure.CONVERSION_ERROR

    def test_two_dots_is_conversion_error(self):
        with pytest.raises(ExtractionError, match=r"^1\.2\.3 cannot be parsed"):
            extract_price(_first_p("<p>1.2.3</p>"), float)


class TestNumericPrefix:
    @pytest.mark.parametrize(
        "markup, expected",
        [
            ("566.00<span>Compra</span>", "566.00"),
            ("29169.00", "29169.00"),
            (".", "."),
            ("", ""),
            ("abc", ""),
            ("1,234.00", "1"),
        ],
    )
    def test_prefix(self, markup, expected):
        assert numeric_prefix(markup) == expected


class TestExtractQuote:
    def test_single_value_shape(self, crypto_html):
        quote = extract_quote(crypto_html, float, single_value=True)
        assert isinstance(quote, SingleValueQuote)

    def test_buy_sell_shape(self, blue_html):
        quote = extract_quote(blue_html, float, single_value=False)
        assert isinstance(quote, BuySellQuote)

    def test_both_shapes_share_capability(self, blue_html, crypto_html):
        for quote in (
            extract_quote(blue_html, float, single_value=False),
            extract_quote(crypto_html, float, single_value=True),
        ):
            assert isinstance(quote, PriceQuote)
            assert quote.title.startswith("Dólar")
            buy, _ = quote.price_pair()
            assert buy > 0
