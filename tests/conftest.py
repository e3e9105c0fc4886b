"""Shared pytest fixtures for dolarhoy."""

import pytest

BLUE_HTML = """
<div class="container__data" style="text-align:center;width:100%">
    <h2 class="data__titulo">Dólar Blue</h2>
    <div class="data__valores">
        <p>566.00<span>Compra</span></p>
        <p>571.00<span>Venta</span></p>
    </div>
</div>
"""

CRYPTO_HTML = """
<div class="container__data" style="text-align:center;width:100%">
    <h2 class="data__titulo">Dólar Crypto</h2>
    <div class="data__valores">
        <p>29169.00<span>Valor</span></p>
    </div>
</div>
"""

EMPTY_VALUES_HTML = """
<div class="container__data" style="text-align:center;width:100%">
    <h2 class="data__titulo">Dólar Blue</h2>
    <div class="data__valores">
    </div>
</div>
"""

DOT_VALUES_HTML = """
<div class="container__data" style="text-align:center;width:100%">
    <h2 class="data__titulo">Dólar Blue</h2>
    <div class="data__valores">
        <p>.<span>Compra</span></p>
        <p>.<span>Venta</span></p>
    </div>
</div>
"""


def http_response(body: str, status: str = "200 OK") -> str:
    return (
        f"HTTP/1.1 {status}\r\n"
        "Content-Type: text/html; charset=utf-8\r\n"
        "Connection: close\r\n"
        "\r\n"
        f"{body}"
    )


class FakeFetcher:
    """Fetcher returning a canned response and recording requests."""

    def __init__(self, response: str | Exception) -> None:
        self.response = response
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, host: str, path: str) -> str:
        self.calls.append((host, path))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def blue_html() -> str:
    return BLUE_HTML


@pytest.fixture
def crypto_html() -> str:
    return CRYPTO_HTML


@pytest.fixture
def empty_values_html() -> str:
    return EMPTY_VALUES_HTML


@pytest.fixture
def dot_values_html() -> str:
    return DOT_VALUES_HTML


@pytest.fixture
def make_response():
    """Factory: body (+ status) -> raw decoded HTTP response."""
    return http_response


@pytest.fixture
def make_fetcher():
    """Factory: canned response or exception -> FakeFetcher."""
    return FakeFetcher
