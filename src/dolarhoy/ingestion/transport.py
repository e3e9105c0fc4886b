"""Minimal HTTP/1.0-over-TLS transport.

One call = one TCP connection + one TLS session + one request. The request
line is framed by hand and the response is read until the server closes
the connection, which HTTP/1.0 servers do after sending the body. A server
that keeps the connection open will stall the read forever; callers that
need a deadline wrap fetch() in asyncio.wait_for().
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import socket
import ssl
from typing import Protocol, runtime_checkable

import certifi

from dolarhoy.core.catalog import DOLARHOY_PORT
from dolarhoy.core.exceptions import InvalidResponseError, TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class Fetcher(Protocol):
    """Anything that can return the decoded raw response for host + path."""

    async def fetch(self, host: str, path: str) -> str: ...


def build_request(host: str, path: str) -> bytes:
    """Frame the single request sent per connection."""
    return f"GET {path} HTTP/1.0\r\nHost: {host}\r\n\r\n".encode()


def create_ssl_context(ca_file: str | None = None) -> ssl.SSLContext:
    """Client context trusting certifi's Mozilla CA bundle (or ``ca_file``).

    Hostname checking and certificate verification stay on; no client
    certificate is presented.
    """
    return ssl.create_default_context(cafile=ca_file or certifi.where())


def decode_response(raw: bytes) -> str:
    """Decode a raw response as UTF-8.

    Raises:
        InvalidResponseError: The bytes are not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidResponseError(str(e), context={"size": len(raw)}) from e


class TlsFetcher:
    """Fetches a path over a fresh TLS connection and reads to end of stream.

    Stateless between calls: concurrent fetches each open their own
    connection.
    """

    def __init__(
        self,
        port: int = DOLARHOY_PORT,
        ssl_context: ssl.SSLContext | None = None,
    ) -> None:
        self._port = port
        self._ssl_context = ssl_context or create_ssl_context()

    async def fetch(self, host: str, path: str) -> str:
        """Send ``GET path`` to ``host`` and return the whole decoded response.

        Raises:
            TransportError: Resolution, connect, TLS or socket I/O failed.
            InvalidResponseError: The response is not valid UTF-8.
        """
        context = {"host": host, "port": self._port, "path": path}
        try:
            raw = await self._exchange(host, path)
        except OSError as e:
            logger.debug("Transport failure for %s%s: %s", host, path, e)
            raise TransportError(f"failed to make the request: {e}", context=context) from e

        logger.debug("Read %d bytes from %s%s", len(raw), host, path)
        return decode_response(raw)

    async def _exchange(self, host: str, path: str) -> bytes:
        address = await self._resolve(host)
        reader, writer = await asyncio.open_connection(
            address,
            self._port,
            ssl=self._ssl_context,
            server_hostname=host,
        )
        try:
            writer.write(build_request(host, path))
            await writer.drain()
            return await reader.read()
        finally:
            writer.close()
            # Close errors after a completed or aborted exchange change nothing
            with contextlib.suppress(OSError):
                await writer.wait_closed()

    async def _resolve(self, host: str) -> str:
        """Resolve ``host`` to the first address on the configured port.

        Raises:
            OSError: Resolution failed or returned no address.
        """
        loop = asyncio.get_running_loop()
        infos = await loop.getaddrinfo(host, self._port, type=socket.SOCK_STREAM)
        if not infos:
            raise OSError(f"no address found for {host}")
        # (family, type, proto, canonname, sockaddr); sockaddr[0] is the IP
        return infos[0][4][0]


async def fetch(host: str, path: str, port: int = DOLARHOY_PORT) -> str:
    """One-shot fetch with a default TlsFetcher."""
    return await TlsFetcher(port=port).fetch(host, path)
