"""
    Copyright 2025 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any, Optional

from tornado.httpclient import AsyncHTTPClient, HTTPRequest, HTTPResponse
from tornado.iostream import IOStream
from tornado.netutil import Resolver
from tornado.simple_httpclient import SimpleAsyncHTTPClient
from tornado.tcpclient import TCPClient

from rego import const

LOGGER: logging.Logger = logging.getLogger(__name__)

# One terabyte, the stream is expected to run for a very long time
DEFAULT_MAX_BODY_SIZE = 1024**4


class _ClosingTCPClient(TCPClient):
    """
    A tcp client that closes the connections it opened when it is closed itself.
    """

    def __init__(self, resolver: Optional[Resolver] = None) -> None:
        super().__init__(resolver)
        self.streams: set[IOStream] = set()

    async def connect(self, *args: Any, **kwargs: Any) -> IOStream:
        stream = await super().connect(*args, **kwargs)
        self.streams.add(stream)
        return stream

    def close(self) -> None:
        for stream in self.streams:
            stream.close()
        self.streams.clear()
        super().close()


class HTTPTransport:
    """
    An XML over http transport on top of the tornado http client.

    :param headers: Headers sent with every request. The content type defaults to text/xml.
    :param connect_timeout: Timeout for the initial connection in seconds.
    :param validate_cert: Validate the certificate of the server.
    :param ca_certs: CA cert file to validate the certificate of the server against.
    :param max_body_size: The maximum number of bytes a streamed response body may contain.
    """

    def __init__(
        self,
        headers: Optional[Mapping[str, str]] = None,
        connect_timeout: float = 20,
        validate_cert: bool = True,
        ca_certs: Optional[str] = None,
        max_body_size: int = DEFAULT_MAX_BODY_SIZE,
    ) -> None:
        self.headers: dict[str, str] = {const.CONTENT_TYPE: const.XML_CONTENT}
        if headers:
            self.headers.update(headers)
        self.connect_timeout = connect_timeout
        self.validate_cert = validate_cert
        self.ca_certs = ca_certs
        self.max_body_size = max_body_size

    def _build_request(
        self,
        method: str,
        url: str,
        body: Optional[bytes],
        request_timeout: float,
        streaming_callback: Optional[Callable[[bytes], None]] = None,
        header_callback: Optional[Callable[[str], None]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HTTPRequest:
        request_headers = dict(self.headers)
        if headers:
            request_headers.update(headers)
        return HTTPRequest(
            url=url,
            method=method,
            headers=request_headers,
            body=body,
            connect_timeout=self.connect_timeout,
            request_timeout=request_timeout,
            validate_cert=self.validate_cert,
            ca_certs=self.ca_certs,
            decompress_response=True,
            streaming_callback=streaming_callback,
            header_callback=header_callback,
        )

    async def request(self, method: str, url: str, body: Optional[bytes], request_timeout: float) -> HTTPResponse:
        """
        Perform a single http exchange. Errors of the exchange itself (timeouts, refused connections, http
        error codes) are raised as they are raised by tornado.
        """
        request = self._build_request(method, url, body, request_timeout)
        client = AsyncHTTPClient()
        return await client.fetch(request)

    async def stream(
        self,
        method: str,
        url: str,
        body: Optional[bytes],
        streaming_callback: Callable[[bytes], None],
        header_callback: Optional[Callable[[str], None]] = None,
    ) -> HTTPResponse:
        """
        Perform a long lived http exchange on a persistent connection. The body of the response is not buffered,
        every chunk is passed to the streaming callback as it arrives. Raising an exception in one of the callbacks
        aborts the exchange.

        A dedicated client instance is used, so a long running stream never occupies a connection slot of the
        shared client. The connection is closed when the exchange ends or when this coroutine is cancelled.
        """
        # A request timeout of 0 disables the timeout
        request = self._build_request(
            method, url, body, 0, streaming_callback, header_callback, headers={const.CONNECTION: const.KEEP_ALIVE}
        )
        client = SimpleAsyncHTTPClient(force_instance=True, max_body_size=self.max_body_size)
        client.tcp_client.close()
        client.tcp_client = _ClosingTCPClient(resolver=client.resolver)
        try:
            return await client.fetch(request)
        finally:
            client.close()

    @contextlib.asynccontextmanager
    async def open_stream(
        self,
        method: str,
        url: str,
        body: Optional[bytes],
        streaming_callback: Callable[[bytes], None],
        header_callback: Optional[Callable[[str], None]] = None,
    ) -> AsyncIterator["asyncio.Future[HTTPResponse]"]:
        """
        Start a long lived exchange in the background, see :meth:`stream`. The context yields the future of the
        exchange. On exit an exchange that did not finish yet is cancelled and its connection is closed.
        """
        fetch = asyncio.ensure_future(self.stream(method, url, body, streaming_callback, header_callback))
        try:
            yield fetch
        finally:
            if not fetch.done():
                fetch.cancel()
                await asyncio.wait([fetch])
                LOGGER.debug("Closed the connection of the stream to %s", url)
            elif not fetch.cancelled() and fetch.exception() is not None:
                LOGGER.debug("Stream to %s ended with an error: %s", url, fetch.exception())
