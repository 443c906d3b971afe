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
import inspect
import logging
from typing import Optional, Protocol, Self, TypeVar, Union

from tornado.httpclient import HTTPResponse

from rego import const as rego_const
from rego.lenel_s2 import const
from rego.lenel_s2.command import Command
from rego.lenel_s2.commands import NetboxCommands
from rego.lenel_s2.entities import Event
from rego.lenel_s2.envelope import Envelope, decode_envelope, decode_event_envelope
from rego.lenel_s2.model import XmlModel
from rego.protocol.exceptions import PaginationError, RegoException, StreamError
from rego.protocol.multipart import MultipartReader, parse_boundary
from rego.protocol.transport import HTTPTransport
from rego.types import ErrorCallback, EventSink, HeartbeatCallback
from rego.util import CancelContext

LOGGER = logging.getLogger(__name__)

R = TypeVar("R", bound=XmlModel)


class PaginatedResult(Protocol):
    """
    A page of a paginated command.
    """

    def next_token(self) -> Optional[str]:
        """
        The continuation token of this page, None when this is the last page.
        """

    def merge(self, other: Self) -> Self:
        """
        Add the items of the other page to this one and return the result.
        """

    def next_command(self, command: Command, token: str) -> Command:
        """
        Return the command that requests the page identified by the given token.

        :raises PaginationError: The token can not be used in the command.
        """


PR = TypeVar("PR", bound=PaginatedResult)


class _StreamEnd:
    pass


_END = _StreamEnd()


class Dispatcher:
    """
    Executes commands against the XML API of a NetBox appliance.

    :param transport: The transport to send the commands over.
    :param request_timeout: Timeout of a single command in seconds.
    :param max_pages: The maximum number of pages a paginated command fetches, 0 means no limit.
    """

    def __init__(self, transport: HTTPTransport, request_timeout: float = const.REQUEST_TIMEOUT, max_pages: int = 0) -> None:
        self.transport = transport
        self.request_timeout = request_timeout
        self.max_pages = max_pages

    async def exchange(
        self, method: str, url: str, command: Command, result_type: Optional[type[R]] = None
    ) -> Envelope[R]:
        """
        Send a command and return the decoded envelope of a successful response.

        :raises ApiError: The API layer rejected the command.
        :raises CommandFailure: The appliance reported the command as failed.
        :raises DecodeError: The response could not be decoded.
        """
        body = command.to_xml()
        LOGGER.debug("Calling %s on %s", command.name, url)
        if command.name != NetboxCommands.Utility.LOGIN:
            LOGGER.log(rego_const.LOG_LEVEL_TRACE, "Request body: %s", body.decode(rego_const.UTF8_ENCODING))

        response: HTTPResponse = await self.transport.request(method, url, body, self.request_timeout)
        LOGGER.debug("Response status of %s: %d %s", command.name, response.code, response.reason)
        LOGGER.log(rego_const.LOG_LEVEL_TRACE, "Response body: %s", response.body)

        envelope = decode_envelope(response.body, result_type, command=command.name)
        envelope.response.result(command.name)
        return envelope

    async def do(self, method: str, url: str, command: Command, result_type: Optional[type[R]] = None) -> Optional[R]:
        """
        Send a command and return the payload of the response, None when the response carries no payload.

        Transport errors are raised as they are raised by the transport, the command is never retried.
        """
        envelope = await self.exchange(method, url, command, result_type)
        return envelope.response.details

    async def do_paginated(self, method: str, url: str, command: Command, result_type: type[PR]) -> PR:
        """
        Send a paginated command and return all pages merged into one result.

        The first page is the result, later pages are merged into it. An error on any page aborts the whole
        operation.

        :raises PaginationError: A continuation token could not be used or the maximum number of pages was exceeded.
        """
        result: Optional[PR] = None
        pages = 0
        while True:
            page: Optional[PR] = await self.do(method, url, command, result_type)  # type: ignore[type-var]
            pages += 1
            if page is None:
                page = result_type()

            result = page if result is None else result.merge(page)

            token = page.next_token()
            if token is None:
                LOGGER.debug("Fetched %d page(s) for %s", pages, command.name)
                return result

            if self.max_pages and pages >= self.max_pages:
                raise PaginationError(f"Exceeded the maximum of {self.max_pages} pages", command.name)

            command = page.next_command(command, token)

    async def do_stream(
        self,
        method: str,
        url: str,
        command: Command,
        sink: EventSink,
        heartbeat: Optional[HeartbeatCallback] = None,
        context: Optional[CancelContext] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> list[Event]:
        """
        Send a streaming command and feed the events to the sink as they arrive.

        The body of the response is a multipart document, each part is a separate envelope. An envelope without event
        and without error is a heartbeat, it is passed to the heartbeat callback only. An envelope that holds an error
        is logged and passed to on_error, the stream continues.

        :param sink: Called for every event, after the event was added to the result. Returning False ends the stream.
            The sink can be a coroutine function.
        :param heartbeat: Called for every heartbeat.
        :param context: Cancels the stream when it is cancelled or when its deadline passes.
        :param on_error: Called for every envelope that holds an error or can not be decoded.
        :return: All events received, when the stream ended or the sink returned False.
        :raises StreamCancelled: The context was cancelled, the error holds the events received until then.
        :raises StreamDeadlineExceeded: The deadline of the context passed, the error holds the events received
            until then.
        :raises StreamError: The sink raised an exception or the connection failed after the first fragment was
            read, the error holds the events received until then.
        """
        context = context if context is not None else CancelContext()
        events: list[Event] = []
        queue: asyncio.Queue[Union[bytes, _StreamEnd]] = asyncio.Queue()
        reader = MultipartReader()
        error_status = False

        def on_header(line: str) -> None:
            nonlocal error_status
            if line.startswith("HTTP/"):
                parts = line.split(" ", 2)
                error_status = len(parts) > 1 and parts[1].isdigit() and int(parts[1]) >= 400
                return
            name, sep, value = line.partition(":")
            if sep and name.strip().lower() == rego_const.CONTENT_TYPE.lower():
                if not value.strip().lower().startswith(rego_const.MULTIPART_MIXED):
                    LOGGER.debug("Event stream has content type %s, reading bare XML documents", value.strip())
                boundary = parse_boundary(value.strip())
                if boundary:
                    reader.set_boundary(boundary)

        def on_chunk(chunk: bytes) -> None:
            if error_status:
                # The body of an error response is not a stream of envelopes
                return
            for fragment in reader.feed(chunk):
                queue.put_nowait(fragment)

        def on_done(future: "asyncio.Future[HTTPResponse]") -> None:
            queue.put_nowait(_END)

        async def handle(fragment: bytes) -> bool:
            """
            Handle a single fragment, returns False when the stream should end.
            """
            LOGGER.log(rego_const.LOG_LEVEL_TRACE, "Fragment received: %s", fragment)
            try:
                envelope = decode_event_envelope(fragment, Event, command=command.name)
                event = envelope.response.result(command.name)
            except RegoException as e:
                LOGGER.warning("Error in event stream %s: %s", command.name, e)
                if on_error is not None:
                    on_error(e)
                return True

            if event is None:
                LOGGER.debug("Heartbeat received on %s", command.name)
                if heartbeat is not None:
                    heartbeat()
                return True

            events.append(event)
            try:
                result = sink(event)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                raise StreamError("The event sink failed", events, command.name) from e
            return result is not False

        if context.cancelled:
            raise context.error(events, command.name)

        received = 0
        LOGGER.debug("Starting event stream %s on %s", command.name, url)
        async with self.transport.open_stream(method, url, command.to_xml(), on_chunk, on_header) as fetch:
            fetch.add_done_callback(on_done)
            while True:
                if context.cancelled:
                    raise context.error(events, command.name)

                item = await self._next_fragment(queue, context)
                if item is None:
                    raise context.error(events, command.name)

                if isinstance(item, _StreamEnd):
                    for fragment in reader.close():
                        received += 1
                        if not await handle(fragment):
                            return events
                    error = None if fetch.cancelled() else fetch.exception()
                    if error is not None:
                        if received == 0:
                            raise error
                        raise StreamError(f"The event stream failed: {error}", events, command.name) from error
                    LOGGER.debug("Event stream %s ended after %d event(s)", command.name, len(events))
                    return events

                received += 1
                if not await handle(item):
                    LOGGER.debug("Event stream %s stopped by the sink after %d event(s)", command.name, len(events))
                    return events

    async def _next_fragment(
        self, queue: "asyncio.Queue[Union[bytes, _StreamEnd]]", context: CancelContext
    ) -> Optional[Union[bytes, _StreamEnd]]:
        """
        Wait for the next item on the queue. Returns None when the context is done first.
        """
        if not queue.empty():
            return queue.get_nowait()

        get = asyncio.ensure_future(queue.get())
        wait = asyncio.ensure_future(context.wait())
        try:
            await asyncio.wait({get, wait}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            wait.cancel()
            if not get.done():
                get.cancel()

        if context.cancelled:
            return None
        return get.result()
