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
import datetime
import logging
import socket
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from dateutil import parser as dateutil_parser

from rego.protocol.exceptions import StreamCancelled, StreamDeadlineExceeded, StreamError

if TYPE_CHECKING:
    from rego.lenel_s2.entities import Event

LOGGER = logging.getLogger(__name__)


class CancelContext:
    """
    Cancellation handle for long running operations such as an event stream.

    The context is done when `cancel` is called or when its deadline passes, whichever happens first.

    :param timeout: The number of seconds after which the context expires. None means no deadline.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._event = asyncio.Event()
        self._deadline: Optional[float] = time.monotonic() + timeout if timeout is not None else None
        self._deadline_exceeded = False

    def cancel(self) -> None:
        if not self._event.is_set():
            self._event.set()

    @property
    def deadline_exceeded(self) -> bool:
        if not self._deadline_exceeded and not self._event.is_set() and self._deadline is not None:
            if time.monotonic() >= self._deadline:
                self._deadline_exceeded = True
                self._event.set()
        return self._deadline_exceeded

    @property
    def cancelled(self) -> bool:
        """
        True when this context is done, either through cancel or because the deadline passed.
        """
        return self.deadline_exceeded or self._event.is_set()

    def remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    async def wait(self) -> None:
        """
        Block until this context is done.
        """
        if self.cancelled:
            return
        try:
            await asyncio.wait_for(self._event.wait(), self.remaining())
        except asyncio.TimeoutError:
            self._deadline_exceeded = True
            self._event.set()

    def error(self, events: Sequence["Event"], command: Optional[str] = None) -> StreamError:
        """
        Return the error that corresponds to the reason this context is done.
        """
        if self.deadline_exceeded:
            return StreamDeadlineExceeded(events, command)
        return StreamCancelled(events, command)


def get_free_tcp_port() -> str:
    """
    Semi safe method for getting a random port. This may contain a race condition.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as tcp:
        tcp.bind(("", 0))
        _addr, port = tcp.getsockname()
        return str(port)


def parse_timestamp(timestamp: str) -> datetime.datetime:
    """
    Parse a timestamp as sent by the appliance into a timezone aware object. Naive timestamps are assumed to be UTC.
    """
    result = dateutil_parser.parse(timestamp)
    if result.tzinfo is None:
        return result.replace(tzinfo=datetime.timezone.utc)
    return result


def format_timestamp(timestamp: datetime.datetime) -> str:
    """
    Format a timestamp the way the appliance expects it in command parameters. Naive timestamps are assumed to be UTC.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
    return timestamp.strftime("%Y-%m-%d %H:%M:%S%z")
