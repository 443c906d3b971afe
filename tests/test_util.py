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

import pytest

from rego.protocol.exceptions import StreamCancelled, StreamDeadlineExceeded
from rego.protocol.transport import HTTPTransport
from rego.util import CancelContext, format_timestamp, get_free_tcp_port, parse_timestamp


async def test_cancel_context():
    context = CancelContext()
    assert not context.cancelled
    assert context.remaining() is None

    waiter = asyncio.create_task(context.wait())
    await asyncio.sleep(0.01)
    assert not waiter.done()

    context.cancel()
    await asyncio.wait_for(waiter, 1)
    assert context.cancelled
    assert not context.deadline_exceeded
    error = context.error([], "StreamEvents")
    assert isinstance(error, StreamCancelled)
    assert str(error) == "StreamEvents: Event stream cancelled"


async def test_cancel_context_deadline():
    context = CancelContext(timeout=0.05)
    assert 0 < context.remaining() <= 0.05
    await asyncio.wait_for(context.wait(), 1)
    assert context.deadline_exceeded
    assert context.cancelled
    assert context.remaining() == 0
    assert isinstance(context.error([]), StreamDeadlineExceeded)

    # A later cancel does not change the reason
    context.cancel()
    assert isinstance(context.error([]), StreamDeadlineExceeded)


async def test_cancel_before_deadline():
    context = CancelContext(timeout=10)
    context.cancel()
    await asyncio.wait_for(context.wait(), 1)
    assert not context.deadline_exceeded
    assert isinstance(context.error([]), StreamCancelled)


@pytest.mark.parametrize(
    "value, expected",
    [
        (
            "2025-08-07 13:57:35.75300 -0400",
            datetime.datetime(2025, 8, 7, 13, 57, 35, 753000, tzinfo=datetime.timezone(datetime.timedelta(hours=-4))),
        ),
        ("2025-08-07 15:53:57", datetime.datetime(2025, 8, 7, 15, 53, 57, tzinfo=datetime.timezone.utc)),
    ],
)
def test_parse_timestamp(value, expected):
    result = parse_timestamp(value)
    assert result == expected
    assert result.tzinfo is not None


def test_parse_invalid_timestamp():
    with pytest.raises(ValueError):
        parse_timestamp("2025-08-05 17:35:73")


def test_format_timestamp():
    assert format_timestamp(datetime.datetime(2025, 8, 7, 13, 57, 35)) == "2025-08-07 13:57:35+0000"
    tz = datetime.timezone(datetime.timedelta(hours=-4))
    assert format_timestamp(datetime.datetime(2025, 8, 7, 13, 57, 35, tzinfo=tz)) == "2025-08-07 13:57:35-0400"


def test_free_port():
    assert 0 < int(get_free_tcp_port()) < 65536


def test_request_headers():
    transport = HTTPTransport(headers={"Connection": "close"})
    assert transport.headers["Content-Type"] == "text/xml"

    request = transport._build_request("POST", "http://127.0.0.1/", b"", 10, headers={"Connection": "keep-alive"})
    assert request.headers["Connection"] == "keep-alive"
    assert request.headers["Content-Type"] == "text/xml"
    # Per request headers never leak into the headers of the transport
    assert transport.headers["Connection"] == "close"
