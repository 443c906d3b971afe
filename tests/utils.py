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
from collections import abc
from typing import Union

BOUNDARY = "Boundary"

USERNAME = "admin"
PASSWORD = "secret"
SESSION_ID = "1785937530"

HEARTBEAT = b'<NETBOX><RESPONSE command="StreamEvents"></RESPONSE></NETBOX>'
STREAM_STARTED = b'<NETBOX><RESPONSE command="StreamEvents"><CODE>SUCCESS</CODE></RESPONSE></NETBOX>'

ANTHONY_EVENT = (
    b'<NETBOX><RESPONSE command="StreamEvents"><EVENT><ACNAME><![CDATA[357]]></ACNAME><ACNUM><![CDATA[357]]></ACNUM>'
    b"<CDT>2025-08-07 13:57:35.75300 -0400</CDT><DESCNAME><![CDATA[Access granted]]></DESCNAME>"
    b"<NDT>2025-08-07 13:57:35.00000 -0400</NDT><NODENAME><![CDATA[REGO-Node-5]]></NODENAME>"
    b"<NODEUNIQUE>CRYPTO357MASTER5735</NODEUNIQUE><PARTITIONKEY>3</PARTITIONKEY>"
    b"<PARTNAME><![CDATA[Crypto-Zone]]></PARTNAME><PERSONID>REGO_357</PERSONID>"
    b"<PERSONNAME><![CDATA[Dardano, Anthony]]></PERSONNAME><PORTALKEY>357</PORTALKEY>"
    b"<PORTALNAME><![CDATA[REGO-Portal-357]]></PORTALNAME><RDRNAME><![CDATA[REGO-357-Reader]]></RDRNAME>"
    b"<READERKEY>357</READERKEY></EVENT></RESPONSE></NETBOX>"
)

SATOSHI_EVENT = (
    b'<NETBOX><RESPONSE command="StreamEvents"><EVENT><PERSONNAME><![CDATA[Nakamoto, Satoshi]]></PERSONNAME>'
    b"<PORTALNAME><![CDATA[Bitcoin-Portal-753]]></PORTALNAME><CDT>2025-08-07 15:53:57</CDT>"
    b"<DESCNAME><![CDATA[Access granted]]></DESCNAME><PERSONID>SATOSHI_753</PERSONID></EVENT></RESPONSE></NETBOX>"
)

# The controller time of this event is not a valid timestamp
NAKAMOTO_EVENT = (
    b'<NETBOX><RESPONSE command="StreamEvents"><EVENT><PERSONNAME><![CDATA[Nakamoto, Satoshi]]></PERSONNAME>'
    b"<PORTALNAME><![CDATA[Bitcoin-Portal-573]]></PORTALNAME><CDT>2025-08-05 17:35:73</CDT>"
    b"<DESCNAME><![CDATA[Access denied]]></DESCNAME><PERSONID>NAKAMOTO_573</PERSONID>"
    b"<DETAIL><![CDATA[Invalid credentials]]></DETAIL></EVENT></RESPONSE></NETBOX>"
)

STREAM_FRAGMENTS = [STREAM_STARTED, ANTHONY_EVENT, HEARTBEAT, SATOSHI_EVENT, HEARTBEAT, NAKAMOTO_EVENT]


def event_fragment(person_id: str, desc_name: str = "Access granted") -> bytes:
    return (
        f'<NETBOX><RESPONSE command="StreamEvents"><EVENT><DESCNAME>{desc_name}</DESCNAME>'
        f"<PERSONID>{person_id}</PERSONID><CDT>2025-08-07 13:57:35</CDT></EVENT></RESPONSE></NETBOX>"
    ).encode()


def multipart_part(fragment: bytes, boundary: str = BOUNDARY) -> bytes:
    return b"--" + boundary.encode() + b"\r\nContent-Type: text/xml\r\n\r\n" + fragment + b"\r\n"


def multipart_end(boundary: str = BOUNDARY) -> bytes:
    return b"--" + boundary.encode() + b"--\r\n"


def multipart_body(fragments: abc.Sequence[bytes], boundary: str = BOUNDARY) -> bytes:
    return b"".join(multipart_part(fragment, boundary) for fragment in fragments) + multipart_end(boundary)


def response(command: str, details: str = "", code: str = "SUCCESS", session_id: str = "") -> bytes:
    """
    Build a standard response envelope
    """
    session = f' sessionid="{session_id}"' if session_id else ""
    return (
        f'<NETBOX{session}><RESPONSE command="{command}" num="1"><CODE>{code}</CODE>{details}</RESPONSE></NETBOX>'
    ).encode()


def failure(command: str, message: str) -> bytes:
    return response(command, f"<DETAILS><ERRMSG>{message}</ERRMSG></DETAILS>", code="FAIL")


def api_error(code: int) -> bytes:
    return f"<NETBOX><RESPONSE><APIERROR>{code}</APIERROR></RESPONSE></NETBOX>".encode()


async def retry_limited(
    fun: Union[abc.Callable[[], bool], abc.Callable[[], abc.Awaitable[bool]]], timeout: float, interval: float = 0.05
) -> None:
    async def check() -> bool:
        result = fun()
        if isinstance(result, abc.Awaitable):
            result = await result
        return bool(result)

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not await check():
        if loop.time() > deadline:
            raise AssertionError("Bounded wait failed")
        await asyncio.sleep(interval)


def log_contains(caplog, loggerpart, level, msg, test_phase="call"):
    close = []
    for record in caplog.get_records(test_phase):
        logger_name, log_level, message = record.name, record.levelno, record.message
        if msg in message:
            if loggerpart in logger_name and level == log_level:
                return
            else:
                close.append((logger_name, log_level, message))
    if close:
        print("found nearly matching log entry")
        for logger_name, log_level, message in close:
            print(logger_name, log_level, message)
        print("------------")

    assert False


def log_doesnt_contain(caplog, loggerpart, level, msg):
    for logger_name, log_level, message in caplog.record_tuples:
        if loggerpart in logger_name and level == log_level and msg in message:
            assert False


class StreamScript:
    """
    What the stand-in appliance sends in response to a StreamEvents command.

    :param fragments: The envelopes to send, one multipart part each.
    :param keep_open: Keep sending heartbeats after the fragments until the client goes away.
    :param status: The http status, a status of 400 or higher sends an error page instead of a stream.
    :param closing_delimiter: Send the closing delimiter when the stream ends.
    :param interval: The time between two parts in seconds.
    :param idle: Stay silent for this many seconds after the fragments, or until the client goes away.
    """

    def __init__(
        self,
        fragments: abc.Sequence[bytes] = (),
        keep_open: bool = False,
        status: int = 200,
        closing_delimiter: bool = True,
        interval: float = 0.02,
        idle: float = 0,
    ) -> None:
        self.fragments = list(fragments)
        self.keep_open = keep_open
        self.status = status
        self.closing_delimiter = closing_delimiter
        self.interval = interval
        self.idle = idle
