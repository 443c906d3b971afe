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

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from rego.lenel_s2.entities import Event


class RegoException(Exception):
    """
    Base class for the errors raised while talking to a NetBox appliance.

    :param command: The name of the command that was being executed, if known.
    """

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        self.command = command
        self.message = message
        if command:
            message = f"{command}: {message}"
        super().__init__(message)


class DecodeError(RegoException):
    """
    The response of the appliance could not be decoded, either because the XML is malformed or because the
    payload does not match the expected type.
    """

    def __init__(self, message: Optional[str] = None, command: Optional[str] = None) -> None:
        msg = "Failed to decode the response"
        if message is not None:
            msg += ": " + message

        super().__init__(msg, command)


class ApiError(RegoException):
    """
    An error reported by the API layer of the appliance (the APIERROR element). These errors indicate that the
    command never reached the command handler, e.g. the API is disabled or authentication failed.
    """

    def __init__(self, code: int, message: str, command: Optional[str] = None) -> None:
        self.code = code
        super().__init__(f"API error {code}: {message}", command)
        self.message = message


class CommandFailure(RegoException):
    """
    The command was executed but the appliance reported it as failed (CODE is FAIL). The message is the one
    returned by the appliance.
    """


class PaginationError(RegoException):
    """
    A paginated command returned a continuation token that can not be used or it exceeded the maximum number of pages.
    """


class StreamError(RegoException):
    """
    An event stream was aborted after it started delivering fragments.

    :param events: The events that were received before the stream was aborted.
    """

    def __init__(self, message: str, events: Sequence["Event"], command: Optional[str] = None) -> None:
        super().__init__(message, command)
        self.events: list["Event"] = list(events)


class StreamCancelled(StreamError):
    """
    The event stream was cancelled by the caller.
    """

    def __init__(self, events: Sequence["Event"], command: Optional[str] = None) -> None:
        super().__init__("Event stream cancelled", events, command)


class StreamDeadlineExceeded(StreamError):
    """
    The deadline of the event stream passed before the stream ended.
    """

    def __init__(self, events: Sequence["Event"], command: Optional[str] = None) -> None:
        super().__init__("Event stream deadline exceeded", events, command)
