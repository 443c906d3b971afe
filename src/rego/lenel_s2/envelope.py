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

import dataclasses
import logging
import xml.etree.ElementTree as ET
from typing import Generic, Optional, TypeVar

import pydantic

from rego.lenel_s2 import const
from rego.lenel_s2.entities import Event
from rego.lenel_s2.model import XmlModel
from rego.protocol.exceptions import ApiError, CommandFailure, DecodeError

LOGGER = logging.getLogger(__name__)

P = TypeVar("P", bound=XmlModel)


@dataclasses.dataclass
class Response(Generic[P]):
    """
    The RESPONSE element of an envelope. Exactly one of the following holds after decoding:

    * api_error is set: the command was rejected by the API layer, error holds the description of the code.
    * code is FAIL: the command failed, error holds the message of the appliance and details is None.
    * otherwise the command succeeded. details holds the payload, or None when the response carried none.
    """

    command: Optional[str] = None
    api_error: Optional[int] = None
    code: Optional[str] = None
    details: Optional[P] = None
    error: str = ""

    @property
    def failed(self) -> bool:
        return self.code == const.FAIL

    @property
    def event(self) -> Optional[P]:
        """
        The payload of a streaming response
        """
        return self.details

    @property
    def is_heartbeat(self) -> bool:
        """
        A streaming response that carries neither an event nor an error. Used by the appliance to keep the
        connection alive.
        """
        return self.api_error is None and not self.failed and not self.error and self.details is None

    def result(self, command: Optional[str] = None) -> Optional[P]:
        """
        Return the payload or raise the error this response represents.

        :param command: The name of the command, used in the error. Defaults to the command attribute of the response.
        """
        command = command or self.command
        if self.api_error is not None:
            raise ApiError(self.api_error, self.error, command)
        if self.failed:
            raise CommandFailure(self.error, command)
        if self.error:
            # Streaming responses can carry an ERRMSG without a FAIL code
            raise CommandFailure(self.error, command)
        return self.details


@dataclasses.dataclass
class Envelope(Generic[P]):
    """
    The root NETBOX element of a response
    """

    session_id: str = ""
    response: Response[P] = dataclasses.field(default_factory=Response)


class _EnvelopeDecoder(Generic[P]):
    """
    State machine over the tokens of a single envelope.

    The children of RESPONSE are handled when their end tag is seen, at that point their subtree is complete. They
    are handled in document order, so the CODE is known when the data element is handled.
    """

    def __init__(self, payload_type: Optional[type[P]], data_tag: str, streaming: bool, command: Optional[str]) -> None:
        self.payload_type = payload_type
        self.data_tag = data_tag
        self.streaming = streaming
        self.command = command
        self.envelope: Envelope[P] = Envelope()
        self.depth = 0
        self.in_response = False
        self.skip_response = False

    def decode(self, data: bytes) -> Envelope[P]:
        parser = ET.XMLPullParser(events=("start", "end"))
        try:
            parser.feed(data)
            self._consume(parser)
            parser.close()
            self._consume(parser)
        except ET.ParseError as e:
            raise DecodeError(str(e), self.command) from e
        except pydantic.ValidationError as e:
            raise DecodeError(str(e), self.command) from e
        return self.envelope

    def _consume(self, parser: ET.XMLPullParser) -> None:
        for event, element in parser.read_events():
            if event == "start":
                self._start(element)
                self.depth += 1
            else:
                self.depth -= 1
                self._end(element)

    def _start(self, element: ET.Element) -> None:
        if self.depth == 0:
            if element.tag != const.ROOT_RESPONSE:
                raise DecodeError(f"expected element type <{const.ROOT_RESPONSE}> but have <{element.tag}>", self.command)
            self.envelope.session_id = element.get(const.SESSION_ID, "")
        elif self.depth == 1 and element.tag == const.RESPONSE:
            self.in_response = True
            self.envelope.response.command = element.get("command")

    def _end(self, element: ET.Element) -> None:
        if self.depth == 1 and element.tag == const.RESPONSE:
            self.in_response = False
            self.skip_response = False
            return
        if self.depth != 2 or not self.in_response or self.skip_response:
            return

        response = self.envelope.response
        tag = element.tag
        if tag == const.APIERROR:
            try:
                response.api_error = int((element.text or "").strip())
            except ValueError:
                raise DecodeError(f"invalid {const.APIERROR} value {element.text!r}", self.command)
            response.error = const.api_error_message(response.api_error)
            # Nothing else in this response is relevant
            self.skip_response = True
        elif tag == const.CODE:
            response.code = element.text or ""
        elif tag == self.data_tag:
            if response.failed:
                if not self.streaming:
                    response.error = element.findtext(const.ERRMSG, default="")
            elif self.payload_type is not None:
                response.details = self.payload_type.from_xml(element)
        elif tag == const.ERRMSG and self.streaming:
            response.error = element.text or ""
        # Any other element is ignored


def decode_envelope(
    data: bytes, payload_type: Optional[type[P]] = None, command: Optional[str] = None
) -> Envelope[P]:
    """
    Decode a standard response envelope, the payload is read from the DETAILS element.

    :param payload_type: The model to decode DETAILS into. When None, the payload is ignored.
    :param command: The name of the command the response belongs to, used in errors.
    :raises DecodeError: The data is not a valid envelope.
    """
    return _EnvelopeDecoder(payload_type, const.DETAILS, streaming=False, command=command).decode(data)


def decode_event_envelope(
    data: bytes, payload_type: Optional[type[P]] = None, command: Optional[str] = None
) -> Envelope[P]:
    """
    Decode a fragment of an event stream, the payload is read from the EVENT element.

    :param payload_type: The model to decode EVENT into, defaults to Event.
    :param command: The name of the command the fragment belongs to, used in errors.
    :raises DecodeError: The data is not a valid envelope.
    """
    if payload_type is None:
        payload_type = Event  # type: ignore[assignment]
    return _EnvelopeDecoder(payload_type, const.EVENT, streaming=True, command=command).decode(data)
