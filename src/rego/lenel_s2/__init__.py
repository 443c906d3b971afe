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

"""
Client for the XML API of Lenel S2 NetBox access control appliances.

    * command, envelope: The wire format of commands and responses.
    * dispatcher: Executes single, paginated and streaming commands.
    * entities: The payloads of the responses.
    * catalog, commands: The event types, event tags and command names of the API.
    * stream: Builder for the parameters of an event stream.
    * client: The client with a method per supported resource.
"""

# flake8: noqa: F401, F403

from .catalog import EventCategory, EventTag, EventTypes
from .client import Client
from .command import Command, build_command
from .commands import NetboxCommands
from .dispatcher import Dispatcher, PaginatedResult
from .entities import UDF, Access, AccessCard, AccessHistory, CardFormats, Event, People, Person, UDFLists, Vehicle
from .envelope import Envelope, Response, decode_envelope, decode_event_envelope
from .stream import StreamEventsBuilder, StreamEventsParams
