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

# This file defines named type definitions for the rego code base

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    # Include imports from other modules here and use the quoted annotation in the definition to prevent import loops
    from rego.lenel_s2.entities import Event  # noqa: F401
    from rego.protocol.exceptions import RegoException  # noqa: F401


# A plain parameter value as it appears inside a PARAMS block
ParamValue = Union[str, int, None]

# Callbacks used while streaming events
EventSink = Callable[["Event"], Union[bool, None, Awaitable[Optional[bool]]]]
HeartbeatCallback = Callable[[], None]
ErrorCallback = Callable[["RegoException"], None]

# Forwarder for events to a SIEM, failures are logged and do not stop the stream
SiemForwarder = Callable[["Event"], Awaitable[None]]
