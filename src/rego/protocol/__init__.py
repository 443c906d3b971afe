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
The protocol module contains the transport level code to talk to an XML API over http.

    * transport: A tornado based http transport for single requests and long lived streams.
    * multipart: An incremental splitter for multipart/mixed bodies.
    * exceptions: The errors raised by the clients built on top of this package.
"""

# flake8: noqa: F401, F403

from .exceptions import (
    ApiError,
    CommandFailure,
    DecodeError,
    PaginationError,
    RegoException,
    StreamCancelled,
    StreamDeadlineExceeded,
    StreamError,
)
from .multipart import MultipartReader
from .transport import HTTPTransport
