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

# Environment variables
ENVIRON_PREFIX = "REGO"
ENVIRON_FORCE_TTY = "FORCE_TTY"

# HTTP
CONTENT_TYPE = "Content-Type"
XML_CONTENT = "text/xml"
CONNECTION = "Connection"
KEEP_ALIVE = "keep-alive"
MULTIPART_MIXED = "multipart/mixed"
UTF8_ENCODING = "utf-8"

HTTP_POST = "POST"


# Python log level of the TRACE verbosity, below DEBUG
LOG_LEVEL_TRACE = 3
