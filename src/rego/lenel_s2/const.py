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

from types import MappingProxyType

# Path of the XML API on the appliance
NETBOX_API = "/nbws/goforms/nbapi"

# Fixed attributes of every command
COMMAND_NUM = "1"
DATE_FORMAT = "tzoffset"

# Status codes of a command response
SUCCESS = "SUCCESS"
FAIL = "FAIL"

# A continuation token with one of these values means there are no more pages
NO_MORE_PAGES = frozenset({"", "-1"})

# Timeout of a single command in seconds
REQUEST_TIMEOUT = 10

# Number of records requested per page of access history
MAX_RECORDS = 1000

# Element names of the wire format
ROOT_REQUEST = "NETBOX-API"
ROOT_RESPONSE = "NETBOX"
COMMAND = "COMMAND"
PARAMS = "PARAMS"
RESPONSE = "RESPONSE"
APIERROR = "APIERROR"
CODE = "CODE"
DETAILS = "DETAILS"
EVENT = "EVENT"
ERRMSG = "ERRMSG"
SESSION_ID = "sessionid"

API_ERRORS = MappingProxyType(
    {
        1: "The API failed to initialize.",
        2: "The API is not enabled on the system.",
        3: "The call contains an invalid API command.",
        4: "The API was unable to parse the command request.",
        5: "There was an authentication failure. Refer to options for configuring authentication to work with the API.",
        6: "The XML code contains an unknown command. Check the syntax of the command request.",
    }
)

UNKNOWN_API_ERROR = "Unknown API error."


def api_error_message(code: int) -> str:
    return API_ERRORS.get(code, UNKNOWN_API_ERROR)
