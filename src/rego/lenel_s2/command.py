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
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Optional, Protocol, Union

from rego import const as rego_const
from rego.lenel_s2 import const
from rego.types import ParamValue


class ParamsElement(Protocol):
    """
    Parameters that serialize themselves, e.g. the tag names of an event stream
    """

    def to_element(self) -> ET.Element:
        """
        Return the PARAMS element
        """


Params = Union[Mapping[str, ParamValue], ParamsElement, None]


@dataclasses.dataclass(frozen=True)
class Command:
    """
    A single command sent to the appliance.

    :param name: The name of the command, e.g. GetPerson.
    :param params: The parameters of the command. A mapping is serialized in order, one element per key. Keys with a
        None value are left out.
    :param session_id: The id of the current session, empty for Login.
    """

    name: str
    params: Params = None
    session_id: str = ""
    num: str = const.COMMAND_NUM
    dateformat: str = const.DATE_FORMAT

    def with_params(self, **params: ParamValue) -> "Command":
        """
        Return a copy of this command with the given parameters set. Existing parameters keep their position.
        """
        if self.params is not None and not isinstance(self.params, Mapping):
            raise ValueError(f"Parameters of command {self.name} can not be updated")
        merged: dict[str, ParamValue] = dict(self.params or {})
        merged.update(params)
        return dataclasses.replace(self, params=merged)

    def with_session(self, session_id: str) -> "Command":
        return dataclasses.replace(self, session_id=session_id)

    def to_element(self) -> ET.Element:
        root = ET.Element(const.ROOT_REQUEST)
        if self.session_id:
            root.set(const.SESSION_ID, self.session_id)
        command = ET.SubElement(root, const.COMMAND)
        command.set("name", self.name)
        command.set("num", self.num)
        if self.dateformat:
            command.set("dateformat", self.dateformat)

        if isinstance(self.params, Mapping):
            if self.params:
                params = ET.SubElement(command, const.PARAMS)
                for key, value in self.params.items():
                    if value is None:
                        continue
                    ET.SubElement(params, key).text = str(value)
        elif self.params is not None:
            command.append(self.params.to_element())
        return root

    def to_xml(self) -> bytes:
        """
        Serialize this command to the wire format, without xml declaration.
        """
        return ET.tostring(self.to_element(), encoding="unicode", short_empty_elements=False).encode(
            rego_const.UTF8_ENCODING
        )


def build_command(name: str, params: Params = None, session_id: Optional[str] = None) -> Command:
    return Command(name=name, params=params, session_id=session_id or "")
