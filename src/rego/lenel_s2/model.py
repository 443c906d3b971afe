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

import types
import typing
import xml.etree.ElementTree as ET
from typing import Any, Optional, Self

import pydantic
from pydantic.fields import FieldInfo


def xml_list(path: str, **kwargs: Any) -> Any:
    """
    Declare a list field that is populated from all elements matching the given path, e.g. "PEOPLE/PERSON".

    The first element of the path is used as alias, so the field can be populated from a dict as well.
    """
    return pydantic.Field(default_factory=list, alias=path.split("/")[0], json_schema_extra={"xml_path": path}, **kwargs)


def _xml_path(name: str, field: FieldInfo) -> str:
    extra = field.json_schema_extra
    if isinstance(extra, dict) and "xml_path" in extra:
        return str(extra["xml_path"])
    return field.alias or name


def _is_model(tp: object) -> bool:
    return isinstance(tp, type) and issubclass(tp, XmlModel)


def _unwrap_optional(tp: object) -> object:
    if typing.get_origin(tp) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


class XmlModel(pydantic.BaseModel):
    """
    Base class for the payloads of the NetBox API.

    Every field is aliased to the name of the XML element it is read from. Unknown elements are ignored, missing
    elements get the default value of the field.
    """

    model_config = pydantic.ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_xml(cls, element: ET.Element) -> Self:
        """
        Build an instance from the given element. Raises a pydantic ValidationError when the content of the
        element does not match the fields of this model.
        """
        return cls.model_validate(cls._element_to_dict(element))

    @classmethod
    def _element_to_dict(cls, element: ET.Element) -> dict[str, object]:
        values: dict[str, object] = {}
        for name, field in cls.model_fields.items():
            path = _xml_path(name, field)
            annotation = _unwrap_optional(field.annotation)

            if typing.get_origin(annotation) is list:
                (item_type,) = typing.get_args(annotation)
                values[name] = [_convert(child, item_type) for child in element.findall(path)]
                continue

            child: Optional[ET.Element] = element.find(path)
            if child is None:
                continue
            value = _convert(child, annotation)
            if value is not None:
                values[name] = value
        return values

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes) -> Self:
        return cls.model_validate_json(data)


def _convert(element: ET.Element, tp: object) -> object:
    """
    Convert an element into a value that pydantic can validate as the given type.

    Empty elements are left out for non string types, so the field keeps its default.
    """
    if _is_model(tp):
        return tp._element_to_dict(element)  # type: ignore[union-attr]
    text = element.text or ""
    if tp is str:
        return text
    if not text.strip():
        return None
    return text.strip()
