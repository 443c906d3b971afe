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

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from typing import Optional

from rego.lenel_s2 import const
from rego.lenel_s2.catalog import EventCategory, EventTag, EventTypes

LOGGER = logging.getLogger(__name__)

# Tags requested when no tag was selected
DEFAULT_TAGS = (EventTag.DESC_NAME, EventTag.CDT, EventTag.PERSON_NAME, EventTag.PORTAL_NAME)


class StreamEventsParams:
    """
    The parameters of a StreamEvents command: the tags every event should carry and, for some tags, the values an
    event should have to be sent.

    :param tags: The tags to request. The default tags are requested when this is empty.
    :param filters: The filter values per tag.
    """

    def __init__(self, tags: Sequence[EventTag] = (), filters: Optional[Mapping[EventTag, Sequence[str]]] = None) -> None:
        self.tags: frozenset[EventTag] = frozenset(tags) if tags else frozenset(DEFAULT_TAGS)
        self.filters: dict[EventTag, tuple[str, ...]] = {
            tag: tuple(values) for tag, values in (filters or {}).items() if values
        }

    @property
    def tag_names(self) -> list[str]:
        return sorted(tag.xml_name for tag in self.tags)

    def to_element(self) -> ET.Element:
        params = ET.Element(const.PARAMS)
        tag_names = ET.SubElement(params, "TAGNAMES")
        by_name = {tag.xml_name: tag for tag in self.tags}
        for name in sorted(by_name):
            element = ET.SubElement(tag_names, name)
            values = self.filters.get(by_name[name])
            if values:
                filters = ET.SubElement(element, "FILTERS")
                for value in values:
                    ET.SubElement(filters, "FILTER").text = value
        return params


class StreamEventsBuilder:
    """
    Builder for the parameters of an event stream.

    Every method returns the builder itself, so calls can be chained::

        params = StreamEventsBuilder().with_category(EventCategory.ACCESS).filter_by_portal_name("Main entrance").build()
    """

    def __init__(self) -> None:
        self._tags: dict[str, EventTag] = {}
        self._filters: dict[EventTag, list[str]] = {}

    def with_field(self, tag: EventTag) -> "StreamEventsBuilder":
        self._tags[tag.xml_name] = tag
        return self

    def with_fields(self, *tags: EventTag) -> "StreamEventsBuilder":
        for tag in tags:
            self.with_field(tag)
        return self

    def with_filter(self, tag: EventTag, *values: str) -> "StreamEventsBuilder":
        """
        Only receive events for which the tag has one of the given values. The tag is requested as well.

        Filters on tags that do not support them are ignored.
        """
        if not tag.supports_filter:
            LOGGER.debug("Ignoring filter on %s, the tag does not support filters", tag.xml_name)
            return self
        self.with_field(tag)
        self._filters.setdefault(tag, []).extend(values)
        return self

    def with_event_type(self, event_type: EventTypes) -> "StreamEventsBuilder":
        """
        Request all tags of the given event type, and DESCNAME to identify the type of the received events.
        """
        self.with_fields(*event_type.required_fields)
        return self.with_field(EventTag.DESC_NAME)

    def with_event_types(self, *event_types: EventTypes) -> "StreamEventsBuilder":
        for event_type in event_types:
            self.with_event_type(event_type)
        return self

    def with_category(self, category: EventCategory) -> "StreamEventsBuilder":
        """
        Request all tags of all event types of the given category.
        """
        self.with_field(EventTag.DESC_NAME)
        for event_type in EventTypes.in_category(category):
            self.with_fields(*event_type.required_fields)
        return self

    def filter_by_person_name(self, *names: str) -> "StreamEventsBuilder":
        return self.with_filter(EventTag.PERSON_NAME, *names)

    def filter_by_portal_name(self, *portals: str) -> "StreamEventsBuilder":
        return self.with_filter(EventTag.PORTAL_NAME, *portals)

    def filter_by_node_name(self, *nodes: str) -> "StreamEventsBuilder":
        return self.with_filter(EventTag.NODE_NAME, *nodes)

    def filter_by_event_name(self, *events: str) -> "StreamEventsBuilder":
        return self.with_filter(EventTag.EVENT_NAME, *events)

    def filter_by_desc_name(self, *descriptions: str) -> "StreamEventsBuilder":
        """
        Filter on the description of the event, e.g. to only receive events of some event types.
        """
        return self.with_filter(EventTag.DESC_NAME, *descriptions)

    def build(self) -> StreamEventsParams:
        return StreamEventsParams(list(self._tags.values()), self._filters)
