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

import datetime
import inspect
import logging
from typing import Optional, Self, TypeVar, Union

import pydantic

from rego import config, const as rego_const
from rego.cache import ResponseCache
from rego.lenel_s2 import const
from rego.lenel_s2.command import Command, Params, build_command
from rego.lenel_s2.commands import NetboxCommands
from rego.lenel_s2.dispatcher import Dispatcher
from rego.lenel_s2.entities import UDF, AccessCard, AccessHistory, CardFormats, Event, People, Person, UDFLists
from rego.lenel_s2.model import XmlModel
from rego.lenel_s2.stream import StreamEventsParams
from rego.protocol.exceptions import RegoException, StreamCancelled, StreamDeadlineExceeded
from rego.protocol.transport import HTTPTransport
from rego.types import ErrorCallback, EventSink, HeartbeatCallback, SiemForwarder
from rego.util import CancelContext, format_timestamp

LOGGER = logging.getLogger(__name__)

M = TypeVar("M", bound=XmlModel)


def normalize_url(url: str, ssl: bool = False) -> str:
    """
    Turn the configured address of the appliance into a base url. The scheme is determined by the ssl setting.
    """
    url = url.strip()
    for scheme in ("https://", "http://"):
        if url.startswith(scheme):
            url = url[len(scheme) :]
    url = url.rstrip("/")
    return f"{'https' if ssl else 'http'}://{url}"


class Client:
    """
    Client for the XML API of a Lenel S2 NetBox appliance.

    Settings that are not passed explicitly are read from the lenel_s2 and cache sections of the config. Use the
    client as an async context manager to log in and out::

        async with Client() as client:
            people = await client.list_all_users()

    :param base_url: Address of the appliance.
    :param username: The user to log in with.
    :param password: The password to log in with.
    :param transport: The transport to send commands over.
    :param cache: Cache for the responses of read commands. Created from the config when the cache is configured.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[HTTPTransport] = None,
        cache: Optional[ResponseCache] = None,
    ) -> None:
        url = base_url or config.s2_url.get()
        if not url:
            raise RegoException(f"No address configured for the NetBox appliance, set {config.LENEL_S2_SECTION}.url")
        self.base_url = normalize_url(url, config.s2_ssl.get())
        self.username = username
        self.password = password

        self.transport = transport or HTTPTransport(
            connect_timeout=config.s2_connect_timeout.get(),
            validate_cert=config.s2_validate_cert.get(),
            ca_certs=config.s2_ssl_ca_cert_file.get(),
            max_body_size=config.s2_stream_max_body_size.get(),
        )
        self.dispatcher = Dispatcher(self.transport, config.s2_request_timeout.get(), config.s2_max_pages.get())

        self.cache = cache if cache is not None else self._cache_from_config()
        self._cache_always = config.cache_enabled.get()
        self._cache_next = False

        self.session_id = ""

    @staticmethod
    def _cache_from_config() -> Optional[ResponseCache]:
        key = config.cache_encryption_key.get()
        if key is None:
            if config.cache_enabled.get():
                LOGGER.warning("Caching is enabled but no encryption key is configured, responses are not cached")
            return None
        return ResponseCache(
            key, config.cache_path.get(), config.cache_max_items.get(), config.cache_flush_interval.get()
        )

    async def __aenter__(self) -> Self:
        await self.login()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        try:
            await self.logout()
        finally:
            if self.cache is not None:
                self.cache.flush()

    def build_url(self, endpoint: str = const.NETBOX_API, *identifiers: str) -> str:
        url = f"{self.base_url}{endpoint}"
        for identifier in identifiers:
            url = f"{url}/{identifier}"
        return url

    def build_request(self, name: str, params: Params = None) -> Command:
        """
        Build a command that runs in the current session.
        """
        return build_command(name, params, self.session_id)

    def use_cache(self) -> Self:
        """
        Serve the next call from the cache, when the response is cached. The response is cached when it is not.
        """
        if self.cache is None:
            LOGGER.warning("No cache is configured, the response of the next call is not cached")
        self._cache_next = True
        return self

    def _caching(self) -> bool:
        use_cache = self.cache is not None and (self._cache_always or self._cache_next)
        self._cache_next = False
        return use_cache

    def _get_cached(self, key: str, model: type[M]) -> Optional[M]:
        assert self.cache is not None
        data = self.cache.get(key)
        if data is None:
            return None
        try:
            result = model.from_json(data)
        except pydantic.ValidationError:
            LOGGER.warning("Ignoring cache entry %s, it does not contain a valid %s", key, model.__name__)
            return None
        LOGGER.debug("Serving %s from the cache", key)
        return result

    def _set_cached(self, key: str, value: XmlModel) -> None:
        assert self.cache is not None
        self.cache.set(key, value.to_json(), config.cache_ttl.get())

    async def login(self) -> str:
        """
        Create a new session with the configured credentials and return the session id.

        :raises RegoException: No credentials are configured.
        """
        username = self.username or config.s2_username.get()
        password = self.password or config.s2_password.get()
        if not username or not password:
            raise RegoException(
                f"{config.LENEL_S2_SECTION}.username or {config.LENEL_S2_SECTION}.password is not set",
                NetboxCommands.Utility.LOGIN,
            )

        command = build_command(NetboxCommands.Utility.LOGIN, {"USERNAME": username, "PASSWORD": password})
        envelope = await self.dispatcher.exchange(rego_const.HTTP_POST, self.build_url(), command)
        if not envelope.session_id:
            raise RegoException("The appliance did not return a session id", command.name)
        self.session_id = envelope.session_id
        LOGGER.info("Logged in to %s as %s", self.base_url, username)
        return self.session_id

    async def logout(self) -> None:
        """
        End the current session. Does nothing when there is no session.
        """
        if not self.session_id:
            return
        command = self.build_request(NetboxCommands.Utility.LOGOUT)
        await self.dispatcher.do(rego_const.HTTP_POST, self.build_url(), command)
        self.session_id = ""
        LOGGER.info("Logged out of %s", self.base_url)

    async def list_all_users(self) -> list[Person]:
        url = self.build_url()
        command = self.build_request(NetboxCommands.People.SEARCH_PERSON_DATA, {"STARTFROMKEY": 0})
        cache_key = f"{url}_{command.name}"

        caching = self._caching()
        if caching and (cached := self._get_cached(cache_key, People)) is not None:
            return cached.people

        people = await self.dispatcher.do_paginated(rego_const.HTTP_POST, url, command, People)
        if caching:
            self._set_cached(cache_key, people)
        return people.people

    async def get_person(self, person_id: str) -> Optional[Person]:
        """
        Get a single person record, None when the appliance returns no record.
        """
        url = self.build_url()
        command = self.build_request(NetboxCommands.People.GET_PERSON, {"PERSONID": person_id})
        cache_key = f"{url}_{command.name}_{person_id}"

        caching = self._caching()
        if caching and (cached := self._get_cached(cache_key, Person)) is not None:
            return cached

        person = await self.dispatcher.do(rego_const.HTTP_POST, url, command, Person)
        if caching and person is not None:
            self._set_cached(cache_key, person)
        return person

    async def list_all_udfs(self) -> list[UDF]:
        url = self.build_url()
        command = self.build_request(NetboxCommands.Configuration.GET_UDF_LISTS)
        cache_key = f"{url}_{command.name}"

        caching = self._caching()
        if caching and (cached := self._get_cached(cache_key, UDFLists)) is not None:
            return cached.user_defined_fields

        udf_lists = await self.dispatcher.do(rego_const.HTTP_POST, url, command, UDFLists) or UDFLists()
        if caching:
            self._set_cached(cache_key, udf_lists)
        return udf_lists.user_defined_fields

    async def get_card_formats(self) -> list[str]:
        url = self.build_url()
        command = self.build_request(NetboxCommands.Configuration.GET_CARD_FORMATS)
        cache_key = f"{url}_{command.name}"

        caching = self._caching()
        if caching and (cached := self._get_cached(cache_key, CardFormats)) is not None:
            return cached.formats

        formats = await self.dispatcher.do(rego_const.HTTP_POST, url, command, CardFormats) or CardFormats()
        if caching:
            self._set_cached(cache_key, formats)
        return formats.formats

    async def _history(self, command: Command, cache_key: str) -> AccessHistory:
        caching = self._caching()
        if caching and (cached := self._get_cached(cache_key, AccessHistory)) is not None:
            return cached

        history = await self.dispatcher.do_paginated(rego_const.HTTP_POST, self.build_url(), command, AccessHistory)
        if caching:
            self._set_cached(cache_key, history)
        return history

    async def get_access_history(self, log_id: int = 0) -> AccessHistory:
        """
        Get the access log entries after the given log id, all pages merged.
        """
        command = self.build_request(
            NetboxCommands.History.GET_ACCESS_HISTORY, {"AFTERLOGID": log_id, "MAXRECORDS": const.MAX_RECORDS}
        )
        return await self._history(command, f"{self.build_url()}_{command.name}_{log_id}")

    async def get_card_access_details(self, card: AccessCard) -> AccessHistory:
        command = self.build_request(
            NetboxCommands.History.GET_CARD_ACCESS_DETAILS, {"ENCODEDNUM": card.encoded_num, "CARDFORMAT": card.format}
        )
        return await self._history(command, f"{self.build_url()}_{command.name}_{card.encoded_num}_{card.format}")

    async def get_event_history(self, start: Union[datetime.datetime, str]) -> AccessHistory:
        """
        Get the event log starting at the given time. A string is passed to the appliance as is, in the
        YYYY-MM-DD HH:MM:SS format.
        """
        start_dttm = format_timestamp(start) if isinstance(start, datetime.datetime) else start
        command = self.build_request(NetboxCommands.History.GET_EVENT_HISTORY, {"STARTDTTM": start_dttm})
        return await self._history(command, f"{self.build_url()}_{command.name}_{start_dttm}")

    async def stream_events(
        self,
        params: Optional[StreamEventsParams] = None,
        *,
        sink: Optional[EventSink] = None,
        heartbeat: Optional[HeartbeatCallback] = None,
        context: Optional[CancelContext] = None,
        siem_forwarder: Optional[SiemForwarder] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> list[Event]:
        """
        Stream events until the appliance closes the stream, the context is done or the sink returns False.

        :param params: The tags and filters of the stream, the default tags when None.
        :param sink: Called for every event, see Dispatcher.do_stream.
        :param siem_forwarder: Coroutine function every event is forwarded to. A failure to forward an event is logged,
            the stream continues.
        :return: All events received.
        :raises StreamCancelled: The context was cancelled. The exception holds the events received until then.
        """
        url = self.build_url()
        command = self.build_request(NetboxCommands.Events.STREAM_EVENTS, params or StreamEventsParams())
        LOGGER.info("Starting %s on %s", command.name, url)

        async def process(event: Event) -> Optional[bool]:
            LOGGER.info("Event received: %s at %s", event.desc_name, event.cdt)
            LOGGER.debug("Event details: %s", event)
            if siem_forwarder is not None:
                try:
                    await siem_forwarder(event)
                except Exception:
                    LOGGER.exception("Failed to forward event %s to the SIEM", event.event_id or event.desc_name)
            if sink is None:
                return True
            result = sink(event)
            if inspect.isawaitable(result):
                result = await result
            return result

        try:
            return await self.dispatcher.do_stream(
                rego_const.HTTP_POST, url, command, process, heartbeat=heartbeat, context=context, on_error=on_error
            )
        except (StreamCancelled, StreamDeadlineExceeded) as e:
            LOGGER.info("%s ended by its context, returning %d collected event(s)", command.name, len(e.events))
            raise
