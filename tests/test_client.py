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
import logging

import pytest

import utils
from rego import config
from rego.cache import ResponseCache
from rego.lenel_s2.catalog import EventTag
from rego.lenel_s2.client import Client, normalize_url
from rego.lenel_s2.entities import AccessCard, Event
from rego.lenel_s2.stream import StreamEventsBuilder
from rego.protocol.exceptions import ApiError, RegoException, StreamCancelled
from rego.util import CancelContext
from utils import PASSWORD, SESSION_ID, USERNAME, StreamScript, log_contains

PEOPLE_PAGE = (
    "<DETAILS><PEOPLE><PERSON><PERSONID>_1</PERSONID><FIRSTNAME>Anthony</FIRSTNAME></PERSON>"
    "<PERSON><PERSONID>_2</PERSONID><FIRSTNAME>Satoshi</FIRSTNAME></PERSON></PEOPLE><NEXTKEY>2</NEXTKEY></DETAILS>"
)
LAST_PEOPLE_PAGE = (
    "<DETAILS><PEOPLE><PERSON><PERSONID>_3</PERSONID><FIRSTNAME>Hal</FIRSTNAME></PERSON></PEOPLE>"
    "<NEXTKEY>-1</NEXTKEY></DETAILS>"
)
UDF_LISTS = (
    "<DETAILS><UDFLISTS><UDFLIST><UDFLISTKEY>1</UDFLISTKEY><NAME>Department</NAME>"
    "<DESCRIPTION>Department of the person</DESCRIPTION></UDFLIST></UDFLISTS></DETAILS>"
)


@pytest.mark.parametrize(
    "url, ssl, expected",
    [
        ("netbox.example.com", False, "http://netbox.example.com"),
        ("netbox.example.com/", True, "https://netbox.example.com"),
        ("http://10.0.0.1:8080", True, "https://10.0.0.1:8080"),
        (" https://netbox.example.com ", False, "http://netbox.example.com"),
    ],
)
def test_normalize_url(url, ssl, expected):
    assert normalize_url(url, ssl) == expected


def test_client_without_url():
    with pytest.raises(RegoException, match="No address configured"):
        Client()


def test_client_from_config():
    config.s2_url.set("netbox.example.com")
    config.s2_ssl.set("true")
    config.s2_request_timeout.set("3")
    config.s2_max_pages.set("7")
    client = Client()
    assert client.base_url == "https://netbox.example.com"
    assert client.build_url() == "https://netbox.example.com/nbws/goforms/nbapi"
    assert client.build_url("/nbws/goforms/nbapi", "a", "b") == "https://netbox.example.com/nbws/goforms/nbapi/a/b"
    assert client.dispatcher.request_timeout == 3
    assert client.dispatcher.max_pages == 7
    assert client.cache is None


async def test_login_logout(netbox):
    async with Client() as client:
        assert client.session_id == SESSION_ID
        command = client.build_request("GetPerson", {"PERSONID": "_1"})
        assert command.session_id == SESSION_ID

    assert client.session_id == ""
    login, logout = netbox.requests
    assert f"<USERNAME>{USERNAME}</USERNAME><PASSWORD>{PASSWORD}</PASSWORD>".encode() in login
    assert b"sessionid" not in login
    assert f'sessionid="{SESSION_ID}"'.encode() in logout
    assert b'name="Logout"' in logout

    # Logging out without a session does nothing
    await client.logout()
    assert len(netbox.requests) == 2


async def test_login_explicit_credentials(netbox):
    client = Client(username="operator", password="hunter2")
    await client.login()
    assert b"<USERNAME>operator</USERNAME><PASSWORD>hunter2</PASSWORD>" in netbox.requests[0]


async def test_login_without_credentials(netbox):
    config.s2_password.set("")
    with pytest.raises(RegoException, match="password is not set"):
        await Client().login()
    assert netbox.requests == []


async def test_login_without_session(netbox):
    netbox.queue_login(utils.response("Login"))
    with pytest.raises(RegoException, match="did not return a session id"):
        await Client().login()


async def test_login_refused(netbox):
    netbox.queue_login(utils.api_error(5))
    with pytest.raises(ApiError) as e:
        await Client().login()
    assert e.value.code == 5
    assert e.value.command == "Login"


async def test_list_all_users(netbox):
    netbox.queue(utils.response("SearchPersonData", PEOPLE_PAGE))
    netbox.queue(utils.response("SearchPersonData", LAST_PEOPLE_PAGE))

    async with Client() as client:
        people = await client.list_all_users()

    assert [person.first_name for person in people] == ["Anthony", "Satoshi", "Hal"]
    first, second, _logout = netbox.commands()
    assert b"<STARTFROMKEY>0</STARTFROMKEY>" in first
    assert b"<STARTFROMKEY>2</STARTFROMKEY>" in second
    assert f'sessionid="{SESSION_ID}"'.encode() in second


async def test_get_person(netbox):
    netbox.queue(utils.response("GetPerson", "<DETAILS><PERSONID>_1</PERSONID><LASTNAME>Dardano</LASTNAME></DETAILS>"))
    netbox.queue(utils.response("GetPerson"))

    async with Client() as client:
        person = await client.get_person("_1")
        assert person.last_name == "Dardano"
        assert await client.get_person("_2") is None

    assert b"<PERSONID>_1</PERSONID>" in netbox.commands()[0]


async def test_list_all_udfs(netbox):
    netbox.queue(utils.response("GetUDFLists", UDF_LISTS))
    async with Client() as client:
        (udf,) = await client.list_all_udfs()
    assert udf.key == "1"
    assert udf.name == "Department"
    assert udf.description == "Department of the person"


async def test_get_card_formats(netbox):
    details = "<DETAILS><CARDFORMATS><CARDFORMAT>26 bit Wiegand</CARDFORMAT><CARDFORMAT>HID Corporate 1000</CARDFORMAT>"
    netbox.queue(utils.response("GetCardFormats", details + "</CARDFORMATS></DETAILS>"))
    netbox.queue(utils.response("GetCardFormats"))
    async with Client() as client:
        assert await client.get_card_formats() == ["26 bit Wiegand", "HID Corporate 1000"]
        assert await client.get_card_formats() == []


async def test_history(netbox):
    accesses = (
        "<DETAILS><ACCESSES><ACCESS><LOGID>10</LOGID><PERSONID>_1</PERSONID><READER>Lobby</READER>"
        "<TYPE>1</TYPE></ACCESS></ACCESSES><NEXTLOGID>-1</NEXTLOGID></DETAILS>"
    )
    for command in ("GetAccessHistory", "GetCardAccessDetails", "GetEventHistory"):
        netbox.queue(utils.response(command, accesses))

    async with Client() as client:
        history = await client.get_access_history(9)
        assert [access.reader for access in history.accesses] == ["Lobby"]

        card = AccessCard(encoded_num="753", format="26 bit")
        history = await client.get_card_access_details(card)
        assert history.accesses[0].log_id == "10"

        start = datetime.datetime(2025, 8, 7, 13, 0, tzinfo=datetime.timezone.utc)
        history = await client.get_event_history(start)
        assert history.accesses[0].type == 1

    access_history, card_details, event_history, _logout = netbox.commands()
    assert b"<AFTERLOGID>9</AFTERLOGID><MAXRECORDS>1000</MAXRECORDS>" in access_history
    assert b"<ENCODEDNUM>753</ENCODEDNUM><CARDFORMAT>26 bit</CARDFORMAT>" in card_details
    assert b"<STARTDTTM>2025-08-07 13:00:00+0000</STARTDTTM>" in event_history


async def test_use_cache(netbox, passphrase):
    netbox.queue(utils.response("GetUDFLists", UDF_LISTS))
    netbox.queue(utils.response("GetUDFLists"))

    async with Client(cache=ResponseCache(passphrase)) as client:
        first = await client.use_cache().list_all_udfs()
        cached = await client.use_cache().list_all_udfs()
        assert cached == first
        assert len(netbox.commands()) == 1

        # Without use_cache the appliance is asked again
        assert await client.list_all_udfs() == []
        assert len(netbox.commands()) == 2


async def test_cache_enabled_in_config(netbox, passphrase):
    config.cache_enabled.set("true")
    config.cache_encryption_key.set(passphrase)
    netbox.queue(utils.response("SearchPersonData", LAST_PEOPLE_PAGE))

    async with Client() as client:
        assert client.cache is not None
        first = await client.list_all_users()
        second = await client.list_all_users()

    assert [person.person_id for person in first] == ["_3"]
    assert second == first
    assert len(netbox.commands()) == 2  # one search and the logout


async def test_cache_written_on_exit(netbox, passphrase, tmp_path):
    path = str(tmp_path / "cache.json")
    config.cache_enabled.set("true")
    config.cache_encryption_key.set(passphrase)
    config.cache_path.set(path)
    config.cache_flush_interval.set("3600")
    netbox.queue(utils.response("GetUDFLists", UDF_LISTS))
    card_formats = "<DETAILS><CARDFORMATS><CARDFORMAT>26 bit</CARDFORMAT></CARDFORMATS></DETAILS>"
    netbox.queue(utils.response("GetCardFormats", card_formats))

    async with Client() as client:
        await client.list_all_udfs()
        await client.get_card_formats()
        # Only the first response was written, the second one waits for the flush interval
        assert len(ResponseCache(passphrase, path)) == 1

    assert len(ResponseCache(passphrase, path)) == 2


def test_cache_enabled_without_key(caplog):
    config.s2_url.set("netbox.example.com")
    config.cache_enabled.set("true")
    client = Client()
    assert client.cache is None
    log_contains(caplog, "rego.lenel_s2.client", logging.WARNING, "no encryption key is configured")


async def test_stream_events(netbox, caplog):
    netbox.stream = StreamScript(utils.STREAM_FRAGMENTS)
    forwarded = []
    received = []

    async def forward(event: Event) -> None:
        if event.person_id == "SATOSHI_753":
            raise ConnectionError("SIEM unavailable")
        forwarded.append(event.person_id)

    params = StreamEventsBuilder().with_fields(EventTag.PERSON_ID, EventTag.DETAIL).build()
    with caplog.at_level(logging.INFO):
        async with Client() as client:
            events = await client.stream_events(params, sink=received.append, siem_forwarder=forward)

    assert [event.person_id for event in events] == ["REGO_357", "SATOSHI_753", "NAKAMOTO_573"]
    assert received == events
    assert forwarded == ["REGO_357", "NAKAMOTO_573"]
    assert b"<TAGNAMES><DETAIL></DETAIL><PERSONID></PERSONID></TAGNAMES>" in netbox.commands()[0]
    log_contains(caplog, "rego.lenel_s2.client", logging.INFO, "Event received: Access granted at 2025-08-07 13:57:35")
    log_contains(caplog, "rego.lenel_s2.client", logging.ERROR, "Failed to forward event")


async def test_stream_events_cancelled(netbox, caplog):
    netbox.stream = StreamScript([utils.ANTHONY_EVENT, utils.SATOSHI_EVENT], keep_open=True)
    context = CancelContext()

    def sink(event: Event) -> None:
        context.cancel()

    with caplog.at_level(logging.INFO):
        async with Client() as client:
            with pytest.raises(StreamCancelled) as e:
                await client.stream_events(sink=sink, context=context)

    assert [event.person_id for event in e.value.events] == ["REGO_357"]
    assert b"<TAGNAMES><CDT></CDT><DESCNAME></DESCNAME><PERSONNAME></PERSONNAME><PORTALNAME></PORTALNAME>" in (
        netbox.commands()[0]
    )
    log_contains(caplog, "rego.lenel_s2.client", logging.INFO, "returning 1 collected event(s)")
