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

import pytest
from tornado.httpclient import HTTPClientError

import utils
from rego import const as rego_const
from rego.lenel_s2 import const
from rego.lenel_s2.command import build_command
from rego.lenel_s2.commands import NetboxCommands
from rego.lenel_s2.dispatcher import Dispatcher
from rego.lenel_s2.entities import AccessHistory, People, Person
from rego.protocol.exceptions import ApiError, CommandFailure, DecodeError, PaginationError
from rego.protocol.transport import HTTPTransport
from utils import log_contains, log_doesnt_contain


def people_page(person_ids: list[str], next_key: str) -> bytes:
    people = "".join(f"<PERSON><PERSONID>{person_id}</PERSONID></PERSON>" for person_id in person_ids)
    details = f"<DETAILS><PEOPLE>{people}</PEOPLE><NEXTKEY>{next_key}</NEXTKEY></DETAILS>"
    return utils.response(NetboxCommands.People.SEARCH_PERSON_DATA, details)


def api_url(netbox) -> str:
    return netbox.url + const.NETBOX_API


@pytest.fixture
def dispatcher() -> Dispatcher:
    return Dispatcher(HTTPTransport())


def search_command():
    return build_command(NetboxCommands.People.SEARCH_PERSON_DATA, {"STARTFROMKEY": 0}, "1")


async def test_do(netbox, dispatcher):
    netbox.queue(utils.response("GetPerson", "<DETAILS><PERSONID>_1</PERSONID><LASTNAME>Dardano</LASTNAME></DETAILS>"))
    command = build_command(NetboxCommands.People.GET_PERSON, {"PERSONID": "_1"}, "1")

    person = await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), command, Person)
    assert person.person_id == "_1"
    assert person.last_name == "Dardano"
    assert netbox.requests == [command.to_xml()]


async def test_do_without_payload(netbox, dispatcher):
    command = build_command(NetboxCommands.Utility.LOGOUT, session_id="1")
    assert await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), command) is None


async def test_exchange_session(netbox, dispatcher):
    command = build_command(NetboxCommands.Utility.LOGIN, {"USERNAME": "admin", "PASSWORD": "secret"})
    envelope = await dispatcher.exchange(rego_const.HTTP_POST, api_url(netbox), command)
    assert envelope.session_id == "1785937530"


async def test_login_body_not_logged(netbox, dispatcher, caplog):
    with caplog.at_level(rego_const.LOG_LEVEL_TRACE):
        command = build_command(NetboxCommands.Utility.LOGIN, {"USERNAME": "admin", "PASSWORD": "secret"})
        await dispatcher.exchange(rego_const.HTTP_POST, api_url(netbox), command)
        await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), search_command())

    log_doesnt_contain(caplog, "rego.lenel_s2.dispatcher", rego_const.LOG_LEVEL_TRACE, "secret")
    log_contains(caplog, "rego.lenel_s2.dispatcher", rego_const.LOG_LEVEL_TRACE, "Request body: <NETBOX-API")
    log_contains(caplog, "rego.lenel_s2.dispatcher", logging.DEBUG, "Calling Login on")


async def test_do_failure(netbox, dispatcher):
    netbox.queue(utils.failure("GetPerson", "Person not found"))
    command = build_command(NetboxCommands.People.GET_PERSON, {"PERSONID": "_2"}, "1")
    with pytest.raises(CommandFailure) as e:
        await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), command, Person)
    assert str(e.value) == "GetPerson: Person not found"


async def test_do_api_error(netbox, dispatcher):
    netbox.queue(utils.api_error(5))
    with pytest.raises(ApiError) as e:
        await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert e.value.code == 5
    assert e.value.command == "SearchPersonData"


async def test_do_decode_error(netbox, dispatcher):
    netbox.queue(b"<html>Not the API</html>")
    with pytest.raises(DecodeError):
        await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), search_command(), People)


async def test_do_http_error(netbox, dispatcher):
    netbox.queue(b"Service unavailable", status=503)
    with pytest.raises(HTTPClientError) as e:
        await dispatcher.do(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert e.value.code == 503
    # Commands are never retried
    assert len(netbox.requests) == 1


async def test_paginated(netbox, dispatcher):
    netbox.queue(people_page(["_1", "_2"], "2"))
    netbox.queue(people_page(["_3", "_4"], "4"))
    netbox.queue(people_page(["_5"], "-1"))

    people = await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert [person.person_id for person in people.people] == ["_1", "_2", "_3", "_4", "_5"]
    assert people.next_token() is None
    assert len(netbox.requests) == 3
    for key, request in zip(["0", "2", "4"], netbox.requests):
        assert f"<STARTFROMKEY>{key}</STARTFROMKEY>".encode() in request


async def test_paginated_single_page(netbox, dispatcher):
    netbox.queue(people_page(["_1"], ""))
    people = await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert len(people.people) == 1
    assert len(netbox.requests) == 1


async def test_paginated_empty(netbox, dispatcher):
    netbox.queue(utils.response("SearchPersonData"))
    people = await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert people.people == []
    assert len(netbox.requests) == 1


async def test_paginated_access_history(netbox, dispatcher):
    for log_ids, next_log_id in ((["10", "11"], "11"), (["12"], "")):
        accesses = "".join(
            f"<ACCESS><LOGID>{log_id}</LOGID><PERSONID>_1</PERSONID><TYPE>1</TYPE><REASON></REASON></ACCESS>"
            for log_id in log_ids
        )
        details = f"<DETAILS><ACCESSES>{accesses}</ACCESSES><NEXTLOGID>{next_log_id}</NEXTLOGID></DETAILS>"
        netbox.queue(utils.response("GetAccessHistory", details))
    command = build_command(NetboxCommands.History.GET_ACCESS_HISTORY, {"AFTERLOGID": 0, "MAXRECORDS": 2}, "1")
    history = await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), command, AccessHistory)
    assert [access.log_id for access in history.accesses] == ["10", "11", "12"]
    assert history.accesses[0].type == 1
    assert history.accesses[0].reason == 0
    assert b"<AFTERLOGID>11</AFTERLOGID><MAXRECORDS>2</MAXRECORDS>" in netbox.requests[1]
    assert len(netbox.requests) == 2


async def test_paginated_max_pages(netbox):
    dispatcher = Dispatcher(HTTPTransport(), max_pages=2)
    for i in range(3):
        netbox.queue(people_page([f"_{i}"], str(i + 1)))
    with pytest.raises(PaginationError) as e:
        await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert "maximum of 2 pages" in str(e.value)
    assert len(netbox.requests) == 2


async def test_paginated_invalid_token(netbox, dispatcher):
    netbox.queue(people_page(["_1"], "not-a-key"))
    with pytest.raises(PaginationError) as e:
        await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert e.value.command == "SearchPersonData"


async def test_paginated_error_on_later_page(netbox, dispatcher):
    netbox.queue(people_page(["_1"], "1"))
    netbox.queue(utils.failure("SearchPersonData", "Session expired"))
    with pytest.raises(CommandFailure, match="Session expired"):
        await dispatcher.do_paginated(rego_const.HTTP_POST, api_url(netbox), search_command(), People)
    assert len(netbox.requests) == 2
