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

import asyncio
import logging
import socket
from collections import abc
from typing import Optional

import pytest
from tornado import netutil, web
from tornado.httpserver import HTTPServer
from tornado.iostream import StreamClosedError

import utils
from rego import config
from rego.lenel_s2 import const

logger = logging.getLogger(__name__)


class NetBoxStub:
    """
    A stand-in for the XML API of a NetBox appliance. Every command gets the next queued response. A Login gets the next
    queued login response, or a new session when none is queued.
    """

    def __init__(self, port: int) -> None:
        self.port = port
        self.url = f"http://127.0.0.1:{port}"
        self.requests: list[bytes] = []
        self.connection_headers: list[Optional[str]] = []
        self.responses: list[tuple[int, bytes]] = []
        self.login_responses: list[tuple[int, bytes]] = []
        self.stream = utils.StreamScript()
        self.stream_aborted = asyncio.Event()

    def queue(self, body: bytes, status: int = 200) -> None:
        self.responses.append((status, body))

    def queue_login(self, body: bytes, status: int = 200) -> None:
        self.login_responses.append((status, body))

    def commands(self) -> list[bytes]:
        return [request for request in self.requests if b'name="Login"' not in request]


class NetBoxHandler(web.RequestHandler):
    def initialize(self, stub: NetBoxStub) -> None:
        self.stub = stub

    async def post(self) -> None:
        body = self.request.body
        self.stub.requests.append(body)
        self.stub.connection_headers.append(self.request.headers.get("Connection"))
        if b'name="StreamEvents"' in body:
            await self.stream_events()
            return

        if b'name="Login"' in body:
            if self.stub.login_responses:
                status, payload = self.stub.login_responses.pop(0)
            else:
                status, payload = 200, utils.response("Login", session_id=utils.SESSION_ID)
        elif self.stub.responses:
            status, payload = self.stub.responses.pop(0)
        else:
            status, payload = 200, utils.response("Unknown")
        self.set_status(status)
        self.set_header("Content-Type", "text/xml")
        self.finish(payload)

    async def stream_events(self) -> None:
        script = self.stub.stream
        if script.status >= 400:
            self.set_status(script.status)
            self.finish(b"<html><body>Internal error</body></html>")
            return

        self.set_header("Content-Type", f"multipart/mixed; boundary={utils.BOUNDARY}")
        try:
            for fragment in script.fragments:
                self.write(utils.multipart_part(fragment))
                await self.flush()
                await asyncio.sleep(script.interval)
            if script.idle:
                try:
                    await asyncio.wait_for(self.stub.stream_aborted.wait(), script.idle)
                except asyncio.TimeoutError:
                    pass
            # Bound the time a stream stays open, so a test can never hang on it
            for _ in range(int(10 / script.interval) if script.keep_open else 0):
                self.write(utils.multipart_part(utils.HEARTBEAT))
                await self.flush()
                await asyncio.sleep(script.interval)
            if script.closing_delimiter:
                self.write(utils.multipart_end())
            await self.flush()
        except StreamClosedError:
            self.stub.stream_aborted.set()

    def on_connection_close(self) -> None:
        self.stub.stream_aborted.set()


@pytest.fixture
def free_socket():
    bound_sockets = []

    def _get_free_socket():
        sock = netutil.bind_sockets(0, "127.0.0.1", family=socket.AF_INET)[0]
        bound_sockets.append(sock)
        return sock

    yield _get_free_socket
    for s in bound_sockets:
        s.close()


@pytest.fixture(scope="function", autouse=True)
def rego_config(clean_reset):
    config.Config.load_config(main_cfg_file="/dev/null")
    yield config.Config


@pytest.fixture(scope="function")
def clean_reset():
    config.Config._reset()
    yield
    config.Config._reset()


@pytest.fixture
async def netbox(free_socket) -> abc.AsyncIterator[NetBoxStub]:
    sock = free_socket()
    stub = NetBoxStub(sock.getsockname()[1])
    app = web.Application([(const.NETBOX_API, NetBoxHandler, {"stub": stub})])
    server = HTTPServer(app)
    server.add_sockets([sock])
    logger.debug("NetBox stand-in listening on %s", stub.url)

    config.s2_url.set(stub.url)
    config.s2_username.set(utils.USERNAME)
    config.s2_password.set(utils.PASSWORD)
    yield stub

    server.stop()
    await server.close_all_connections()
    # Let the handlers of aborted streams run to completion
    await asyncio.sleep(0.1)


@pytest.fixture
def passphrase() -> str:
    return "Th1s-is/a_Sufficiently#Long{Passphrase}"

