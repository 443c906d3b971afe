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
from typing import Optional

LOGGER = logging.getLogger(__name__)

DOCUMENT_END = b"</NETBOX>"


def parse_boundary(content_type: Optional[str]) -> Optional[str]:
    """
    Get the boundary parameter from a multipart content type header. Returns None when the header carries no
    boundary.
    """
    if not content_type:
        return None
    _media_type, *params = content_type.split(";")
    for param in params:
        name, sep, value = param.strip().partition("=")
        if sep and name.strip().lower() == "boundary":
            return value.strip().strip('"') or None
    return None


class MultipartReader:
    """
    Incremental splitter for a multipart/mixed body that arrives in chunks of arbitrary size.

    Feed it the chunks as they arrive, it returns the body of every part that is complete. The headers of the
    parts are dropped.

    When no boundary is known up front, the first line of the body is used as delimiter if it looks like one.
    When the body does not start with a delimiter at all, it is considered to be a sequence of bare XML documents,
    split on the closing tag of the root element.

    :param boundary: The boundary as found in the Content-Type header, without the leading dashes.
    """

    def __init__(self, boundary: Optional[str] = None) -> None:
        self._buffer = bytearray()
        self._delimiter: Optional[bytes] = None
        self._bare = False
        self._started = False
        self._done = False
        if boundary:
            self.set_boundary(boundary)

    def set_boundary(self, boundary: str) -> None:
        if self._started or self._bare:
            LOGGER.debug("Ignoring boundary %s, the body is already being split", boundary)
            return
        self._delimiter = b"--" + boundary.encode("ascii")

    @property
    def done(self) -> bool:
        """
        True when the closing delimiter was seen. Everything after it is ignored.
        """
        return self._done

    def feed(self, chunk: bytes) -> list[bytes]:
        if self._done:
            return []
        self._buffer.extend(chunk)
        return self._split()

    def close(self) -> list[bytes]:
        """
        Signal the end of the body. Returns the trailing part, if the body ended without closing delimiter.
        """
        if self._done:
            return []
        self._done = True
        rest = bytes(self._buffer)
        self._buffer.clear()
        if self._bare or self._started:
            body = self._strip_headers(rest)
            return [body] if body else []
        if rest.strip().startswith(b"<"):
            return [rest.strip()]
        return []

    def _split(self) -> list[bytes]:
        if self._delimiter is None and not self._bare:
            if not self._detect():
                return []
        if self._bare:
            return self._split_documents()
        return self._split_parts()

    def _detect(self) -> bool:
        """
        Determine the way the body is split, from the first bytes of the body.
        """
        stripped = self._buffer.lstrip()
        if not stripped:
            return False
        if stripped.startswith(b"<"):
            self._bare = True
            return True
        if not stripped.startswith(b"--"):
            if len(stripped) < 2:
                return False
            LOGGER.debug("Body starts with neither a delimiter nor a document, assuming bare documents")
            self._bare = True
            return True
        line_end = stripped.find(b"\n")
        if line_end < 0:
            return False
        self._delimiter = bytes(stripped[:line_end].rstrip())
        return True

    def _split_documents(self) -> list[bytes]:
        result = []
        while True:
            index = self._buffer.find(DOCUMENT_END)
            if index < 0:
                return result
            end = index + len(DOCUMENT_END)
            document = bytes(self._buffer[:end]).strip()
            del self._buffer[:end]
            if document:
                result.append(document)

    def _find_delimiter(self, start: int = 0) -> int:
        """
        Find the delimiter at the start of a line, returns the index of the delimiter or -1.
        """
        assert self._delimiter is not None
        if start == 0 and self._buffer.startswith(self._delimiter):
            return 0
        index = self._buffer.find(b"\n" + self._delimiter, start)
        if index < 0:
            return -1
        return index + 1

    def _consume_delimiter_line(self, index: int) -> Optional[bool]:
        """
        Remove everything up to and including the delimiter line at index.

        :return: None when more data is needed, True when this was the closing delimiter, False otherwise.
        """
        assert self._delimiter is not None
        after = index + len(self._delimiter)
        if len(self._buffer) < after + 2:
            return None
        if self._buffer[after : after + 2] == b"--":
            del self._buffer[:]
            return True
        line_end = self._buffer.find(b"\n", after)
        if line_end < 0:
            return None
        del self._buffer[: line_end + 1]
        return False

    def _split_parts(self) -> list[bytes]:
        result = []
        if not self._started:
            index = self._find_delimiter()
            if index < 0:
                # Drop the preamble, keep enough bytes to match a delimiter split over two chunks
                keep = len(self._delimiter) + 1
                if len(self._buffer) > keep:
                    del self._buffer[:-keep]
                return result
            closing = self._consume_delimiter_line(index)
            if closing is None:
                return result
            self._started = True
            if closing:
                self._done = True
                return result

        while True:
            index = self._find_delimiter()
            if index < 0:
                return result
            part = bytes(self._buffer[:index])
            closing = self._consume_delimiter_line(index)
            if closing is None:
                return result
            body = self._strip_headers(part)
            if body:
                result.append(body)
            if closing:
                self._done = True
                return result

    @staticmethod
    def _strip_headers(part: bytes) -> bytes:
        """
        Remove the part headers, if any, and the line break that belongs to the next delimiter.
        """
        stripped = part.strip()
        if not stripped or stripped.startswith(b"<"):
            return stripped
        for separator in (b"\r\n\r\n", b"\n\n"):
            index = stripped.find(separator)
            if index >= 0:
                return stripped[index + len(separator) :].strip()
        # Only headers, no body
        return b""
