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

import base64
import json
import logging
import os
import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

LOGGER = logging.getLogger(__name__)

MIN_PASSPHRASE_LENGTH = 32
MAX_PASSPHRASE_LENGTH = 128

SALT_SIZE = 16
NONCE_SIZE = 12
KDF_ITERATIONS = 480000


def validate_passphrase(passphrase: Union[str, bytes]) -> bytes:
    """
    Check the length of the passphrase and return it as bytes.

    :raises ValueError: The passphrase is too short or too long.
    """
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")
    if not MIN_PASSPHRASE_LENGTH <= len(passphrase) <= MAX_PASSPHRASE_LENGTH:
        raise ValueError(
            f"The cache passphrase must be between {MIN_PASSPHRASE_LENGTH} and {MAX_PASSPHRASE_LENGTH} bytes long"
        )
    return passphrase


def derive_key(passphrase: bytes, salt: bytes) -> bytes:
    kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=32, salt=salt, iterations=KDF_ITERATIONS)
    return kdf.derive(passphrase)


class CacheItem:
    def __init__(self, data: bytes, expires: float) -> None:
        """
        :param data: The encrypted value, prefixed with its nonce.
        :param expires: Wall clock time after which this item is stale.
        """
        self.data = data
        self.expires = expires

    def is_expired(self, now: Optional[float] = None) -> bool:
        return (now if now is not None else time.time()) >= self.expires


class ResponseCache:
    """
    A least recently used cache for API responses. Values are encrypted with a key derived from a passphrase, so
    they can be persisted to disk.

    The cache is safe to use from multiple threads. When a path is set, changes are written to disk at most once
    every flush_interval seconds. Writing the file is blocking io, call :meth:`flush` to write pending changes, e.g.
    when the cache is no longer used.

    :param passphrase: The passphrase to derive the encryption key from, between 32 and 128 bytes.
    :param path: File to persist the cache to. The cache only lives in memory when this is None.
    :param max_items: The maximum number of items, the least recently used item is dropped when it is exceeded.
    :param flush_interval: The minimal number of seconds between two writes of the cache file.
    """

    def __init__(
        self, passphrase: Union[str, bytes], path: Optional[str] = None, max_items: int = 1000, flush_interval: float = 30
    ) -> None:
        passphrase = validate_passphrase(passphrase)
        if max_items < 1:
            raise ValueError("The cache must be able to hold at least one item")

        self._lock = Lock()
        # Serializes writes of the cache file, the item lock is not held while writing
        self._write_lock = Lock()
        self._items: OrderedDict[str, CacheItem] = OrderedDict()
        self.path = path
        self.max_items = max_items
        self.flush_interval = flush_interval
        self._dirty = False
        self._last_flush: Optional[float] = None

        salt = self._load()
        if salt is None:
            salt = os.urandom(SALT_SIZE)
        self._salt = salt
        self._aesgcm = AESGCM(derive_key(passphrase, salt))

    def get(self, key: str) -> Optional[bytes]:
        """
        Return the value for the given key, None when it is not in the cache or when it expired.
        """
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None
            if item.is_expired():
                del self._items[key]
                return None
            self._items.move_to_end(key)
            try:
                return self._aesgcm.decrypt(item.data[:NONCE_SIZE], item.data[NONCE_SIZE:], key.encode("utf-8"))
            except InvalidTag:
                LOGGER.warning("Dropping cache entry %s, it can not be decrypted", key)
                del self._items[key]
                return None

    def set(self, key: str, value: bytes, ttl: float) -> None:
        """
        Store a value for ttl seconds.
        """
        nonce = os.urandom(NONCE_SIZE)
        data = nonce + self._aesgcm.encrypt(nonce, value, key.encode("utf-8"))
        with self._lock:
            self._items[key] = CacheItem(data, time.time() + ttl)
            self._items.move_to_end(key)
            while len(self._items) > self.max_items:
                evicted, _ = self._items.popitem(last=False)
                LOGGER.debug("Evicted %s from the cache", evicted)
            self._dirty = True
        self._flush_if_due()

    def delete(self, key: str) -> None:
        with self._lock:
            if self._items.pop(key, None) is not None:
                self._dirty = True
        self._flush_if_due()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._dirty = True
        self._flush_if_due()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _flush_if_due(self) -> None:
        if self.path is None:
            return
        if self._last_flush is None or time.monotonic() - self._last_flush >= self.flush_interval:
            self.flush()

    def flush(self) -> None:
        """
        Write the cache to disk when it changed since the last write.
        """
        if self.path is None:
            return
        with self._write_lock:
            with self._lock:
                if not self._dirty:
                    return
                content = self._snapshot()
                self._dirty = False
                self._last_flush = time.monotonic()
            tmp_path = f"{self.path}.tmp"
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as fh:
                json.dump(content, fh)
            os.replace(tmp_path, self.path)
        LOGGER.debug("Wrote %d cache entries to %s", len(content["items"]), self.path)

    def _snapshot(self) -> dict[str, Any]:
        """
        The content of the cache file, the lock must be held.
        """
        now = time.time()
        items = {
            key: {"data": base64.b64encode(item.data).decode("ascii"), "expires": item.expires}
            for key, item in self._items.items()
            if not item.is_expired(now)
        }
        return {"salt": base64.b64encode(self._salt).decode("ascii"), "items": items}

    def _load(self) -> Optional[bytes]:
        """
        Load the cache from disk and return the salt it was written with, None if there is no cache on disk.
        """
        if self.path is None or not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r") as fh:
                content = json.load(fh)
            salt = base64.b64decode(content["salt"])
            now = time.time()
            for key, item in content["items"].items():
                cache_item = CacheItem(base64.b64decode(item["data"]), float(item["expires"]))
                if not cache_item.is_expired(now):
                    self._items[key] = cache_item
        except (ValueError, KeyError, TypeError) as e:
            LOGGER.warning("Ignoring cache file %s, it can not be read: %s", self.path, e)
            self._items.clear()
            return None
        return salt
