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

"""
Configuration of the rego client.

Options are read from ini style config files. Later files override earlier ones:

    * /etc/rego/rego.cfg
    * the .cfg files in the config directory, sorted by name
    * ~/.rego.cfg
    * .rego.cfg in the working directory
    * the file passed to :meth:`Config.load_config`

Every option can be overridden with an environment variable named REGO_<SECTION>_<OPTION>, e.g. REGO_LENEL_S2_URL.
Underscores and dashes in option names are interchangeable.
"""

import logging
import os
from configparser import ConfigParser, Interpolation
from typing import Callable, Generic, Optional, TypeVar, Union

from rego import const

LOGGER = logging.getLogger(__name__)

MAIN_CONFIG_FILE = "/etc/rego/rego.cfg"
USER_CONFIG_FILES = ("~/.rego.cfg", ".rego.cfg")


def _option_key(name: str) -> str:
    return name.replace("_", "-")


def _environment_variable(section: str, name: str) -> str:
    return f"{const.ENVIRON_PREFIX}_{section}_{name}".replace("-", "_").upper()


class _ConfigParser(ConfigParser):
    def optionxform(self, optionstr: str) -> str:
        return super().optionxform(_option_key(optionstr))


class Config:
    """
    The parsed config files, shared by all options. The files are read on first use when load_config was not called.
    """

    _parser: Optional[ConfigParser] = None

    @classmethod
    def load_config(
        cls,
        config_file: Optional[str] = None,
        config_dir: Optional[str] = None,
        main_cfg_file: str = MAIN_CONFIG_FILE,
    ) -> None:
        files = [main_cfg_file]
        if config_dir and os.path.isdir(config_dir):
            files.extend(sorted(os.path.join(config_dir, f) for f in os.listdir(config_dir) if f.endswith(".cfg")))
        files.extend(os.path.expanduser(f) for f in USER_CONFIG_FILES)
        if config_file is not None:
            files.append(config_file)

        parser = _ConfigParser(interpolation=Interpolation())
        loaded = parser.read(files)
        LOGGER.debug("Read config files: %s", ", ".join(loaded) if loaded else "none")
        cls._parser = parser

    @classmethod
    def _get_instance(cls) -> ConfigParser:
        if cls._parser is None:
            cls.load_config()
        assert cls._parser is not None
        return cls._parser

    @classmethod
    def _reset(cls) -> None:
        cls._parser = None

    @classmethod
    def lookup(cls, section: str, name: str) -> Optional[str]:
        """
        Return the raw value of an option, None when it is not set. The environment takes precedence over the files.
        """
        value = os.environ.get(_environment_variable(section, name))
        if value is not None:
            return value
        return cls._get_instance().get(section, name, fallback=None)

    @classmethod
    def set(cls, section: str, name: str, value: str) -> None:
        parser = cls._get_instance()
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, name, value)


def is_int(value: str) -> int:
    return int(value)


def is_time(value: str) -> int:
    """A number of seconds"""
    return int(value)


def is_bool(value: str) -> bool:
    """Any of true, false, on, off, yes, no, 1, 0, case insensitive"""
    try:
        return ConfigParser.BOOLEAN_STATES[value.lower()]
    except KeyError:
        raise ValueError(f"Not a boolean: {value}")


def is_str_opt(value: str) -> Optional[str]:
    return value


T = TypeVar("T")


class Option(Generic[T]):
    """
    A typed option in a section of the config files.

    :param default: The value of the option when it is set nowhere. It is returned as is, without validation.
    :param documentation: What the option does.
    :param validator: Converts the text of the option to its type, raises ValueError when the text is invalid.
    """

    def __init__(
        self,
        section: str,
        name: str,
        default: Union[T, None],
        documentation: str,
        validator: Callable[[str], T],
    ) -> None:
        self.section = section
        self.name = _option_key(name)
        self.default = default
        self.documentation = documentation
        self.validator = validator

    def get(self) -> T:
        value = Config.lookup(self.section, self.name)
        if value is None:
            return self.default  # type: ignore[return-value]
        return self.validator(value)

    def set(self, value: str) -> None:
        Config.set(self.section, self.name, value)


#############################
# Lenel S2 NetBox
#############################
LENEL_S2_SECTION = "lenel_s2"

s2_url = Option(LENEL_S2_SECTION, "url", None, "Address of the NetBox appliance, with or without a scheme", is_str_opt)
s2_username = Option(LENEL_S2_SECTION, "username", None, "The user to log in to the NetBox API with", is_str_opt)
s2_password = Option(LENEL_S2_SECTION, "password", None, "The password to log in to the NetBox API with", is_str_opt)
s2_ssl = Option(LENEL_S2_SECTION, "ssl", False, "Connect to the NetBox API using https", is_bool)
s2_validate_cert = Option(
    LENEL_S2_SECTION,
    "validate_cert",
    True,
    "Validate the certificate of the NetBox appliance. Only disable this for appliances with a self-signed certificate.",
    is_bool,
)
s2_ssl_ca_cert_file = Option(
    LENEL_S2_SECTION, "ssl_ca_cert_file", None, "CA cert file used to validate the server certificate against", is_str_opt
)
s2_request_timeout = Option(
    LENEL_S2_SECTION, "request_timeout", 10, "The time before a single command request times out in seconds", is_time
)
s2_connect_timeout = Option(
    LENEL_S2_SECTION, "connect_timeout", 20, "The time before establishing a connection times out in seconds", is_time
)
s2_max_pages = Option(
    LENEL_S2_SECTION,
    "max_pages",
    10000,
    "The maximum number of pages a paginated command may fetch before it is aborted. 0 disables the limit.",
    is_int,
)
s2_stream_max_body_size = Option(
    LENEL_S2_SECTION,
    "stream_max_body_size",
    1024**4,
    "The maximum number of bytes an event stream may deliver before the connection is closed",
    is_int,
)

#############################
# Response cache
#############################
CACHE_SECTION = "cache"

cache_enabled = Option(CACHE_SECTION, "enabled", False, "Serve repeated read commands from the local cache", is_bool)
cache_encryption_key = Option(
    CACHE_SECTION,
    "encryption_key",
    None,
    "Passphrase used to encrypt cached responses. Must be between 32 and 128 bytes long.",
    is_str_opt,
)
cache_path = Option(
    CACHE_SECTION,
    "path",
    None,
    "File the cache is persisted to. When not set, the cache only lives in memory.",
    is_str_opt,
)
cache_max_items = Option(CACHE_SECTION, "max_items", 1000, "The maximum number of entries kept in the cache", is_int)
cache_ttl = Option(CACHE_SECTION, "ttl", 300, "The number of seconds a cached response stays valid", is_time)
cache_flush_interval = Option(
    CACHE_SECTION, "flush_interval", 30, "The minimal number of seconds between two writes of the cache file", is_time
)

#############################
# Logging
#############################
LOGGING_SECTION = "logging"

logging_verbosity = Option(
    LOGGING_SECTION, "verbosity", 1, "Verbosity of the console log, from 0 (errors only) to 4 (trace)", is_int
)
logging_log_file = Option(
    LOGGING_SECTION, "log_file", None, "Write the log to this file instead of to the console", is_str_opt
)
logging_log_file_level = Option(
    LOGGING_SECTION, "log_file_level", "INFO", "The level of the messages written to the log file", is_str_opt
)
logging_timed = Option(LOGGING_SECTION, "timed", False, "Prefix console log lines with the time", is_bool)
logging_config_file = Option(
    LOGGING_SECTION,
    "config_file",
    None,
    "A yaml file with a dict based logging config. When set, the other logging options are ignored.",
    is_str_opt,
)
