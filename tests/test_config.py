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

import os

import pytest

from rego import config
from rego.config import Config, Option


def test_defaults():
    assert config.s2_url.get() is None
    assert config.s2_ssl.get() is False
    assert config.s2_validate_cert.get() is True
    assert config.s2_request_timeout.get() == 10
    assert config.s2_connect_timeout.get() == 20
    assert config.s2_max_pages.get() == 10000
    assert config.cache_enabled.get() is False
    assert config.cache_max_items.get() == 1000
    assert config.cache_ttl.get() == 300


def test_set_option():
    config.s2_max_pages.set("5")
    assert config.s2_max_pages.get() == 5
    config.s2_ssl.set("yes")
    assert config.s2_ssl.get() is True
    assert Config.lookup(config.LENEL_S2_SECTION, "ssl") == "yes"
    assert Config.lookup(config.LENEL_S2_SECTION, "url") is None


def test_invalid_bool():
    config.cache_enabled.set("sometimes")
    with pytest.raises(ValueError):
        config.cache_enabled.get()


def test_environment_override(monkeypatch):
    config.s2_url.set("netbox.example.com")
    monkeypatch.setenv("REGO_LENEL_S2_URL", "10.0.0.1")
    monkeypatch.setenv("REGO_LENEL_S2_REQUEST_TIMEOUT", "3")
    assert config.s2_url.get() == "10.0.0.1"
    assert config.s2_request_timeout.get() == 3
    assert Config.lookup(config.LENEL_S2_SECTION, "request-timeout") == "3"


def test_config_file_hierarchy(tmpdir, monkeypatch):
    monkeypatch.chdir(tmpdir)
    main_cfg_file = os.path.join(tmpdir, "rego.cfg")
    with open(main_cfg_file, "w") as fh:
        fh.write("[lenel_s2]\nurl=main.example.com\nusername=main\nmax_pages=1\n")

    config_dir = os.path.join(tmpdir, "rego.d")
    os.mkdir(config_dir)
    with open(os.path.join(config_dir, "01-user.cfg"), "w") as fh:
        fh.write("[lenel_s2]\nusername=dir\n")
    with open(os.path.join(config_dir, "02-pages.cfg"), "w") as fh:
        fh.write("[lenel_s2]\nmax_pages=2\n")

    with open(os.path.join(tmpdir, ".rego.cfg"), "w") as fh:
        fh.write("[lenel_s2]\nmax_pages=3\n")

    Config.load_config(config_dir=config_dir, main_cfg_file=main_cfg_file)
    assert config.s2_url.get() == "main.example.com"
    assert config.s2_username.get() == "dir"
    assert config.s2_max_pages.get() == 3

    extra_cfg_file = os.path.join(tmpdir, "extra.cfg")
    with open(extra_cfg_file, "w") as fh:
        fh.write("[lenel_s2]\nmax-pages=4\n")
    Config.load_config(extra_cfg_file, config_dir, main_cfg_file)
    assert config.s2_max_pages.get() == 4


def test_option_names():
    option = Option("test", "some_option", 7, "An option for the tests", config.is_int)
    assert option.name == "some-option"
    assert option.get() == 7

    # Underscores and dashes are interchangeable
    Config.set("test", "some_option", "8")
    assert option.get() == 8
    Config.set("test", "some-option", "9")
    assert option.get() == 9


def test_logging_defaults():
    assert config.logging_verbosity.get() == 1
    assert config.logging_log_file.get() is None
    assert config.logging_log_file_level.get() == "INFO"
    assert config.logging_timed.get() is False
    assert config.logging_config_file.get() is None


def test_cache_flush_interval():
    assert config.cache_flush_interval.get() == 30
    config.cache_flush_interval.set("0")
    assert config.cache_flush_interval.get() == 0
