# (c) Copyright IBM Corp. 2025

import os
from typing import Generator

import pytest

from lsfinder.configurator import config
from lsfinder.options import DiscoveryOptions
from tests.helpers import TEST_CMDLINE, FakePlatform, FakeProbe

LSFINDER_ENV_VARS = (
    "LSFINDER_DEBUG",
    "LSFINDER_LOG_LEVEL",
    "LSFINDER_CONFIG_PATH",
    "LSFINDER_MAX_RETRIES",
    "LSFINDER_RETRY_DELAY",
    "LSFINDER_PROBE_TIMEOUT",
    "LSFINDER_COMMAND_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_environment() -> Generator[None, None, None]:
    """Every test starts without lsfinder environment variables or in-code config."""
    saved = {name: os.environ.pop(name) for name in LSFINDER_ENV_VARS if name in os.environ}
    yield
    for name in LSFINDER_ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)
    if "discovery" in config.keys():
        del config["discovery"]


@pytest.fixture
def discovery_options() -> DiscoveryOptions:
    return DiscoveryOptions(
        max_retries=1,
        retry_delay=0,
        probe_timeout=0.5,
        command_timeout=1.0,
    )


@pytest.fixture
def fake_platform(discovery_options: DiscoveryOptions) -> FakePlatform:
    return FakePlatform(
        processes=[(4242, TEST_CMDLINE)],
        ports={4242: [51200, 51111]},
        options=discovery_options,
    )


@pytest.fixture
def fake_probe() -> FakeProbe:
    return FakeProbe(valid_ports=[51200])
