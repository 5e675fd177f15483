"""Shared fixtures: every test gets its own Radio."""

import logging
from unittest.mock import Mock

import pytest

from radiobus import Radio


@pytest.fixture
def radio():
    return Radio(debug=True, logger=logging.getLogger("radiobus.test"))


@pytest.fixture
def quiet_radio():
    return Radio(logger=logging.getLogger("radiobus.test"))


@pytest.fixture
def channel(radio):
    return radio.channel("test")


@pytest.fixture
def spy():
    return Mock(return_value="spied")


@pytest.fixture
def warnings_log(caplog):
    caplog.set_level(logging.WARNING, logger="radiobus.test")
    return caplog


@pytest.fixture
def activity_log(caplog):
    caplog.set_level(logging.INFO, logger="radiobus.test")
    return caplog
