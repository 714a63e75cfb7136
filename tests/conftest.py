"""
Brief: Shared fixtures for hostedit tests.
"""

import logging

import pytest

from hostedit.config import Config
from hostedit.hosts_manager import HostList


SAMPLE = (
    "127.0.0.1\tlocalhost\n"
    "# The following lines are desirable for IPv6 capable hosts\n"
    "::1\tip6-localhost\n"
    "\n"
    "192.168.1.1\texample.com\n"
)


@pytest.fixture
def logger():
    return logging.getLogger("hostedit.test")


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "hosts"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def hosts(hosts_file, logger):
    hl = HostList(str(hosts_file), logger)
    hl.load()
    return hl


@pytest.fixture
def config(hosts_file):
    return Config(hosts_file_path=str(hosts_file), require_root=False)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers bound to a captured stderr between tests."""
    yield
    app_logger = logging.getLogger("hostedit")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
