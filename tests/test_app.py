"""
Brief: Tests for hostedit.app.HostsEditor (logging, privilege, load/save session).
"""

import logging

import pytest

from hostedit import app as app_mod
from hostedit.app import HostsEditor
from hostedit.config import Config

from conftest import SAMPLE


def test_session_writes_back_when_changed(config, hosts_file):
    with HostsEditor(config).session() as hosts:
        hosts.add("10.0.0.5", "newhost")
    assert hosts_file.read_text(encoding="utf-8") == SAMPLE + "10.0.0.5\tnewhost"


def test_session_leaves_file_alone_when_unchanged(config, hosts_file):
    mtime = hosts_file.stat().st_mtime_ns
    with HostsEditor(config).session() as hosts:
        assert hosts.contains("127.0.0.1", "localhost")
    assert hosts_file.stat().st_mtime_ns == mtime


def test_session_does_not_write_after_error(config, hosts_file):
    with pytest.raises(RuntimeError):
        with HostsEditor(config).session() as hosts:
            hosts.remove("localhost")
            raise RuntimeError("boom")
    assert hosts_file.read_text(encoding="utf-8") == SAMPLE


def test_session_missing_file_raises(tmp_path):
    cfg = Config(hosts_file_path=str(tmp_path / "missing"), require_root=False)
    with pytest.raises(OSError):
        with HostsEditor(cfg).session():
            pass


def test_is_permitted_skips_check_when_not_required(config, monkeypatch):
    def fail(logger):
        raise AssertionError("privilege check should not run")

    monkeypatch.setattr(app_mod, "am_i_root", fail)
    assert HostsEditor(config).is_permitted() is True


@pytest.mark.parametrize("root", [True, False])
def test_is_permitted_uses_root_check(hosts_file, monkeypatch, root):
    monkeypatch.setattr(app_mod, "am_i_root", lambda logger: root)
    cfg = Config(hosts_file_path=str(hosts_file))
    assert HostsEditor(cfg).is_permitted() is root


def test_logger_does_not_propagate_and_has_one_handler(config):
    """
    Brief: Repeated construction keeps a single stderr handler on a non-propagating logger.

    Inputs:
      - config: default test config

    Outputs:
      - None: Asserts handler count, propagation and level
    """
    HostsEditor(config)
    editor = HostsEditor(Config(hosts_file_path=config.hosts_file_path,
                                log_level="DEBUG", require_root=False))
    logger = logging.getLogger("hostedit")
    assert editor.logger is logger
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_invalid_config_rejected(hosts_file):
    with pytest.raises(ValueError):
        HostsEditor(Config(hosts_file_path=str(hosts_file), log_level="LOUD"))
