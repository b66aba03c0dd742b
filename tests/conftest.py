# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import Mock

import libvirt
import pytest

from virt_fixtures.config import reset_config

pytest_plugins = ["virt_fixtures.plugin"]


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Use the default configuration, whatever the host has."""
    monkeypatch.setenv("VIRT_FIXTURES_CONF", str(tmp_path / "none.conf"))
    monkeypatch.delenv("VIRT_FIXTURES_URI", raising=False)
    monkeypatch.delenv("VIRT_FIXTURES_PREFIX", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def libvirt_error():
    """Return a function building a libvirtError with a given code."""

    def make(code, message="error"):
        err = libvirt.libvirtError(message)
        err.err = (
            code,
            libvirt.VIR_FROM_NONE,
            message,
            libvirt.VIR_ERR_ERROR,
            "",
            None,
            None,
            0,
            0,
        )
        return err

    return make


@pytest.fixture
def mock_conn(monkeypatch):
    """Make libvirt.open return a mocked connection."""
    conn = Mock()
    conn.close.return_value = 0
    monkeypatch.setattr(libvirt, "open", Mock(return_value=conn))
    return conn
