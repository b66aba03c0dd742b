# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
pytest fixtures, enabled with pytest_plugins = ["virt_fixtures.plugin"]
"""

import pytest

from .config import get_config
from .helpers.libvirt import close_session, open_session
from .reapers import reap


@pytest.fixture
def virt_session():
    """Open a session to the configured endpoint, closed after the test."""
    session = open_session(get_config().uri)
    yield session
    assert close_session(session) == 0, "close(), expected 0"


@pytest.fixture
def qemu_session():
    """Open a session to the configured qemu endpoint."""
    session = open_session(get_config().qemu_uri)
    yield session
    assert close_session(session) == 0, "close(), expected 0"


def _reap_registered():
    handles = []

    def register(handle):
        handles.append(handle)
        return handle

    yield register
    while handles:
        handle = handles.pop()
        if not handle.released:
            reap(handle)


@pytest.fixture
def reaper(virt_session):
    """
    Return a function registering handles to reap after the test. The
    handles still alive are reaped in reverse order, before virt_session
    is closed. Handles built on qemu_session go to qemu_reaper instead.
    """
    yield from _reap_registered()


@pytest.fixture
def qemu_reaper(qemu_session):
    """
    Same as reaper, for handles built on qemu_session.
    """
    yield from _reap_registered()
