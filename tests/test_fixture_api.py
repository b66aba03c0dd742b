# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import Mock

import libvirt
import pytest

from virt_fixtures import build_domain, find_leftovers
from virt_fixtures.fixture_api import app


@pytest.fixture
def client():
    app.config["LIBVIRT_URI"] = "test:///default"
    with app.test_client() as client:
        yield client


class TestLeftovers:
    def test_list_all(self, virt_session, reaper, client):
        reaper(build_domain(virt_session, "leak"))
        response = client.get("/")
        assert response.status_code == 200
        assert response.get_json()["domain"] == ["virt-fixtures-test-leak"]
        assert response.get_json()["pool"] == []

    def test_list_kind(self, virt_session, reaper, client):
        reaper(build_domain(virt_session, "leak"))
        response = client.get("/leftovers/domain")
        assert response.get_json() == {"domain": ["virt-fixtures-test-leak"]}

    def test_unknown_kind(self, client):
        assert client.get("/leftovers/snapshot").status_code == 404


class TestSweep:
    def test_sweep_kind(self, virt_session, client):
        build_domain(virt_session, "leak").release()
        response = client.get("/sweep/domain")
        assert response.get_json() == {"domain": ["virt-fixtures-test-leak"]}
        assert find_leftovers(virt_session, ["domain"]) == {"domain": []}

    def test_sweep_all(self, virt_session, client):
        build_domain(virt_session, "leak").release()
        response = client.get("/sweep")
        assert response.status_code == 200
        assert not any(find_leftovers(virt_session).values())

    def test_connection_error(self, monkeypatch, client):
        err = libvirt.libvirtError("unreachable")
        monkeypatch.setattr(libvirt, "open", Mock(side_effect=err))
        response = client.get("/sweep")
        assert response.status_code == 500
        assert response.get_data(as_text=True).startswith("ConnectError: ")
