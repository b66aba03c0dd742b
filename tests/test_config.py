# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

from virt_fixtures.config import get_config, load_config, reset_config


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(str(tmp_path / "missing.conf"))
        assert config.uri == "test:///default"
        assert config.qemu_uri == "qemu:///system"
        assert config.prefix == "virt-fixtures-test-"
        assert config.pool_path == "/var/lib/libvirt/images"
        assert config.bridge == "testbr0"

    def test_file_values(self, tmp_path):
        path = tmp_path / "virt_fixtures.conf"
        path.write_text(
            "[libvirt]\nuri = qemu:///session\n"
            "[network]\naddress = 10.0.0.1\n"
        )
        config = load_config(str(path))
        assert config.uri == "qemu:///session"
        assert config.address == "10.0.0.1"
        assert config.netmask == "255.255.255.0"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "virt_fixtures.conf"
        path.write_text("[naming]\nprefix = file-\n")
        monkeypatch.setenv("VIRT_FIXTURES_PREFIX", "env-")
        assert load_config(str(path)).prefix == "env-"

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "other.conf"
        path.write_text("[storage]\npool_path = /srv/images\n")
        monkeypatch.setenv("VIRT_FIXTURES_CONF", str(path))
        assert load_config().pool_path == "/srv/images"


class TestGetConfig:
    def test_cached(self):
        assert get_config() is get_config()

    def test_reset(self):
        config = get_config()
        reset_config()
        assert get_config() is not config
