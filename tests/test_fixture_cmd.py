# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

import pytest

from virt_fixtures import DOMAIN, build_domain, build_network
from virt_fixtures import fixture_cmd


class TestList:
    def test_list_leftovers(self, virt_session, reaper, capsys):
        reaper(build_domain(virt_session, "leak"))
        fixture_cmd.main(["list"])
        assert "domain: virt-fixtures-test-leak" in capsys.readouterr().out

    def test_list_one_kind(self, virt_session, reaper, capsys):
        reaper(build_domain(virt_session, "leak"))
        reaper(build_network(virt_session, "leak"))
        fixture_cmd.main(
            ["--uri", "test:///default", "list", "--kind", "network"]
        )
        out = capsys.readouterr().out
        assert out == "network: virt-fixtures-test-leak\n"


class TestSweep:
    def test_sweep(self, virt_session, capsys):
        build_domain(virt_session, "leak").release()
        fixture_cmd.main(["-v", "sweep", "--kind", "domain"])
        assert "domain: virt-fixtures-test-leak" in capsys.readouterr().out
        assert virt_session.list_names(DOMAIN) == ["test"]

    def test_unknown_kind_exits(self):
        with pytest.raises(SystemExit):
            fixture_cmd.main(["sweep", "--kind", "snapshot"])
