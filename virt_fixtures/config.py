# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Fixture configuration, read from /etc/virt_fixtures.conf
"""

import configparser
import logging
import os

logger = logging.getLogger(__name__)

CONF_PATH = "/etc/virt_fixtures.conf"

DEFAULTS = {
    "libvirt": {
        "uri": "test:///default",
        "qemu_uri": "qemu:///system",
    },
    "naming": {
        "prefix": "virt-fixtures-test-",
    },
    "storage": {
        "pool_path": "/var/lib/libvirt/images",
    },
    "network": {
        "bridge": "testbr0",
        "address": "192.168.0.1",
        "netmask": "255.255.255.0",
    },
}

_config = None


class FixtureConfig:
    """
    Values used to open sessions and to render the default descriptors.
    """

    def __init__(self, parser):
        self.uri = parser["libvirt"]["uri"]
        self.qemu_uri = parser["libvirt"]["qemu_uri"]
        self.prefix = parser["naming"]["prefix"]
        self.pool_path = parser["storage"]["pool_path"]
        self.bridge = parser["network"]["bridge"]
        self.address = parser["network"]["address"]
        self.netmask = parser["network"]["netmask"]


def load_config(path=None):
    """
    Read the configuration file. A missing file gives the default values.
    :param path: the configuration file, $VIRT_FIXTURES_CONF or
    /etc/virt_fixtures.conf if not set
    :return: a FixtureConfig
    """
    if path is None:
        path = os.environ.get("VIRT_FIXTURES_CONF", CONF_PATH)
    parser = configparser.ConfigParser()
    parser.read_dict(DEFAULTS)
    if parser.read(path):
        logger.info("Configuration read from " + path)

    if "VIRT_FIXTURES_URI" in os.environ:
        parser["libvirt"]["uri"] = os.environ["VIRT_FIXTURES_URI"]
    if "VIRT_FIXTURES_PREFIX" in os.environ:
        parser["naming"]["prefix"] = os.environ["VIRT_FIXTURES_PREFIX"]
    return FixtureConfig(parser)


def get_config():
    """
    Return the configuration, loading it on first use.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config():
    """
    Forget the loaded configuration so that the next get_config() call
    reads it again.
    """
    global _config
    _config = None
