# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Builders of the test resources.

A builder clears any resource left under the same name before creating a
new one, except for storage volumes which are reused when they exist.
"""

import logging

import libvirt

from .config import get_config
from .errors import BuildError
from .helpers import descriptors
from .reapers import reap
from .resources import (
    DOMAIN,
    INTERFACE,
    NETWORK,
    STORAGE_POOL,
    STORAGE_VOL,
    ResourceHandle,
    lookup_by_name,
    namespaced,
    raw_parent,
)

logger = logging.getLogger(__name__)


def build(parent, kind, name, xml, transient=False):
    """
    Create a resource from its descriptor, replacing any stale one
    :param parent: the session, or the pool handle for volumes
    :param kind: the ResourceKind
    :param name: the full resource name
    :param xml: the libvirt XML descriptor
    :param transient: set to True to create the resource live only instead
    of defining it
    :return: a ResourceHandle
    """
    if transient and not kind.supports_transient:
        raise ValueError("A " + kind.name + " cannot be created transient")

    stale = lookup_by_name(parent, kind, name)
    if stale is not None:
        if kind.reuse_existing:
            logger.info(
                kind.name.capitalize() + " " + name + " exists, reused"
            )
            return stale
        logger.info("Clearing stale " + kind.name + " " + name)
        reap(stale)

    raw = raw_parent(parent)
    try:
        if transient:
            obj = kind.create(raw, xml)
        else:
            obj = kind.define(raw, xml)
    except libvirt.libvirtError as err:
        raise BuildError.from_libvirt_error(
            "Build " + kind.name + " " + name, err
        ) from err

    logger.info(
        "{} {} built{}".format(
            kind.name.capitalize(), name, " transient" if transient else ""
        )
    )
    return ResourceHandle(kind, name, obj, transient)


def _descriptor(xml, name, default):
    """
    Return xml renamed to name, or the default descriptor if xml is None.
    """
    if xml is None:
        return default()
    return descriptors.set_name(xml, name)


def build_domain(
    session, name, transient=False, xml=None, domain_type="test", memory=128
):
    """
    Build a domain
    :param session: the LibVirtSession
    :param name: the short domain name
    :param transient: set to True to start a transient domain instead of
    defining a persistent one
    :param xml: a domain XML descriptor whose name is replaced, a default
    one is rendered if not set
    :param domain_type: the domain type of the default descriptor
    :param memory: the memory in KiB of the default descriptor
    :return: a ResourceHandle
    """
    name = namespaced(name)
    xml = _descriptor(
        xml, name, lambda: descriptors.domain_xml(name, domain_type, memory)
    )
    return build(session, DOMAIN, name, xml, transient)


def build_test_domain(session, name, transient=False):
    """
    Build a domain for the test:///default driver
    """
    return build_domain(session, name, transient, domain_type="test")


def build_qemu_domain(session, name, transient=False):
    """
    Build a domain for the qemu:///system driver
    """
    return build_domain(session, name, transient, domain_type="qemu")


def build_storage_pool(
    session, name, transient=False, xml=None, pool_type="dir", path=None
):
    """
    Build a storage pool. A persistent pool is defined but not started.
    :param session: the LibVirtSession
    :param name: the short pool name
    :param transient: set to True to start a transient pool
    :param xml: a pool XML descriptor whose name is replaced
    :param pool_type: the pool type of the default descriptor
    :param path: the target path of the default descriptor, the
    configured one if not set
    :return: a ResourceHandle
    """
    name = namespaced(name)
    if path is None:
        path = get_config().pool_path
    xml = _descriptor(
        xml, name, lambda: descriptors.pool_xml(name, path, pool_type)
    )
    return build(session, STORAGE_POOL, name, xml, transient)


def build_storage_vol(pool, name, size, xml=None):
    """
    Build a storage volume, or return the existing one with this name
    :param pool: the handle of an active storage pool
    :param name: the short volume name
    :param size: the allocation and capacity in KiB
    :param xml: a volume XML descriptor whose name is replaced
    :return: a ResourceHandle
    """
    name = namespaced(name)
    xml = _descriptor(xml, name, lambda: descriptors.volume_xml(name, size))
    return build(pool, STORAGE_VOL, name, xml)


def build_network(
    session,
    name,
    transient=False,
    xml=None,
    bridge=None,
    address=None,
    netmask=None,
):
    """
    Build a virtual network. A persistent network is defined but not
    started.
    :param session: the LibVirtSession
    :param name: the short network name
    :param transient: set to True to start a transient network
    :param xml: a network XML descriptor whose name is replaced
    :param bridge: the bridge of the default descriptor
    :param address: the IP address of the default descriptor
    :param netmask: the netmask of the default descriptor
    :return: a ResourceHandle
    """
    name = namespaced(name)
    config = get_config()
    xml = _descriptor(
        xml,
        name,
        lambda: descriptors.network_xml(
            name,
            bridge or config.bridge,
            address or config.address,
            netmask or config.netmask,
        ),
    )
    return build(session, NETWORK, name, xml, transient)


def build_interface(session, name, xml=None, mac=descriptors.INTERFACE_MAC):
    """
    Define a host interface. Interfaces cannot be created transient.
    :param session: the LibVirtSession
    :param name: the short interface name
    :param xml: an interface XML descriptor whose name is replaced
    :param mac: the MAC address of the default descriptor
    :return: a ResourceHandle
    """
    name = namespaced(name)
    xml = _descriptor(xml, name, lambda: descriptors.interface_xml(name, mac))
    return build(session, INTERFACE, name, xml)
