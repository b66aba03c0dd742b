# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
The resource kinds handled by the fixtures, the handles wrapping libvirt
objects and the lookup by name.
"""

import logging
import re

import libvirt

from .config import get_config
from .errors import ReleaseError, ResourceLookupError

logger = logging.getLogger(__name__)


class ResourceKind:
    """
    The libvirt calls available for one kind of resource.

    create and define take the parent libvirt object and an XML string.
    A kind without create cannot be built transient. teardown is the
    ordered list of (step name, function) run by the reaper.
    """

    def __init__(
        self,
        name,
        lookup,
        list_all,
        not_found,
        teardown,
        define,
        create=None,
        reuse_existing=False,
    ):
        self.name = name
        self.lookup = lookup
        self.list_all = list_all
        self.not_found = not_found
        self.teardown = teardown
        self.define = define
        self.create = create
        self.reuse_existing = reuse_existing

    @property
    def supports_transient(self):
        return self.create is not None

    def __repr__(self):
        return "ResourceKind({})".format(self.name)


DOMAIN = ResourceKind(
    "domain",
    lookup=lambda conn, name: conn.lookupByName(name),
    list_all=lambda conn: conn.listAllDomains(0),
    not_found=libvirt.VIR_ERR_NO_DOMAIN,
    teardown=[
        ("destroy", lambda dom: dom.destroy()),
        ("undefine", lambda dom: dom.undefine()),
    ],
    define=lambda conn, xml: conn.defineXML(xml),
    create=lambda conn, xml: conn.createXML(xml, 0),
)

STORAGE_POOL = ResourceKind(
    "storage pool",
    lookup=lambda conn, name: conn.storagePoolLookupByName(name),
    list_all=lambda conn: conn.listAllStoragePools(0),
    not_found=libvirt.VIR_ERR_NO_STORAGE_POOL,
    teardown=[
        ("destroy", lambda pool: pool.destroy()),
        ("undefine", lambda pool: pool.undefine()),
    ],
    define=lambda conn, xml: conn.storagePoolDefineXML(xml, 0),
    create=lambda conn, xml: conn.storagePoolCreateXML(xml, 0),
)

# Volumes are always persistent artifacts of their pool: their only
# creation call is registered as define.
STORAGE_VOL = ResourceKind(
    "storage volume",
    lookup=lambda pool, name: pool.storageVolLookupByName(name),
    list_all=lambda pool: pool.listAllVolumes(0),
    not_found=libvirt.VIR_ERR_NO_STORAGE_VOL,
    teardown=[("delete", lambda vol: vol.delete(0))],
    define=lambda pool, xml: pool.createXML(xml, 0),
    reuse_existing=True,
)

NETWORK = ResourceKind(
    "network",
    lookup=lambda conn, name: conn.networkLookupByName(name),
    list_all=lambda conn: conn.listAllNetworks(0),
    not_found=libvirt.VIR_ERR_NO_NETWORK,
    teardown=[
        ("destroy", lambda net: net.destroy()),
        ("undefine", lambda net: net.undefine()),
    ],
    define=lambda conn, xml: conn.networkDefineXML(xml),
    create=lambda conn, xml: conn.networkCreateXML(xml),
)

INTERFACE = ResourceKind(
    "interface",
    lookup=lambda conn, name: conn.interfaceLookupByName(name),
    list_all=lambda conn: conn.listAllInterfaces(0),
    not_found=libvirt.VIR_ERR_NO_INTERFACE,
    teardown=[
        ("destroy", lambda iface: iface.destroy(0)),
        ("undefine", lambda iface: iface.undefine()),
    ],
    define=lambda conn, xml: conn.interfaceDefineXML(xml, 0),
)

KINDS = {
    "domain": DOMAIN,
    "pool": STORAGE_POOL,
    "volume": STORAGE_VOL,
    "network": NETWORK,
    "interface": INTERFACE,
}

# Volumes go before their pools
SWEEP_ORDER = ["volume", "domain", "network", "interface", "pool"]


class ResourceHandle:
    """
    A libvirt object owned by a test. It must be released once, after
    which it cannot be used anymore.
    """

    def __init__(self, kind, name, obj, transient=False):
        self.kind = kind
        self.name = name
        self.transient = transient
        self._obj = obj

    def __repr__(self):
        return "ResourceHandle({}, {!r}{})".format(
            self.kind.name, self.name, ", released" if self.released else ""
        )

    @property
    def released(self):
        return self._obj is None

    @property
    def obj(self):
        """
        The wrapped libvirt object
        """
        if self._obj is None:
            raise ReleaseError(
                "Use " + self.kind.name + " " + self.name,
                None,
                "handle is released",
            )
        return self._obj

    def release(self):
        """
        Drop the reference to the libvirt object, which frees it.
        """
        if self._obj is None:
            raise ReleaseError(
                "Release " + self.kind.name + " " + self.name,
                None,
                "handle is already released",
            )
        self._obj = None


def namespaced(name, prefix=None):
    """
    Return the name of a test resource from its short name
    :param name: the short name
    :param prefix: the namespace prefix, the configured one if not set
    """
    if prefix is None:
        prefix = get_config().prefix
    if (
        not name
        or not isinstance(name, str)
        or not bool(re.match("^[a-zA-Z0-9_.-]*$", name))
    ):
        raise ValueError(
            "Resource name must not be empty or contain special chars"
        )
    if name.startswith(prefix):
        return name
    return prefix + name


def raw_parent(parent):
    """
    Return the libvirt object behind a session or a pool handle.
    """
    if isinstance(parent, ResourceHandle):
        return parent.obj
    return parent.conn


def lookup_by_name(parent, kind, name):
    """
    Look a resource up
    :param parent: the session, or the pool handle for volumes
    :param kind: the ResourceKind
    :param name: the full resource name
    :return: a ResourceHandle, None if no such resource exists
    """
    try:
        obj = kind.lookup(raw_parent(parent), name)
    except libvirt.libvirtError as err:
        if err.get_error_code() == kind.not_found:
            return None
        raise ResourceLookupError.from_libvirt_error(
            "Lookup " + kind.name + " " + name, err
        ) from err
    return ResourceHandle(kind, name, obj)


def leftover_objects(session, kind_name, prefix=None):
    """
    Yield the libvirt objects of a kind whose name carries the namespace
    prefix. Volumes are searched in every active pool.
    :param session: the LibVirtSession
    :param kind_name: a key of KINDS
    :param prefix: the namespace prefix, the configured one if not set
    """
    if kind_name not in KINDS:
        raise ValueError("Unknown resource kind " + kind_name)
    if prefix is None:
        prefix = get_config().prefix
    conn = session.conn
    if kind_name == "volume":
        objs = []
        for pool in conn.listAllStoragePools(0):
            if pool.isActive():
                objs += pool.listAllVolumes(0)
    else:
        objs = KINDS[kind_name].list_all(conn)
    for obj in objs:
        if obj.name().startswith(prefix):
            yield obj


def find_leftovers(session, kinds=None, prefix=None):
    """
    List the resources left by the fixtures
    :param session: the LibVirtSession
    :param kinds: the kind names to search, all if not set
    :param prefix: the namespace prefix, the configured one if not set
    :return: a dictionary of the sorted names by kind name
    """
    if kinds is None:
        kinds = SWEEP_ORDER
    return {
        kind_name: sorted(
            x.name() for x in leftover_objects(session, kind_name, prefix)
        )
        for kind_name in kinds
    }
