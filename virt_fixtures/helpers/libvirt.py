# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Helper module to open and close libvirt sessions
"""

import libvirt

import logging

from ..config import get_config
from ..errors import ConnectError

logger = logging.getLogger(__name__)


class LibVirtSession:
    """
    An open connection to a libvirt endpoint
    """

    def __init__(self, uri=None):
        """
        LibVirtSession constructor. The constructor opens a connection to
        libvirt.
        :param uri: the endpoint URI, the configured one if not set
        """
        if uri is None:
            uri = get_config().uri
        self.uri = uri
        try:
            self._conn = libvirt.open(uri)
        except libvirt.libvirtError as err:
            raise ConnectError.from_libvirt_error(
                "Build connection to " + uri, err
            ) from err
        if self._conn is None:
            raise ConnectError(
                "Build connection to " + uri, None, "no connection returned"
            )
        logger.info("Connection to " + uri + " opened")

    def __enter__(self):
        """
        Start context
        """
        return self

    def __exit__(self, type, value, traceback):
        """
        Close context
        """
        if not self.closed:
            self.close()

    @property
    def closed(self):
        return self._conn is None

    @property
    def conn(self):
        """
        The underlying libvirt connection, only valid until close
        """
        if self._conn is None:
            raise ConnectError(
                "Use connection to " + self.uri, None, "session is closed"
            )
        return self._conn

    def close(self):
        """
        Close the libvirt connection. It must be called once, after every
        handle obtained through the session was released.
        :return: 0
        """
        conn = self.conn
        self._conn = None
        try:
            ret = conn.close()
        except libvirt.libvirtError as err:
            raise ConnectError.from_libvirt_error(
                "Close connection to " + self.uri, err
            ) from err
        if ret != 0:
            raise ConnectError(
                "Close connection to " + self.uri,
                ret,
                "{} references are still held".format(ret),
            )
        logger.info("Connection to " + self.uri + " closed")
        return ret

    def list_names(self, kind, parent=None):
        """
        List the names of all the resources of a kind
        :param kind: a ResourceKind
        :param parent: the pool handle when listing volumes
        :return: the name list
        """
        raw = self.conn if parent is None else parent.obj
        return [x.name() for x in kind.list_all(raw)]


def open_session(uri=None):
    """
    Open a session
    :param uri: the endpoint URI, the configured one if not set
    :return: a LibVirtSession
    """
    return LibVirtSession(uri)


def close_session(session):
    """
    Close a session
    :param session: the session to close
    :return: 0, a ConnectError is raised otherwise
    """
    return session.close()
