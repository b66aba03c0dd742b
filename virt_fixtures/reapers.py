# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Teardown of the test resources.

A teardown attempts each step of the resource kind in order and ignores
libvirt failures, since the resource can already be partially torn down.
The handle is released last, whatever happened before.
"""

import logging

import libvirt

from .errors import TeardownStepError
from .resources import KINDS, SWEEP_ORDER, ResourceHandle, leftover_objects

logger = logging.getLogger(__name__)


def reap(handle):
    """
    Tear a resource down and release its handle
    :param handle: the ResourceHandle to reap
    :return: the list of the TeardownStepError ignored
    """
    obj = handle.obj
    ignored = []
    try:
        for step, func in handle.kind.teardown:
            try:
                func(obj)
            except libvirt.libvirtError as err:
                step_err = TeardownStepError.from_libvirt_error(
                    "{} {} {}".format(
                        step.capitalize(), handle.kind.name, handle.name
                    ),
                    err,
                )
                logger.debug("Ignored: " + str(step_err))
                ignored.append(step_err)
    finally:
        handle.release()
    logger.info(handle.kind.name.capitalize() + " " + handle.name + " reaped")
    return ignored


def clean(dom):
    """
    Destroy, undefine and release a domain
    """
    return reap(dom)


def clean_pool(pool):
    """
    Destroy, undefine and release a storage pool
    """
    return reap(pool)


def clean_vol(vol):
    """
    Delete and release a storage volume
    """
    return reap(vol)


def clean_net(net):
    """
    Destroy, undefine and release a network
    """
    return reap(net)


def clean_iface(iface):
    """
    Destroy, undefine and release a host interface
    """
    return reap(iface)


def reap_leftovers(session, kinds=None, prefix=None):
    """
    Reap every resource left by the fixtures, volumes first and pools last
    :param session: the LibVirtSession
    :param kinds: the kind names to sweep, all if not set
    :param prefix: the namespace prefix, the configured one if not set
    :return: a dictionary of the reaped names by kind name
    """
    if kinds is None:
        kinds = SWEEP_ORDER
    for kind_name in kinds:
        if kind_name not in KINDS:
            raise ValueError("Unknown resource kind " + kind_name)

    reaped = {}
    for kind_name in SWEEP_ORDER:
        if kind_name not in kinds:
            continue
        reaped[kind_name] = []
        for obj in list(leftover_objects(session, kind_name, prefix)):
            name = obj.name()
            reap(ResourceHandle(KINDS[kind_name], name, obj))
            reaped[kind_name].append(name)
    return reaped
