# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by the fixture helpers.
"""


class FixtureException(Exception):
    """
    Base class of the fixture exceptions. It carries the action that
    failed and the code and message reported by libvirt.
    """

    def __init__(self, action, code=None, message=""):
        self.action = action
        self.code = code
        self.message = message
        super().__init__(
            "{} failed with code {}, message: {}".format(
                action, code, message
            )
        )

    @classmethod
    def from_libvirt_error(cls, action, err):
        """
        Build the exception from a libvirt.libvirtError
        :param action: the failed action, used in the exception message
        :param err: the libvirt error
        """
        return cls(action, err.get_error_code(), err.get_error_message())


class ConnectError(FixtureException, ConnectionError):
    """
    The session could not be opened or was not closed cleanly.
    """


class ResourceLookupError(FixtureException, LookupError):
    """
    A lookup failed for another reason than the resource being absent.
    """


class BuildError(FixtureException):
    """
    A resource could not be created or defined.
    """


class TeardownStepError(FixtureException):
    """
    A destroy, undefine or delete step failed during a teardown. Reapers
    only collect it.
    """


class ReleaseError(FixtureException):
    """
    A released handle was used or released again.
    """
