# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

from .helpers.libvirt import LibVirtSession, open_session, close_session
from .errors import (
    FixtureException,
    ConnectError,
    ResourceLookupError,
    BuildError,
    TeardownStepError,
    ReleaseError,
)
from .resources import (
    DOMAIN,
    STORAGE_POOL,
    STORAGE_VOL,
    NETWORK,
    INTERFACE,
    KINDS,
    ResourceHandle,
    namespaced,
    lookup_by_name,
    SWEEP_ORDER,
    find_leftovers,
)
from .builders import (
    build_domain,
    build_test_domain,
    build_qemu_domain,
    build_storage_pool,
    build_storage_vol,
    build_network,
    build_interface,
)
from .reapers import (
    reap,
    clean,
    clean_pool,
    clean_vol,
    clean_net,
    clean_iface,
    reap_leftovers,
)
