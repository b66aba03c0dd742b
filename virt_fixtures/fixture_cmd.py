#!/usr/bin/env python3
# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
A cli wrapper to list and sweep the resources left by the fixtures
"""

import argparse
import logging

from virt_fixtures.helpers.libvirt import LibVirtSession
from virt_fixtures.reapers import reap_leftovers
from virt_fixtures.resources import SWEEP_ORDER, find_leftovers


def main(argv=None):
    parser = argparse.ArgumentParser(description="virt_fixtures cli wrapper")
    parser.add_argument(
        "-v",
        "--verbose",
        help="increase output verbosity",
        action="store_true",
        required=False,
    )
    parser.add_argument(
        "--uri",
        type=str,
        required=False,
        help="libvirt URI, the configured one by default",
    )
    subparsers = parser.add_subparsers(
        help="command", dest="command", required=True, metavar="command"
    )
    list_parser = subparsers.add_parser(
        "list", help="list the resources left by the fixtures"
    )
    sweep_parser = subparsers.add_parser(
        "sweep", help="reap the resources left by the fixtures"
    )
    for subparser in (list_parser, sweep_parser):
        subparser.add_argument(
            "--kind",
            type=str,
            choices=SWEEP_ORDER,
            action="append",
            required=False,
            help="resource kind, can be repeated. All kinds by default",
        )
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
        logging.debug("Enable debug traces")
    else:
        logging.basicConfig(level=logging.WARNING)

    kinds = [x for x in SWEEP_ORDER if not args.kind or x in args.kind]
    with LibVirtSession(args.uri) as session:
        if args.command == "list":
            result = find_leftovers(session, kinds)
        elif args.command == "sweep":
            result = reap_leftovers(session, kinds)
    for kind_name in kinds:
        for name in result[kind_name]:
            print("{}: {}".format(kind_name, name))


if __name__ == "__main__":
    main()
