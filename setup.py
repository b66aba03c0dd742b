# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name="virt_fixtures",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    author="RTE",
    license="Apache License 2.0",
    description="Build and reap ephemeral libvirt resources in tests",
    include_package_data=True,
    install_requires=["libvirt-python", "flask", "Flask-WTF", "pytest"],
    scripts=[
        "virt_fixtures/fixture_cmd.py",
    ],
)
