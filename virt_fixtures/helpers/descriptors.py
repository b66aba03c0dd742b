# Copyright (C) 2025, RTE (http://www.rte-france.com)
# SPDX-License-Identifier: Apache-2.0

"""
Helper module to render the libvirt XML descriptors of the test resources
"""

import xml.etree.ElementTree as ElementTree

INTERFACE_MAC = "aa:bb:cc:dd:ee:ff"


def set_name(xml, name):
    """
    Return the xml descriptor with its name replaced by name. Any uuid is
    dropped so that libvirt generates a new one.
    :param xml: the libvirt XML string
    :param name: the resource name
    """
    xml_root = ElementTree.fromstring(xml)
    if xml_root.tag == "interface":
        xml_root.set("name", name)
        return ElementTree.tostring(xml_root).decode()
    for tag in ("./name", "./uuid"):
        for element in xml_root.findall(tag):
            xml_root.remove(element)
    name_element = ElementTree.Element("name")
    name_element.text = name
    xml_root.insert(0, name_element)
    return ElementTree.tostring(xml_root).decode()


def domain_xml(name, domain_type="test", memory=128):
    """
    :param memory: the memory size in KiB
    """
    return """<domain type="{}">
            <name>{}</name>
            <memory unit="KiB">{}</memory>
            <features>
                <acpi/>
                <apic/>
            </features>
            <os>
                <type>hvm</type>
            </os>
        </domain>""".format(
        domain_type, name, memory
    )


def pool_xml(name, path, pool_type="dir"):
    return """<pool type="{}">
            <name>{}</name>
            <target>
                <path>{}</path>
            </target>
        </pool>""".format(
        pool_type, name, path
    )


def volume_xml(name, size):
    """
    Volume descriptor whose allocation and capacity are both size KiB.
    """
    return """<volume type="file">
            <name>{}</name>
            <allocation unit="KiB">{}</allocation>
            <capacity unit="KiB">{}</capacity>
        </volume>""".format(
        name, size, size
    )


def network_xml(name, bridge, address, netmask):
    return """<network>
            <name>{}</name>
            <bridge name="{}"/>
            <forward/>
            <ip address="{}" netmask="{}"/>
        </network>""".format(
        name, bridge, address, netmask
    )


def interface_xml(name, mac=INTERFACE_MAC):
    return """<interface type="ethernet" name="{}">
            <mac address="{}"/>
        </interface>""".format(
        name, mac
    )
