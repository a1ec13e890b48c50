"""Serialization settings shared by the package documents."""

from __future__ import annotations

from lxml import etree


def serialize(root: etree._Element) -> bytes:
    """Encode an element tree as an indented UTF-8 XML document."""

    return etree.tostring(
        root, xml_declaration=True, encoding="utf-8", pretty_print=True
    )
