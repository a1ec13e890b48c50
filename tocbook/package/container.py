"""Container document pointing reading applications at the package file."""

from __future__ import annotations

from lxml import etree

from .checks import OPF_FILE_NAME
from .xml_writer import serialize

CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"
OPF_MEDIA_TYPE = "application/oebps-package+xml"


def build_container() -> bytes:
    """Return the ``META-INF/container.xml`` document."""

    root = etree.Element(
        f"{{{CONTAINER_NS}}}container",
        nsmap={None: CONTAINER_NS},
        version="1.0",
    )
    rootfiles = etree.SubElement(root, f"{{{CONTAINER_NS}}}rootfiles")
    etree.SubElement(
        rootfiles,
        f"{{{CONTAINER_NS}}}rootfile",
        {"full-path": OPF_FILE_NAME, "media-type": OPF_MEDIA_TYPE},
    )
    return serialize(root)
