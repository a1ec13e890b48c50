"""Writers for the EPUB package metadata files."""

from .archive import make_archive
from .checks import PackageError, check_tree
from .container import build_container
from .ncx import build_ncx
from .opf import build_opf, part_ids
from .write_package import write_package

__all__ = [
    "PackageError",
    "build_container",
    "build_ncx",
    "build_opf",
    "check_tree",
    "make_archive",
    "part_ids",
    "write_package",
]
