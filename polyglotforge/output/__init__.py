from .archive import archive_member_name, build_archive, write_archive
from .tree import build_tree

__all__ = ["archive_member_name", "build_archive", "build_tree", "write_archive"]
