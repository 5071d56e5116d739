"""Directory-listing model: entries, scanning, selection, and size labels."""

from .format import format_size
from .fs import DirectoryChild, SizeOf, directory_size, list_directory_children
from .listing import DirectoryListing
from .types import DIR_SUFFIX, Entry, display_name, ensure_trailing_separator, make_entry

__all__ = [
    "DIR_SUFFIX",
    "DirectoryChild",
    "DirectoryListing",
    "Entry",
    "SizeOf",
    "directory_size",
    "display_name",
    "ensure_trailing_separator",
    "format_size",
    "list_directory_children",
    "make_entry",
]
