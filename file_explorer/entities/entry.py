"""
Directory entry entity.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntryKind(str, Enum):
    """Type tag shown in directory listings."""

    DIR = "DIR"
    FILE = "FILE"
    OTHER = "OTHER"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Entry:
    """
    One child of a listed directory.

    The permissions field holds the display string (``"rwx r-x r-x"``) or the
    placeholder when the entry's permissions could not be read.
    """

    path: str
    kind: EntryKind
    permissions: str

    @property
    def name(self) -> str:
        """Base name of the entry."""
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIR

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "type": self.kind.value,
            "permissions": self.permissions,
            "directory": os.path.dirname(self.path),
        }

    def format_line(self) -> str:
        """Format as a listing line, e.g. ``[FILE]  notes.txt  rw- r-- r--``."""
        tag = f"[{self.kind.value}]"
        return f"{tag:<9} {self.name}  {self.permissions}"

    def __str__(self) -> str:
        return self.format_line()
