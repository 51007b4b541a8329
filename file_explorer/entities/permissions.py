"""
Permission value entity and its text codec.

A permission value is the 9 rwx bits of a POSIX mode, ordered owner, group,
other. Bit 8 is owner read and bit 0 is other execute, so the mask has the
same layout as the low bits of ``st_mode`` and can be handed to ``os.chmod``.
"""

from dataclasses import dataclass

from file_explorer.exceptions import InvalidPermissionFormatError

_PRINCIPALS = ("owner", "group", "other")
_LETTERS = "rwx"
_FULL_MASK = 0o777
PLACEHOLDER = "??? ??? ???"


@dataclass(frozen=True)
class Permissions:
    """Immutable set of the 9 owner/group/other read/write/execute flags."""

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= _FULL_MASK:
            raise ValueError(f"Permission mask out of range: {self.mask:o}")

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        """Keep only the rwx bits of a native ``st_mode``."""
        return cls(mode & _FULL_MASK)

    @classmethod
    def decode_octal(cls, text: str) -> "Permissions":
        """
        Parse a 3-digit octal string such as ``"755"``.

        Args:
            text: Exactly three ASCII digits, each in 0..7

        Returns:
            The decoded Permissions

        Raises:
            InvalidPermissionFormatError: If text is not a 3-digit octal string
        """
        if (
            not isinstance(text, str)
            or len(text) != 3
            or any(ch not in "01234567" for ch in text)
        ):
            raise InvalidPermissionFormatError(
                f"Expected a 3-digit octal like 755, got: {text!r}"
            )
        mask = 0
        for ch in text:
            mask = (mask << 3) | int(ch)
        return cls(mask)

    def group_bits(self, principal: str) -> int:
        """Return the 3-bit rwx value for 'owner', 'group' or 'other'."""
        shift = (2 - _PRINCIPALS.index(principal)) * 3
        return (self.mask >> shift) & 0o7

    def can(self, principal: str, action: str) -> bool:
        """Check a single flag, e.g. ``can("group", "w")``."""
        bit = 0o4 >> _LETTERS.index(action)
        return bool(self.group_bits(principal) & bit)

    def encode(self) -> str:
        """Render as ``"rwx r-x r--"``."""
        groups: list[str] = []
        for principal in _PRINCIPALS:
            bits = self.group_bits(principal)
            groups.append(
                "".join(
                    letter if bits & (0o4 >> i) else "-"
                    for i, letter in enumerate(_LETTERS)
                )
            )
        return " ".join(groups)

    def to_octal(self) -> str:
        return "".join(str(self.group_bits(p)) for p in _PRINCIPALS)

    def __str__(self) -> str:
        return self.encode()


def encode(permissions: Permissions) -> str:
    return permissions.encode()


def decode_octal(text: str) -> Permissions:
    return Permissions.decode_octal(text)
