"""
Use case for reading and replacing permission bits.
"""

from file_explorer.entities.permissions import Permissions
from file_explorer.entities.result import OperationResult
from file_explorer.use_cases.files.base import FileUseCase


class PermissionsUseCase(FileUseCase):
    """Use case for the perms and chmod commands."""

    def get(self, path: str) -> OperationResult[str]:
        """
        Read the permissions of a path.

        Returns:
            OperationResult carrying the display string, e.g. "rwx r-x r-x"
        """
        target = self._session.resolve(path)
        self._logger.info(f"Reading permissions of {target}")
        return self._run(
            f"read permissions of {target}",
            lambda: self._file_repository.get_permissions(target).encode(),
        )

    def set(self, path: str, octal_text: str) -> OperationResult[Permissions]:
        """
        Replace the permissions of a path.

        A missing path is reported before the octal string is checked; a bad
        octal string is reported before anything is changed.

        Args:
            path: File or directory to change
            octal_text: Three octal digits, e.g. "644"

        Returns:
            OperationResult carrying the applied Permissions
        """
        target = self._session.resolve(path)
        self._logger.info(f"Setting permissions of {target} to {octal_text}")

        def _apply() -> Permissions:
            # Raises NotFound before the format is looked at
            self._file_repository.get_permissions(target)
            permissions = Permissions.decode_octal(octal_text)
            self._file_repository.set_permissions(target, permissions)
            return permissions

        result = self._run(f"change permissions of {target}", _apply)
        if result.ok:
            self._logger.info(f"Permissions of {target} are now {result.value}")
        return result
