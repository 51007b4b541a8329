"""
Use case for listing a directory.
"""

from file_explorer.entities.entry import Entry
from file_explorer.entities.result import OperationResult
from file_explorer.use_cases.files.base import FileUseCase


class ListDirectoryUseCase(FileUseCase):
    """Use case for listing the children of a directory."""

    def execute(self, path: str = "") -> OperationResult[list[Entry]]:
        """
        List a directory.

        Args:
            path: Directory to list; empty lists the current directory

        Returns:
            OperationResult carrying the Entry list in OS order
        """
        directory = self._session.resolve(path)
        self._logger.info(f"Listing directory: {directory}")
        result = self._run(
            f"list {directory}",
            lambda: self._file_repository.list_entries(directory),
        )
        if result.ok:
            self._logger.info(f"Found {len(result.value or [])} entries")
        return result
