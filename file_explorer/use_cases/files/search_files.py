"""
Use case for searching files by name.
"""

from file_explorer.entities.result import OperationResult
from file_explorer.use_cases.files.base import FileUseCase


class SearchFilesUseCase(FileUseCase):
    """Use case for recursive name search."""

    def execute(self, name_fragment: str, start_directory: str = "") -> OperationResult[list[str]]:
        """
        Search for entries whose name contains a fragment.

        Args:
            name_fragment: Case-sensitive substring to look for
            start_directory: Root of the search; empty means the current directory

        Returns:
            OperationResult carrying the full paths of matches
        """
        start = self._session.resolve(start_directory)
        self._logger.info(
            f"Searching for names containing '{name_fragment}' in directory: {start}"
        )
        result = self._run(
            f"search {start}",
            lambda: self._file_repository.search(start, name_fragment),
        )
        if result.ok:
            self._logger.info(
                f"Found {len(result.value or [])} entries matching '{name_fragment}'"
            )
        return result
