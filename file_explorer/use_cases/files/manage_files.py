"""
Use case for creating, copying, moving and deleting files and directories.
"""

from file_explorer.entities.result import OperationResult
from file_explorer.use_cases.files.base import FileUseCase


class ManageFilesUseCase(FileUseCase):
    """Use case for mutating filesystem operations."""

    def copy(self, source: str, destination: str) -> OperationResult[None]:
        """
        Copy a file or, recursively, a directory.

        Args:
            source: Path to copy from
            destination: Path to copy to; existing files are overwritten

        Returns:
            OperationResult with no value
        """
        src = self._session.resolve(source)
        dst = self._session.resolve(destination)
        self._logger.info(f"Copying {src} to {dst}")
        return self._run(
            f"copy {src} to {dst}",
            lambda: self._file_repository.copy(src, dst),
        )

    def move(self, source: str, destination: str) -> OperationResult[None]:
        src = self._session.resolve(source)
        dst = self._session.resolve(destination)
        self._logger.info(f"Moving {src} to {dst}")
        return self._run(
            f"move {src} to {dst}",
            lambda: self._file_repository.move(src, dst),
        )

    def remove(self, path: str) -> OperationResult[None]:
        """
        Delete a path, recursively for directories. There is no confirmation.
        """
        target = self._session.resolve(path)
        self._logger.info(f"Removing {target}")
        return self._run(
            f"remove {target}",
            lambda: self._file_repository.remove(target),
        )

    def make_directory(self, path: str) -> OperationResult[None]:
        target = self._session.resolve(path)
        self._logger.info(f"Creating directory {target}")
        return self._run(
            f"create directory {target}",
            lambda: self._file_repository.make_directory(target),
        )

    def make_empty_file(self, path: str) -> OperationResult[None]:
        target = self._session.resolve(path)
        self._logger.info(f"Touching {target}")
        return self._run(
            f"create file {target}",
            lambda: self._file_repository.make_empty_file(target),
        )
