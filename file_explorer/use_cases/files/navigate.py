"""
Use case for moving the session between directories.
"""

from file_explorer.entities.result import OperationResult
from file_explorer.exceptions import PathNotFoundError
from file_explorer.use_cases.files.base import FileUseCase


class ChangeDirectoryUseCase(FileUseCase):
    """Use case for changing the session's current directory."""

    def execute(self, path: str = "") -> OperationResult[str]:
        """
        Change to a directory.

        The session is only updated once the target has been validated, so a
        failure leaves the current directory untouched.

        Args:
            path: Relative or absolute directory; empty is a no-op

        Returns:
            OperationResult carrying the new current directory
        """
        if not path:
            return OperationResult.success(self._session.cwd)

        target = self._session.resolve(path)
        self._logger.info(f"Changing directory to: {target}")
        result = self._run(
            f"change directory to {target}",
            lambda: self._file_repository.ensure_directory(target),
        )
        if not result.ok:
            return OperationResult.failure(result.error)  # type: ignore[arg-type]

        self._session.move_to(target)
        return OperationResult.success(self._session.cwd)

    def execute_parent(self) -> OperationResult[str]:
        """Change to the parent of the current directory."""
        parent = self._session.parent()
        if parent is None:
            return OperationResult.failure(
                PathNotFoundError(f"No parent directory: {self._session.cwd}")
            )
        return self.execute(parent)
