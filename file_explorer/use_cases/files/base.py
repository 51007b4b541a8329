"""
Shared plumbing for filesystem use cases.
"""

import logging
from typing import Callable, Optional, TypeVar

from file_explorer.entities.result import OperationResult
from file_explorer.entities.session import Session
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort

T = TypeVar("T")


class FileUseCase:
    """Base class: holds the repository, the session and the logger."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        session: Session,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            session: Session whose current directory relative paths resolve against
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    def _run(self, action: str, operation: Callable[[], T]) -> OperationResult[T]:
        """
        Run one repository call and fold its outcome into an OperationResult.

        Args:
            action: Human description used in log lines and wrapped errors
            operation: Zero-argument callable performing the work

        Returns:
            Success with the callable's return value, or failure with the error
        """
        try:
            return OperationResult.success(operation())
        except FileRepositoryError as e:
            self._logger.warning(f"{action} failed: {e}")
            return OperationResult.failure(e)
        except Exception as e:
            self._logger.error(f"Unexpected error during {action}: {e}")
            return OperationResult.failure(
                FileRepositoryError(f"Failed to {action}: {str(e)}")
            )
