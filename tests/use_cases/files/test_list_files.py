"""
Tests for the ListDirectoryUseCase.
"""

from unittest.mock import MagicMock

from file_explorer.entities.entry import Entry, EntryKind
from file_explorer.entities.session import Session
from file_explorer.exceptions import ErrorKind, PathNotFoundError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_success(self, mock_logger):
        """Test successful execution of list directory use case."""
        # Create mock file repository
        mock_repository = MagicMock(spec=FileRepositoryPort)
        entries = [
            Entry("/test/directory/a.txt", EntryKind.FILE, "rw- r-- r--"),
            Entry("/test/directory/sub", EntryKind.DIR, "rwx r-x r-x"),
        ]
        mock_repository.list_entries.return_value = entries

        use_case = ListDirectoryUseCase(mock_repository, Session("/test"), mock_logger)

        result = use_case.execute("directory")

        # Relative paths resolve against the session
        assert result.ok
        assert result.value == entries
        mock_repository.list_entries.assert_called_once_with("/test/directory")

        mock_logger.info.assert_any_call("Listing directory: /test/directory")
        mock_logger.info.assert_any_call("Found 2 entries")

    def test_execute_defaults_to_current_directory(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.return_value = []

        use_case = ListDirectoryUseCase(mock_repository, Session("/test"), mock_logger)
        result = use_case.execute()

        assert result.ok
        assert result.value == []
        mock_repository.list_entries.assert_called_once_with("/test")
        mock_logger.info.assert_any_call("Found 0 entries")

    def test_execute_repository_error(self, mock_logger):
        """Test execution when repository raises a FileRepositoryError."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = PathNotFoundError(
            "Path does not exist: /nonexistent"
        )

        use_case = ListDirectoryUseCase(mock_repository, Session("/test"), mock_logger)
        result = use_case.execute("/nonexistent")

        assert not result.ok
        assert result.kind is ErrorKind.NOT_FOUND
        assert result.message == "Path does not exist: /nonexistent"
        mock_logger.warning.assert_called_once()
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, mock_logger):
        """Test execution when repository raises an unexpected exception."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = Exception("Unexpected error")

        use_case = ListDirectoryUseCase(mock_repository, Session("/test"), mock_logger)
        result = use_case.execute()

        assert result.kind is ErrorKind.IO_ERROR
        assert result.message == "Failed to list /test: Unexpected error"
        mock_logger.error.assert_called_once_with(
            "Unexpected error during list /test: Unexpected error"
        )

    def test_initialization_without_logger(self):
        """Test use case initialization without providing a logger."""
        mock_repository = MagicMock(spec=FileRepositoryPort)

        use_case = ListDirectoryUseCase(mock_repository, Session("/test"))

        assert use_case._logger is not None
        assert use_case._file_repository == mock_repository
