"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.entities.session import Session
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.shell.repl import FileExplorerShell
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.manage_files import ManageFilesUseCase
from file_explorer.use_cases.files.navigate import ChangeDirectoryUseCase
from file_explorer.use_cases.files.permissions import PermissionsUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase


class DependencyContainer:
    """Container for managing application dependencies."""

    def __init__(self, start_directory: Optional[str] = None, color: bool = True):
        """
        Initialize the container.

        Args:
            start_directory: Initial session directory; defaults to the process cwd
            color: Whether consoles may emit colors
        """
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        self._start_directory = start_directory
        self._color = color

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_session(self) -> Session:
        if "session" not in self._instances:
            self._instances["session"] = Session(self._start_directory)
        return self._instances["session"]

    def _use_case(self, key: str, cls: type) -> Any:
        if key not in self._instances:
            self._instances[key] = cls(
                self.get_file_repository(), self.get_session(), self._logger
            )
        return self._instances[key]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        return self._use_case("list_directory_use_case", ListDirectoryUseCase)

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._use_case("change_directory_use_case", ChangeDirectoryUseCase)

    def get_manage_files_use_case(self) -> ManageFilesUseCase:
        return self._use_case("manage_files_use_case", ManageFilesUseCase)

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        return self._use_case("search_files_use_case", SearchFilesUseCase)

    def get_permissions_use_case(self) -> PermissionsUseCase:
        return self._use_case("permissions_use_case", PermissionsUseCase)

    def get_shell(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        stdin: Any = None,
    ) -> FileExplorerShell:
        """
        Get the interactive shell with injected use cases.

        Returns:
            Configured FileExplorerShell
        """
        if "shell" not in self._instances:
            no_color = not self._color
            self._instances["shell"] = FileExplorerShell(
                session=self.get_session(),
                list_directory=self.get_list_directory_use_case(),
                change_directory=self.get_change_directory_use_case(),
                manage_files=self.get_manage_files_use_case(),
                search_files=self.get_search_files_use_case(),
                permissions=self.get_permissions_use_case(),
                console=console
                or Console(highlight=False, soft_wrap=True, emoji=False, no_color=no_color),
                error_console=error_console
                or Console(stderr=True, highlight=False, soft_wrap=True, emoji=False, no_color=no_color),
                stdin=stdin,
                logger=self._logger,
            )
        return self._instances["shell"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
