"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from file_explorer.entities.entry import Entry
from file_explorer.entities.permissions import Permissions


class FileRepositoryPort(ABC):
    """Port interface for file repository operations.

    All paths are absolute; resolving user input is the caller's job.
    """

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the direct children of a directory in OS order.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities

        Raises:
            FileRepositoryError: If the directory itself cannot be listed
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: str) -> None:
        """
        Check that a path is an existing directory the process can enter.

        Raises:
            FileRepositoryError: NotFound, NotADirectory or AccessDenied
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file, or a directory tree recursively, overwriting existing files.

        Raises:
            FileRepositoryError: If the source is missing or the copy fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename a path in a single step.

        Raises:
            MoveError: If the rename fails
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """
        Delete a file, or a directory and everything below it.

        Raises:
            FileRepositoryError: If the path is missing or cannot be removed
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create a directory and any missing parents.

        Raises:
            PathExistsError: If anything already exists at the path
        """
        pass

    @abstractmethod
    def make_empty_file(self, path: str) -> None:
        """
        Ensure a file exists without altering existing content.

        Raises:
            FileRepositoryError: If the file cannot be created
        """
        pass

    @abstractmethod
    def search(self, start_directory: str, name_fragment: str) -> list[str]:
        """
        Recursively find entries whose base name contains a fragment.

        Args:
            start_directory: Root of the walk
            name_fragment: Case-sensitive substring to look for

        Returns:
            Full paths of matching entries, in walk order

        Raises:
            FileRepositoryError: If the start directory cannot be walked
        """
        pass

    @abstractmethod
    def get_permissions(self, path: str) -> Permissions:
        """
        Read the rwx bits of a path.

        Raises:
            FileRepositoryError: If the path is missing or cannot be read
        """
        pass

    @abstractmethod
    def set_permissions(self, path: str, permissions: Permissions) -> None:
        """
        Replace the rwx bits of a path with exactly the given set.

        Raises:
            FileRepositoryError: If the path is missing or chmod fails
        """
        pass
