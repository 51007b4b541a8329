"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import shutil
import tempfile
from pathlib import Path

from typing_extensions import override

from file_explorer.entities.entry import Entry, EntryKind
from file_explorer.entities.permissions import PLACEHOLDER, Permissions
from file_explorer.exceptions import (
    AccessDeniedError,
    CopyError,
    FileRepositoryError,
    MoveError,
    PathExistsError,
    PathNotADirectoryError,
    PathNotFoundError,
)
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _translate(self, error: OSError, message: str) -> FileRepositoryError:
        """
        Convert an OSError into the matching FileRepositoryError.

        Args:
            error: The native error
            message: Context prefix, e.g. "Failed to remove /tmp/x"

        Returns:
            FileRepositoryError subclass carrying the error kind
        """
        detail = f"{message}: {error.strerror or error}"
        if isinstance(error, FileNotFoundError):
            return PathNotFoundError(detail)
        if isinstance(error, NotADirectoryError):
            return PathNotADirectoryError(detail)
        if isinstance(error, FileExistsError):
            return PathExistsError(detail)
        if isinstance(error, PermissionError):
            return AccessDeniedError(detail)
        return FileRepositoryError(detail)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise PathNotFoundError(f"Path does not exist: {directory}")

        if not os.path.isdir(directory):
            raise PathNotADirectoryError(f"Path is not a directory: {directory}")

    def _create_entry(self, dir_entry: os.DirEntry) -> Entry:
        """
        Build an Entry, degrading to UNKNOWN or the placeholder on errors.

        Args:
            dir_entry: Entry yielded by os.scandir

        Returns:
            Entry entity
        """
        is_link = False
        try:
            if dir_entry.is_symlink():
                is_link = True
                kind = EntryKind.OTHER
            elif dir_entry.is_dir(follow_symlinks=False):
                kind = EntryKind.DIR
            elif dir_entry.is_file(follow_symlinks=False):
                kind = EntryKind.FILE
            else:
                kind = EntryKind.OTHER
        except OSError as e:
            self._logger.debug(f"Could not determine type of {dir_entry.path}: {e}")
            kind = EntryKind.UNKNOWN

        try:
            permissions = Permissions.from_mode(os.stat(dir_entry.path).st_mode).encode()
        except OSError as e:
            self._logger.debug(f"Could not read permissions of {dir_entry.path}: {e}")
            permissions = PLACEHOLDER
            if is_link:
                # Dangling link: the target's type cannot be determined
                kind = EntryKind.UNKNOWN

        return Entry(path=dir_entry.path, kind=kind, permissions=permissions)

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the direct children of a directory in OS order.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        self._validate_directory(directory)
        try:
            with os.scandir(directory) as it:
                return [self._create_entry(dir_entry) for dir_entry in it]
        except OSError as e:
            raise self._translate(e, f"Failed to list {directory}")

    @override
    def ensure_directory(self, path: str) -> None:
        self._validate_directory(path)
        if not os.access(path, os.X_OK):
            raise AccessDeniedError(f"Permission denied: {path}")

    def _copy_tree(self, source: str, destination: str) -> None:
        """
        Recursively copy a directory, merging into an existing destination.

        When the destination lies inside the source, the source is first
        copied to a staging directory so that only entries present at call
        time are duplicated.
        """
        src = os.path.abspath(source)
        dst = os.path.abspath(destination)
        if src == dst:
            raise CopyError(f"Source and destination are the same: {src}")

        if os.path.commonpath([src, dst]) == src:
            self._logger.debug(f"Destination {dst} is inside {src}; copying a snapshot")
            with tempfile.TemporaryDirectory() as staging:
                snapshot = os.path.join(staging, "snapshot")
                shutil.copytree(src, snapshot, symlinks=True)
                shutil.copytree(snapshot, dst, symlinks=True, dirs_exist_ok=True)
            return

        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)

    @override
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or directory tree.

        Args:
            source: Existing file or directory
            destination: Target path; parent directories are created for files

        Raises:
            FileRepositoryError: If the source is missing or the copy fails
        """
        if not os.path.exists(source):
            raise PathNotFoundError(f"Source does not exist: {source}")

        try:
            if os.path.isdir(source):
                self._copy_tree(source, destination)
            else:
                parent = os.path.dirname(destination)
                if parent:
                    os.makedirs(parent, exist_ok=True)
                shutil.copy2(source, destination)
        except shutil.SameFileError as e:
            raise CopyError(f"Source and destination are the same: {e}")
        except shutil.Error as e:
            failures = e.args[0] if e.args and isinstance(e.args[0], list) else []
            if not failures:
                raise CopyError(f"Failed to copy {source} to {destination}: {e}")
            _, _, reason = failures[0]
            raise CopyError(
                f"Failed to copy {len(failures)} item(s) from {source} to "
                f"{destination}; first failure: {reason}"
            )
        except OSError as e:
            raise self._translate(e, f"Failed to copy {source} to {destination}")

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            if e.errno == errno.EXDEV:
                reason = "cross-device move is not supported"
            else:
                reason = e.strerror or str(e)
            raise MoveError(f"Failed to move {source} to {destination}: {reason}")

    @override
    def remove(self, path: str) -> None:
        # lexists: a dangling link is still something to delete
        if not os.path.lexists(path):
            raise PathNotFoundError(f"Path does not exist: {path}")

        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as e:
            raise self._translate(e, f"Failed to remove {path}")

    @override
    def make_directory(self, path: str) -> None:
        if os.path.lexists(path):
            raise PathExistsError(f"Already exists: {path}")

        try:
            os.makedirs(path)
        except OSError as e:
            raise self._translate(e, f"Failed to create directory {path}")

    @override
    def make_empty_file(self, path: str) -> None:
        try:
            Path(path).touch(exist_ok=True)
        except OSError as e:
            raise self._translate(e, f"Failed to create file {path}")

    @override
    def search(self, start_directory: str, name_fragment: str) -> list[str]:
        """
        Recursively find entries whose base name contains a fragment.

        Unreadable subdirectories are skipped; only a start directory that
        cannot be opened is an error.

        Args:
            start_directory: Root of the walk
            name_fragment: Case-sensitive substring

        Returns:
            Full paths of matching entries, each directory followed by its subtree

        Raises:
            FileRepositoryError: If the start directory cannot be walked
        """
        self._validate_directory(start_directory)
        try:
            with os.scandir(start_directory) as it:
                children = list(it)
        except OSError as e:
            raise self._translate(e, f"Cannot search {start_directory}")

        matches: list[str] = []
        self._search_entries(children, name_fragment, matches)
        return matches

    def _search_entries(
        self, children: list[os.DirEntry], name_fragment: str, matches: list[str]
    ) -> None:
        for dir_entry in children:
            if name_fragment in dir_entry.name:
                matches.append(dir_entry.path)
            try:
                descend = dir_entry.is_dir(follow_symlinks=False)
            except OSError:
                descend = False
            if not descend:
                continue
            try:
                with os.scandir(dir_entry.path) as it:
                    grandchildren = list(it)
            except OSError as e:
                self._logger.debug(f"Skipping {dir_entry.path}: {e.strerror or e}")
                continue
            self._search_entries(grandchildren, name_fragment, matches)

    @override
    def get_permissions(self, path: str) -> Permissions:
        if not os.path.exists(path):
            raise PathNotFoundError(f"No such file: {path}")

        try:
            return Permissions.from_mode(os.stat(path).st_mode)
        except OSError as e:
            raise self._translate(e, f"Failed to read permissions of {path}")

    @override
    def set_permissions(self, path: str, permissions: Permissions) -> None:
        if not os.path.exists(path):
            raise PathNotFoundError(f"No such file: {path}")

        try:
            os.chmod(path, permissions.mask)
        except OSError as e:
            raise self._translate(e, f"Failed to change permissions of {path}")
