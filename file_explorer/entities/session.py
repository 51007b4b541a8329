"""
Session state: the shell's current directory.
"""

import os


class Session:
    """
    Holds the current directory of one shell session.

    The directory is tracked here rather than through ``os.chdir`` so the
    shell never changes the process working directory. Only the navigation
    use case should call ``move_to``; it validates the target first.
    """

    def __init__(self, start_directory: str | None = None):
        self._cwd = os.path.abspath(start_directory or os.getcwd())

    @property
    def cwd(self) -> str:
        return self._cwd

    def resolve(self, path: str) -> str:
        """
        Resolve a user-supplied path against the current directory.

        A ``..`` component steps out of whatever the preceding path really
        is, so ``link/..`` lands in the parent of the link's target. The
        components after the last ``..`` are kept as typed, which leaves a
        trailing link unresolved for ``rm`` and ``move``.

        Args:
            path: Relative or absolute path; empty means the current directory

        Returns:
            Normalized absolute path
        """
        if not path:
            return self._cwd
        parts = os.path.join(self._cwd, path).split(os.sep)
        if os.pardir not in parts:
            return os.path.normpath(os.sep.join(parts))
        last = len(parts) - 1 - parts[::-1].index(os.pardir)
        head = os.path.realpath(os.sep.join(parts[: last + 1]))
        return os.path.normpath(os.path.join(head, *parts[last + 1 :]))

    def parent(self) -> str | None:
        """Parent of the current directory, or None at the filesystem root."""
        parent = os.path.dirname(self._cwd)
        if parent == self._cwd:
            return None
        return parent

    def current_directory(self) -> str | None:
        """The current directory, or None if it no longer exists."""
        if os.path.isdir(self._cwd):
            return self._cwd
        return None

    def move_to(self, directory: str) -> None:
        self._cwd = os.path.abspath(directory)

    def __repr__(self) -> str:
        return f"Session(cwd='{self._cwd}')"
