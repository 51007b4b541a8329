"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
import pytest
from unittest.mock import MagicMock

from rich.console import Console

from file_explorer.container import DependencyContainer
from file_explorer.entities.session import Session


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def empty_directory():
    """
    Create an empty temporary directory.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    """Session starting in the populated temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def dependency_container(mock_logger, empty_directory):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger, rooted in an empty directory
    """
    container = DependencyContainer(start_directory=empty_directory, color=False)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


def _buffer_console(buffer: io.StringIO) -> Console:
    return Console(
        file=buffer,
        force_terminal=False,
        color_system=None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        width=200,
    )


@pytest.fixture
def run_shell(dependency_container):
    """
    Run a shell session over scripted input.

    Returns:
        Callable taking input lines and returning (stdout, stderr, exit_code)
    """

    def _run(lines: list[str]) -> tuple[str, str, int]:
        # Fresh shell per run; the session is shared
        dependency_container._instances.pop("shell", None)
        out, err = io.StringIO(), io.StringIO()
        text = "\n".join(lines) + ("\n" if lines else "")
        shell = dependency_container.get_shell(
            console=_buffer_console(out),
            error_console=_buffer_console(err),
            stdin=io.StringIO(text),
        )
        code = shell.run()
        return out.getvalue(), err.getvalue(), code

    return _run
