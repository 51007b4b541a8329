"""
Read-eval-print loop dispatching shell commands to the file use cases.
"""

import io
import logging
import sys
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.text import Text

from file_explorer.entities.result import OperationResult
from file_explorer.entities.session import Session
from file_explorer.exceptions import CommandParseError
from file_explorer.shell.commands import (
    BANNER,
    COMMANDS,
    GOODBYE,
    UNKNOWN_COMMAND,
    help_table,
    printable,
    usage_line,
)
from file_explorer.shell.parser import CommandInvocation, parse
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.manage_files import ManageFilesUseCase
from file_explorer.use_cases.files.navigate import ChangeDirectoryUseCase
from file_explorer.use_cases.files.permissions import PermissionsUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase


class FileExplorerShell:
    """
    Interactive shell over one Session.

    Every command failure is printed as ``<command> error: <message>`` on the
    error console and the loop keeps running; only ``exit`` or end of input
    stop it.
    """

    def __init__(
        self,
        session: Session,
        list_directory: ListDirectoryUseCase,
        change_directory: ChangeDirectoryUseCase,
        manage_files: ManageFilesUseCase,
        search_files: SearchFilesUseCase,
        permissions: PermissionsUseCase,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._list_directory = list_directory
        self._change_directory = change_directory
        self._manage_files = manage_files
        self._search_files = search_files
        self._permissions = permissions
        self._console = console or Console(highlight=False, soft_wrap=True, emoji=False)
        self._error_console = error_console or Console(
            stderr=True, highlight=False, soft_wrap=True, emoji=False
        )
        self._stdin = stdin or sys.stdin
        self._logger = logger or logging.getLogger(__name__)
        self._accept_undecodable_input()

        self._handlers: dict[str, Callable[[CommandInvocation], None]] = {
            "ls": self._ls,
            "pwd": self._pwd,
            "cd": self._cd,
            "back": self._back,
            "copy": self._copy,
            "move": self._move,
            "rm": self._rm,
            "mkdir": self._mkdir,
            "touch": self._touch,
            "search": self._search,
            "perms": self._perms,
            "chmod": self._chmod,
            "help": lambda _: self.show_help(),
        }

    # -------- Loop --------

    def run(self) -> int:
        """
        Run until ``exit`` or end of input.

        Returns:
            Process exit code (always 0)
        """
        self._console.print(BANNER, markup=False)
        self.show_help()

        running = True
        while running:
            self._print_prompt()
            line = self._read_line()
            if line is None:
                break
            running = self.execute_line(line)

        self._console.print(GOODBYE, markup=False)
        return 0

    def execute_line(self, line: str) -> bool:
        """
        Parse and dispatch one input line.

        Returns:
            False when the session should end, True otherwise
        """
        if not line:
            return True
        try:
            invocation = parse(line)
        except CommandParseError as e:
            self._report("parse", str(e))
            return True
        if invocation is None:
            return True
        return self.dispatch(invocation)

    def dispatch(self, invocation: CommandInvocation) -> bool:
        spec = COMMANDS.get(invocation.name)
        if spec is None:
            self._console.print(UNKNOWN_COMMAND, markup=False)
            return True
        if len(invocation.args) < spec.min_args:
            self._console.print(usage_line(spec.name), markup=False)
            return True
        if spec.name == "exit":
            return False

        self._logger.debug(f"Dispatching {invocation.name} {list(invocation.args)}")
        try:
            self._handlers[spec.name](invocation)
        except Exception as e:
            self._logger.debug(f"Unexpected error in {spec.name}", exc_info=True)
            self._report(spec.name, str(e))
        return True

    def show_help(self) -> None:
        self._console.print(help_table())

    def _print_prompt(self) -> None:
        current = self._session.current_directory() or "unknown"
        self._console.print(Text(f"\n[{printable(current)}]> "), end="")

    def _accept_undecodable_input(self) -> None:
        """Pass bytes that are not valid text through to paths unchanged."""
        if not isinstance(self._stdin, io.TextIOWrapper):
            return
        try:
            self._stdin.reconfigure(errors="surrogateescape")
        except (io.UnsupportedOperation, ValueError) as e:
            self._logger.debug(f"Input stream keeps strict decoding: {e}")

    def _read_line(self) -> str | None:
        try:
            line = self._stdin.readline()
        except KeyboardInterrupt:
            self._console.print()
            return None
        except UnicodeDecodeError as e:
            self._report("parse", str(e))
            return ""
        if not line:
            # End of input: keep the goodbye off the prompt line
            self._console.print()
            return None
        return line.rstrip("\r\n")

    def _report(self, command: str, message: str) -> None:
        self._error_console.print(Text(printable(f"{command} error: {message}"), style="red"))

    def _check(self, command: str, result: OperationResult) -> bool:
        if not result.ok:
            self._report(command, result.message)
        return result.ok

    # -------- Commands --------

    def _ls(self, inv: CommandInvocation) -> None:
        result = self._list_directory.execute(inv.arg(0))
        if not self._check("ls", result):
            return
        entries = result.value or []
        if not entries:
            self._console.print("(empty)", markup=False)
        for entry in entries:
            style = "bold blue" if entry.is_dir else ""
            self._console.print(Text(printable(entry.format_line()), style=style))

    def _pwd(self, inv: CommandInvocation) -> None:
        current = self._session.current_directory() or "unknown"
        self._console.print(printable(current), markup=False)

    def _cd(self, inv: CommandInvocation) -> None:
        self._check("cd", self._change_directory.execute(inv.arg(0)))

    def _back(self, inv: CommandInvocation) -> None:
        self._check("back", self._change_directory.execute_parent())

    def _copy(self, inv: CommandInvocation) -> None:
        self._check("copy", self._manage_files.copy(inv.arg(0), inv.arg(1)))

    def _move(self, inv: CommandInvocation) -> None:
        self._check("move", self._manage_files.move(inv.arg(0), inv.arg(1)))

    def _rm(self, inv: CommandInvocation) -> None:
        self._check("rm", self._manage_files.remove(inv.arg(0)))

    def _mkdir(self, inv: CommandInvocation) -> None:
        self._check("mkdir", self._manage_files.make_directory(inv.arg(0)))

    def _touch(self, inv: CommandInvocation) -> None:
        self._check("touch", self._manage_files.make_empty_file(inv.arg(0)))

    def _search(self, inv: CommandInvocation) -> None:
        fragment = inv.arg(0)
        result = self._search_files.execute(fragment, inv.arg(1))
        if not self._check("search", result):
            return
        matches = result.value or []
        if not matches:
            self._console.print(printable(f"No matches for '{fragment}'."), markup=False)
        for path in matches:
            self._console.print(printable(f"Found: {path}"), markup=False)

    def _perms(self, inv: CommandInvocation) -> None:
        result = self._permissions.get(inv.arg(0))
        if self._check("perms", result):
            self._console.print(f"Permissions: {result.value}", markup=False)

    def _chmod(self, inv: CommandInvocation) -> None:
        self._check("chmod", self._permissions.set(inv.arg(0), inv.arg(1)))
