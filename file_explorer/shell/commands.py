"""
Static command reference for the shell.
"""

from dataclasses import dataclass

from rich import box
from rich.table import Table
from rich.text import Text

BANNER = "Simple File Explorer. Type 'help' for commands."
UNKNOWN_COMMAND = "Unknown command. Type 'help' for list of commands."
GOODBYE = "Goodbye."


@dataclass(frozen=True)
class CommandSpec:
    name: str
    usage: str
    min_args: int
    description: str


COMMANDS: dict[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec("ls", "ls [path]", 0, "List directory (current dir if omitted)"),
        CommandSpec("pwd", "pwd", 0, "Show current directory"),
        CommandSpec("cd", "cd <dir>", 1, "Change directory (relative or absolute)"),
        CommandSpec("back", "back", 0, "Go to parent directory"),
        CommandSpec("copy", "copy <src> <dest>", 2, "Copy file/directory (recursive)"),
        CommandSpec("move", "move <src> <dest>", 2, "Move (rename) file/directory"),
        CommandSpec("rm", "rm <path>", 1, "Delete file or directory (recursive)"),
        CommandSpec("mkdir", "mkdir <dir>", 1, "Create directory"),
        CommandSpec("touch", "touch <file>", 1, "Create empty file (like touch)"),
        CommandSpec(
            "search",
            "search <name> [start_dir]",
            1,
            "Recursively search for filename (or partial match)",
        ),
        CommandSpec("perms", "perms <path>", 1, "Show owner/group/others rwx permissions"),
        CommandSpec(
            "chmod",
            "chmod <path> <3-digit-octal>",
            2,
            "Set permissions using octal (e.g. 755)",
        ),
        CommandSpec("help", "help", 0, "Show this help"),
        CommandSpec("exit", "exit", 0, "Exit program"),
    )
}


def usage_line(name: str) -> str:
    return f"Usage: {COMMANDS[name].usage}"


def help_table() -> Table:
    tbl = Table(title="Commands", box=box.MINIMAL_DOUBLE_HEAD)
    tbl.add_column("Command", style="cyan", no_wrap=True)
    tbl.add_column("Description")
    for spec in COMMANDS.values():
        # Text, not markup: usages contain brackets such as "[path]"
        tbl.add_row(Text(spec.usage), Text(spec.description))
    return tbl


def printable(text: str) -> str:
    """
    Render text that may hold undecodable filename bytes.

    ``os`` functions hand such bytes back as lone surrogates, which a UTF-8
    terminal stream refuses to write. They are shown as ``\\xNN`` escapes.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")
