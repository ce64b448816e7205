"""Native file dialogs through zenity or kdialog."""

from __future__ import annotations

import shutil
import subprocess

from .log import get_logger


def is_command_available(command: str) -> bool:
    """Return whether ``command`` can be found on the search path."""
    return shutil.which(command) is not None


def run_dialog(command) -> str:
    """Run ``command`` and return its output without one trailing newline.

    A string is run through the shell; a list is run directly. If the
    program cannot be started, an empty string is returned.
    """
    try:
        completed = subprocess.run(
            command,
            shell=isinstance(command, str),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError:
        return ""
    output = completed.stdout or ""
    if output.endswith("\n"):
        output = output[:-1]
    return output


def open_file(file_filter: str) -> str:
    """Ask the user for a file to open; return its path or an empty string."""
    if is_command_available("zenity"):
        return run_dialog([
            "zenity", "--file-selection", "--title=Open File",
            f"--file-filter={file_filter}",
        ])
    if is_command_available("kdialog"):
        return run_dialog(["kdialog", "--getopenfilename", ".", file_filter])
    get_logger().warning("Cant open file dialog, please install zenity or kdialog.")
    return ""


def save_file(file_filter: str) -> str:
    """Ask the user for a file to save to; return its path or an empty string."""
    if is_command_available("zenity"):
        return run_dialog([
            "zenity", "--file-selection", "--save", "--confirm-overwrite",
            "--title=Save File", f"--file-filter={file_filter}",
        ])
    if is_command_available("kdialog"):
        return run_dialog(["kdialog", "--getsavefilename", ".", file_filter])
    get_logger().warning("Cant open save dialog, please install zenity or kdialog.")
    return ""