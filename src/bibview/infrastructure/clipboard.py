from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

SUBPROCESS_TIMEOUT = 5

_LINUX_COMMANDS: list[list[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


class Clipboard(Protocol):
    def set_contents(self, text: str) -> bool: ...


def clipboard_commands(system: str) -> list[tuple[list[str], str]]:
    """Candidate copy commands for ``system`` with the encoding each expects."""
    if system == "Darwin":
        return [(["pbcopy"], "utf-8")]
    if system == "Linux":
        return [(command, "utf-8") for command in _LINUX_COMMANDS]
    if system == "Windows":
        return [(["clip"], "utf-16")]
    return []


class SystemClipboard:
    def __init__(self, system: str | None = None) -> None:
        self.system = system or platform.system()

    def set_contents(self, text: str) -> bool:
        commands = clipboard_commands(self.system)
        if not commands:
            logger.debug("Clipboard copy failed: unsupported platform %s", self.system)
            return False

        for command, encoding in commands:
            if shutil.which(command[0]) is None:
                continue
            try:
                subprocess.run(
                    command,
                    input=text.encode(encoding),
                    check=True,
                    shell=False,
                    timeout=SUBPROCESS_TIMEOUT,
                )
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
                logger.debug("Clipboard copy with %s failed: %s", command[0], exc)
                continue
            return True

        logger.debug("Clipboard copy failed: no working clipboard command")
        return False
