"""
Clipboard bridge for Oneliners.

Pipes text into an external clipboard utility (xclip by default).
"""

import logging
import shutil
import subprocess
from typing import Protocol

from oneliners.config import ClipboardSettings

logger = logging.getLogger(__name__)


class ClipboardSink(Protocol):
    """Anything that can put text on the clipboard."""

    def is_available(self) -> bool: ...

    def copy(self, text: str) -> bool: ...


class CommandClipboard:
    """
    Clipboard backed by a command that reads the selection from stdin.

    In the default (lenient) mode copying is fire-and-forget: the child is
    not waited on, and copy() only reports whether the spawn and write went
    through. In strict mode the child must exit 0 within `timeout` seconds.
    """

    def __init__(
        self,
        command: list[str],
        strict: bool = False,
        timeout: float = 5.0,
    ):
        self.command = list(command)
        self.strict = strict
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: ClipboardSettings) -> "CommandClipboard":
        return cls(settings.command, strict=settings.strict, timeout=settings.timeout)

    @property
    def program(self) -> str:
        return self.command[0]

    def is_available(self) -> bool:
        """Check the utility is on PATH."""
        return shutil.which(self.program) is not None

    def copy(self, text: str) -> bool:
        """Write text to the utility's stdin. Returns True on success."""
        try:
            proc = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.debug("Could not start %s: %s", self.program, e)
            return False

        try:
            proc.stdin.write(text.encode("utf-8"))
            proc.stdin.close()
        except OSError as e:
            logger.debug("Could not write to %s: %s", self.program, e)
            return False

        if not self.strict:
            # Left running unreaped; xclip keeps serving the selection
            return True

        try:
            returncode = proc.wait(timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.warning("%s did not exit within %.1fs", self.program, self.timeout)
            proc.kill()
            proc.wait()
            return False

        if returncode != 0:
            logger.warning("%s exited with status %d", self.program, returncode)
            return False
        return True
