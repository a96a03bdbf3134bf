"""
Store module for Oneliners.

One snippet per line in a plain UTF-8 text file. Append-only: there is no
update or delete. No locking either; two concurrent invocations can race on
append.
"""

import logging
from enum import Enum
from pathlib import Path

from oneliners.config import get_store_path
from oneliners.errors import StoreWriteError

logger = logging.getLogger(__name__)

LIST_LIMIT = 10
MATCH_LIMIT = 3


class StoreResult(Enum):
    """Outcome of Store.add."""

    STORED = "stored"
    DUPLICATE = "duplicate"
    MULTILINE = "multiline"
    EMPTY = "empty"
    UNENCODABLE = "unencodable"


def is_oneliner(text: str) -> bool:
    """True if text has no line break (covers both \\n and \\r\\n)."""
    return "\n" not in text


class Store:
    """Newline-delimited snippet file."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_store_path()

    def _read_lines(self) -> list[str] | None:
        """
        Read every line of the store, line terminators removed.

        Returns None if the file can't be opened for any reason (missing,
        unreadable, a directory...). Callers treat that as an empty store.
        Lines that aren't valid UTF-8 are skipped.
        """
        try:
            f = open(self.path, "rb")
        except OSError as e:
            logger.debug("Cannot open %s for reading: %s", self.path, e)
            return None

        lines: list[str] = []
        with f:
            try:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        logger.debug("Skipping undecodable line %d in %s", lineno, self.path)
                        continue
                    lines.append(line.rstrip("\n").rstrip("\r"))
            except OSError as e:
                logger.debug("Read of %s stopped early: %s", self.path, e)
        return lines

    def contains(self, snippet: str) -> bool:
        """Check whether snippet is already stored (compared trimmed)."""
        lines = self._read_lines()
        if lines is None:
            return False

        needle = snippet.strip()
        return any(line.strip() == needle for line in lines)

    def add(self, snippet: str) -> StoreResult:
        """
        Append a snippet unless it is multi-line, blank, not encodable, or
        already present.

        Raises:
            StoreWriteError: if the file can't be opened or written for append.
        """
        if not is_oneliner(snippet):
            return StoreResult.MULTILINE

        if not snippet.strip():
            return StoreResult.EMPTY

        # argv bytes that weren't UTF-8 arrive as lone surrogates
        try:
            snippet.encode("utf-8")
        except UnicodeEncodeError:
            return StoreResult.UNENCODABLE

        if self.contains(snippet):
            logger.debug("Duplicate snippet, not storing: %r", snippet)
            return StoreResult.DUPLICATE

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{snippet}\n")
        except OSError as e:
            raise StoreWriteError(f"Failed to write to {self.path}: {e}") from e

        logger.info("Stored snippet in %s", self.path)
        return StoreResult.STORED

    def entries(self, limit: int = LIST_LIMIT) -> list[str] | None:
        """
        Get the first `limit` non-blank entries in file order, trimmed.

        This is the oldest entries first, not the most recent ones.
        Returns None if the store can't be opened.
        """
        lines = self._read_lines()
        if lines is None:
            return None

        stripped = (line.strip() for line in lines)
        return [line for line in stripped if line][:limit]

    def search(self, term: str, limit: int = MATCH_LIMIT) -> list[str] | None:
        """
        Get the first `limit` non-blank lines containing term.

        Case-sensitive substring match. Lines are returned as stored.
        Returns None if the store can't be opened.
        """
        lines = self._read_lines()
        if lines is None:
            return None

        matches = [line for line in lines if line.strip() and term in line]
        return matches[:limit]
