"""
CLI for Oneliners.

Minimal CLI using stdlib argument handling; there are only three commands.

Usage:
    oneliners store "git log --oneline --graph"   # Save a snippet
    oneliners get "git log"                       # Search, pick one, copy it
    oneliners list                                # Show stored snippets
"""

import logging
import sys

from oneliners.errors import ConfigError, HomeDirectoryError, StoreWriteError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

COMMANDS = ("store", "get", "list")


def print_help() -> None:
    """Print help message."""
    print("""oneliners - store and retrieve oneliners

Usage:
    oneliners store <oneliner>    Store a oneliner (skipped if already present)
    oneliners get <search>        Find up to 3 matches and copy one to the clipboard
    oneliners list                List the first 10 stored oneliners

Options:
    oneliners --help, -h          Show this help
    oneliners --version, -v       Show version

Snippets live in ~/.oneliners, one per line.
Settings are read from ~/.config/oneliners/config.toml if it exists.""")


def print_version() -> None:
    """Print version."""
    from oneliners import __version__
    print(f"oneliners {__version__}")


def setup_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level))


def print_numbered(lines: list[str]) -> None:
    for i, line in enumerate(lines, start=1):
        print(f"{i}: {line}")


def read_selection(count: int) -> int | None:
    """
    Prompt for a 1-based choice on stdin.

    Returns None for anything that isn't a plain number in 1..count,
    including EOF. Invalid input is not reported.
    """
    print(f"Select a oneliner (1-{count}):")
    sys.stdout.flush()

    choice = sys.stdin.readline().strip()
    if not (choice.isascii() and choice.isdigit()):
        return None

    try:
        number = int(choice)
    except ValueError:
        # Past the interpreter's int conversion limit
        return None
    if 1 <= number <= count:
        return number
    return None


def cmd_store(text: str, store) -> int:
    """Store a oneliner."""
    from oneliners.store import StoreResult

    try:
        result = store.add(text)
    except StoreWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result is StoreResult.MULTILINE:
        print("Error: That's not a oneliner! Multi-line snippets are not currently supported. You entered:")
        print(text)
    elif result is StoreResult.EMPTY:
        print("Error: Empty oneliner", file=sys.stderr)
    elif result is StoreResult.UNENCODABLE:
        print("Error: That oneliner is not valid UTF-8 and can't be stored.", file=sys.stderr)
    elif result is StoreResult.DUPLICATE:
        print("Snippet already present.")
    else:
        print(f"Snippet stored successfully! [{store.path}]")

    return 0


def cmd_list(store) -> int:
    """List the first stored oneliners in file order."""
    entries = store.entries()

    if entries is None:
        print("No oneliners stored yet.")
        return 0

    if not entries:
        print("No entries found.")
        return 0

    print_numbered(entries)
    return 0


def cmd_get(search: str, store, clipboard, strict: bool = False) -> int:
    """Search oneliners and copy the selected one to the clipboard."""
    matches = store.search(search)

    if matches is None:
        print("No oneliners stored yet.")
        return 0

    if not matches:
        print("No matches found.")
        return 0

    print_numbered(matches)

    choice = read_selection(len(matches))
    if choice is None:
        return 0

    copied = clipboard.copy(matches[choice - 1])
    if not copied:
        logger.debug("Clipboard copy did not succeed")
        if strict:
            print("Error: Failed to copy snippet to clipboard", file=sys.stderr)
            return 1

    print("Snippet copied to clipboard!")
    return 0


def main(argv: list[str] | None = None, clipboard=None) -> int:
    """
    Main entry point.

    The clipboard utility is checked before any argument is looked at, so
    even --help fails without it.
    """
    from oneliners.config import load_config

    args = sys.argv[1:] if argv is None else argv

    try:
        settings = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.logging.level)

    if clipboard is None:
        from oneliners.clipboard import CommandClipboard
        clipboard = CommandClipboard.from_settings(settings.clipboard)

    if not clipboard.is_available():
        print(f"{settings.clipboard.command[0]} is not installed.")
        return 1

    if not args:
        print_help()
        return 0

    command = args[0]

    if command in ("--help", "-h", "help"):
        print_help()
        return 0

    if command in ("--version", "-v", "version"):
        print_version()
        return 0

    if command not in COMMANDS:
        print(f"Error: Unknown command '{command}'\n", file=sys.stderr)
        print_help()
        return 1

    # Join all args (allows: oneliners store ls -la)
    text = " ".join(args[1:])
    if command == "store" and not args[1:]:
        print("Usage: oneliners store <oneliner>", file=sys.stderr)
        return 1
    if command == "get" and not args[1:]:
        print("Usage: oneliners get <search>", file=sys.stderr)
        return 1
    if command == "list" and args[1:]:
        print("Usage: oneliners list", file=sys.stderr)
        return 1

    from oneliners.store import Store

    try:
        store = Store()
    except HomeDirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Using store %s", store.path)

    if command == "store":
        return cmd_store(text, store)

    if command == "get":
        return cmd_get(text, store, clipboard, strict=settings.clipboard.strict)

    return cmd_list(store)


if __name__ == "__main__":
    sys.exit(main())
