#!/usr/bin/env python3
"""
Batch Renaming Tool - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    python main.py                          # GUI mode (default)
    python main.py --cli rule ./dir -r --prefix new_
    python main.py -c ai a.png b.png --prompt "..."
    python main.py -c config set --api-key sk-...
    python main.py -v ...                   # Verbose logging
"""

import logging
import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


LAUNCHER_FLAGS = ("--verbose", "-v", "--cli", "-c")


def split_launcher_flags(args, flags=LAUNCHER_FLAGS):
    """
    Split launcher flags off the front of the argument list

    Only leading flags are taken, so a value such as `--prompt -v`
    reaches the CLI untouched.

    Returns:
        (set of flags found, remaining arguments)
    """
    found = set()
    i = 0
    while i < len(args) and args[i] in flags:
        found.add(args[i])
        i += 1
    return found, list(args[i:])


def main():
    """Main entry point"""
    flags, rest = split_launcher_flags(sys.argv[1:])
    setup_logging(bool(flags & {"--verbose", "-v"}))

    # Check if CLI should be started
    if flags & {"--cli", "-c"}:
        # CLI mode
        from cli import main as cli_main
        return cli_main(rest)

    sys.argv = sys.argv[:1] + rest

    # Default to starting GUI
    try:
        from gui import main as gui_main
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    python main.py --cli")
        print("or  python main.py -c")
        return 1
    return gui_main()


def run_cli():
    """Console script entry that goes straight to the CLI"""
    flags, rest = split_launcher_flags(sys.argv[1:], ("--verbose", "-v"))
    setup_logging(bool(flags))
    from cli import main as cli_main
    return cli_main(rest)


if __name__ == "__main__":
    sys.exit(main())
