#!/usr/bin/env python3
"""
Album Store - Entry Point Wrapper

Simple wrapper script that runs the package CLI from a source checkout.
"""

import sys

from album_store.cli import main as cli_main


def main():
    """Main entry point that delegates to the package CLI."""
    try:
        cli_main()
    except KeyboardInterrupt:
        sys.exit(130)  # Standard exit code for Ctrl+C


if __name__ == "__main__":
    main()
