#!/usr/bin/env python3
"""
Enable execution of the album_store package as a module.

This allows running the package with: python -m album_store
"""

from .cli.main import main

if __name__ == "__main__":
    main()
