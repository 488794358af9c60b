#!/usr/bin/env python3
"""
Setup script for Album Store package.
"""

import re

from setuptools import setup, find_packages

# Read version metadata from package without importing it
version = {}
with open("album_store/__init__.py") as f:
    for line in f:
        match = re.match(r"^(__version__|__author__) = \"([^\"]*)\"", line)
        if match:
            version[match.group(1)] = match.group(2)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="album-store",
    version=version["__version__"],
    author=version["__author__"],
    description="Typed album repository over PostgreSQL with a CRUD demonstration CLI",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "album-store=album_store.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Database",
    ],
    keywords="postgresql psycopg crud repository albums",
)
