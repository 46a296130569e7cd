#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="react-import-sorter",
    version="0.1.0",
    packages=["react_import_sorter"],
    python_requires=">=3.11",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ris = react_import_sorter.cli:main",
        ],
    },
    author="",
    description="Command-line tool to sort and group JavaScript and TypeScript import statements",
    license="MIT",
)
