"""Top-level package for react-import-sorter.

This package exposes the core API for sorting and grouping JavaScript import statements.
"""

from react_import_sorter.config import read_sorter_config
from react_import_sorter.config import SorterConfig
from react_import_sorter.core import BindingPair
from react_import_sorter.core import ImportRecord
from react_import_sorter.core import iter_source_files
from react_import_sorter.core import order_imports
from react_import_sorter.core import process_file
from react_import_sorter.core import render_import
from react_import_sorter.core import sort_imports
from react_import_sorter.core import transform_import
from react_import_sorter.exceptions import ConfigError
from react_import_sorter.exceptions import NoMatchError
from react_import_sorter.exceptions import ParseError
from react_import_sorter.exceptions import SorterError
from react_import_sorter.parser import extract_imports
from react_import_sorter.rules import classify_import
from react_import_sorter.rules import Origin
from react_import_sorter.rules import SortBy


__all__ = [
    "extract_imports",
    "classify_import",
    "transform_import",
    "render_import",
    "order_imports",
    "sort_imports",
    "process_file",
    "iter_source_files",
    "read_sorter_config",
    "SorterConfig",
    "BindingPair",
    "ImportRecord",
    "Origin",
    "SortBy",
    "SorterError",
    "NoMatchError",
    "ParseError",
    "ConfigError",
]
