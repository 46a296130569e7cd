"""Rules module for react-import-sorter.

This module defines how import paths are classified into origins and which sort
policies are available for statements and their named bindings.

The four origins are, in their default order:

* ``REACT``: the ``react`` package itself.
* ``MODULES``: packages installed under ``node_modules``, like ``lodash`` or ``@mui/material``.
* ``PATH_MODULES``: aliased project paths such as ``common/helpers``.
* ``PATH_IMPORTS``: relative paths such as ``../pages/settings``.
"""

import enum
from typing import Iterable
from typing import List
from typing import Sequence

from react_import_sorter.exceptions import ConfigError

FRAMEWORK_PACKAGE = 'react'


class _NamedEnum(enum.Enum):

    @classmethod
    def from_name(cls, name):
        """Look up a member by its value or its member name, ignoring case."""
        if isinstance(name, cls):
            return name
        wanted = str(name).strip()
        for member in cls:
            if wanted.lower() in (member.value.lower(), member.name.lower()):
                return member
        choices = ', '.join(member.value for member in cls)
        raise ConfigError(f"Unknown {cls.__name__} '{name}', expected one of: {choices}")


class Origin(_NamedEnum):
    """Where an import comes from."""

    FRAMEWORK = 'REACT'
    MODULE = 'MODULES'
    ALIASED_MODULE = 'PATH_MODULES'
    RELATIVE_PATH = 'PATH_IMPORTS'


class SortBy(_NamedEnum):
    """Sort policy for statements or named bindings."""

    ASCENDING = 'a-z'
    DESCENDING = 'z-a'
    SHORTER_FIRST = '+size'
    LONGER_FIRST = '-size'
    NONE = 'none'

    @property
    def is_lexical(self) -> bool:
        return self in (SortBy.ASCENDING, SortBy.DESCENDING)

    @property
    def is_size_based(self) -> bool:
        return self in (SortBy.SHORTER_FIRST, SortBy.LONGER_FIRST)


def classify_import(clean_path: str, path_prefixes: Sequence[str]) -> Origin:
    """Classify a cleaned import path into an Origin.

    Args:
        clean_path: The import path without quotes or semicolon.
        path_prefixes: First path segments (or whole bare paths) that are
            project aliases rather than node modules.

    Returns:
        The Origin of the path.
    """
    if clean_path == FRAMEWORK_PACKAGE:
        return Origin.FRAMEWORK
    if clean_path.startswith('.'):
        return Origin.RELATIVE_PATH

    # A path with "/" is either a node module like "@mui/material" or an alias
    # like "common/helpers". Configured prefixes decide which one it is.
    if '/' in clean_path:
        if path_prefixes and clean_path.split('/', 1)[0] not in path_prefixes:
            return Origin.MODULE
        return Origin.ALIASED_MODULE

    if path_prefixes and clean_path in path_prefixes:
        return Origin.ALIASED_MODULE
    return Origin.MODULE


def merge_priority(priority: Iterable) -> List[Origin]:
    """Return every Origin once, user priority first then declaration order."""
    merged: List[Origin] = []
    for name in priority:
        origin = Origin.from_name(name)
        if origin not in merged:
            merged.append(origin)
    for origin in Origin:
        if origin not in merged:
            merged.append(origin)
    return merged
