#!/usr/bin/env python3
"""Core utilities for react-import-sorter. This module
turns raw import statements into structured records, sorts and groups them by
origin and renders them back into canonical import text. It also exposes
helpers to sort the import block of source files in place.
"""
from __future__ import annotations
from dataclasses import dataclass
from dataclasses import field
import logging
import os
from pathlib import Path
import re
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from react_import_sorter.config import read_sorter_config
from react_import_sorter.config import SorterConfig
from react_import_sorter.exceptions import NoMatchError
from react_import_sorter.exceptions import ParseError
from react_import_sorter.parser import extract_imports
from react_import_sorter.parser import find_import_block
from react_import_sorter.rules import classify_import
from react_import_sorter.rules import merge_priority
from react_import_sorter.rules import Origin
from react_import_sorter.rules import SortBy

LOG = logging.getLogger(__name__)

SOURCE_SUFFIXES = ('.js', '.jsx', '.mjs', '.cjs', '.ts', '.tsx')

_IMPORT_KEYWORD = re.compile(r'^import\b')
_PATH_CLAUSE = re.compile(r"""(['"])[^'"]*\1\s*;?$""")
_PATH_NOISE = re.compile(r"""['";]""")
_FROM_KEYWORD = re.compile(r'\bfrom$')
_ALIAS_PREFIX = re.compile(r'^.+\s+as\s+')


def _strip_alias(binding: str) -> str:
    """Resolve "name as alias" to "alias", anything else is returned as is."""
    return _ALIAS_PREFIX.sub('', binding.strip())


@dataclass(frozen=True)
class BindingPair:
    """One entry of a named-binding block.

    ``display_name`` is written back as is, ``compare_name`` is used for sorting.
    For ``useEffect as effect`` these are ``useEffect as effect`` and ``effect``.
    """

    display_name: str
    compare_name: str

    @classmethod
    def from_token(cls, token: str) -> BindingPair:
        display_name = ' '.join(token.split())
        return cls(display_name, _strip_alias(display_name))


@dataclass
class ImportRecord:
    """Structured form of one import statement.

    ``import React as Root, { useState, useEffect as effect } from "react";``
    becomes::

        ImportRecord(
            origin=Origin.FRAMEWORK,
            default_binding='React as Root',
            cleaned_default_binding='Root',
            named_bindings=[
                BindingPair('useState', 'useState'),
                BindingPair('useEffect as effect', 'effect'),
            ],
            path_text='"react";',
            cleaned_path_text='react',
            has_multiline_named_bindings=False,
        )
    """

    origin: Origin
    default_binding: str
    cleaned_default_binding: str
    named_bindings: List[BindingPair]
    path_text: str
    cleaned_path_text: str
    has_multiline_named_bindings: bool = False
    rendered_text: Optional[str] = field(default=None, compare=False)

    @property
    def is_side_effect(self) -> bool:
        """True for ``import "pkg";`` style statements without any binding."""
        return not self.cleaned_default_binding and not self.named_bindings


def _split_bindings(bindings: str, statement: str) -> Tuple[str, str]:
    """Split a binding clause into its default segment and its named segment."""
    brace = bindings.find('{')
    if brace == -1:
        if '}' in bindings:
            raise ParseError("Unbalanced named-binding block", statement)
        default_segment, named_segment = bindings, ''
    else:
        default_segment = bindings[:brace].strip()
        named_segment = bindings[brace:].strip()
        if (not named_segment.endswith('}')
                or named_segment.count('{') != 1
                or named_segment.count('}') != 1):
            raise ParseError("Unterminated named-binding block", statement)
        if default_segment:
            if not default_segment.endswith(','):
                raise ParseError("Default and named bindings must be separated by a comma", statement)
            default_segment = default_segment[:-1].strip()

    if '//' in named_segment or '/*' in named_segment:
        raise ParseError("Comments are not supported inside a named-binding block", statement)
    if ',' in default_segment:
        raise ParseError("More than one default binding", statement)
    return default_segment, named_segment


def transform_import(statement: str, path_prefixes: Sequence[str] = ()) -> ImportRecord:
    """Convert one raw import statement into an ImportRecord.

    Args:
        statement: The import statement as found in the source.
        path_prefixes: Path prefixes treated as project aliases.

    Raises:
        ParseError: If the statement cannot be decomposed.
    """
    body = statement.strip()
    if not _IMPORT_KEYWORD.match(body):
        raise ParseError("Statement does not start with 'import'", statement)
    body = _IMPORT_KEYWORD.sub('', body).strip()

    path_match = _PATH_CLAUSE.search(body)
    if path_match is None:
        raise ParseError("No quoted import path found", statement)
    path_text = path_match.group(0)
    cleaned_path_text = _PATH_NOISE.sub('', path_text).strip()

    bindings = _FROM_KEYWORD.sub('', body[:path_match.start()].strip()).strip()
    default_segment, named_segment = _split_bindings(bindings, statement)

    named_bindings = [
        BindingPair.from_token(token)
        for token in named_segment[1:-1].split(',')
        if token.strip()
    ]
    default_binding = ' '.join(default_segment.split())

    record = ImportRecord(
        origin=classify_import(cleaned_path_text, path_prefixes),
        default_binding=default_binding,
        cleaned_default_binding=_strip_alias(default_binding),
        named_bindings=named_bindings,
        path_text=path_text,
        cleaned_path_text=cleaned_path_text,
        has_multiline_named_bindings='\n' in named_segment,
    )
    LOG.debug(f"Transformed {cleaned_path_text!r} as {record.origin.value} "
              f"with {len(named_bindings)} named bindings")
    return record


def _lexical_key(text: str) -> Tuple[str, str]:
    return text.casefold(), text


def _sort_records(items: List, sort_by: SortBy, text_of: Callable[[object], str]) -> None:
    """Sort items in place, lexically or by length of text_of(item)."""
    if sort_by.is_lexical:
        items.sort(key=lambda item: _lexical_key(text_of(item)),
                   reverse=sort_by is SortBy.DESCENDING)
    elif sort_by.is_size_based:
        items.sort(key=lambda item: len(text_of(item)),
                   reverse=sort_by is SortBy.LONGER_FIRST)


def sort_named_bindings(record: ImportRecord, sort_by: SortBy) -> ImportRecord:
    """Reorder the named bindings of a record.

    Lexical policies compare the alias (or name), size policies compare the
    displayed text. SortBy.NONE keeps the original order.
    """
    if sort_by.is_lexical:
        _sort_records(record.named_bindings, sort_by, lambda b: b.compare_name)
    else:
        _sort_records(record.named_bindings, sort_by, lambda b: b.display_name)
    return record


def render_import(record: ImportRecord, keep_multiline: bool = False) -> str:
    """Regenerate the import statement of a record and store it on the record.

    With keep_multiline, named bindings that spanned several lines are written
    one per line so the layout survives another run.
    """
    default_str = ''
    if record.cleaned_default_binding:
        default_str = f"{record.default_binding}{',' if record.named_bindings else ''} "
    named_str = ''
    if record.named_bindings:
        names = [b.display_name for b in record.named_bindings]
        if keep_multiline and record.has_multiline_named_bindings:
            named_str = "{\n" + ",\n".join(f"  {name}" for name in names) + "\n} "
        else:
            named_str = f"{{ {', '.join(names)} }} "
    # import "xyz" has no from keyword
    from_str = '' if record.is_side_effect else 'from '

    record.rendered_text = f"import {default_str}{named_str}{from_str}{record.path_text}"
    return record.rendered_text


def group_imports(records: Iterable[ImportRecord], priority: Iterable = ()) -> Dict[Origin, List[ImportRecord]]:
    """Partition records by origin, buckets ordered by the merged priority."""
    buckets: Dict[Origin, List[ImportRecord]] = {origin: [] for origin in merge_priority(priority)}
    for record in records:
        buckets[record.origin].append(record)
    return buckets


def sort_by_path(bucket: List[ImportRecord], sort_by: SortBy) -> None:
    """First statement pass: lexical policies on the cleaned import path."""
    if sort_by.is_lexical:
        _sort_records(bucket, sort_by, lambda r: r.cleaned_path_text)


def sort_by_size(bucket: List[ImportRecord], sort_by: SortBy) -> None:
    """Second statement pass: size policies on the rendered statement."""
    if sort_by.is_size_based:
        _sort_records(bucket, sort_by, lambda r: r.rendered_text or render_import(r))


def assemble_imports(buckets: Dict[Origin, List[ImportRecord]], config: SorterConfig) -> str:
    """Join rendered buckets into the replacement text.

    Side-effect imports of every bucket are moved after all other statements.
    """
    separator = '\n\n' if config.separate_by_origin else '\n'
    blocks: List[str] = []
    side_effect_blocks: List[str] = []

    for origin, records in buckets.items():
        lines: List[str] = []
        side_effects: List[str] = []
        for record in records:
            text = record.rendered_text or render_import(record, config.separate_multiline)
            if record.is_side_effect:
                side_effects.append(text)
                continue
            if config.separate_multiline and record.has_multiline_named_bindings and lines:
                lines.append('')
            lines.append(text)

        if lines:
            blocks.append('\n'.join(lines))
        if side_effects:
            side_effect_blocks.append('\n'.join(side_effects))
        LOG.debug(f"{origin.value}: {len(lines)} statements, {len(side_effects)} side-effect imports")

    return separator.join(blocks + side_effect_blocks)


def order_imports(records: List[ImportRecord], config: SorterConfig) -> str:
    """Sort, group and render records into one replacement text."""
    if config.sort_named_bindings:
        for record in records:
            sort_named_bindings(record, config.sort_named_bindings_by)

    buckets = group_imports(records, config.classification_priority)
    for bucket in buckets.values():
        sort_by_path(bucket, config.sort_by)
        # Sizes are only known once every statement is rendered
        for record in bucket:
            render_import(record, config.separate_multiline)
        sort_by_size(bucket, config.sort_by)

    return assemble_imports(buckets, config)


def sort_imports(selected_text: str, config: Optional[SorterConfig] = None) -> str:
    """Return the sorted replacement for the import statements in selected_text.

    Raises:
        NoMatchError: If selected_text contains no import statement.
        ParseError: If any statement cannot be parsed.
    """
    config = config or SorterConfig()
    statements = extract_imports(selected_text)
    if not statements:
        raise NoMatchError()

    records = [transform_import(statement, config.path_prefixes) for statement in statements]
    return order_imports(records, config)


def process_file(file_path: str, config: Optional[SorterConfig] = None, apply: bool = False) -> Tuple[bool, List[Tuple[int, str]]]:
    """Process a single source file, check and fix the order of its leading imports.
    Returns (modified, warnings).

    Raises:
        ParseError: If the import block cannot be parsed, the file is left untouched.
        OSError: If the file cannot be read or written.
    """
    path_obj = Path(file_path)
    source = path_obj.read_text(encoding='utf-8')

    block = find_import_block(source)
    if block is None:
        LOG.debug(f"No import statements found in {file_path}.")
        return False, []

    if config is None:
        config = read_sorter_config(str(path_obj.parent))

    start, end = block
    lineno = source.count('\n', 0, start) + 1
    original = source[start:end]
    replacement = sort_imports(original, config)

    if replacement == original:
        return False, []

    if not apply:
        return True, [(lineno, "Import order/style is incorrect.")]

    path_obj.write_text(source[:start] + replacement + source[end:], encoding='utf-8')
    return True, []


def iter_source_files(root: str, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield JavaScript and TypeScript files under root, skipping node_modules and ignored patterns."""
    ignore_set = set(ignore or [])
    root_path = Path(root)

    def _ignored(path: Path) -> bool:
        return any(str(path).startswith(str(root_path / pattern)) for pattern in ignore_set)

    for dirpath, dirnames, filenames in os.walk(root_path):
        current = Path(dirpath)
        # Prune in place so node_modules is never walked
        dirnames[:] = sorted(
            name for name in dirnames
            if name != 'node_modules' and not _ignored(current / name)
        )
        for name in sorted(filenames):
            path = current / name
            if path.suffix in SOURCE_SUFFIXES and not _ignored(path):
                yield path
