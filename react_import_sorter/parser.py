"""Parser module for react-import-sorter.

This module provides functions to extract import statements from JavaScript and
TypeScript source text.
"""

import logging
import re
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

LOG = logging.getLogger(__name__)

# Matches following patterns, a statement starts a line or follows a ';'
#   import "package"
#   import * as xyz from "package"
#   import Default from "package"
#   import Default, { module } from "package"
#   import { module, other as alias } from "package"
#   import Default, {
#       multilineModule1,
#       multilineModule2
#   } from "package"
IMPORT_PATTERN = re.compile(
    r"""
    (?:^|(?<=;))[ \t]*
    (?P<statement>
        import\b\s*
        (?:
            (?P<default>\*\s*as\s+[\w$]+|[\w$]+(?:\s+as\s+[\w$]+)?)
            (?:\s*,\s*(?P<named>\{[^{}'";]*\}))?
          | (?P<named_only>\{[^{}'";]*\})
        )?
        \s*(?:\bfrom\b\s*)?
        (?P<path>(?P<quote>['"])[^'"\n]*(?P=quote);?)
    )
    """,
    re.MULTILINE | re.VERBOSE,
)


def iter_import_matches(text: str) -> Iterator[re.Match]:
    """Yield a match object for every import statement found in text."""
    return IMPORT_PATTERN.finditer(text)


def extract_imports(text: str) -> List[str]:
    """Return the import statements found in text, in order of appearance.

    Text that does not look like an import statement is discarded. An empty list
    is returned when nothing matches.
    """
    imports = [match.group('statement') for match in iter_import_matches(text)]
    LOG.debug(f"Extracted {len(imports)} import statements")
    return imports


def find_import_block(text: str) -> Optional[Tuple[int, int]]:
    """Find the character span of the leading contiguous run of import statements.

    Statements belong to the same block as long as only whitespace separates them.
    """
    start: Optional[int] = None
    end: Optional[int] = None

    for match in iter_import_matches(text):
        if start is None:
            start = match.start('statement')
        elif text[end:match.start('statement')].strip():
            break
        end = match.end('statement')

    return (start, end) if start is not None and end is not None else None


def extract_imports_from_file(file_path: str) -> List[str]:
    """Read a source file and return its import statements.

    Args:
        file_path: Path to the JavaScript or TypeScript source file.

    Returns:
        A list of raw import statement strings.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        source = f.read()

    return extract_imports(source)
