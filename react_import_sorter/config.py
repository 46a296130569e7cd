"""Configuration handling for react-import-sorter."""

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
import json
import logging
from pathlib import Path
import tomllib
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping

from react_import_sorter.exceptions import ConfigError
from react_import_sorter.rules import Origin
from react_import_sorter.rules import SortBy

LOG = logging.getLogger(__name__)

TOOL_NAME = "react-import-sorter"
SETTINGS_PREFIX = "reactImportSorter."

# Option names used in editor settings mapped to SorterConfig fields.
OPTION_NAMES = {
    "sortingOrder": "classification_priority",
    "separateByImportTypes": "separate_by_origin",
    "separateMultilineImports": "separate_multiline",
    "sortBy": "sort_by",
    "sortDestructuredModules": "sort_named_bindings",
    "sortDestructuredModulesBy": "sort_named_bindings_by",
    "pathImportPrefixes": "path_prefixes",
}


@dataclass
class SorterConfig:
    """Snapshot of the options driving one sort invocation."""

    classification_priority: List[Origin] = field(default_factory=list)
    separate_by_origin: bool = True
    separate_multiline: bool = False
    sort_by: SortBy = SortBy.ASCENDING
    sort_named_bindings: bool = True
    sort_named_bindings_by: SortBy = SortBy.ASCENDING
    path_prefixes: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SorterConfig":
        """Build a config from editor style or kebab-case option names.

        Unknown keys are ignored, invalid values raise ConfigError.
        """
        return cls().updated(**_normalize_keys(data))

    def updated(self, **changes: Any) -> "SorterConfig":
        """Return a copy with the given fields replaced and validated."""
        known = {f.name for f in fields(self)}
        values: Dict[str, Any] = {}
        for name, value in changes.items():
            if name not in known:
                raise ConfigError(f"Unknown option '{name}'")
            if value is None:
                continue
            values[name] = _coerce(name, value)
        return replace(self, **values)


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    kebab_names = {_kebab(name): attr for name, attr in OPTION_NAMES.items()}
    options: Dict[str, Any] = {}
    for key, value in data.items():
        key = key[len(SETTINGS_PREFIX):] if key.startswith(SETTINGS_PREFIX) else key
        attr = OPTION_NAMES.get(key) or kebab_names.get(key)
        if attr is None:
            if key.replace("-", "_") in kebab_names.values():
                attr = key.replace("-", "_")
            else:
                LOG.debug(f"Ignoring unknown option '{key}'")
                continue
        options[attr] = value
    return options


def _kebab(name: str) -> str:
    return "".join("-" + c.lower() if c.isupper() else c for c in name)


def _coerce(name: str, value: Any) -> Any:
    if name == "classification_priority":
        if isinstance(value, str):
            value = [value]
        return [Origin.from_name(item) for item in value]
    if name in ("sort_by", "sort_named_bindings_by"):
        return SortBy.from_name(value)
    if name == "path_prefixes":
        if isinstance(value, str):
            value = [value]
        return [str(item).strip() for item in value if str(item).strip()]
    if not isinstance(value, bool):
        raise ConfigError(f"Option '{name}' expects a boolean, got {value!r}")
    return value


def read_sorter_config(root: str) -> SorterConfig:
    """Detect sorter options from pyproject.toml or VS Code settings, or use defaults."""
    root = Path(root)

    toml_path = root / "pyproject.toml"
    if toml_path.exists():
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            LOG.warning(f"Could not read {toml_path}: {e}")
        else:
            section = data.get("tool", {}).get(TOOL_NAME)
            if section is not None:
                LOG.debug(f"Using configuration from {toml_path}")
                return SorterConfig.from_mapping(section)

    settings_path = root / ".vscode" / "settings.json"
    if settings_path.exists():
        try:
            data = json.loads(settings_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            LOG.warning(f"Could not read {settings_path}: {e}")
        else:
            options = {k: v for k, v in data.items() if k.startswith(SETTINGS_PREFIX)}
            if options:
                LOG.debug(f"Using configuration from {settings_path}")
                return SorterConfig.from_mapping(options)

    return SorterConfig()
