import pytest

from react_import_sorter.exceptions import ConfigError
from react_import_sorter.rules import classify_import
from react_import_sorter.rules import merge_priority
from react_import_sorter.rules import Origin
from react_import_sorter.rules import SortBy


@pytest.mark.parametrize("prefixes", [[], ["react"], ["common"]])
def test_react_is_always_framework(prefixes):
    assert classify_import("react", prefixes) is Origin.FRAMEWORK


def test_relative_paths():
    assert classify_import("./setup", []) is Origin.RELATIVE_PATH
    assert classify_import("../pages/settings", ["pages"]) is Origin.RELATIVE_PATH


def test_prefixes_decide_paths_with_slash():
    assert classify_import("common/helpers", ["common"]) is Origin.ALIASED_MODULE
    assert classify_import("lodash/debounce", ["common"]) is Origin.MODULE
    # Without prefixes a path with "/" is taken as an alias
    assert classify_import("@mui/material", []) is Origin.ALIASED_MODULE


def test_prefixes_decide_bare_paths():
    assert classify_import("lodash", []) is Origin.MODULE
    assert classify_import("lodash", ["common"]) is Origin.MODULE
    assert classify_import("common", ["common"]) is Origin.ALIASED_MODULE


def test_classification_is_deterministic():
    results = {classify_import("common/helpers", ["common"]) for _ in range(5)}
    assert results == {Origin.ALIASED_MODULE}


def test_origin_from_name():
    assert Origin.from_name("PATH_MODULES") is Origin.ALIASED_MODULE
    assert Origin.from_name("path_imports") is Origin.RELATIVE_PATH
    assert Origin.from_name("aliased_module") is Origin.ALIASED_MODULE
    with pytest.raises(ConfigError):
        Origin.from_name("VENDOR")


def test_sort_by_from_name():
    assert SortBy.from_name("+size") is SortBy.SHORTER_FIRST
    assert SortBy.from_name("Z-A") is SortBy.DESCENDING
    assert SortBy.from_name(SortBy.NONE) is SortBy.NONE
    assert SortBy.LONGER_FIRST.is_size_based
    assert not SortBy.NONE.is_lexical


def test_merge_priority():
    merged = merge_priority(["PATH_IMPORTS", "REACT", "PATH_IMPORTS"])
    assert merged == [Origin.RELATIVE_PATH, Origin.FRAMEWORK, Origin.MODULE, Origin.ALIASED_MODULE]
    assert merge_priority([]) == list(Origin)
